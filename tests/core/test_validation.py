"""请求校验单元测试

测试内容：
1. 创建请求：必填、长度、未知字段
2. 更新请求：至少一个字段、status 枚举、null 拒绝
3. 列表查询：默认值、数字解析、非正数拒绝
"""

import pytest
from taskboard.core.config import DEFAULT_PAGE_LIMIT, MAX_PAGE_LIMIT
from taskboard.core.exceptions import TaskValidationError
from taskboard.core.models import TaskStatus
from taskboard.core.validation import (
    FieldError,
    ValidationResult,
    format_location,
    validate_create_task,
    validate_list_query,
    validate_update_task,
)


def _fields(result: ValidationResult) -> set[str]:
    return {e.field for e in result.errors}


class TestValidateCreate:
    def test_valid_payload(self):
        result = validate_create_task({"title": "Buy milk", "description": "2% milk"})
        assert result.ok
        assert result.data == {"title": "Buy milk", "description": "2% milk"}

    def test_missing_fields(self):
        result = validate_create_task({})
        assert not result.ok
        assert _fields(result) == {"title", "description"}

    @pytest.mark.parametrize(
        "title",
        ["ab", "x" * 51],
    )
    def test_title_length_bounds(self, title: str):
        result = validate_create_task({"title": title, "description": "valid"})
        assert _fields(result) == {"title"}

    def test_title_length_edges_accepted(self):
        assert validate_create_task({"title": "abc", "description": "abc"}).ok
        assert validate_create_task({"title": "x" * 50, "description": "y" * 255}).ok

    def test_description_too_long(self):
        result = validate_create_task({"title": "valid", "description": "y" * 256})
        assert _fields(result) == {"description"}

    def test_non_string_title_rejected(self):
        result = validate_create_task({"title": 12345, "description": "valid"})
        assert _fields(result) == {"title"}

    def test_unknown_field_rejected(self):
        """创建时不接受 status 等额外字段"""
        result = validate_create_task(
            {"title": "valid", "description": "valid", "status": "COMPLETED"}
        )
        assert _fields(result) == {"status"}

    def test_non_object_body(self):
        result = validate_create_task(["title", "description"])
        assert not result.ok
        assert result.errors[0].field == "body"


class TestValidateUpdate:
    def test_only_provided_fields_returned(self):
        result = validate_update_task({"status": "COMPLETED"})
        assert result.ok
        assert result.data == {"status": TaskStatus.COMPLETED}

    def test_all_fields(self):
        result = validate_update_task(
            {"title": "New title", "description": "New desc", "status": "IN_PROGRESS"}
        )
        assert result.ok
        assert set(result.data) == {"title", "description", "status"}

    def test_empty_body_rejected(self):
        result = validate_update_task({})
        assert not result.ok
        assert result.errors[0].field == "body"
        assert "at least one field" in result.errors[0].message

    def test_invalid_status(self):
        result = validate_update_task({"status": "DONE"})
        assert _fields(result) == {"status"}

    def test_null_rejected(self):
        result = validate_update_task({"title": None})
        assert _fields(result) == {"title"}

    def test_short_title(self):
        result = validate_update_task({"title": "ab"})
        assert _fields(result) == {"title"}

    def test_immutable_fields_rejected(self):
        result = validate_update_task({"id": "abc", "createdAt": "2024-01-01"})
        assert _fields(result) == {"id", "createdAt"}


class TestValidateListQuery:
    def test_defaults(self):
        result = validate_list_query({})
        assert result.ok
        assert result.data == {
            "status": None,
            "title": None,
            "page": 1,
            "limit": DEFAULT_PAGE_LIMIT,
        }

    def test_numeric_strings_parsed(self):
        result = validate_list_query({"page": "3", "limit": "25", "status": "PENDING"})
        assert result.ok
        assert result.data["page"] == 3
        assert result.data["limit"] == 25
        assert result.data["status"] == TaskStatus.PENDING

    def test_empty_values_treated_as_absent(self):
        result = validate_list_query({"status": "", "title": "", "page": None})
        assert result.ok
        assert result.data["status"] is None
        assert result.data["page"] == 1

    @pytest.mark.parametrize(
        "params,field",
        [
            ({"page": "0"}, "page"),
            ({"page": "-2"}, "page"),
            ({"page": "abc"}, "page"),
            ({"limit": "0"}, "limit"),
            ({"limit": "1.5"}, "limit"),
            ({"limit": str(MAX_PAGE_LIMIT + 1)}, "limit"),
            ({"status": "archived"}, "status"),
        ],
    )
    def test_invalid_values_rejected(self, params: dict, field: str):
        result = validate_list_query(params)
        assert _fields(result) == {field}

    def test_max_limit_accepted(self):
        assert validate_list_query({"limit": str(MAX_PAGE_LIMIT)}).ok


class TestValidationResult:
    def test_raise_for_errors_returns_data(self):
        result = ValidationResult(data={"a": 1})
        assert result.raise_for_errors() == {"a": 1}

    def test_raise_for_errors_raises(self):
        result = ValidationResult(errors=[FieldError(field="title", message="too short")])
        with pytest.raises(TaskValidationError) as exc_info:
            result.raise_for_errors()
        assert exc_info.value.summary == "title: too short"
        assert exc_info.value.errors == result.errors

    def test_format_location(self):
        assert format_location(()) == "body"
        assert format_location(("body", "title")) == "body.title"
        assert format_location(("items", 0)) == "items.0"
