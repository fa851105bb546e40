"""Domain Models 单元测试

测试内容：
1. 枚举序列化/反序列化
2. Task 序列化字段名（camelCase 时间戳）
3. TaskPage 结构
"""

from datetime import UTC, datetime

import pytest
from pydantic import ValidationError
from taskboard.core.models import INITIAL_STATUS, Task, TaskPage, TaskStatus


def _make_task(**overrides) -> Task:
    now = datetime(2024, 1, 1, tzinfo=UTC)
    fields = {
        "id": "01HQ0000000000000000000000",
        "title": "Buy milk",
        "description": "2% milk",
        "created_at": now,
        "updated_at": now,
    }
    fields.update(overrides)
    return Task(**fields)


class TestEnums:
    """枚举序列化/反序列化测试"""

    def test_task_status_values(self):
        """TaskStatus 枚举值正确"""
        assert TaskStatus.PENDING == "PENDING"
        assert TaskStatus.IN_PROGRESS == "IN_PROGRESS"
        assert TaskStatus.COMPLETED == "COMPLETED"
        assert len(TaskStatus) == 3

    def test_task_status_from_string(self):
        """字符串可转换为 TaskStatus"""
        assert TaskStatus("IN_PROGRESS") == TaskStatus.IN_PROGRESS

    def test_unknown_status_rejected(self):
        with pytest.raises(ValueError):
            TaskStatus("DONE")

    def test_initial_status_is_pending(self):
        assert INITIAL_STATUS == TaskStatus.PENDING


class TestTaskModel:
    """Task 模型测试"""

    def test_default_status(self):
        """未指定状态时默认 PENDING"""
        assert _make_task().status == TaskStatus.PENDING

    def test_invalid_status_rejected(self):
        with pytest.raises(ValidationError):
            _make_task(status="ARCHIVED")

    def test_json_uses_camel_case_timestamps(self):
        """JSON 输出使用 createdAt / updatedAt"""
        data = _make_task().model_dump(mode="json", by_alias=True)
        assert set(data) == {
            "id",
            "title",
            "description",
            "status",
            "createdAt",
            "updatedAt",
        }
        assert data["status"] == "PENDING"
        assert data["createdAt"].startswith("2024-01-01T00:00:00")

    def test_python_dump_keeps_snake_case(self):
        data = _make_task().model_dump()
        assert "created_at" in data
        assert "updated_at" in data


class TestTaskPage:
    def test_empty_page(self):
        page = TaskPage(total=0, page=1, limit=10)
        assert page.data == []

    def test_serialized_tasks_use_aliases(self):
        page = TaskPage(total=1, page=1, limit=10, data=[_make_task()])
        data = page.model_dump(mode="json", by_alias=True)
        assert data["total"] == 1
        assert "createdAt" in data["data"][0]
