"""请求校验 -- 每个操作一个显式校验函数

校验与 Store 解耦：Store 不做任何长度/取值校验，
调用方在进入 Store 之前通过本模块得到结构化结果（ok | 字段错误列表）。

基于 Pydantic 请求模型实现，Pydantic 的错误被转换为 FieldError。
"""

from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

from .config import (
    DEFAULT_PAGE,
    DEFAULT_PAGE_LIMIT,
    DESCRIPTION_MAX_LENGTH,
    DESCRIPTION_MIN_LENGTH,
    MAX_PAGE_LIMIT,
    TITLE_MAX_LENGTH,
    TITLE_MIN_LENGTH,
)
from .exceptions import TaskValidationError
from .models.enums import TaskStatus


class FieldError(BaseModel):
    """单个字段的校验错误"""

    field: str = Field(description="字段位置，整体错误为 body")
    message: str = Field(description="可读错误描述")


class ValidationResult(BaseModel):
    """校验结果

    ok 时 data 为规范化后的字段（仅包含调用方提供的字段及默认值），
    否则 errors 至少包含一项。
    """

    data: dict[str, Any] = Field(default_factory=dict)
    errors: list[FieldError] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    def raise_for_errors(self) -> dict[str, Any]:
        """校验失败时抛出 TaskValidationError，否则返回 data"""
        if self.errors:
            raise TaskValidationError(self.errors)
        return self.data


class TaskCreateRequest(BaseModel):
    """创建任务请求体"""

    model_config = ConfigDict(extra="forbid")

    title: str = Field(
        min_length=TITLE_MIN_LENGTH,
        max_length=TITLE_MAX_LENGTH,
        description="任务标题",
    )
    description: str = Field(
        min_length=DESCRIPTION_MIN_LENGTH,
        max_length=DESCRIPTION_MAX_LENGTH,
        description="任务描述",
    )


class TaskUpdateRequest(BaseModel):
    """更新任务请求体 -- 至少提供一个字段"""

    model_config = ConfigDict(extra="forbid")

    title: str | None = Field(
        default=None,
        min_length=TITLE_MIN_LENGTH,
        max_length=TITLE_MAX_LENGTH,
        description="任务标题",
    )
    description: str | None = Field(
        default=None,
        min_length=DESCRIPTION_MIN_LENGTH,
        max_length=DESCRIPTION_MAX_LENGTH,
        description="任务描述",
    )
    status: TaskStatus | None = Field(default=None, description="任务状态")

    @field_validator("title", "description", "status", mode="before")
    @classmethod
    def _reject_null(cls, value: Any) -> Any:
        # 显式传 null 视为非法，未传字段不会进入此校验
        if value is None:
            raise ValueError("must not be null")
        return value

    @model_validator(mode="after")
    def _require_one_field(self) -> "TaskUpdateRequest":
        if not self.model_fields_set:
            raise ValueError("at least one field must be provided")
        return self


class TaskListQuery(BaseModel):
    """列表查询参数

    page/limit 非数字或非正数一律拒绝，不做截断或回退。
    """

    model_config = ConfigDict(extra="ignore")

    status: TaskStatus | None = Field(default=None, description="按状态筛选")
    title: str | None = Field(default=None, description="按标题子串筛选（不区分大小写）")
    page: int = Field(default=DEFAULT_PAGE, ge=1, description="页码")
    limit: int = Field(
        default=DEFAULT_PAGE_LIMIT, ge=1, le=MAX_PAGE_LIMIT, description="每页条数"
    )


def format_location(loc: Iterable[Any]) -> str:
    """将 Pydantic 错误位置转换为点分字段名"""
    return ".".join(str(part) for part in loc) or "body"


def to_field_errors(errors: Iterable[Mapping[str, Any]]) -> list[FieldError]:
    """将 Pydantic 风格的错误列表转换为 FieldError 列表"""
    return [
        FieldError(field=format_location(err.get("loc", ())), message=err["msg"])
        for err in errors
    ]


def _validate(model: type[BaseModel], payload: Any, **dump_kwargs: Any) -> ValidationResult:
    try:
        parsed = model.model_validate(payload)
    except ValidationError as e:
        return ValidationResult(errors=to_field_errors(e.errors()))
    return ValidationResult(data=parsed.model_dump(**dump_kwargs))


def validate_create_task(payload: Any) -> ValidationResult:
    """校验创建任务请求体

    Args:
        payload: 已解码的 JSON 请求体

    Returns:
        ValidationResult，ok 时 data 含 title/description
    """
    return _validate(TaskCreateRequest, payload)


def validate_update_task(payload: Any) -> ValidationResult:
    """校验更新任务请求体

    Args:
        payload: 已解码的 JSON 请求体

    Returns:
        ValidationResult，ok 时 data 仅含调用方提供的字段
    """
    return _validate(TaskUpdateRequest, payload, exclude_unset=True)


def validate_list_query(params: Mapping[str, Any]) -> ValidationResult:
    """校验列表查询参数

    空字符串与 None 视为未提供。

    Args:
        params: 原始查询参数（字符串值）

    Returns:
        ValidationResult，ok 时 data 含 status/title/page/limit
    """
    cleaned = {k: v for k, v in params.items() if v is not None and v != ""}
    return _validate(TaskListQuery, cleaned)
