"""Taskboard 异常体系

只建模两类错误：校验失败（400）与任务不存在（404）。
其余异常视为缺陷，直接向上传播。
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .validation import FieldError


class TaskboardError(Exception):
    """Taskboard 基础异常"""


class TaskNotFoundError(TaskboardError):
    """引用的 task_id 不存在"""

    def __init__(self, task_id: str) -> None:
        super().__init__(f"Task not found: {task_id}")
        self.task_id = task_id


class TaskValidationError(TaskboardError):
    """请求字段格式或取值非法"""

    def __init__(self, errors: list["FieldError"]) -> None:
        """
        Args:
            errors: 字段错误列表（至少一项）
        """
        self.errors = errors
        super().__init__(self.summary)

    @property
    def summary(self) -> str:
        """首个字段错误的可读描述"""
        if not self.errors:
            return "Invalid request"
        first = self.errors[0]
        return f"{first.field}: {first.message}"
