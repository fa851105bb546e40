"""Taskboard Core Domain Models -- 公共类型导出

所有公共模型类型从此入口导入。
"""

from .enums import INITIAL_STATUS, TaskStatus
from .task import Task, TaskPage

__all__ = [
    # 枚举
    "TaskStatus",
    "INITIAL_STATUS",
    # Task
    "Task",
    "TaskPage",
]
