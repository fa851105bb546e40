"""枚举定义

TaskStatus 是封闭的三值枚举，Store 不会自动流转状态，
所有状态变更都由调用方通过 update 显式指定。
"""

from enum import StrEnum


class TaskStatus(StrEnum):
    """Task 状态"""

    PENDING = "PENDING"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"


# 新建任务的初始状态（忽略调用方输入）
INITIAL_STATUS: TaskStatus = TaskStatus.PENDING
