"""Taskboard Core Store -- 内存持久化实现

提供工厂函数创建应用级唯一的 Store 实例。
"""

from .protocols import TaskStore
from .task_store import UPDATABLE_FIELDS, InMemoryTaskStore


def create_task_store() -> InMemoryTaskStore:
    """创建 Store 实例

    每个应用只应创建一个实例并通过依赖注入传递给请求处理器，
    所有访问经由该实例内部的锁串行化。

    Returns:
        InMemoryTaskStore 实例
    """
    return InMemoryTaskStore()


__all__ = [
    "TaskStore",
    "InMemoryTaskStore",
    "UPDATABLE_FIELDS",
    "create_task_store",
]
