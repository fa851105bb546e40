"""依赖注入模块 -- 通过 FastAPI Depends 注入 Store / TaskService 实例

Store 实例通过 app.state 管理，在 lifespan 中创建。
"""

from fastapi import Depends, Request
from taskboard.core.store import TaskStore

from .services.task_service import TaskService


def get_task_store(request: Request) -> TaskStore:
    """从 app.state 获取 Store 实例"""
    return request.app.state.task_store


def get_task_service(store: TaskStore = Depends(get_task_store)) -> TaskService:
    """基于当前应用的 Store 构造 TaskService"""
    return TaskService(store)
