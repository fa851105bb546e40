"""TaskService -- 任务创建/查询/更新/删除业务逻辑

路由层完成请求校验后调用本服务：
1. 调用 Store 执行操作
2. 将 Store 的 not-found 信号转换为 TaskNotFoundError
3. 记录结构化日志
"""

from collections.abc import Mapping
from typing import Any

import structlog
from taskboard.core.exceptions import TaskNotFoundError
from taskboard.core.models import Task, TaskPage, TaskStatus
from taskboard.core.store import TaskStore

log = structlog.get_logger()


class TaskService:
    """任务业务服务"""

    def __init__(self, store: TaskStore) -> None:
        self._store = store

    async def create_task(self, title: str, description: str) -> Task:
        """创建任务（状态固定为 PENDING）"""
        task = await self._store.create(title, description)
        log.info("task_created", task_id=task.id, title=task.title)
        return task

    async def get_task(self, task_id: str) -> Task:
        """查询单个任务

        Raises:
            TaskNotFoundError: 任务不存在
        """
        task = await self._store.get(task_id)
        if task is None:
            self._not_found(task_id, "get")
        return task

    async def list_tasks(
        self,
        status: TaskStatus | None = None,
        title: str | None = None,
        page: int = 1,
        limit: int = 10,
    ) -> TaskPage:
        """查询任务列表，支持 status/title 筛选与分页"""
        result = await self._store.list(status=status, title=title, page=page, limit=limit)
        log.debug(
            "tasks_listed",
            status=status,
            title=title,
            page=page,
            limit=limit,
            total=result.total,
        )
        return result

    async def update_task(self, task_id: str, changes: Mapping[str, Any]) -> Task:
        """部分更新任务

        Raises:
            TaskNotFoundError: 任务不存在
        """
        task = await self._store.update(task_id, changes)
        if task is None:
            self._not_found(task_id, "update")
        log.info(
            "task_updated",
            task_id=task_id,
            fields=sorted(changes),
            status=task.status,
        )
        return task

    async def delete_task(self, task_id: str) -> None:
        """删除任务

        Raises:
            TaskNotFoundError: 任务不存在
        """
        removed = await self._store.remove(task_id)
        if not removed:
            self._not_found(task_id, "delete")
        log.info("task_deleted", task_id=task_id)

    @staticmethod
    def _not_found(task_id: str, operation: str) -> None:
        log.info("task_not_found", task_id=task_id, operation=operation)
        raise TaskNotFoundError(task_id)
