"""Store Protocol 接口定义

定义 TaskStore 的抽象接口，
使用 Python Protocol 实现结构化子类型（duck typing）。
"""

from collections.abc import Mapping
from typing import Any, Protocol

from ..models.enums import TaskStatus
from ..models.task import Task, TaskPage


class TaskStore(Protocol):
    """Task 存储接口

    not-found 通过返回值表达（None / False），不抛异常。
    update 遇到不可修改字段或非法 status、list 遇到 page/limit < 1 时抛出 ValueError。
    """

    async def create(self, title: str, description: str) -> Task:
        """创建任务，状态强制为 PENDING"""
        ...

    async def get(self, task_id: str) -> Task | None:
        """根据 task_id 查询任务"""
        ...

    async def list(
        self,
        status: TaskStatus | None = None,
        title: str | None = None,
        page: int = 1,
        limit: int = 10,
    ) -> TaskPage:
        """按状态/标题筛选后分页"""
        ...

    async def update(self, task_id: str, changes: Mapping[str, Any]) -> Task | None:
        """部分字段合并更新，刷新 updated_at"""
        ...

    async def remove(self, task_id: str) -> bool:
        """删除任务，返回是否发生删除"""
        ...

    async def count(self) -> int:
        """存活任务数"""
        ...
