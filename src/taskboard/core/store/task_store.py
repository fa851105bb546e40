"""TaskStore 内存实现

任务集合保存在进程内存中：id -> Task 的映射，
dict 保持插入顺序，列表查询按创建顺序返回。

所有操作在同一把 asyncio.Lock 内串行执行，
一个应用只持有一个 Store 实例（见 create_task_store）。
对外返回的都是副本，调用方无法直接修改 Store 内部状态。
"""

import asyncio
from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any

from ulid import ULID

from ..models.enums import INITIAL_STATUS, TaskStatus
from ..models.task import Task, TaskPage

# update 允许修改的字段
UPDATABLE_FIELDS: frozenset[str] = frozenset({"title", "description", "status"})


class InMemoryTaskStore:
    """TaskStore 的内存实现"""

    def __init__(self) -> None:
        self._tasks: dict[str, Task] = {}
        self._lock = asyncio.Lock()

    async def create(self, title: str, description: str) -> Task:
        """创建任务记录

        状态强制为 PENDING，created_at 与 updated_at 取同一时间点。
        """
        now = datetime.now(UTC)
        async with self._lock:
            task = Task(
                id=self._new_id(),
                title=title,
                description=description,
                status=INITIAL_STATUS,
                created_at=now,
                updated_at=now,
            )
            self._tasks[task.id] = task
        return task.model_copy()

    async def get(self, task_id: str) -> Task | None:
        """根据 task_id 查询任务"""
        async with self._lock:
            task = self._tasks.get(task_id)
        return task.model_copy() if task is not None else None

    async def list(
        self,
        status: TaskStatus | None = None,
        title: str | None = None,
        page: int = 1,
        limit: int = 10,
    ) -> TaskPage:
        """查询任务列表

        先按 status 精确匹配，再按 title 不区分大小写子串匹配，
        最后对过滤结果分页。越界页返回空 data，不报错。

        Raises:
            ValueError: page 或 limit 小于 1
        """
        if page < 1 or limit < 1:
            raise ValueError(f"page and limit must be >= 1, got page={page} limit={limit}")

        async with self._lock:
            filtered = list(self._tasks.values())

        if status:
            filtered = [t for t in filtered if t.status == status]
        if title:
            needle = title.lower()
            filtered = [t for t in filtered if needle in t.title.lower()]

        start = (page - 1) * limit
        end = page * limit
        return TaskPage(
            total=len(filtered),
            page=page,
            limit=limit,
            data=[t.model_copy() for t in filtered[start:end]],
        )

    async def update(self, task_id: str, changes: Mapping[str, Any]) -> Task | None:
        """部分字段合并更新

        未提供的字段保持不变，updated_at 无条件刷新且不会早于原值。

        Raises:
            ValueError: changes 包含不可修改的字段，或 status 不是合法枚举值
        """
        unknown = set(changes) - UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"fields not updatable: {sorted(unknown)}")

        update = dict(changes)
        if "status" in update:
            update["status"] = TaskStatus(update["status"])

        async with self._lock:
            current = self._tasks.get(task_id)
            if current is None:
                return None
            update["updated_at"] = max(datetime.now(UTC), current.updated_at)
            merged = current.model_copy(update=update)
            self._tasks[task_id] = merged
        return merged.model_copy()

    async def remove(self, task_id: str) -> bool:
        """删除任务记录，返回是否发生删除"""
        async with self._lock:
            return self._tasks.pop(task_id, None) is not None

    async def count(self) -> int:
        """存活任务数"""
        async with self._lock:
            return len(self._tasks)

    async def clear(self) -> None:
        """清空所有任务"""
        async with self._lock:
            self._tasks.clear()

    def _new_id(self) -> str:
        # ULID 冲突概率可忽略，仍然检查以保证唯一性不变量
        while True:
            task_id = str(ULID())
            if task_id not in self._tasks:
                return task_id
