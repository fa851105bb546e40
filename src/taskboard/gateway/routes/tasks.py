"""任务 CRUD 路由

POST   /tasks:       创建任务（201）
GET    /tasks:       任务列表，支持 status/title 筛选与 page/limit 分页
GET    /tasks/{id}:  任务详情
PUT    /tasks/{id}:  部分更新任务
DELETE /tasks/{id}:  删除任务（204）

请求体与查询参数先经过 taskboard.core.validation 的显式校验，
失败时抛出 TaskValidationError，由异常处理器转换为 400。
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, Query
from starlette.responses import Response
from taskboard.core.models import Task, TaskPage
from taskboard.core.validation import (
    validate_create_task,
    validate_list_query,
    validate_update_task,
)

from ..deps import get_task_service
from ..services.task_service import TaskService

router = APIRouter(prefix="/tasks")

_NOT_FOUND = {404: {"description": "Task not found"}}
_INVALID = {400: {"description": "Invalid input"}}


@router.post("", response_model=Task, status_code=201, responses=_INVALID)
async def create_task(
    payload: Any = Body(description="{title, description}"),
    service: TaskService = Depends(get_task_service),
):
    """创建任务，状态固定为 PENDING"""
    data = validate_create_task(payload).raise_for_errors()
    return await service.create_task(data["title"], data["description"])


@router.get("", response_model=TaskPage, responses=_INVALID)
async def list_tasks(
    status: str | None = Query(
        default=None, description="按状态筛选：PENDING / IN_PROGRESS / COMPLETED"
    ),
    title: str | None = Query(default=None, description="按标题搜索（不区分大小写）"),
    page: str | None = Query(default=None, description="页码，正整数，默认 1"),
    limit: str | None = Query(default=None, description="每页条数，正整数，默认 10"),
    service: TaskService = Depends(get_task_service),
):
    """查询任务列表，按创建顺序返回"""
    query = validate_list_query(
        {"status": status, "title": title, "page": page, "limit": limit}
    ).raise_for_errors()
    return await service.list_tasks(**query)


@router.get("/{task_id}", response_model=Task, responses=_NOT_FOUND)
async def get_task(
    task_id: str,
    service: TaskService = Depends(get_task_service),
):
    """查询任务详情"""
    return await service.get_task(task_id)


@router.put("/{task_id}", response_model=Task, responses={**_INVALID, **_NOT_FOUND})
async def update_task(
    task_id: str,
    payload: Any = Body(description="{title?, description?, status?}，至少一个字段"),
    service: TaskService = Depends(get_task_service),
):
    """部分更新任务，未提供的字段保持不变"""
    changes = validate_update_task(payload).raise_for_errors()
    return await service.update_task(task_id, changes)


@router.delete("/{task_id}", status_code=204, responses=_NOT_FOUND)
async def delete_task(
    task_id: str,
    service: TaskService = Depends(get_task_service),
):
    """删除任务"""
    await service.delete_task(task_id)
    return Response(status_code=204)
