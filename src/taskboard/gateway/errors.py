"""异常处理器 -- 统一错误响应格式

错误响应体：
    {"success": false, "error": {"message": "...", "details": [...]}}

- TaskValidationError / RequestValidationError -> 400
- TaskNotFoundError -> 404，message 固定为 "Task not found"
"""

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.responses import JSONResponse
from taskboard.core.exceptions import TaskNotFoundError, TaskValidationError
from taskboard.core.validation import FieldError, to_field_errors

log = structlog.get_logger()

NOT_FOUND_MESSAGE = "Task not found"


def error_response(
    status_code: int,
    message: str,
    details: list[FieldError] | None = None,
) -> JSONResponse:
    """构建标准错误响应"""
    error: dict = {"message": message}
    if details:
        error["details"] = [d.model_dump() for d in details]
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": error},
    )


async def handle_not_found(request: Request, exc: TaskNotFoundError) -> JSONResponse:
    return error_response(404, NOT_FOUND_MESSAGE)


async def handle_validation_error(
    request: Request, exc: TaskValidationError
) -> JSONResponse:
    log.info("request_validation_failed", errors=[e.model_dump() for e in exc.errors])
    return error_response(400, exc.summary, exc.errors)


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """FastAPI 自身的解析错误（非法 JSON、缺少请求体）同样返回 400"""
    return await handle_validation_error(
        request, TaskValidationError(to_field_errors(exc.errors()))
    )


def register_exception_handlers(app: FastAPI) -> None:
    """注册异常处理器"""
    app.add_exception_handler(TaskNotFoundError, handle_not_found)
    app.add_exception_handler(TaskValidationError, handle_validation_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
