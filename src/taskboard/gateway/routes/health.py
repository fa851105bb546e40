"""健康检查路由

GET /:       服务运行提示（纯文本）
GET /health: Liveness 检查，永远返回 200。
GET /ready:  Readiness 检查，验证 Store 可访问。
"""

import structlog
from fastapi import APIRouter, Request
from starlette.responses import JSONResponse, PlainTextResponse

log = structlog.get_logger()

router = APIRouter()


@router.get("/", response_class=PlainTextResponse, include_in_schema=False)
async def root():
    return "Taskboard API is running!"


@router.get("/health")
async def health():
    """Liveness 检查 -- 永远返回 200"""
    return {"status": "ok"}


@router.get("/ready")
async def ready(request: Request):
    """Readiness 检查 -- 验证 Store 已初始化且可访问

    检查项：
    1. task_store: Store 是否可响应
    2. task_count: 当前存活任务数
    """
    checks: dict = {}
    all_ok = True

    store = getattr(request.app.state, "task_store", None)
    if store is None:
        checks["task_store"] = "error: not initialized"
        all_ok = False
    else:
        try:
            checks["task_count"] = await store.count()
            checks["task_store"] = "ok"
        except Exception as e:
            log.warning("ready_check_error", error=str(e))
            checks["task_store"] = f"error: {e}"
            all_ok = False

    return JSONResponse(
        status_code=200 if all_ok else 503,
        content={
            "status": "ready" if all_ok else "not_ready",
            "checks": checks,
        },
    )
