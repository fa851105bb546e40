"""FastAPI 应用主文件

app 创建 + lifespan 管理：Store 初始化 + 异常处理器 + 路由注册。
交互式 API 文档挂载在 /api-docs。
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from taskboard.core.store import create_task_store

from .config import GatewayConfig
from .errors import register_exception_handlers
from .middleware.logging_config import setup_logfire, setup_logging
from .middleware.logging_mw import LoggingMiddleware
from .middleware.trace_mw import TraceMiddleware
from .routes import health, tasks

log = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """应用生命周期管理：启动时创建唯一的 Store 实例，关闭时释放"""
    # 测试可能预先注入 Store，此时沿用
    if getattr(app.state, "task_store", None) is None:
        app.state.task_store = create_task_store()
    log.info("task_store_initialized", backend="memory")

    yield

    # 内存数据不持久化，进程结束即丢弃
    count = await app.state.task_store.count()
    log.info("task_store_released", task_count=count)
    app.state.task_store = None


def create_app(config: GatewayConfig | None = None) -> FastAPI:
    """创建 FastAPI 应用实例

    Args:
        config: Gateway 配置（日志级别/格式），缺省时从环境变量加载
    """
    app = FastAPI(
        title="Taskboard API",
        version="0.1.0",
        description="A simple REST API for managing tasks.",
        docs_url="/api-docs",
        redoc_url=None,
        lifespan=lifespan,
    )

    # 注册中间件（顺序：先 Trace 后 Logging，Logging 位于最外层）
    app.add_middleware(TraceMiddleware)
    app.add_middleware(LoggingMiddleware)

    register_exception_handlers(app)

    # 初始化日志
    setup_logging(config)
    setup_logfire(app)

    # 注册路由
    app.include_router(tasks.router, tags=["tasks"])
    app.include_router(health.router, tags=["health"])

    return app


# 默认 app 实例（uvicorn 入口）
app = create_app()
