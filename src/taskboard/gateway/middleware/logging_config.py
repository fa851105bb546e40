"""日志配置

structlog 与标准库 logging 共用同一套处理器链，由 GatewayConfig 决定级别与格式。
uvicorn 以 log_config=None 启动，它的 logger 在这里接管：
- uvicorn / uvicorn.error 交给根 handler 统一渲染
- uvicorn.access 关闭，请求日志由 LoggingMiddleware 输出
"""

import logging
import os

import structlog
from fastapi import FastAPI

from ..config import GatewayConfig, load_gateway_config

# 交给根 handler 渲染的 uvicorn logger
UVICORN_LOGGERS = ("uvicorn", "uvicorn.error")

# 与 LoggingMiddleware 的 request_completed 重复，不输出
UVICORN_ACCESS_LOGGER = "uvicorn.access"


def _shared_processors() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _renderer(log_format: str) -> structlog.types.Processor:
    if log_format == "json":
        return structlog.processors.JSONRenderer(ensure_ascii=False)
    return structlog.dev.ConsoleRenderer()


def _route_uvicorn_loggers(level: int) -> None:
    """去掉 uvicorn 自带 handler，错误日志走根 handler，访问日志关闭"""
    for name in UVICORN_LOGGERS:
        uv_logger = logging.getLogger(name)
        uv_logger.handlers.clear()
        uv_logger.propagate = True
        uv_logger.setLevel(level)

    access_logger = logging.getLogger(UVICORN_ACCESS_LOGGER)
    access_logger.handlers.clear()
    access_logger.propagate = False
    access_logger.disabled = True


def setup_logging(config: GatewayConfig | None = None) -> None:
    """初始化 structlog 与标准库 logging

    Args:
        config: Gateway 配置，缺省时从环境变量加载
    """
    config = config or load_gateway_config()
    level = config.log_level_value
    shared = _shared_processors()

    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler()
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=_renderer(config.log_format),
            foreign_pre_chain=shared,
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    _route_uvicorn_loggers(level)


def setup_logfire(app: FastAPI) -> None:
    """Logfire 可选初始化

    LOGFIRE_SEND_TO_LOGFIRE="true" 时启用（需要 LOGFIRE_TOKEN 与 taskboard[apm]），
    否则只输出本地日志。
    """
    if os.environ.get("LOGFIRE_SEND_TO_LOGFIRE", "false").lower() != "true":
        return
    try:
        import logfire

        logfire.configure()
        logfire.instrument_fastapi(app)
    except Exception:
        # Logfire 初始化失败不影响系统运行
        structlog.get_logger().warning(
            "logfire_init_failed",
            message="Logfire 初始化失败，降级为纯本地日志",
        )
