"""GatewayConfig -- 服务启动配置加载

从环境变量加载监听地址、端口与日志配置。
非法值记录警告并回退默认值，不阻塞启动。
"""

import os
from typing import Literal, get_args

import structlog
from pydantic import BaseModel, Field

log = structlog.get_logger()

LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "TRACE"]
LogFormat = Literal["dev", "json"]

# 日志级别 -> 数值（TRACE 为 uvicorn 扩展级别）
LOG_LEVEL_VALUES: dict[str, int] = {
    "CRITICAL": 50,
    "ERROR": 40,
    "WARNING": 30,
    "INFO": 20,
    "DEBUG": 10,
    "TRACE": 5,
}


class GatewayConfig(BaseModel):
    """Gateway 启动配置 -- 从环境变量加载

    环境变量:
        TASKBOARD_HOST: 监听地址（默认 127.0.0.1）
        TASKBOARD_PORT: 监听端口（默认 3000）
        TASKBOARD_LOG_LEVEL: 日志级别（默认 INFO）
        TASKBOARD_LOG_FORMAT: 日志格式 dev/json（默认 dev）
    """

    host: str = Field(default="127.0.0.1", description="监听地址")
    port: int = Field(default=3000, ge=1, le=65535, description="监听端口")
    log_level: LogLevel = Field(default="INFO", description="日志级别")
    log_format: LogFormat = Field(default="dev", description="日志格式")

    @property
    def log_level_value(self) -> int:
        """标准库 logging 使用的数值级别"""
        return LOG_LEVEL_VALUES[self.log_level]


def load_gateway_config() -> GatewayConfig:
    """从环境变量加载 Gateway 配置

    环境变量映射:
        TASKBOARD_HOST -> host (默认 "127.0.0.1")
        TASKBOARD_PORT -> port (默认 3000)
        TASKBOARD_LOG_LEVEL -> log_level (默认 "INFO"，不区分大小写)
        TASKBOARD_LOG_FORMAT -> log_format (默认 "dev"，不区分大小写)

    Returns:
        GatewayConfig 实例
    """
    kwargs: dict = {}

    if val := os.environ.get("TASKBOARD_HOST"):
        kwargs["host"] = val

    if val := os.environ.get("TASKBOARD_PORT"):
        try:
            port = int(val)
        except ValueError:
            port = None
        if port is not None and 1 <= port <= 65535:
            kwargs["port"] = port
        else:
            log.warning(
                "invalid_port_config",
                env_var="TASKBOARD_PORT",
                value=val,
                fallback=3000,
            )
            # 使用默认值，不阻塞启动

    if val := os.environ.get("TASKBOARD_LOG_LEVEL"):
        level = val.strip().upper()
        if level in get_args(LogLevel):
            kwargs["log_level"] = level
        else:
            log.warning(
                "invalid_log_level_config",
                env_var="TASKBOARD_LOG_LEVEL",
                value=val,
                fallback="INFO",
            )

    if val := os.environ.get("TASKBOARD_LOG_FORMAT"):
        fmt = val.strip().lower()
        if fmt in get_args(LogFormat):
            kwargs["log_format"] = fmt
        else:
            log.warning(
                "invalid_log_format_config",
                env_var="TASKBOARD_LOG_FORMAT",
                value=val,
                fallback="dev",
            )

    return GatewayConfig(**kwargs)
