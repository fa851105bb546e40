"""服务入口模块 -- python -m taskboard.gateway

以单个 uvicorn worker 启动服务：Store 位于进程内存中，
多 worker 会各自持有互不相通的 Store。
"""

import uvicorn

from .config import load_gateway_config


def main() -> None:
    """服务主入口"""
    config = load_gateway_config()
    uvicorn.run(
        "taskboard.gateway.main:app",
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
        workers=1,
        # 日志由 setup_logging 统一配置
        log_config=None,
        # 请求日志由 LoggingMiddleware 输出
        access_log=False,
    )


if __name__ == "__main__":
    main()
