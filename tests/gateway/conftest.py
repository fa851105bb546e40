"""gateway 测试配置 -- FastAPI app + httpx AsyncClient fixture"""

from collections.abc import AsyncGenerator

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from taskboard.core.store import create_task_store


@pytest_asyncio.fixture
async def app():
    """创建测试用 FastAPI app 实例，手动初始化 Store（绕过 lifespan）"""
    from taskboard.gateway.main import create_app

    application = create_app()
    application.state.task_store = create_task_store()
    yield application


@pytest_asyncio.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    """提供 httpx AsyncClient 用于测试"""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
