"""集成测试共享 fixture"""

from collections.abc import AsyncGenerator

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from taskboard.core.store import create_task_store


@pytest_asyncio.fixture
async def integration_app():
    """集成测试用 FastAPI app（完整中间件与异常处理器）"""
    from taskboard.gateway.main import create_app

    app = create_app()
    app.state.task_store = create_task_store()

    yield app

    await app.state.task_store.clear()


@pytest_asyncio.fixture
async def client(integration_app) -> AsyncGenerator[AsyncClient, None]:
    async with AsyncClient(
        transport=ASGITransport(app=integration_app),
        base_url="http://test",
    ) as ac:
        yield ac
