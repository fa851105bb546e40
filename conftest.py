"""全局 pytest 配置 -- 共享 Store fixture"""

import pytest
from taskboard.core.store import InMemoryTaskStore, create_task_store


@pytest.fixture(autouse=True)
def _disable_logfire(monkeypatch: pytest.MonkeyPatch) -> None:
    """测试期间不向 Logfire 发送数据"""
    monkeypatch.setenv("LOGFIRE_SEND_TO_LOGFIRE", "false")


@pytest.fixture
def task_store() -> InMemoryTaskStore:
    """提供空的内存 Store"""
    return create_task_store()
