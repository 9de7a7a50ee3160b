import os

os.environ.setdefault("OPENAI_API_KEY", "test-key")

from unittest.mock import MagicMock  # noqa: E402

import httpx  # noqa: E402
import pytest  # noqa: E402

from inkbloom import main  # noqa: E402
from inkbloom.services.ai_service import AIProcessor  # noqa: E402
from inkbloom.services.style_context import style_store  # noqa: E402


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture(autouse=True)
def _reset_style_store():
    style_store.clear()
    yield
    style_store.clear()


@pytest.fixture()
def ai(monkeypatch):
    """Stand-in for the vendor API; async methods become AsyncMocks."""
    fake = MagicMock(spec=AIProcessor)
    monkeypatch.setattr(main.scene_service, "ai_processor", fake)
    return fake


@pytest.fixture()
async def client():
    transport = httpx.ASGITransport(app=main.app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
