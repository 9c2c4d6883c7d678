import httpx
import pytest_asyncio

from notification_service.main import app

BASE_URL = "http://testserver"


@pytest_asyncio.fixture
async def client():
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url=BASE_URL) as client:
        yield client
