import pytest
import pytest_asyncio
from asgi_lifespan import LifespanManager
from httpx import AsyncClient, ASGITransport

from api_middleware_example.main import api


@pytest_asyncio.fixture
async def app():
    async with LifespanManager(api) as manager:
        yield manager.app


@pytest_asyncio.fixture
async def client(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


@pytest.fixture
def auth():
    return {'Authorization': 'Bearer secret'}
