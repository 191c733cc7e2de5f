# stresscheck/tests/conftest.py
"""
Fixtures y helpers para pruebas del núcleo y end-to-end con FastAPI + pytest-asyncio.
Levanta FastAPI con lifespan para que el catálogo se cargue igual que en producción.
"""
import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from asgi_lifespan import LifespanManager

from stresscheck.core.config import DEFAULT_CATALOG
from stresscheck.main import app
from stresscheck.models.catalog import load_catalog
from stresscheck.services.answer_store import AnswerStore

@pytest_asyncio.fixture
async def async_client():
    async with LifespanManager(app):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://testserver") as client:
            yield client

@pytest.fixture(scope="session")
def catalog():
    return load_catalog(DEFAULT_CATALOG)

# -------- Helpers --------
def filled_store(answer: int) -> AnswerStore:
    store = AnswerStore()
    for _ in range(57):
        store.push(answer)
    return store

@pytest.fixture
def low_store():
    return filled_store(1)

@pytest.fixture
def high_store():
    return filled_store(4)
