"""
Pytest configuration and fixtures for storefront tests.
"""
import os

import pytest

# Set test environment before importing app modules
os.environ["ENVIRONMENT"] = "development"
os.environ["DEBUG"] = "false"
os.environ["STORAGE_BACKEND"] = "memory"
os.environ["DATABASE_URL"] = ""
os.environ["RATE_LIMIT_ENABLED"] = "false"

from httpx import ASGITransport, AsyncClient  # noqa: E402

from motoparts.schemas import ProductCreate  # noqa: E402
from motoparts.storage import MemoryStorage, seed_storage  # noqa: E402

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
async def memory_storage() -> MemoryStorage:
    """Empty in-memory store."""
    return MemoryStorage()


@pytest.fixture
async def seeded_storage(memory_storage) -> MemoryStorage:
    """In-memory store holding the seed catalog."""
    await seed_storage(memory_storage)
    return memory_storage


async def _new_database_storage():
    """Relational store on a private in-memory SQLite database, tables created."""
    from motoparts.core.database import create_engine, create_tables
    from motoparts.storage.database import DatabaseStorage

    engine = create_engine(TEST_DATABASE_URL)
    await create_tables(engine)
    return DatabaseStorage(engine)


@pytest.fixture
async def database_storage():
    storage = await _new_database_storage()
    yield storage
    await storage.close()


@pytest.fixture(params=["memory", "database"])
async def storage(request):
    """Seeded store, once per backend, for behaviour both backends must share."""
    if request.param == "memory":
        store = MemoryStorage()
    else:
        store = await _new_database_storage()
    await seed_storage(store)
    yield store
    await store.close()


@pytest.fixture
async def client(seeded_storage):
    """HTTP client against the app, backed by a freshly seeded in-memory store."""
    from motoparts.main import app

    # ASGITransport does not run the lifespan, so attach the store directly
    app.state.storage = seeded_storage
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def sample_product() -> ProductCreate:
    return ProductCreate(
        name="Yamaha Mio Brake Pads",
        slug="yamaha-mio-brake-pads",
        description="Front disc brake pads",
        price=250.0,
        image_url="/assets/images/products/brake-pads.jpg",
        category_id=4,
    )


@pytest.fixture
def order_draft() -> dict:
    return {
        "email": "rider@example.com",
        "total": 766.5,
        "shippingAddress": "12 Rizal St, Quezon City",
        "billingAddress": "12 Rizal St, Quezon City",
    }
