import pytest

from motoparts.storage import MemoryStorage, build_storage, seed_storage
from motoparts.storage.seed import CATEGORIES, PRODUCTS, TESTIMONIALS


def test_seed_products_reference_known_categories():
    slugs = {category["slug"] for category in CATEGORIES}

    assert all(product["category"] in slugs for product in PRODUCTS)
    assert len({product["slug"] for product in PRODUCTS}) == len(PRODUCTS)


@pytest.mark.asyncio
async def test_seed_storage_only_runs_once():
    storage = MemoryStorage()

    first = await seed_storage(storage)
    second = await seed_storage(storage)

    assert first == {
        "categories": len(CATEGORIES),
        "products": len(PRODUCTS),
        "testimonials": len(TESTIMONIALS),
    }
    assert second == {"categories": 0, "products": 0, "testimonials": 0}
    assert len(await storage.get_products()) == 15


@pytest.mark.asyncio
async def test_build_storage_defaults_to_seeded_memory_backend():
    storage = await build_storage()

    assert isinstance(storage, MemoryStorage)
    assert not await storage.is_empty()
    await storage.close()


@pytest.mark.asyncio
async def test_db_push_creates_schema_and_seeds():
    from motoparts.scripts.db_push import push

    counts = await push("sqlite+aiosqlite:///:memory:", drop=True)

    assert counts["products"] == 15
