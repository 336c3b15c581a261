"""
Entity store backends and the factory that picks one from settings.
"""
import logging

from motoparts.core.config import Settings, settings as default_settings
from motoparts.storage.base import Storage
from motoparts.storage.memory import MemoryStorage, Table
from motoparts.storage.seed import seed_storage

logger = logging.getLogger(__name__)


async def build_storage(config: Settings = default_settings) -> Storage:
    """
    Create the configured backend, ready for use.

    The relational backend creates missing tables when DB_AUTO_CREATE is on.
    Either backend is seeded when SEED_ON_STARTUP is on and it is empty.
    """
    if config.STORAGE_BACKEND == "database":
        # Imported lazily so the memory backend never needs a database driver
        from motoparts.core.database import create_engine, create_tables
        from motoparts.storage.database import DatabaseStorage

        engine = create_engine(config.DATABASE_URL)
        if config.DB_AUTO_CREATE:
            await create_tables(engine)
        storage: Storage = DatabaseStorage(engine)
    else:
        storage = MemoryStorage()

    logger.info(f"Entity store backend: {storage.backend_name}")

    if config.SEED_ON_STARTUP:
        await seed_storage(storage)

    return storage


__all__ = [
    "Storage",
    "MemoryStorage",
    "Table",
    "build_storage",
    "seed_storage",
]
