"""
Create the storefront tables and load the seed catalog.

Run: python -m motoparts.scripts.db_push [--database-url URL] [--drop] [--no-seed]

Tables are created only when missing, and seeding is skipped when the catalog
already has categories, so the script is safe to run repeatedly.
"""
import asyncio
import logging

from motoparts.core.config import settings
from motoparts.core.database import create_engine, create_tables, drop_tables
from motoparts.core.logging_config import configure_logging
from motoparts.storage.database import DatabaseStorage
from motoparts.storage.seed import seed_storage

logger = logging.getLogger(__name__)


async def push(database_url: str = None, drop: bool = False, seed: bool = True) -> dict:
    """Create (optionally recreate) the schema and seed it. Returns seeded counts."""
    engine = create_engine(database_url or settings.DATABASE_URL)
    storage = DatabaseStorage(engine)
    counts = {}

    try:
        if drop:
            logger.warning("Dropping all storefront tables (destructive!)")
            await drop_tables(engine)

        await create_tables(engine)
        logger.info("Schema is up to date")

        if seed:
            counts = await seed_storage(storage)
    finally:
        await storage.close()

    return counts


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Create storefront tables and seed the catalog")
    parser.add_argument("--database-url", help="Overrides DATABASE_URL")
    parser.add_argument("--drop", action="store_true", help="Drop existing tables first (destructive!)")
    parser.add_argument("--no-seed", action="store_true", help="Only create tables")
    args = parser.parse_args()

    configure_logging()
    asyncio.run(push(args.database_url, drop=args.drop, seed=not args.no_seed))
