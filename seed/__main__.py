"""Seed script: populate the database with randomized demo data.

Run as:
    python -m seed

Requires the DATABASE_URL environment variable (or a .env file).  The seeder
expects freshly migrated, empty tables: unique columns such as the admin email
collide on a second run, so reset the schema first
(``alembic downgrade base && alembic upgrade head``).
"""

import asyncio
import logging

from demoshop.config import settings
from demoshop.database import AsyncSessionLocal, engine
from seed.seeder import DatabaseSeeder

logger = logging.getLogger("seed")


async def main() -> None:
    print(f"{settings.app_name} Seed Script")
    print("=" * 50)

    try:
        async with AsyncSessionLocal() as session, session.begin():
            await DatabaseSeeder(session).run()
    except Exception as exc:
        logger.error("Seeding failed, transaction rolled back: %s", exc)
        raise
    finally:
        await engine.dispose()

    print("\n✓ Seed complete!")


def run() -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    asyncio.run(main())


if __name__ == "__main__":
    run()
