#!/usr/bin/env python3
"""
Seed the database with the default pipeline stages and user accounts
"""

import asyncio
import logging
from talentviz.db.database import AsyncSessionLocal, engine
from talentviz.repositories.db_storage import DatabaseStorage
from talentviz.services.seed_service import seed_defaults

logging.basicConfig(level=logging.INFO)


async def main():
    async with AsyncSessionLocal() as session:
        await seed_defaults(DatabaseStorage(session))
    await engine.dispose()

if __name__ == "__main__":
    asyncio.run(main())
