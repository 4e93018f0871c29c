import asyncio
import argparse
from talentviz.db.database import engine
from talentviz.db.base import Base
import talentviz.models  # noqa: F401  registers every table on Base.metadata


async def create_all(drop: bool = False):
    async with engine.begin() as conn:
        if drop:
            await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    await engine.dispose()

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Create the TalentViz database schema")
    parser.add_argument("--drop", action="store_true", help="drop existing tables first")
    args = parser.parse_args()
    asyncio.run(create_all(drop=args.drop))
