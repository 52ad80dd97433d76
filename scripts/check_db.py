# scripts/check_db.py
import sys
from pathlib import Path
from sqlalchemy import text

# Ensure project root is on the path when running this script directly
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import asyncio
from book_archive.config.settings import get_settings
from book_archive.infrastructure.database.session import create_engine, create_tables


async def check_connection():
    engine = create_engine(get_settings().database_url)
    await create_tables(engine)
    async with engine.begin() as conn:
        result = await conn.execute(text("SELECT COUNT(*) FROM archive_records"))
        print("DB connected, archived records:", result.scalar())
    await engine.dispose()

asyncio.run(check_connection())
