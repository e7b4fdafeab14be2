#!/usr/bin/env python3
"""
Create the database tables for the configured DATABASE_URL.

Usage:
  python scripts/init_db.py [--drop]
"""

import argparse
import asyncio
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from ganado.config.settings import get_settings
from ganado.infrastructure.db.session import create_engine, create_schema


async def main(drop: bool) -> None:
    settings = get_settings()
    engine = create_engine(settings.database_url)
    try:
        await create_schema(engine, drop_existing=drop)
        print(f"Schema ready on {engine.url.render_as_string(hide_password=True)}")
    finally:
        await engine.dispose()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Create ganado tables")
    parser.add_argument("--drop", action="store_true", help="Drop existing tables first")
    args = parser.parse_args()
    asyncio.run(main(args.drop))
