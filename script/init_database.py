#!/usr/bin/env python3
"""
Database Init Script
Create every table for the configured database

Notes:
- Uses DATABASE_URL_OVERRIDE when set (e.g. sqlite+aiosqlite:///./venue.db)
- Pass --drop to wipe existing tables first
"""

import argparse
import asyncio

from src.platform.config.di import cleanup, container
from src.platform.database.orm_db_setting import create_db_and_tables, drop_db_and_tables


async def main(*, drop: bool) -> None:
    database = container.database()
    print('🔄 Initializing database...')
    print('=' * 50)

    try:
        if drop:
            await drop_db_and_tables(database)
            print('   ✅ Existing tables dropped')
        await create_db_and_tables(database)
        print('   ✅ Tables created')
        print('=' * 50)
        print('💡 To ingest maps, run: python script/ingest_venue_maps.py <zip or folder>')
    except Exception as e:
        print(f'❌ Init failed: {e}')
        raise SystemExit(1)
    finally:
        await cleanup()


if __name__ == '__main__':
    parser = argparse.ArgumentParser(description='Create venue inventory tables')
    parser.add_argument('--drop', action='store_true', help='Drop existing tables first')
    args = parser.parse_args()
    asyncio.run(main(drop=args.drop))
