"""
Test Configuration and Fixtures

Environment setup MUST happen before any application import: settings and
the loguru sinks read it at import time.

Architecture:
- Unit tests (*_unit_test.py): in-memory repos from test/service/in_memory_repos.py
- Integration / e2e tests: real repos on in-memory SQLite (aiosqlite)
"""

import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)

    os.environ['DATABASE_URL_OVERRIDE'] = 'sqlite+aiosqlite:///:memory:'
    os.environ['ORACLE_API_KEY'] = ''
    os.environ['DEBUG'] = 'false'


_early_setup_test_environment()

from collections.abc import AsyncGenerator  # noqa: E402

import pytest  # noqa: E402

from src.platform.database.orm_db_setting import (  # noqa: E402
    Database,
    create_db_and_tables,
    drop_db_and_tables,
)


@pytest.fixture
async def database() -> AsyncGenerator[Database, None]:
    """Fresh in-memory database per test"""
    db = Database(db_url='sqlite+aiosqlite:///:memory:')
    await create_db_and_tables(db)
    yield db
    await drop_db_and_tables(db)
    await db.dispose()
