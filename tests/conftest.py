from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest
import pytest_asyncio

from resetstore.core.database import Database
from resetstore.core.exceptions import StorageError
from resetstore.modules.password_reset.repository import PasswordResetRepository
from resetstore.modules.password_reset.schemas import PasswordResetToken

SCHEMA_SQL = Path(__file__).resolve().parent.parent / "schema.sql"


@pytest.fixture
def repo():
    return PasswordResetRepository()


@pytest.fixture
def make_token():
    """
    Builds tokens relative to the current time.
    expires_in is a timedelta; negative values produce already expired tokens.
    """
    def _make(user_id=7, selector="abc", verifier_hash="h1", expires_in=timedelta(hours=1)):
        now = datetime.now(timezone.utc)
        return PasswordResetToken(
            user_id=user_id,
            selector=selector,
            verifier_hash=verifier_hash,
            expiration_time=now + expires_in,
            created_at=now,
        )

    return _make


# Real PostgreSQL, isolated per test.
# The table is created inside the test transaction and disappears on rollback.
@pytest_asyncio.fixture(scope="function")
async def db_connection():
    database = Database(timeout=3)
    try:
        conn = await database.connect()
    except StorageError as e:
        pytest.skip(f"PostgreSQL not available: {e}")

    tr = conn.transaction()
    await tr.start()
    try:
        await conn.execute("DROP TABLE IF EXISTS password_reset_tokens")
        await conn.execute(SCHEMA_SQL.read_text())
        yield conn
    finally:
        await tr.rollback()
        await conn.close()
