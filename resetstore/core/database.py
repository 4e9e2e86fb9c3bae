# resetstore/core/database.py

from contextlib import asynccontextmanager
import logging
from typing import AsyncIterator, Optional

import asyncpg

from resetstore.core.config import settings
from resetstore.core.exceptions import StorageError

logger = logging.getLogger(__name__)


def affected_rows(status: Optional[str]) -> int:
    """
    Parse the row count out of an asyncpg command tag.

    asyncpg returns e.g. "DELETE 3" or "INSERT 0 1"; the count is always last.
    """
    if not status:
        return 0
    last = status.split()[-1]
    return int(last) if last.isdigit() else 0


class Database:
    """
    Single-connection helper for entry points and tests.

    - connect() opens one asyncpg connection using the configured DSN.
    - transaction() yields a connection inside a transaction and closes it after.
    - ping() is used by maintenance jobs before doing real work.

    Repositories never use this class directly; they receive a connection.
    """

    def __init__(self, dsn: Optional[str] = None, timeout: Optional[float] = None) -> None:
        self.dsn = dsn or settings.DATABASE_URL
        self.timeout = timeout if timeout is not None else settings.DATABASE_CONNECT_TIMEOUT

    async def connect(self) -> asyncpg.Connection:
        return await asyncpg.connect(self.dsn, timeout=self.timeout)

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[asyncpg.Connection]:
        """
        Commits when the block exits normally, rolls back when it raises.
        """
        conn = await self.connect()
        try:
            async with conn.transaction():
                yield conn
        finally:
            await conn.close()

    async def ping(self) -> bool:
        """
        Returns True if the database responds to a simple query.
        """
        try:
            conn = await self.connect()
        except StorageError as e:
            logger.warning(f"Database not reachable: {e}")
            return False
        try:
            await conn.execute("SELECT 1")
            return True
        except StorageError as e:
            logger.warning(f"Database ping failed: {e}")
            return False
        finally:
            await conn.close()
