# resetstore/cleanup.py

"""
Sweep expired password reset tokens.

Meant to be run from cron or a systemd timer:

    python -m resetstore.cleanup
"""

import asyncio
import logging
import sys

from resetstore.core.config import settings
from resetstore.core.database import Database
from resetstore.core.exceptions import StorageError
from resetstore.core.log_config import configure_logging
from resetstore.modules.system.service import SystemService

logger = logging.getLogger("resetstore.cleanup")


async def run(database: Database) -> int:
    """Run the sweep in its own transaction. Returns the process exit code."""
    logger.info(
        f"[{settings.APP_NAME}/{settings.ENVIRONMENT}] Sweeping expired password reset tokens "
        f"on {database.dsn.rsplit('@', 1)[-1]}"
    )
    if not await database.ping():
        logger.error("Database is not reachable. Aborting cleanup.")
        return 1

    try:
        async with database.transaction() as conn:
            result = await SystemService(conn).run_cleanup()
    except StorageError as e:
        logger.error(f"Cleanup failed: {e}")
        return 1

    logger.info(f"{result.message}: {result.expired_password_tokens_deleted} expired tokens deleted")
    return 0


def main() -> None:
    configure_logging()
    try:
        sys.exit(asyncio.run(run(Database())))
    except KeyboardInterrupt:
        logger.info("Cleanup cancelled.")
        sys.exit(1)


if __name__ == "__main__":
    main()
