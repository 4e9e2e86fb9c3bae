# resetstore/modules/system/service.py

from asyncpg import Connection

from resetstore.modules.password_reset.repository import PasswordResetRepository
from resetstore.modules.system.schemas import CleanupResult


class SystemService:
    """
    Orchestrates system-level maintenance tasks.
    """

    def __init__(self, conn: Connection) -> None:
        self.conn = conn
        self.repo = PasswordResetRepository()

    async def run_cleanup(self) -> CleanupResult:
        """
        Runs all cleanup routines and returns a summary.
        """
        expired_password_tokens = await self.repo.delete_expired_tokens(self.conn)

        return CleanupResult(
            expired_password_tokens_deleted=expired_password_tokens,
            message="Cleanup completed successfully",
        )
