# resetstore/modules/password_reset/repository.py

"""
Repository for selector/verifier password reset tokens.
- Upsert the single live token of a user
- Look up a live token by selector
- Delete a token after use
- Sweep expired tokens

Table:

  CREATE TABLE password_reset_tokens (
      token_id         BIGSERIAL PRIMARY KEY,
      user_id          BIGINT NOT NULL UNIQUE,
      selector         TEXT NOT NULL UNIQUE,
      verifier_hash    TEXT NOT NULL,
      expiration_time  TIMESTAMPTZ NOT NULL,
      created_at       TIMESTAMPTZ NOT NULL DEFAULT now()
  );

The repository owns no connection. Every call receives one and never commits,
rolls back or closes it; transaction boundaries belong to the caller.

find_by_selector followed by delete_by_selector is not atomic: two concurrent
confirmations can both read the same token before either deletes it.
"""

import logging
from typing import Optional

from asyncpg import Connection

from resetstore.core.database import affected_rows
from resetstore.core.exceptions import StorageError
from resetstore.modules.password_reset.schemas import PasswordResetToken

logger = logging.getLogger(__name__)


class PasswordResetRepository:

    # --------------------------------------------------
    # Store (or replace) the user's reset token
    # --------------------------------------------------
    async def save(self, token: PasswordResetToken, conn: Connection) -> PasswordResetToken:
        """
        Insert the token, or overwrite the existing one for the same user.

        Relies on the UNIQUE constraint on user_id: a second request from the
        same user replaces selector, verifier hash, expiration and creation time,
        which invalidates the previous token without a separate delete.
        """
        logger.debug(f"Attempting to save reset token for user ID: {token.user_id}")
        try:
            row = await conn.fetchrow(
                """
                INSERT INTO password_reset_tokens (
                    user_id,
                    selector,
                    verifier_hash,
                    expiration_time,
                    created_at
                )
                VALUES ($1, $2, $3, $4, $5)
                ON CONFLICT (user_id) DO UPDATE
                SET selector = EXCLUDED.selector,
                    verifier_hash = EXCLUDED.verifier_hash,
                    expiration_time = EXCLUDED.expiration_time,
                    created_at = EXCLUDED.created_at
                RETURNING token_id, user_id, selector, verifier_hash,
                          expiration_time, created_at
                """,
                token.user_id,
                token.selector,
                token.verifier_hash,
                token.expiration_time,
                token.created_at,
            )
        except StorageError:
            logger.exception(f"Error saving reset token for user ID: {token.user_id}")
            raise

        logger.info(f"Successfully saved reset token for user ID: {token.user_id}")
        return PasswordResetToken(**row)

    # --------------------------------------------------
    # Resolve a live token by its public selector
    # --------------------------------------------------
    async def find_by_selector(self, selector: str, conn: Connection) -> Optional[PasswordResetToken]:
        """
        Returns the token only while expiration_time is after the database's now().
        Expired rows still waiting for the sweep are never returned.
        """
        logger.debug(f"Attempting to retrieve reset token by selector: {selector}")
        try:
            row = await conn.fetchrow(
                """
                SELECT token_id, user_id, selector, verifier_hash,
                       expiration_time, created_at
                FROM password_reset_tokens
                WHERE selector = $1
                  AND expiration_time > now()
                """,
                selector,
            )
        except StorageError:
            logger.exception(f"Error retrieving reset token by selector: {selector}")
            raise

        if not row:
            logger.debug(f"No valid reset token found for selector: {selector}")
            return None

        token = PasswordResetToken(**row)
        logger.debug(f"Found valid reset token for user ID: {token.user_id}")
        return token

    # --------------------------------------------------
    # Delete a token after use (prevent reuse)
    # --------------------------------------------------
    async def delete_by_selector(self, selector: str, conn: Connection) -> int:
        logger.debug(f"Attempting to delete reset token by selector: {selector}")
        try:
            result = await conn.execute(
                "DELETE FROM password_reset_tokens WHERE selector = $1",
                selector,
            )
        except StorageError:
            logger.exception(f"Error deleting reset token by selector: {selector}")
            raise

        deleted = affected_rows(result)
        if deleted > 0:
            logger.info(f"Successfully deleted used reset token with selector: {selector}")
        else:
            logger.warning(f"No reset token found to delete for selector: {selector}")
        return deleted

    # --------------------------------------------------
    # Cleanup expired tokens
    # --------------------------------------------------
    async def delete_expired_tokens(self, conn: Connection) -> int:
        """
        Periodic maintenance, not part of the reset flow.

        Returns: number of rows deleted.
        """
        logger.debug("Attempting to delete all expired password reset tokens")
        try:
            result = await conn.execute(
                "DELETE FROM password_reset_tokens WHERE expiration_time < now()"
            )
        except StorageError:
            logger.exception("Error deleting expired password reset tokens")
            raise

        deleted = affected_rows(result)
        logger.info(f"Deleted {deleted} expired password reset tokens")
        return deleted
