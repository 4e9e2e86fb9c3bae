# resetstore/core/exceptions.py

"""
Storage failure taxonomy.

Repositories never wrap driver errors: they log and re-raise whatever the
connection reported. StorageError groups those driver types so callers can
catch every storage failure with a single clause:

    try:
        await repo.save(token, conn)
    except StorageError:
        ...
"""

from typing import Tuple, Type

import asyncpg


StorageError: Tuple[Type[BaseException], ...] = (
    asyncpg.PostgresError,   # constraint violations, bad SQL, server-side failures
    asyncpg.InterfaceError,  # closed / lost connection, driver misuse
    OSError,                 # network level failures
)
