# resetstore/core/log_config.py

import logging
from typing import Optional

from resetstore.core.config import settings


def configure_logging(level: Optional[str] = None) -> None:
    """
    Configure root logging for entry points (CLI jobs, scripts).
    Library modules only ever call logging.getLogger(__name__).
    """
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format=settings.LOG_FORMAT,
    )
