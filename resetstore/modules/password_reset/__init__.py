# resetstore/modules/password_reset/__init__.py

from .repository import PasswordResetRepository
from .schemas import PasswordResetToken

__all__ = [
    "PasswordResetRepository",
    "PasswordResetToken",
]
