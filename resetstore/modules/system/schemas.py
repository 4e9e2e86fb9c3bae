# resetstore/modules/system/schemas.py

from pydantic import BaseModel


class CleanupResult(BaseModel):
    expired_password_tokens_deleted: int
    message: str
