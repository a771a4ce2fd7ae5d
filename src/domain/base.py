"""Shared base for domain entities"""

from datetime import datetime, timezone
from sqlalchemy import BigInteger, Integer
from sqlmodel import SQLModel

# SQLite only auto-increments INTEGER PRIMARY KEY columns
ID_TYPE = BigInteger().with_variant(Integer, "sqlite")


def utc_now() -> datetime:
    """Timezone-aware current UTC time; stored timestamps are never naive"""
    return datetime.now(timezone.utc)


class BaseModel(SQLModel):
    """Base class for all SQLModel domain entities"""
    pass
