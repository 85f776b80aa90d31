from datetime import datetime, timezone
from sqlmodel import Field, SQLModel


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class StorageSlot(SQLModel, table=True):
    __tablename__ = "local_storage"

    key: str = Field(primary_key=True, max_length=255)
    value: str = Field(nullable=False)
    updated_at: datetime = Field(default_factory=_utcnow)
