from datetime import datetime, timezone
from sqlmodel import SQLModel


def utcnow() -> datetime:
    """Timezone-aware current UTC time for all persisted timestamps"""
    return datetime.now(timezone.utc)


class BaseModel(SQLModel):
    """Common base for all persisted domain entities"""
    pass
