import uuid

from sqlalchemy import Column, DateTime, JSON, String, Uuid
from sqlalchemy.dialects.postgresql import ARRAY
from sqlalchemy.sql import func
from app.database import Base

# text[] en Postgres, JSON en el resto (SQLite de pruebas)
StringList = JSON().with_variant(ARRAY(String), "postgresql")


def new_id() -> str:
    return str(uuid.uuid4())


class BaseModel(Base):
    __abstract__ = True
    id = Column(Uuid(as_uuid=False), primary_key=True, default=new_id, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
