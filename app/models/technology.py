from sqlalchemy import Column, Integer, String, Text
from app.models.base import BaseModel

class Technology(BaseModel):
    __tablename__ = "technologies"

    order = Column("order", Integer, nullable=False, default=0, index=True)
    name = Column(String(100), nullable=False)
    logo_url = Column(Text, nullable=True)
    category = Column(String(20), nullable=False, default="knowledge")  # dominant | knowledge
