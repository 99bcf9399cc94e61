from sqlalchemy import Column, Integer, String
from app.models.base import BaseModel, StringList

class Experience(BaseModel):
    __tablename__ = "experience"

    order = Column("order", Integer, nullable=False, default=0, index=True)
    position_es = Column(String(255), nullable=False)
    position_en = Column(String(255), nullable=False)
    company = Column(String(255), nullable=False)
    period_es = Column(String(100), nullable=False)
    period_en = Column(String(100), nullable=False)
    description_items_es = Column(StringList, nullable=False, default=list)
    description_items_en = Column(StringList, nullable=False, default=list)
    technologies = Column(StringList, nullable=False, default=list)
