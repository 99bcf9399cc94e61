from sqlalchemy import Column, String, Text
from app.models.base import BaseModel

class GeneralText(BaseModel):
    __tablename__ = "general_text"

    # 'key' es la clave del texto (ej: 'nav_projects'), no cambia tras crearse
    key = Column(String(100), nullable=False, unique=True, index=True)
    text_es = Column(Text, nullable=False, default="")
    text_en = Column(Text, nullable=False, default="")
