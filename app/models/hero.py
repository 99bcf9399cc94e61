from sqlalchemy import Column, String, Text
from app.models.base import BaseModel

class Hero(BaseModel):
    """Fila única con la cabecera del portafolio."""
    __tablename__ = "hero"

    greeting_es = Column(String(255), nullable=False, default="")
    greeting_en = Column(String(255), nullable=False, default="")
    title = Column(String(255), nullable=False, default="")
    subtitle_es = Column(Text, nullable=False, default="")
    subtitle_en = Column(Text, nullable=False, default="")
    cv_url = Column(Text, nullable=True)
