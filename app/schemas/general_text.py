from pydantic import BaseModel, Field
from typing import Optional

from app.schemas.common import PartialUpdate

class GeneralTextBase(BaseModel):
    key: str = Field(..., min_length=1, max_length=100, description="Clave del texto (ej: nav_projects)")
    text_es: str
    text_en: str

class GeneralTextCreate(GeneralTextBase):
    pass

class GeneralTextUpdate(PartialUpdate):
    not_null = ("text_es", "text_en")

    # La clave no cambia; si llega debe coincidir con la guardada
    key: Optional[str] = None
    text_es: Optional[str] = None
    text_en: Optional[str] = None

class GeneralTextResponse(GeneralTextBase):
    id: str

    class Config:
        from_attributes = True
