from pydantic import BaseModel
from typing import Optional

from app.schemas.common import PartialUpdate

class HeroBase(BaseModel):
    greeting_es: str
    greeting_en: str
    title: str
    subtitle_es: str
    subtitle_en: str
    cv_url: Optional[str] = None

class HeroCreate(HeroBase):
    pass

class HeroUpdate(PartialUpdate):
    not_null = ("greeting_es", "greeting_en", "title", "subtitle_es", "subtitle_en")

    greeting_es: Optional[str] = None
    greeting_en: Optional[str] = None
    title: Optional[str] = None
    subtitle_es: Optional[str] = None
    subtitle_en: Optional[str] = None
    cv_url: Optional[str] = None

class HeroResponse(HeroBase):
    id: str

    class Config:
        from_attributes = True
