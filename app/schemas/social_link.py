from pydantic import BaseModel, Field, field_validator
from typing import Optional

from app.core.icons import ICON_OPTIONS, normalize_icon_key
from app.schemas.common import PartialUpdate

def _validate_icon(value):
    if value is None:
        return value
    key = normalize_icon_key(value)
    if key is None:
        raise ValueError(f"Icono no válido. Iconos válidos: {list(ICON_OPTIONS)}")
    return key

class SocialLinkBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    url: str = Field(..., min_length=1)
    display_text_es: str = ""
    display_text_en: str = ""
    icon_key: str = "link"

class SocialLinkCreate(SocialLinkBase):
    @field_validator("icon_key")
    @classmethod
    def icon_is_known(cls, v):
        return _validate_icon(v)

class SocialLinkUpdate(PartialUpdate):
    not_null = ("name", "url", "display_text_es", "display_text_en", "icon_key")

    name: Optional[str] = Field(None, min_length=1, max_length=100)
    url: Optional[str] = Field(None, min_length=1)
    display_text_es: Optional[str] = None
    display_text_en: Optional[str] = None
    icon_key: Optional[str] = None

    @field_validator("icon_key")
    @classmethod
    def icon_is_known(cls, v):
        return _validate_icon(v)

class SocialLinkResponse(SocialLinkBase):
    id: str

    class Config:
        from_attributes = True
