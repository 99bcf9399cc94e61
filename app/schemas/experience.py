from pydantic import BaseModel, Field
from typing import List, Optional

from app.schemas.common import OrderedDraft, PartialUpdate

class ExperienceBase(BaseModel):
    position_es: str = Field(..., min_length=1)
    position_en: str = Field(..., min_length=1)
    company: str = Field(..., min_length=1)
    period_es: str = Field(..., min_length=1)
    period_en: str = Field(..., min_length=1)
    description_items_es: List[str] = []
    description_items_en: List[str] = []
    technologies: List[str] = []

class ExperienceCreate(ExperienceBase, OrderedDraft):
    pass

class ExperienceUpdate(OrderedDraft, PartialUpdate):
    not_null = (
        "position_es", "position_en", "company", "period_es", "period_en",
        "description_items_es", "description_items_en", "technologies",
    )

    position_es: Optional[str] = Field(None, min_length=1)
    position_en: Optional[str] = Field(None, min_length=1)
    company: Optional[str] = Field(None, min_length=1)
    period_es: Optional[str] = Field(None, min_length=1)
    period_en: Optional[str] = Field(None, min_length=1)
    description_items_es: Optional[List[str]] = None
    description_items_en: Optional[List[str]] = None
    technologies: Optional[List[str]] = None

class ExperienceResponse(ExperienceBase):
    id: str
    order: int

    class Config:
        from_attributes = True

class ExperienceReorderResponse(BaseModel):
    message: str
    items: List[ExperienceResponse]
