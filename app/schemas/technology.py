from pydantic import BaseModel, Field
from typing import List, Optional
from enum import Enum

from app.schemas.common import OrderedDraft, PartialUpdate

class TechnologyCategory(str, Enum):
    dominant = "dominant"
    knowledge = "knowledge"

class TechnologyBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    logo_url: Optional[str] = None
    category: TechnologyCategory = TechnologyCategory.knowledge

class TechnologyCreate(TechnologyBase, OrderedDraft):
    pass

class TechnologyUpdate(OrderedDraft, PartialUpdate):
    not_null = ("name", "category")

    name: Optional[str] = Field(None, min_length=1, max_length=100)
    logo_url: Optional[str] = None
    category: Optional[TechnologyCategory] = None

class TechnologyResponse(TechnologyBase):
    id: str
    order: int

    class Config:
        from_attributes = True

class TechnologyReorderResponse(BaseModel):
    message: str
    items: List[TechnologyResponse]
