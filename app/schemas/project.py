from pydantic import BaseModel, Field
from typing import List, Optional

from app.schemas.common import OrderedDraft, PartialUpdate

class ProjectBase(BaseModel):
    title_es: str = Field(..., min_length=1)
    title_en: str = Field(..., min_length=1)
    description_es: str = ""
    description_en: str = ""
    image_url: Optional[str] = None
    gallery_urls: List[str] = []
    tech: List[str] = []
    live_url: Optional[str] = None
    github_url: Optional[str] = None

class ProjectCreate(ProjectBase, OrderedDraft):
    """Si no se envía 'order' el proyecto se coloca al final."""

class ProjectUpdate(OrderedDraft, PartialUpdate):
    not_null = ("title_es", "title_en", "description_es", "description_en", "gallery_urls", "tech")

    title_es: Optional[str] = Field(None, min_length=1)
    title_en: Optional[str] = Field(None, min_length=1)
    description_es: Optional[str] = None
    description_en: Optional[str] = None
    image_url: Optional[str] = None
    gallery_urls: Optional[List[str]] = None
    tech: Optional[List[str]] = None
    live_url: Optional[str] = None
    github_url: Optional[str] = None

class ProjectResponse(ProjectBase):
    id: str
    order: int

    class Config:
        from_attributes = True

class ProjectReorderResponse(BaseModel):
    message: str
    items: List[ProjectResponse]
