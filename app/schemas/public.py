from pydantic import BaseModel
from typing import Dict, List, Optional

from app.core.i18n import Language

class HeroView(BaseModel):
    greeting: str
    title: str
    subtitle: str
    cv_url: Optional[str] = None

class ProjectView(BaseModel):
    id: str
    title: str
    description: str
    image_url: Optional[str] = None
    gallery_urls: List[str] = []
    tech: List[str] = []
    live_url: Optional[str] = None
    github_url: Optional[str] = None

class ExperienceView(BaseModel):
    id: str
    position: str
    company: str
    period: str
    description_items: List[str] = []
    technologies: List[str] = []

class TechnologyView(BaseModel):
    id: str
    name: str
    logo_url: Optional[str] = None
    category: str

class SocialLinkView(BaseModel):
    name: str
    url: str
    display_text: str
    icon: str

class PageContent(BaseModel):
    lang: Language
    hero: Optional[HeroView] = None
    projects: List[ProjectView] = []
    experience: List[ExperienceView] = []
    technologies: List[TechnologyView] = []
    social_links: List[SocialLinkView] = []
    texts: Dict[str, str] = {}
