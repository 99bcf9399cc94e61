from sqlalchemy import Column, Integer, String, Text
from app.models.base import BaseModel, StringList

class Project(BaseModel):
    __tablename__ = "projects"

    order = Column("order", Integer, nullable=False, default=0, index=True)
    title_es = Column(String(255), nullable=False)
    title_en = Column(String(255), nullable=False)
    description_es = Column(Text, nullable=False, default="")
    description_en = Column(Text, nullable=False, default="")
    image_url = Column(Text, nullable=True)
    gallery_urls = Column(StringList, nullable=False, default=list)
    tech = Column(StringList, nullable=False, default=list)
    live_url = Column(Text, nullable=True)
    github_url = Column(Text, nullable=True)
