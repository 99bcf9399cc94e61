from sqlalchemy import Column, String, Text
from app.models.base import BaseModel

class SocialLink(BaseModel):
    __tablename__ = "social_links"

    name = Column(String(100), nullable=False)
    url = Column(Text, nullable=False)
    display_text_es = Column(String(255), nullable=False, default="")
    display_text_en = Column(String(255), nullable=False, default="")
    icon_key = Column(String(50), nullable=False, default="link")
