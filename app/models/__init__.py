from .general_text import GeneralText
from .hero import Hero
from .project import Project
from .experience import Experience
from .technology import Technology
from .social_link import SocialLink
from .user_role import UserRole

__all__ = [
    "GeneralText", "Hero", "Project", "Experience", "Technology",
    "SocialLink", "UserRole"
]
