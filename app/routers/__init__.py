from .public import router as public_router
from .auth import router as auth_router
from .admin import router as admin_router
from .general_text import router as general_text_router
from .hero import router as hero_router
from .projects import router as projects_router
from .experience import router as experience_router
from .technologies import router as technologies_router
from .social_links import router as social_links_router
from .uploads import router as uploads_router

__all__ = [
    "public_router", "auth_router", "admin_router", "general_text_router",
    "hero_router", "projects_router", "experience_router", "technologies_router",
    "social_links_router", "uploads_router"
]
