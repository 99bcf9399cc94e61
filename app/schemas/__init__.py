from .auth import *
from .common import *
from .general_text import *
from .hero import *
from .project import *
from .experience import *
from .technology import *
from .social_link import *
from .public import *

__all__ = [
    # Auth
    "Token", "Login", "SessionUser",

    # Comunes
    "ReorderRequest", "MoveRequest", "MessageResponse", "UploadResponse",

    # Textos generales
    "GeneralTextBase", "GeneralTextCreate", "GeneralTextUpdate", "GeneralTextResponse",

    # Hero
    "HeroBase", "HeroCreate", "HeroUpdate", "HeroResponse",

    # Proyectos
    "ProjectBase", "ProjectCreate", "ProjectUpdate", "ProjectResponse", "ProjectReorderResponse",

    # Experiencia
    "ExperienceBase", "ExperienceCreate", "ExperienceUpdate", "ExperienceResponse", "ExperienceReorderResponse",

    # Tecnologías
    "TechnologyCategory", "TechnologyBase", "TechnologyCreate", "TechnologyUpdate", "TechnologyResponse", "TechnologyReorderResponse",

    # Redes sociales
    "SocialLinkBase", "SocialLinkCreate", "SocialLinkUpdate", "SocialLinkResponse",

    # Sitio público
    "HeroView", "ProjectView", "ExperienceView", "TechnologyView", "SocialLinkView", "PageContent",
]
