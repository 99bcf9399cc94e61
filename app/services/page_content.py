# app/services/page_content.py
"""
Carga del contenido del sitio público en el idioma pedido.

Cada sección se lee por separado: si una falla se registra el error y la
sección queda vacía, el resto de la página se sigue mostrando.
"""
import logging
from typing import Callable, Dict, List, Optional, TypeVar

from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.i18n import Language, build_dictionary, project_record
from app.core.icons import normalize_icon_key
from app.models import Experience, GeneralText, Hero, Project, SocialLink, Technology
from app.schemas.public import (
    ExperienceView,
    HeroView,
    PageContent,
    ProjectView,
    SocialLinkView,
    TechnologyView,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _safe_load(db: Session, section: str, loader: Callable[[], T], fallback: T) -> T:
    try:
        return loader()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"❌ Error cargando la sección '{section}': {e}")
        return fallback
    except ValidationError as e:
        # Fila con datos que no encajan en la vista (ej. null dentro de un text[])
        logger.error(f"❌ Datos inválidos en la sección '{section}': {e}")
        return fallback


def load_general_text(db: Session, lang: Language) -> Dict[str, str]:
    def loader():
        rows = db.query(GeneralText).order_by(GeneralText.key.asc()).all()
        return build_dictionary(rows, lang)
    return _safe_load(db, "general_text", loader, {})


def load_hero(db: Session, lang: Language) -> Optional[HeroView]:
    def loader():
        hero = db.query(Hero).order_by(Hero.created_at.asc()).first()
        if hero is None:
            return None
        return HeroView(**project_record(hero, ["greeting", "subtitle"], ["title", "cv_url"], lang))
    return _safe_load(db, "hero", loader, None)


def load_projects(db: Session, lang: Language) -> List[ProjectView]:
    def loader():
        rows = db.query(Project).order_by(Project.order.asc(), Project.created_at.asc()).all()
        return [
            ProjectView(**project_record(
                p,
                ["title", "description"],
                ["id", "image_url", "gallery_urls", "tech", "live_url", "github_url"],
                lang,
            ))
            for p in rows
        ]
    return _safe_load(db, "projects", loader, [])


def load_experience(db: Session, lang: Language) -> List[ExperienceView]:
    def loader():
        rows = db.query(Experience).order_by(Experience.order.asc(), Experience.created_at.asc()).all()
        return [
            ExperienceView(**project_record(
                e,
                ["position", "period", "description_items"],
                ["id", "company", "technologies"],
                lang,
            ))
            for e in rows
        ]
    return _safe_load(db, "experience", loader, [])


def load_technologies(db: Session) -> List[TechnologyView]:
    def loader():
        rows = db.query(Technology).order_by(Technology.order.asc(), Technology.created_at.asc()).all()
        return [
            TechnologyView(id=t.id, name=t.name, logo_url=t.logo_url, category=t.category)
            for t in rows
        ]
    return _safe_load(db, "technologies", loader, [])


def load_social_links(db: Session, lang: Language) -> List[SocialLinkView]:
    def loader():
        links = []
        for link in db.query(SocialLink).order_by(SocialLink.name.asc()).all():
            icon = normalize_icon_key(link.icon_key)
            if icon is None:
                # Sin icono conocido no se renderiza
                logger.warning(f"⚠️ Icono no encontrado: {link.icon_key}")
                continue
            data = project_record(link, ["display_text"], ["name", "url"], lang)
            links.append(SocialLinkView(icon=icon, **data))
        return links
    return _safe_load(db, "social_links", loader, [])


def load_page_content(db: Session, lang: Language) -> PageContent:
    return PageContent(
        lang=lang,
        hero=load_hero(db, lang),
        projects=load_projects(db, lang),
        experience=load_experience(db, lang),
        technologies=load_technologies(db),
        social_links=load_social_links(db, lang),
        texts=load_general_text(db, lang),
    )
