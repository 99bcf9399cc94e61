from typing import Any, Dict, List, NamedTuple, Optional, Type, get_args, get_origin

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import RedirectResponse
from pydantic import BaseModel, ValidationError
from sqlalchemy.orm import Session

from app.core.exceptions import ContentStoreError
from app.core.icons import ICON_OPTIONS
from app.core.ordering import Direction
from app.core.templating import templates
from app.database import get_db
from app.schemas.experience import ExperienceCreate, ExperienceUpdate
from app.schemas.general_text import GeneralTextCreate, GeneralTextUpdate
from app.schemas.hero import HeroCreate, HeroUpdate
from app.schemas.project import ProjectCreate, ProjectUpdate
from app.schemas.social_link import SocialLinkCreate, SocialLinkUpdate
from app.schemas.technology import TechnologyCreate, TechnologyUpdate
from app.services.content import (
    ContentRepository,
    ExperienceRepository,
    GeneralTextRepository,
    HeroRepository,
    OrderedContentRepository,
    ProjectRepository,
    SocialLinkRepository,
    TechnologyRepository,
)

router = APIRouter()


class AdminSection(NamedTuple):
    title: str
    repository: Type[ContentRepository]
    create_schema: Type[BaseModel]
    update_schema: Type[BaseModel]


# Secciones del panel: ruta de la API -> sección
SECTIONS: Dict[str, AdminSection] = {
    "general-text": AdminSection("Textos Generales", GeneralTextRepository, GeneralTextCreate, GeneralTextUpdate),
    "hero": AdminSection("Sección Hero", HeroRepository, HeroCreate, HeroUpdate),
    "projects": AdminSection("Proyectos", ProjectRepository, ProjectCreate, ProjectUpdate),
    "experience": AdminSection("Experiencia", ExperienceRepository, ExperienceCreate, ExperienceUpdate),
    "technologies": AdminSection("Tecnologías", TechnologyRepository, TechnologyCreate, TechnologyUpdate),
    "social-links": AdminSection("Redes Sociales", SocialLinkRepository, SocialLinkCreate, SocialLinkUpdate),
}

DEFAULT_SECTION = "projects"

# Avisos tras redirigir desde un formulario (?done=...)
UNCHANGED = "unchanged"


def _is_list(annotation) -> bool:
    if get_origin(annotation) is list:
        return True
    return any(get_origin(arg) is list for arg in get_args(annotation))


def form_fields(schema: Type[BaseModel], item: Any = None) -> List[Dict[str, Any]]:
    """Campos de un formulario a partir del esquema; con 'item' se rellenan sus valores."""
    fields = []
    for name, info in schema.model_fields.items():
        is_list = _is_list(info.annotation)
        value = getattr(item, name, None) if item is not None else None
        if is_list:
            value = "\n".join(value or [])
        elif value is None:
            value = ""
        fields.append({
            "name": name,
            "is_list": is_list,
            "required": info.is_required(),
            "value": getattr(value, "value", value),
        })
    return fields


def parse_form(form, schema: Type[BaseModel]) -> Dict[str, Any]:
    """
    Convierte el formulario en el dict que valida el esquema. Los campos de
    lista llegan como textarea, un elemento por línea; los textos vacíos se
    omiten para que apliquen los valores por defecto.
    """
    data = {}
    for name, info in schema.model_fields.items():
        if name not in form:
            continue
        raw = form.get(name)
        if _is_list(info.annotation):
            data[name] = [line.strip() for line in raw.splitlines() if line.strip()]
        elif raw.strip():
            data[name] = raw.strip()
    return data


def _section(section: str) -> AdminSection:
    if section not in SECTIONS:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Sección no encontrada")
    return SECTIONS[section]


def _back(section: str, done: str) -> RedirectResponse:
    return RedirectResponse(url=f"/admin/?section={section}&done={done}", status_code=status.HTTP_303_SEE_OTHER)


def _validation_notice(error: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in e['loc']) or 'formulario'}: {e['msg']}"
        for e in error.errors()
    )


def render_section(
    request: Request,
    db: Session,
    section: str,
    notice: Optional[Dict[str, str]] = None,
    edit_id: Optional[str] = None,
    status_code: int = 200,
):
    current = SECTIONS[section]
    repo = current.repository(db)
    items: List[Any] = []
    editing = None
    try:
        items = repo.list()
    except ContentStoreError as e:
        # La sección queda vacía y el error se muestra como aviso
        notice = {"kind": "error", "title": e.title, "description": e.description or ""}

    if edit_id:
        editing = next((item for item in items if str(item.id) == edit_id), None)

    return templates.TemplateResponse(
        request,
        "admin.html",
        {
            "sections": {key: value.title for key, value in SECTIONS.items()},
            "active_section": section,
            "title": current.title,
            "items": items,
            "ordered": issubclass(current.repository, OrderedContentRepository),
            "create_fields": form_fields(current.create_schema),
            "editing": editing,
            "edit_fields": form_fields(current.update_schema, editing) if editing is not None else [],
            "notice": notice,
            "icon_options": ICON_OPTIONS,
        },
        status_code=status_code,
    )


@router.get("/", include_in_schema=False)
def admin_home(
    request: Request,
    section: str = DEFAULT_SECTION,
    done: Optional[str] = None,
    edit: Optional[str] = None,
    db: Session = Depends(get_db),
):
    if section not in SECTIONS:
        section = DEFAULT_SECTION
    notice = None
    if done:
        messages = SECTIONS[section].repository.messages
        text = "Sin cambios" if done == UNCHANGED else messages.get(done)
        if text:
            notice = {"kind": "success", "title": text, "description": ""}
    return render_section(request, db, section, notice=notice, edit_id=edit)


async def _submit(request: Request, db: Session, section: str, schema: Type[BaseModel], save, done: str):
    form = await request.form()
    try:
        draft = schema(**parse_form(form, schema))
        save(draft)
    except ValidationError as e:
        notice = {"kind": "error", "title": "Revisa el formulario", "description": _validation_notice(e)}
        return render_section(request, db, section, notice=notice, status_code=status.HTTP_400_BAD_REQUEST)
    except ContentStoreError as e:
        notice = {"kind": "error", "title": e.title, "description": e.description or ""}
        return render_section(request, db, section, notice=notice, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
    except HTTPException as e:
        notice = {"kind": "error", "title": str(e.detail), "description": ""}
        return render_section(request, db, section, notice=notice, status_code=e.status_code)
    return _back(section, done)


@router.post("/forms/{section}", include_in_schema=False)
async def create_from_form(section: str, request: Request, db: Session = Depends(get_db)):
    current = _section(section)
    repo = current.repository(db)
    return await _submit(request, db, section, current.create_schema, repo.create, "saved")


@router.post("/forms/{section}/{item_id}", include_in_schema=False)
async def update_from_form(section: str, item_id: str, request: Request, db: Session = Depends(get_db)):
    current = _section(section)
    repo = current.repository(db)
    return await _submit(
        request, db, section, current.update_schema,
        lambda patch: repo.update(item_id, patch), "saved",
    )


@router.post("/forms/{section}/{item_id}/delete", include_in_schema=False)
def delete_from_form(section: str, item_id: str, request: Request, db: Session = Depends(get_db)):
    current = _section(section)
    try:
        current.repository(db).delete(item_id)
    except ContentStoreError as e:
        notice = {"kind": "error", "title": e.title, "description": e.description or ""}
        return render_section(request, db, section, notice=notice, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
    return _back(section, "deleted")


@router.post("/forms/{section}/{item_id}/move/{direction}", include_in_schema=False)
def move_from_form(
    section: str,
    item_id: str,
    direction: Direction,
    request: Request,
    db: Session = Depends(get_db),
):
    current = _section(section)
    if not issubclass(current.repository, OrderedContentRepository):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Esta sección no tiene orden")
    try:
        items = current.repository(db).move(item_id, direction)
    except ContentStoreError as e:
        notice = {"kind": "error", "title": e.title, "description": e.description or ""}
        return render_section(request, db, section, notice=notice, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
    return _back(section, UNCHANGED if items is None else "reordered")
