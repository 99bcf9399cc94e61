from datetime import datetime
from typing import Dict, Optional
from urllib.parse import urlparse

from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.responses import RedirectResponse
from sqlalchemy.orm import Session

from app.config import settings
from app.core.i18n import Language, Translator, parse_language
from app.core.templating import templates
from app.database import get_db
from app.schemas.public import PageContent
from app.services.page_content import load_general_text, load_page_content

router = APIRouter()

def get_language(request: Request, lang: Optional[str] = Query(None)) -> Language:
    """Idioma de la petición: ?lang= si viene, si no la cookie 'lang' (por defecto es)."""
    return parse_language(lang or request.cookies.get(settings.LANG_COOKIE_NAME))

def _safe_back_url(request: Request) -> str:
    referer = request.headers.get("referer")
    if not referer:
        return "/"
    parsed = urlparse(referer)
    # Solo se vuelve a rutas de este mismo sitio
    if parsed.netloc and parsed.netloc != request.url.netloc:
        return "/"
    path = parsed.path or "/"
    return f"{path}?{parsed.query}" if parsed.query else path

@router.get("/", include_in_schema=False)
def home(request: Request, lang: Language = Depends(get_language), db: Session = Depends(get_db)):
    content = load_page_content(db, lang)
    translator = Translator(content.texts, lang)
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "content": content,
            "lang": lang.value,
            "t": translator.t,
            "current_year": datetime.now().year,
        },
    )

@router.get("/api/content", response_model=PageContent)
def get_page_content(lang: Language = Depends(get_language), db: Session = Depends(get_db)):
    """Todo el contenido público proyectado al idioma pedido."""
    return load_page_content(db, lang)

@router.get("/api/general-text", response_model=Dict[str, str])
def get_general_text(lang: Language = Depends(get_language), db: Session = Depends(get_db)):
    return load_general_text(db, lang)

@router.api_route("/lang/{lang}", methods=["GET", "POST"], include_in_schema=False)
def set_language(lang: Language, request: Request):
    """Guarda el idioma en la cookie 'lang' (30 días) y vuelve a la página anterior."""
    response = RedirectResponse(url=_safe_back_url(request), status_code=status.HTTP_303_SEE_OTHER)
    response.set_cookie(
        key=settings.LANG_COOKIE_NAME,
        value=lang.value,
        max_age=settings.LANG_COOKIE_MAX_AGE,
        samesite="lax",
    )
    return response
