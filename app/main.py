# En main.py
import logging

from fastapi import Depends, FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, RedirectResponse

from app.config import settings
from app.core.exceptions import (
    ContentStoreError,
    LoginRequiredException,
    NotAuthorizedException,
    UploadError,
)
from app.core.security import require_admin
from app.core.templating import templates
from app.services.content import serialize_row
from app.routers import (
    admin,
    auth,
    experience,
    general_text,
    hero,
    projects,
    public,
    social_links,
    technologies,
    uploads,
)

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


app = FastAPI(
    title="Portafolio - API de contenido",
    description="Sitio público bilingüe y panel de administración del portafolio",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

# Configuración CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=[
        "Authorization",
        "Content-Type",
        "Accept",
        "Origin",
        "X-Requested-With",
    ],
    max_age=600,
)

# =======================================================
# Manejo de errores
# =======================================================
@app.exception_handler(LoginRequiredException)
async def login_required_handler(request: Request, exc: LoginRequiredException):
    return RedirectResponse(url=exc.login_url, status_code=status.HTTP_303_SEE_OTHER)

@app.exception_handler(NotAuthorizedException)
async def not_authorized_handler(request: Request, exc: NotAuthorizedException):
    return templates.TemplateResponse(
        request,
        "not_authorized.html",
        {"message": exc.message},
        status_code=status.HTTP_403_FORBIDDEN,
    )

@app.exception_handler(ContentStoreError)
async def content_store_error_handler(request: Request, exc: ContentStoreError):
    content = {"detail": exc.title, "description": exc.description}
    if exc.items is not None:
        # Estado real de la tabla tras un reorden fallido
        content["items"] = jsonable_encoder([serialize_row(item) for item in exc.items])
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=content,
    )

@app.exception_handler(UploadError)
async def upload_error_handler(request: Request, exc: UploadError):
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message, "description": exc.description},
    )

# Routers públicos
app.include_router(public.router, tags=["Sitio Público"])
app.include_router(auth.page_router, tags=["Autenticación"])
app.include_router(auth.router, prefix="/auth", tags=["Autenticación"])

# Panel de administración: sesión de Supabase + rol admin
admin_only = [Depends(require_admin)]
app.include_router(admin.router, prefix="/admin", tags=["Panel"], dependencies=admin_only)
app.include_router(general_text.router, prefix="/admin/general-text", tags=["Textos Generales"], dependencies=admin_only)
app.include_router(hero.router, prefix="/admin/hero", tags=["Hero"], dependencies=admin_only)
app.include_router(projects.router, prefix="/admin/projects", tags=["Proyectos"], dependencies=admin_only)
app.include_router(experience.router, prefix="/admin/experience", tags=["Experiencia"], dependencies=admin_only)
app.include_router(technologies.router, prefix="/admin/technologies", tags=["Tecnologías"], dependencies=admin_only)
app.include_router(social_links.router, prefix="/admin/social-links", tags=["Redes Sociales"], dependencies=admin_only)
app.include_router(uploads.router, prefix="/admin/uploads", tags=["Archivos"], dependencies=admin_only)

@app.get("/health")
def health_check():
    return {
        "status": "healthy",
        "service": "Portafolio API",
    }
