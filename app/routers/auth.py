import logging
from typing import Optional

from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import RedirectResponse
from fastapi.security import OAuth2PasswordRequestForm
from pydantic import ValidationError

from app.config import settings
from app.core.exceptions import AuthException
from app.core.security import get_current_user_id
from app.core.templating import templates
from app.schemas.auth import Login, Token
from app.services.supabase_auth import SupabaseAuth, get_auth_service

logger = logging.getLogger(__name__)

router = APIRouter()
page_router = APIRouter()

def _login_page(request: Request, error: str = "", email: str = "", status_code: int = 200):
    return templates.TemplateResponse(
        request,
        "login.html",
        {"error": error, "email": email},
        status_code=status_code,
    )

@page_router.get("/login", include_in_schema=False)
def login_page(request: Request, user_id: Optional[str] = Depends(get_current_user_id)):
    # Con sesión iniciada no tiene sentido volver a entrar
    if user_id:
        return RedirectResponse(url="/admin/", status_code=status.HTTP_303_SEE_OTHER)
    return _login_page(request)

@router.post("/login", include_in_schema=False)
def login(
    request: Request,
    email: str = Form(""),
    password: str = Form(""),
    auth: SupabaseAuth = Depends(get_auth_service)
):
    try:
        credentials = Login(email=email, password=password)
    except ValidationError:
        return _login_page(request, "Introduce un email y una contraseña válidos.", email, 400)

    try:
        access_token, _ = auth.sign_in(credentials.email, credentials.password)
    except AuthException as e:
        return _login_page(request, e.detail, email, status.HTTP_401_UNAUTHORIZED)

    response = RedirectResponse(url="/admin/", status_code=status.HTTP_303_SEE_OTHER)
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=access_token,
        httponly=True,
        secure=settings.COOKIE_SECURE,
        samesite="lax",
    )
    return response

@router.post("/token", response_model=Token)
def login_for_token(
    form_data: OAuth2PasswordRequestForm = Depends(),
    auth: SupabaseAuth = Depends(get_auth_service)
):
    """Login para clientes de la API: devuelve el access token de Supabase."""
    access_token, user = auth.sign_in(form_data.username, form_data.password)
    return {
        "access_token": access_token,
        "token_type": "bearer",
        "usuario": user.model_dump(),
    }

@router.post("/logout", include_in_schema=False)
def logout():
    response = RedirectResponse(url="/login", status_code=status.HTTP_303_SEE_OTHER)
    response.delete_cookie(settings.SESSION_COOKIE_NAME)
    return response
