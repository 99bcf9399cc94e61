import logging
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError, jwt
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.config import settings
from app.core.core import allowed_roles
from app.core.exceptions import LoginRequiredException, NotAuthorizedException
from app.database import get_db
from app.models.user_role import UserRole

logger = logging.getLogger(__name__)

ADMIN_ROLES = ["admin"]

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/login", auto_error=False)

def verify_token(token: str) -> Optional[dict]:
    """Valida un access token de Supabase Auth con el JWT secret del proyecto."""
    try:
        return jwt.decode(
            token,
            settings.SUPABASE_JWT_SECRET,
            algorithms=[settings.JWT_ALGORITHM],
            audience=settings.JWT_AUDIENCE,
        )
    except JWTError as e:
        logger.info(f"[AUTH] Token inválido: {e}")
        return None

def get_session_token(
    request: Request,
    token: Optional[str] = Depends(oauth2_scheme),
) -> Optional[str]:
    """Cabecera Authorization: Bearer primero, si no la cookie de sesión."""
    return token or request.cookies.get(settings.SESSION_COOKIE_NAME)

def get_current_user_id(token: Optional[str] = Depends(get_session_token)) -> Optional[str]:
    """Id del usuario de Supabase, o None si no hay sesión válida (visitante)."""
    if not token:
        return None
    payload = verify_token(token)
    if payload is None:
        return None
    return payload.get("sub")

def get_user_role(db: Session, user_id: str) -> Optional[str]:
    row = db.query(UserRole).filter(UserRole.id == user_id).first()
    return row.role if row else None

def require_admin(
    user_id: Optional[str] = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> str:
    """
    Protege el grupo /admin.

    Sin sesión se redirige a /login; con sesión pero sin rol admin se responde
    con la página de no autorizado, sin redirección.
    """
    if user_id is None:
        raise LoginRequiredException()

    try:
        role = get_user_role(db, user_id)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"❌ Error consultando user_roles para {user_id}: {e}")
        raise NotAuthorizedException()

    if not allowed_roles(role, ADMIN_ROLES):
        logger.warning(f"⚠️ Acceso denegado a /admin para {user_id} (rol: {role})")
        raise NotAuthorizedException()

    return user_id
