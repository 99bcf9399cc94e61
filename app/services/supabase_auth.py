# app/services/supabase_auth.py
import logging
from typing import Callable, Optional

from supabase import Client, create_client

from app.config import settings
from app.core.exceptions import AuthException
from app.schemas.auth import SessionUser

logger = logging.getLogger(__name__)


def _anon_client() -> Client:
    return create_client(settings.SUPABASE_URL, settings.SUPABASE_KEY)


class SupabaseAuth:
    """Login delegado en Supabase Auth; aquí solo se recoge el access token."""

    def __init__(self, client_factory: Optional[Callable[[], Client]] = None):
        # Un cliente por login: el cliente de supabase guarda la sesión en memoria
        self.client_factory = client_factory or _anon_client

    def sign_in(self, email: str, password: str) -> tuple:
        try:
            response = self.client_factory().auth.sign_in_with_password(
                {"email": email, "password": password}
            )
        except Exception as e:
            logger.warning(f"[AUTH] Login fallido para {email}: {e}")
            raise AuthException("Credenciales incorrectas")

        if not response.session or not response.user:
            raise AuthException("Credenciales incorrectas")

        logger.info(f"[AUTH] Usuario autenticado: {email}")
        user = SessionUser(id=str(response.user.id), email=response.user.email)
        return response.session.access_token, user


auth_service = SupabaseAuth()

def get_auth_service() -> SupabaseAuth:
    return auth_service
