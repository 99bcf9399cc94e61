# app/core/exceptions.py

from typing import Optional

from fastapi import HTTPException, status

class AuthException(HTTPException):
    def __init__(self, detail: str):
        super().__init__(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail)

class ForbiddenException(HTTPException):
    def __init__(self, detail: str = "No tiene permisos para realizar esta acción"):
        super().__init__(status_code=status.HTTP_403_FORBIDDEN, detail=detail)

class NotFoundException(HTTPException):
    def __init__(self, detail: str = "Recurso no encontrado"):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)

class ImmutableFieldError(HTTPException):
    def __init__(self, field: str):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"El campo '{field}' no se puede modificar"
        )

# =======================================================
# Control de acceso al panel /admin
# =======================================================
class LoginRequiredException(Exception):
    """Sin sesión válida: se redirige a /login."""
    def __init__(self, login_url: str = "/login"):
        self.login_url = login_url
        super().__init__(login_url)

class NotAuthorizedException(Exception):
    """Sesión válida pero sin rol admin: se muestra la página de no autorizado."""
    def __init__(self, message: str = "No estás autorizado."):
        self.message = message
        super().__init__(message)

# =======================================================
# Errores del almacén (Supabase Postgres / Storage)
# =======================================================
class ContentStoreError(Exception):
    """
    Fallo al leer o escribir en la base de datos.

    'title' es el mensaje que decide cada fachada (ej. "Error al borrar proyecto")
    y 'description' el texto tal cual lo devuelve el almacén. En un reorden
    fallido 'items' lleva la tabla tal como quedó tras el rollback.
    """
    def __init__(self, title: str, description: Optional[str] = None, items: Optional[list] = None):
        self.title = title
        self.description = description
        self.items = items
        super().__init__(f"{title}: {description}" if description else title)

class UploadError(Exception):
    def __init__(self, message: str, description: Optional[str] = None, status_code: int = 400):
        self.message = message
        self.description = description
        self.status_code = status_code
        super().__init__(message)

class UploadInProgressError(UploadError):
    def __init__(self):
        super().__init__("Ya hay una subida en curso.", status_code=409)
