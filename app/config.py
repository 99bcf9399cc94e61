# app/config.py

from pydantic_settings import BaseSettings
from typing import List

class Settings(BaseSettings):
    # Database (Postgres de Supabase)
    DATABASE_URL: str

    # Supabase
    SUPABASE_URL: str
    SUPABASE_KEY: str      # anon public key
    SUPABASE_SERVICE_KEY: str  # service_role key, solo para Storage
    SUPABASE_JWT_SECRET: str

    # Sesión
    JWT_ALGORITHM: str = "HS256"
    JWT_AUDIENCE: str = "authenticated"
    SESSION_COOKIE_NAME: str = "access_token"
    COOKIE_SECURE: bool = False

    # Idioma
    LANG_COOKIE_NAME: str = "lang"
    LANG_COOKIE_MAX_AGE: int = 60 * 60 * 24 * 30  # 30 días

    # Storage
    STORAGE_BUCKETS: str = "projects,technologies,cvs"
    MAX_UPLOAD_MB: int = 10

    # CORS
    FRONTEND_URLS: str = "http://localhost:3000,http://localhost:8000"

    LOG_LEVEL: str = "INFO"

    @property
    def allowed_origins(self) -> List[str]:
        urls = self.FRONTEND_URLS.split(",")
        all_urls = []
        for url in urls:
            url = url.strip()
            if url:
                all_urls.append(url)
                # Añadir versión HTTPS si es HTTP
                if url.startswith("http://"):
                    all_urls.append(url.replace("http://", "https://"))
        return all_urls

    @property
    def buckets(self) -> List[str]:
        return [b.strip() for b in self.STORAGE_BUCKETS.split(",") if b.strip()]

    class Config:
        env_file = ".env"

settings = Settings()
