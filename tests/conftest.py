"""
Fixtures compartidas: base de datos SQLite en memoria, cliente de Supabase
falso para Storage/Auth y tokens de sesión firmados con el JWT secret de pruebas.
"""
import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SUPABASE_URL", "https://proyecto.supabase.co")
os.environ.setdefault("SUPABASE_KEY", "anon-key")
os.environ.setdefault("SUPABASE_SERVICE_KEY", "service-key")
os.environ.setdefault("SUPABASE_JWT_SECRET", "jwt-secret-de-pruebas")

import time

import pytest
from fastapi.testclient import TestClient
from jose import jwt
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.config import settings
from app.core.exceptions import AuthException
from app.database import Base, get_db
from app.main import app
from app.models import UserRole
from app.schemas.auth import SessionUser
from app.services.supabase_auth import get_auth_service
from app.services.supabase_storage import SupabaseStorage, get_storage

ADMIN_ID = "0f8fad5b-d9cb-469f-a165-70867728950e"
EDITOR_ID = "7c9e6679-7425-40de-944b-e07fc1f90ae7"


# =============================================================================
# Supabase falso
# =============================================================================

class FakeBucket:
    def __init__(self, client, name):
        self.client = client
        self.name = name

    def upload(self, path, content, options=None):
        self.client.calls.append(("upload", self.name, path))
        if self.client.fail_with is not None:
            raise self.client.fail_with
        self.client.objects[(self.name, path)] = content
        return {"path": path}

    def get_public_url(self, path):
        self.client.calls.append(("get_public_url", self.name, path))
        return f"https://proyecto.supabase.co/storage/v1/object/public/{self.name}/{path}"


class FakeStorageAPI:
    def __init__(self, client):
        self.client = client

    def from_(self, bucket):
        return FakeBucket(self.client, bucket)


class FakeSupabaseClient:
    def __init__(self):
        self.calls = []
        self.objects = {}
        self.fail_with = None
        self.storage = FakeStorageAPI(self)


class FakeAuth:
    """Sustituye a SupabaseAuth: acepta una sola cuenta."""

    def __init__(self, email="admin@example.com", password="secreto123", user_id=ADMIN_ID):
        self.email = email
        self.password = password
        self.user_id = user_id

    def sign_in(self, email, password):
        if email != self.email or password != self.password:
            raise AuthException("Credenciales incorrectas")
        return make_token(self.user_id), SessionUser(id=self.user_id, email=email)


def make_token(user_id, expires_in=3600, audience=None, secret=None):
    claims = {
        "sub": user_id,
        "aud": audience or settings.JWT_AUDIENCE,
        "exp": int(time.time()) + expires_in,
        "role": "authenticated",
    }
    return jwt.encode(claims, secret or settings.SUPABASE_JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


# =============================================================================
# Base de datos
# =============================================================================

@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def statements(engine):
    """Sentencias SQL ejecutadas durante la prueba."""
    executed = []

    @event.listens_for(engine, "before_cursor_execute")
    def _record(conn, cursor, statement, parameters, context, executemany):
        executed.append(statement.strip().split()[0].upper())

    yield executed
    event.remove(engine, "before_cursor_execute", _record)


# =============================================================================
# Cliente HTTP
# =============================================================================

@pytest.fixture
def supabase_client():
    return FakeSupabaseClient()


@pytest.fixture
def client(session_factory, supabase_client):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_storage] = lambda: SupabaseStorage(client=supabase_client)
    app.dependency_overrides[get_auth_service] = lambda: FakeAuth()
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def roles(db):
    db.add_all([
        UserRole(id=ADMIN_ID, role="admin"),
        UserRole(id=EDITOR_ID, role="editor"),
    ])
    db.commit()


@pytest.fixture
def admin_client(client, roles):
    client.headers.update({"Authorization": f"Bearer {make_token(ADMIN_ID)}"})
    return client
