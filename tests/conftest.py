# /tests/conftest.py

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core import security
from app.core.exceptions import ConfigurationError
from app.db import base  # noqa: F401  (registers every model on Base.metadata)
from app.db.base_class import Base
from app.db.database import get_db
from app.main import app
from app.services.database_service import DatabaseService
from app.services.gemini_service import InlineImage
from app.services.groq_service import CompletionResult


# --- Provider test doubles ---

class FakeTextClient:
    """Stands in for GroqClient: returns a canned completion or raises."""

    def __init__(self, text="", finish_reason="stop", error=None, configured=True):
        self.text = text
        self.finish_reason = finish_reason
        self.error = error
        self.configured = configured
        self.calls = []

    @property
    def is_configured(self):
        return self.configured

    async def complete(self, user_message, system_message=None, temperature=0.7, max_tokens=1024, json_mode=False):
        if not self.configured:
            raise ConfigurationError("Groq API key is not configured")
        self.calls.append({
            "user_message": user_message,
            "system_message": system_message,
            "temperature": temperature,
            "max_tokens": max_tokens,
            "json_mode": json_mode,
        })
        if self.error:
            raise self.error
        return CompletionResult(text=self.text, finish_reason=self.finish_reason)


class FakeImageClient:
    """Stands in for GeminiImageClient."""

    def __init__(self, image=None, error=None, configured=True):
        self.image = image or InlineImage(data="aW1hZ2U=", mime_type="image/png")
        self.error = error
        self.configured = configured
        self.prompts = []

    @property
    def is_configured(self):
        return self.configured

    async def generate_image(self, prompt):
        if not self.configured:
            raise ConfigurationError("Gemini API key is not configured")
        self.prompts.append(prompt)
        if self.error:
            raise self.error
        return self.image


class FakeUploader:
    """Stands in for CloudinaryUploader."""

    def __init__(self, url="https://res.cloudinary.com/demo/image/upload/trendforge/thumb.png", error=None, configured=True):
        self.url = url
        self.error = error
        self.configured = configured
        self.uploads = []

    @property
    def is_configured(self):
        return self.configured

    async def upload_base64(self, base64_data, mime_type):
        self.uploads.append((base64_data, mime_type))
        if self.error:
            raise self.error
        return self.url


TEST_JWT_SECRET = "test-signing-secret"


@pytest.fixture(autouse=True)
def jwt_secret(monkeypatch):
    """Every test signs and verifies tokens with a known, test-only key."""
    monkeypatch.setenv("JWT_SECRET", TEST_JWT_SECRET)
    return TEST_JWT_SECRET


@pytest.fixture
def fake_text_client():
    return FakeTextClient


@pytest.fixture
def fake_image_client():
    return FakeImageClient


@pytest.fixture
def fake_uploader():
    return FakeUploader


# --- Database fixtures ---

@pytest.fixture
def db_session():
    """A fresh in-memory SQLite database per test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def db_service(db_session):
    return DatabaseService(db_session=db_session)


@pytest.fixture
def client(db_session):
    """TestClient wired to the in-memory database. Lifespan is not run."""
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def make_user(db_service):
    """Creates a user directly in the store and returns (user, auth_headers)."""
    counter = {"n": 0}

    def _make_user(name="Test User"):
        counter["n"] += 1
        user = db_service.add_user({
            "id": f"usr_test_{counter['n']}",
            "name": name,
            "email": f"user{counter['n']}@example.com",
            "password": security.hash_password("secret123"),
        })
        token = security.create_access_token(subject=user.id)
        return user, {"Authorization": f"Bearer {token}"}

    return _make_user
