from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from formsmith.api.deps import get_chatgpt_service
from formsmith.core.config import settings
from formsmith.db.session import Base, get_db
from formsmith.main import app
from formsmith.services.chatgpt_service import ChatGPTService


class FakeCompletions:
    def __init__(self, content=None, error=None):
        self.content = content
        self.error = error
        self.calls = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


class FakeOpenAI:
    def __init__(self, content=None, error=None):
        self.completions = FakeCompletions(content=content, error=error)
        self.chat = SimpleNamespace(completions=self.completions)


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def count_rows(session_factory):
    def _count(model):
        db = session_factory()
        try:
            return db.query(model).count()
        finally:
            db.close()
    return _count


@pytest.fixture
def fake_openai():
    return FakeOpenAI(content="{}")


@pytest.fixture
def client(session_factory, fake_openai):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_chatgpt_service] = lambda: ChatGPTService(client=fake_openai)
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def admin_client(client):
    response = client.post(
        "/api/auth/login",
        json={"username": settings.ADMIN_USERNAME, "password": settings.ADMIN_PASSWORD},
    )
    assert response.status_code == 200
    return client


@pytest.fixture
def contact_form():
    return {
        "title": "Contact",
        "sections": [
            {
                "title": "Info",
                "fields": [
                    {"label": "Name", "type": "TEXT", "required": True},
                    {"label": "Age", "type": "NUMBER", "required": False},
                ],
            }
        ],
    }


@pytest.fixture
def created_form(admin_client, contact_form):
    response = admin_client.post("/api/forms", json=contact_form)
    assert response.status_code == 201
    return response.json()
