# tests/conftest.py
import os
import pathlib
import tempfile

import pytest
from fastapi.testclient import TestClient

# Point the app to a throwaway SQLite file BEFORE importing it
TEST_DB_FILE = str(pathlib.Path(tempfile.gettempdir()) / "ai_interview_generate_test.sqlite")
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_FILE}"
os.environ.setdefault("API_PREFIX", "/api")

from main import app
from app.db.base import Base
from app.db.session import SessionLocal, engine
from app.services.openai_service import get_openai_service


class FakeOpenAIService:
    """Stands in for the generation provider; records every prompt it gets."""

    def __init__(self, text: str = '["Question 1", "Question 2"]'):
        self.text = text
        self.prompts: list[str] = []

    def generate_text(self, prompt: str) -> str:
        self.prompts.append(prompt)
        return self.text


@pytest.fixture(scope="function", autouse=True)
def reset_db():
    """Drop + recreate the schema so every test starts empty."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture(scope="function")
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture(scope="function")
def fake_llm():
    fake = FakeOpenAIService()
    app.dependency_overrides[get_openai_service] = lambda: fake
    yield fake
    app.dependency_overrides.pop(get_openai_service, None)


@pytest.fixture(scope="session")
def client():
    return TestClient(app)
