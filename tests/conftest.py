# Set environment variables before the application modules read their settings
import os

os.environ["TESTING"] = "True"
os.environ["OPENAI_API_KEY"] = ""
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["LOG_FILE"] = "logs/test.log"
os.environ.pop("REDIS_URL", None)

import json
from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool
from sqlmodel import Session, SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from dsa_companion.business.services import create_access_token, generate_password_hash
from dsa_companion.config import logger
from dsa_companion.data.repositories import get_model_client, get_session
from dsa_companion.data.schemas import Problem, User
from dsa_companion.main import app


class FakeModelClient:
    """Stands in for the model provider; replies are queued by each test."""

    def __init__(self):
        self.replies = []
        self.calls = []

    def queue(self, reply):
        if isinstance(reply, (dict, list)):
            reply = json.dumps(reply)
        self.replies.append(reply)

    async def complete(self, prompt, temperature):
        self.calls.append({"prompt": prompt, "temperature": temperature})
        if not self.replies:
            raise AssertionError("Unexpected call to the model provider")
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply


# Each test gets its own SQLite file, shared by a sync engine (fixtures and
# assertions) and an async engine (the application).
@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "test.db"


@pytest.fixture
def sync_engine(db_path):
    engine = create_engine(f"sqlite:///{db_path}")
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def test_db(sync_engine):
    with Session(sync_engine) as session:
        yield session


@pytest.fixture
def async_engine(db_path, sync_engine):
    return create_async_engine(f"sqlite+aiosqlite:///{db_path}", poolclass=NullPool)


@pytest.fixture
def async_session(async_engine):
    return async_sessionmaker(
        bind=async_engine, class_=AsyncSession, expire_on_commit=False
    )


@pytest.fixture
def override_get_session(async_session):
    async def _get_session():
        async with async_session() as session:
            yield session

    return _get_session


@pytest.fixture
def model_client():
    return FakeModelClient()


@pytest.fixture
def client(override_get_session, model_client):
    app.dependency_overrides[get_session] = override_get_session
    app.dependency_overrides[get_model_client] = lambda: model_client

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def test_user(test_db):
    user = User(
        username="testuser",
        email="testuser@example.com",
        password_hash=generate_password_hash("password123"),
    )
    test_db.add(user)
    test_db.commit()
    test_db.refresh(user)
    return user


@pytest.fixture
def auth_headers(test_user):
    return {"Authorization": f"Bearer {create_access_token(test_user.id)}"}


@pytest.fixture
def make_problem(test_db):
    """Insert a problem row directly; rows get increasing created_at values."""
    base_time = datetime(2024, 1, 1, tzinfo=timezone.utc)
    counter = {"n": 0}

    def _make_problem(**overrides):
        counter["n"] += 1
        fields = {
            "title": f"Problem {counter['n']}",
            "description": "Return the sum of two integers.",
            "difficulty": "easy",
            "category": "arrays",
            "test_cases": json.dumps(
                [{"input": "1,2", "output": "3", "explanation": "sum"}]
            ),
            "solution_template": "function solution(a, b) {}",
            "created_at": base_time + timedelta(minutes=counter["n"]),
        }
        fields.update(overrides)
        problem = Problem(**fields)
        test_db.add(problem)
        test_db.commit()
        test_db.refresh(problem)
        return problem

    return _make_problem


# Disable logging during tests
@pytest.fixture(autouse=True)
def disable_logging():
    logger.disabled = True
    yield
    logger.disabled = False
