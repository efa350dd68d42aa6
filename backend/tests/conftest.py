"""
Test Configuration for the Job Board API

Fixtures for an in-memory database, an HTTP client bound to the app,
and factories for users and jobs.
"""

import os

os.environ.setdefault("SECRET_KEY", "test-secret-key-not-for-production")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("TESTING", "true")
os.environ.setdefault("DEBUG", "false")

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional
from unittest.mock import MagicMock

import pytest
from httpx import ASGITransport, AsyncClient

from jobboard.api.deps import get_job_search_service, get_storage_service
from jobboard.core.database import db_manager, get_db_session_context
from jobboard.core.security import get_security_manager
from jobboard.main import create_app
from jobboard.models.job import Job
from jobboard.repositories.user_repository import UserRepository
from jobboard.services.search_service import JobSearchService, TypesenseService
from jobboard.services.storage_service import StorageService

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"
TEST_PASSWORD = "correct-horse-battery"


@pytest.fixture
async def database():
    """Fresh schema for each test."""
    await db_manager.init_database(TEST_DATABASE_URL)
    await db_manager.create_tables()
    yield db_manager
    await db_manager.drop_tables()
    await db_manager.close_connections()


@pytest.fixture
async def db_session(database):
    """Session for repository tests. Changes are rolled back afterwards."""
    async with database.session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
def job_factory(database):
    """Insert and commit a job."""
    async def create(**overrides: Any) -> Job:
        values: Dict[str, Any] = {
            "title": "Product Manager",
            "employer_name": "Acme Corp",
            "employer_logo_url": "https://cdn.example.com/acme.png",
            "city": "Austin",
            "state": "TX",
            "country": "US",
            "job_type": "full-time",
            "is_remote": False,
            "is_active": True,
        }
        values.update(overrides)
        async with get_db_session_context() as session:
            job = Job(**values)
            session.add(job)
            await session.flush()
            await session.refresh(job)
        return job

    return create


@pytest.fixture
def user_factory(database):
    """Insert and commit a user with an empty profile."""
    counter = {"value": 0}

    async def create(email: Optional[str] = None, role: str = "user", status: str = "active"):
        counter["value"] += 1
        email = email or f"user{counter['value']}@example.com"
        async with get_db_session_context() as session:
            repo = UserRepository(session)
            user = await repo.create_user(
                email=email,
                full_name="Test User",
                password_hash=get_security_manager().hash_password(TEST_PASSWORD),
                role=role,
            )
            if status != "active":
                user.status = status
                await session.flush()
        return user

    return create


@pytest.fixture
def test_password() -> str:
    return TEST_PASSWORD


@pytest.fixture
async def test_user(user_factory):
    return await user_factory(email="jane@example.com")


def make_auth_headers(user_id: int) -> Dict[str, str]:
    token = get_security_manager().create_access_token({"sub": str(user_id)})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def auth_headers(test_user) -> Dict[str, str]:
    return make_auth_headers(test_user.id)


@pytest.fixture
def mock_bucket():
    """Stand-in for a Firebase storage bucket."""
    bucket = MagicMock()
    bucket.name = "jobboard-test.appspot.com"
    return bucket


@pytest.fixture
def mock_typesense_client():
    """Stand-in for a typesense.Client returning an empty result."""
    client = MagicMock()
    client.collections.__getitem__.return_value.documents.search.return_value = {
        "found": 0,
        "page": 1,
        "hits": [],
    }
    return client


@pytest.fixture
def app(database, mock_bucket, mock_typesense_client):
    application = create_app()
    application.dependency_overrides[get_storage_service] = lambda: StorageService(mock_bucket)
    application.dependency_overrides[get_job_search_service] = lambda: JobSearchService(
        TypesenseService(mock_typesense_client, collection="jobs")
    )
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
async def test_client(app):
    """Async HTTP client for API tests."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


@pytest.fixture
def past_deadline() -> datetime:
    return datetime.now(timezone.utc) - timedelta(days=1)
