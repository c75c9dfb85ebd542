"""
Pytest configuration and shared fixtures.
"""

import os

import httpx
import pytest
import pytest_asyncio

from app.core.dependencies import get_task_service
from app.main import app
from app.services.task_service import TaskService
from fakes import FakeCommentRepository, FakeSession, FakeTaskRepository, InMemoryStore


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests, no external deps")
    config.addinivalue_line("markers", "db: requires database")


def pytest_collection_modifyitems(config, items):
    run_db = os.environ.get("RUN_DB_TESTS") == "1"

    skip_db = pytest.mark.skip(reason="db tests skipped by default; set RUN_DB_TESTS=1 to enable")

    for item in items:
        if "db" in item.keywords and not run_db:
            item.add_marker(skip_db)


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def service(store, session) -> TaskService:
    """TaskService wired to in-memory repositories."""
    return TaskService(
        session,
        task_repository=FakeTaskRepository(store),
        comment_repository=FakeCommentRepository(store),
    )


@pytest_asyncio.fixture
async def client(service):
    """HTTP client against the app with the service dependency overridden."""
    app.dependency_overrides[get_task_service] = lambda: service
    transport = httpx.ASGITransport(app=app)
    try:
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac
    finally:
        app.dependency_overrides.clear()
