"""/health against a stand-in session, no database required."""

import warnings

import httpx
import pytest
import pytest_asyncio
from sqlalchemy.exc import OperationalError, ProgrammingError

from app.db.session import get_db
from app.main import app
from app.routers.health import _load_alembic_head

pytestmark = pytest.mark.unit

HEAD_REVISION = "0001_create_task_and_comment"


class _Scalar:
    def __init__(self, value):
        self.value = value

    def scalar_one_or_none(self):
        return self.value


class HealthSession:
    """Answers the two health queries; optionally without a version table or connection."""

    def __init__(self, *, reachable=True, version=None):
        self.reachable = reachable
        self.version = version
        self.rollbacks = 0

    async def execute(self, statement):
        sql = str(statement)
        if not self.reachable:
            raise OperationalError(sql, {}, Exception("connection refused"))
        if "alembic_version" in sql and self.version is None:
            raise ProgrammingError(sql, {}, Exception('relation "alembic_version" does not exist'))
        return _Scalar(self.version if "alembic_version" in sql else 1)

    async def rollback(self):
        self.rollbacks += 1


@pytest_asyncio.fixture
async def health_client():
    sessions = []

    def use(db_session):
        sessions.append(db_session)
        app.dependency_overrides[get_db] = lambda: db_session

    transport = httpx.ASGITransport(app=app)
    try:
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac, use
    finally:
        app.dependency_overrides.clear()


@pytest.mark.asyncio
async def test_health_without_version_table_rolls_back(health_client):
    client, use = health_client
    db_session = HealthSession(version=None)
    use(db_session)

    response = await client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["api_ok"] is True
    assert body["db_ok"] is True
    assert body["alembic_current"] is None
    assert body["alembic_head_ok"] is False
    assert body["alembic_head"] == HEAD_REVISION
    assert db_session.rollbacks == 1


@pytest.mark.asyncio
async def test_health_at_head_revision(health_client):
    client, use = health_client
    use(HealthSession(version=HEAD_REVISION))

    body = (await client.get("/health")).json()

    assert body["db_ok"] is True
    assert body["alembic_current"] == HEAD_REVISION
    assert body["alembic_head_ok"] is True


@pytest.mark.asyncio
async def test_health_with_unreachable_database(health_client):
    client, use = health_client
    db_session = HealthSession(reachable=False)
    use(db_session)

    response = await client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["api_ok"] is True
    assert body["db_ok"] is False
    assert body["alembic_head_ok"] is False
    assert db_session.rollbacks == 0


def test_alembic_config_loads_without_separator_warning():
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        head = _load_alembic_head()

    assert head == HEAD_REVISION
    assert not [w for w in caught if "path_separator" in str(w.message)]
