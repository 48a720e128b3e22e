import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from src.depends import get_notification_service, get_session

import src.domain  # noqa: F401  registers the tables on SQLModel.metadata


class RecordingNotificationService:
    """Collects failure notifications instead of delivering them"""

    def __init__(self):
        self.sent = []

    async def notify_failure(self, user_id: str, message: str) -> bool:
        self.sent.append((user_id, message))
        return True


@pytest_asyncio.fixture(scope="function")
async def engine(tmp_path):
    """Create a file-backed SQLite engine so concurrent sessions share one database"""
    test_db_url = f"sqlite+aiosqlite:///{tmp_path / 'points_test.db'}"

    engine = create_async_engine(test_db_url, echo=False, future=True)

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine):
    return sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    """Create a new database session for each test"""
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def notifications():
    return RecordingNotificationService()


@pytest_asyncio.fixture
async def client(db_session, notifications):
    """Create test client with database session and notifier overrides"""
    from src.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)

    async def override_get_session():
        yield db_session

    app.dependency_overrides[get_session] = override_get_session
    app.dependency_overrides[get_notification_service] = lambda: notifications

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
