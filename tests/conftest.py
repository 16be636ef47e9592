"""
Pytest configuration for the task manager backend tests.

Every test gets a fresh in-memory SQLite database. Service tests use the
``db`` session directly; API tests go through ``client``, whose requests
each get their own session on the same database.
"""

import os

os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("SEED_ON_STARTUP", "false")

import uuid
from collections.abc import AsyncGenerator, Awaitable, Callable

import httpx
import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from app.core.database import build_engine, build_sessionmaker, get_db, init_models
from app.core.security import create_access_token, hash_password
from app.main import app
from app.models import Label, TaskStatus, User, UserRole


def unique_email(prefix: str = "user") -> str:
    return f"{prefix}_{uuid.uuid4().hex[:8]}@example.com"


# ---------------------------------------------------------------------------
# Database
# ---------------------------------------------------------------------------

@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    engine = build_engine("sqlite+aiosqlite:///:memory:")
    await init_models(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def db(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    async with build_sessionmaker(engine)() as session:
        yield session


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------

@pytest_asyncio.fixture
async def make_user(db: AsyncSession) -> Callable[..., Awaitable[User]]:
    async def _make(
        email: str | None = None,
        password: str = "secret",
        role: UserRole = UserRole.USER,
        **fields,
    ) -> User:
        user = User(
            email=email or unique_email(),
            password_digest=hash_password(password),
            role=role,
            **fields,
        )
        db.add(user)
        await db.flush()
        return user

    return _make


@pytest_asyncio.fixture
async def make_status(db: AsyncSession) -> Callable[..., Awaitable[TaskStatus]]:
    async def _make(slug: str, name: str | None = None) -> TaskStatus:
        status = TaskStatus(name=name or slug.replace("_", " ").title(), slug=slug)
        db.add(status)
        await db.flush()
        return status

    return _make


@pytest_asyncio.fixture
async def make_label(db: AsyncSession) -> Callable[..., Awaitable[Label]]:
    async def _make(name: str) -> Label:
        label = Label(name=name)
        db.add(label)
        await db.flush()
        return label

    return _make


# ---------------------------------------------------------------------------
# HTTP client
# ---------------------------------------------------------------------------

@pytest_asyncio.fixture
async def client(engine: AsyncEngine) -> AsyncGenerator[httpx.AsyncClient, None]:
    session_factory = build_sessionmaker(engine)

    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def seeded(engine: AsyncEngine) -> Callable[..., Awaitable[object]]:
    """Persist a row outside any request so API calls can see it."""
    session_factory = build_sessionmaker(engine)

    async def _seed(obj):
        async with session_factory() as session:
            session.add(obj)
            await session.commit()
        return obj

    return _seed


@pytest.fixture
def auth_headers() -> Callable[[User], dict[str, str]]:
    def _headers(user: User) -> dict[str, str]:
        return {"Authorization": f"Bearer {create_access_token(str(user.id), user.email)}"}

    return _headers
