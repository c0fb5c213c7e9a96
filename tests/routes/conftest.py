# tests/routes/conftest.py
"""Pytest fixtures for route tests backed by a temporary SQLite database."""

from collections.abc import AsyncGenerator, Awaitable, Callable
from pathlib import Path
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient

from bloglist.configs import settings
from bloglist.db import Database
from bloglist.main import app
from bloglist.models import BlogDB, UserDB
from bloglist.repositories import BlogRepository, UserRepository

INITIAL_BLOGS: list[dict[str, Any]] = [
    {
        "title": "React patterns",
        "author": "Michael Chan",
        "url": "https://reactpatterns.com/",
        "likes": 7,
    },
    {
        "title": "Go To Statement Considered Harmful",
        "author": "Edsger W. Dijkstra",
        "url": "http://www.u.arizona.edu/~rubinson/copyright_violations/Go_To_Considered_Harmful.html",
        "likes": 5,
    },
]

ROOT_CREDENTIALS = {"username": "root", "name": "Superuser", "password": "sekret"}


@pytest.fixture
async def database(tmp_path: Path) -> AsyncGenerator[Database]:
    """Open a fresh database file for one test and attach it to the app."""
    db_settings = settings.model_copy(
        update={"DATABASE_URL": f"sqlite+aiosqlite:///{tmp_path / 'bloglist_test.db'}"},
    )
    db = Database(db_settings)
    await db.init()
    app.state.database = db

    yield db

    del app.state.database
    await db.close()


@pytest.fixture
async def client(database: Database) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for testing."""
    async with AsyncClient(
        base_url="http://test",
        transport=ASGITransport(app=app),
    ) as ac:
        yield ac


async def blogs_in_db(database: Database) -> list[BlogDB]:
    """Return every stored blog."""
    async with database.transaction() as session:
        return await BlogRepository(session).get_all()


async def users_in_db(database: Database) -> list[UserDB]:
    """Return every stored user."""
    async with database.transaction() as session:
        return await UserRepository(session).get_all()


async def signup(client: AsyncClient, **credentials: str) -> dict[str, Any]:
    response = await client.post("/api/users", json=credentials)
    assert response.status_code == 201, response.text
    return response.json()


async def login(client: AsyncClient, username: str, password: str) -> str:
    response = await client.post(
        "/api/login",
        json={"username": username, "password": password},
    )
    assert response.status_code == 200, response.text
    return response.json()["token"]


@pytest.fixture
async def root_user(client: AsyncClient) -> dict[str, Any]:
    """Register the root user through the API."""
    return await signup(client, **ROOT_CREDENTIALS)


@pytest.fixture
async def root_headers(client: AsyncClient, root_user: dict[str, Any]) -> dict[str, str]:
    """Bearer headers for the root user."""
    token = await login(client, ROOT_CREDENTIALS["username"], ROOT_CREDENTIALS["password"])
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
async def initial_blogs(
    client: AsyncClient,
    root_headers: dict[str, str],
) -> list[dict[str, Any]]:
    """Create the initial blogs as the root user."""
    created = []
    for blog in INITIAL_BLOGS:
        response = await client.post("/api/blogs", json=blog, headers=root_headers)
        assert response.status_code == 201, response.text
        created.append(response.json())
    return created


@pytest.fixture
def fetch_blogs(database: Database) -> Callable[[], Awaitable[list[BlogDB]]]:
    """Read the stored blogs straight from the database."""
    return lambda: blogs_in_db(database)


@pytest.fixture
def fetch_users(database: Database) -> Callable[[], Awaitable[list[UserDB]]]:
    """Read the stored users straight from the database."""
    return lambda: users_in_db(database)


@pytest.fixture
def make_user(
    client: AsyncClient,
) -> Callable[..., Awaitable[tuple[dict[str, Any], dict[str, str]]]]:
    """Register a user and log them in, returning the user and bearer headers."""

    async def _make_user(
        username: str,
        password: str = "sekret",
        name: str = "Test User",
    ) -> tuple[dict[str, Any], dict[str, str]]:
        user = await signup(client, username=username, password=password, name=name)
        token = await login(client, username, password)
        return user, {"Authorization": f"Bearer {token}"}

    return _make_user
