# tests/conftest.py
"""Root pytest configuration and shared fixtures."""

import os

# Settings are read once at import time, so the test environment must be in
# place before anything under bloglist is imported.
os.environ["ENVIRONMENT"] = "test"
os.environ["LOG_TO_FILE"] = "false"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["PASSWORD_SECURITY_LEVEL"] = "low"
os.environ["SECRET_KEY"] = "test-secret-key-for-bloglist"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"

from datetime import timedelta  # noqa: E402
from uuid import uuid4  # noqa: E402

import pytest  # noqa: E402

from bloglist.managers.token_manager import create_access_token  # noqa: E402
from bloglist.models import BlogDB, UserDB  # noqa: E402


@pytest.fixture
def sample_user() -> UserDB:
    """Create a sample user for testing."""
    return UserDB(
        id=uuid4(),
        username="testuser",
        name="Test User",
        password_hash="$argon2id$v=19$m=8192,t=1,p=1$somehash",
        blog_ids=[],
    )


@pytest.fixture
def other_user() -> UserDB:
    """Create a second user who owns nothing the sample user owns."""
    return UserDB(
        id=uuid4(),
        username="otheruser",
        name="Other User",
        password_hash="$argon2id$v=19$m=8192,t=1,p=1$somehash",
        blog_ids=[],
    )


@pytest.fixture
def sample_blog(sample_user: UserDB) -> BlogDB:
    """Create a blog owned by the sample user."""
    return BlogDB(
        id=uuid4(),
        owner_id=sample_user.id,
        title="React patterns",
        author="Michael Chan",
        url="https://reactpatterns.com/",
        likes=7,
    )


@pytest.fixture
def sample_access_token(sample_user: UserDB) -> str:
    """Create a sample access token for testing."""
    return create_access_token(
        user_id=sample_user.id,
        username=sample_user.username,
        expires_delta=timedelta(minutes=30),
    )


@pytest.fixture
def auth_headers(sample_access_token: str) -> dict[str, str]:
    """Create auth headers with a valid access token."""
    return {"Authorization": f"Bearer {sample_access_token}"}
