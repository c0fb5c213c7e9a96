"""Token manager for issuing and checking signed bearer tokens."""

from datetime import UTC, datetime, timedelta
from uuid import UUID

from jose import JWTError, jwt

from bloglist.configs import settings
from bloglist.schemas.auth import TokenData


def create_access_token(
    user_id: UUID,
    username: str,
    expires_delta: timedelta | None = None,
) -> str:
    """
    Create a signed access token for a user.

    Args:
        user_id: User's UUID
        username: User's username
        expires_delta: Optional expiration time delta

    Returns:
        str: Encoded JWT access token carrying ``id`` and ``username``
    """
    now = datetime.now(UTC)
    if expires_delta:
        expire = now + expires_delta
    else:
        expire = now + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)

    to_encode = {
        "id": str(user_id),
        "username": username,
        "iat": now,
        "exp": expire,
    }

    return jwt.encode(
        to_encode,
        settings.SECRET_KEY.get_secret_value(),
        algorithm=settings.ALGORITHM,
    )


def decode_access_token(token: str) -> TokenData | None:
    """
    Decode and validate an access token.

    Args:
        token: JWT token string

    Returns:
        TokenData | None: Decoded token data, or None when the signature,
        expiry or ``id`` claim is invalid
    """
    try:
        payload = jwt.decode(
            token,
            settings.SECRET_KEY.get_secret_value(),
            algorithms=[settings.ALGORITHM],
        )
    except JWTError:
        return None

    user_id: str | None = payload.get("id")
    if not user_id:
        return None

    try:
        return TokenData(user_id=UUID(str(user_id)), username=payload.get("username"))
    except ValueError:
        return None
