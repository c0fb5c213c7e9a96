from bloglist.schemas.auth import LoginRequest, LoginResponse, TokenData
from bloglist.schemas.blog import (
    BlogCreate,
    BlogResponse,
    BlogUpdate,
    BlogWithOwnerResponse,
    OwnerSummary,
    coerce_likes,
)
from bloglist.schemas.health import HealthCheckResponse
from bloglist.schemas.user import UserCreate, UserResponse

__all__ = [
    "BlogCreate",
    "BlogResponse",
    "BlogUpdate",
    "BlogWithOwnerResponse",
    "HealthCheckResponse",
    "LoginRequest",
    "LoginResponse",
    "OwnerSummary",
    "TokenData",
    "UserCreate",
    "UserResponse",
    "coerce_likes",
]
