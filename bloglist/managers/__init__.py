from bloglist.managers.password_manager import (
    PasswordHasher,
    dummy_verify_password,
    get_password_hasher,
    hash_password,
    verify_password,
)
from bloglist.managers.token_manager import create_access_token, decode_access_token

__all__ = [
    "PasswordHasher",
    "create_access_token",
    "decode_access_token",
    "dummy_verify_password",
    "get_password_hasher",
    "hash_password",
    "verify_password",
]
