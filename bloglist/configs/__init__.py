from bloglist.configs.settings import (
    CONFIG_MAP,
    DEFAULT_ERROR_MESSAGE,
    MAX_NAME_LENGTH,
    MAX_USERNAME_LENGTH,
    MIN_PASSWORD_LENGTH,
    MIN_USERNAME_LENGTH,
    Argon2Config,
    Settings,
    file_logger,
    settings,
)

__all__ = [
    "Argon2Config",
    "CONFIG_MAP",
    "DEFAULT_ERROR_MESSAGE",
    "MAX_NAME_LENGTH",
    "MAX_USERNAME_LENGTH",
    "MIN_PASSWORD_LENGTH",
    "MIN_USERNAME_LENGTH",
    "Settings",
    "file_logger",
    "settings",
]
