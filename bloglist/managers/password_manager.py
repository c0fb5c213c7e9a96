"""
Password hashing using Argon2id through passlib's CryptContext.

Hashing is CPU bound, so the async helpers run it on a small thread pool
instead of the event loop.
"""

from asyncio import get_event_loop
from concurrent.futures import ThreadPoolExecutor

from passlib.context import CryptContext
from passlib.exc import InternalBackendError

from bloglist.configs import CONFIG_MAP, settings
from bloglist.errors import PasswordHashingError
from bloglist.monitoring import get_logger

executor = ThreadPoolExecutor(max_workers=4)
logger = get_logger(__name__)


class PasswordHasher:
    """
    Argon2id password hashing and verification.

    Cost parameters come from ``CONFIG_MAP`` for the configured
    ``PASSWORD_SECURITY_LEVEL``.
    """

    def __init__(self, level: str | None = None) -> None:
        self.level = level or settings.PASSWORD_SECURITY_LEVEL
        config = CONFIG_MAP[self.level]
        self.pwd_context = CryptContext(
            schemes=["argon2"],
            argon2__memory_cost=config.memory_cost,
            argon2__time_cost=config.time_cost,
            argon2__parallelism=config.parallelism,
        )
        logger.info(f"PasswordHasher initialized with Argon2id on level {self.level}")

    def hash(self, password: str) -> str:
        """
        Hash a plaintext password using Argon2id.

        Args:
            password: The plaintext password to hash

        Returns:
            str: The hashed password in Argon2id format

        Raises:
            ValueError: If password is empty
            PasswordHashingError: If hashing fails
        """
        if not password:
            msg = "Password cannot be empty"
            raise ValueError(msg)

        try:
            return self.pwd_context.hash(password)
        except (ValueError, InternalBackendError, UnicodeError) as e:
            logger.exception("Invalid password format")
            mssg = "Failed to hash password"
            raise PasswordHashingError(mssg) from e

    def verify(self, password: str, hashed_password: str) -> bool:
        """
        Verify a plaintext password against a hashed password.

        A malformed stored hash counts as a mismatch.

        Example:
            >>> hasher = PasswordHasher()
            >>> hasher.verify("sekret", hasher.hash("sekret"))
            True
        """
        if not isinstance(hashed_password, str) or not hashed_password.strip():
            logger.warning("Invalid hash format provided")
            return False

        try:
            return self.pwd_context.verify(password, hashed_password)
        except ValueError:
            logger.exception("Stored hash is corrupted or invalid format")
            return False

    def dummy_verify(self) -> None:
        """Spend the time of a real verification when there is no hash to check."""
        self.pwd_context.dummy_verify()


_default_hasher: PasswordHasher | None = None


def get_password_hasher() -> PasswordHasher:
    """Get or create the default password hasher instance."""
    global _default_hasher  # noqa: PLW0603
    if _default_hasher is None:
        _default_hasher = PasswordHasher()
    return _default_hasher


async def hash_password(password: str) -> str:
    """
    Hash a password on the executor using the default hasher.

    Example:
        >>> hashed = await hash_password("my_password")
    """
    return await get_event_loop().run_in_executor(
        executor,
        get_password_hasher().hash,
        password,
    )


async def verify_password(password: str, hashed_password: str) -> bool:
    """
    Verify a password on the executor using the default hasher.

    Example:
        >>> is_valid = await verify_password("my_password", hashed_password)
    """
    return await get_event_loop().run_in_executor(
        executor,
        get_password_hasher().verify,
        password,
        hashed_password,
    )


async def dummy_verify_password() -> None:
    """Run a throwaway verification so unknown usernames take as long as bad passwords."""
    await get_event_loop().run_in_executor(executor, get_password_hasher().dummy_verify)
