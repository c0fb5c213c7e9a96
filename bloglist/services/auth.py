"""Authentication service: signup rules, credential checks and token issuing."""

from bloglist.configs import MIN_PASSWORD_LENGTH, MIN_USERNAME_LENGTH
from bloglist.errors.auth import InvalidCredentialsError
from bloglist.errors.validation import ValidationError
from bloglist.managers.password_manager import dummy_verify_password, verify_password
from bloglist.managers.token_manager import create_access_token
from bloglist.models import UserDB
from bloglist.monitoring import get_logger
from bloglist.repositories import UserRepository
from bloglist.schemas.auth import LoginResponse
from bloglist.schemas.user import UserCreate

logger = get_logger(__name__)

MISSING_CREDENTIALS_MESSAGE = "username or password is missing"
SHORT_CREDENTIALS_MESSAGE = "username or password length is less than 3"


class AuthService:
    """Service for user signup and login."""

    def __init__(self, user_repo: UserRepository) -> None:
        """
        Initialize the auth service.

        Args:
            user_repo: User repository for database operations
        """
        self.user_repo = user_repo

    async def register_user(self, user_create: UserCreate) -> UserDB:
        """
        Create a user after checking the signup rules.

        Args:
            user_create: Signup body

        Returns:
            UserDB: The created user

        Raises:
            ValidationError: If username or password is missing or too short
            DuplicateEntryError: If the username is taken
        """
        username = user_create.username
        password = user_create.password.get_secret_value() if user_create.password else None

        if not username or not password:
            raise ValidationError(MISSING_CREDENTIALS_MESSAGE)
        if len(username) < MIN_USERNAME_LENGTH or len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(SHORT_CREDENTIALS_MESSAGE)

        user = await self.user_repo.create(
            username=username,
            password=password,
            name=user_create.name,
        )
        logger.info("User registered", user_id=str(user.id))
        return user

    async def authenticate_user(self, username: str, password: str) -> UserDB:
        """
        Check a username and password pair.

        Args:
            username: Username
            password: Plain text password

        Returns:
            UserDB: The authenticated user

        Raises:
            InvalidCredentialsError: If the user is unknown or the password is wrong
        """
        user = await self.user_repo.get_by_username(username)
        if user is None:
            await dummy_verify_password()
            raise InvalidCredentialsError

        if not await verify_password(password, user.password_hash):
            raise InvalidCredentialsError

        return user

    async def login(self, username: str, password: str) -> LoginResponse:
        """
        Authenticate and issue a token.

        Args:
            username: Username
            password: Plain text password

        Returns:
            LoginResponse: Token plus the user's username and name
        """
        user = await self.authenticate_user(username, password)
        token = create_access_token(user_id=user.id, username=user.username)
        logger.info("User logged in", user_id=str(user.id))
        return LoginResponse(token=token, username=user.username, name=user.name)
