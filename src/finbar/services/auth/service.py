"""Authentication service.

Validates sign-in/sign-up input locally, then delegates to the backend.
The user's profile row is created by the backend on sign-up.
"""

import structlog

from finbar.errors import AuthenticationError, AuthValidationError, BackendError, NotAuthenticatedError
from finbar.services.backend.interface import IBackendClient
from finbar.services.backend.models import DEFAULT_PROFILE_NAME, User

logger = structlog.get_logger(__name__)

MIN_PASSWORD_LENGTH = 6
MIN_NAME_LENGTH = 2

PROFILES_TABLE = "profiles"


def validate_email(email: str) -> None:
    """Raise AuthValidationError unless email looks like an address."""
    if not email or "@" not in email:
        raise AuthValidationError("Please enter a valid email address")


def validate_password(password: str) -> None:
    """Raise AuthValidationError if password is too short."""
    if not password or len(password) < MIN_PASSWORD_LENGTH:
        raise AuthValidationError(f"Password must contain at least {MIN_PASSWORD_LENGTH} characters")


def validate_name(name: str) -> None:
    """Raise AuthValidationError if display name is too short."""
    if not name or len(name) < MIN_NAME_LENGTH:
        raise AuthValidationError(f"Name must contain at least {MIN_NAME_LENGTH} characters")


class AuthService:
    """
    Sign-in, sign-up and session lookup.

    Example:
        >>> auth = AuthService(InMemoryBackend())
        >>> user = auth.sign_up("Dana", "dana@example.com", "secret1")
        >>> auth.current_user() == user
        True
    """

    def __init__(self, backend: IBackendClient):
        self._backend = backend

    def sign_in(self, email: str, password: str) -> User:
        """
        Sign in with email and password.

        Raises:
            AuthValidationError: If email/password fail local rules
            AuthenticationError: If the backend rejects the credentials
        """
        validate_email(email)
        validate_password(password)

        try:
            user = self._backend.sign_in_with_password(email, password)
        except BackendError as e:
            logger.warning("auth.sign_in_rejected", email=email, reason=str(e))
            raise AuthenticationError("Invalid email or password") from e

        logger.info("auth.signed_in", user_id=user.id)
        return user

    def sign_up(self, name: str, email: str, password: str) -> User:
        """
        Create an account; the name is stored as user metadata.

        Raises:
            AuthValidationError: If name/email/password fail local rules
            AuthenticationError: If the backend refuses to create the account
        """
        validate_name(name)
        validate_email(email)
        validate_password(password)

        try:
            user = self._backend.sign_up(email, password, {"name": name})
        except BackendError as e:
            logger.warning("auth.sign_up_failed", email=email, reason=str(e))
            raise AuthenticationError("Could not create the account. Please try again.") from e

        logger.info("auth.signed_up", user_id=user.id)
        return user

    def sign_out(self) -> None:
        self._backend.sign_out()
        logger.info("auth.signed_out")

    def current_user(self) -> User | None:
        return self._backend.get_user()

    def display_name(self) -> str:
        """
        Name shown in the dashboard header.

        Profile name first, then the sign-up metadata name, then the
        default profile name.

        Raises:
            NotAuthenticatedError: If nobody is signed in
        """
        user = self._backend.get_user()
        if user is None:
            raise NotAuthenticatedError("Sign in to view your profile")

        rows = self._backend.select(PROFILES_TABLE, {"id": user.id})
        profile_name = rows[0].get("name") if rows else None
        return profile_name or user.name or DEFAULT_PROFILE_NAME
