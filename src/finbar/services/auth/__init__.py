"""Authentication service (sign-in, sign-up, sign-out)."""

from finbar.services.auth.service import AuthService, validate_email, validate_name, validate_password

__all__ = [
    "AuthService",
    "validate_email",
    "validate_name",
    "validate_password",
]
