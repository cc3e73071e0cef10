"""Data models returned by the backend collaborator."""

from pydantic import BaseModel, ConfigDict

# Profile name used when neither the profile nor sign-up metadata has one
DEFAULT_PROFILE_NAME = "משתמש"


class User(BaseModel):
    """
    Authenticated user.

    Attributes:
        id: Backend user id
        email: Sign-in email
        name: Display name from sign-up metadata (may be empty)
    """

    id: str
    email: str
    name: str = ""

    model_config = ConfigDict(frozen=True)
