"""Unit tests for the authentication service."""

import pytest

from finbar.errors import AuthenticationError, AuthValidationError, NotAuthenticatedError
from finbar.services.auth import AuthService, validate_email, validate_name, validate_password
from finbar.services.backend.models import DEFAULT_PROFILE_NAME


@pytest.fixture
def auth(backend):
    return AuthService(backend)


class TestValidators:
    """Test local input rules."""

    @pytest.mark.parametrize("email", ["", "dana.example.com"])
    def test_invalid_email(self, email):
        with pytest.raises(AuthValidationError, match="valid email"):
            validate_email(email)

    def test_valid_email(self):
        validate_email("dana@example.com")

    def test_password_minimum_length(self):
        with pytest.raises(AuthValidationError, match="at least 6"):
            validate_password("12345")

        validate_password("123456")

    def test_name_minimum_length(self):
        with pytest.raises(AuthValidationError, match="at least 2"):
            validate_name("D")

        validate_name("Di")


class TestAuthService:
    """Test AuthService flows."""

    def test_sign_up_and_current_user(self, auth, backend):
        user = auth.sign_up("Dana", "dana@example.com", "secret1")

        assert user.name == "Dana"
        assert auth.current_user() == user
        assert backend.select("profiles")[0]["name"] == "Dana"

    def test_sign_up_validates_before_backend(self, auth, backend):
        with pytest.raises(AuthValidationError):
            auth.sign_up("D", "dana@example.com", "secret1")

        assert auth.current_user() is None

    def test_sign_up_existing_email(self, auth):
        auth.sign_up("Dana", "dana@example.com", "secret1")
        auth.sign_out()

        with pytest.raises(AuthenticationError, match="Could not create the account"):
            auth.sign_up("Dana", "dana@example.com", "secret1")

    def test_sign_in(self, auth):
        created = auth.sign_up("Dana", "dana@example.com", "secret1")
        auth.sign_out()

        user = auth.sign_in("dana@example.com", "secret1")

        assert user == created
        assert auth.current_user() == created

    def test_sign_in_wrong_password(self, auth):
        auth.sign_up("Dana", "dana@example.com", "secret1")
        auth.sign_out()

        with pytest.raises(AuthenticationError, match="Invalid email or password"):
            auth.sign_in("dana@example.com", "secret2")

    def test_sign_in_invalid_input(self, auth):
        with pytest.raises(AuthValidationError):
            auth.sign_in("not-an-email", "secret1")

        with pytest.raises(AuthValidationError):
            auth.sign_in("dana@example.com", "short")

    def test_sign_out(self, auth):
        auth.sign_up("Dana", "dana@example.com", "secret1")

        auth.sign_out()

        assert auth.current_user() is None


class TestDisplayName:
    """Test AuthService.display_name() fallback chain."""

    def test_profile_name(self, auth, backend):
        user = auth.sign_up("Dana", "dana@example.com", "secret1")
        backend.update("profiles", {"name": "Dana Levi"}, {"id": user.id})

        assert auth.display_name() == "Dana Levi"

    def test_falls_back_to_sign_up_name(self, auth, backend):
        """A blank or missing profile name uses the sign-up metadata."""
        user = auth.sign_up("Dana", "dana@example.com", "secret1")
        backend.update("profiles", {"name": ""}, {"id": user.id})

        assert auth.display_name() == "Dana"

        backend.delete("profiles", {"id": user.id})

        assert auth.display_name() == "Dana"

    def test_default_name(self, auth, backend):
        user = backend.sign_up("anon@example.com", "secret1")
        backend.delete("profiles", {"id": user.id})

        assert auth.display_name() == DEFAULT_PROFILE_NAME

    def test_requires_signed_in_user(self, auth):
        with pytest.raises(NotAuthenticatedError):
            auth.display_name()
