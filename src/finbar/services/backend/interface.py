"""Backend client interface (Protocol).

FINBAR delegates authentication, row-level security and persistence to a
managed backend. This protocol is the whole surface FINBAR relies on:
password auth plus table CRUD with equality filters.

Implementations must scope table access to the signed-in user the way the
managed backend's row-level security does: rows carrying a ``user_id`` that
differs from the current user are invisible, and table calls without a
session fail.
"""

from typing import Any, Protocol

from finbar.services.backend.models import User


class IBackendClient(Protocol):
    """
    Managed backend client.

    Example:
        >>> backend: IBackendClient = InMemoryBackend()
        >>> backend.sign_up("dana@example.com", "secret1", {"name": "Dana"})
        >>> backend.insert("portfolios", {"user_id": user.id, "name": "Main"})
    """

    # ==================== Auth ====================

    def sign_in_with_password(self, email: str, password: str) -> User:
        """
        Start a session for existing credentials.

        Raises:
            BackendError: If credentials are rejected
        """
        ...

    def sign_up(self, email: str, password: str, metadata: dict[str, Any] | None = None) -> User:
        """
        Create an account and start a session.

        The backend creates the user's profile row from metadata["name"].

        Raises:
            BackendError: If the account cannot be created
        """
        ...

    def sign_out(self) -> None:
        """End the current session (no-op without one)."""
        ...

    def get_user(self) -> User | None:
        """Return the signed-in user, or None."""
        ...

    # ==================== Tables ====================

    def select(
        self,
        table: str,
        filters: dict[str, Any] | None = None,
        order_by: str | None = None,
        descending: bool = False,
    ) -> list[dict[str, Any]]:
        """Return rows matching all equality filters."""
        ...

    def insert(self, table: str, row: dict[str, Any]) -> dict[str, Any]:
        """Insert a row; returns it with backend-assigned id and created_at."""
        ...

    def update(self, table: str, values: dict[str, Any], filters: dict[str, Any]) -> list[dict[str, Any]]:
        """Update matching rows; returns the updated rows."""
        ...

    def delete(self, table: str, filters: dict[str, Any]) -> int:
        """Delete matching rows; returns the number deleted."""
        ...
