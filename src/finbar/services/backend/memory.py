"""In-memory backend for tests, demos and local development.

Emulates the observable behavior of the managed backend:
- password auth with a single active session
- profile row created on sign-up (default name when none given)
- row-level security: rows are owned through ``user_id`` (``id`` for profiles)
- ``id``/``created_at`` assigned on insert, ``updated_at`` refreshed on update

Not thread-safe. Data lives for the lifetime of the instance.
"""

import copy
import hashlib
import secrets
from datetime import datetime, timezone
from typing import Any
from uuid import uuid4

from finbar.errors import BackendError
from finbar.services.backend.models import DEFAULT_PROFILE_NAME, User

# Column holding the owning user id, per table (default: user_id)
_OWNER_COLUMNS = {"profiles": "id"}


class InMemoryBackend:
    """
    Dictionary-backed implementation of IBackendClient.

    Example:
        >>> backend = InMemoryBackend()
        >>> user = backend.sign_up("dana@example.com", "secret1", {"name": "Dana"})
        >>> backend.select("profiles")
        [{'id': '...', 'name': 'Dana', ...}]
    """

    def __init__(self) -> None:
        self._accounts: dict[str, dict[str, Any]] = {}  # email -> account record
        self._tables: dict[str, list[dict[str, Any]]] = {}
        self._session: User | None = None

    # ==================== Auth ====================

    def sign_in_with_password(self, email: str, password: str) -> User:
        account = self._accounts.get(email.lower())
        if account is None or account["password_hash"] != _hash_password(password, account["salt"]):
            raise BackendError("Invalid login credentials")

        self._session = account["user"]
        return self._session

    def sign_up(self, email: str, password: str, metadata: dict[str, Any] | None = None) -> User:
        key = email.lower()
        if key in self._accounts:
            raise BackendError("User already registered")

        metadata = metadata or {}
        user = User(id=str(uuid4()), email=email, name=str(metadata.get("name", "")))
        salt = secrets.token_hex(8)
        self._accounts[key] = {
            "user": user,
            "salt": salt,
            "password_hash": _hash_password(password, salt),
        }

        # Mirrors the backend's on-signup trigger
        now = _now()
        self._table("profiles").append(
            {
                "id": user.id,
                "name": user.name or DEFAULT_PROFILE_NAME,
                "created_at": now,
                "updated_at": now,
            }
        )

        self._session = user
        return user

    def sign_out(self) -> None:
        self._session = None

    def get_user(self) -> User | None:
        return self._session

    # ==================== Tables ====================

    def select(
        self,
        table: str,
        filters: dict[str, Any] | None = None,
        order_by: str | None = None,
        descending: bool = False,
    ) -> list[dict[str, Any]]:
        rows = [row for row in self._visible_rows(table) if _matches(row, filters or {})]
        if order_by is not None:
            rows.sort(key=lambda row: row.get(order_by), reverse=descending)
        return [copy.deepcopy(row) for row in rows]

    def insert(self, table: str, row: dict[str, Any]) -> dict[str, Any]:
        user = self._require_session()
        owner_column = _OWNER_COLUMNS.get(table, "user_id")
        if row.get(owner_column) != user.id:
            raise BackendError(f'new row violates row-level security policy for table "{table}"')

        stored = {"id": str(uuid4()), **copy.deepcopy(row), "created_at": _now()}
        self._table(table).append(stored)
        return copy.deepcopy(stored)

    def update(self, table: str, values: dict[str, Any], filters: dict[str, Any]) -> list[dict[str, Any]]:
        updated = []
        for row in self._visible_rows(table):
            if _matches(row, filters):
                row.update(copy.deepcopy(values))
                row["updated_at"] = _now()
                updated.append(copy.deepcopy(row))
        return updated

    def delete(self, table: str, filters: dict[str, Any]) -> int:
        doomed = [row for row in self._visible_rows(table) if _matches(row, filters)]
        doomed_ids = {id(row) for row in doomed}
        self._tables[table] = [row for row in self._table(table) if id(row) not in doomed_ids]
        return len(doomed)

    # ==================== Internals ====================

    def _table(self, name: str) -> list[dict[str, Any]]:
        return self._tables.setdefault(name, [])

    def _require_session(self) -> User:
        if self._session is None:
            raise BackendError("JWT required: no active session")
        return self._session

    def _visible_rows(self, table: str) -> list[dict[str, Any]]:
        """Rows the current user may see (row-level security)."""
        user = self._require_session()
        owner_column = _OWNER_COLUMNS.get(table, "user_id")
        return [row for row in self._table(table) if row.get(owner_column) == user.id]


def _matches(row: dict[str, Any], filters: dict[str, Any]) -> bool:
    return all(row.get(column) == value for column, value in filters.items())


def _hash_password(password: str, salt: str) -> str:
    return hashlib.sha256(f"{salt}:{password}".encode("utf-8")).hexdigest()


def _now() -> datetime:
    return datetime.now(timezone.utc)
