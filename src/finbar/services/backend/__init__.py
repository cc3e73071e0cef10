"""Managed backend collaborator.

Key components:
- IBackendClient: Protocol for auth + table CRUD
- InMemoryBackend: Local implementation with row-level security emulation
- User: Authenticated user model
"""

from finbar.services.backend.interface import IBackendClient
from finbar.services.backend.memory import InMemoryBackend
from finbar.services.backend.models import User

__all__ = [
    "IBackendClient",
    "InMemoryBackend",
    "User",
]
