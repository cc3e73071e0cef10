"""Action service for logging portfolio actions.

Key components:
- ActionService: Validates and records actions
- ActionRequest: User input (validated per action type)
- Action: Recorded action
- ActionType, Currency: Enums
"""

from finbar.services.actions.models import Action, ActionRequest, ActionType, Currency
from finbar.services.actions.service import ActionService

__all__ = [
    "ActionService",
    "Action",
    "ActionRequest",
    "ActionType",
    "Currency",
]
