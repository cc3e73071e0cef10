"""Domain exceptions for FINBAR.

All errors raised deliberately by FINBAR derive from FinbarError so callers
(CLI, web layer) can catch a single base class and render the message.
"""


class FinbarError(Exception):
    """Base class for all FINBAR errors."""


class InvalidWindowError(FinbarError, ValueError):
    """Raised when a chart window selector is not recognized."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Unknown chart window: {value!r} (expected one of 1D, 7D, 1M, 3M, YTD, ALL)")


class BackendError(FinbarError):
    """Raised when the managed backend rejects a request."""


class AuthValidationError(FinbarError, ValueError):
    """Raised when sign-in or sign-up input fails local validation."""


class AuthenticationError(FinbarError):
    """Raised when the backend refuses the supplied credentials."""


class NotAuthenticatedError(FinbarError):
    """Raised when an operation requires a signed-in user and there is none."""


class PortfolioValidationError(FinbarError, ValueError):
    """Raised when portfolio fields are missing or out of range."""


class PortfolioNotFoundError(FinbarError, LookupError):
    """Raised when a portfolio does not exist for the current user."""


class NoPortfoliosError(FinbarError):
    """Raised when an action is logged before any portfolio was created."""


class ActionValidationError(FinbarError, ValueError):
    """Raised when an action is missing fields required by its type."""
