"""
FINBAR - Personal Investment Portfolio Tracker

Public API for portfolio bookkeeping and demo performance charts.
"""

from importlib.metadata import version

try:
    __version__ = version("finbar")
except Exception:
    __version__ = "0.0.0.dev"  # Fallback for development


__all__ = [
    "__version__",
]
