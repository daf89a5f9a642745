"""Lint check model and registry.

The runner and report modules depend on configuration loading and are
imported from their own modules.
"""

from .model import CheckContext, CheckDef, CheckOutcome, CheckResult, Issue, Severity
from .registry import ALL_CHECKS, get_check, list_checks

__all__ = [
    "ALL_CHECKS",
    "CheckContext",
    "CheckDef",
    "CheckOutcome",
    "CheckResult",
    "Issue",
    "Severity",
    "get_check",
    "list_checks",
]
