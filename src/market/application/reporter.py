"""Outbound channel for operation outcomes.

Application services never print. They call ``announce`` when state
changed and ``reject`` when a recoverable condition left state untouched.
The infrastructure layer decides where those events end up (structlog,
a console, a list in a test).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class Reporter(ABC):

    @abstractmethod
    def announce(self, event: str, **details: Any) -> None:
        """A state change happened."""

    @abstractmethod
    def reject(self, event: str, **details: Any) -> None:
        """A soft condition was hit; nothing was changed."""


class NullReporter(Reporter):
    """Discards every event. Used when no reporter is injected."""

    def announce(self, event: str, **details: Any) -> None:
        pass

    def reject(self, event: str, **details: Any) -> None:
        pass
