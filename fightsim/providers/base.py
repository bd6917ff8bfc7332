"""Base provider interface for roster data."""

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping


class RosterProvider(ABC):
    """Abstract base class for roster data providers.

    Callers receive a provider explicitly instead of importing a shared
    roster file, so tests and commands can swap the source.
    """

    @abstractmethod
    def fighters(self) -> Iterable[Mapping]:
        """Return iterable of raw roster records."""
