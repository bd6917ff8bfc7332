"""In-memory roster provider."""

from collections.abc import Iterable, Mapping

from .base import RosterProvider


class StaticRosterProvider(RosterProvider):
    """Provider implementation that serves records held in memory."""

    def __init__(self, records: Iterable[Mapping] = ()):
        self._records = list(records)

    def fighters(self):  # type: ignore[override]
        return list(self._records)
