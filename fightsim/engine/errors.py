"""Exceptions raised by the fight simulation engine."""


class SimulationError(Exception):
    pass


class InvalidRatingError(SimulationError, ValueError):
    """A rating is negative, not finite, or a probability has no mass."""


class InvalidRosterError(SimulationError, ValueError):
    """The roster is not exactly two fighters or an actor index is out of range."""
