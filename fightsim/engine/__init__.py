"""Public interface for the fight simulation engine."""

from .errors import InvalidRatingError, InvalidRosterError, SimulationError
from .models import (
    BoutEvent,
    BoutResult,
    CompositeRating,
    EventOutcome,
    FighterSim,
    FightRules,
    Stat,
    StrikeType,
)
from .probability import prob_kick, prob_punch
from .simulation import do_kick, do_punch, pick_fighter, simulate_action, simulate_bout

__all__ = [
    "BoutEvent",
    "BoutResult",
    "CompositeRating",
    "EventOutcome",
    "FighterSim",
    "FightRules",
    "Stat",
    "StrikeType",
    "SimulationError",
    "InvalidRatingError",
    "InvalidRosterError",
    "prob_kick",
    "prob_punch",
    "pick_fighter",
    "do_kick",
    "do_punch",
    "simulate_action",
    "simulate_bout",
]
