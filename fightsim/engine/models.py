from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Literal

from .config import DEFAULT_HEALTH, ROUND_CLOCK, ROUND_NUMBER

FighterNum = Literal[0, 1]


class StrikeType(str, Enum):
    PUNCH = "punch"
    KICK = "kick"


class Stat(str, Enum):
    TOTAL_STRIKES = "totalStrikes"
    SIG_STRIKES = "sigStrikes"
    KNOCKDOWNS = "knockdowns"
    TAKEDOWNS = "takedowns"
    SUBMISSION_ATTEMPT = "submissionAttempt"
    SUBMISSION_REVERSAL = "submissionReversal"


class EventOutcome(str, Enum):
    PUNCH_LANDED = "punchLanded"
    PUNCH_BLOCKED = "punchBlocked"
    PUNCH_EVADED = "punchEvaded"
    KICK_LANDED = "kickLanded"
    KICK_BLOCKED = "kickBlocked"
    KICK_EVADED = "kickEvaded"
    END_OF_ROUND = "endOfRound"
    KNOCKOUT = "knockout"


@dataclass
class FightRules:
    """Definition of the bout format (rounds, duration)."""

    rounds: int = ROUND_NUMBER
    round_duration_seconds: int = ROUND_CLOCK


@dataclass
class CompositeRating:
    """Derived ability scores driving the probabilistic choices."""

    output: float = 1.0  # how often the fighter gets to act
    kicking: float = 1.0
    striking: float = 1.0  # punching


@dataclass
class FighterSim:
    """
    Snapshot of a fighter as seen by the simulation engine.

    This is intentionally decoupled from the Django roster model so that
    the engine can evolve independently of the database schema. The engine
    only reads the ratings and mutates `health`.
    """

    id: int | None = None
    name: str = ""
    age: int = 0

    strike_pace: float = 0.0  # mean number of strikes thrown per fight
    composite_rating: CompositeRating = field(default_factory=CompositeRating)
    health: float = DEFAULT_HEALTH

    stat: dict = field(default_factory=dict)
    skills: list[str] = field(default_factory=list)


@dataclass
class BoutEvent:
    """A single line of the bout log."""

    actor: FighterNum
    target: FighterNum
    outcome: EventOutcome
    text: str
    damage: float = 0.0
    target_health: float | None = None


@dataclass
class BoutResult:
    """High-level container for the result of a simulated bout."""

    winner: FighterNum | None
    winner_name: str | None
    method: Literal["KO", "no_contest"]
    actions: int

    events: list[BoutEvent] = field(default_factory=list)
    stats: tuple[dict, dict] = field(default_factory=lambda: ({}, {}))
    final_health: tuple[float, float] = (0.0, 0.0)

    rules: FightRules = field(default_factory=FightRules)
    seed_used: int | None = None

    summary_text: str = ""
