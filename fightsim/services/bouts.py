from __future__ import annotations

from django.core.exceptions import ValidationError

from ..conf import MAX_BOUT_ACTIONS
from ..engine import BoutResult, CompositeRating, FighterSim, simulate_bout
from ..engine.attributes import fighter_sim_from_roster
from ..models import RosterFighter


def demo_fighters() -> tuple[FighterSim, FighterSim]:
    """Two ready-made fighters for quick manual runs."""
    return (
        FighterSim(
            id=1,
            name="Conor McGregor",
            age=30,
            strike_pace=100,
            composite_rating=CompositeRating(output=0.6, kicking=0.5, striking=0.7),
            skills=["punching", "kicking"],
        ),
        FighterSim(
            id=2,
            name="Dustin Poirier",
            age=28,
            strike_pace=1,
            composite_rating=CompositeRating(output=0.4, kicking=0.3, striking=0.6),
            skills=["punching", "kicking"],
        ),
    )


def roster_bout(
    red_id: int,
    blue_id: int,
    *,
    seed: int | None = None,
    max_actions: int | None = None,
) -> BoutResult:
    """Simulate a bout between two roster fighters looked up by person id."""
    if red_id == blue_id:
        raise ValidationError("A fighter cannot fight themselves.")

    by_id = RosterFighter.objects.in_bulk([red_id, blue_id], field_name="person_id")
    missing = [pid for pid in (red_id, blue_id) if pid not in by_id]
    if missing:
        raise ValidationError(f"Unknown roster fighter(s): {', '.join(map(str, missing))}")

    red = fighter_sim_from_roster(by_id[red_id])
    blue = fighter_sim_from_roster(by_id[blue_id])
    return simulate_bout(
        red,
        blue,
        seed=seed,
        max_actions=max_actions if max_actions is not None else MAX_BOUT_ACTIONS,
    )
