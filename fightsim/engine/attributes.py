from __future__ import annotations

from typing import TYPE_CHECKING

from .config import DEFAULT_HEALTH
from .models import CompositeRating, FighterSim
from .probability import check_rating

if TYPE_CHECKING:
    from fightsim.models import RosterFighter  # pragma: no cover


def fighter_sim_from_roster(
    fighter: RosterFighter,
    *,
    rating: CompositeRating | None = None,
    health: float = DEFAULT_HEALTH,
    age: int = 0,
) -> FighterSim:
    """
    Build a FighterSim snapshot from a roster record.

    Roster records carry no ratings, so a neutral CompositeRating is used
    unless one is passed in.
    """
    if rating is None:
        rating = CompositeRating()
    for name in ("output", "kicking", "striking"):
        check_rating(getattr(rating, name), name=name)

    full_name = f"{fighter.first_name} {fighter.last_name}".strip()

    return FighterSim(
        id=fighter.person_id,
        name=full_name or f"Fighter {fighter.person_id}",
        age=age,
        composite_rating=CompositeRating(
            output=rating.output, kicking=rating.kicking, striking=rating.striking
        ),
        health=health,
    )
