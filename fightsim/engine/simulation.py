from __future__ import annotations

import logging
import random
from collections.abc import Sequence

from .config import (
    DEFAULT_RANDOM_SEED,
    KICK_DAMAGE,
    MAX_ACTIONS,
    PUNCH_DAMAGE,
    RECENCY_DAMPING,
)
from .errors import InvalidRosterError
from .models import (
    BoutEvent,
    BoutResult,
    EventOutcome,
    FighterNum,
    FighterSim,
    FightRules,
    Stat,
    StrikeType,
)
from .probability import check_rating, prob_kick

logger = logging.getLogger(__name__)


def pick_fighter(
    fighters: Sequence[FighterSim],
    last_actor: FighterNum | None = None,
    *,
    rng: random.Random | None = None,
) -> FighterNum:
    """
    Pick the fighter who acts next.

    Each fighter's `output` rating is an unnormalized weight. The fighter who
    acted last has their weight damped so one side does not take every turn.
    When both weights are zero the choice is a coin flip.
    """
    _check_roster(fighters)
    if rng is None:
        rng = random.Random()

    ratios = [
        check_rating(fighters[0].composite_rating.output, name="output"),
        check_rating(fighters[1].composite_rating.output, name="output"),
    ]
    if last_actor is not None:
        ratios[_check_actor(last_actor)] *= RECENCY_DAMPING

    total = ratios[0] + ratios[1]
    if total == 0:
        return 0 if rng.random() < 0.5 else 1

    return 0 if rng.random() * total < ratios[0] else 1


def do_kick(
    attacker: FighterSim,
    opponent: FighterSim,
    events: list[BoutEvent] | None = None,
    *,
    actor: FighterNum = 0,
) -> None:
    opponent.health -= KICK_DAMAGE
    _record(
        events,
        actor=actor,
        outcome=EventOutcome.KICK_LANDED,
        damage=KICK_DAMAGE,
        text=f"{attacker.name} kicks {opponent.name}! {opponent.name}'s health: {opponent.health:g}",
        target_health=opponent.health,
    )


def do_punch(
    attacker: FighterSim,
    opponent: FighterSim,
    events: list[BoutEvent] | None = None,
    *,
    actor: FighterNum = 0,
) -> None:
    opponent.health -= PUNCH_DAMAGE
    _record(
        events,
        actor=actor,
        outcome=EventOutcome.PUNCH_LANDED,
        damage=PUNCH_DAMAGE,
        text=f"{attacker.name} punches {opponent.name}! {opponent.name}'s health: {opponent.health:g}",
        target_health=opponent.health,
    )


_STRIKES = {
    StrikeType.KICK: do_kick,
    StrikeType.PUNCH: do_punch,
}


def simulate_action(
    fighters: Sequence[FighterSim],
    actor: FighterNum,
    *,
    rng: random.Random | None = None,
    events: list[BoutEvent] | None = None,
) -> bool:
    """
    Resolve a single strike by `actor` against the other fighter.

    Returns True when the opponent's health has dropped to zero or below
    (knockout, fight over) and False while the fight continues.
    """
    _check_roster(fighters)
    actor = _check_actor(actor)
    if rng is None:
        rng = random.Random()

    opponent: FighterNum = 1 if actor == 0 else 0
    fighter = fighters[actor]
    rating = fighter.composite_rating

    if rng.random() < prob_kick(rating.kicking, rating.striking):
        strike = StrikeType.KICK
    else:
        strike = StrikeType.PUNCH
    _STRIKES[strike](fighter, fighters[opponent], events, actor=actor)

    if fighters[opponent].health <= 0:
        _record(
            events,
            actor=actor,
            outcome=EventOutcome.KNOCKOUT,
            text=f"{fighter.name} wins! {fighter.name}'s health: {fighter.health:g}",
            target_health=fighters[opponent].health,
        )
        return True

    return False


def simulate_bout(
    red: FighterSim,
    blue: FighterSim,
    *,
    seed: int | None = DEFAULT_RANDOM_SEED,
    max_actions: int = MAX_ACTIONS,
    rules: FightRules | None = None,
) -> BoutResult:
    """
    Simulate a bout between two fighters until one is knocked out.

    Fighters are mutated in place (health). The previous actor is fed back into
    `pick_fighter` so the recency damping applies. If nobody is knocked out
    after `max_actions` strikes the bout is recorded as a no contest.
    """
    if rules is None:
        rules = FightRules()
    if max_actions < 1:
        raise ValueError("max_actions must be at least 1")

    rng = random.Random(seed) if seed is not None else random.Random()
    fighters = (red, blue)

    events: list[BoutEvent] = []
    last_actor: FighterNum | None = None
    winner: FighterNum | None = None
    actions = 0

    while actions < max_actions:
        actor = pick_fighter(fighters, last_actor, rng=rng)
        actions += 1
        if simulate_action(fighters, actor, rng=rng, events=events):
            winner = actor
            break
        last_actor = actor

    stats = _tally_stats(events)

    if winner is None:
        logger.info("bout.no_contest", extra={"actions": actions, "seed": seed})
        return BoutResult(
            winner=None,
            winner_name=None,
            method="no_contest",
            actions=actions,
            events=events,
            stats=stats,
            final_health=(red.health, blue.health),
            rules=rules,
            seed_used=seed,
            summary_text=f"No contest after {actions} actions",
        )

    winner_name = fighters[winner].name
    loser_name = fighters[1 - winner].name
    summary = f"{winner_name} defeats {loser_name} by KO after {actions} actions"
    logger.info(summary)

    return BoutResult(
        winner=winner,
        winner_name=winner_name,
        method="KO",
        actions=actions,
        events=events,
        stats=stats,
        final_health=(red.health, blue.health),
        rules=rules,
        seed_used=seed,
        summary_text=summary,
    )


def _check_roster(fighters: Sequence[FighterSim]) -> None:
    if len(fighters) != 2:
        raise InvalidRosterError(f"a bout needs exactly two fighters, got {len(fighters)}")


def _check_actor(actor) -> FighterNum:
    if type(actor) is not int or actor not in (0, 1):
        raise InvalidRosterError(f"fighter index must be 0 or 1, got {actor!r}")
    return actor


def _record(
    events: list[BoutEvent] | None,
    *,
    actor: FighterNum,
    outcome: EventOutcome,
    text: str,
    damage: float = 0.0,
    target_health: float | None = None,
) -> None:
    logger.debug(text)
    if events is None:
        return
    events.append(
        BoutEvent(
            actor=actor,
            target=1 if actor == 0 else 0,
            outcome=outcome,
            text=text,
            damage=damage,
            target_health=target_health,
        )
    )


def _tally_stats(events: list[BoutEvent]) -> tuple[dict, dict]:
    red: dict = {Stat.TOTAL_STRIKES.value: 0}
    blue: dict = {Stat.TOTAL_STRIKES.value: 0}
    for event in events:
        if event.outcome in (EventOutcome.KICK_LANDED, EventOutcome.PUNCH_LANDED):
            corner = red if event.actor == 0 else blue
            corner[Stat.TOTAL_STRIKES.value] += 1
    return red, blue
