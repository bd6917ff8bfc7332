import random

import pytest

from fightsim.engine import (
    CompositeRating,
    EventOutcome,
    FighterSim,
    InvalidRatingError,
    InvalidRosterError,
    do_kick,
    do_punch,
    pick_fighter,
    simulate_action,
    simulate_bout,
)


class FixedRng:
    """Returns the given values from random(), in order."""

    def __init__(self, *values):
        self._values = list(values)

    def random(self):
        return self._values.pop(0)


def make_fighter(name="F", *, output=10, kicking=50, striking=50, health=100.0):
    return FighterSim(
        id=None,
        name=name,
        composite_rating=CompositeRating(output=output, kicking=kicking, striking=striking),
        health=health,
    )


def test_pick_fighter_uses_output_weights():
    fighters = [make_fighter("A", output=30), make_fighter("B", output=10)]
    # weights 30/10 -> draw below 30 of 40 picks fighter 0
    assert pick_fighter(fighters, rng=FixedRng(0.74)) == 0
    assert pick_fighter(fighters, rng=FixedRng(0.76)) == 1


def test_pick_fighter_zero_output_is_a_coin_flip():
    fighters = [make_fighter("A", output=0), make_fighter("B", output=0)]
    rng = random.Random(1)
    picks = [pick_fighter(fighters, rng=rng) for _ in range(10000)]
    zeros = picks.count(0)
    assert 4500 < zeros < 5500
    assert set(picks) == {0, 1}


def test_pick_fighter_damps_last_actor():
    fighters = [make_fighter("A", output=10), make_fighter("B", output=10)]
    rng = random.Random(7)
    trials = 20000

    baseline = sum(pick_fighter(fighters, rng=rng) == 0 for _ in range(trials)) / trials
    damped = sum(pick_fighter(fighters, 0, rng=rng) == 0 for _ in range(trials)) / trials

    assert 0.48 < baseline < 0.52
    # expected 9 / 19 ~= 0.474
    assert 0.45 < damped < 0.49
    assert damped < baseline


def test_pick_fighter_damping_applies_to_fighter_one():
    fighters = [make_fighter("A", output=10), make_fighter("B", output=10)]
    # weights 10 / 9 -> a draw of 0.52 * 19 = 9.88 picks fighter 0 only when damped
    assert pick_fighter(fighters, rng=FixedRng(0.52)) == 1
    assert pick_fighter(fighters, 1, rng=FixedRng(0.52)) == 0


def test_pick_fighter_rejects_bad_roster_and_ratings():
    with pytest.raises(InvalidRosterError):
        pick_fighter([make_fighter()])
    with pytest.raises(InvalidRosterError):
        pick_fighter([make_fighter(), make_fighter()], last_actor=2)
    with pytest.raises(InvalidRatingError):
        pick_fighter([make_fighter(output=-1), make_fighter()])


@pytest.mark.parametrize("attacker_output", [0, 1, 99])
def test_strike_damage_is_fixed(attacker_output):
    attacker = make_fighter("A", output=attacker_output, kicking=99, striking=1)
    opponent = make_fighter("B", health=100)

    do_kick(attacker, opponent)
    assert opponent.health == 85
    do_punch(attacker, opponent)
    assert opponent.health == 75
    assert attacker.health == 100


def test_strikes_append_events():
    attacker = make_fighter("A")
    opponent = make_fighter("B")
    events = []

    do_kick(attacker, opponent, events)
    do_punch(attacker, opponent, events, actor=0)

    assert [e.text for e in events] == [
        "A kicks B! B's health: 85",
        "A punches B! B's health: 75",
    ]
    assert [e.outcome for e in events] == [EventOutcome.KICK_LANDED, EventOutcome.PUNCH_LANDED]
    assert events[0].damage == 15
    assert events[1].target == 1


def test_simulate_action_chooses_strike_by_kick_probability():
    fighters = [make_fighter("A", kicking=70, striking=30), make_fighter("B")]

    simulate_action(fighters, 0, rng=FixedRng(0.69))
    assert fighters[1].health == 85

    simulate_action(fighters, 0, rng=FixedRng(0.71))
    assert fighters[1].health == 75


def test_simulate_action_reports_knockout_at_zero_health():
    # a pure puncher always punches for 10
    fighters = [make_fighter("A", kicking=0, striking=1), make_fighter("B", health=10)]
    events = []

    assert simulate_action(fighters, 0, rng=random.Random(3), events=events) is True
    assert fighters[1].health == 0
    assert events[-1].outcome == EventOutcome.KNOCKOUT
    assert events[-1].text == "A wins! A's health: 100"


def test_simulate_action_continues_above_zero_health():
    fighters = [make_fighter("A", kicking=0, striking=1), make_fighter("B", health=11)]
    assert simulate_action(fighters, 0, rng=random.Random(3)) is False
    assert fighters[1].health == 1


def test_simulate_action_strikes_the_other_fighter():
    fighters = [make_fighter("A", health=50), make_fighter("B", kicking=1, striking=0)]
    assert simulate_action(fighters, 1, rng=random.Random(0)) is False
    assert fighters[0].health == 35
    assert fighters[1].health == 100


def test_simulate_action_rejects_bad_input():
    fighters = [make_fighter(), make_fighter()]
    with pytest.raises(InvalidRosterError):
        simulate_action(fighters, 2)
    with pytest.raises(InvalidRosterError):
        simulate_action(fighters + [make_fighter()], 0)

    zeroed = [make_fighter(kicking=0, striking=0), make_fighter()]
    with pytest.raises(InvalidRatingError):
        simulate_action(zeroed, 0)


@pytest.mark.parametrize("seed", range(20))
def test_kicker_knocks_out_twenty_health_opponent_within_two_actions(seed):
    fighters = [
        make_fighter("A", output=10, kicking=70, striking=30),
        make_fighter("B", output=10, kicking=50, striking=50, health=20),
    ]
    rng = random.Random(seed)

    assert simulate_action(fighters, 0, rng=rng) is False
    assert simulate_action(fighters, 0, rng=rng) is True
    assert fighters[1].health <= 0


def test_simulate_bout_is_reproducible_with_seed():
    first = simulate_bout(make_fighter("A"), make_fighter("B"), seed=42)
    second = simulate_bout(make_fighter("A"), make_fighter("B"), seed=42)

    assert [e.text for e in first.events] == [e.text for e in second.events]
    assert first.winner == second.winner
    assert first.seed_used == 42


def test_simulate_bout_result_is_consistent():
    red = make_fighter("Red", output=12, kicking=60, striking=40)
    blue = make_fighter("Blue", output=8, kicking=20, striking=80)

    result = simulate_bout(red, blue, seed=5)

    assert result.method == "KO"
    assert result.winner in (0, 1)
    loser = (red, blue)[1 - result.winner]
    winner = (red, blue)[result.winner]
    assert loser.health <= 0 < winner.health
    assert result.winner_name == winner.name
    assert result.final_health == (red.health, blue.health)
    assert result.events[-1].outcome == EventOutcome.KNOCKOUT
    total = sum(corner["totalStrikes"] for corner in result.stats)
    assert total == result.actions
    assert result.rules.rounds == 3
    assert result.rules.round_duration_seconds == 300
    assert "by KO" in result.summary_text


def test_simulate_bout_stops_at_action_limit():
    result = simulate_bout(
        make_fighter("A", health=1000), make_fighter("B", health=1000), seed=1, max_actions=3
    )
    assert result.winner is None
    assert result.method == "no_contest"
    assert result.actions == 3
    assert result.summary_text == "No contest after 3 actions"


def test_simulate_bout_rejects_non_positive_action_limit():
    with pytest.raises(ValueError):
        simulate_bout(make_fighter(), make_fighter(), max_actions=0)


@pytest.mark.parametrize("actor", [1.0, 0.0, True, "0"])
def test_actor_index_must_be_a_plain_int(actor):
    fighters = [make_fighter("A"), make_fighter("B")]
    with pytest.raises(InvalidRosterError):
        simulate_action(fighters, actor)
    with pytest.raises(InvalidRosterError):
        pick_fighter(fighters, actor)
    assert fighters[0].health == fighters[1].health == 100
