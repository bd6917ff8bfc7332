"""
Utility functions for probability and random draws used by the fight engine.

All rating validation lives here so that degenerate inputs fail loudly with
`InvalidRatingError` instead of propagating NaN through the simulation.
"""

from __future__ import annotations

import math

from .errors import InvalidRatingError


def check_rating(value: float, *, name: str = "rating") -> float:
    """Return `value` as a float, rejecting negative and non-finite ratings."""
    try:
        value = float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidRatingError(f"{name} must be a number, got {value!r}") from exc
    if not math.isfinite(value) or value < 0:
        raise InvalidRatingError(f"{name} must be a finite non-negative number, got {value}")
    return value


def normalize_pair(a: float, b: float) -> tuple[float, float]:
    """Normalize two non-negative values into probabilities that sum to 1."""
    a = check_rating(a)
    b = check_rating(b)
    total = a + b
    if total == 0:
        raise InvalidRatingError("cannot normalize a pair of zero ratings")
    return a / total, b / total


def prob_kick(kicking_rating: float, striking_rating: float) -> float:
    """Probability that a fighter with these ratings throws a kick."""
    try:
        return normalize_pair(kicking_rating, striking_rating)[0]
    except InvalidRatingError as exc:
        raise InvalidRatingError(f"invalid kicking/striking ratings: {exc}") from exc


def prob_punch(kicking_rating: float, striking_rating: float) -> float:
    """Probability that a fighter with these ratings throws a punch."""
    try:
        return normalize_pair(kicking_rating, striking_rating)[1]
    except InvalidRatingError as exc:
        raise InvalidRatingError(f"invalid kicking/striking ratings: {exc}") from exc
