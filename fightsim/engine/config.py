"""
Configuration and tuning parameters for the fight simulation engine.

Damage values are flat per strike type; the round constants describe the
intended bout format but the strike loop does not consult them yet.
"""

ROUND_CLOCK = 300  # 5 minute rounds
ROUND_NUMBER = 3  # main events and title fights should be 5

KICK_DAMAGE = 15
PUNCH_DAMAGE = 10

RECENCY_DAMPING = 0.9  # weight multiplier for the fighter who acted last

DEFAULT_HEALTH = 100.0
MAX_ACTIONS = 1000  # bout driver gives up (no contest) after this many strikes

DEFAULT_RANDOM_SEED = None  # let callers pass an explicit seed if needed
