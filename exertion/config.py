"""
Configuration constants.

Centralizes the tunable numbers the stamina model reads at runtime.
Organized by functional area for easy maintenance.
"""

from exertion.types import RandomSeed

# =============================================================================
# GENERAL
# =============================================================================

# Master seed for ``exertion.util.rng`` when ``rng.init()`` is not called.
# RANDOM_SEED = None
RANDOM_SEED: RandomSeed = "winded1"

# =============================================================================
# GAME BALANCE OPTIONS
# =============================================================================

# Defaults for the numeric options served by ``TuningOptions``. Keys match the
# option names used by ``get_numeric_option``; the type of each default is the
# type the option is coerced to when overridden.
DEFAULT_TUNING: dict[str, int | float] = {
    # Stamina burned per turn of walking, before mode and overburden adjustments
    "PLAYER_BASE_STAMINA_BURN_RATE": 15,
    # Stamina regained per move point (a turn is MOVES_PER_TURN move points)
    "PLAYER_BASE_STAMINA_REGEN_RATE": 20.0,
    # Stamina of a freshly created character
    "PLAYER_MAX_STAMINA": 10000,
    # Move points in one turn
    "MOVES_PER_TURN": 100,
    # Turns the "winded" effect lasts once stamina is overdrawn
    "WINDED_DURATION_TURNS": 10,
}

# =============================================================================
# CHARACTER DEFAULTS
# =============================================================================

DEFAULT_WEIGHT_CAPACITY_GRAMS = 45_000  # What an unremarkable adult can carry
