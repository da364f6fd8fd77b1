from __future__ import annotations

from typing import NewType, TypeAlias

# =============================================================================
# TIME-RELATED TYPES
# =============================================================================

# Number of move points elapsed since the last update. One turn is
# ``MOVES_PER_TURN`` move points; burn and regen scale linearly with it.
MoveCount = NewType("MoveCount", int)

# =============================================================================
# GAME-RELATED TYPES
# =============================================================================

# Current stamina divided by maximum stamina, always in [0.0, 1.0].
StaminaRatio = NewType("StaminaRatio", float)

# Masses are tracked in whole grams.
Grams: TypeAlias = int

# Numeric value of a tuning option.
OptionValue: TypeAlias = int | float

# Random seed for deterministic simulation.
# Can be an int for numeric seeds or a descriptive string like "winded1".
RandomSeed: TypeAlias = int | str | None
