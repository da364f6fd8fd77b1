"""
Stamina arithmetic.

Pure functions behind the stamina component. None of them touch character
state; the component snapshots what it needs (mode, stamina, load, effects)
and routes the result through ``StaminaComponent.mod_stamina``.

Movement cost:
    Each mode has a full-stamina multiplier (run 2.0, walk 1.0, crouch 0.5)
    that decays linearly to half of itself at zero stamina.

Burn:
    The base burn rate is stamina per turn of walking. Every whole percent of
    overburden adds one point. Running multiplies the sum by 14, crouching
    halves it (floored). The per-turn rate scales linearly with move points.

Strain pain:
    Moving while overburdened may hurt. The chance is 1-in-N, where N comes
    from a small load-percent table interpolated with numpy.

Regen:
    The base regen rate is per move point. Winded cuts it to 10%, then mouth
    encumbrance subtracts a fifth of its value. Movement mode has no effect.
"""

from __future__ import annotations

import numpy as np

from exertion.constants.stamina import StaminaConstants
from exertion.game.enums import MovementMode
from exertion.types import Grams, MoveCount, StaminaRatio


def stamina_move_cost_modifier(
    mode: MovementMode, stamina_ratio: StaminaRatio
) -> float:
    """Return the move cost multiplier for ``mode`` at ``stamina_ratio``.

    ``stamina_ratio`` is clamped into [0, 1].
    """
    ratio = min(1.0, max(0.0, stamina_ratio))
    floor = StaminaConstants.MOVE_COST_FLOOR_FRACTION
    return StaminaConstants.MOVE_COST_MULTIPLIER[mode] * (floor + (1.0 - floor) * ratio)


def overburden_percentage(carried: Grams, capacity: Grams) -> int:
    """Return whole percent of ``capacity`` carried beyond it (0 if not over).

    Raises:
        ValueError: If ``capacity`` is not positive.
    """
    if capacity <= 0:
        raise ValueError(f"Weight capacity must be positive, got {capacity}")
    if carried <= capacity:
        return 0
    return int((carried - capacity) * 100 // capacity)


def load_percent(carried: Grams, capacity: Grams) -> float:
    """Return carried weight as a percentage of capacity."""
    if capacity <= 0:
        raise ValueError(f"Weight capacity must be positive, got {capacity}")
    return carried * 100.0 / capacity


def burn_rate_per_turn(mode: MovementMode, base_rate: int, over_percent: int) -> int:
    """Return stamina burned by one turn of moving in ``mode``."""
    rate = base_rate + over_percent
    if mode == MovementMode.RUN:
        return rate * StaminaConstants.RUN_BURN_MULTIPLIER
    if mode == MovementMode.CROUCH:
        return rate // StaminaConstants.CROUCH_BURN_DIVISOR
    return rate


def scale_to_moves(per_turn: int, moves: MoveCount, moves_per_turn: int) -> int:
    """Scale a per-turn integer amount to ``moves`` move points (floored)."""
    return per_turn * moves // moves_per_turn


def pain_one_in(load_pct: float, bad_back: bool = False) -> float:
    """Return N for a 1-in-N strain pain chance at ``load_pct`` percent load.

    A bad back makes every roll hurt.
    """
    if bad_back:
        return 1.0
    return float(
        np.interp(
            load_pct,
            StaminaConstants.PAIN_CURVE_LOAD_PERCENT,
            StaminaConstants.PAIN_CURVE_ONE_IN,
        )
    )


def pain_chance(load_pct: float, bad_back: bool = False) -> float:
    """Return the probability of strain pain for one burn at ``load_pct``.

    Zero when not overburdened.
    """
    if load_pct <= 100.0:
        return 0.0
    return 1.0 / pain_one_in(load_pct, bad_back)


def regen_rate_per_move(
    base_regen_rate: float, winded: bool, mouth_encumbrance: int
) -> float:
    """Return stamina regained per move point.

    Never negative: heavy mouth encumbrance stops regen but does not drain.
    """
    rate = base_regen_rate
    if winded:
        rate *= StaminaConstants.WINDED_REGEN_MULTIPLIER
    rate -= mouth_encumbrance / StaminaConstants.MOUTH_ENCUMBRANCE_DIVISOR
    return max(0.0, rate)
