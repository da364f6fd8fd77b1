"""Constants for the stamina burn, regen and movement cost models."""

from exertion.game.enums import MovementMode


class StaminaConstants:
    """Constants for the stamina burn, regen and movement cost models."""

    # --- Movement cost ---
    # Move cost multiplier at full stamina. At zero stamina each mode costs
    # half of this, interpolating linearly in between.
    MOVE_COST_MULTIPLIER: dict[MovementMode, float] = {  # noqa: RUF012
        MovementMode.RUN: 2.0,
        MovementMode.WALK: 1.0,
        MovementMode.CROUCH: 0.5,
    }
    MOVE_COST_FLOOR_FRACTION = 0.5  # Share of the multiplier left at 0 stamina

    # --- Burn ---
    RUN_BURN_MULTIPLIER = 14  # Running burns 14x the walking rate
    CROUCH_BURN_DIVISOR = 2  # Crouching burns half the walking rate (floored)

    # --- Strain pain when overburdened ---
    # Chance of pain is 1-in-N. N is interpolated linearly between these
    # points and clamped outside them: 1/25 at 100% load, certain at 350%.
    PAIN_CURVE_LOAD_PERCENT = (100.0, 350.0)
    PAIN_CURVE_ONE_IN = (25.0, 1.0)
    PAIN_PER_STRAIN = 1

    # --- Regen ---
    WINDED_REGEN_MULTIPLIER = 0.1  # Winded characters regain 10% of normal
    MOUTH_ENCUMBRANCE_DIVISOR = 5.0  # Regen lost per point of mouth encumbrance
