"""
Component system for character exertion.

A character is composed of small components that each own one piece of
state. The stamina component is the only one with real logic; the rest are
in-memory implementations of the collaborators it reads from (effects,
traits, encumbrance, carried weight) and writes to (pain).

Components:
    StatusEffectsComponent: Tagged temporary effects with turn durations
    TraitsComponent: Permanent trait tags
    EncumbranceComponent: Encumbrance value per body region
    BurdenComponent: Carried weight and weight capacity
    PainComponent: Accumulated pain
    StaminaComponent: Stamina value, burn, regen and the winded trigger

Usage:
    Components are created and wired together in Character.__init__():

    self.status_effects = StatusEffectsComponent()
    self.burden = BurdenComponent(capacity=100_000)
    self.stamina = StaminaComponent(
        tuning, self.status_effects, self.traits, self.encumbrance,
        self.burden, self.pain, actor=self,
    )

Note:
    StaminaComponent depends only on the protocols in ``interfaces.py``, so any
    of its collaborators can be swapped for another implementation.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from exertion import colors
from exertion.constants.stamina import StaminaConstants
from exertion.events import MessageEvent, StrainEvent, WindedEvent, publish_event
from exertion.game import stamina as model
from exertion.game.enums import BodyRegion, EffectKind, MovementMode, TraitKind
from exertion.types import Grams, MoveCount, StaminaRatio
from exertion.util import rng

from .status_effects import StatusEffect

if TYPE_CHECKING:
    from exertion.util.rng import RNG

    from .interfaces import (
        EffectRegistry,
        EncumbranceProvider,
        MassProvider,
        PainSink,
        TraitRegistry,
        TuningSource,
    )

logger = logging.getLogger(__name__)


class StatusEffectsComponent:
    """Manage a character's temporary status effects.

    Effects do not stack: adding a kind that is already present keeps the
    existing effect and its remaining duration.
    """

    def __init__(self) -> None:
        self._status_effects: dict[EffectKind, StatusEffect] = {}

    def add_effect(self, kind: EffectKind, duration: int) -> None:
        """Add an effect of ``kind`` unless one is already active."""
        if kind in self._status_effects:
            return
        self._status_effects[kind] = StatusEffect(kind, duration)

    def remove_effect(self, kind: EffectKind) -> bool:
        """Remove the effect of ``kind``. Returns ``True`` if one was removed."""
        return self._status_effects.pop(kind, None) is not None

    def has_effect(self, kind: EffectKind) -> bool:
        return kind in self._status_effects

    def get_effect(self, kind: EffectKind) -> StatusEffect | None:
        return self._status_effects.get(kind)

    def update_turn(self) -> list[StatusEffect]:
        """Count down durations and drop expired effects.

        Returns the effects that expired this turn.
        """
        expired: list[StatusEffect] = []
        for effect in list(self._status_effects.values()):
            if effect.duration > 0:
                effect.duration -= 1
            if effect.should_remove():
                del self._status_effects[effect.kind]
                expired.append(effect)
        return expired


class TraitsComponent:
    """A character's permanent traits."""

    def __init__(self, traits: set[TraitKind] | None = None) -> None:
        self._traits: set[TraitKind] = set(traits or ())

    def has_trait(self, kind: TraitKind) -> bool:
        return kind in self._traits

    def toggle_trait(self, kind: TraitKind) -> None:
        """Add ``kind`` if missing, otherwise remove it."""
        if kind in self._traits:
            self._traits.remove(kind)
        else:
            self._traits.add(kind)


class EncumbranceComponent:
    """Encumbrance per body region, as computed by worn equipment."""

    def __init__(self) -> None:
        self._encumbrance: dict[BodyRegion, int] = {}

    def encumbrance_at(self, region: BodyRegion) -> int:
        return self._encumbrance.get(region, 0)

    def set_encumbrance(self, region: BodyRegion, value: int) -> None:
        if value < 0:
            raise ValueError(f"Encumbrance cannot be negative, got {value}")
        self._encumbrance[region] = value


@dataclass(slots=True)
class BurdenComponent:
    """Tracks carried weight against weight capacity, in grams."""

    capacity: Grams
    carried: Grams = 0

    def __post_init__(self) -> None:
        if self.capacity <= 0:
            raise ValueError(f"Weight capacity must be positive, got {self.capacity}")

    def carried_weight(self) -> Grams:
        return self.carried

    def weight_capacity(self) -> Grams:
        return self.capacity

    def burden_to(self, proportion: float) -> None:
        """Carry ``proportion`` of capacity, rounded to the nearest gram."""
        self.carried = round(self.capacity * proportion)


@dataclass(slots=True)
class PainComponent:
    """Accumulated pain. Never drops below zero."""

    pain: int = 0

    def mod_pain(self, amount: int) -> None:
        self.pain = max(0, self.pain + amount)


class StaminaComponent:
    """Owns a character's stamina and every rule that changes it.

    ``mod_stamina`` is the single writer of the stamina value; burn, regen and
    ``set_stamina`` compute a delta and route it through there so the clamping
    and winded rules always apply.
    """

    def __init__(
        self,
        tuning: TuningSource,
        effects: EffectRegistry,
        traits: TraitRegistry,
        encumbrance: EncumbranceProvider,
        mass: MassProvider,
        pain: PainSink,
        *,
        stamina_max: int | None = None,
        pain_rng: RNG | None = None,
        actor: Any = None,
    ) -> None:
        self.tuning = tuning
        self.effects = effects
        self.traits = traits
        self.encumbrance = encumbrance
        self.mass = mass
        self.pain = pain
        self.actor = actor  # Back-reference for events and messages
        self._pain_rng = pain_rng if pain_rng is not None else rng.get("stamina.pain")

        if stamina_max is None:
            stamina_max = int(tuning.get_numeric_option("PLAYER_MAX_STAMINA"))
        if stamina_max <= 0:
            raise ValueError(f"stamina_max must be positive, got {stamina_max}")
        self._stamina_max = stamina_max
        self._stamina = stamina_max

    @property
    def stamina(self) -> int:
        return self._stamina

    @property
    def stamina_max(self) -> int:
        return self._stamina_max

    @property
    def ratio(self) -> StaminaRatio:
        return StaminaRatio(self._stamina / self._stamina_max)

    def _name(self) -> str:
        return getattr(self.actor, "name", "Someone")

    # === Mutation ===

    def mod_stamina(self, delta: int) -> None:
        """Apply ``delta`` to stamina, clamped to ``[0, stamina_max]``.

        Overdrawing (a loss larger than the remaining stamina) empties stamina
        and makes the character winded. Losing exactly what is left does not.
        Gaining stamina never adds or clears winded.
        """
        new_stamina = self._stamina + delta
        if new_stamina < 0:
            self._stamina = 0
            self._become_winded()
            return
        self._stamina = min(new_stamina, self._stamina_max)

    def set_stamina(self, value: int) -> None:
        """Move stamina to ``value`` (clamped) without ever winding."""
        target = min(max(value, 0), self._stamina_max)
        self.mod_stamina(target - self._stamina)

    def reset(self) -> None:
        """Restore stamina to full, as after rest or respawn."""
        self.set_stamina(self._stamina_max)

    def _become_winded(self) -> None:
        if self.effects.has_effect(EffectKind.WINDED):
            return
        duration = int(self.tuning.get_numeric_option("WINDED_DURATION_TURNS"))
        try:
            self.effects.add_effect(EffectKind.WINDED, duration)
        except Exception:
            # Stamina is already at zero; losing the effect must not undo that.
            logger.exception("Could not apply winded effect to %s", self._name())
            return
        logger.debug("%s is winded for %d turns", self._name(), duration)
        publish_event(WindedEvent(self.actor, duration))
        publish_event(
            MessageEvent(f"{self._name()} is winded!", colors.STAMINA_WARNING)
        )

    # === Movement cost ===

    def stamina_move_cost_modifier(self, mode: MovementMode) -> float:
        """Move cost multiplier for ``mode`` at the current stamina."""
        return model.stamina_move_cost_modifier(mode, self.ratio)

    # === Burn ===

    def burn_move_stamina(self, moves: MoveCount, mode: MovementMode) -> None:
        """Burn stamina for ``moves`` move points of moving in ``mode``.

        Also rolls once for strain pain when overburdened, whatever the burn.
        """
        if moves < 0:
            raise ValueError(f"moves must be non-negative, got {moves}")
        carried = self.mass.carried_weight()
        capacity = self.mass.weight_capacity()

        base_rate = int(
            self.tuning.get_numeric_option("PLAYER_BASE_STAMINA_BURN_RATE")
        )
        over_percent = model.overburden_percentage(carried, capacity)
        per_turn = model.burn_rate_per_turn(mode, base_rate, over_percent)
        moves_per_turn = int(self.tuning.get_numeric_option("MOVES_PER_TURN"))
        self.mod_stamina(-model.scale_to_moves(per_turn, moves, moves_per_turn))

        if carried > capacity:
            self._roll_strain_pain(model.load_percent(carried, capacity))

    def _roll_strain_pain(self, load_pct: float) -> None:
        bad_back = self.traits.has_trait(TraitKind.BAD_BACK)
        chance = model.pain_chance(load_pct, bad_back)
        if self._pain_rng.random() >= chance:
            return
        amount = StaminaConstants.PAIN_PER_STRAIN
        try:
            self.pain.mod_pain(amount)
        except Exception:
            logger.exception("Could not add strain pain to %s", self._name())
            return
        logger.debug(
            "%s strained at %.0f%% load (chance %.3f)", self._name(), load_pct, chance
        )
        publish_event(StrainEvent(self.actor, amount, load_pct))
        publish_event(
            MessageEvent("Your body strains under the weight!", colors.STRAIN_PAIN)
        )

    # === Regen ===

    def regen_rate(self) -> float:
        """Stamina regained per move point in the current state."""
        return model.regen_rate_per_move(
            float(self.tuning.get_numeric_option("PLAYER_BASE_STAMINA_REGEN_RATE")),
            self.effects.has_effect(EffectKind.WINDED),
            self.encumbrance.encumbrance_at(BodyRegion.MOUTH),
        )

    def update_stamina(self, moves: MoveCount) -> None:
        """Regenerate stamina for ``moves`` move points.

        The fractional total is rounded to the nearest point, halves up.
        """
        if moves < 0:
            raise ValueError(f"moves must be non-negative, got {moves}")
        self.mod_stamina(math.floor(self.regen_rate() * moves + 0.5))
