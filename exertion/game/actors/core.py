"""
Characters whose movement is limited by stamina.

Defines the Character class, which composes the exertion components and is
the surface the scheduler and the movement subsystem talk to.

Character:
    Holds a movement mode plus components for stamina, status effects,
    traits, encumbrance, carried weight and pain. The stamina arithmetic
    itself lives in :class:`StaminaComponent`; the character only snapshots
    its current movement mode and hands it over, so a mode change made
    mid-tick by another system cannot alter a calculation in progress.

Typical per-tick flow driven by the scheduler:
    character.process_moves(moves, moving=True)   # burn, then regen
    character.update_turn()                       # once per full turn
"""

from __future__ import annotations

import logging

from exertion import colors
from exertion.config import DEFAULT_WEIGHT_CAPACITY_GRAMS
from exertion.events import MessageEvent, publish_event
from exertion.game.enums import EffectKind, MovementMode, TraitKind
from exertion.game.tuning import TuningOptions
from exertion.types import Grams, MoveCount
from exertion.util.rng import RNG

from .components import (
    BurdenComponent,
    EncumbranceComponent,
    PainComponent,
    StaminaComponent,
    StatusEffectsComponent,
    TraitsComponent,
)
from .status_effects import StatusEffect

logger = logging.getLogger(__name__)


class Character:
    """A character that moves, tires and recovers.

    Most systems should go through the methods here rather than reaching into
    the components, but the components are public for inspection and tests.
    """

    def __init__(
        self,
        name: str = "<Unnamed Character>",
        tuning: TuningOptions | None = None,
        *,
        stamina_max: int | None = None,
        weight_capacity: Grams = DEFAULT_WEIGHT_CAPACITY_GRAMS,
        traits: set[TraitKind] | None = None,
        movement_mode: MovementMode = MovementMode.WALK,
        pain_rng: RNG | None = None,
    ) -> None:
        """
        Instantiate Character.

        Args:
            name: Character name, used in messages
            tuning: Tuning options to read balance numbers from
            stamina_max: Maximum stamina (defaults to PLAYER_MAX_STAMINA)
            weight_capacity: Grams the character can carry before being
                overburdened
            traits: Starting traits
            movement_mode: Starting movement mode
            pain_rng: Random source for strain pain rolls
        """
        self.name = name
        self.tuning = tuning if tuning is not None else TuningOptions()
        self.movement_mode = movement_mode

        # === Collaborator Components ===
        self.status_effects = StatusEffectsComponent()
        self.traits = TraitsComponent(traits)
        self.encumbrance = EncumbranceComponent()
        self.burden = BurdenComponent(capacity=weight_capacity)
        self.pain = PainComponent()

        # === Stamina ===
        self.stamina = StaminaComponent(
            self.tuning,
            self.status_effects,
            self.traits,
            self.encumbrance,
            self.burden,
            self.pain,
            stamina_max=stamina_max,
            pain_rng=pain_rng,
            actor=self,
        )

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(name={self.name!r}, "
            f"stamina={self.stamina.stamina}/{self.stamina.stamina_max}, "
            f"mode={self.movement_mode.name}, pain={self.pain.pain})"
        )

    # === Stamina accessors ===

    def get_stamina(self) -> int:
        return self.stamina.stamina

    def get_stamina_max(self) -> int:
        return self.stamina.stamina_max

    def set_stamina(self, value: int) -> None:
        self.stamina.set_stamina(value)

    def mod_stamina(self, delta: int) -> None:
        self.stamina.mod_stamina(delta)

    def get_pain(self) -> int:
        return self.pain.pain

    def has_effect(self, kind: EffectKind) -> bool:
        return self.status_effects.has_effect(kind)

    def has_trait(self, kind: TraitKind) -> bool:
        return self.traits.has_trait(kind)

    # === Movement ===

    def can_run(self) -> bool:
        """Return ``True`` if the character has the breath to run."""
        return self.get_stamina() > 0 and not self.has_effect(EffectKind.WINDED)

    def movement_mode_is(self, mode: MovementMode) -> bool:
        return self.movement_mode == mode

    def set_movement_mode(self, mode: MovementMode) -> MovementMode:
        """Switch movement mode and return the mode actually in effect.

        Asking to run while unable to falls back to walking.
        """
        if mode == MovementMode.RUN and not self.can_run():
            mode = MovementMode.WALK
            publish_event(
                MessageEvent("You're too tired to run.", colors.STAMINA_WARNING)
            )
        self.movement_mode = mode
        return mode

    def stamina_move_cost_modifier(self) -> float:
        """Move cost multiplier for the current mode and stamina."""
        return self.stamina.stamina_move_cost_modifier(self.movement_mode)

    # === Per-tick updates ===

    def burn_move_stamina(self, moves: MoveCount) -> None:
        """Burn stamina for ``moves`` move points spent moving."""
        self.stamina.burn_move_stamina(moves, self.movement_mode)

    def update_stamina(self, moves: MoveCount) -> None:
        """Regenerate stamina for ``moves`` elapsed move points."""
        self.stamina.update_stamina(moves)

    def process_moves(self, moves: MoveCount, moving: bool) -> None:
        """Apply one scheduler tick: burn if moving, then regenerate."""
        mode = self.movement_mode
        if moving:
            self.stamina.burn_move_stamina(moves, mode)
        self.stamina.update_stamina(moves)

    def update_turn(self) -> list[StatusEffect]:
        """Advance status effect durations by one turn.

        Returns the effects that expired.
        """
        expired = self.status_effects.update_turn()
        for effect in expired:
            logger.debug("%s: %s wore off", self.name, effect.name)
            if effect.kind == EffectKind.WINDED:
                publish_event(MessageEvent(f"{self.name} catches their breath."))
        return expired
