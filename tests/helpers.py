from __future__ import annotations

from exertion.events import GameEvent, subscribe_to_event
from exertion.game.actors import Character
from exertion.game.enums import EffectKind, MovementMode
from exertion.game.tuning import TuningOptions

TURN_MOVES = 100
CAPACITY_GRAMS = 100_000


class FixedRandom:
    """Stand-in RNG whose ``random()`` always returns ``value``.

    ``FixedRandom(0.0)`` makes any nonzero chance succeed; ``FixedRandom(0.999)``
    makes anything short of certainty fail.
    """

    def __init__(self, value: float) -> None:
        self.value = value
        self.calls = 0

    def random(self) -> float:
        self.calls += 1
        return self.value


class EventRecorder:
    """Collects every published event of the given types."""

    def __init__(self, *event_types: type[GameEvent]) -> None:
        self.events: list[GameEvent] = []
        for event_type in event_types:
            subscribe_to_event(event_type, self.events.append)

    def of_type(self, event_type: type[GameEvent]) -> list[GameEvent]:
        return [e for e in self.events if isinstance(e, event_type)]


def make_character(
    tuning: TuningOptions | None = None,
    pain_roll: float = 0.999,
    **kwargs,
) -> Character:
    """A rested, unburdened character with a deterministic pain roll."""
    kwargs.setdefault("weight_capacity", CAPACITY_GRAMS)
    return Character(
        "Dummy", tuning=tuning, pain_rng=FixedRandom(pain_roll), **kwargs
    )


def catch_breath(character: Character) -> None:
    """Remove "winded" without touching stamina."""
    character.status_effects.remove_effect(EffectKind.WINDED)
    assert not character.has_effect(EffectKind.WINDED)


def move_cost_mod(mode: MovementMode, stamina_proportion: float = 1.0) -> float:
    """Move cost modifier in ``mode`` with the given share of stamina left."""
    character = make_character()
    assert character.set_movement_mode(mode) == mode
    new_stamina = int(stamina_proportion * character.get_stamina_max())
    character.set_stamina(new_stamina)
    assert character.get_stamina() == new_stamina
    return character.stamina_move_cost_modifier()


def burdened_burn_rate(mode: MovementMode, carried_grams: int = 0) -> int:
    """Stamina burned by one turn of moving in ``mode`` carrying ``carried_grams``."""
    character = make_character()
    character.burden.carried = carried_grams
    character.set_movement_mode(mode)
    before = character.get_stamina()
    character.burn_move_stamina(TURN_MOVES)
    after = character.get_stamina()
    assert before > after
    return before - after


def actual_regen_rate(character: Character, moves: int = TURN_MOVES) -> int:
    """Stamina regained by ``update_stamina(moves)`` starting from 10%."""
    character.set_stamina(character.get_stamina_max() // 10)
    before = character.get_stamina()
    character.update_stamina(moves)
    return character.get_stamina() - before
