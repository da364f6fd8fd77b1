"""
Narrow interfaces the stamina component consumes.

The stamina model does not own the character's effects, traits, equipment,
inventory or pain. It talks to them through these protocols so any
implementation (the in-memory components in ``components.py``, a test stub,
or a larger game's registries) can be plugged in.
"""

from __future__ import annotations

from typing import Protocol

from exertion.game.enums import BodyRegion, EffectKind, TraitKind
from exertion.types import Grams, OptionValue


class TuningSource(Protocol):
    """Supplies numeric game-balance options by name."""

    def get_numeric_option(self, key: str) -> OptionValue: ...


class EffectRegistry(Protocol):
    """Tagged status effects with durations in turns."""

    def has_effect(self, kind: EffectKind) -> bool: ...

    def add_effect(self, kind: EffectKind, duration: int) -> None: ...

    def remove_effect(self, kind: EffectKind) -> bool: ...


class TraitRegistry(Protocol):
    def has_trait(self, kind: TraitKind) -> bool: ...


class EncumbranceProvider(Protocol):
    def encumbrance_at(self, region: BodyRegion) -> int: ...


class MassProvider(Protocol):
    """Carried weight and weight capacity, both in grams."""

    def carried_weight(self) -> Grams: ...

    def weight_capacity(self) -> Grams: ...


class PainSink(Protocol):
    def mod_pain(self, amount: int) -> None: ...
