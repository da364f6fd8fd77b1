from __future__ import annotations

from dataclasses import dataclass, field

from exertion.game.enums import EffectKind


@dataclass
class StatusEffect:
    """A temporary tagged effect on a character.

    Effects are plain records looked up by ``kind``; there is no per-effect
    behavior. The stamina model only ever asks whether a kind is present.

    Attributes
    ----------
    kind:
        Which effect this is.
    duration:
        Remaining number of **turns** this effect stays active. Decremented by
        :meth:`StatusEffectsComponent.update_turn`; the effect is removed when
        it reaches zero. ``-1`` means indefinite (removed manually).
    """

    kind: EffectKind
    duration: int
    name: str = field(init=False)

    def __post_init__(self) -> None:
        self.name = self.kind.value.title()

    def __str__(self) -> str:
        return self.name

    def should_remove(self) -> bool:
        """Return ``True`` once the effect has run out."""
        return self.duration == 0
