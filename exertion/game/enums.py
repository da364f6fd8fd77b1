from enum import Enum, auto


class MovementMode(Enum):
    """Gait a character moves with. Affects move cost and stamina burn."""

    WALK = auto()
    RUN = auto()
    CROUCH = auto()


class EffectKind(Enum):
    """Status effect tags the stamina model sets or queries."""

    WINDED = "winded"


class TraitKind(Enum):
    """Trait tags the stamina model queries."""

    BAD_BACK = "bad_back"


class BodyRegion(Enum):
    """Body regions that carry their own encumbrance value."""

    HEAD = auto()
    EYES = auto()
    MOUTH = auto()
    TORSO = auto()
    ARMS = auto()
    HANDS = auto()
    LEGS = auto()
    FEET = auto()
