"""
This package contains the character and the components that make up its
exertion state.
"""

from . import components, interfaces, status_effects
from .components import StaminaComponent
from .core import Character
from .status_effects import StatusEffect

__all__ = [
    "Character",
    "StaminaComponent",
    "StatusEffect",
    # Submodules
    "components",
    "interfaces",
    "status_effects",
]
