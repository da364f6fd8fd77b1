"""
Exertion: the stamina model for turn-based characters.

Stamina is drained by movement, regenerated every tick, and feeds back into
movement cost and the "winded" status effect. See ``exertion.game.stamina``
for the arithmetic and ``exertion.game.actors`` for the character that owns it.
"""

__version__ = "0.1.0"
