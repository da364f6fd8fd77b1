from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any


@dataclass
class LiveVariable:
    """A tuning value exposed to the dev console for reading and editing."""

    name: str
    description: str
    getter: Callable[[], Any]
    setter: Callable[[Any], None] | None = None

    def get_value(self) -> Any:
        return self.getter()

    def set_value(self, value: Any) -> bool:
        """Write ``value`` through the setter.

        Returns ``False`` without writing when the variable is read-only.
        """
        if self.setter is None:
            return False
        self.setter(value)
        return True


class LiveVariableRegistry:
    """Name-keyed collection of ``LiveVariable`` objects."""

    def __init__(self) -> None:
        self._variables: dict[str, LiveVariable] = {}

    def register(
        self,
        name: str,
        getter: Callable[[], Any],
        setter: Callable[[Any], None] | None = None,
        *,
        description: str = "",
    ) -> None:
        """Add a variable. Names are unique; a second registration raises."""
        if name in self._variables:
            raise ValueError(f"Live variable '{name}' already registered")
        self._variables[name] = LiveVariable(name, description, getter, setter)

    def get_variable(self, name: str) -> LiveVariable | None:
        return self._variables.get(name)

    def get_all_variables(self) -> list[LiveVariable]:
        """Every registered variable, ordered by name."""
        return sorted(self._variables.values(), key=lambda v: v.name)


# Shared by the tuning options and the dev console
live_variable_registry = LiveVariableRegistry()
