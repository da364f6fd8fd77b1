"""Numeric game-balance options read by the stamina model.

``TuningOptions`` is the tuning source the stamina component consumes through
``get_numeric_option``. It starts from ``config.DEFAULT_TUNING`` and accepts
overrides (for example from a balance file or a dev console), coercing each
value to the type of its default so integer options stay integers.

Options are loaded once at startup and treated as read-only while the
simulation runs.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping

from exertion.config import DEFAULT_TUNING
from exertion.types import OptionValue
from exertion.util.live_vars import LiveVariableRegistry, live_variable_registry

logger = logging.getLogger(__name__)


def _coerce(key: str, value: OptionValue | str, target_type: type) -> OptionValue:
    """Convert ``value`` to ``target_type`` (``int`` or ``float``).

    Strings are parsed. Floats are only accepted for an integer option when
    they have no fractional part.

    Raises:
        ValueError: If the value cannot be represented as ``target_type``.
    """
    if isinstance(value, bool):
        raise ValueError(f"Option '{key}' must be numeric, got {value!r}")

    if isinstance(value, str):
        text = value.strip()
        try:
            value = int(text) if target_type is int else float(text)
        except ValueError:
            raise ValueError(
                f"Option '{key}' expects {target_type.__name__}, got {value!r}"
            ) from None

    if target_type is int:
        if isinstance(value, float):
            if not value.is_integer():
                raise ValueError(f"Option '{key}' expects int, got {value!r}")
            return int(value)
        return int(value)
    return float(value)


class TuningOptions:
    """Store of named numeric tuning options."""

    def __init__(
        self,
        overrides: Mapping[str, OptionValue | str] | None = None,
        defaults: Mapping[str, OptionValue] = DEFAULT_TUNING,
    ) -> None:
        self._values: dict[str, OptionValue] = dict(defaults)
        self._types: dict[str, type] = {k: type(v) for k, v in defaults.items()}
        if overrides:
            self.load_overrides(overrides)

    def __contains__(self, key: str) -> bool:
        return key in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._values))

    def get_numeric_option(self, key: str) -> OptionValue:
        """Return the value of option ``key``.

        Raises:
            KeyError: If no option named ``key`` exists.
        """
        try:
            return self._values[key]
        except KeyError:
            raise KeyError(f"Unknown tuning option '{key}'") from None

    def set_option(self, key: str, value: OptionValue | str) -> None:
        """Override option ``key``, coercing ``value`` to the option's type.

        Raises:
            KeyError: If no option named ``key`` exists.
            ValueError: If ``value`` does not fit the option's type.
        """
        if key not in self._types:
            raise KeyError(f"Unknown tuning option '{key}'")
        coerced = _coerce(key, value, self._types[key])
        logger.debug("Tuning option %s: %r -> %r", key, self._values[key], coerced)
        self._values[key] = coerced

    def load_overrides(self, overrides: Mapping[str, OptionValue | str]) -> None:
        """Apply several overrides at once."""
        for key, value in overrides.items():
            self.set_option(key, value)

    def register_live_variables(
        self,
        registry: LiveVariableRegistry = live_variable_registry,
        prefix: str = "tuning.",
    ) -> None:
        """Expose every option as a writable live variable named ``prefix + key``."""
        for key in self:
            registry.register(
                f"{prefix}{key}",
                getter=lambda key=key: self.get_numeric_option(key),
                setter=lambda value, key=key: self.set_option(key, value),
                description=f"Tuning option {key}",
            )
