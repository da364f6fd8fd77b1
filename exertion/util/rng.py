"""Deterministic random number generation with isolated streams.

Every random decision in the stamina model (currently only the strain-pain
roll) draws from a named stream derived from a master seed, so that:

1. A simulation replays identically from the same master seed
2. Tests can hand a component its own seeded stream, or a stub, instead of
   patching process-wide random state
3. Adding a new random roll in one domain does not shift another's sequence

Usage:
    # At startup
    from exertion.util import rng
    rng.init(config.RANDOM_SEED)

    # In a component - cache the stream reference
    self._rng = rng.get("stamina.pain")

    # After rng.reset(), cached references automatically use the new stream

Domain naming convention (hierarchical): "stamina.pain", "stamina.regen".
"""

from __future__ import annotations

import zlib
from random import Random
from typing import TYPE_CHECKING, TypeAlias

from exertion import config

if TYPE_CHECKING:
    from exertion.types import RandomSeed


class RNGStream:
    """Proxy that delegates to the current RNG for a domain.

    Callers can cache a reference that survives ``rng.reset()``; each call looks
    the underlying ``Random`` up fresh from the provider.
    """

    def __init__(self, provider: RNGProvider, domain: str) -> None:
        self._provider = provider
        self._domain = domain

    def _rng(self) -> Random:
        return self._provider._get_raw(self._domain)

    def random(self) -> float:
        """Return random float in [0.0, 1.0)."""
        return self._rng().random()


# Type alias for functions that accept either Random or RNGStream.
# Use this in type hints: `def foo(rng: RNG) -> int:`
RNG: TypeAlias = Random | RNGStream


class RNGProvider:
    """Provides isolated RNG streams keyed by domain name.

    Each domain gets its own ``Random`` seeded from ``crc32("<seed>:<domain>")``.
    """

    def __init__(self, master_seed: RandomSeed = None) -> None:
        self._master_seed = master_seed
        self._streams: dict[str, Random] = {}
        self._proxies: dict[str, RNGStream] = {}

    def get(self, domain: str) -> RNGStream:
        """Get a cacheable RNG stream proxy for ``domain``."""
        if domain not in self._proxies:
            self._proxies[domain] = RNGStream(self, domain)
        return self._proxies[domain]

    def _get_raw(self, domain: str) -> Random:
        if domain not in self._streams:
            if self._master_seed is None:
                # No seed: use system entropy for non-deterministic behavior
                self._streams[domain] = Random()
            else:
                # crc32 rather than hash(): hash() is salted per process via
                # PYTHONHASHSEED, which would break replays across sessions
                derived_seed = zlib.crc32(f"{self._master_seed}:{domain}".encode())
                self._streams[domain] = Random(derived_seed)
        return self._streams[domain]

    def reset(self, master_seed: RandomSeed = None) -> None:
        """Reset all streams with a new master seed.

        Existing ``RNGStream`` proxies remain valid and use the new streams.
        """
        self._master_seed = master_seed
        self._streams.clear()


# =============================================================================
# Module-level API
# =============================================================================

_provider: RNGProvider | None = None


def init(master_seed: RandomSeed = None) -> None:
    """Initialize the global RNG provider with a master seed.

    If a provider already exists it is reset instead, so cached proxies keep
    working.
    """
    global _provider
    if _provider is not None:
        _provider.reset(master_seed)
    else:
        _provider = RNGProvider(master_seed)


def get(domain: str) -> RNGStream:
    """Get an RNG stream for the named domain.

    If ``init()`` was never called, a provider seeded with
    ``config.RANDOM_SEED`` is created, so runs replay by default.
    """
    global _provider
    if _provider is None:
        _provider = RNGProvider(config.RANDOM_SEED)
    return _provider.get(domain)


def reset(master_seed: RandomSeed = None) -> None:
    """Reset all RNG streams with a new master seed."""
    if _provider is None:
        raise RuntimeError("RNG not initialized - call rng.init() first")
    _provider.reset(master_seed)
