from __future__ import annotations

import random
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Protocol

from .channel import Channel


def channel_name(number: int) -> str:
    return f"Channel#{number}"


class ChannelDiscovery(Protocol):
    """Channel search backend used by a TV set on first power-on."""

    def discover(self, capacity: int) -> Sequence[Channel]:
        """Return the detected channels in tuning order."""
        ...


@dataclass
class RandomChannelDiscovery:
    """Simulated channel search.

    Finds a uniformly random number of channels in ``[0, capacity)``, so a
    search may come back empty even with a positive capacity. Every detected
    channel is named ``Channel#<n>`` (1-based) and has a signal.

    Pass `seed` (or a ready `random.Random`) for reproducible searches.
    """

    seed: int | None = None
    rng: random.Random | None = None
    _rng: random.Random = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._rng = self.rng if self.rng is not None else random.Random(self.seed)

    def discover(self, capacity: int) -> list[Channel]:
        if capacity <= 0:
            raise ValueError(f"capacity must be > 0 (got {capacity})")
        found = self._rng.randrange(0, capacity)
        return [Channel(channel_name(i + 1), True) for i in range(found)]
