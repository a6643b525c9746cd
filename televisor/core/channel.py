from __future__ import annotations

from dataclasses import dataclass, field

NO_CHANNEL_NAME = "No channel"


class Channel:
    """A detected TV channel.

    The name is fixed at construction. `has_signal` may be flipped from outside
    to simulate signal loss; the TV set only ever reads it.

    Channels compare by identity: the object in the channel list is the same
    object held as the current channel.
    """

    __slots__ = ("_name", "has_signal")

    def __init__(self, name: str, has_signal: bool = True) -> None:
        if not isinstance(name, str) or not name.strip():
            raise ValueError(f"name: channel name cannot be empty or whitespace (got {name!r})")
        self._name = name
        self.has_signal = bool(has_signal)

    @property
    def name(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"Channel(name={self._name!r}, has_signal={self.has_signal})"


@dataclass(frozen=True)
class NoChannel:
    """Placeholder for "nothing tuned". Never carries a signal."""

    name: str = field(default=NO_CHANNEL_NAME, init=False)

    @property
    def has_signal(self) -> bool:
        return False


NO_CHANNEL = NoChannel()


def no_channel() -> NoChannel:
    return NO_CHANNEL


def is_no_channel(channel: Channel | NoChannel) -> bool:
    return channel == NO_CHANNEL
