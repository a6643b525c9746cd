from __future__ import annotations

from dataclasses import dataclass

from .channel import NO_CHANNEL, Channel, NoChannel, is_no_channel


@dataclass(frozen=True)
class TvState:
    """Snapshot of a TV set. Transitions build a new snapshot, never edit one."""

    model: str
    channel_capacity: int
    channels: tuple[Channel, ...] = ()
    current_channel: Channel | NoChannel = NO_CHANNEL
    is_on: bool = False
    has_signal: bool = False
    turn_on_count: int = 0

    @property
    def channel_count(self) -> int:
        return len(self.channels)

    @property
    def is_tuned(self) -> bool:
        return not is_no_channel(self.current_channel)

    def current_index(self) -> int | None:
        """Zero-based position of the current channel, or None when nothing is tuned."""
        for i, ch in enumerate(self.channels):
            if ch is self.current_channel:
                return i
        return None
