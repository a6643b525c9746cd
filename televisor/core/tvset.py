from __future__ import annotations

from . import transitions
from .channel import Channel, NoChannel
from .discovery import ChannelDiscovery, RandomChannelDiscovery
from .models import TvState


class TvSet:
    """A simple TV set: power, channel search and channel navigation.

    State lives in an immutable `TvState`; each operation swaps it for the
    result of the matching function in `transitions`. Navigation while the set
    is off, or while no channels were found, does nothing.

    Usage:
        tv = TvSet("sony", 5)
        tv.turn_on()          # first power-on searches for channels
        tv.switch_next_channel()
        tv.switch_to(2)
        tv.turn_off()

    Not thread-safe; serialize calls if a set is shared between threads.
    """

    def __init__(
        self,
        model: str,
        channel_capacity: int,
        *,
        discovery: ChannelDiscovery | None = None,
        debug: bool = False,
    ) -> None:
        self._state = transitions.initial_state(model, channel_capacity)
        self._discovery: ChannelDiscovery = discovery if discovery is not None else RandomChannelDiscovery()
        self.debug = debug

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def state(self) -> TvState:
        return self._state

    @property
    def model(self) -> str:
        return self._state.model

    @property
    def channel_capacity(self) -> int:
        return self._state.channel_capacity

    @property
    def is_on(self) -> bool:
        return self._state.is_on

    @property
    def has_signal(self) -> bool:
        return self._state.has_signal

    @property
    def channels(self) -> tuple[Channel, ...]:
        return self._state.channels

    @property
    def channel_count(self) -> int:
        return self._state.channel_count

    @property
    def current_channel(self) -> Channel | NoChannel:
        return self._state.current_channel

    @property
    def current_channel_number(self) -> int:
        """1-based number of the current channel, 0 when nothing is tuned."""
        index = self._state.current_index()
        return 0 if index is None else index + 1

    @property
    def turn_on_count(self) -> int:
        return self._state.turn_on_count

    # -------------------------------------------------------------------------
    # Power
    # -------------------------------------------------------------------------

    def turn_on(self) -> None:
        if self.debug and self._state.channel_count == 0:
            print(f"[debug] {self.model} turn_on: no channels yet, searching")
        self._apply("turn_on", transitions.turn_on(self._state, self._discovery))

    def turn_off(self) -> None:
        self._apply("turn_off", transitions.turn_off(self._state))

    # -------------------------------------------------------------------------
    # Channels
    # -------------------------------------------------------------------------

    def auto_detect_channels(self) -> None:
        """Run a channel search and tune to the last channel found."""
        self._apply("auto_detect", transitions.auto_detect(self._state, self._discovery))
        if self.debug:
            print(f"[debug] {self.model} auto_detect: found={self.channel_count} capacity={self.channel_capacity}")

    def switch_next_channel(self) -> None:
        self._apply("next", transitions.switch_next(self._state))

    def switch_previous_channel(self) -> None:
        self._apply("previous", transitions.switch_previous(self._state))

    def switch_to(self, channel_number: int) -> None:
        """Tune to a 1-based channel number; numbers past the end pick the last channel."""
        self._apply(f"switch_to({channel_number})", transitions.switch_to(self._state, channel_number))

    # -------------------------------------------------------------------------
    # Internal
    # -------------------------------------------------------------------------

    def _apply(self, action: str, new_state: TvState) -> None:
        old = self._state
        self._state = new_state
        if not self.debug:
            return
        if new_state is old:
            reason = "off" if not old.is_on else "no channels"
            print(f"[debug] {self.model} {action}: ignored ({reason})")
            return
        print(
            f"[debug] {self.model} {action}: on={new_state.is_on} channel={new_state.current_channel.name} "
            f"signal={new_state.has_signal} turn_on_count={new_state.turn_on_count}"
        )

    def __repr__(self) -> str:
        return (
            f"TvSet(model={self.model!r}, channel_capacity={self.channel_capacity}, is_on={self.is_on}, "
            f"channel_count={self.channel_count}, current_channel={self.current_channel.name!r})"
        )
