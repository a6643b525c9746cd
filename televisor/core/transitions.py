"""Pure state transitions of a TV set.

Every function takes a `TvState` and returns the next one. When an operation
does not apply (power off, empty channel list) the input state is returned
as-is, so callers can detect no-ops with an identity check.
"""

from __future__ import annotations

from dataclasses import replace

from .channel import NO_CHANNEL, Channel
from .discovery import ChannelDiscovery
from .models import TvState

UNKNOWN_MODEL = "Unknown model"


def initial_state(model: str, channel_capacity: int) -> TvState:
    """Validate construction arguments and build a powered-off, untuned set.

    A model that is blank after trimming falls back to "Unknown model".
    """

    if model is None:
        raise ValueError("model: TV model cannot be None")
    if not isinstance(model, str):
        raise ValueError(f"model: must be a string (got {model!r})")
    if isinstance(channel_capacity, bool) or not isinstance(channel_capacity, int):
        raise ValueError(f"channel_capacity: must be an integer (got {channel_capacity!r})")
    if channel_capacity <= 0:
        raise ValueError(f"channel_capacity: must be > 0 (got {channel_capacity})")

    model = model.strip()
    return TvState(model=model or UNKNOWN_MODEL, channel_capacity=channel_capacity)


def _tune(state: TvState, channel: Channel) -> TvState:
    return replace(state, current_channel=channel, has_signal=channel.has_signal)


def auto_detect(state: TvState, discovery: ChannelDiscovery) -> TvState:
    """Replace the channel list with a fresh search result.

    The last detected channel becomes current. An empty search leaves the set
    untuned and without signal.
    """

    found = tuple(discovery.discover(state.channel_capacity))[: state.channel_capacity]
    if not found:
        return replace(state, channels=(), current_channel=NO_CHANNEL, has_signal=False)
    return _tune(replace(state, channels=found), found[-1])


def turn_on(state: TvState, discovery: ChannelDiscovery) -> TvState:
    # Counts calls, not off -> on transitions.
    state = replace(state, is_on=True, turn_on_count=state.turn_on_count + 1)
    if state.channel_count == 0:
        state = auto_detect(state, discovery)
    return replace(state, has_signal=state.current_channel.has_signal)


def turn_off(state: TvState) -> TvState:
    if not state.is_on:
        return state
    return replace(state, is_on=False, has_signal=False)


def _step(state: TvState, offset: int) -> TvState:
    if not state.is_on or state.channel_count == 0:
        return state
    index = state.current_index()
    if index is None:
        # Untuned with channels present: next starts at the first, previous at the last.
        index = -1 if offset > 0 else 0
    return _tune(state, state.channels[(index + offset) % state.channel_count])


def switch_next(state: TvState) -> TvState:
    """Advance one channel, wrapping from the last to the first."""
    return _step(state, 1)


def switch_previous(state: TvState) -> TvState:
    """Go back one channel, wrapping from the first to the last."""
    return _step(state, -1)


def switch_to(state: TvState, channel_number: int) -> TvState:
    """Tune to a 1-based channel number.

    Numbers past the end clamp to the last channel. Non-positive numbers are
    rejected even while the set is off.
    """

    if channel_number <= 0:
        raise ValueError(f"channel_number: must be > 0 (got {channel_number})")
    if not state.is_on or state.channel_count == 0:
        return state
    index = min(channel_number, state.channel_count) - 1
    return _tune(state, state.channels[index])
