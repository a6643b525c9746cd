from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class InputEvent:
    kind: str  # "power_on" | "power_off" | "power_toggle" | "channel_up" | "channel_down" | "tune" | "status" | "help" | "quit"
    number: int | None = None  # channel number for "tune"
