from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import TextIO

from .keys import InputEvent

_WORDS: dict[str, str] = {
    "on": "power_on",
    "off": "power_off",
    "power": "power_toggle",
    "next": "channel_up",
    "up": "channel_up",
    "+": "channel_up",
    "prev": "channel_down",
    "previous": "channel_down",
    "down": "channel_down",
    "-": "channel_down",
    "status": "status",
    "help": "help",
    "?": "help",
    "quit": "quit",
    "q": "quit",
    "exit": "quit",
}

HELP_TEXT = """Commands:
  on / off / power     power on, off, or toggle
  next, up, +          next channel
  prev, down, -        previous channel
  <n> or tune <n>      tune to channel number n (1-based)
  status               show the current state
  quit, q, exit        leave"""


def parse_command(line: str) -> InputEvent | None:
    """Turn one remote-control line into an event.

    Returns None for blank lines. Raises ValueError for anything unrecognized.
    Channel numbers are not range-checked here; the TV set validates them.
    """

    words = line.strip().lower().split()
    if not words:
        return None

    if words[0] == "tune":
        if len(words) != 2:
            raise ValueError("usage: tune <channel number>")
        return InputEvent(kind="tune", number=_parse_number(words[1]))

    if len(words) == 1:
        word = words[0]
        if word in _WORDS:
            return InputEvent(kind=_WORDS[word])
        if word.lstrip("-").isdigit():
            return InputEvent(kind="tune", number=int(word))

    raise ValueError(f"unknown command: {line.strip()!r} (type 'help')")


def _parse_number(raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"not a channel number: {raw!r}") from None


@dataclass
class ConsoleInput:
    """Line-based remote control.

    Reads one line per `poll()` from `stream` (stdin by default). End of input
    is reported as a quit event.
    """

    stream: TextIO = field(default_factory=lambda: sys.stdin)
    prompt: str | None = None
    out: TextIO = field(default_factory=lambda: sys.stdout)

    def poll(self) -> InputEvent | None:
        if self.prompt:
            self.out.write(self.prompt)
            self.out.flush()
        line = self.stream.readline()
        if line == "":
            return InputEvent(kind="quit")
        return parse_command(line)

    def close(self) -> None:
        # stdin belongs to the process; only close streams we were handed.
        if self.stream is not sys.stdin:
            self.stream.close()
