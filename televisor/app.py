from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import TextIO

from televisor.core.config import Settings, load_settings_file
from televisor.core.discovery import RandomChannelDiscovery
from televisor.core.tvset import TvSet
from televisor.input.console import HELP_TEXT, ConsoleInput
from televisor.input.keys import InputEvent


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="televisor", description="Simple TV set simulator.")
    parser.add_argument(
        "--settings",
        type=str,
        default=None,
        help="Override settings config path (default: config/settings.json if present).",
    )
    parser.add_argument("--model", type=str, default=None, help="TV model name (blank -> 'Unknown model').")
    parser.add_argument("--capacity", type=int, default=None, help="Maximum number of channels the set can hold.")
    parser.add_argument("--seed", type=int, default=None, help="Seed the channel search for reproducible runs.")
    parser.add_argument("--debug", action="store_true", default=None, help="Print [debug] state transitions.")
    return parser.parse_args(argv)


def format_status(tv: TvSet) -> str:
    power = "ON" if tv.is_on else "OFF"
    if not tv.is_on:
        return f"{tv.model}: {power}"
    number = tv.current_channel_number if tv.state.is_tuned else "-"
    where = f"{number}/{tv.channel_count}"
    signal = "signal" if tv.has_signal else "NO SIGNAL"
    return f"{tv.model}: {power} channel {where} {tv.current_channel.name} ({signal})"


def handle_event(tv: TvSet, evt: InputEvent, out: TextIO) -> bool:
    """Apply one remote-control event. Returns False when the loop should stop."""

    if evt.kind == "quit":
        return False
    if evt.kind == "help":
        print(HELP_TEXT, file=out)
        return True
    if evt.kind == "power_on":
        tv.turn_on()
    elif evt.kind == "power_off":
        tv.turn_off()
    elif evt.kind == "power_toggle":
        if tv.is_on:
            tv.turn_off()
        else:
            tv.turn_on()
    elif evt.kind == "channel_up":
        tv.switch_next_channel()
    elif evt.kind == "channel_down":
        tv.switch_previous_channel()
    elif evt.kind == "tune":
        if evt.number is None:
            raise ValueError("tune event requires a channel number")
        tv.switch_to(evt.number)
    elif evt.kind != "status":
        raise ValueError(f"unknown event kind: {evt.kind!r}")
    print(format_status(tv), file=out)
    return True


def build_tvset(settings: Settings) -> TvSet:
    return TvSet(
        settings.model,
        settings.channel_capacity,
        discovery=RandomChannelDiscovery(seed=settings.seed),
        debug=settings.debug,
    )


def main(argv: list[str] | None = None, stdin: TextIO | None = None) -> int:
    args = _parse_args(argv)

    repo_root = Path(__file__).resolve().parents[1]
    settings_path = Path(args.settings).expanduser() if args.settings else None

    try:
        settings = load_settings_file(repo_root=repo_root, path_override=settings_path).with_overrides(
            model=args.model,
            channel_capacity=args.capacity,
            seed=args.seed,
            debug=args.debug,
        )
        tv = build_tvset(settings)
    except (OSError, ValueError) as e:
        print(f"televisor: {e}", file=sys.stderr)
        return 2

    interactive = stdin is None and sys.stdin.isatty()
    inp = ConsoleInput(stream=stdin if stdin is not None else sys.stdin, prompt="tv> " if interactive else None)
    print(f"Televisor: {tv.model} (capacity {tv.channel_capacity})")
    print("Type 'help' for commands.")
    print()

    try:
        while True:
            try:
                evt = inp.poll()
                if evt is None:
                    continue
                if not handle_event(tv, evt, sys.stdout):
                    print("Exiting.")
                    return 0
            except ValueError as e:
                print(f"error: {e}", file=sys.stderr)
    finally:
        inp.close()


if __name__ == "__main__":
    raise SystemExit(main())
