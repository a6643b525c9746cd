from __future__ import annotations

import json
from dataclasses import dataclass, replace
from pathlib import Path

DEFAULT_CHANNEL_CAPACITY = 10


@dataclass(frozen=True)
class Settings:
    model: str
    channel_capacity: int
    seed: int | None
    debug: bool

    @staticmethod
    def defaults() -> "Settings":
        return Settings(model="", channel_capacity=DEFAULT_CHANNEL_CAPACITY, seed=None, debug=False)

    def with_overrides(
        self,
        *,
        model: str | None = None,
        channel_capacity: int | None = None,
        seed: int | None = None,
        debug: bool | None = None,
    ) -> "Settings":
        """Return a copy with every non-None argument applied (CLI flags win over the file)."""
        out = self
        if model is not None:
            out = replace(out, model=model)
        if channel_capacity is not None:
            out = replace(out, channel_capacity=_validate_capacity(channel_capacity))
        if seed is not None:
            out = replace(out, seed=seed)
        if debug is not None:
            out = replace(out, debug=debug)
        return out


def _require_int(key: str, value: object) -> int:
    # bool is an int subclass; JSON true must not pass as 1.
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{key} must be an integer (got {value!r})")
    return value


def _validate_capacity(value: object) -> int:
    capacity = _require_int("channel_capacity", value)
    if capacity <= 0:
        raise ValueError(f"channel_capacity must be > 0 (got {capacity})")
    return capacity


def load_settings(path: Path) -> Settings:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"{path}: invalid JSON: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"{path}: settings must be a JSON object")

    base = Settings.defaults()
    model = str(data.get("model", base.model) or "")
    channel_capacity = _validate_capacity(data.get("channel_capacity", base.channel_capacity))
    seed_raw = data.get("seed")
    seed = _require_int("seed", seed_raw) if seed_raw is not None else None
    debug = bool(data.get("debug", False))
    return Settings(model=model, channel_capacity=channel_capacity, seed=seed, debug=debug)


def load_settings_file(*, repo_root: Path, path_override: Path | None = None) -> Settings:
    """Load settings honoring an optional override path.

    Resolution order:
    1) path_override, if given (must exist)
    2) config/settings.json under repo_root, if it exists
    3) built-in defaults
    """

    if path_override is not None:
        print(f"[config] settings={path_override} (override)")
        return load_settings(path_override)
    path = repo_root / "config" / "settings.json"
    if path.exists():
        print(f"[config] settings={path} (file)")
        return load_settings(path)
    print("[config] settings=<defaults>")
    return Settings.defaults()
