"""Profile resolution and user config merging for layout settings."""

from __future__ import annotations

import json
from pathlib import Path

from termflex.models import LayoutSettings
from termflex.theme import BUILTIN_THEMES, theme_for

BUILTIN_PROFILES: dict[str, dict] = {
    "default": {
        "theme": "claude",
        "gap": 1,
        "min_panel_width": 0,
        "breakpoints": {"small": 80, "medium": 120},
    },
    "compact": {
        "theme": "claude",
        "gap": 0,
        "min_panel_width": 0,
        "breakpoints": {"small": 80, "medium": 120},
    },
    "plain": {
        "theme": "plain",
        "gap": 1,
        "min_panel_width": 0,
        "breakpoints": {"small": 80, "medium": 120},
    },
}


def load_user_config(path: str | None) -> dict:
    if not path:
        return {}

    config_path = Path(path)
    if not config_path.exists():
        raise ValueError(f"config path not found: {config_path}")

    try:
        config = json.loads(config_path.read_text())
    except json.JSONDecodeError as exc:
        raise ValueError(f"invalid JSON config: {exc}") from exc
    if not isinstance(config, dict):
        raise ValueError("config must be a JSON object")
    return config


def _non_negative(value, key: str) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{key} must be an integer: {value!r}") from exc
    return max(0, number)


def resolve_profile(profile: str, config_path: str | None = None) -> dict:
    if profile not in BUILTIN_PROFILES:
        raise ValueError(f"unknown profile: {profile}")

    user_config = load_user_config(config_path)

    selected_profile = user_config.get("profile")
    if selected_profile:
        if selected_profile not in BUILTIN_PROFILES:
            raise ValueError(f"unknown profile in config: {selected_profile}")
        profile = selected_profile

    resolved = dict(BUILTIN_PROFILES[profile])
    resolved["breakpoints"] = dict(resolved["breakpoints"])

    if "theme" in user_config:
        theme = str(user_config["theme"])
        if theme not in BUILTIN_THEMES:
            raise ValueError(f"unknown theme in config: {theme}")
        resolved["theme"] = theme

    for key in ("gap", "min_panel_width"):
        if key in user_config:
            resolved[key] = _non_negative(user_config[key], key)

    breakpoints = user_config.get("breakpoints")
    if isinstance(breakpoints, dict):
        for key in ("small", "medium"):
            if key in breakpoints:
                resolved["breakpoints"][key] = _non_negative(breakpoints[key], f"breakpoints.{key}")
        if resolved["breakpoints"]["small"] > resolved["breakpoints"]["medium"]:
            raise ValueError("breakpoints.small must not exceed breakpoints.medium")

    resolved["name"] = profile
    return resolved


def settings_from_profile(profile: dict) -> LayoutSettings:
    breakpoints = profile.get("breakpoints", {})
    return LayoutSettings(
        theme=theme_for(profile.get("theme", "claude")),
        min_panel_width=int(profile.get("min_panel_width", 0)),
        small_breakpoint=int(breakpoints.get("small", 80)),
        medium_breakpoint=int(breakpoints.get("medium", 120)),
        gap=int(profile.get("gap", 1)),
    )
