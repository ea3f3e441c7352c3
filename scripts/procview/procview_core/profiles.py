"""Profile resolution and user config merging for the dashboard."""

from __future__ import annotations

import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

ALL_PANELS = ["search", "table", "details", "help"]

BUILTIN_PROFILES: dict[str, dict] = {
    "default": {
        "panels": ALL_PANELS,
        "refresh_seconds": 2,
        "page_step": 10,
        "query": "",
    },
    "compact": {
        "panels": ["search", "table", "help"],
        "refresh_seconds": 2,
        "page_step": 10,
        "query": "",
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
    logger.debug("loaded config from %s", config_path)
    return config


def _positive_int(value, name: str) -> int:
    try:
        return max(1, int(value))
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{name} must be an integer") from exc


def resolve_profile(profile: str, config_path: str | None = None) -> dict:
    if profile not in BUILTIN_PROFILES:
        raise ValueError(f"unknown profile: {profile}")

    resolved = dict(BUILTIN_PROFILES[profile])
    user_config = load_user_config(config_path)

    selected_profile = user_config.get("profile")
    if selected_profile:
        if selected_profile not in BUILTIN_PROFILES:
            raise ValueError(f"unknown profile in config: {selected_profile}")
        resolved = dict(BUILTIN_PROFILES[selected_profile])
        profile = selected_profile

    if "refresh_seconds" in user_config:
        resolved["refresh_seconds"] = _positive_int(user_config["refresh_seconds"], "refresh_seconds")
    if "page_step" in user_config:
        resolved["page_step"] = _positive_int(user_config["page_step"], "page_step")
    if isinstance(user_config.get("query"), str):
        resolved["query"] = user_config["query"]

    panel_config = user_config.get("panels")
    if isinstance(panel_config, dict):
        # disable map: {"details": false}
        resolved["panels"] = [panel for panel in ALL_PANELS if panel_config.get(panel, panel in resolved["panels"])]
    elif isinstance(panel_config, list) and panel_config:
        filtered = [p for p in panel_config if p in ALL_PANELS]
        if filtered:
            resolved["panels"] = filtered

    # the table is the dashboard itself
    if "table" not in resolved["panels"]:
        resolved["panels"] = [*resolved["panels"], "table"]

    resolved["name"] = profile
    return resolved
