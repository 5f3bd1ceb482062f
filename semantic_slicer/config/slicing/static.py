"""Static slicer config loader. Read-only; no business logic."""

import json
from pathlib import Path
from typing import Any

from semantic_slicer.config.slicing.models import SlicerConfig

_config_dir = Path(__file__).resolve().parent
_config_path = _config_dir / "static.json"

_cached: dict[str, SlicerConfig] | None = None
_active_profile: str | None = None


def _load_raw_data() -> dict[str, Any]:
    """Load raw JSON; used to read both profiles and active."""
    raw = _config_path.read_text(encoding="utf-8")
    return json.loads(raw)


def load_slicer_profiles() -> dict[str, SlicerConfig]:
    """Load slicer profiles from static.json. Keys are profile names."""
    global _cached
    if _cached is not None:
        return _cached
    data = _load_raw_data()
    profiles = data.get("profiles", {})
    _cached = {k: SlicerConfig.model_validate(v) for k, v in profiles.items()}
    return _cached


def get_slicer_config(profile_name: str) -> SlicerConfig | None:
    """Return slicer config for the given profile, or None if missing."""
    return load_slicer_profiles().get(profile_name)


def get_active_profile_name() -> str:
    """Return the profile name marked as active in static.json. Defaults to 'default' if missing."""
    global _active_profile
    if _active_profile is not None:
        return _active_profile
    data = _load_raw_data()
    _active_profile = data.get("active", "default")
    return _active_profile


def get_active_slicer_config() -> SlicerConfig:
    """Return the slicer config for the active profile."""
    name = get_active_profile_name()
    cfg = get_slicer_config(name)
    if cfg is None:
        raise ValueError(f"Active profile {name!r} not found in profiles")
    return cfg


def resolve_slicer_config(profile_name: str, inline_config: dict[str, Any] | None = None) -> SlicerConfig:
    """
    Resolve slicer config by profile name or inline config.
    If inline_config is provided and non-empty, validate and return it.
    If profile_name is "active", use the profile marked as active in static.json.
    Otherwise load by profile_name. Raises ValueError if the profile is missing.
    """
    if inline_config:
        return SlicerConfig.model_validate(inline_config)
    if profile_name == "active":
        return get_active_slicer_config()
    cfg = get_slicer_config(profile_name)
    if cfg is None:
        raise ValueError(f"Unknown slicer profile: {profile_name!r}")
    return cfg
