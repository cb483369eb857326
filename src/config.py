"""
Load and expose app config (YAML). Used by the generator and daily refresh to get
output size, pattern pack, theme and the seed state file.
"""
from pathlib import Path
from typing import Any

import yaml


def _project_root() -> Path:
    return Path(__file__).resolve().parent.parent


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load config from YAML. Path is optional; defaults to config/default.yaml."""
    if config_path is None:
        config_path = _project_root() / "config" / "default.yaml"
    path = Path(config_path)
    if not path.exists():
        return _defaults()
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    return _merge(_defaults(), data)


def _merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Section-wise merge: keys in override win, missing keys keep defaults."""
    out = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(out.get(key), dict):
            out[key] = {**out[key], **value}
        else:
            out[key] = value
    return out


# Device presets: (width, height) in pixels
_DEVICE_PRESETS: dict[str, tuple[int, int]] = {
    "phone": (1080, 2400),
    "tablet": (1600, 2560),
    "desktop": (1920, 1080),
    "uhd": (3840, 2160),
}


def _defaults() -> dict[str, Any]:
    return {
        "output": {
            "dir": "output",
            "filename": "wallpaper.png",
            "width": 1080,
            "height": 2400,
            "device": None,
        },
        "generator": {"pack": "curated", "theme": "system"},
        "daily": {"enabled": True},
        "state": {"path": "output/.wallpaper_state.json"},
    }


def resolve_output_config(config: dict[str, Any]) -> dict[str, Any]:
    """Resolve output config: device preset overrides width/height if set."""
    out = dict(config.get("output", {}))
    device = out.get("device")
    if device and device in _DEVICE_PRESETS:
        w, h = _DEVICE_PRESETS[device]
        out["width"] = w
        out["height"] = h
    return out


def _resolve_path(value: str | Path) -> Path:
    p = Path(value)
    if not p.is_absolute():
        p = _project_root() / p
    return p


def get_output_dir(config: dict[str, Any]) -> Path:
    """Resolve output directory (relative to project root if needed)."""
    out = config.get("output", {})
    return _resolve_path(out.get("dir", "output"))


def get_output_path(config: dict[str, Any]) -> Path:
    """Where the file sink writes the wallpaper."""
    name = config.get("output", {}).get("filename", "wallpaper.png")
    return get_output_dir(config) / name


def get_state_path(config: dict[str, Any]) -> Path:
    """Seed state file (relative to project root if needed)."""
    state = config.get("state", {})
    return _resolve_path(state.get("path", "output/.wallpaper_state.json"))
