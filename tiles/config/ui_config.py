"""
tiles UI Configuration.

Handles persistence of UI preferences: which layout representation to run,
the start-up shape, whether an emptied layout gets a fresh panel, and the
Textual theme. The layout itself is never saved.
Config is stored in ~/.config/tiles/ui_config.json
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional

from ..exceptions import ConfigurationError
from .constants import (
    INITIAL_LAYOUTS,
    REPRESENTATION_REGISTRY,
    REPRESENTATIONS,
    TILES_CONFIG_DIR,
)

DEFAULT_CONFIG: dict[str, Any] = {
    "representation": REPRESENTATION_REGISTRY,
    "initial_layout": None,
    "reseed_when_empty": True,
    "theme": "textual-dark",
}


def get_ui_config_path() -> Path:
    """
    Get path to UI config file.

    Returns:
        Path to ~/.config/tiles/ui_config.json
    """
    TILES_CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    return TILES_CONFIG_DIR / "ui_config.json"


def load_ui_config() -> dict[str, Any]:
    """
    Load UI configuration from file.

    Returns:
        Config dict, or defaults if file doesn't exist or is invalid
    """
    path = get_ui_config_path()
    if path.exists():
        try:
            config = json.loads(path.read_text())
            if not isinstance(config, dict):
                return DEFAULT_CONFIG.copy()
            # Merge with defaults to handle missing keys
            return {**DEFAULT_CONFIG, **config}
        except (json.JSONDecodeError, OSError):
            return DEFAULT_CONFIG.copy()
    return DEFAULT_CONFIG.copy()


def save_ui_config(config: dict[str, Any]) -> None:
    """
    Save UI configuration to file.

    Args:
        config: Configuration dict to save
    """
    path = get_ui_config_path()
    try:
        path.write_text(json.dumps(config, indent=2) + "\n")
    except OSError:
        # Preferences are non-critical
        pass


def validate_representation(value: str) -> str:
    if value not in REPRESENTATIONS:
        raise ConfigurationError(
            f"Invalid representation '{value}'. Must be one of: {REPRESENTATIONS}",
            setting="representation",
        )
    return value


def validate_initial_layout(value: Optional[str]) -> Optional[str]:
    if value is not None and value not in INITIAL_LAYOUTS:
        raise ConfigurationError(
            f"Invalid initial layout '{value}'. Must be one of: {INITIAL_LAYOUTS}",
            setting="initial_layout",
        )
    return value


def get_representation() -> str:
    """
    Get the layout representation to run.

    Raises:
        ConfigurationError: If the stored value is not a known representation
    """
    return validate_representation(str(load_ui_config().get("representation")))


def set_representation(representation: str) -> None:
    config = load_ui_config()
    config["representation"] = validate_representation(representation)
    save_ui_config(config)


def get_initial_layout() -> Optional[str]:
    """
    Get the start-up shape, or None to use the representation's default.

    Raises:
        ConfigurationError: If the stored value is not a known shape
    """
    return validate_initial_layout(load_ui_config().get("initial_layout"))


def set_initial_layout(initial_layout: Optional[str]) -> None:
    config = load_ui_config()
    config["initial_layout"] = validate_initial_layout(initial_layout)
    save_ui_config(config)


def get_reseed_when_empty() -> bool:
    return bool(load_ui_config().get("reseed_when_empty", True))


def get_theme() -> str:
    """
    Get current theme name from config.

    Returns:
        Theme name string
    """
    return str(load_ui_config().get("theme", "textual-dark"))


def set_theme(theme_name: str) -> None:
    """
    Set and persist theme preference.

    Args:
        theme_name: Name of theme to set
    """
    config = load_ui_config()
    config["theme"] = theme_name
    save_ui_config(config)
