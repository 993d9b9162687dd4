"""Repository configuration management for pinmark.

Handles reading and writing the .pinmark/config.yaml file in each repository.
The file is only written when the user pins or clears a reference; reading
a repository without one falls back to the defaults.
"""

import copy
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, ValidationError, field_validator

from pinmark.annotate.models import ChangeKind


class ConfigError(Exception):
    """Raised when the repository configuration holds invalid values."""

    pass


# Default configuration values
DEFAULT_CONFIG = {
    "pinned_ref": None,
    "styles": {
        "modified": {"color": "yellow", "glyph": "▌"},
        "added": {"color": "green", "glyph": "▌"},
        "removed": {"color": "red", "glyph": "▼"},
    },
}

# Colour names understood by click.style
_COLORS = {
    "black", "red", "green", "yellow", "blue", "magenta", "cyan", "white",
    "bright_black", "bright_red", "bright_green", "bright_yellow",
    "bright_blue", "bright_magenta", "bright_cyan", "bright_white",
}


class CategoryStyle(BaseModel):
    """Gutter style for one change category.

    Attributes:
        color: Terminal colour name for the gutter glyph.
        glyph: Single character drawn in the gutter.
    """

    color: str
    glyph: str

    @field_validator("color")
    @classmethod
    def check_color(cls, v: str) -> str:
        """Ensure the colour is one the terminal renderer knows."""
        v = v.strip().lower()
        if v not in _COLORS:
            raise ValueError(f"unknown colour {v!r}")
        return v

    @field_validator("glyph")
    @classmethod
    def check_glyph(cls, v: str) -> str:
        """Ensure the glyph occupies exactly one character."""
        if len(v) != 1:
            raise ValueError("glyph must be a single character")
        return v


def get_config_dir(repo_root: Path) -> Path:
    """Get the repository config directory.

    Args:
        repo_root: The root directory of the git repository.

    Returns:
        Path to .pinmark/
    """
    return repo_root / ".pinmark"


def get_config_file(repo_root: Path) -> Path:
    """Return path to the config.yaml file.

    Args:
        repo_root: The root directory of the git repository.

    Returns:
        Path to .pinmark/config.yaml
    """
    return get_config_dir(repo_root) / "config.yaml"


def load_config(repo_root: Path) -> dict:
    """Load the pinmark configuration from config.yaml.

    Missing keys are filled from defaults. A missing or corrupted file
    yields the defaults.

    Args:
        repo_root: The root directory of the git repository.

    Returns:
        Configuration dictionary.
    """
    config_file = get_config_file(repo_root)

    if not config_file.exists():
        return copy.deepcopy(DEFAULT_CONFIG)

    try:
        with open(config_file, "r") as f:
            config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError):
        # If config is corrupted, return defaults
        return copy.deepcopy(DEFAULT_CONFIG)

    if not isinstance(config, dict):
        return copy.deepcopy(DEFAULT_CONFIG)

    # Merge with defaults for any missing keys
    for key, value in DEFAULT_CONFIG.items():
        if key not in config:
            config[key] = copy.deepcopy(value)
    return config


def save_config(repo_root: Path, config: dict) -> None:
    """Save the configuration to config.yaml.

    Args:
        repo_root: The root directory of the git repository.
        config: Configuration dictionary to save.
    """
    config_file = get_config_file(repo_root)

    # Ensure directory exists
    config_file.parent.mkdir(exist_ok=True)

    with open(config_file, "w") as f:
        yaml.dump(
            config,
            f,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        )


def get_pinned_ref(repo_root: Path) -> Optional[str]:
    """Get the pinned reference saved for this repository, if any."""
    ref = load_config(repo_root).get("pinned_ref")
    if ref is None:
        return None
    ref = str(ref).strip()
    # Never hand an option-like value to git
    if not ref or ref.startswith("-"):
        return None
    return ref


def set_pinned_ref(repo_root: Path, ref: Optional[str]) -> None:
    """Save (or clear, with None) the pinned reference for this repository.

    Args:
        repo_root: The root directory of the git repository.
        ref: Reference to save, or None to clear.
    """
    config = load_config(repo_root)
    config["pinned_ref"] = ref
    save_config(repo_root, config)


def get_category_styles(repo_root: Path) -> dict[ChangeKind, CategoryStyle]:
    """Get the validated gutter style for every change category.

    Categories absent from the file use the default style.

    Args:
        repo_root: The root directory of the git repository.

    Returns:
        Mapping from ChangeKind to CategoryStyle.

    Raises:
        ConfigError: If a configured style is invalid.
    """
    styles = load_config(repo_root).get("styles") or {}
    if not isinstance(styles, dict):
        raise ConfigError("'styles' in .pinmark/config.yaml must be a mapping")

    result = {}
    for kind in ChangeKind:
        override = styles.get(kind.value) or {}
        if not isinstance(override, dict):
            raise ConfigError(f"Style for '{kind.value}' must be a mapping")
        raw = {**DEFAULT_CONFIG["styles"][kind.value], **override}
        try:
            result[kind] = CategoryStyle(**raw)
        except ValidationError as e:
            raise ConfigError(f"Invalid style for '{kind.value}': {e}")
    return result


class RepoPinStore:
    """Keeps the pinned reference in the repository config file."""

    def __init__(self, repo_root: Path):
        self.repo_root = repo_root

    def load(self) -> Optional[str]:
        return get_pinned_ref(self.repo_root)

    def save(self, ref: Optional[str]) -> None:
        set_pinned_ref(self.repo_root, ref)
