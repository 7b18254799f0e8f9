# =============================================================================
# Configuration Management
# =============================================================================
# Handles loading, saving, and validating Kata-TUI configuration.
#
# XDG Base Directory Compliance (https://specifications.freedesktop.org/basedir-spec/):
#   - Config:  $XDG_CONFIG_HOME/kata-tui/  (default: ~/.config/kata-tui/)
#   - State:   $XDG_STATE_HOME/kata-tui/   (default: ~/.local/state/kata-tui/)
#
# Files:
#   - config.toml: User configuration (colors, layout)
#   - kata-tui.log: Debug log (in state directory, only with --debug)
# =============================================================================

import logging
import os
import tomllib  # Built into Python 3.11+
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

import tomli_w  # For writing TOML (tomllib is read-only)
from rich.color import Color, ColorParseError

from kata_tui.rendering.styles import Theme

logger = logging.getLogger(__name__)


# =============================================================================
# XDG Directory Management
# =============================================================================

# Application identifier used in all XDG paths
APP_NAME = "kata-tui"


def get_xdg_config_home() -> Path:
    """
    Returns the XDG config directory for Kata-TUI.

    Respects $XDG_CONFIG_HOME if set, otherwise uses ~/.config/kata-tui/
    """
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        base = Path(xdg_config)
    else:
        base = Path.home() / ".config"
    return base / APP_NAME


def get_xdg_state_home() -> Path:
    """
    Returns the XDG state directory for Kata-TUI.

    Respects $XDG_STATE_HOME if set, otherwise uses ~/.local/state/kata-tui/
    This is where the debug log lives.
    """
    xdg_state = os.environ.get("XDG_STATE_HOME")
    if xdg_state:
        base = Path(xdg_state)
    else:
        base = Path.home() / ".local" / "state"
    return base / APP_NAME


def ensure_directories() -> dict[str, Path]:
    """
    Creates all required XDG directories if they don't exist.

    Returns:
        Dictionary mapping directory type to path.
    """
    dirs = {
        "config": get_xdg_config_home(),
        "state": get_xdg_state_home(),
    }

    for dir_path in dirs.values():
        dir_path.mkdir(parents=True, exist_ok=True)

    return dirs


# =============================================================================
# Configuration Data Structures
# =============================================================================

@dataclass
class RenderingConfig:
    """
    Configuration for the description renderer.

    Every field maps one-to-one onto rendering.styles.Theme; see there for
    what each knob does. Colors accept anything Rich understands
    ("cyan", "#282837", "rgb(40,40,55)", "bright_black").
    """
    text_color: str = "white"
    emphasis_color: str = "cyan"
    italic_color: str = "grey70"
    code_color: str = "yellow"
    code_background: str = "#282837"
    pre_accent_color: str = "cyan"
    border_color: str = "bright_black"
    bullet_color: str = "cyan"
    bullet: str = "•"
    list_indent: int = 2
    min_box_width: int = 20           # Narrowest code box, in columns
    box_padding: int = 1              # Blank columns inside each box edge
    box_indent: int = 2
    tab_width: int = 4

    def to_theme(self) -> Theme:
        """Build the renderer Theme described by this config."""
        return Theme(**{f.name: getattr(self, f.name) for f in fields(self)})


@dataclass
class UIConfig:
    """
    Configuration for the user interface.

    Attributes:
        content_padding: Columns of left padding before description lines.
        show_tags: Show topic tags under the title.
    """
    content_padding: int = 2
    show_tags: bool = True


@dataclass
class Config:
    """
    Main configuration container for Kata-TUI.

    Attributes:
        rendering: Description rendering configuration.
        ui: User interface configuration.

    Usage:
        >>> config = Config.load()
        >>> config.rendering.code_color
        'yellow'
    """
    rendering: RenderingConfig = field(default_factory=RenderingConfig)
    ui: UIConfig = field(default_factory=UIConfig)

    # -------------------------------------------------------------------------
    # File Paths
    # -------------------------------------------------------------------------

    @staticmethod
    def config_file_path() -> Path:
        """Returns the path to the main config file."""
        return get_xdg_config_home() / "config.toml"

    @staticmethod
    def log_file_path() -> Path:
        """Returns the path to the debug log."""
        return get_xdg_state_home() / "kata-tui.log"

    # -------------------------------------------------------------------------
    # Loading and Saving
    # -------------------------------------------------------------------------

    @classmethod
    def load(cls, path: Path | None = None) -> "Config":
        """
        Load configuration from a config file.

        If the config file doesn't exist, returns default configuration.

        Args:
            path: Config file to read. Defaults to the XDG location.

        Returns:
            Loaded Config object.

        Raises:
            ConfigError: If the config file exists but is invalid.
        """
        config_path = path or cls.config_file_path()

        if not config_path.exists():
            if path is not None:
                raise ConfigError(f"Config file not found: {config_path}")
            # No config file yet - return defaults
            return cls()

        # Load and parse the TOML file
        try:
            with open(config_path, "rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid config file: {e}") from e

        return cls._from_dict(data)

    def save(self, path: Path | None = None) -> None:
        """
        Save configuration to a config file.

        Creates the parent directory if it doesn't exist.
        """
        config_path = path or self.config_file_path()
        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, "wb") as f:
            tomli_w.dump(self._to_dict(), f)

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> "Config":
        """
        Create a Config object from a dictionary (parsed TOML).

        Missing keys keep their defaults; unknown keys are ignored.
        """
        return cls(
            rendering=_section(RenderingConfig, data.get("rendering", {}), "rendering"),
            ui=_section(UIConfig, data.get("ui", {}), "ui"),
        )

    def _to_dict(self) -> dict[str, Any]:
        """
        Convert Config to a dictionary for TOML serialization.
        """
        return {
            "rendering": {f.name: getattr(self.rendering, f.name) for f in fields(self.rendering)},
            "ui": {f.name: getattr(self.ui, f.name) for f in fields(self.ui)},
        }


def _section(section_cls: type, values: Any, name: str) -> Any:
    """
    Build a config section dataclass from a TOML table.

    Raises:
        ConfigError: If the table or one of its values has the wrong type.
    """
    if not isinstance(values, dict):
        raise ConfigError(f"[{name}] must be a table")

    defaults = section_cls()
    kwargs = {}
    for f in fields(section_cls):
        if f.name not in values:
            continue
        value = values[f.name]
        expected = type(getattr(defaults, f.name))
        # bool is an int subclass; don't let `true` pass as a number
        if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
            raise ConfigError(
                f"{name}.{f.name} must be {expected.__name__}, got {type(value).__name__}"
            )
        if expected is int and value < 0:
            raise ConfigError(f"{name}.{f.name} must not be negative")
        if f.name.endswith(("_color", "_background")):
            try:
                Color.parse(value)
            except ColorParseError as e:
                raise ConfigError(f"{name}.{f.name}: {e}") from e
        kwargs[f.name] = value

    unknown = set(values) - {f.name for f in fields(section_cls)}
    if unknown:
        logger.warning(f"Ignoring unknown [{name}] keys: {', '.join(sorted(unknown))}")

    return section_cls(**kwargs)


# =============================================================================
# Exceptions
# =============================================================================

class ConfigError(Exception):
    """Raised when there's an error loading or parsing configuration."""
    pass


# =============================================================================
# Utility Functions
# =============================================================================

def print_paths() -> None:
    """
    Print all XDG paths for debugging.
    Useful for users wondering where their config is stored.
    """
    print(f"Config:  {get_xdg_config_home()}")
    print(f"State:   {get_xdg_state_home()}")
    print()
    print(f"Config file:  {Config.config_file_path()}")
    print(f"Debug log:    {Config.log_file_path()}")
