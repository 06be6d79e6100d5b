"""
Configuration management for KeyboardHeight
"""
import logging
import yaml
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

_TRUE_STRINGS = ("true", "yes", "on", "1")
_FALSE_STRINGS = ("false", "no", "off", "0")


def _as_bool(value, default: bool) -> bool:
    """Interpret a YAML value as a flag; quoted strings such as "false" count too"""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        text = value.strip().lower()
        if text in _TRUE_STRINGS:
            return True
        if text in _FALSE_STRINGS:
            return False
    if isinstance(value, int):
        return value != 0
    logger.warning("Ignoring invalid flag value %r, using %s", value, default)
    return default


@dataclass
class Settings:
    """Main application settings"""
    # Last known keyboard heights, used to seed the tracker on startup
    portrait_keyboard_height: int = 0
    landscape_keyboard_height: int = 0
    remember_keyboard_heights: bool = True
    fullscreen: bool = False
    display_width: int = 480
    display_height: int = 800
    log_level: str = "INFO"

    _config_path: str = field(default="", repr=False)

    @classmethod
    def get_config_path(cls) -> Path:
        """Get the configuration file path"""
        config_dir = Path.home() / ".config" / "kbheight"
        config_dir.mkdir(parents=True, exist_ok=True)
        return config_dir / "settings.yaml"

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> 'Settings':
        """
        Load settings from file.

        Missing or unreadable files yield default settings.

        Args:
            config_path: Override for the default settings.yaml location
        """
        if config_path is None:
            config_path = cls.get_config_path()

        settings = cls()
        if config_path.exists():
            try:
                with open(config_path, 'r') as f:
                    data = yaml.safe_load(f) or {}
                if not isinstance(data, dict):
                    raise ValueError(f"expected a mapping, got {type(data).__name__}")
                settings.load_from_dict(data)
            except (OSError, yaml.YAMLError, ValueError, TypeError) as e:
                logger.error("Error loading settings from %s: %s", config_path, e)
                settings = cls()

        settings._config_path = str(config_path)
        return settings

    def save(self):
        """Save settings to file"""
        config_path = Path(self._config_path) if self._config_path else self.get_config_path()
        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, 'w') as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False)
        logger.debug("Settings saved to %s", config_path)

    def update_keyboard_heights(self, portrait: int, landscape: int):
        """Store the tracker's cached heights and save if they changed"""
        if (portrait, landscape) == (self.portrait_keyboard_height, self.landscape_keyboard_height):
            return
        self.portrait_keyboard_height = portrait
        self.landscape_keyboard_height = landscape
        self.save()

    def to_dict(self) -> dict:
        """Convert settings to dictionary"""
        return {
            'portrait_keyboard_height': self.portrait_keyboard_height,
            'landscape_keyboard_height': self.landscape_keyboard_height,
            'remember_keyboard_heights': self.remember_keyboard_heights,
            'fullscreen': self.fullscreen,
            'display_width': self.display_width,
            'display_height': self.display_height,
            'log_level': self.log_level,
        }

    def load_from_dict(self, data: dict):
        """Load settings from dictionary"""
        # Negative heights would make tracker construction fail
        self.portrait_keyboard_height = max(0, int(data.get('portrait_keyboard_height', 0)))
        self.landscape_keyboard_height = max(0, int(data.get('landscape_keyboard_height', 0)))
        self.remember_keyboard_heights = _as_bool(data.get('remember_keyboard_heights', True), True)
        self.fullscreen = _as_bool(data.get('fullscreen', False), False)
        self.display_width = int(data.get('display_width', 480))
        self.display_height = int(data.get('display_height', 800))
        self.log_level = str(data.get('log_level', 'INFO'))
