import os
import configparser
import logging

from common.constants import APP_CONFIG_FILENAME, DEFAULT_ENCODING_NAME
from utils.files import get_default_config_path

logger = logging.getLogger(__name__)


class Config:
    def __init__(self, custom_config_path: str | None = None):
        """Initialize Config from file.

        Args:
            custom_config_path: Optional path to custom config file.
                               If None, uses system config location.
        """
        if custom_config_path:
            self.config_path = custom_config_path
            logger.debug(f"Using custom config: {self.config_path}")
        elif "PYTEST_CURRENT_TEST" in os.environ:
            # Keep tests away from the user's real config
            import tempfile

            test_config_dir = os.path.join(tempfile.gettempdir(), "usdxreader_test")
            os.makedirs(test_config_dir, exist_ok=True)
            self.config_path = os.path.join(test_config_dir, APP_CONFIG_FILENAME)
            logger.debug(f"Test mode detected, using temp config: {self.config_path}")
        else:
            self.config_path = get_default_config_path()

        self._config = configparser.ConfigParser()
        if os.path.exists(self.config_path):
            logger.debug(f"Loading existing config from: {self.config_path}")
            self._config.read(self.config_path, encoding="utf-8-sig")
        else:
            logger.info(f"Config file not found. Creating default config at: {self.config_path}")
            self._set_defaults()
            self.save()

        self._initialize_properties()

    def _get_defaults(self):
        """Get default configuration values as a dictionary structure."""
        return {
            "General": {
                "log_level": "INFO",
                "log_to_file": False,
            },
            "Reader": {
                "default_encoding": DEFAULT_ENCODING_NAME,
            },
        }

    def _set_defaults(self):
        """Set default configuration values in the ConfigParser object."""
        for section, values in self._get_defaults().items():
            self._config[section] = {}
            for key, value in values.items():
                # Convert all values to strings for ConfigParser
                if isinstance(value, bool):
                    self._config[section][key] = "true" if value else "false"
                else:
                    self._config[section][key] = str(value)

    def _initialize_properties(self):
        """Read typed properties, falling back to defaults for missing keys."""
        defaults = self._get_defaults()
        self.log_level_str = self.get("General", "log_level", fallback=defaults["General"]["log_level"]).upper()
        self.log_level = self._get_log_level(self.log_level_str)
        self.log_to_file = self.get_bool("General", "log_to_file", fallback=defaults["General"]["log_to_file"])
        self.default_encoding = self.get(
            "Reader", "default_encoding", fallback=defaults["Reader"]["default_encoding"]
        ).strip()

    def get(self, section: str, key: str, fallback: str | None = None) -> str:
        """Get a string value from the config."""
        return self._config.get(section, key, fallback=fallback)

    def get_int(self, section: str, key: str, fallback: int | None = None) -> int:
        """Get an integer value from the config."""
        return self._config.getint(section, key, fallback=fallback)

    def get_bool(self, section: str, key: str, fallback: bool | None = None) -> bool:
        """Get a boolean value from the config."""
        return self._config.getboolean(section, key, fallback=fallback)

    def set(self, section: str, key: str, value) -> None:
        """Set a value and refresh the typed properties."""
        if not self._config.has_section(section):
            self._config.add_section(section)
        if isinstance(value, bool):
            value = "true" if value else "false"
        self._config.set(section, key, str(value))
        self._initialize_properties()

    def _get_log_level(self, level_str):
        """Convert string log level to logging level constant"""
        levels = {
            "DEBUG": logging.DEBUG,
            "INFO": logging.INFO,
            "WARNING": logging.WARNING,
            "ERROR": logging.ERROR,
            "CRITICAL": logging.CRITICAL,
        }
        return levels.get(level_str.upper(), logging.INFO)  # Default to INFO if invalid

    def save(self):
        """Save current configuration to file."""
        try:
            os.makedirs(os.path.dirname(os.path.abspath(self.config_path)), exist_ok=True)
            with open(self.config_path, "w", encoding="utf-8") as configfile:
                self._config.write(configfile)
            logger.debug(f"Configuration saved to {self.config_path}")
        except OSError as e:
            logger.error(f"Failed to save config: {e}")
            raise

    def log_config_location(self):
        """Log the configuration file location (call after logging is set up)"""
        logger.info(f"Configuration loaded from: {self.config_path}")
