import logging
from dataclasses import dataclass
from difflib import get_close_matches
from pathlib import Path
from typing import Any, Dict, Optional, Union

from ruamel.yaml import YAML, constructor, scanner
from ruamel.yaml.error import YAMLError

from pymolmass.core.exceptions import SettingsError
from pymolmass.data.constants import ProcessingConstants
from pymolmass.parsing.config.yaml_keys import ELEMENT_FILE_KEY, DECIMALS_KEY, PROMPT_KEY, LOG_LEVEL_KEY

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    element_file: Optional[Path] = None
    decimals: int = ProcessingConstants.DEFAULT_DECIMALS
    log_level: str = ProcessingConstants.DEFAULT_LOG_LEVEL
    prompt: str = ProcessingConstants.DEFAULT_PROMPT


class BaseFileParser:
    """Base class for parsing configuration files."""

    def __init__(self, config_path: Union[str, Path]) -> None:
        self.config_path = Path(config_path)
        self.base_dir = self.config_path.parent
        self.config = self._load_config()
        logger.info("Successfully loaded configuration from: %s", self.config_path)

    def _load_config(self) -> Dict[str, Any]:
        raise NotImplementedError("Subclasses must implement _load_config method")


class YAMLFileParser(BaseFileParser):
    """Parser for YAML configuration files."""

    def _load_config(self) -> Dict[str, Any]:
        yaml = YAML(typ='safe')
        yaml.allow_duplicate_keys = False
        try:
            logger.debug("Loading YAML file: %s", self.config_path)
            with open(self.config_path, 'r') as f:
                config = yaml.load(f)
            logger.debug("YAML file loaded successfully, found %d top-level keys", len(config) if config else 0)
            return config
        except FileNotFoundError as e:
            logger.debug("YAML file not found: %s", self.config_path)
            raise FileNotFoundError(f"YAML file not found: {self.config_path}") from e
        except OSError as e:
            raise SettingsError(f"Cannot read {self.config_path}: {str(e)}") from e
        except constructor.DuplicateKeyError as e:
            raise SettingsError(f"Duplicate key in {self.config_path}: {str(e)}") from e
        except scanner.ScannerError as e:
            raise SettingsError(f"YAML syntax error in {self.config_path}: {str(e)}") from e
        except YAMLError as e:
            raise SettingsError(f"Error parsing {self.config_path}: {str(e)}") from e


class SettingsYAMLParser(YAMLFileParser):
    """Parser for pymolmass settings files in YAML format."""

    VALID_KEYS = {ELEMENT_FILE_KEY, DECIMALS_KEY, PROMPT_KEY, LOG_LEVEL_KEY}

    def __init__(self, yaml_path: Union[str, Path]) -> None:
        super().__init__(yaml_path)
        if self.config is None:
            logger.warning("Settings file %s is empty, using defaults", self.config_path)
            self.config = {}
        self._validate_config()

    # --- Public API ---
    def create_settings(self) -> Settings:
        """Build a Settings instance, resolving the element file relative to the settings file."""
        element_file = self.config.get(ELEMENT_FILE_KEY)
        if element_file is not None:
            element_file = Path(element_file)
            if not element_file.is_absolute():
                element_file = self.base_dir / element_file
        settings = Settings(
            element_file=element_file,
            decimals=self.config.get(DECIMALS_KEY, ProcessingConstants.DEFAULT_DECIMALS),
            log_level=str(self.config.get(LOG_LEVEL_KEY, ProcessingConstants.DEFAULT_LOG_LEVEL)).upper(),
            prompt=self.config.get(PROMPT_KEY, ProcessingConstants.DEFAULT_PROMPT),
        )
        logger.info("Settings created: %s", settings)
        return settings

    # --- Validation Methods ---
    def _validate_config(self) -> None:
        """Validate the configuration structure and content."""
        logger.debug("Starting settings validation")
        if not isinstance(self.config, dict):
            raise SettingsError("The settings file must contain a mapping of key-value pairs, "
                                "not a list or scalar value")
        self._validate_keys()
        decimals = self.config.get(DECIMALS_KEY, ProcessingConstants.DEFAULT_DECIMALS)
        if isinstance(decimals, bool) or not isinstance(decimals, int) or decimals < 0:
            raise SettingsError(f"'{DECIMALS_KEY}' must be a non-negative integer, got {decimals!r}")
        log_level = str(self.config.get(LOG_LEVEL_KEY, ProcessingConstants.DEFAULT_LOG_LEVEL)).upper()
        if log_level not in ProcessingConstants.LOG_LEVELS:
            raise SettingsError(f"'{LOG_LEVEL_KEY}' must be one of {', '.join(ProcessingConstants.LOG_LEVELS)}, "
                                f"got {log_level!r}")
        for key in (ELEMENT_FILE_KEY, PROMPT_KEY):
            if key in self.config and not isinstance(self.config[key], str):
                raise SettingsError(f"'{key}' must be a string, got {type(self.config[key]).__name__}")
        logger.debug("Settings validation completed successfully")

    def _validate_keys(self) -> None:
        """Reject unknown keys, suggesting the closest valid key."""
        unknown = set(self.config.keys()) - self.VALID_KEYS
        if not unknown:
            return
        error_msg = "Unknown settings found: \n ->"
        for key in sorted(unknown, key=str):
            matches = get_close_matches(str(key), self.VALID_KEYS, n=1, cutoff=0.6)
            suggestion = f" (did you mean '{matches[0]}'?)" if matches else ""
            error_msg += f" - '{key}'{suggestion}\n"
        raise SettingsError(error_msg)


def load_settings(yaml_path: Union[str, Path, None] = None) -> Settings:
    """Load settings from *yaml_path*, or return the defaults when no path is given."""
    if yaml_path is None:
        logger.debug("No settings file given, using defaults")
        return Settings()
    return SettingsYAMLParser(yaml_path).create_settings()
