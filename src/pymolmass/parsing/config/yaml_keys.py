"""Constants used for YAML settings parsing."""

# Reference data keys
ELEMENT_FILE_KEY = "element_file"

# Report keys
DECIMALS_KEY = "decimals"
PROMPT_KEY = "prompt"

# Logging keys
LOG_LEVEL_KEY = "log_level"

__all__ = [
    "ELEMENT_FILE_KEY",
    "DECIMALS_KEY",
    "PROMPT_KEY",
    "LOG_LEVEL_KEY",
]
