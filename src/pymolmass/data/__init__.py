"""Reference data and constants for pymolmass."""

from .constants import ProcessingConstants, ErrorMessages, FileConstants

__all__ = [
    "ProcessingConstants",
    "ErrorMessages",
    "FileConstants"
]
