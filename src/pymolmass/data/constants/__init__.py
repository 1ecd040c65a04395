"""Processing constants for pymolmass."""

from .processing_constants import ProcessingConstants, ErrorMessages, FileConstants

__all__ = [
    "ProcessingConstants",
    "ErrorMessages",
    "FileConstants"
]
