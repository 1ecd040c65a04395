"""Reading the element reference file."""

from .data_handler import ElementRecord, load_element_records, parse_element_records, get_default_element_file

__all__ = [
    "ElementRecord",
    "load_element_records",
    "parse_element_records",
    "get_default_element_file"
]
