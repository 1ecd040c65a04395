"""
Parsing and loading modules for pymolmass.

This package handles formula tokenizing, reading the element reference
file, YAML settings, and the high level compound evaluation API.
"""

from .tokenizer import FormulaToken, FormulaTokenizer, tokenize
from .api import CompoundReport, analyze_compound, load_element_table, get_element_table_info
from .io.data_handler import ElementRecord, load_element_records, get_default_element_file
from .config.settings_parser import Settings, load_settings

__all__ = [
    'FormulaToken',
    'FormulaTokenizer',
    'tokenize',
    'CompoundReport',
    'analyze_compound',
    'load_element_table',
    'get_element_table_info',
    'ElementRecord',
    'load_element_records',
    'get_default_element_file',
    'Settings',
    'load_settings'
]
