"""Shared pytest fixtures for pymolmass tests."""
import pytest
from pathlib import Path

from pymolmass.core.elements import ElementTable

SAMPLE_RECORDS = [
    ("H", "Hydrogen", 1.008),
    ("C", "Carbon", 12.011),
    ("N", "Nitrogen", 14.007),
    ("O", "Oxygen", 15.999),
    ("Na", "Sodium", 22.990),
    ("Cl", "Chlorine", 35.45),
]

SAMPLE_FILE_CONTENT = """# weight symbol name
1.008 H Hydrogen
12.011 C Carbon
14.007 N Nitrogen
15.999 O Oxygen
22.990 Na Sodium
35.45 Cl Chlorine
"""


@pytest.fixture
def sample_records():
    """Sample (symbol, name, weight) records."""
    return list(SAMPLE_RECORDS)


@pytest.fixture
def sample_table(sample_records):
    """Element table built from the sample records."""
    return ElementTable.build(sample_records)


@pytest.fixture
def element_file(tmp_path):
    """Element reference file holding the sample records."""
    path = tmp_path / "weights.txt"
    path.write_text(SAMPLE_FILE_CONTENT, encoding="utf-8")
    return path


@pytest.fixture
def settings_file(tmp_path, element_file):
    """YAML settings file pointing at the sample element file."""
    path = tmp_path / "settings.yaml"
    path.write_text(
        f"element_file: {element_file.name}\n"
        "decimals: 3\n"
        "log_level: info\n"
        "prompt: 'Formula? '\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def bundled_element_file():
    """Path to the element table shipped with the package."""
    return Path(__file__).parent.parent / "src" / "pymolmass" / "data" / "elements" / "elements.txt"
