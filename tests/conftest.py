"""
Pytest configuration and fixtures for dofus-linker tests.
"""

import sys
from pathlib import Path
import pytest

# Add src directory to Python path to allow importing dofus_linker
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from dofus_linker.slugs import ExceptionTable, SlugGenerator


@pytest.fixture(scope="session")
def default_table() -> ExceptionTable:
    """The bundled exception table, loaded once."""
    return ExceptionTable.default()


@pytest.fixture
def generator(default_table: ExceptionTable) -> SlugGenerator:
    """Slug generator with the bundled exception table and default rules."""
    return SlugGenerator(exceptions=default_table)
