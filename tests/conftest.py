"""
Pytest fixtures for shift split tests.
"""

import random
import sys
from pathlib import Path

import pytest

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from shift_split.names import NamePool
from shift_split.store import NameStore


@pytest.fixture
def rng():
    """Seeded random source so name shuffles are repeatable."""
    return random.Random(1234)


@pytest.fixture
def pool():
    """Five names, one of them absent."""
    p = NamePool.from_names(["Dana", "Yossi", "Noa", "Avi", "Tamar"])
    p.set_present("Avi", False)
    return p


@pytest.fixture
def store(tmp_path):
    """Name store in a temporary file."""
    return NameStore(tmp_path / "names.json")
