# tests/conftest.py
# This file is part of Truthtable - A propositional truth-table generator
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for Truthtable tests.

Puts the project root on ``sys.path`` so the flat top-level packages import
without installation, and provides the formulas and assignments shared by the
parser, logic and integration suites.
"""

import sys
import itertools
import pytest
from pathlib import Path

# Ensure project modules can be imported
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Skip the session if the project packages cannot be imported."""
    try:
        import parser.grammar
        import logic
        import utils
    except ImportError as e:
        pytest.skip(f"Cannot import required modules: {e}")

    yield


def all_assignments(names):
    """Every assignment to ``names`` as a list of dicts."""
    names = list(names)
    return [
        dict(zip(names, values))
        for values in itertools.product([False, True], repeat=len(names))
    ]


@pytest.fixture
def two_atom_assignments():
    """All four assignments over atoms a and b.

    Returns:
        List[Dict[str, bool]]
    """
    return all_assignments(["a", "b"])


@pytest.fixture
def three_atom_assignments():
    """All eight assignments over atoms p, q and r."""
    return all_assignments(["p", "q", "r"])
