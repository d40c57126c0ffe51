# tests/conftest.py
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for the STL to MITL tests.

Puts the project root on the path so that the ``stl_to_mitl`` namespace
package can be imported without installation, and forces a non-interactive
matplotlib backend.
"""

import sys
from pathlib import Path

import matplotlib
import pytest

matplotlib.use("Agg")

# Ensure project modules can be imported
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture
def example_signal():
    """Provide the example signal over [0, 30] sampled every 0.1 s.

    Returns:
        Signal: Synthesized signal
    """
    from stl_to_mitl.scripts.signal.signal_synthesizer import synthesize_signal

    return synthesize_signal(horizon=30., sample_time=0.1)


@pytest.fixture
def example_partition_points():
    """Provide the partition points of the example signal.

    Returns:
        List[int]: Partition points
    """
    return [5, 8, 10, 15, 20]


@pytest.fixture
def three_proposition_formula():
    """Provide an STL formula whose until operands are mapped to p2 and p3.

    Returns:
        str: STL formula
    """
    return "F [0, 30] (x >= 0.3) ∧ G [0, 20] ((y < 2) U (z > 1))"
