"""Pytest configuration and fixtures."""

import pytest
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from sevenvoices.manifest import default_manifest


@pytest.fixture
def manifest():
    """Stock manifest (edge weight 0)."""
    return default_manifest()


@pytest.fixture
def weighted_manifest():
    """Stock manifest with the edge bias switched on."""
    return default_manifest().with_overrides(
        edge_weight=0.25,
        version="2025-11-15-core-1",
    )


@pytest.fixture
def sample_words():
    """Words exercised by the property tests."""
    return [
        "study", "damage", "hope", "mind", "love", "philosophy",
        "mathematics", "zemër", "gjuhë", "piece", "psst", "a", "strength",
    ]
