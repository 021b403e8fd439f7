# Authors: Thor Lemke, Sally Hyun Hahm, Matteo Corrado
# Last Update: 10/19/2026
# Course: COSC 69.15/169.15 at Dartmouth College in 25F with Professor Alberto Quattrini Li
# Purpose: Shared pytest fixtures seeding the random generator and enabling debug logging
# Acknowledgements: pytest fixture documentation

import sys
import os

import numpy as np
import pytest

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from engine_devtools.config import RandomConfig, configure_logging
from engine_devtools.extensions import randomness

TEST_SEED = 1234


def pytest_configure(config):
    # DEBUG only under `pytest -v`; otherwise DEVTOOLS_LOG_LEVEL (default WARNING)
    configure_logging(verbose=config.getoption("verbose") > 0)


@pytest.fixture(autouse=True)
def seeded_rng():
    """Reseed the shared generator so every test sees the same stream."""
    randomness.configure(RandomConfig(seed=TEST_SEED))
    yield randomness.get_rng()
    randomness.configure(RandomConfig())


@pytest.fixture
def rng():
    """Independent generator for tests that pass `rng` explicitly."""
    return np.random.default_rng(TEST_SEED)
