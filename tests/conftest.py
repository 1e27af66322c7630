import sys
import os

import numpy as np
import pytest

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from orbital_cloud.helpers.orbital_sampler import OrbitalSampler

@pytest.fixture
def rng():
    return np.random.default_rng(12345)

@pytest.fixture
def sampler():
    return OrbitalSampler(rng=np.random.default_rng(2024))
