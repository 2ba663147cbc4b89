import numpy as np
import pytest

from Base16384.utils.config import set_config, get_config


@pytest.fixture
def rng():
    return np.random.default_rng(16384)

@pytest.fixture(autouse=True)
def restore_config():
    previous = get_config()
    yield
    set_config(previous)
