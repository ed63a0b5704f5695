import matplotlib

matplotlib.use("Agg")

import pytest

TRAIN_IN = [0.0, 1.0, 2.0, 3.0, 4.0]
TRAIN_OUT = [2.0, 12.0, 22.0, 32.0, 42.0]


@pytest.fixture
def line_pairs():
    return list(TRAIN_IN), list(TRAIN_OUT)
