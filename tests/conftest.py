import math

import pytest
from click.testing import CliRunner

from coordkit.core.geometry import CartesianCoordinate, SphericCoordinate


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def unit_x():
    return CartesianCoordinate(1.0, 0.0, 0.0)


@pytest.fixture
def north_pole():
    return SphericCoordinate(0.0, 0.0, 1.0)


@pytest.fixture
def south_pole():
    return SphericCoordinate(0.0, math.pi, 1.0)
