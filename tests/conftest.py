import pytest

from salesman import TSPInstance


@pytest.fixture
def unit_square():
    # listed so that the identity order crosses the diagonals
    return TSPInstance(coords=[(0, 0), (1, 1), (1, 0), (0, 1)], name="square")


@pytest.fixture
def single_city():
    return TSPInstance(coords=[(3.0, 4.0)])


@pytest.fixture
def random8():
    return TSPInstance.random_euclidean(8, seed=7, square_size=100.0)


@pytest.fixture
def random40():
    return TSPInstance.random_euclidean(40, seed=11, square_size=100.0)
