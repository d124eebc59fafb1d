"""
pytest configuration and shared fixtures.
"""

import pytest

from CoveMath.Math.ComplexMatrix import ComplexMatrix, Configuration


@pytest.fixture(autouse=True)
def reset_configuration():
	"""Every test starts from the default tolerance with no logger attached."""
	Configuration.reset()
	yield
	Configuration.reset()


@pytest.fixture
def square():
	"""[[1, 2], [3, 4]]"""
	return ComplexMatrix.from_grid([[1, 2], [3, 4]])


@pytest.fixture
def other_square():
	"""[[5, 6], [7, 8]]"""
	return ComplexMatrix.from_grid([[5, 6], [7, 8]])


@pytest.fixture
def complex_square():
	"""A 2x2 matrix with non-trivial imaginary parts."""
	return ComplexMatrix.from_grid([[1 + 2j, -3j], [0.5, 4 - 1j]])


@pytest.fixture
def wide():
	"""A 2x3 matrix."""
	return ComplexMatrix.from_grid([[1, 2, 3], [4, 5, 6]])
