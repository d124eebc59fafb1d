import pytest

from CoveMath import Exceptions, Misc


class TestRaiseHelpers:

	def test_raise_if(self):
		with pytest.raises(Exceptions.DimensionError, match='bad'):
			Misc.raise_if(True, Exceptions.DimensionError('bad'))

		Misc.raise_if(False, Exceptions.DimensionError('bad'))

	def test_raise_ifn(self):
		with pytest.raises(Exceptions.OutOfBoundsError):
			Misc.raise_ifn(False, Exceptions.OutOfBoundsError())

		Misc.raise_ifn(True, Exceptions.OutOfBoundsError())

	def test_default_is_assertion(self):
		with pytest.raises(AssertionError):
			Misc.raise_if(True)

	def test_rejects_non_exception(self):
		with pytest.raises(Exceptions.InvalidArgumentException):
			Misc.raise_if(True, 'not an exception')

		with pytest.raises(Exceptions.InvalidArgumentException):
			Misc.raise_ifn(True, 42)
