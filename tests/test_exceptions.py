"""
Tests for the CoveMath exception hierarchy.

Validates:
    - Every matrix error is catchable via MatrixError
    - Matrix errors are also catchable via the matching builtin exception
    - Default messages
    - InvalidArgumentException formatting
"""

import pytest

from CoveMath import Exceptions


class TestInheritance:
	"""Every matrix error is catchable via MatrixError and its builtin counterpart."""

	@pytest.mark.parametrize('error, builtin', [
		(Exceptions.DimensionError, ValueError),
		(Exceptions.NullInputError, ValueError),
		(Exceptions.OutOfBoundsError, IndexError),
		(Exceptions.DimensionMismatchError, ValueError),
		(Exceptions.NotSquareError, ValueError),
		(Exceptions.InvalidArgumentError, ValueError),
		(Exceptions.SingularMatrixError, ArithmeticError),
	])
	def test_catchable(self, error, builtin):
		with pytest.raises(Exceptions.MatrixError):
			raise error('message')

		with pytest.raises(builtin):
			raise error('message')

	def test_not_square_is_dimension_mismatch(self):
		with pytest.raises(Exceptions.DimensionMismatchError):
			raise Exceptions.NotSquareError()

	def test_invalid_argument_exception_is_type_error(self):
		with pytest.raises(TypeError):
			raise Exceptions.InvalidArgumentException()


class TestMessages:

	def test_what_is_stored(self):
		error = Exceptions.DimensionError('bad rows')
		assert error.what == 'bad rows'
		assert str(error) == 'bad rows'

	def test_out_of_bounds_default(self):
		assert str(Exceptions.OutOfBoundsError()) == 'location outside matrix bounds'

	def test_dimension_mismatch_default(self):
		assert str(Exceptions.DimensionMismatchError()) == 'matrices were not of equal size for this operation'

	def test_singular_default(self):
		assert 'singular' in str(Exceptions.SingularMatrixError())

	def test_invalid_argument_exception_message(self):
		def scale(factor):
			return factor

		error = Exceptions.InvalidArgumentException(scale, 'factor', str, (int, float))
		message = str(error)
		assert "parameter 'factor'" in message
		assert "either 'int' or 'float'" in message
		assert "got 'str'" in message
		assert error.parameter_name == 'factor'
		assert error.argument_type is str

	def test_invalid_argument_exception_single_type(self):
		def scale(factor):
			return factor

		message = str(Exceptions.InvalidArgumentException(scale, 'factor', list, (int,)))
		assert "must be 'int'" in message
		assert message.startswith('Method') or message.startswith('Function')
