import typing
import types


class InvalidArgumentException(TypeError):
	"""
	[InvalidArgumentException(TypeError)] - Exception representing an invalid type passed to a parameter
	"""

	def __init__(self, caller: typing.Callable | types.FunctionType | types.MethodType | types.LambdaType = None, parameter_name: str = None, argument_type: type = None, parameter_types: typing.Iterable[type | str] = None):
		"""
		[InvalidArgumentException(TypeError)] - Exception representing an invalid type passed to a parameter
		- Constructor -
		:param caller: (CALLABLE) The callable that raised this exception
		:param parameter_name: (str) The name of the parameter
		:param argument_type: (type) The type of the argument passed in
		:param parameter_types: (ITERABLE[type]) The types this parameter accepts
		"""

		if caller is None or parameter_name is None or argument_type is None:
			super().__init__()
		else:
			if parameter_types is None:
				type_list: str = '<UNKNOWN>'
			else:
				parameter_types: tuple[str, ...] = tuple(f"'{x.__name__ if isinstance(x, type) else x}'" for x in parameter_types)
				type_list: str = f'either {", ".join(parameter_types[:-1])} or {parameter_types[-1]}' if len(parameter_types) > 1 else parameter_types[0]

			callable_type: str = 'Callable'

			if '<lambda>' in caller.__qualname__:
				callable_type = 'Lambda'
			elif '.' in caller.__qualname__:
				callable_type = 'Method'
			elif isinstance(caller, types.FunctionType):
				callable_type = 'Function'

			self.parameter_name: str = parameter_name
			self.argument_type: type = argument_type
			super().__init__(f'{callable_type} {caller.__qualname__.replace(".", "::")} - parameter \'{parameter_name}\' must be {type_list}; got \'{argument_type.__name__}\'')


class MatrixError(Exception):
	"""
	[MatrixError(Exception)] - Base exception for all matrix errors
	"""

	def __init__(self, what: str = ''):
		"""
		[MatrixError(Exception)] - Base exception for all matrix errors
		- Constructor -
		:param what: The message
		"""

		super().__init__(what)
		self.what: str = what


class DimensionError(MatrixError, ValueError):
	"""
	[DimensionError(MatrixError, ValueError)] - Exception representing invalid matrix construction dimensions
	"""

	pass


class NullInputError(MatrixError, ValueError):
	"""
	[NullInputError(MatrixError, ValueError)] - Exception representing a required grid or matrix that was not supplied
	"""

	pass


class OutOfBoundsError(MatrixError, IndexError):
	"""
	[OutOfBoundsError(MatrixError, IndexError)] - Exception representing a cell location outside the matrix bounds
	"""

	def __init__(self, what: str = 'location outside matrix bounds'):
		super().__init__(what)


class DimensionMismatchError(MatrixError, ValueError):
	"""
	[DimensionMismatchError(MatrixError, ValueError)] - Exception representing an operation applied to incompatibly sized matrices
	"""

	def __init__(self, what: str = 'matrices were not of equal size for this operation'):
		super().__init__(what)


class NotSquareError(DimensionMismatchError):
	"""
	[NotSquareError(DimensionMismatchError)] - Exception representing a square-only operation applied to a non-square matrix
	"""

	def __init__(self, what: str = 'matrix is not square'):
		super().__init__(what)


class InvalidArgumentError(MatrixError, ValueError):
	"""
	[InvalidArgumentError(MatrixError, ValueError)] - Exception representing an out of range argument, such as a negative power
	"""

	pass


class SingularMatrixError(MatrixError, ArithmeticError):
	"""
	[SingularMatrixError(MatrixError, ArithmeticError)] - Exception representing an attempt to invert a singular matrix
	"""

	def __init__(self, what: str = 'matrix is singular and has no inverse'):
		super().__init__(what)
