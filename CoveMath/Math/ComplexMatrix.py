from __future__ import annotations

import collections.abc
import numpy
import typeguard
import typing

from . import Functions
from .. import Exceptions
from .. import Logger
from .. import Misc


class Configuration:
	"""
	Class holding the library wide matrix settings
	"""

	DEFAULT_EQUALITY_TOLERANCE: float = 1e-13
	EQUALITY_TOLERANCE: float = DEFAULT_EQUALITY_TOLERANCE
	__logger__: typing.Optional[Logger.Logger] = None

	@classmethod
	def set_tolerance(cls, tolerance: float) -> None:
		"""
		Sets the tolerance used when comparing cells for equality or against zero
		:param tolerance: The largest allowed difference per component; 0 for exact comparison
		:raises InvalidArgumentException: If 'tolerance' is not a real number
		:raises InvalidArgumentError: If 'tolerance' is negative
		"""

		if not isinstance(tolerance, (int, float)) or isinstance(tolerance, bool):
			raise Exceptions.InvalidArgumentException(Configuration.set_tolerance, 'tolerance', type(tolerance), (int, float))

		Misc.raise_if(tolerance < 0, Exceptions.InvalidArgumentError(f'Tolerance must be non-negative, got {tolerance}'))
		cls.EQUALITY_TOLERANCE = float(tolerance)

	@classmethod
	def tolerance(cls) -> float:
		"""
		:return: The current equality tolerance
		"""

		return cls.EQUALITY_TOLERANCE

	@classmethod
	def attach_logger(cls, logger: Logger.Logger) -> None:
		"""
		Attaches a log writer receiving matrix diagnostics
		:param logger: The log writer
		:raises InvalidArgumentException: If 'logger' is not a Logger
		"""

		if not isinstance(logger, Logger.Logger):
			raise Exceptions.InvalidArgumentException(Configuration.attach_logger, 'logger', type(logger), (Logger.Logger,))

		cls.__logger__ = logger

	@classmethod
	def detach_logger(cls) -> typing.Optional[Logger.Logger]:
		"""
		Detaches the current log writer
		The log writer itself is not closed
		:return: The previously attached log writer or None
		"""

		logger: typing.Optional[Logger.Logger] = cls.__logger__
		cls.__logger__ = None
		return logger

	@classmethod
	def logger(cls) -> typing.Optional[Logger.Logger]:
		return cls.__logger__

	@classmethod
	def reset(cls) -> None:
		"""
		Restores the default tolerance and detaches any log writer
		"""

		cls.EQUALITY_TOLERANCE = cls.DEFAULT_EQUALITY_TOLERANCE
		cls.__logger__ = None

	@classmethod
	def log(cls, level: str, msg: typing.Any) -> None:
		"""
		Writes a message to the attached log writer if one is attached and still open
		:param level: One of 'debug', 'info', 'warn', 'error', 'critical'
		:param msg: The message to write
		"""

		logger: typing.Optional[Logger.Logger] = cls.__logger__

		if logger is not None and not logger.closed:
			getattr(logger, level)(msg)


def _require_int(caller: typing.Callable, name: str, value: typing.Any) -> int:
	if isinstance(value, (bool, numpy.bool_)):
		raise Exceptions.InvalidArgumentException(caller, name, type(value), (int,))

	try:
		typeguard.check_type(value, int | numpy.integer)
	except typeguard.TypeCheckError:
		raise Exceptions.InvalidArgumentException(caller, name, type(value), (int,)) from None

	return int(value)


class ComplexMatrix(collections.abc.Sized, collections.abc.Iterable):
	"""
	Class representing a dense, mutable matrix of complex numbers
	Operations either produce a new matrix or replace this matrix's cells and return this matrix for chaining
	"""

	NOT_IMPLEMENTED_EXCEPTION_MESSAGE: str = 'Not yet implemented'

	@classmethod
	def zero(cls, rows: int, columns: int) -> ComplexMatrix:
		"""
		Creates a matrix with every cell set to 0
		:param rows: The number of rows
		:param columns: The number of columns
		:return: The zero matrix
		:raises DimensionError: If either dimension is not positive
		"""

		return cls(rows, columns)

	@classmethod
	def from_grid(cls, grid: typing.Iterable[typing.Iterable[Functions.Scalar]]) -> ComplexMatrix:
		"""
		Creates a matrix from a nested sequence of rows
		The rows are copied; the caller's grid is never aliased
		:param grid: The rows of the matrix, each an iterable of numbers
		:return: The matrix
		:raises NullInputError: If 'grid' is None
		:raises DimensionError: If 'grid' is empty or its rows differ in length
		:raises InvalidArgumentException: If any cell is not a number
		"""

		Misc.raise_if(grid is None, Exceptions.NullInputError('Cannot specify null cells'))

		if isinstance(grid, ComplexMatrix):
			return grid.clone()
		elif isinstance(grid, numpy.ndarray):
			return cls.from_numpy(grid)

		rows: list = list(grid)
		Misc.raise_if(any(not isinstance(row, collections.abc.Iterable) or isinstance(row, str) for row in rows), Exceptions.DimensionError('Grid must be a sequence of rows, each an iterable of numbers'))
		cells: list[list[complex]] = [[Functions.to_complex(value) for value in row] for row in rows]
		Misc.raise_if(len(cells) == 0 or len(cells[0]) == 0, Exceptions.DimensionError('Grid must contain at least one row and one column'))
		Misc.raise_if(any(len(row) != len(cells[0]) for row in cells), Exceptions.DimensionError(f'Grid rows must all have {len(cells[0])} columns'))

		instance: ComplexMatrix = cls(len(cells), len(cells[0]))
		instance.__cells__ = cells
		return instance

	@classmethod
	def from_numpy(cls, array: numpy.ndarray) -> ComplexMatrix:
		"""
		Creates a matrix from a two-dimensional numpy array
		:param array: The source array
		:return: The matrix
		:raises NullInputError: If 'array' is None
		:raises DimensionError: If the array is not two-dimensional or is empty
		"""

		Misc.raise_if(array is None, Exceptions.NullInputError('Cannot specify a null array'))
		array = numpy.asarray(array, dtype=complex)
		Misc.raise_ifn(array.ndim == 2, Exceptions.DimensionError(f'Expected a two-dimensional array, got {array.ndim} dimension(s)'))
		Misc.raise_if(array.size == 0, Exceptions.DimensionError('Array must contain at least one row and one column'))

		instance: ComplexMatrix = cls(*array.shape)
		instance.__cells__ = [[complex(x) for x in row] for row in array.tolist()]
		return instance

	@classmethod
	def identity(cls, size: int) -> ComplexMatrix:
		"""
		Creates a square matrix with 1 on the diagonal and 0 elsewhere
		:param size: The number of rows and columns
		:return: The identity matrix
		:raises DimensionError: If 'size' is not positive
		"""

		size = _require_int(cls.identity, 'size', size)
		Misc.raise_if(size <= 0, Exceptions.DimensionError(f'Identity size must be greater than 0, got {size}'))
		instance: ComplexMatrix = cls(size, size)

		for i in range(size):
			instance.__cells__[i][i] = 1 + 0j

		return instance

	@classmethod
	def create_identity_matrix(cls, length: int) -> ComplexMatrix:
		"""
		Standalone identity factory
		Use 'ComplexMatrix.identity' instead
		:raises NotImplementedError: Always
		"""

		raise NotImplementedError(cls.NOT_IMPLEMENTED_EXCEPTION_MESSAGE)

	@classmethod
	def widen(cls, value: ComplexMatrix | Functions.Scalar) -> ComplexMatrix:
		"""
		Treats a single number as a 1x1 matrix
		Matrices are returned unchanged
		:param value: The matrix or number
		:return: The matrix
		:raises NullInputError: If 'value' is None
		:raises InvalidArgumentException: If 'value' is neither a matrix nor a number
		"""

		if isinstance(value, ComplexMatrix):
			return value
		elif value is None:
			raise Exceptions.NullInputError('Cannot specify a null matrix')
		elif Functions.is_scalar(value):
			return cls.from_grid(((value,),))
		else:
			raise Exceptions.InvalidArgumentException(cls.widen, 'value', type(value), (ComplexMatrix, int, float, complex))

	def __init__(self, rows: int = 2, columns: int = 2):
		"""
		Class representing a dense, mutable matrix of complex numbers
		- Constructor -
		Creates a matrix with every cell set to 0
		:param rows: The number of rows (defaults to 2)
		:param columns: The number of columns (defaults to 2)
		:raises DimensionError: If either dimension is not positive
		"""

		rows = _require_int(ComplexMatrix.__init__, 'rows', rows)
		columns = _require_int(ComplexMatrix.__init__, 'columns', columns)
		Misc.raise_if(rows <= 0, Exceptions.DimensionError('Must specify a positive number of rows'))
		Misc.raise_if(columns <= 0, Exceptions.DimensionError('Must specify a positive number of columns'))
		self.__cells__: list[list[complex]] = [[0j] * columns for _ in range(rows)]

	def __replace__(self, cells: list[list[complex]], operation: str) -> ComplexMatrix:
		"""
		INTERNAL METHOD
		Swaps in a complete new cell grid
		:param cells: The new rows; must not be shared with another matrix
		:param operation: The operation name to log
		:return: This matrix
		"""

		old: tuple[int, int] = self.dimensions
		self.__cells__ = cells
		Configuration.log('debug', f'{operation}: {old[0]}x{old[1]} -> {self.rows}x{self.columns}')
		return self

	def __check_location__(self, caller: typing.Callable, row: int, column: int) -> tuple[int, int]:
		row = _require_int(caller, 'row', row)
		column = _require_int(caller, 'column', column)
		Misc.raise_ifn(0 <= row < self.rows, Exceptions.OutOfBoundsError(f'Row {row} is outside the bounds of the matrix (0 to {self.rows - 1})'))
		Misc.raise_ifn(0 <= column < self.columns, Exceptions.OutOfBoundsError(f'Column {column} is outside the bounds of the matrix (0 to {self.columns - 1})'))
		return row, column

	def __len__(self) -> int:
		"""
		:return: The number of cells in this matrix
		"""

		return self.rows * self.columns

	def __iter__(self) -> typing.Iterator[tuple[complex, ...]]:
		"""
		:return: An iterator over the rows of this matrix
		"""

		for row in self.__cells__:
			yield tuple(row)

	def __repr__(self) -> str:
		return f'<{type(self).__name__} {self.rows}x{self.columns} @ {hex(id(self))}>'

	def __str__(self) -> str:
		return self.to_string()

	def __getitem__(self, location: tuple[int, int]) -> complex:
		if not isinstance(location, tuple) or len(location) != 2:
			raise Exceptions.InvalidArgumentException(ComplexMatrix.__getitem__, 'location', type(location), ('tuple[int, int]',))

		return self.get(*location)

	def __setitem__(self, location: tuple[int, int], value: Functions.Scalar) -> None:
		if not isinstance(location, tuple) or len(location) != 2:
			raise Exceptions.InvalidArgumentException(ComplexMatrix.__setitem__, 'location', type(location), ('tuple[int, int]',))

		self.set(*location, value)

	def __eq__(self, other: typing.Any) -> bool:
		if isinstance(other, ComplexMatrix) or Functions.is_scalar(other):
			return self.equals(other)
		else:
			return NotImplemented

	def __ne__(self, other: typing.Any) -> bool:
		result: bool = self.__eq__(other)
		return result if result is NotImplemented else not result

	__hash__ = None
	__array_ufunc__ = None

	def __add__(self, other: ComplexMatrix | Functions.Scalar) -> ComplexMatrix:
		if not isinstance(other, ComplexMatrix) and not Functions.is_scalar(other):
			return NotImplemented

		return ComplexMatrix.add(self, other)

	def __radd__(self, other: Functions.Scalar) -> ComplexMatrix:
		if not Functions.is_scalar(other):
			return NotImplemented

		return ComplexMatrix.add(other, self)

	def __sub__(self, other: ComplexMatrix | Functions.Scalar) -> ComplexMatrix:
		if not isinstance(other, ComplexMatrix) and not Functions.is_scalar(other):
			return NotImplemented

		return ComplexMatrix.subtract(self, other)

	def __rsub__(self, other: Functions.Scalar) -> ComplexMatrix:
		if not Functions.is_scalar(other):
			return NotImplemented

		return ComplexMatrix.subtract(other, self)

	def __mul__(self, other: ComplexMatrix | Functions.Scalar) -> ComplexMatrix:
		"""
		Multiplies this matrix by a number (every cell) or by another matrix (matrix product)
		:param other: The number or right-hand matrix
		:return: The product
		:raises DimensionMismatchError: If this matrix's columns do not equal the other matrix's rows
		"""

		if isinstance(other, ComplexMatrix):
			return ComplexMatrix.multiply(self, other)
		elif Functions.is_scalar(other):
			return self.__scaled__(other)
		else:
			return NotImplemented

	def __rmul__(self, other: Functions.Scalar) -> ComplexMatrix:
		if not Functions.is_scalar(other):
			return NotImplemented

		return self.__scaled__(other)

	def __matmul__(self, other: ComplexMatrix | numpy.ndarray) -> ComplexMatrix:
		if isinstance(other, numpy.ndarray):
			other = ComplexMatrix.from_numpy(other)
		elif not isinstance(other, ComplexMatrix):
			return NotImplemented

		return ComplexMatrix.multiply(self, other)

	def __rmatmul__(self, other: numpy.ndarray) -> ComplexMatrix:
		if not isinstance(other, numpy.ndarray):
			return NotImplemented

		return ComplexMatrix.multiply(ComplexMatrix.from_numpy(other), self)

	def __imatmul__(self, other: ComplexMatrix | numpy.ndarray) -> ComplexMatrix:
		if isinstance(other, numpy.ndarray):
			other = ComplexMatrix.from_numpy(other)
		elif not isinstance(other, ComplexMatrix):
			return NotImplemented

		return self.multiply_as_left_side(other)

	def __neg__(self) -> ComplexMatrix:
		return ComplexMatrix.scalar_multiply(-1, self)

	def __pos__(self) -> ComplexMatrix:
		return self.clone()

	def __scaled__(self, factor: Functions.Scalar) -> ComplexMatrix:
		"""
		INTERNAL METHOD
		:param factor: The real or complex factor
		:return: A new matrix with every cell multiplied by 'factor'
		"""

		factor: complex = Functions.to_complex(factor)
		result: ComplexMatrix = ComplexMatrix(self.rows, self.columns)
		result.__cells__ = [[factor * value for value in row] for row in self.__cells__]
		return result

	# Access
	def get(self, row: int, column: int) -> complex:
		"""
		Gets a single cell
		:param row: The zero-indexed row
		:param column: The zero-indexed column
		:return: The cell value
		:raises OutOfBoundsError: If the location lies outside [0, rows) x [0, columns)
		"""

		row, column = self.__check_location__(ComplexMatrix.get, row, column)
		return self.__cells__[row][column]

	def set(self, row: int, column: int, value: Functions.Scalar) -> ComplexMatrix:
		"""
		Sets a single cell
		:param row: The zero-indexed row
		:param column: The zero-indexed column
		:param value: The new value
		:return: This matrix
		:raises OutOfBoundsError: If the location lies outside [0, rows) x [0, columns)
		:raises InvalidArgumentException: If 'value' is not a number
		"""

		row, column = self.__check_location__(ComplexMatrix.set, row, column)
		self.__cells__[row][column] = Functions.to_complex(value)
		return self

	def clone(self) -> ComplexMatrix:
		"""
		:return: An independent copy of this matrix
		"""

		result: ComplexMatrix = ComplexMatrix(self.rows, self.columns)
		result.__cells__ = [list(row) for row in self.__cells__]
		return result

	def copy_from(self, source: ComplexMatrix) -> ComplexMatrix:
		"""
		Overwrites every cell of this matrix with a copy of the source's cells
		The dimensions are not changed
		:param source: The matrix to copy from
		:return: This matrix
		:raises NullInputError: If 'source' is None
		:raises DimensionMismatchError: If the dimensions differ
		"""

		Misc.raise_if(source is None, Exceptions.NullInputError('Cannot copy from a null matrix'))

		if not isinstance(source, ComplexMatrix):
			raise Exceptions.InvalidArgumentException(ComplexMatrix.copy_from, 'source', type(source), (ComplexMatrix,))

		Misc.raise_if(source.dimensions != self.dimensions, Exceptions.DimensionMismatchError(f'Cannot copy a {source.rows}x{source.columns} matrix into a {self.rows}x{self.columns} matrix'))
		self.__cells__ = [list(row) for row in source.__cells__]
		return self

	def set_cells(self, grid: typing.Iterable[typing.Iterable[Functions.Scalar]]) -> ComplexMatrix:
		"""
		Replaces the whole cell grid, possibly changing the dimensions
		:param grid: The new rows
		:return: This matrix
		:raises NullInputError: If 'grid' is None
		:raises DimensionError: If 'grid' is empty or ragged
		"""

		return self.__replace__(ComplexMatrix.from_grid(grid).__cells__, 'set_cells')

	def equals(self, other: ComplexMatrix | Functions.Scalar | typing.Any) -> bool:
		"""
		Compares this matrix with another matrix or a single number
		A matrix equals a number only if it is 1x1 and its only cell equals that number
		:param other: The matrix, int, float or complex to compare to
		:return: Whether they are equal; False for any other kind of value
		"""

		tolerance: float = Configuration.EQUALITY_TOLERANCE

		if isinstance(other, ComplexMatrix):
			if self.dimensions != other.dimensions:
				return False

			return all(Functions.complex_equals(a, b, tolerance) for row_a, row_b in zip(self.__cells__, other.__cells__) for a, b in zip(row_a, row_b))
		elif Functions.is_scalar(other):
			return self.dimensions == (1, 1) and Functions.complex_equals(self.__cells__[0][0], other, tolerance)
		else:
			return False

	# Arithmetic
	def add(self, other: ComplexMatrix | Functions.Scalar) -> ComplexMatrix:
		"""
		Adds two matrices cell by cell
		Callable either as 'ComplexMatrix.add(a, b)' or 'a.add(b)'
		:param other: The right-hand matrix
		:return: A new matrix holding the sum
		:raises DimensionMismatchError: If the dimensions differ
		"""

		left: ComplexMatrix = ComplexMatrix.widen(self)
		right: ComplexMatrix = ComplexMatrix.widen(other)
		Misc.raise_if(left.dimensions != right.dimensions, Exceptions.DimensionMismatchError(f'Matrices were not of equal size, cannot add {right.rows}x{right.columns} to {left.rows}x{left.columns}'))
		result: ComplexMatrix = ComplexMatrix(left.rows, left.columns)
		result.__cells__ = [[a + b for a, b in zip(row_a, row_b)] for row_a, row_b in zip(left.__cells__, right.__cells__)]
		return result

	def subtract(self, other: ComplexMatrix | Functions.Scalar) -> ComplexMatrix:
		"""
		Subtracts two matrices cell by cell
		Callable either as 'ComplexMatrix.subtract(a, b)' or 'a.subtract(b)'
		:param other: The right-hand matrix
		:return: A new matrix holding the difference
		:raises DimensionMismatchError: If the dimensions differ
		"""

		left: ComplexMatrix = ComplexMatrix.widen(self)
		right: ComplexMatrix = ComplexMatrix.widen(other)
		Misc.raise_if(left.dimensions != right.dimensions, Exceptions.DimensionMismatchError(f'Matrices were not of equal size, cannot subtract {right.rows}x{right.columns} from {left.rows}x{left.columns}'))
		result: ComplexMatrix = ComplexMatrix(left.rows, left.columns)
		result.__cells__ = [[a - b for a, b in zip(row_a, row_b)] for row_a, row_b in zip(left.__cells__, right.__cells__)]
		return result

	def multiply(self, other: ComplexMatrix | Functions.Scalar) -> ComplexMatrix:
		"""
		Calculates the matrix product
		Callable either as 'ComplexMatrix.multiply(a, b)' or 'a.multiply(b)'
		:param other: The right-hand matrix
		:return: A new (left rows)x(right columns) matrix
		:raises DimensionMismatchError: If the left columns do not equal the right rows
		"""

		left: ComplexMatrix = ComplexMatrix.widen(self)
		right: ComplexMatrix = ComplexMatrix.widen(other)
		Misc.raise_if(left.columns != right.rows, Exceptions.DimensionMismatchError(f'The number of columns in the left side ({left.columns}) must be equal to the number of rows in the right side ({right.rows})'))
		result: ComplexMatrix = ComplexMatrix(left.rows, right.columns)

		for i, row in enumerate(left.__cells__):
			for j in range(right.columns):
				total: complex = 0j

				for k, value in enumerate(row):
					total += value * right.__cells__[k][j]

				result.__cells__[i][j] = total

		return result

	@staticmethod
	def scalar_multiply(factor: int | float, matrix: ComplexMatrix) -> ComplexMatrix:
		"""
		Multiplies every cell of a matrix by a real number
		:param factor: The real factor
		:param matrix: The matrix
		:return: A new matrix of the same dimensions
		:raises InvalidArgumentException: If 'factor' is not a real number
		:raises NullInputError: If 'matrix' is None
		"""

		if isinstance(factor, (bool, numpy.bool_)):
			raise Exceptions.InvalidArgumentException(ComplexMatrix.scalar_multiply, 'factor', type(factor), (int, float))

		try:
			typeguard.check_type(factor, int | float | numpy.integer | numpy.floating)
		except typeguard.TypeCheckError:
			raise Exceptions.InvalidArgumentException(ComplexMatrix.scalar_multiply, 'factor', type(factor), (int, float)) from None

		return ComplexMatrix.widen(matrix).__scaled__(factor)

	def multiply_as_left_side(self, right: ComplexMatrix | Functions.Scalar) -> ComplexMatrix:
		"""
		Replaces this matrix with (this @ right)
		:param right: The right-hand matrix
		:return: This matrix
		:raises DimensionMismatchError: If this matrix's columns do not equal the right rows
		"""

		return self.__replace__(ComplexMatrix.multiply(self, right).__cells__, 'multiply_as_left_side')

	def multiply_as_right_side(self, left: ComplexMatrix | Functions.Scalar) -> ComplexMatrix:
		"""
		Replaces this matrix with (left @ this)
		:param left: The left-hand matrix
		:return: This matrix
		:raises DimensionMismatchError: If the left columns do not equal this matrix's rows
		"""

		return self.__replace__(ComplexMatrix.multiply(left, self).__cells__, 'multiply_as_right_side')

	# Structural transforms
	def transpose(self) -> ComplexMatrix:
		"""
		Swaps rows and columns in place
		:return: This matrix
		"""

		return self.__replace__([list(column) for column in zip(*self.__cells__)], 'transpose')

	def conjugate_transpose(self) -> ComplexMatrix:
		"""
		Transposes this matrix and conjugates every cell in place
		:return: This matrix
		"""

		return self.__replace__([[value.conjugate() for value in column] for column in zip(*self.__cells__)], 'conjugate_transpose')

	def hermitian_conjugate(self) -> ComplexMatrix:
		return self.conjugate_transpose()

	def adjoint(self) -> ComplexMatrix:
		return self.conjugate_transpose()

	def raise_to_power(self, power: int) -> ComplexMatrix:
		"""
		Raises this square matrix to a non-negative integer power in place
		A power of 0 yields the identity matrix
		:param power: The exponent
		:return: This matrix
		:raises NotSquareError: If this matrix is not square
		:raises InvalidArgumentError: If 'power' is negative
		"""

		power = _require_int(ComplexMatrix.raise_to_power, 'power', power)
		Misc.raise_ifn(self.is_square(), Exceptions.NotSquareError('This matrix is not square. Only square matrices can be raised to a power.'))
		Misc.raise_if(power < 0, Exceptions.InvalidArgumentError(f'Cannot raise to powers less than 0, got {power}'))

		if power == 0:
			return self.__replace__(ComplexMatrix.identity(self.rows).__cells__, 'raise_to_power')

		working: ComplexMatrix = self.clone()

		for _ in range(1, power):
			working = ComplexMatrix.multiply(working, self)

		return self.__replace__(working.__cells__, 'raise_to_power')

	def tensor(self, other: ComplexMatrix | Functions.Scalar) -> ComplexMatrix:
		"""
		Replaces this matrix with the Kronecker product (this ⊗ other)
		For an m x n matrix and a p x q matrix, the result is (m*p) x (n*q)
		:param other: The right-hand matrix
		:return: This matrix
		:raises NullInputError: If 'other' is None
		"""

		right: ComplexMatrix = ComplexMatrix.widen(other)
		cells: list[list[complex]] = []

		for left_row in self.__cells__:
			for right_row in right.__cells__:
				cells.append([a * b for a in left_row for b in right_row])

		return self.__replace__(cells, 'tensor')

	def tensor_as_right_side(self, left: ComplexMatrix | Functions.Scalar) -> ComplexMatrix:
		"""
		Replaces this matrix with the Kronecker product (left ⊗ this)
		:param left: The left-hand matrix
		:return: This matrix
		:raises NullInputError: If 'left' is None
		"""

		result: ComplexMatrix = ComplexMatrix.widen(left).clone().tensor(self)
		return self.__replace__(result.__cells__, 'tensor_as_right_side')

	def tensor_self(self, count: int) -> ComplexMatrix:
		"""
		Tensors this matrix with itself 'count' times in sequence
		Each step uses the current state on both sides
		:param count: The number of repetitions
		:return: This matrix
		:raises InvalidArgumentError: If 'count' is negative
		"""

		count = _require_int(ComplexMatrix.tensor_self, 'count', count)
		Misc.raise_if(count < 0, Exceptions.InvalidArgumentError(f'Repetition count must be greater than or equal to 0, got {count}'))

		for _ in range(count):
			self.tensor(self)

		return self

	# Row reduction, determinant, inverse
	def to_reduced_row_echelon_form(self) -> ComplexMatrix:
		"""
		Applies Gauss-Jordan elimination in place
		Columns without a usable pivot are skipped; a singular matrix is not an error
		:return: This matrix
		"""

		tolerance: float = Configuration.EQUALITY_TOLERANCE
		cells: list[list[complex]] = [list(row) for row in self.__cells__]
		rows, columns = self.dimensions
		lead: int = 0

		for r in range(rows):
			if lead >= columns:
				break

			pivot_row: typing.Optional[int] = None

			while pivot_row is None and lead < columns:
				pivot_row = next((i for i in range(r, rows) if not Functions.is_zero(cells[i][lead], tolerance)), None)

				if pivot_row is None:
					Configuration.log('warn', f'rref: no pivot in column {lead} at or below row {r}')
					lead += 1

			if pivot_row is None:
				break

			cells[r], cells[pivot_row] = cells[pivot_row], cells[r]
			pivot: complex = cells[r][lead]
			cells[r] = [value / pivot for value in cells[r]]

			for j in range(rows):
				if j != r:
					factor: complex = cells[j][lead]
					cells[j] = [a - factor * b for a, b in zip(cells[j], cells[r])]

			lead += 1

		return self.__replace__(cells, 'to_reduced_row_echelon_form')

	def rref(self) -> ComplexMatrix:
		return self.to_reduced_row_echelon_form()

	@staticmethod
	def __determinant__(cells: list[list[complex]], tolerance: float) -> complex:
		"""
		INTERNAL METHOD
		Cofactor expansion down the first column
		:param cells: The square rows
		:param tolerance: The zero tolerance for skipping rows
		:return: The determinant
		"""

		dimension: int = len(cells)

		if dimension == 1:
			return cells[0][0]
		elif dimension == 2:
			return cells[0][0] * cells[1][1] - cells[0][1] * cells[1][0]

		determinant: complex = 0j

		for h in range(dimension):
			if Functions.is_zero(cells[h][0], tolerance):
				continue

			reduced: list[list[complex]] = [row[1:] for i, row in enumerate(cells) if i != h]
			term: complex = ComplexMatrix.__determinant__(reduced, tolerance) * cells[h][0]

			if h % 2 == 0:
				determinant += term
			else:
				determinant -= term

		return determinant

	def determinant(self) -> complex:
		"""
		Calculates the determinant by cofactor expansion
		Callable either as 'ComplexMatrix.determinant(matrix)' or 'matrix.determinant()'
		Runtime grows factorially with size
		:return: The determinant
		A single number is treated as a 1x1 matrix
		:raises NullInputError: If the matrix is None
		:raises NotSquareError: If the matrix is not square
		"""

		Misc.raise_if(self is None, Exceptions.NullInputError('Cannot take the determinant of a null matrix'))
		matrix: ComplexMatrix = ComplexMatrix.widen(self)
		Misc.raise_ifn(matrix.is_square(), Exceptions.NotSquareError('Matrix is not square. Only square matrices have a determinant.'))
		return ComplexMatrix.__determinant__(matrix.__cells__, Configuration.EQUALITY_TOLERANCE)

	def inverse(self) -> ComplexMatrix:
		"""
		Calculates the inverse by Gauss-Jordan elimination of [this | I]
		This matrix is unchanged
		:return: A new matrix holding the inverse
		:raises NotSquareError: If this matrix is not square
		:raises SingularMatrixError: If the determinant is 0
		"""

		Misc.raise_ifn(self.is_square(), Exceptions.NotSquareError('Matrix is not square. Only square matrices can be inverted.'))
		Misc.raise_if(Functions.is_zero(self.determinant(), Configuration.EQUALITY_TOLERANCE), Exceptions.SingularMatrixError())
		size: int = self.rows
		augmented: ComplexMatrix = ComplexMatrix.from_grid(row + identity_row for row, identity_row in zip(self.__cells__, ComplexMatrix.identity(size).__cells__))
		augmented.to_reduced_row_echelon_form()
		Configuration.log('debug', f'inverse: {size}x{size}')
		return ComplexMatrix.from_grid(row[size:] for row in augmented.__cells__)

	# Classification
	def is_square(self) -> bool:
		return self.rows == self.columns

	def is_identity(self) -> bool:
		"""
		:return: Whether this matrix is square with 1 on the diagonal and 0 elsewhere
		"""

		if not self.is_square():
			return False

		tolerance: float = Configuration.EQUALITY_TOLERANCE
		return all(Functions.complex_equals(value, 1 if i == j else 0, tolerance) for i, row in enumerate(self.__cells__) for j, value in enumerate(row))

	def is_symmetric(self) -> bool:
		return self.clone().transpose() == self

	def is_skew_symmetric(self) -> bool:
		return self.clone().transpose() == -1 * self.clone()

	def is_hermitian(self) -> bool:
		return self.clone().conjugate_transpose() == self

	def is_skew_hermitian(self) -> bool:
		return self.clone().conjugate_transpose() == -1 * self

	def is_unitary(self) -> bool:
		"""
		:return: Whether the conjugate transpose equals the inverse; False for non-invertible matrices
		"""

		if not self.is_invertible():
			return False

		return self.clone().conjugate_transpose() == self.clone().inverse()

	def is_normal(self) -> bool:
		"""
		:return: Whether this matrix commutes with its conjugate transpose
		"""

		if not self.is_square():
			return False

		adjoint: ComplexMatrix = self.clone().conjugate_transpose()
		return self @ adjoint == adjoint @ self

	def is_invertible(self) -> bool:
		return self.is_square() and not Functions.is_zero(self.determinant(), Configuration.EQUALITY_TOLERANCE)

	def is_inverse_of(self, other: ComplexMatrix | Functions.Scalar) -> bool:
		"""
		:param other: The candidate inverse
		:return: Whether (this @ other) is the identity
		:raises NullInputError: If 'other' is None
		"""

		other = ComplexMatrix.widen(other)

		if self.columns != other.rows:
			return False

		return (self @ other).is_identity()

	# Conversion
	def to_string(self, insert_new_lines: bool = False) -> str:
		"""
		Renders this matrix as '[[(a + bi) (c + di)][...]]'
		:param insert_new_lines: If True, each row is rendered as '[...]' followed by a new line and the outer brackets are omitted
		:return: The textual form
		"""

		lines: list[str] = [f'[{" ".join(f"({Functions.format_complex(value)})" for value in row)}]' for row in self.__cells__]
		return ''.join(f'{line}\n' for line in lines) if insert_new_lines else f'[{"".join(lines)}]'

	def to_nested(self) -> list[list[complex]]:
		"""
		:return: A copy of the cells as a list of rows
		"""

		return [list(row) for row in self.__cells__]

	def to_numpy(self) -> numpy.ndarray:
		"""
		:return: This matrix converted to a complex numpy array
		"""

		return numpy.array(self.__cells__, dtype=complex)

	@property
	def rows(self) -> int:
		return len(self.__cells__)

	@property
	def columns(self) -> int:
		return len(self.__cells__[0])

	@property
	def dimensions(self) -> tuple[int, int]:
		"""
		:return: The (rows, columns) of this matrix
		"""

		return self.rows, self.columns
