import numbers
import numpy
import typeguard

from .. import Exceptions

Scalar = int | float | complex | numpy.number


def to_complex(value: Scalar) -> complex:
	"""
	Widens a real or complex number to a builtin complex
	:param value: The number to widen
	:return: The complex value
	:raises InvalidArgumentException: If 'value' is not a number
	"""

	if isinstance(value, (bool, numpy.bool_)):
		raise Exceptions.InvalidArgumentException(to_complex, 'value', type(value), (int, float, complex))

	try:
		typeguard.check_type(value, Scalar)
	except typeguard.TypeCheckError:
		raise Exceptions.InvalidArgumentException(to_complex, 'value', type(value), (int, float, complex)) from None

	return complex(value)


def is_scalar(value) -> bool:
	"""
	:param value: The value to check
	:return: Whether the value is a single real or complex number
	"""

	return isinstance(value, (numbers.Number, numpy.number)) and not isinstance(value, bool)


def complex_equals(a: complex, b: complex, tolerance: float = 0) -> bool:
	"""
	Compares two complex numbers component-wise
	Both the real and the imaginary parts must lie within 'tolerance' of each other
	:param a: The first number
	:param b: The second number
	:param tolerance: The largest allowed difference per component
	:return: Whether the two numbers are equal
	"""

	a = complex(a)
	b = complex(b)

	if tolerance <= 0:
		return a == b

	return abs(a.real - b.real) <= tolerance and abs(a.imag - b.imag) <= tolerance


def is_zero(value: complex, tolerance: float = 0) -> bool:
	return complex_equals(value, 0j, tolerance)


def __format_component(value: float) -> str:
	return str(int(value)) if value.is_integer() else repr(value)


def format_complex(value: complex) -> str:
	"""
	Renders a complex number as 'a + bi'
	A negative imaginary part renders as 'a - bi'
	:param value: The number to render
	:return: The textual form
	"""

	value = complex(value)

	if value.imag < 0:
		return f'{__format_component(value.real)} - {__format_component(abs(value.imag))}i'
	else:
		return f'{__format_component(value.real)} + {__format_component(value.imag)}i'


def is_power_of(power_of: int, test_value: int) -> bool:
	"""
	Tests whether 'test_value' is a non-negative integer power of 'power_of'
	For 'power_of' of 2, this is True for 1, 2, 4, 8, 16, ...
	:param power_of: The base
	:param test_value: The value to test
	:return: Whether 'test_value' equals 'power_of' ** n for some n >= 0
	:raises InvalidArgumentError: If 'power_of' is less than 1
	"""

	if power_of < 1:
		raise Exceptions.InvalidArgumentError(f'Base must be at least 1, got {power_of}')
	elif power_of == 1:
		return test_value == 1

	total: int = 1

	while total <= test_value:
		if total == test_value:
			return True

		total *= power_of

	return False
