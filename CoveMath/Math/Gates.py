import cmath
import math

from . import Functions
from .ComplexMatrix import ComplexMatrix
from .. import Exceptions
from .. import Misc

SQUARE_ROOT_OF_2: float = math.sqrt(2)


def identity_gate() -> ComplexMatrix:
	"""
	:return: The single qubit identity operation
	"""

	return ComplexMatrix.identity(2)


def identity_n(qubits: int) -> ComplexMatrix:
	"""
	Creates the identity operation over several qubits
	:param qubits: The number of qubits
	:return: The (2^qubits) x (2^qubits) identity matrix
	:raises InvalidArgumentError: If 'qubits' is less than 1
	"""

	Misc.raise_if(qubits < 1, Exceptions.InvalidArgumentError(f'Must specify at least one qubit, got {qubits}'))
	return ComplexMatrix.identity(2 ** qubits)


def not_gate() -> ComplexMatrix:
	"""
	:return: The NOT (Pauli-X) operation
	"""

	return ComplexMatrix.from_grid(((0, 1), (1, 0)))


def pauli_y() -> ComplexMatrix:
	return ComplexMatrix.from_grid(((0, -1j), (1j, 0)))


def pauli_z() -> ComplexMatrix:
	return ComplexMatrix.from_grid(((1, 0), (0, -1)))


def hadamard() -> ComplexMatrix:
	return (1 / SQUARE_ROOT_OF_2) * ComplexMatrix.from_grid(((1, 1), (1, -1)))


def s_gate() -> ComplexMatrix:
	return phase_shift(math.pi / 2)


def t_gate() -> ComplexMatrix:
	return phase_shift(math.pi / 4)


def phase_shift(theta: float) -> ComplexMatrix:
	"""
	Creates the phase shift operation diag(1, e^(i*theta))
	:param theta: The phase angle in radians
	:return: The phase shift matrix
	"""

	return ComplexMatrix.from_grid(((1, 0), (0, cmath.exp(1j * theta))))


def rotate_k(k: int) -> ComplexMatrix:
	"""
	Creates the R(k) operation used by the quantum Fourier transform
	:param k: The rotation index; the phase is 2*pi / 2^k
	:return: The rotation matrix
	"""

	return phase_shift(2 * math.pi / 2 ** k)


def controlled(operation: ComplexMatrix) -> ComplexMatrix:
	"""
	Creates the controlled form of an operation
	The result is block diagonal: identity on the upper half, 'operation' on the lower half
	:param operation: The square target operation
	:return: The controlled operation, twice the size of 'operation'
	:raises NotSquareError: If 'operation' is not square
	:raises DimensionError: If the size of 'operation' is not a power of 2
	"""

	operation = ComplexMatrix.widen(operation)
	Misc.raise_ifn(operation.is_square(), Exceptions.NotSquareError('Only square operations can be controlled'))
	Misc.raise_ifn(Functions.is_power_of(2, operation.rows), Exceptions.DimensionError(f'Operation size must be a power of 2, got {operation.rows}'))
	size: int = operation.rows
	result: ComplexMatrix = ComplexMatrix.identity(size * 2)

	for i in range(size):
		for j in range(size):
			result.set(size + i, size + j, operation.get(i, j))

	return result


def cnot() -> ComplexMatrix:
	return controlled(not_gate())


def swap() -> ComplexMatrix:
	return ComplexMatrix.from_grid((
		(1, 0, 0, 0),
		(0, 0, 1, 0),
		(0, 1, 0, 0),
		(0, 0, 0, 1),
	))


def toffoli() -> ComplexMatrix:
	"""
	:return: The controlled-controlled-NOT operation over three qubits
	"""

	return controlled(cnot())


def fredkin() -> ComplexMatrix:
	"""
	:return: The controlled-SWAP operation over three qubits
	"""

	return controlled(swap())
