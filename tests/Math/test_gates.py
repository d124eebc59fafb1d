"""
Tests for the standard quantum gate matrices.
"""

import cmath
import math

import pytest

from CoveMath import Exceptions
from CoveMath.Math import Gates
from CoveMath.Math.ComplexMatrix import ComplexMatrix


ALL_GATES = [
	Gates.identity_gate,
	Gates.not_gate,
	Gates.pauli_y,
	Gates.pauli_z,
	Gates.hadamard,
	Gates.s_gate,
	Gates.t_gate,
	Gates.cnot,
	Gates.swap,
	Gates.toffoli,
	Gates.fredkin,
]


class TestUnitarity:

	@pytest.mark.parametrize('gate', ALL_GATES, ids=lambda gate: gate.__name__)
	def test_gate_is_unitary(self, gate):
		assert gate().is_unitary()

	@pytest.mark.parametrize('theta', [0, 0.3, math.pi / 3, math.pi, -2.0])
	def test_phase_shift_is_unitary(self, theta):
		assert Gates.phase_shift(theta).is_unitary()

	@pytest.mark.parametrize('k', [1, 2, 3, 5])
	def test_rotate_k_is_unitary(self, k):
		assert Gates.rotate_k(k).is_unitary()


class TestSingleQubit:

	def test_not_is_involution(self):
		assert (Gates.not_gate() @ Gates.not_gate()).is_identity()

	def test_hadamard_is_involution(self):
		assert (Gates.hadamard() @ Gates.hadamard()).is_identity()

	def test_hadamard_is_hermitian(self):
		assert Gates.hadamard().is_hermitian()

	def test_pauli_identity(self):
		x, y, z = Gates.not_gate(), Gates.pauli_y(), Gates.pauli_z()
		assert x @ y == 1j * z

	def test_t_squared_is_s(self):
		assert Gates.t_gate() @ Gates.t_gate() == Gates.s_gate()

	def test_s_squared_is_z(self):
		assert Gates.s_gate().raise_to_power(2) == Gates.pauli_z()

	def test_t_phase(self):
		assert Gates.t_gate().get(1, 1) == pytest.approx(cmath.exp(1j * math.pi / 4))

	def test_rotate_k(self):
		assert Gates.rotate_k(1) == Gates.pauli_z()
		assert Gates.rotate_k(2) == Gates.s_gate()
		assert Gates.rotate_k(3) == Gates.t_gate()


class TestMultiQubit:

	def test_cnot(self):
		expected = ComplexMatrix.from_grid([
			[1, 0, 0, 0],
			[0, 1, 0, 0],
			[0, 0, 0, 1],
			[0, 0, 1, 0],
		])
		assert Gates.cnot() == expected

	def test_swap_exchanges_qubits(self):
		zero = ComplexMatrix.from_grid([[1], [0]])
		one = ComplexMatrix.from_grid([[0], [1]])
		state = zero.clone().tensor(one)
		assert Gates.swap() @ state == one.clone().tensor(zero)

	@pytest.mark.parametrize('gate', [Gates.toffoli, Gates.fredkin])
	def test_three_qubit_dimensions(self, gate):
		assert gate().dimensions == (8, 8)

	def test_toffoli_flips_last_qubit(self):
		toffoli = Gates.toffoli()
		assert toffoli.get(6, 7) == 1
		assert toffoli.get(7, 6) == 1
		assert toffoli.get(6, 6) == 0

	def test_controlled_block_layout(self):
		controlled = Gates.controlled(Gates.pauli_y())
		assert controlled.dimensions == (4, 4)
		assert controlled.get(0, 0) == 1
		assert controlled.get(2, 3) == -1j
		assert controlled.get(3, 2) == 1j

	def test_controlled_non_square(self):
		with pytest.raises(Exceptions.NotSquareError):
			Gates.controlled(ComplexMatrix(2, 3))

	@pytest.mark.parametrize('size', [3, 6])
	def test_controlled_size_not_power_of_2(self, size):
		with pytest.raises(Exceptions.DimensionError):
			Gates.controlled(ComplexMatrix.identity(size))

	def test_controlled_scalar_phase(self):
		assert Gates.controlled(-1) == Gates.pauli_z()

	def test_identity_n(self):
		matrix = Gates.identity_n(3)
		assert matrix.dimensions == (8, 8)
		assert matrix.is_identity()

	def test_identity_n_matches_tensor_power(self):
		assert Gates.identity_gate().tensor(Gates.identity_gate()) == Gates.identity_n(2)

	@pytest.mark.parametrize('qubits', [0, -1])
	def test_identity_n_invalid(self, qubits):
		with pytest.raises(Exceptions.InvalidArgumentError):
			Gates.identity_n(qubits)
