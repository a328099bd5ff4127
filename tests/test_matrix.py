"""
Tests for the Gaussian elimination solver.
"""
import numpy as np
import pytest

from gacha_engine.errors import DimensionMismatch, SingularMatrix
from gacha_engine.matrix import solve_linear_system


def _well_conditioned(n, seed=0):
    rng = np.random.default_rng(seed)
    A = rng.random((n, n)) + n * np.identity(n)
    b = rng.random(n) + 1.0
    return A, b


class TestSolve:
    @pytest.mark.parametrize("n", [1, 2, 7, 50, 360])
    def test_round_trip(self, n):
        """A @ solve(A, b) reproduces b to 1e-9 relative."""
        A, b = _well_conditioned(n, seed=n)
        x = solve_linear_system(A, b)
        np.testing.assert_allclose(A @ x, b, rtol=1e-9, atol=0)

    def test_matches_numpy(self):
        A, b = _well_conditioned(40, seed=3)
        np.testing.assert_allclose(solve_linear_system(A, b), np.linalg.solve(A, b), rtol=1e-10)

    def test_needs_pivoting(self):
        """A zero on the diagonal is fine when a lower row can be swapped in."""
        A = [[0.0, 1.0], [1.0, 0.0]]
        np.testing.assert_allclose(solve_linear_system(A, [2.0, 3.0]), [3.0, 2.0])

    def test_accepts_nested_lists(self):
        x = solve_linear_system([[2.0, 0.0], [0.0, 4.0]], [2.0, 2.0])
        assert isinstance(x, np.ndarray)
        np.testing.assert_allclose(x, [1.0, 0.5])

    def test_inputs_not_mutated(self):
        A, b = _well_conditioned(10)
        A_before, b_before = A.copy(), b.copy()
        solve_linear_system(A, b)
        np.testing.assert_array_equal(A, A_before)
        np.testing.assert_array_equal(b, b_before)

    def test_multiple_right_hand_sides(self):
        A, _ = _well_conditioned(12, seed=5)
        B = np.random.default_rng(1).random((12, 3))
        X = solve_linear_system(A, B)
        assert X.shape == (12, 3)
        for col in range(3):
            np.testing.assert_allclose(X[:, col], solve_linear_system(A, B[:, col]), rtol=1e-12)

    def test_empty_system(self):
        assert solve_linear_system([], []).shape == (0,)


class TestErrors:
    def test_zero_row_is_singular(self):
        A = np.identity(4)
        A[2] = 0.0
        with pytest.raises(SingularMatrix):
            solve_linear_system(A, np.ones(4))

    def test_zero_matrix_is_singular(self):
        with pytest.raises(SingularMatrix):
            solve_linear_system(np.zeros((3, 3)), np.ones(3))

    def test_dependent_rows_are_singular(self):
        with pytest.raises(SingularMatrix):
            solve_linear_system([[1.0, 2.0], [2.0, 4.0]], [1.0, 2.0])

    def test_non_square(self):
        with pytest.raises(DimensionMismatch):
            solve_linear_system(np.ones((2, 3)), np.ones(2))

    def test_rhs_length_mismatch(self):
        with pytest.raises(DimensionMismatch):
            solve_linear_system(np.identity(3), np.ones(4))

    def test_ragged_rows(self):
        with pytest.raises(DimensionMismatch):
            solve_linear_system([[1.0, 2.0], [3.0]], [1.0, 2.0])

    def test_ragged_rhs(self):
        with pytest.raises(DimensionMismatch):
            solve_linear_system(np.identity(2), [[1.0], [2.0, 3.0]])

    def test_errors_share_base_class(self):
        from gacha_engine.errors import GachaError
        assert issubclass(SingularMatrix, GachaError)
        assert issubclass(DimensionMismatch, ValueError)
        assert SingularMatrix.status == 500
