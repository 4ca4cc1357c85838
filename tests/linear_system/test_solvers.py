import numpy as np
from numpy.random import Generator
import pytest
from CachedSolve.linear_system.solvers import (
    RawMatTimesVec, brute_force, gmres_solve, recommended
)

SOLVERS = [brute_force, recommended, gmres_solve]


def build_atomic_energy():
    # Solution of this linear systems gives the expression for the atomic
    # energy
    matrix = np.array([
        [1, 0, 1, 1],
        [0, 0, 2, 3],
        [0, 1, -1, -4],
        [0, 1, 0, -2],
    ])
    rhs = np.array([1, 2, -2, 0])
    solution = np.array([1, 4, -2, 2])
    return matrix, rhs, solution


@pytest.mark.parametrize("solver", SOLVERS)
def test_atomic_energy(solver):
    matrix, rhs, solution = build_atomic_energy()
    assert np.allclose(solver(matrix, rhs), solution)


@pytest.mark.parametrize("solver", SOLVERS)
def test_matrix_rhs(solver):
    matrix, _, _ = build_atomic_energy()
    inverse = solver(matrix, np.eye(4))
    assert inverse.shape == (4, 4)
    assert np.allclose(matrix @ inverse, np.eye(4))


@pytest.mark.parametrize("solver", SOLVERS)
def test_complex_matrix(solver):
    matrix = np.array([[2 + 1j, 1], [0, 1 - 1j]])
    rhs = np.array([1, 1j])
    solution = solver(matrix, rhs)
    assert np.allclose(matrix @ solution, rhs)


def test_raw_mat_times_vec():
    matrix, _, _ = build_atomic_energy()
    operator = RawMatTimesVec(matrix)
    assert operator.shape == (4, 4)
    assert np.allclose(operator.matvec(np.ones(4)).ravel(), matrix.sum(axis=1))


def test_gmres_not_converging():
    rng: Generator = np.random.default_rng(seed=20250508)
    matrix = rng.random(size=(40, 40))
    rhs = rng.random(size=(40))
    with pytest.raises(RuntimeError):
        gmres_solve(matrix, rhs, restart=2, maxiter=1)
