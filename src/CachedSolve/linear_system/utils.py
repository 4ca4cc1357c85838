import numpy as np
from numpy.typing import ArrayLike, NDArray


def frozen_copy(values: ArrayLike) -> NDArray:
    """ Read-only copy, so neither the caller nor the cache can change the
    other's arrays. """
    frozen = np.array(values)
    frozen.setflags(write=False)
    return frozen


def identity_like(matrix: NDArray) -> NDArray:
    """ Identity with the dimension of `matrix`, complex if `matrix` is. """
    dim = matrix.shape[0]
    if np.iscomplexobj(matrix):
        return np.eye(dim, dtype=np.complex128)
    return np.eye(dim)


class LinearSystemCache:
    """
    Holds the linear system `matrix @ solution = rhs` together with its
    cached solution.

    Setting `matrix` or `rhs` clears the cached solution. When `rhs` is not
    set, the system's right-hand side is the identity and the solution is the
    inverse of `matrix`.

    Inputs are copied on the way in and the stored matrix, rhs and solution
    are read-only, so a cached solution always belongs to the stored system.

    The cache does not compute anything. Use
    `CachedSolve.linear_system.cached.cached_solve` for that.
    """

    def __init__(self, matrix: ArrayLike, rhs: ArrayLike | None = None):
        """
        :param matrix: square coefficient matrix
        :param rhs: optional right-hand side vector or matrix
        """
        self.matrix = frozen_copy(matrix)
        self.rhs = None if rhs is None else frozen_copy(rhs)
        self.solution: NDArray | None = None

    def set_coefficients(self, matrix: ArrayLike) -> None:
        self.matrix = frozen_copy(matrix)
        self.solution = None

    def get_coefficients(self) -> NDArray:
        return self.matrix

    def set_rhs(self, rhs: ArrayLike | None) -> None:
        """ `None` drops the right-hand side, turning the system into an
        inversion. """
        self.rhs = None if rhs is None else frozen_copy(rhs)
        self.solution = None

    def get_rhs(self) -> NDArray:
        # rebuilt on every call, follows the current matrix
        if self.rhs is None:
            return identity_like(self.matrix)
        return self.rhs

    def has_rhs(self) -> bool:
        return self.rhs is not None

    def set_solution(self, solution: ArrayLike) -> None:
        self.solution = frozen_copy(solution)

    def get_solution(self) -> NDArray | None:
        return self.solution

    def __str__(self) -> str:
        lstr = f"{self.matrix=}\n"
        lstr += f"{self.solution=}\n"
        lstr += f"{self.rhs=}\n"
        return lstr


def make_cache_matrix(matrix: ArrayLike) -> LinearSystemCache:
    """ A cache for the inverse of `matrix`. """
    return LinearSystemCache(matrix)


def make_cache_system(
    matrix: ArrayLike,
    rhs: ArrayLike | None = None,
) -> LinearSystemCache:
    """ A cache for the solution of `matrix @ solution = rhs`. """
    return LinearSystemCache(matrix, rhs)
