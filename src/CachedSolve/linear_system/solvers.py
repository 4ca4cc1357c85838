""" Linear-solve primitives. Each one solves `matrix @ solution = rhs` and
shares the signature `primitive(matrix, rhs, *args, **kwargs)`. """

from typing import Any
import numpy as np
from numpy.typing import NDArray
from scipy import linalg
from scipy.sparse.linalg import LinearOperator, gmres

GMRES_RTOL = 1e-12


def brute_force(matrix: NDArray, rhs: NDArray, *args, **kwargs) -> NDArray:
    """ Explicit inverse, options go to `scipy.linalg.inv`. """
    return linalg.inv(matrix, *args, **kwargs).dot(rhs)


def recommended(matrix: NDArray, rhs: NDArray, *args, **kwargs) -> NDArray:
    """ LU based `scipy.linalg.solve`. """
    return linalg.solve(matrix, rhs, *args, **kwargs)


class RawMatTimesVec(LinearOperator):
    """ `gmres_solve` helper. """

    def __init__(self: Any, matrix: NDArray) -> None:
        """ The point is to NOT store the whole matrix.
        But here, with a dense input, I will still keep it. """
        self.matrix = matrix
        self.shape = matrix.shape
        self.dtype = np.result_type(matrix.dtype, np.float64)

    def _matvec(self, x: NDArray):
        return self.matrix @ x.reshape(-1, 1)


def gmres_solve(matrix: NDArray, rhs: NDArray, *args, **kwargs) -> NDArray:
    """
    Generalized minimal residual. A 2D `rhs` is solved column by column.

    Options go to `scipy.sparse.linalg.gmres`, `rtol` defaults to
    `GMRES_RTOL`.
    """
    kwargs.setdefault('rtol', GMRES_RTOL)
    operator = RawMatTimesVec(matrix)

    def one_column(column: NDArray) -> NDArray:
        solution, exit_code = gmres(operator, column, *args, **kwargs)
        if exit_code != 0:
            raise RuntimeError("GMRES didn't converge")
        return solution

    if rhs.ndim == 1:
        return one_column(rhs)

    return np.column_stack(
        [one_column(rhs[:, col]) for col in range(rhs.shape[1])]
    )
