from typing import Callable
from CachedSolve.linear_system.solvers import recommended
from CachedSolve.linear_system.utils import LinearSystemCache
from CachedSolve.logging_config import get_logger
from numpy.typing import NDArray

logger = get_logger(__name__)


def cached_solve(
    cache: LinearSystemCache,
    *args,
    solver: Callable[..., NDArray] = recommended,
    **kwargs,
) -> NDArray:
    """
    Returns the solution of `matrix @ solution = rhs` held by `cache`,
    computing and storing it the first time. Without `rhs` the solution is
    the inverse of `matrix`.

    `args` and `kwargs` go to `solver` untouched. The right-hand side
    always comes from the cache, so a solution can never be stored for a
    system other than the one the cache holds. The returned array is the
    cache's read-only copy.

    A cache hit logs "getting cached data" at INFO. Call
    `CachedSolve.logging_config.setup_logging` or configure logging
    yourself to see it; without handlers Python drops INFO records.
    """
    solution = cache.get_solution()
    if solution is not None:
        logger.info("getting cached data")
        return solution

    matrix = cache.get_coefficients()
    rhs = cache.get_rhs()
    solution = solver(matrix, rhs, *args, **kwargs)
    cache.set_solution(solution)
    return cache.get_solution()


def cached_inverse(cache: LinearSystemCache, *args, **kwargs) -> NDArray:
    """ Inverse of the cached matrix. """
    if cache.has_rhs():
        raise ValueError(
            "The cache holds a right-hand side, use `cached_solve` instead."
        )
    return cached_solve(cache, *args, **kwargs)
