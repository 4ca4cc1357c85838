import numpy as np
from CachedSolve.linear_system.cached import cached_inverse, cached_solve
from CachedSolve.linear_system.solvers import gmres_solve
from CachedSolve.linear_system.utils import (
    LinearSystemCache, make_cache_matrix, make_cache_system
)
from CachedSolve.logging_config import setup_logging


def build_inverse_example() -> LinearSystemCache:
    matrix = np.array([
        [1, 2],
        [3, 4],
    ])
    return make_cache_matrix(matrix)


def build_system_example() -> LinearSystemCache:
    matrix = np.array([
        [1, 2],
        [3, 4],
    ])
    rhs = np.array([1, 1])
    return make_cache_system(matrix, rhs)


def inverse_example():
    m_cache = build_inverse_example()
    inverse = cached_inverse(m_cache)  # computed
    inverse = cached_inverse(m_cache)  # from the cache
    print(f'{inverse=}')

    m_cache.set_coefficients(np.diag([2, 2]))
    inverse = cached_inverse(m_cache)
    print(f'{inverse=}')


def system_example():
    s_cache = build_system_example()
    solution = cached_solve(s_cache, solver=gmres_solve, maxiter=100)
    solution = cached_solve(s_cache)
    print(f'{solution=}')


def main():
    # without it the cache-hit notices are not shown
    setup_logging()
    inverse_example()
    system_example()


if __name__ == "__main__":
    main()
