from numpy import array, float32, ndarray, zeros
from numpy.random import Generator


# reference data set with unevenly spaced knots
reference_knots = array(
    [0.5, 1., 2., 3., 4.5, 5., 6., 7., 8., 9., 10., 11.5, 12., 13., 14., 15.],
    dtype=float32,
)
reference_values = array(
    [0., 0., 1., 2., 4., 7., 9., 10., 8., 6., 3., 2., 2., 1., 1., 0.],
    dtype=float32,
)


def build_testing_system(rng: Generator, n: int = 14, symmetric: bool = False):
    """
    Builds a random, strictly diagonally dominant tridiagonal system along
    with a known solution.

    :return: \
        The tuple ``(lower, main, upper, rhs, solution)``, where ``rhs`` is
        the product of the system matrix and ``solution``.
    """
    lower = rng.uniform(low=-1., high=1., size=n - 1).astype(float32)
    upper = lower.copy() if symmetric else rng.uniform(low=-1., high=1., size=n - 1).astype(float32)
    # each row of the matrix has off-diagonal magnitudes summing to less than 2
    main = rng.uniform(low=2.5, high=5., size=n).astype(float32)
    solution = rng.normal(size=n).astype(float32)
    rhs = tridiagonal_product(lower, main, upper, solution)
    return lower, main, upper, rhs, solution


def tridiagonal_product(lower: ndarray, main: ndarray, upper: ndarray, x: ndarray) -> ndarray:
    result = main * x
    result[1:] += lower * x[:-1]
    result[:-1] += upper * x[1:]
    return result


def tridiagonal_matrix(lower: ndarray, main: ndarray, upper: ndarray) -> ndarray:
    n = main.size
    A = zeros([n, n])
    A[range(n), range(n)] = main
    A[range(1, n), range(n - 1)] = lower
    A[range(n - 1), range(1, n)] = upper
    return A
