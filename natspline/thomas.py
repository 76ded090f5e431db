from numpy import ndarray
from natspline.dimensions import InvalidLengthError, check_floating, check_length, output_array


def check_system_size(caller: str, main: ndarray) -> int:
    n = len(main)
    if n < 4:
        raise InvalidLengthError(
            f"""\n
            [ {caller} error ]
            >> The 'main' diagonal must have at least 4 elements,
            >> but instead has {n}.
            """
        )
    return n


def thomas_algorithm(
    lower: ndarray, main: ndarray, upper: ndarray, rhs: ndarray, out: ndarray = None
) -> ndarray:
    """
    Solves the linear system ``A @ x = rhs`` where ``A`` is tridiagonal, using
    the Thomas algorithm. No pivoting is performed, so the system should be
    diagonally dominant.

    The ``main`` and ``rhs`` arrays are overwritten during the elimination and
    should not be re-used after the call.

    :param lower: \
        The sub-diagonal of ``A`` as a 1D ``numpy.ndarray`` of length ``n - 1``.

    :param main: \
        The main diagonal of ``A`` as a 1D ``numpy.ndarray`` of length ``n``.

    :param upper: \
        The super-diagonal of ``A`` as a 1D ``numpy.ndarray`` of length ``n - 1``.

    :param rhs: \
        The right-hand-side vector as a 1D ``numpy.ndarray`` of length ``n``.

    :param out: \
        An optional array of length ``n`` into which the solution is written.

    :return: \
        The solution vector ``x``.
    """
    n = check_system_size("thomas_algorithm", main)
    check_length("thomas_algorithm", "lower", lower, n - 1)
    check_length("thomas_algorithm", "upper", upper, n - 1)
    check_length("thomas_algorithm", "rhs", rhs, n)
    check_floating("thomas_algorithm", "main", main)
    check_floating("thomas_algorithm", "rhs", rhs)
    x = output_array("thomas_algorithm", "out", out, n)

    for i in range(1, n):
        mc = lower[i - 1] / main[i - 1]
        main[i] -= mc * upper[i - 1]
        rhs[i] -= mc * rhs[i - 1]

    x[n - 1] = rhs[n - 1] / main[n - 1]
    for i in range(n - 2, -1, -1):
        x[i] = (rhs[i] - upper[i] * x[i + 1]) / main[i]
    return x


def thomas_algorithm_symmetric(
    subdiagonal: ndarray, main: ndarray, rhs: ndarray, out: ndarray = None
) -> ndarray:
    """
    Solves ``A @ x = rhs`` for a symmetric tridiagonal ``A``, whose sub- and
    super-diagonal are both given by ``subdiagonal``. As with ``thomas_algorithm``
    the ``main`` and ``rhs`` arrays are consumed by the solve.
    """
    n = check_system_size("thomas_algorithm_symmetric", main)
    check_length("thomas_algorithm_symmetric", "subdiagonal", subdiagonal, n - 1)
    check_length("thomas_algorithm_symmetric", "rhs", rhs, n)
    check_floating("thomas_algorithm_symmetric", "main", main)
    check_floating("thomas_algorithm_symmetric", "rhs", rhs)
    x = output_array("thomas_algorithm_symmetric", "out", out, n)

    for i in range(1, n):
        mc = subdiagonal[i - 1] / main[i - 1]
        main[i] -= mc * subdiagonal[i - 1]
        rhs[i] -= mc * rhs[i - 1]

    x[n - 1] = rhs[n - 1] / main[n - 1]
    for i in range(n - 2, -1, -1):
        x[i] = (rhs[i] - subdiagonal[i] * x[i + 1]) / main[i]
    return x
