from dataclasses import dataclass
from numpy import ndarray, asarray, float32
from natspline.dimensions import SplineDimensions, output_array


@dataclass
class TridiagonalSystem:
    """
    The symmetric tridiagonal system whose solution gives the second
    derivative of a natural cubic spline at the interior knots.

    The ``diagonal`` and ``rhs`` arrays are overwritten when the system is
    solved, so a ``TridiagonalSystem`` should only be solved once.
    """

    diagonal: ndarray
    subdiagonal: ndarray
    rhs: ndarray


def interval_widths(xs: ndarray) -> ndarray:
    xs = asarray(xs, dtype=float32)
    return xs[1:] - xs[:-1]


def calc_diagonal(xs: ndarray, out: ndarray = None) -> ndarray:
    """
    Calculates the main diagonal of the spline system, where element ``i``
    is equal to ``2 * (h[i] + h[i + 1])`` and ``h`` are the interval widths.

    :param xs: \
        The knot positions as a 1D ``numpy.ndarray``.

    :param out: \
        An optional array of length ``xs.size - 2`` into which the result
        is written.
    """
    dims = SplineDimensions(len(xs), caller="calc_diagonal")
    out = output_array("calc_diagonal", "out", out, dims.n_interior)
    h = interval_widths(xs)
    out[:] = 2 * (h[:-1] + h[1:])
    return out


def calc_subdiagonal(xs: ndarray, out: ndarray = None) -> ndarray:
    """
    Calculates the off-diagonal of the spline system. The system is symmetric,
    so the returned values serve as both the sub- and super-diagonal.
    """
    dims = SplineDimensions(len(xs), caller="calc_subdiagonal")
    out = output_array("calc_subdiagonal", "out", out, dims.n_subdiagonal)
    h = interval_widths(xs)
    out[:] = h[1:-1]
    return out


def calc_rhs(xs: ndarray, ys: ndarray, out: ndarray = None) -> ndarray:
    """
    Calculates the right-hand-side of the spline system, which is three
    times the difference between the slopes of neighbouring intervals.

    :param xs: \
        The knot positions as a 1D ``numpy.ndarray``.

    :param ys: \
        The values at the knot positions as a 1D ``numpy.ndarray``.

    :param out: \
        An optional array of length ``xs.size - 2`` into which the result
        is written.
    """
    dims = SplineDimensions(len(xs), caller="calc_rhs")
    dims.check_values("calc_rhs", ys)
    out = output_array("calc_rhs", "out", out, dims.n_interior)
    h = interval_widths(xs)
    ys = asarray(ys, dtype=float32)
    slopes = (ys[1:] - ys[:-1]) / h
    out[:] = 3 * (slopes[1:] - slopes[:-1])
    return out


def build_system(xs: ndarray, ys: ndarray) -> TridiagonalSystem:
    return TridiagonalSystem(
        diagonal=calc_diagonal(xs),
        subdiagonal=calc_subdiagonal(xs),
        rhs=calc_rhs(xs, ys),
    )
