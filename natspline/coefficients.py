from numpy import ndarray, asarray, zeros, float32
from natspline.dimensions import SplineDimensions, check_floating, check_knot_order, output_array
from natspline.system import build_system, interval_widths
from natspline.thomas import thomas_algorithm_symmetric


def calc_b(xs: ndarray, ys: ndarray, c: ndarray, out: ndarray = None) -> ndarray:
    """
    Calculates the linear coefficient of each interval of the spline from
    the second-derivative coefficients ``c``.
    """
    dims = SplineDimensions(len(xs), caller="calc_b")
    dims.check_values("calc_b", ys)
    dims.check_second_derivatives("calc_b", c)
    out = output_array("calc_b", "out", out, dims.n_intervals)
    h = interval_widths(xs)
    ys = asarray(ys, dtype=float32)
    c = asarray(c, dtype=float32)
    out[:] = (ys[1:] - ys[:-1]) / h - h * (2 * c[:-1] + c[1:]) / 3
    return out


def calc_d(xs: ndarray, c: ndarray, out: ndarray = None) -> ndarray:
    dims = SplineDimensions(len(xs), caller="calc_d")
    dims.check_second_derivatives("calc_d", c)
    out = output_array("calc_d", "out", out, dims.n_intervals)
    h = interval_widths(xs)
    c = asarray(c, dtype=float32)
    out[:] = (c[1:] - c[:-1]) / (3 * h)
    return out


def second_derivatives(xs: ndarray, ys: ndarray, out: ndarray = None) -> ndarray:
    """
    Solves the spline system for the ``c`` coefficients at every knot. The
    first and last values are fixed at zero by the natural boundary condition.

    :param xs: \
        The knot positions as a 1D ``numpy.ndarray``.

    :param ys: \
        The values at the knot positions as a 1D ``numpy.ndarray``.

    :param out: \
        An optional array of length ``xs.size`` into which the result is written.
    """
    dims = SplineDimensions(len(xs), caller="second_derivatives")
    dims.check_values("second_derivatives", ys)
    c = output_array("second_derivatives", "out", out, dims.n_knots)
    system = build_system(xs, ys)
    c[0] = 0.0
    c[-1] = 0.0
    thomas_algorithm_symmetric(
        system.subdiagonal, system.diagonal, system.rhs, out=c[1:-1]
    )
    return c


def assemble_coefficients(
    xs: ndarray, ys: ndarray, c: ndarray, out: ndarray = None
) -> ndarray:
    """
    Combines the knot values and second-derivative coefficients into the
    full set of cubic coefficients.

    :return: \
        The coefficients as a 2D ``numpy.ndarray`` of shape ``(xs.size - 1, 4)``,
        where row ``i`` holds ``(a, b, c, d)`` for the polynomial
        ``a + b*t + c*t**2 + d*t**3`` with ``t = x - xs[i]``.
    """
    dims = SplineDimensions(len(xs), caller="assemble_coefficients")
    dims.check_values("assemble_coefficients", ys)
    dims.check_second_derivatives("assemble_coefficients", c)
    if out is None:
        out = zeros([dims.n_intervals, 4], dtype=float32)
    else:
        dims.check_coefficients("assemble_coefficients", out, name="out")
        check_floating("assemble_coefficients", "out", out)

    ys = asarray(ys, dtype=float32)
    c = asarray(c, dtype=float32)
    b = calc_b(xs, ys, c)
    d = calc_d(xs, c)
    out[:, 0] = ys[:-1]
    out[:, 1] = b
    out[:, 2] = c[:-1]
    out[:, 3] = d
    return out


def splinterpol(xs: ndarray, ys: ndarray, coefficients: ndarray) -> ndarray:
    """
    Fits a natural cubic spline through the points ``(xs, ys)`` and writes the
    coefficients of each interval into ``coefficients``.

    All inputs are validated before anything is written, so ``coefficients`` is
    left untouched if an error is raised.

    :param xs: \
        The knot positions as a strictly increasing 1D ``numpy.ndarray``
        containing at least 6 values.

    :param ys: \
        The values at the knot positions as a 1D ``numpy.ndarray``.

    :param coefficients: \
        A 2D ``numpy.ndarray`` of shape ``(xs.size - 1, 4)`` which will be
        overwritten with the spline coefficients.

    :return: \
        The ``coefficients`` array.
    """
    dims = SplineDimensions(len(xs), caller="splinterpol")
    dims.check_values("splinterpol", ys)
    dims.check_coefficients("splinterpol", coefficients)
    check_floating("splinterpol", "coefficients", coefficients)
    xs = asarray(xs, dtype=float32)
    ys = asarray(ys, dtype=float32)
    check_knot_order("splinterpol", xs)

    c = second_derivatives(xs, ys)
    return assemble_coefficients(xs, ys, c, out=coefficients)


def fit_coefficients(xs: ndarray, ys: ndarray) -> ndarray:
    coefficients = zeros([max(len(xs) - 1, 0), 4], dtype=float32)
    return splinterpol(xs, ys, coefficients)
