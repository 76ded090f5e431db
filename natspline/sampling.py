from numpy import ndarray, arange, argsort, asarray, clip, floor, float32, searchsorted
from warnings import warn
from natspline.dimensions import InvalidLengthError, SplineDimensions, check_floating


allocation_methods = ("round", "largest_remainder")


def evaluate_cubic(
    a: float, b: float, c: float, d: float, out: ndarray, start: float, step: float
):
    t = start + arange(out.size, dtype=float32) * float32(step)
    out[:] = a + b * t + c * (t * t) + d * (t * t * t)


def sample_counts(xs: ndarray, m: int, allocation: str = "round") -> ndarray:
    """
    Divides ``m`` samples between the intervals of the spline in proportion
    to the width of each interval.

    :param xs: \
        The knot positions as a 1D ``numpy.ndarray``.

    :param m: \
        The total number of samples to be divided between the intervals.

    :param allocation: \
        With ``"round"``, the share of each interval is rounded (half-up)
        independently, so the counts may not sum to exactly ``m``. With
        ``"largest_remainder"``, each share is rounded down and any remaining
        samples go to the intervals with the largest fractional parts, so
        the counts always sum to ``m``.

    :return: \
        The number of samples assigned to each interval as a 1D ``numpy.ndarray``
        of integers.
    """
    if allocation not in allocation_methods:
        raise ValueError(
            f"""\n
            [ sample_counts error ]
            >> The 'allocation' argument must be one of {allocation_methods},
            >> but instead was '{allocation}'.
            """
        )
    SplineDimensions(len(xs), caller="sample_counts")
    if m < 0:
        raise ValueError(
            f"""\n
            [ sample_counts error ]
            >> The number of samples 'm' must not be negative,
            >> but instead was {m}.
            """
        )
    xs = asarray(xs, dtype=float32)
    quotas = m * ((xs[1:] - xs[:-1]) / (xs[-1] - xs[0]))

    if allocation == "round":
        return floor(quotas + 0.5).astype(int)

    counts = floor(quotas).astype(int)
    shortfall = max(m - counts.sum(), 0)
    # stable sort so that ties go to the earlier interval
    order = argsort(counts - quotas, kind="stable")
    counts[order[:shortfall]] += 1
    return counts


def plot_coeffs_into(
    buffer: ndarray,
    coefficients: ndarray,
    xs: ndarray,
    allocation: str = "round",
    show_warnings: bool = True,
) -> int:
    """
    Evaluates a fitted spline at evenly spaced points spanning the knots,
    writing the results into ``buffer``.

    The samples are shared between the intervals in proportion to their
    widths (see ``sample_counts``). Any samples which would fall beyond
    the end of ``buffer`` are dropped. With the default ``"round"`` allocation
    some trailing elements of ``buffer`` may not be written, and keep
    whatever value they held before the call.

    :param buffer: \
        A 1D ``numpy.ndarray`` which will be overwritten with the spline values.

    :param coefficients: \
        The spline coefficients as a 2D ``numpy.ndarray`` of shape ``(xs.size - 1, 4)``,
        as produced by ``splinterpol``.

    :param xs: \
        The knot positions used to fit the coefficients.

    :param allocation: \
        The method used to divide samples between intervals, either ``"round"``
        or ``"largest_remainder"``.

    :param show_warnings: \
        Whether to warn when the samples do not exactly fill ``buffer``.

    :return: \
        The number of elements of ``buffer`` which were written.
    """
    dims = SplineDimensions(len(xs), caller="plot_coeffs_into")
    dims.check_coefficients("plot_coeffs_into", coefficients)
    if buffer.ndim != 1:
        raise InvalidLengthError(
            f"""\n
            [ plot_coeffs_into error ]
            >> The 'buffer' argument must be 1D, but instead has
            >> shape {buffer.shape}.
            """
        )
    check_floating("plot_coeffs_into", "buffer", buffer)

    m = buffer.size
    counts = sample_counts(xs, m, allocation=allocation)
    if m == 0:
        return 0

    xs = asarray(xs, dtype=float32)
    step = (xs[-1] - xs[0]) / m
    cursor = 0
    for i, count in enumerate(counts):
        end = min(cursor + count, m)
        a, b, c, d = coefficients[i]
        evaluate_cubic(a, b, c, d, buffer[cursor:end], start=0.0, step=step)
        cursor = end

    requested = counts.sum()
    if show_warnings and requested != m:
        if requested > m:
            problem = f">> {requested - m} samples were dropped from the final interval(s)"
        else:
            problem = f">> the final {m - cursor} elements were left unwritten"
        warn(
            f"""\n
            [ plot_coeffs_into warning ]
            >> The samples assigned to each interval sum to {requested}
            >> rather than the buffer size of {m}, so
            {problem}.
            """
        )
    return cursor


def evaluate_coefficients(
    x: ndarray, xs: ndarray, coefficients: ndarray, derivative: int = 0
) -> ndarray:
    """
    Evaluates a fitted spline, or one of its derivatives, at the given points.
    Points outside the range of the knots are extrapolated using the cubic
    of the nearest interval.

    :param x: \
        The points at which to evaluate the spline.

    :param xs: \
        The knot positions used to fit the coefficients.

    :param coefficients: \
        The spline coefficients as a 2D ``numpy.ndarray`` of shape ``(xs.size - 1, 4)``.

    :param derivative: \
        The order of derivative to evaluate, between 0 and 3.
    """
    dims = SplineDimensions(len(xs), caller="evaluate_coefficients")
    dims.check_coefficients("evaluate_coefficients", coefficients)
    xs = asarray(xs, dtype=float32)
    x = asarray(x, dtype=float32)

    inds = clip(searchsorted(xs, x, side="right") - 1, 0, dims.n_intervals - 1)
    t = x - xs[inds]
    a, b, c, d = coefficients[inds].T
    if derivative == 0:
        return a + t * (b + t * (c + t * d))
    elif derivative == 1:
        return b + t * (2 * c + 3 * d * t)
    elif derivative == 2:
        return 2 * c + 6 * d * t
    elif derivative == 3:
        return 6 * d
    else:
        raise ValueError(
            f"""\n
            [ evaluate_coefficients error ]
            >> The 'derivative' argument must be 0, 1, 2 or 3,
            >> but instead was {derivative}.
            """
        )
