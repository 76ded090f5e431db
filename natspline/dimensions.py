from dataclasses import dataclass, field
from numpy import ndarray, asarray, diff, floating, isfinite, issubdtype, zeros, float32


MINIMUM_KNOTS = 6


class InvalidLengthError(ValueError):
    pass


class KnotOrderError(ValueError):
    pass


def check_length(caller: str, name: str, array: ndarray, expected: int):
    if len(array) != expected:
        raise InvalidLengthError(
            f"""\n
            [ {caller} error ]
            >> The '{name}' argument must have length {expected},
            >> but instead has length {len(array)}.
            """
        )


def check_floating(caller: str, name: str, array: ndarray):
    # integer arrays would silently truncate every value written into them
    dtype = asarray(array).dtype
    if not issubdtype(dtype, floating):
        raise ValueError(
            f"""\n
            [ {caller} error ]
            >> The '{name}' argument must have a floating-point dtype,
            >> but instead has dtype '{dtype}'.
            """
        )


def output_array(caller: str, name: str, out: ndarray, expected: int) -> ndarray:
    # allocate the output when the caller hasn't provided a buffer
    if out is None:
        return zeros(expected, dtype=float32)
    check_length(caller, name, out, expected)
    check_floating(caller, name, out)
    return out


def check_knot_order(caller: str, xs: ndarray):
    if not isfinite(xs).all():
        raise KnotOrderError(
            f"""\n
            [ {caller} error ]
            >> The knot positions must all be finite.
            """
        )
    widths = diff(xs)
    if (widths <= 0).any():
        raise KnotOrderError(
            f"""\n
            [ {caller} error ]
            >> The knot positions must be strictly increasing, but
            >> {(widths <= 0).sum()} of the {widths.size} intervals have
            >> a width which is zero or negative.
            """
        )


@dataclass(frozen=True)
class SplineDimensions:
    """
    The sizes of every array involved in fitting a natural cubic spline
    through ``n_knots`` points.

    :param n_knots: \
        The number of knots (and sample values) of the spline. Must be at
        least 6, so that the interior system has at least 4 unknowns.
    """

    n_knots: int
    caller: str = field(default="SplineDimensions", compare=False, repr=False)

    def __post_init__(self):
        if self.n_knots < MINIMUM_KNOTS:
            raise InvalidLengthError(
                f"""\n
                [ {self.caller} error ]
                >> At least {MINIMUM_KNOTS} knots are required to fit the
                >> spline, but only {self.n_knots} were given.
                """
            )

    @property
    def n_intervals(self) -> int:
        return self.n_knots - 1

    @property
    def n_interior(self) -> int:
        return self.n_knots - 2

    @property
    def n_subdiagonal(self) -> int:
        return self.n_knots - 3

    def check_values(self, caller: str, ys: ndarray):
        check_length(caller, "ys", ys, self.n_knots)

    def check_second_derivatives(self, caller: str, c: ndarray):
        check_length(caller, "c", c, self.n_knots)

    def check_coefficients(self, caller: str, coefficients: ndarray, name="coefficients"):
        check_length(caller, name, coefficients, self.n_intervals)
        if coefficients.ndim != 2 or coefficients.shape[1] != 4:
            raise InvalidLengthError(
                f"""\n
                [ {caller} error ]
                >> The '{name}' argument must have shape ({self.n_intervals}, 4),
                >> but instead has shape {coefficients.shape}.
                """
            )
