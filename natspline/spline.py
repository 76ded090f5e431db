from matplotlib import pyplot as plt
from numpy import ndarray, array, full, linspace, nan, float32
from natspline.coefficients import fit_coefficients
from natspline.dimensions import SplineDimensions, check_knot_order
from natspline.sampling import evaluate_coefficients, plot_coeffs_into


class NaturalCubicSpline:
    """
    A natural cubic spline interpolating a set of points, with the second
    derivative fixed at zero at the first and last knots.

    :param knots: \
        The knot positions as a strictly increasing 1D ``numpy.ndarray``
        containing at least 6 values.

    :param values: \
        The values of the interpolated function at the knot positions as
        a 1D ``numpy.ndarray``.
    """

    def __init__(self, knots: ndarray, values: ndarray):
        self.knots = array(knots, dtype=float32)
        self.values = array(values, dtype=float32)
        assert self.knots.ndim == 1
        assert self.values.ndim == 1

        self.dimensions = SplineDimensions(self.knots.size, caller="NaturalCubicSpline")
        self.dimensions.check_values("NaturalCubicSpline", self.values)
        check_knot_order("NaturalCubicSpline", self.knots)
        self.coefficients = fit_coefficients(self.knots, self.values)

    def __call__(self, x: ndarray) -> ndarray:
        return evaluate_coefficients(x, self.knots, self.coefficients)

    def derivative(self, x: ndarray, order: int = 1) -> ndarray:
        return evaluate_coefficients(x, self.knots, self.coefficients, derivative=order)

    def sample_into(
        self, buffer: ndarray, allocation: str = "round", show_warnings: bool = True
    ) -> int:
        """
        Evaluates the spline at evenly spaced points across the knot range,
        writing the results into ``buffer``. See ``natspline.plot_coeffs_into``
        for details.

        :return: \
            The number of elements of ``buffer`` which were written.
        """
        return plot_coeffs_into(
            buffer,
            self.coefficients,
            self.knots,
            allocation=allocation,
            show_warnings=show_warnings,
        )

    def sample(
        self, m: int, allocation: str = "round", show_warnings: bool = True
    ) -> ndarray:
        """
        Returns ``m`` evenly spaced samples of the spline. Any elements not
        written by the sampler are set to ``nan``.
        """
        buffer = full(m, nan, dtype=float32)
        self.sample_into(buffer, allocation=allocation, show_warnings=show_warnings)
        return buffer

    def plot(self, axis=None, resolution: int = 256, color: str = None):
        """
        Plot the spline and its knots.

        :param axis: \
            A `matplotlib` axis object on which the spline will be plotted.

        :param resolution: \
            The number of points at which the spline is evaluated.

        :param color: \
            A valid ``matplotlib`` color string which will be used to plot the spline.
        """
        if axis is None:
            fig = plt.figure()
            ax = fig.add_subplot(1, 1, 1)
        else:
            ax = axis

        col = "blue" if color is None else color
        x = linspace(self.knots[0], self.knots[-1], resolution, dtype=float32)
        ax.plot(x, self(x), color=col, lw=2, label="natural cubic spline")
        ax.plot(
            self.knots, self.values, "o", color=col, markerfacecolor="none", label="knots"
        )
        ax.grid()
        ax.legend()

        if axis is None:
            plt.show()

    def get_configuration(self) -> dict:
        return {"knots": self.knots, "values": self.values}

    @classmethod
    def from_configuration(cls, config: dict):
        return cls(knots=config["knots"], values=config["values"])

    def copy(self):
        """
        Build and return a separate copy of the spline with the same configuration.
        """
        return self.from_configuration(self.get_configuration())

    def __str__(self):
        return f"""\n
        \r[ NaturalCubicSpline object ]
        \r>>   number of knots: {self.dimensions.n_knots}
        \r>>        knot range: {self.knots[0]} -> {self.knots[-1]}
        \r>>       value range: {self.values.min()} -> {self.values.max()}
        """
