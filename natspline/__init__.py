from natspline.dimensions import SplineDimensions, InvalidLengthError, KnotOrderError
from natspline.system import TridiagonalSystem, build_system
from natspline.system import calc_diagonal, calc_subdiagonal, calc_rhs
from natspline.thomas import thomas_algorithm, thomas_algorithm_symmetric
from natspline.coefficients import splinterpol, fit_coefficients, second_derivatives
from natspline.coefficients import assemble_coefficients, calc_b, calc_d
from natspline.sampling import plot_coeffs_into, sample_counts, evaluate_coefficients
from natspline.spline import NaturalCubicSpline

__all__ = [
    "SplineDimensions",
    "InvalidLengthError",
    "KnotOrderError",
    "TridiagonalSystem",
    "build_system",
    "calc_diagonal",
    "calc_subdiagonal",
    "calc_rhs",
    "thomas_algorithm",
    "thomas_algorithm_symmetric",
    "splinterpol",
    "fit_coefficients",
    "second_derivatives",
    "assemble_coefficients",
    "calc_b",
    "calc_d",
    "plot_coeffs_into",
    "sample_counts",
    "evaluate_coefficients",
    "NaturalCubicSpline",
]
