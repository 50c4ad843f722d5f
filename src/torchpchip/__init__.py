"""torchpchip: shape-preserving piecewise cubic interpolation for PyTorch.

PCHIP (Piecewise Cubic Hermite Interpolating Polynomial) interpolation
assigns each data point a slope that keeps the interpolant monotone wherever
the data are monotone, then evaluates the resulting cubic Hermite spline.

Convenience Functions
---------------------
pchip
    Create a PCHIP interpolator from data (fit + callable).
interpolate
    Fit and evaluate in one call.

PCHIP Splines
-------------
pchip_fit
    Fit a PCHIP spline to data points.
pchip_evaluate
    Evaluate a PCHIP spline at query points.
pchip_derivative_evaluate
    Evaluate derivatives of a PCHIP spline.
pchip_integral
    Compute definite integral of a PCHIP spline.

Building Blocks
---------------
pchip_slopes
    Shape-preserving slopes at the data points.
piecewise_cubic_evaluate
    Evaluate a cubic Hermite interpolant with given slopes.
sign_comparison
    Relative sign of two numbers.
lower_bound
    First position in a sorted tensor not less than a value.

Data Types
----------
PCHIPSpline
    Fitted PCHIP interpolant.
SignComparison
    Result of ``sign_comparison``.

Exceptions
----------
SplineError
    Base exception for spline operations.
InvalidInputError
    Malformed input data.
KnotError
    Invalid knots.

Warnings
--------
NonFiniteValueWarning
    Data values contain NaN or infinity.
"""

from ._invalid_input_error import InvalidInputError
from ._knot_error import KnotError
from ._lower_bound import lower_bound
from ._non_finite_value_warning import NonFiniteValueWarning
from ._pchip import PCHIPSpline, interpolate, pchip
from ._pchip_derivative import pchip_derivative_evaluate
from ._pchip_evaluate import pchip_evaluate
from ._pchip_fit import pchip_fit
from ._pchip_integral import pchip_integral
from ._pchip_slopes import pchip_slopes
from ._piecewise_cubic_evaluate import piecewise_cubic_evaluate
from ._sign_comparison import SignComparison, sign_comparison
from ._spline_error import SplineError

__all__ = [
    "InvalidInputError",
    "KnotError",
    "NonFiniteValueWarning",
    "PCHIPSpline",
    "SignComparison",
    "SplineError",
    "interpolate",
    "lower_bound",
    "pchip",
    "pchip_derivative_evaluate",
    "pchip_evaluate",
    "pchip_fit",
    "pchip_integral",
    "pchip_slopes",
    "piecewise_cubic_evaluate",
    "sign_comparison",
]

__version__ = "0.1.0"
