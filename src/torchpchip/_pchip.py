"""PCHIP (Piecewise Cubic Hermite Interpolating Polynomial) spline."""

from typing import Callable, List, Sequence, Union

from tensordict.tensorclass import tensorclass
from torch import Tensor

from ._pchip_evaluate import pchip_evaluate
from ._pchip_fit import _fit


@tensorclass
class PCHIPSpline:
    """Piecewise Cubic Hermite Interpolating Polynomial.

    PCHIP interpolation preserves monotonicity and avoids overshoot. Slopes
    are computed once, at fitting time, by :func:`pchip_slopes`.

    Attributes
    ----------
    knots : Tensor
        Breakpoints, shape (n_knots,). Strictly increasing.
    y : Tensor
        Values at knots, shape (n_knots, *value_shape).
    slopes : Tensor
        First derivatives at knots, shape (n_knots, *value_shape).
    """

    knots: Tensor
    y: Tensor
    slopes: Tensor

    def evaluate(
        self,
        t: Union[float, Tensor, Sequence[float]],
    ) -> Union[float, Tensor, List]:
        """Evaluate the spline at ``t``, see :func:`pchip_evaluate`."""
        return pchip_evaluate(self, t)


def pchip(
    x: Union[Tensor, Sequence[float]],
    y: Union[Tensor, Sequence[float]],
) -> Callable:
    """Create a PCHIP interpolator from data.

    PCHIP (Piecewise Cubic Hermite Interpolating Polynomial) preserves
    monotonicity of the data and avoids overshoot. It passes through
    all data points.

    Parameters
    ----------
    x : Tensor or sequence of float
        Data x-coordinates. Must be strictly monotonically increasing.
    y : Tensor or sequence of float
        Data y-values, shape (n_points, *value_shape).

    Returns
    -------
    spline : Callable
        Function that evaluates the spline at given points.

    Examples
    --------
    >>> import torch
    >>> x = torch.linspace(0, 1, 10)
    >>> y = torch.sin(x * 2 * torch.pi)
    >>> f = pchip(x, y)
    >>> f(torch.tensor([0.5]))  # Evaluate at x=0.5
    """
    fitted = _fit(x, y, stacklevel=4)
    return lambda t: pchip_evaluate(fitted, t)


def interpolate(
    x: Union[Tensor, Sequence[float]],
    y: Union[Tensor, Sequence[float]],
    t: Union[float, Tensor, Sequence[float]],
) -> Union[float, Tensor, List]:
    """Fit a PCHIP spline to ``(x, y)`` and evaluate it at ``t``.

    Similar to Octave's ``interp1(x, y, t, "pchip")``, except that points
    outside ``[x[0], x[-1]]`` are extrapolated with the end polynomials.

    Examples
    --------
    >>> interpolate([1, 2, 3, 4, 5], [1, 7, 11, 14, 28], 4.2)  # ~15.4645
    """
    return pchip_evaluate(_fit(x, y, stacklevel=4), t)
