"""PCHIP spline derivative evaluation."""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Sequence, Union

from torch import Tensor

from ._piecewise_cubic_evaluate import evaluate_hermite

if TYPE_CHECKING:
    from ._pchip import PCHIPSpline


def pchip_derivative_evaluate(
    spline: PCHIPSpline,
    t: Union[float, Tensor, Sequence[float]],
    order: int = 1,
) -> Union[float, Tensor, List]:
    """
    Evaluate a derivative of a PCHIP spline at query points.

    Parameters
    ----------
    spline : PCHIPSpline
        Fitted PCHIP spline from pchip_fit
    t : float, Tensor or sequence of float
        Query points, in any order
    order : int
        Order of derivative (1, 2, or 3). Default is 1.

    Returns
    -------
    derivative : float, Tensor or list
        Derivative values, in the same form as ``pchip_evaluate`` returns.

    Raises
    ------
    ValueError
        If order is not 1, 2, or 3.

    Notes
    -----
    On each segment the interpolant is written in monomial form
    y = a + b*dx + c*dx^2 + d*dx^3 with dx = t - x_i, so that

    - First derivative: y' = b + 2c*dx + 3d*dx^2
    - Second derivative: y'' = 2c + 6d*dx
    - Third derivative: y''' = 6d

    The first derivative at a knot equals the slope computed there. Second
    and third derivatives are discontinuous at interior knots and take the
    value of the segment on the right.
    """
    if order < 1 or order > 3:
        raise ValueError(f"Derivative order must be 1, 2, or 3, got {order}")

    return evaluate_hermite(
        spline.knots,
        spline.y,
        spline.slopes,
        t,
        order=order,
    )
