"""PCHIP spline evaluation."""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Sequence, Union

from torch import Tensor

from ._piecewise_cubic_evaluate import piecewise_cubic_evaluate

if TYPE_CHECKING:
    from ._pchip import PCHIPSpline


def pchip_evaluate(
    spline: PCHIPSpline,
    t: Union[float, Tensor, Sequence[float]],
) -> Union[float, Tensor, List]:
    """
    Evaluate a PCHIP spline at query points.

    Parameters
    ----------
    spline : PCHIPSpline
        Fitted PCHIP spline from pchip_fit
    t : float, Tensor or sequence of float
        Query points, in any order

    Returns
    -------
    y : float, Tensor or list
        Interpolated values. A number gives a float, a list or tuple gives a
        list, and a tensor gives a tensor of shape (*query_shape, *y_dim)
        where y_dim is the dimensionality of the original y values.
    """
    return piecewise_cubic_evaluate(spline.knots, spline.y, spline.slopes, t)
