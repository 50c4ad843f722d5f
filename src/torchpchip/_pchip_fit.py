"""PCHIP fitting using the SLATEC DPCHIM slope estimate."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence, Union

from torch import Tensor

from ._pchip_slopes import _as_knots, _estimate_slopes

if TYPE_CHECKING:
    from ._pchip import PCHIPSpline


def pchip_fit(
    x: Union[Tensor, Sequence[float]],
    y: Union[Tensor, Sequence[float]],
) -> PCHIPSpline:
    """
    Fit a PCHIP spline to data points.

    Parameters
    ----------
    x : Tensor or sequence of float
        Knot positions, shape (n_points,). Must be strictly increasing.
    y : Tensor or sequence of float
        Values at knots, shape (n_points, *value_shape).

    Returns
    -------
    PCHIPSpline
        Fitted spline holding the knots, values and slopes.

    Raises
    ------
    InvalidInputError
        If x and y lengths differ.
    KnotError
        If x is not strictly increasing or has fewer than 2 points.
    """
    return _fit(x, y, stacklevel=4)


def _fit(
    x: Union[Tensor, Sequence[float]],
    y: Union[Tensor, Sequence[float]],
    stacklevel: int,
) -> PCHIPSpline:
    x, y = _as_knots(x, y, stacklevel=stacklevel)

    slopes = _estimate_slopes(x, y)

    from ._pchip import PCHIPSpline

    return PCHIPSpline(
        knots=x,
        y=y,
        slopes=slopes,
        batch_size=[],
    )
