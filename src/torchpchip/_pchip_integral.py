"""PCHIP spline definite integral computation."""

from __future__ import annotations

from typing import TYPE_CHECKING, Union

import torch
from torch import Tensor

if TYPE_CHECKING:
    from ._pchip import PCHIPSpline


def pchip_integral(
    spline: PCHIPSpline,
    a: Union[float, Tensor],
    b: Union[float, Tensor],
) -> Tensor:
    """
    Compute the definite integral of a PCHIP spline from a to b.

    Parameters
    ----------
    spline : PCHIPSpline
        Input PCHIP spline
    a : float or Tensor
        Lower bound of integration
    b : float or Tensor
        Upper bound of integration

    Returns
    -------
    integral : Tensor
        Definite integral value(s), shape (*y_dim)

    Notes
    -----
    For the cubic on segment [x_i, x_{i+1}] in monomial form:
        y = y_i + m_i*dx + c*dx^2 + d*dx^3

    The antiderivative is:
        F(dx) = y_i*dx + (m_i/2)*dx^2 + (c/3)*dx^3 + (d/4)*dx^4

    Bounds beyond the first or last knot integrate the end polynomials,
    matching how ``pchip_evaluate`` extrapolates.
    """
    knots = spline.knots
    y = spline.y
    m = spline.slopes
    n_segments = len(knots) - 1

    # Convert bounds to tensors if necessary
    if not isinstance(a, Tensor):
        a = torch.tensor(a, dtype=knots.dtype, device=knots.device)
    if not isinstance(b, Tensor):
        b = torch.tensor(b, dtype=knots.dtype, device=knots.device)

    value_shape = y.shape[1:]

    total = torch.zeros(value_shape, dtype=y.dtype, device=y.device)

    # Handle a == b case
    if a == b:
        return total

    # Handle a > b case
    sign = 1.0
    if a > b:
        a, b = b, a
        sign = -1.0

    for i in range(n_segments):
        seg_start = knots[i]
        seg_end = knots[i + 1]

        # End segments are unbounded outwards
        lower = a if i == 0 else torch.maximum(a, seg_start)
        upper = b if i == n_segments - 1 else torch.minimum(b, seg_end)

        if upper <= lower:
            continue

        h = seg_end - seg_start
        secant = (y[i + 1] - y[i]) / h
        c = (secant - m[i]) / h
        d = (m[i] + m[i + 1] - 2 * secant) / (h * h)
        c2 = c - d * h

        def antiderivative(dx: Tensor) -> Tensor:
            """Evaluate antiderivative F(dx) on segment i."""
            return dx * (y[i] + dx * (m[i] / 2 + dx * (c2 / 3 + dx * d / 4)))

        total = total + antiderivative(upper - seg_start) - antiderivative(
            lower - seg_start
        )

    return sign * total
