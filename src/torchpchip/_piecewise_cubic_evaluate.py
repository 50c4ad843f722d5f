"""Piecewise cubic Hermite evaluation with given slopes."""

from numbers import Real
from typing import List, Optional, Sequence, Union

import torch
from torch import Tensor


def piecewise_cubic_evaluate(
    x: Union[Tensor, Sequence[float]],
    y: Union[Tensor, Sequence[float]],
    slopes: Union[Tensor, Sequence[float]],
    t: Union[float, Tensor, Sequence[float]],
) -> Union[float, Tensor, List]:
    """
    Evaluate a piecewise cubic Hermite interpolant at query points.

    Parameters
    ----------
    x : Tensor or sequence of float
        Knot positions, shape (n_points,), strictly increasing.
    y : Tensor or sequence of float
        Values at knots, shape (n_points, *value_shape).
    slopes : Tensor or sequence of float
        Derivatives at knots, same shape as ``y``.
    t : float, Tensor or sequence of float
        Query points in any order. Points outside ``[x[0], x[-1]]`` are
        extrapolated with the nearest end polynomial.

    Returns
    -------
    values : float, Tensor or list
        Interpolated values in the form of ``t``: a float for a number, a
        list for a list or tuple, and a tensor of shape
        (*query_shape, *value_shape) for a tensor.

    Notes
    -----
    On interval ``[x_i, x_{i+1})`` with ``h = x_{i+1} - x_i`` and secant
    ``s = (y_{i+1} - y_i) / h`` the interpolant is evaluated in Horner form:

    .. math::

        p(v) = y_i + (v - x_i)(m_i + (v - x_i)(c + d (v - x_{i+1})))

    where :math:`c = (s - m_i) / h` and
    :math:`d = (m_i + m_{i+1} - 2 s) / h^2`.

    A query equal to an interior knot belongs to the interval on its right
    only. No validation is done here; inputs are expected to satisfy the
    preconditions of :func:`pchip_slopes`.
    """
    return evaluate_hermite(x, y, slopes, t, order=0)


def evaluate_hermite(
    x: Union[Tensor, Sequence[float]],
    y: Union[Tensor, Sequence[float]],
    slopes: Union[Tensor, Sequence[float]],
    t: Union[float, Tensor, Sequence[float]],
    order: int = 0,
) -> Union[float, Tensor, List]:
    """
    Evaluate a cubic Hermite interpolant or one of its derivatives.

    Parameters
    ----------
    x : Tensor or sequence of float
        Knot positions, shape (n_points,), strictly increasing.
    y : Tensor or sequence of float
        Values at knots, shape (n_points, *value_shape).
    slopes : Tensor or sequence of float
        Derivatives at knots, same shape as ``y``.
    t : float, Tensor or sequence of float
        Query points, in any order.
    order : int
        Derivative order, 0 for the interpolant itself, at most 3.

    Returns
    -------
    values : float, Tensor or list
        Values in the form of ``t``, as for
        :func:`piecewise_cubic_evaluate`.
    """
    x = _as_tensor(x)
    y = _as_tensor(y, like=x)
    slopes = _as_tensor(slopes, like=y)

    is_number = isinstance(t, Real)
    is_list = isinstance(t, (list, tuple))

    t = _as_tensor(t, like=x)

    # Check if t is scalar (0-d tensor)
    is_scalar = t.dim() == 0
    if is_scalar:
        t = t.unsqueeze(0)

    query_shape = t.shape
    value_shape = y.shape[1:]

    values = _evaluate_flat(x, y, slopes, t.flatten(), order)
    values = values.view(*query_shape, *value_shape)

    if is_scalar:
        values = values.squeeze(0)

    if is_number and not value_shape:
        return values.item()
    if is_list:
        return values.tolist()

    return values


def _evaluate_flat(
    x: Tensor,
    y: Tensor,
    m: Tensor,
    t: Tensor,
    order: int,
) -> Tensor:
    """Evaluate flat queries, shape (n_queries,) -> (n_queries, *value_shape)."""
    n_segments = x.shape[0] - 1
    value_dims = [1] * (y.dim() - 1)

    # Find segment indices using searchsorted. An interior knot falls in the
    # segment on its right; clamping sends out-of-range queries to the end
    # segments and closes the last segment on the right.
    knots = x if x.dtype == t.dtype else x.to(t.dtype)
    segment_idx = torch.searchsorted(
        knots.contiguous(), t.detach().contiguous(), right=True
    ) - 1
    segment_idx = torch.clamp(segment_idx, 0, n_segments - 1)

    # Per-segment coefficients
    dx = (x[1:] - x[:-1]).view(-1, *value_dims)
    dy = y[1:] - y[:-1]
    c = (dy / dx - m[:-1]) / dx
    d = (m[:-1] + m[1:] - 2 * dy / dx) / (dx * dx)

    # Gather per query
    x_i = x[segment_idx].view(-1, *value_dims)
    x_ip1 = x[segment_idx + 1].view(-1, *value_dims)
    y_i = y[segment_idx]
    m_i = m[segment_idx]
    c_i = c[segment_idx]
    d_i = d[segment_idx]

    v = t.view(-1, *value_dims)
    s = v - x_i

    if order == 0:
        return y_i + s * (m_i + s * (c_i + d_i * (v - x_ip1)))

    # Monomial form: y + m*s + c2*s^2 + d*s^3
    c2 = c_i - d_i * dx[segment_idx]
    if order == 1:
        return m_i + s * (2 * c2 + 3 * d_i * s)
    if order == 2:
        return 2 * c2 + 6 * d_i * s
    return (6 * d_i).expand_as(s * d_i)


def _as_tensor(values, like: Optional[Tensor] = None) -> Tensor:
    if isinstance(values, Tensor):
        if like is not None and values.dtype != like.dtype:
            return values.to(torch.promote_types(values.dtype, like.dtype))
        if not torch.is_floating_point(values):
            return values.to(torch.float64)
        return values
    if like is not None:
        return torch.as_tensor(values, dtype=like.dtype, device=like.device)
    return torch.as_tensor(values, dtype=torch.float64)
