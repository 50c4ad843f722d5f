"""Shape-preserving derivative estimation (SLATEC DPCHIM)."""

import warnings
from typing import Sequence, Tuple, Union

import torch
from torch import Tensor

from ._invalid_input_error import InvalidInputError
from ._knot_error import KnotError
from ._non_finite_value_warning import NonFiniteValueWarning
from ._sign_comparison import SignComparison, sign_comparison


def pchip_slopes(
    x: Union[Tensor, Sequence[float]],
    y: Union[Tensor, Sequence[float]],
) -> Tensor:
    """
    Compute shape-preserving slopes dy/dx at each data point.

    Parameters
    ----------
    x : Tensor or sequence of float
        Knot positions, shape (n_points,). Must be strictly increasing.
    y : Tensor or sequence of float
        Values at knots, shape (n_points, *value_shape).

    Returns
    -------
    slopes : Tensor
        Derivatives at the knots, same shape as ``y``.

    Raises
    ------
    InvalidInputError
        If ``x`` is not one-dimensional or ``x`` and ``y`` differ in length.
    KnotError
        If there are fewer than 2 points or ``x`` is not strictly increasing.

    Notes
    -----
    Interior slopes use the Brodlie modification of the Butland formula, a
    weighted harmonic mean of the flanking secants:

    .. math::

        d_i = \\frac{\\min(|\\delta_{i-1}|, |\\delta_i|)}
                    {w_1 \\delta_{i-1} / \\delta_{max} + w_2 \\delta_i / \\delta_{max}}

    with :math:`w_1 = (h_{sum} + h_{i-1}) / 3 h_{sum}` and
    :math:`w_2 = (h_{sum} + h_i) / 3 h_{sum}`. The slope is zero wherever the
    secants do not share a strict sign, so local extrema and flat runs are
    kept. Endpoint slopes use a non-centered three-point formula, zeroed when
    it disagrees in sign with the adjacent secant and limited to three times
    that secant when the data switch monotonicity.

    References
    ----------
    Fritsch, F. N. and Butland, J. (1984). "A Method for Constructing Local
    Monotone Piecewise Cubic Interpolants". SIAM Journal on Scientific and
    Statistical Computing. 5 (2): 300-304.
    """
    x, y = _as_knots(x, y, stacklevel=3)

    return _estimate_slopes(x, y)


def _estimate_slopes(x: Tensor, y: Tensor) -> Tensor:
    """Slopes for already validated knots."""
    n = x.shape[0]

    # Interval widths and secants, broadcast over value dimensions
    h = (x[1:] - x[:-1]).view(-1, *([1] * (y.dim() - 1)))
    delta = (y[1:] - y[:-1]) / h

    if n == 2:
        return torch.cat([delta, delta])

    d_first = _edge_slope(h[0], h[1], delta[0], delta[1])
    d_last = _edge_slope(h[-1], h[-2], delta[-1], delta[-2])

    # Interior points: knot i sits between intervals i-1 and i
    h1 = h[:-1]
    h2 = h[1:]
    del1 = delta[:-1]
    del2 = delta[1:]

    hsum = h1 + h2
    hsumt3 = hsum * 3
    w1 = (hsum + h1) / hsumt3
    w2 = (hsum + h2) / hsumt3

    dmax = torch.maximum(torch.abs(del1), torch.abs(del2))
    dmin = torch.minimum(torch.abs(del1), torch.abs(del2))

    monotone = sign_comparison(del1, del2) == SignComparison.SAME

    # Avoid division by zero in the discarded branch (keeps gradients finite)
    with torch.no_grad():
        ones = torch.ones_like(dmax)
    dmax_safe = torch.where(monotone, dmax, ones)
    del1_safe = torch.where(monotone, del1, ones)
    del2_safe = torch.where(monotone, del2, ones)

    drat1 = del1_safe / dmax_safe
    drat2 = del2_safe / dmax_safe

    interior = torch.where(
        monotone,
        dmin / (w1 * drat1 + w2 * drat2),
        torch.zeros_like(dmin),
    )

    return torch.cat([d_first.unsqueeze(0), interior, d_last.unsqueeze(0)])


def _edge_slope(
    h_near: Tensor,
    h_far: Tensor,
    delta_near: Tensor,
    delta_far: Tensor,
) -> Tensor:
    """
    Compute the shape-preserving slope at an end point.

    Parameters
    ----------
    h_near : Tensor
        Width of the interval touching the end point
    h_far : Tensor
        Width of the next interval inwards
    delta_near : Tensor
        Secant of the interval touching the end point
    delta_far : Tensor
        Secant of the next interval inwards

    Returns
    -------
    d : Tensor
        End point slope
    """
    hsum = h_near + h_far
    w_near = (h_near + hsum) / hsum
    w_far = -h_near / hsum

    d = w_near * delta_near + w_far * delta_far

    flips = sign_comparison(d, delta_near) == SignComparison.OPPOSITE

    # Limiting is needed only where monotonicity switches
    switches = (
        sign_comparison(delta_near, delta_far) == SignComparison.OPPOSITE
    )
    dmax = 3 * delta_near
    too_large = switches & (torch.abs(d) > torch.abs(dmax))

    d = torch.where(too_large, dmax, d)

    return torch.where(flips, torch.zeros_like(d), d)


def _as_knots(
    x: Union[Tensor, Sequence[float]],
    y: Union[Tensor, Sequence[float]],
    stacklevel: int,
) -> Tuple[Tensor, Tensor]:
    """Convert and validate data points.

    ``stacklevel`` is passed to :func:`warnings.warn` so that the warning
    points at the caller of the public entry point.
    """
    x = _as_float_tensor(x)
    y = _as_float_tensor(y)

    if x.dim() != 1:
        raise InvalidInputError(
            f"x must be one-dimensional, got shape {tuple(x.shape)}"
        )
    if y.dim() == 0 or y.shape[0] != x.shape[0]:
        raise InvalidInputError(
            f"x and y lengths must match, got {x.shape[0]} and "
            f"{y.shape[0] if y.dim() > 0 else 0}"
        )

    n = x.shape[0]
    if n < 2:
        raise KnotError(f"Need at least 2 points, got {n}")

    # NaN steps compare false, so they are rejected here as well
    increasing = x[1:] > x[:-1]
    if not torch.all(increasing):
        index = int(torch.nonzero(~increasing)[0]) + 1
        raise KnotError(
            f"Knots must be strictly increasing, x[{index}] = "
            f"{x[index].item()} follows x[{index - 1}] = "
            f"{x[index - 1].item()}"
        )

    if not torch.all(torch.isfinite(y)):
        warnings.warn(
            "y contains NaN or infinite values; slopes and interpolated "
            "values near them will not be finite.",
            NonFiniteValueWarning,
            stacklevel=stacklevel,
        )

    dtype = torch.promote_types(x.dtype, y.dtype)

    return x.to(dtype), y.to(dtype)


def _as_float_tensor(values: Union[Tensor, Sequence[float]]) -> Tensor:
    if isinstance(values, Tensor):
        if torch.is_floating_point(values):
            return values
        return values.to(torch.float64)
    return torch.as_tensor(values, dtype=torch.float64)
