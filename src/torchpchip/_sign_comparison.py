"""Relative sign classification of two numbers."""

from __future__ import annotations

import enum
from numbers import Real
from typing import Union

import torch
from torch import Tensor


class SignComparison(enum.IntEnum):
    """Relative sign of two numbers.

    Members
    -------
    OPPOSITE
        One number is strictly positive, the other strictly negative.
    ZERO
        At least one number is exactly zero.
    SAME
        Both numbers are strictly positive or both strictly negative.
    """

    OPPOSITE = -1
    ZERO = 0
    SAME = 1


def sign_comparison(
    a: Union[float, Tensor],
    b: Union[float, Tensor],
) -> Union[SignComparison, Tensor]:
    """
    Classify the relative sign of ``a`` and ``b``.

    Parameters
    ----------
    a : float or Tensor
        First number(s).
    b : float or Tensor
        Second number(s). Broadcast against ``a``.

    Returns
    -------
    comparison : SignComparison or Tensor
        A ``SignComparison`` member when both arguments are Python numbers,
        otherwise an int64 tensor holding ``SignComparison`` values.

    Notes
    -----
    Zero tests are exact. A NaN is treated as a number that is neither zero
    nor positive.
    """
    if isinstance(a, Real) and isinstance(b, Real):
        if a == 0 or b == 0:
            return SignComparison.ZERO
        if (a > 0) == (b > 0):
            return SignComparison.SAME
        return SignComparison.OPPOSITE

    if not isinstance(a, Tensor):
        a = torch.as_tensor(a, dtype=b.dtype, device=b.device)
    if not isinstance(b, Tensor):
        b = torch.as_tensor(b, dtype=a.dtype, device=a.device)

    same = (a > 0) == (b > 0)
    result = torch.where(
        same,
        torch.tensor(int(SignComparison.SAME), device=a.device),
        torch.tensor(int(SignComparison.OPPOSITE), device=a.device),
    )

    return torch.where(
        (a == 0) | (b == 0),
        torch.tensor(int(SignComparison.ZERO), device=a.device),
        result,
    )
