from typing import Union

import torch
from torch import Tensor


def lower_bound(sorted_sequence: Tensor, value: Union[float, Tensor]) -> int:
    """
    Find the first position in ``sorted_sequence`` not less than ``value``.

    Parameters
    ----------
    sorted_sequence : Tensor
        One-dimensional tensor sorted in ascending order.
    value : float or Tensor
        Scalar to locate.

    Returns
    -------
    index : int
        Position at which ``value`` could be inserted while keeping the
        sequence sorted, before any equal elements. Ranges over
        ``[0, len(sorted_sequence)]``.
    """
    if sorted_sequence.numel() == 0:
        return 0

    value = torch.as_tensor(
        value,
        dtype=sorted_sequence.dtype,
        device=sorted_sequence.device,
    ).reshape(1)

    return int(torch.searchsorted(sorted_sequence, value, right=False)[0])
