"""
Kind-specific control paths for `mean`.

- ``ElementKind.FLOATING``: accumulate and divide in the receiver's dtype.
- ``ElementKind.INTEGER``: accumulate in ``float64`` so the mean is exact
  rather than truncated.
"""

from typing import Any, Optional

from ..._tensor_builder import tensor_control_path_manager
from .....domain._tensor import ITensor
from .....domain.types._element_kind import ElementKind

from ._base import TensorMixinReduction as TMR
from ._reducer import MEAN_FLOATING, MEAN_INTEGER, reduce


@tensor_control_path_manager(TMR, TMR.mean, ElementKind.FLOATING)
def tensor_mean_floating(self: ITensor, dim: Optional[int] = None) -> Any:
    return reduce(self, MEAN_FLOATING, dim)


@tensor_control_path_manager(TMR, TMR.mean, ElementKind.INTEGER)
def tensor_mean_integer(self: ITensor, dim: Optional[int] = None) -> Any:
    return reduce(self, MEAN_INTEGER, dim)


__all__ = [
    tensor_mean_floating.__name__,
    tensor_mean_integer.__name__,
]
