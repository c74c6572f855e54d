"""
Control paths for `sum`.

Summation is the same for every element kind: the accumulator keeps the
receiver's dtype.
"""

from typing import Any, Optional

from ..._tensor_builder import tensor_control_path_manager
from .....domain._tensor import ITensor
from .....domain.types._element_kind import ElementKind

from ._base import TensorMixinReduction as TMR
from ._reducer import SUM, reduce


def tensor_sum(self: ITensor, dim: Optional[int] = None) -> Any:
    return reduce(self, SUM, dim)


for _kind in ElementKind:
    tensor_control_path_manager(TMR, TMR.sum, _kind)(tensor_sum)

del _kind

__all__ = [
    tensor_sum.__name__,
]
