"""
Control paths for `max`, `min`, `argmax` and `argmin`.

The comparisons are the same for every element kind, so each implementation
is registered for all kinds.
"""

from typing import Any, Optional

from ..._tensor_builder import tensor_control_path_manager
from .....domain._tensor import ITensor
from .....domain.types._element_kind import ElementKind

from ._base import TensorMixinReduction as TMR
from ._reducer import ARGMAX, ARGMIN, MAX, MIN, reduce


def tensor_max(self: ITensor, dim: Optional[int] = None) -> Any:
    return reduce(self, MAX, dim)


def tensor_min(self: ITensor, dim: Optional[int] = None) -> Any:
    return reduce(self, MIN, dim)


def tensor_argmax(self: ITensor, dim: Optional[int] = None) -> Any:
    return reduce(self, ARGMAX, dim)


def tensor_argmin(self: ITensor, dim: Optional[int] = None) -> Any:
    return reduce(self, ARGMIN, dim)


for _kind in ElementKind:
    tensor_control_path_manager(TMR, TMR.max, _kind)(tensor_max)
    tensor_control_path_manager(TMR, TMR.min, _kind)(tensor_min)
    tensor_control_path_manager(TMR, TMR.argmax, _kind)(tensor_argmax)
    tensor_control_path_manager(TMR, TMR.argmin, _kind)(tensor_argmin)

del _kind

__all__ = [
    tensor_max.__name__,
    tensor_min.__name__,
    tensor_argmax.__name__,
    tensor_argmin.__name__,
]
