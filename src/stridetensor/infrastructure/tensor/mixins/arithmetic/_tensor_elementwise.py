"""
Control paths for kind-independent elementwise arithmetic.

Addition, subtraction and multiplication behave the same for integer and
floating tensors (NumPy promotion decides the result dtype), so the same
implementation is registered for every `ElementKind`.
"""

from typing import Any, Union

import numpy as np

from ..._tensor_builder import tensor_control_path_manager
from .....domain._tensor import ITensor
from .....domain.types._element_kind import ElementKind

from ._base import TensorMixinArithmetic as TMA
from ._broadcast import apply_binary

Number = Union[int, float]


def tensor_add(self: ITensor, other: Union["ITensor", Number]) -> Any:
    return apply_binary(self, other, np.add)


def tensor_radd(self: ITensor, other: Number) -> Any:
    return apply_binary(self, other, np.add, reverse=True)


def tensor_sub(self: ITensor, other: Union["ITensor", Number]) -> Any:
    return apply_binary(self, other, np.subtract)


def tensor_rsub(self: ITensor, other: Number) -> Any:
    return apply_binary(self, other, np.subtract, reverse=True)


def tensor_mul(self: ITensor, other: Union["ITensor", Number]) -> Any:
    return apply_binary(self, other, np.multiply)


def tensor_rmul(self: ITensor, other: Number) -> Any:
    return apply_binary(self, other, np.multiply, reverse=True)


for _kind in ElementKind:
    tensor_control_path_manager(TMA, TMA.__add__, _kind)(tensor_add)
    tensor_control_path_manager(TMA, TMA.__radd__, _kind)(tensor_radd)
    tensor_control_path_manager(TMA, TMA.__sub__, _kind)(tensor_sub)
    tensor_control_path_manager(TMA, TMA.__rsub__, _kind)(tensor_rsub)
    tensor_control_path_manager(TMA, TMA.__mul__, _kind)(tensor_mul)
    tensor_control_path_manager(TMA, TMA.__rmul__, _kind)(tensor_rmul)

del _kind

__all__ = [
    tensor_add.__name__,
    tensor_radd.__name__,
    tensor_sub.__name__,
    tensor_rsub.__name__,
    tensor_mul.__name__,
    tensor_rmul.__name__,
]
