"""
Kind-specific implementations of Tensor division via control-path dispatch.

- ``ElementKind.FLOATING``: IEEE true division (``x / 0`` gives ``inf``/``nan``).
- ``ElementKind.INTEGER``: when the other operand is integral too, the
  quotient is truncated toward zero and the dtype stays integral; dividing
  by zero raises ``ZeroDivisionError``. A floating operand on either side
  switches to true division.
"""

from numbers import Integral
from typing import Any, Union

import numpy as np

from ..._tensor_builder import tensor_control_path_manager
from .....domain._tensor import ITensor
from .....domain.types._element_kind import ElementKind

from ._base import TensorMixinArithmetic as TMA
from ._broadcast import apply_binary, is_tensor_operand

Number = Union[int, float]


def truncating_divide(x: Any, y: Any) -> np.ndarray:
    """
    Integer division rounding toward zero (C semantics).

    The quotient keeps the operands' common integer dtype. uint64 mixed
    with a signed type has none, so both sides are computed as int64.

    Raises
    ------
    ZeroDivisionError
        If any divisor is zero.
    """
    dtype = np.result_type(x, y)
    if dtype.kind not in "iu":
        dtype = np.dtype(np.int64)
    num = np.asarray(x).astype(dtype, copy=False)
    den = np.asarray(y).astype(dtype, copy=False)
    if np.any(den == 0):
        raise ZeroDivisionError("integer division by zero")
    quotient = np.floor_divide(num, den)
    # floor and trunc differ for inexact quotients of opposite signs
    fix = (np.remainder(num, den) != 0) & ((num < 0) != (den < 0))
    return (quotient + fix).astype(dtype, copy=False)


def ieee_divide(x: Any, y: Any) -> np.ndarray:
    """True division; ``x / 0`` gives ``inf`` or ``nan``."""
    return np.true_divide(x, y)


def _is_integral_operand(other: Any) -> bool:
    if is_tensor_operand(other):
        return other.kind is ElementKind.INTEGER
    return isinstance(other, Integral)


@tensor_control_path_manager(TMA, TMA.__truediv__, ElementKind.FLOATING)
def tensor_div_floating(self: ITensor, other: Union["ITensor", Number]) -> Any:
    return apply_binary(self, other, ieee_divide)


@tensor_control_path_manager(TMA, TMA.__truediv__, ElementKind.INTEGER)
def tensor_div_integer(self: ITensor, other: Union["ITensor", Number]) -> Any:
    if _is_integral_operand(other):
        return apply_binary(self, other, truncating_divide)
    return apply_binary(self, other, ieee_divide)


@tensor_control_path_manager(TMA, TMA.__rtruediv__, ElementKind.FLOATING)
def tensor_rdiv_floating(self: ITensor, other: Number) -> Any:
    return apply_binary(self, other, ieee_divide, reverse=True)


@tensor_control_path_manager(TMA, TMA.__rtruediv__, ElementKind.INTEGER)
def tensor_rdiv_integer(self: ITensor, other: Number) -> Any:
    if _is_integral_operand(other):
        return apply_binary(self, other, truncating_divide, reverse=True)
    return apply_binary(self, other, ieee_divide, reverse=True)


__all__ = [
    tensor_div_floating.__name__,
    tensor_div_integer.__name__,
    tensor_rdiv_floating.__name__,
    tensor_rdiv_integer.__name__,
]
