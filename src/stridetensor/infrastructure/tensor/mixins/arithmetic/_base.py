"""
Arithmetic mixin defining elementwise Tensor operators.

This module declares :class:`TensorMixinArithmetic`, an abstract mixin that
specifies the public API and semantics for elementwise arithmetic on tensors.

The mixin itself does not implement numerical kernels. Concrete
implementations live in sibling modules and are registered via the
control-path dispatch mechanism, keyed on the receiver's element kind.
"""

from typing import Union
from abc import ABC

from .....domain._tensor import ITensor

Number = Union[int, float]


class TensorMixinArithmetic(ABC):
    """
    Abstract mixin defining elementwise arithmetic operations for tensors.

    Notes
    -----
    - Tensor-tensor operations broadcast both operands to a common shape
      (front-aligned) and always produce a fresh, row-major tensor.
    - Tensor-scalar operations apply the scalar to every buffer element and
      keep the receiver's shape and stride; the result owns a new buffer.
    - The result element type follows NumPy type promotion; a Python scalar
      does not widen the tensor's dtype.
    - Unsupported operand types make the operator return ``NotImplemented``.
    """

    # ----------------------------
    # Addition
    # ----------------------------
    def __add__(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
        """
        Elementwise addition ``self + other``.

        Parameters
        ----------
        other : Union[ITensor, Number]
            Right-hand operand.

        Returns
        -------
        ITensor
            Tensor containing the elementwise sum.

        Raises
        ------
        ShapeIncompatibleError
            If both operands are tensors whose shapes cannot be broadcast.
        """
        ...

    def __radd__(self: ITensor, other: Number) -> "ITensor":
        """Right-hand addition to support ``scalar + Tensor``."""
        ...

    # ----------------------------
    # Subtraction
    # ----------------------------
    def __sub__(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
        """
        Elementwise subtraction ``self - other``.

        See `__add__` for broadcasting and scalar rules.
        """
        ...

    def __rsub__(self: ITensor, other: Number) -> "ITensor":
        """Right-hand subtraction: ``other - self``."""
        ...

    # ----------------------------
    # Multiplication
    # ----------------------------
    def __mul__(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
        """
        Elementwise multiplication ``self * other``.

        See `__add__` for broadcasting and scalar rules.
        """
        ...

    def __rmul__(self: ITensor, other: Number) -> "ITensor":
        """Right-hand multiplication: ``other * self``."""
        ...

    # ----------------------------
    # Division
    # ----------------------------
    def __truediv__(self: ITensor, other: Union["ITensor", Number]) -> "ITensor":
        """
        Elementwise division ``self / other``.

        Parameters
        ----------
        other : Union[ITensor, Number]
            Right-hand operand.

        Returns
        -------
        ITensor
            Tensor containing the elementwise quotient.

        Raises
        ------
        ZeroDivisionError
            If both operands are integral and some divisor is zero.

        Notes
        -----
        - Integer / integer truncates toward zero and keeps an integer dtype.
        - As soon as either operand is floating, true division is used.
        """
        ...

    def __rtruediv__(self: ITensor, other: Number) -> "ITensor":
        """Right-hand division: ``other / self``."""
        ...
