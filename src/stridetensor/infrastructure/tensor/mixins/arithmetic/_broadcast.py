"""
Broadcasting engine for elementwise binary operations.

`broadcast_binary` combines two tensors of compatible shapes into a new
row-major tensor of the broadcast shape. For each output index it resolves
one buffer offset per operand (see `gather_offsets`), so size-1 and missing
dimensions are read repeatedly without materializing expanded copies.

`scalar_binary` is the tensor-scalar path: the scalar is applied to every
element of the receiver's buffer, and the result keeps the receiver's layout.

Kernels run with NumPy floating-point warnings silenced on both paths, so
IEEE results (``inf``, ``nan``) are produced quietly.
"""

from __future__ import annotations

from numbers import Real
from typing import Any, Callable

import numpy as np

from .....domain._tensor import ITensor
from ...._buffer import Buffer
from ...._shape import broadcast_shape, stride_for_shape
from ..._tensor_indexing import gather_offsets

BinaryKernel = Callable[[Any, Any], np.ndarray]


def is_tensor_operand(value: Any) -> bool:
    return isinstance(value, ITensor)


def is_scalar_operand(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, (bool, np.bool_))


def broadcast_binary(a: ITensor, b: ITensor, kernel: BinaryKernel) -> ITensor:
    """
    Apply `kernel` elementwise over the broadcast of `a` and `b`.

    Parameters
    ----------
    a, b : ITensor
        Operands. Their shapes are aligned from the front.
    kernel : Callable
        Vectorized binary function (typically a NumPy ufunc) applied to the
        gathered element arrays of both operands.

    Returns
    -------
    ITensor
        Fresh tensor with the broadcast shape and row-major strides.

    Raises
    ------
    ShapeIncompatibleError
        If the shapes conflict on some aligned axis.
    """
    out_shape = broadcast_shape(a.shape, b.shape)
    out_stride = stride_for_shape(out_shape)

    lhs = a.buffer.array[gather_offsets(a.shape, a.stride, out_shape)]
    rhs = b.buffer.array[gather_offsets(b.shape, b.stride, out_shape)]
    with np.errstate(all="ignore"):
        values = np.ascontiguousarray(kernel(lhs, rhs))

    return type(a)._from_buffer(Buffer.wrap(values), out_shape, out_stride)


def scalar_binary(
    a: ITensor, scalar: Any, kernel: BinaryKernel, *, reverse: bool = False
) -> ITensor:
    """
    Apply `kernel` between every buffer element of `a` and `scalar`.

    With ``reverse=True`` the scalar is the left-hand operand. The result has
    a new buffer and the same shape and stride as `a`.
    """
    data = a.buffer.array
    with np.errstate(all="ignore"):
        values = kernel(scalar, data) if reverse else kernel(data, scalar)
    values = np.ascontiguousarray(values)
    return type(a)._from_buffer(Buffer.wrap(values), a.shape, a.stride)


def apply_binary(
    a: ITensor, other: Any, kernel: BinaryKernel, *, reverse: bool = False
) -> Any:
    """
    Route ``a <op> other`` to the tensor or scalar path.

    Returns ``NotImplemented`` for unsupported operand types so Python can
    try the reflected operator (and eventually raise ``TypeError``).
    """
    if is_tensor_operand(other):
        if reverse:
            return broadcast_binary(other, a, kernel)
        return broadcast_binary(a, other, kernel)
    if is_scalar_operand(other):
        return scalar_binary(a, other, kernel, reverse=reverse)
    return NotImplemented
