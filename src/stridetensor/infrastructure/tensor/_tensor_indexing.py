"""
Strided index arithmetic shared by the broadcasting and reduction engines.

Every linear index ``i`` of a row-major output shape is decomposed into
per-dimension positions::

    position[d] = (i // out_stride[d]) % out_shape[d]

and an operand's buffer offset is accumulated as ``stride[d] * position[d]``
over the dimensions where the operand's own extent is greater than 1. A
size-1 (or missing) dimension contributes offset 0, which is what makes it
broadcast. The arithmetic is carried out for all output indices at once with
NumPy integer arrays.
"""

from __future__ import annotations

import numpy as np

from ...domain._errors import IndexOutOfRangeError
from .._shape import Shape, stride_for_shape


def gather_offsets(shape: Shape, stride: Shape, out_shape: Shape) -> np.ndarray:
    """
    Buffer offsets of a ``(shape, stride)`` view for every index of `out_shape`.

    Parameters
    ----------
    shape, stride : Shape
        Layout of the operand being read.
    out_shape : Shape
        Shape being enumerated in row-major order. Dimensions at or beyond
        ``len(shape)`` contribute nothing.

    Returns
    -------
    numpy.ndarray
        ``int64`` array of length ``out_shape.volume()``.
    """
    out_stride = stride_for_shape(out_shape)
    volume = out_shape.volume()
    offsets = np.zeros(volume, dtype=np.int64)
    if volume == 0:
        return offsets

    linear = np.arange(volume, dtype=np.int64)
    for d in range(len(out_shape)):
        if d < len(shape) and shape[d] > 1:
            position = (linear // out_stride[d]) % out_shape[d]
            offsets += stride[d] * position
    return offsets


def check_layout(shape: Shape, stride: Shape, length: int) -> None:
    """
    Validate that a ``(shape, stride)`` view fits in a buffer of `length`.

    Raises
    ------
    ValueError
        If the ranks differ or an extent is negative.
    IndexOutOfRangeError
        If some reachable offset falls outside ``[0, length)``.
    """
    if len(shape) != len(stride):
        raise ValueError(
            f"shape {shape} and stride {stride} must have the same length"
        )
    for extent in shape:
        if extent < 0:
            raise ValueError(f"shape extents must be non-negative, got {shape}")
    if shape.volume() == 0:
        return

    lowest = highest = 0
    for extent, step in zip(shape, stride):
        reach = (extent - 1) * step
        if reach > 0:
            highest += reach
        else:
            lowest += reach
    if lowest < 0:
        raise IndexOutOfRangeError(lowest, length, what="reachable offset")
    if highest >= length:
        raise IndexOutOfRangeError(highest, length, what="reachable offset")
