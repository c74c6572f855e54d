"""
Concrete strided Tensor implementation (NumPy-backed storage).

This module provides the concrete `Tensor` that satisfies the domain-level
`ITensor` protocol. A tensor is a view ``(buffer, shape, stride)``: the
`Buffer` holds the elements, and ``stride[d]`` is the number of buffer
elements to skip to advance one step along logical dimension ``d``. Several
tensors may share one buffer; views such as `permute` / `transpose` only
reorder shape and stride.

Design notes
------------
- Construction and memory helpers, views, arithmetic and reductions come
  from the mixins under ``mixins/``. Kind-dependent behaviour is registered
  through `tensor_control_path_manager` and dispatched on `Tensor.kind`.
- Every layout is validated when a tensor is created: shape and stride must
  have the same rank, and every reachable offset must lie inside the buffer.
- `at` / `set_at` / ``t(i)`` address the *buffer* (not shape-aware), while
  ``t[i, j]`` addresses logical positions.
"""

from __future__ import annotations

from numbers import Integral, Real
from typing import Any, Iterable, Optional, Tuple, Union

import numpy as np

from ...domain._errors import IndexOutOfRangeError
from ...domain._tensor import ITensor
from ...domain.types._element_kind import ElementKind
from .._buffer import Buffer
from .._shape import Shape, ShapeLike, stride_for_shape
from ._tensor_indexing import check_layout
from ._tensor_printer import render_tensor

Number = Union[int, float]


from .mixins.memory import TensorMixinMemory, TensorMixinTranspose
from .mixins.arithmetic import TensorMixinArithmetic
from .mixins.reduction import TensorMixinReduction


class Tensor(
    TensorMixinMemory,
    TensorMixinTranspose,
    TensorMixinArithmetic,
    TensorMixinReduction,
    ITensor,
):
    """
    Strided n-dimensional tensor over a shared `Buffer`.

    Parameters
    ----------
    data : Number or Iterable[Number] or numpy.ndarray
        Either a single scalar (producing a 0-dimensional tensor when no
        shape is given) or flat element data copied into a new buffer.
    shape : Optional[ShapeLike]
        Logical shape. Defaults to a 1-D shape covering all of `data`.
    stride : Optional[ShapeLike]
        Per-dimension strides. Defaults to row-major strides for `shape`.
    dtype : optional
        Element type. Inferred from `data` when omitted: integer data gives
        ``int64``, float data the configured default float dtype.

    Raises
    ------
    ValueError
        If shape and stride ranks differ or an extent is negative.
    IndexOutOfRangeError
        If the layout reaches outside the buffer.
    TypeError
        If the element type is not integral or floating.

    Examples
    --------
    >>> a = Tensor([1, 2, 3, 4, 5, 6], shape=(2, 3))
    >>> a.sum()
    21
    >>> a.sum(1).tolist()
    [[6], [15]]
    """

    # Let scalar-first expressions like ``np.float32(2) * t`` reach __rmul__.
    __array_ufunc__ = None

    def __init__(
        self,
        data: Union[Number, Iterable[Number]],
        shape: Optional[ShapeLike] = None,
        stride: Optional[ShapeLike] = None,
        *,
        dtype: Any = None,
    ) -> None:
        if isinstance(data, Real) and not isinstance(data, np.ndarray):
            buffer = Buffer([data], dtype)
            if shape is None and stride is None:
                shape = Shape()
        else:
            buffer = Buffer(data, dtype)

        shape = Shape(buffer.length) if shape is None else Shape.of(shape)
        stride = stride_for_shape(shape) if stride is None else Shape.of(stride)
        self._set_view(buffer, shape, stride)

    @classmethod
    def _from_buffer(cls, buffer: Buffer, shape: Shape, stride: Shape) -> "Tensor":
        """
        Construct a tensor over an existing `buffer` without copying it.

        This constructor bypasses `__init__`; the layout is still validated.
        """
        obj = cls.__new__(cls)  # bypass __init__
        obj._set_view(buffer, Shape.of(shape), Shape.of(stride))
        return obj

    def _set_view(self, buffer: Buffer, shape: Shape, stride: Shape) -> None:
        check_layout(shape, stride, buffer.length)
        self._buffer = buffer
        self._shape = shape
        self._stride = stride

    # ------------------------------------------------------------------
    # Layout
    # ------------------------------------------------------------------
    @property
    def buffer(self) -> Buffer:
        """Shared backing storage."""
        return self._buffer

    @property
    def shape(self) -> Shape:
        return self._shape

    @property
    def stride(self) -> Shape:
        return self._stride

    @property
    def dtype(self) -> np.dtype:
        return self._buffer.dtype

    @property
    def kind(self) -> ElementKind:
        """Element kind used by control-path dispatch."""
        return self._buffer.kind

    @property
    def ndim(self) -> int:
        return len(self._shape)

    def numel(self) -> int:
        """Return the number of logical elements."""
        return self._shape.volume()

    def is_contiguous(self) -> bool:
        """True if the strides are the row-major strides of the shape."""
        return self._stride == stride_for_shape(self._shape)

    def shares_buffer_with(self, other: "Tensor") -> bool:
        """True if both tensors are views over the same `Buffer` object."""
        return self._buffer is other.buffer

    # ------------------------------------------------------------------
    # Buffer-order element access
    # ------------------------------------------------------------------
    def at(self, index: int) -> Number:
        """
        Return the element at buffer position `index` as a Python number.

        This ignores shape and stride: ``t.transpose().at(1) == t.at(1)``.
        """
        return self._buffer[index].item()

    def __call__(self, index: int) -> Number:
        return self.at(index)

    def set_at(self, index: int, value: Number) -> None:
        """
        Overwrite buffer position `index`; visible through every aliasing view.

        Storing a fractional float into an integer tensor truncates it and
        emits a `RuntimeWarning`.
        """
        self._buffer[index] = value

    # ------------------------------------------------------------------
    # Logical element access
    # ------------------------------------------------------------------
    def _offset_of(self, position: Union[int, Tuple[int, ...]]) -> int:
        if not isinstance(position, tuple):
            position = (position,)
        if len(position) != self.ndim:
            raise IndexError(
                f"expected {self.ndim} indices for shape {self._shape}, "
                f"got {len(position)}"
            )
        offset = 0
        for d, p in enumerate(position):
            if not isinstance(p, Integral) or isinstance(p, bool):
                raise TypeError(f"tensor indices must be integers, got {p!r}")
            if p < 0 or p >= self._shape[d]:
                raise IndexOutOfRangeError(int(p), self._shape[d], what=f"axis {d} index")
            offset += int(p) * self._stride[d]
        return offset

    def __getitem__(self, position: Union[int, Tuple[int, ...]]) -> Number:
        """Return the element at a logical position ``t[i, j, ...]``."""
        return self._buffer[self._offset_of(position)].item()

    def __setitem__(self, position: Union[int, Tuple[int, ...]], value: Number) -> None:
        """Overwrite the element at a logical position ``t[i, j, ...] = v``."""
        self._buffer[self._offset_of(position)] = value

    def item(self) -> Number:
        """
        Return the value of a one-element tensor as a Python number.

        Raises
        ------
        ValueError
            If the tensor does not contain exactly 1 element.
        """
        if self.numel() != 1:
            raise ValueError(
                f"Tensor.item() requires a scalar/1-element tensor, got shape={self._shape}"
            )
        # every position of a one-element tensor is the all-zero position
        return self._buffer[0].item()

    def __array__(self, dtype: Any = None, copy: Any = None) -> np.ndarray:
        arr = self.to_numpy()
        return arr if dtype is None else arr.astype(dtype, copy=False)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        return f"Tensor(shape={self._shape}, stride={self._stride}, dtype={self.dtype})"

    def __str__(self) -> str:
        return render_tensor(self)

    def debug_storage_repr(self) -> str:
        """
        Return the raw storage and shape, e.g.
        ``Tensor { data=[1,2,3], shape=Shape(3) }``.

        Notes
        -----
        The data is listed in buffer order; strides are not applied.
        """
        return (
            "Tensor { data=[" + self._buffer.to_string(",") + "], "
            f"shape={self._shape} }}"
        )
