"""
Tensor memory / construction mixin.

This module defines `TensorMixinMemory`, a focused mixin that provides
factory constructors (`from_numpy`, `from_raw`, `constant`, `zeros`, `ones`,
`random`, `normal`) and core memory utilities (`clone`, `astype`, `fill`,
`to_numpy`, `tolist`, copying protocol) for the concrete `Tensor`.

Design intent
-------------
- Keep object creation and storage movement centralized in one mixin while
  presenting a framework-style API (`Tensor.zeros`, `Tensor.random`, ...).
- Every factory produces a fresh buffer and a row-major layout.

Notes
-----
- The mixin assumes the concrete `Tensor` class provides the
  `_from_buffer(buffer, shape, stride)` classmethod and the `buffer`,
  `shape` and `stride` properties.
"""

from typing import Any, List, Optional, Type, Union
from abc import ABC

import numpy as np

from .....domain._tensor import ITensor
from ...._buffer import Buffer, resolve_dtype
from ...._config import get_default_float_dtype
from ...._shape import Shape, ShapeLike, stride_for_shape
from ..._tensor_indexing import gather_offsets
from ._tensor_sampler import ElementSampler

Number = Union[int, float]


def _or_default_float(dtype: Any) -> Any:
    return get_default_float_dtype() if dtype is None else dtype


class TensorMixinMemory(ABC):
    """
    Mixin that implements tensor construction and memory-management helpers.

    It provides:

    - Factory constructors: `from_numpy`, `from_raw`, `constant`, `zeros`,
      `ones`, `random`, `normal`
    - Materialization: `to_numpy`, `tolist`
    - Copies: `clone`, `astype`, ``copy.copy`` (shares storage) and
      ``copy.deepcopy`` (same as `clone`)
    - In-place update: `fill`
    """

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    @classmethod
    def _from_flat(cls: Type[ITensor], values: np.ndarray, shape: Shape) -> "ITensor":
        """Adopt a 1-D array of ``shape.volume()`` values as a row-major tensor."""
        return cls._from_buffer(Buffer.wrap(values), shape, stride_for_shape(shape))

    def _logical_offsets(self: ITensor) -> np.ndarray:
        return gather_offsets(self.shape, self.stride, self.shape)

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------
    @classmethod
    def from_numpy(cls: Type[ITensor], array: Any, *, dtype: Any = None) -> "ITensor":
        """
        Copy an n-d array into a fresh row-major tensor.

        Parameters
        ----------
        array : array-like
            Source data. Its shape becomes the tensor's shape.
        dtype : optional
            Element type. Defaults to the array's own dtype (literal Python
            data is inferred as for `Buffer`).
        """
        arr = array if isinstance(array, np.ndarray) else np.asarray(array)
        dt = resolve_dtype(arr if isinstance(array, np.ndarray) else array, dtype)
        arr = np.array(arr, dtype=dt, order="C", copy=True)
        return cls._from_flat(arr.reshape(-1), Shape(arr.shape))

    @classmethod
    def from_raw(
        cls: Type[ITensor],
        length: int,
        data: Any,
        shape: Optional[ShapeLike] = None,
        stride: Optional[ShapeLike] = None,
    ) -> "ITensor":
        """
        Build a tensor over existing storage without copying it.

        Parameters
        ----------
        length : int
            Number of leading elements of `data` the buffer exposes.
        data : numpy.ndarray
            Storage to adopt. Writes through the tensor are visible in `data`.
        shape, stride : optional
            Layout. Defaults to a 1-D view of all `length` elements, and to
            row-major strides for the given shape.

        Raises
        ------
        IndexOutOfRangeError
            If `length` exceeds the storage, or the layout reaches past it.
        """
        buffer = Buffer.wrap(data, length)
        shape = Shape(buffer.length) if shape is None else Shape.of(shape)
        stride = stride_for_shape(shape) if stride is None else Shape.of(stride)
        return cls._from_buffer(buffer, shape, stride)

    @classmethod
    def constant(
        cls: Type[ITensor], value: Number, shape: ShapeLike, *, dtype: Any = None
    ) -> "ITensor":
        """
        Create a tensor with every element equal to `value`.

        The dtype is inferred from `value` when not given.
        """
        shape = Shape.of(shape)
        dt = resolve_dtype([value], dtype)
        return cls._from_flat(np.full(shape.volume(), value, dtype=dt), shape)

    @classmethod
    def zeros(cls: Type[ITensor], shape: ShapeLike, *, dtype: Any = None) -> "ITensor":
        """Create a zero-filled tensor (default float dtype unless given)."""
        return cls.constant(0, shape, dtype=_or_default_float(dtype))

    @classmethod
    def ones(cls: Type[ITensor], shape: ShapeLike, *, dtype: Any = None) -> "ITensor":
        """Create a one-filled tensor (default float dtype unless given)."""
        return cls.constant(1, shape, dtype=_or_default_float(dtype))

    @classmethod
    def random(
        cls: Type[ITensor],
        shape: ShapeLike,
        low: Optional[Number] = None,
        high: Optional[Number] = None,
        *,
        dtype: Any = None,
    ) -> "ITensor":
        """
        Create a tensor of uniformly distributed values.

        Parameters
        ----------
        shape : ShapeLike
            Output shape.
        low, high : Optional[Number]
            Bounds. Integer dtypes sample ``[low, high]`` (default: the whole
            dtype range); floating dtypes sample ``[low, high)`` (default
            ``[0, 1)``).
        dtype : optional
            Element type. Defaults to the configured float dtype.
        """
        shape = Shape.of(shape)
        sampler = ElementSampler(_or_default_float(dtype))
        values = sampler.uniform(low, high, size=shape.volume())
        return cls._from_flat(values, shape)

    @classmethod
    def normal(
        cls: Type[ITensor],
        shape: ShapeLike,
        mean: float = 0.0,
        std: float = 1.0,
        *,
        dtype: Any = None,
    ) -> "ITensor":
        """
        Create a tensor of normally distributed values.

        Integer dtypes round each draw to the nearest integer.
        """
        shape = Shape.of(shape)
        sampler = ElementSampler(_or_default_float(dtype))
        values = sampler.normal(mean, std, size=shape.volume())
        return cls._from_flat(values, shape)

    # ------------------------------------------------------------------
    # Materialization
    # ------------------------------------------------------------------
    def to_numpy(self: ITensor) -> np.ndarray:
        """
        Return the logical contents as a new NumPy array of shape `shape`.

        Strides are honored, so a transposed view yields the transposed
        matrix. The array never aliases the tensor's storage.
        """
        values = self.buffer.array[self._logical_offsets()]
        return values.reshape(self.shape.to_tuple())

    def tolist(self: ITensor) -> Union[List[Any], Number]:
        """Return the logical contents as nested Python lists."""
        return self.to_numpy().tolist()

    # ------------------------------------------------------------------
    # Copies
    # ------------------------------------------------------------------
    def clone(self: ITensor) -> "ITensor":
        """
        Deep copy into an independent, row-major buffer.

        The clone has the same shape and values but shares nothing with the
        receiver: writes to one are never visible through the other.
        """
        values = self.buffer.array[self._logical_offsets()]
        return type(self)._from_flat(values, self.shape)

    def astype(self: ITensor, dtype: Any) -> "ITensor":
        """
        Return a copy with every buffer element converted to `dtype`.

        The layout (shape and stride) is preserved.
        """
        return type(self)._from_buffer(self.buffer.astype(dtype), self.shape, self.stride)

    def __copy__(self: ITensor) -> "ITensor":
        return type(self)._from_buffer(self.buffer, self.shape, self.stride)

    def __deepcopy__(self: ITensor, memo: dict) -> "ITensor":
        return self.clone()

    # ------------------------------------------------------------------
    # In-place update
    # ------------------------------------------------------------------
    def fill(self: ITensor, value: Number) -> "ITensor":
        """
        Set every logical element to `value` in place and return ``self``.

        The write goes to the shared buffer, so it is visible through every
        view that aliases the same positions.
        """
        self.buffer.array[self._logical_offsets()] = value
        return self
