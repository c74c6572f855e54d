"""
Contiguous, fixed-length element storage backing every tensor.

A `Buffer` owns a one-dimensional NumPy array of a single element type. Its
length never changes after construction. Sharing between tensors happens by
holding a reference to the same `Buffer` object (Python reference counting
releases the storage once the last holder is gone); the buffer itself does no
reference bookkeeping.

Design notes
------------
- Element access is bounds-checked and buffer-ordered (not shape-aware).
- Copying a buffer (`copy`, `copy.copy`, `copy.deepcopy`) always duplicates
  its elements; `assign` copies another buffer of the same length into it.
- `Buffer.wrap` is the zero-copy path: it adopts an existing array, and the
  caller is responsible for not resizing or reusing it unexpectedly.
"""

from __future__ import annotations

import math
import warnings
from numbers import Integral, Real
from typing import Any, Iterable, Optional, Union

import numpy as np

from ..domain._errors import IndexOutOfRangeError
from ..domain.types._element_kind import ElementKind
from ._config import get_default_float_dtype, get_default_int_dtype

Number = Union[int, float]


def element_kind_of(dtype: Any) -> ElementKind:
    """
    Classify a dtype as integer or floating.

    Raises
    ------
    TypeError
        If `dtype` is neither integral nor floating (e.g. bool, complex,
        object, str).
    """
    dt = np.dtype(dtype)
    if np.issubdtype(dt, np.integer):
        return ElementKind.INTEGER
    if np.issubdtype(dt, np.floating):
        return ElementKind.FLOATING
    raise TypeError(f"unsupported element type: {dt}")


def resolve_dtype(values: Any, dtype: Any = None) -> np.dtype:
    """
    Decide the element type for `values`.

    An explicit `dtype` wins. Arrays keep their own dtype. Python data made of
    integers maps to the default integer dtype; anything containing a float
    maps to the default float dtype.
    """
    if dtype is not None:
        dt = np.dtype(dtype)
        element_kind_of(dt)
        return dt
    if isinstance(values, np.ndarray):
        element_kind_of(values.dtype)
        return values.dtype
    inferred = np.asarray(values).dtype
    if inferred.kind == "b":
        raise TypeError("boolean tensors are not supported")
    if np.issubdtype(inferred, np.integer):
        return get_default_int_dtype()
    if np.issubdtype(inferred, np.floating):
        return get_default_float_dtype()
    raise TypeError(f"cannot build a tensor from values of dtype {inferred}")


class Buffer:
    """
    Fixed-length contiguous storage of one element type.

    Parameters
    ----------
    values : Iterable[Number] or numpy.ndarray
        Elements to copy into the buffer, in order. N-d arrays are flattened
        in row-major order.
    dtype : optional
        Element type. Inferred from `values` when omitted (see
        `resolve_dtype`).
    """

    __slots__ = ("_data", "__weakref__")

    def __init__(self, values: Iterable[Number], dtype: Any = None) -> None:
        if not isinstance(values, np.ndarray):
            values = list(values)
        dt = resolve_dtype(values, dtype)
        self._data: np.ndarray = np.array(values, dtype=dt).reshape(-1)

    @classmethod
    def wrap(cls, array: Any, length: Optional[int] = None) -> "Buffer":
        """
        Adopt `array` as storage without copying.

        Parameters
        ----------
        array : array-like
            Source storage. A contiguous array is viewed, not copied.
        length : Optional[int]
            Number of leading elements to expose. Defaults to the whole array.

        Raises
        ------
        IndexOutOfRangeError
            If `length` exceeds the number of available elements.
        """
        arr = np.asarray(array)
        element_kind_of(arr.dtype)
        if arr.ndim != 1:
            arr = arr.reshape(-1)
        if length is not None:
            length = int(length)
            if length < 0 or length > arr.shape[0]:
                raise IndexOutOfRangeError(
                    length, arr.shape[0] + 1, what="raw buffer length"
                )
            arr = arr[:length]
        obj = cls.__new__(cls)
        obj._data = arr
        return obj

    # ------------------------------------------------------------------
    # Metadata
    # ------------------------------------------------------------------
    @property
    def length(self) -> int:
        return int(self._data.shape[0])

    def __len__(self) -> int:
        return self.length

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    @property
    def kind(self) -> ElementKind:
        return element_kind_of(self._data.dtype)

    @property
    def array(self) -> np.ndarray:
        """The backing 1-D array. Writes through it are visible to all views."""
        return self._data

    # ------------------------------------------------------------------
    # Element access
    # ------------------------------------------------------------------
    def _check_index(self, i: int) -> int:
        if not isinstance(i, Integral) or isinstance(i, bool):
            raise TypeError(f"buffer indices must be integers, got {i!r}")
        if i < 0 or i >= self.length:
            raise IndexOutOfRangeError(int(i), self.length, what="buffer index")
        return int(i)

    def __getitem__(self, i: int) -> Any:
        return self._data[self._check_index(i)]

    def __setitem__(self, i: int, value: Number) -> None:
        i = self._check_index(i)
        if (
            self.kind is ElementKind.INTEGER
            and isinstance(value, Real)
            and not isinstance(value, Integral)
        ):
            if not math.isfinite(value):
                raise ValueError(f"cannot store {value!r} in a {self.dtype} buffer")
            if not float(value).is_integer():
                warnings.warn(
                    f"value {value!r} cannot be represented in a {self.dtype} "
                    "buffer and will be truncated.",
                    RuntimeWarning,
                    stacklevel=3,
                )
            value = int(value)
        self._data[i] = value

    # ------------------------------------------------------------------
    # Copying
    # ------------------------------------------------------------------
    def copy(self) -> "Buffer":
        """Return a deep duplicate of this buffer."""
        return Buffer.wrap(self._data.copy())

    def __copy__(self) -> "Buffer":
        return self.copy()

    def __deepcopy__(self, memo: dict) -> "Buffer":
        return self.copy()

    def assign(self, other: "Buffer") -> "Buffer":
        """
        Replace this buffer's contents with a deep copy of `other`.

        The length and dtype of a buffer are fixed, so values are copied
        into the existing storage and every view sharing it sees them.

        Raises
        ------
        ValueError
            If `other` has a different length.
        TypeError
            If `other`'s elements cannot be cast to this buffer's dtype
            without changing kind (e.g. floating into integer).
        """
        if other is self:
            return self
        if other.length != self.length:
            raise ValueError(
                f"cannot assign a buffer of length {other.length} "
                f"to a buffer of length {self.length}"
            )
        np.copyto(self._data, other._data, casting="same_kind")
        return self

    def astype(self, dtype: Any) -> "Buffer":
        """Return a new buffer with every element converted to `dtype`."""
        element_kind_of(dtype)
        return Buffer.wrap(self._data.astype(dtype, copy=True))

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    def to_string(self, delimiter: str = ",") -> str:
        return delimiter.join(str(v) for v in self._data)

    def __repr__(self) -> str:
        return f"Buffer(length={self.length}, dtype={self.dtype})"
