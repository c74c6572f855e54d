"""
Shape and stride algebra.

`Shape` is a small immutable value type holding an ordered sequence of
integers. It describes per-dimension extents, and the very same type is used
to describe per-dimension strides.

The module also provides the free functions the tensor engine builds on:

- `normalize_axis`         : axis-from-end normalization (``-1`` = last axis)
- `shapes_are_compatible`  : broadcast compatibility check
- `broadcast_shape`        : broadcast output shape
- `stride_for_shape`       : row-major strides of a shape
- `permute_shape`          : reorder entries by an axis ordering

Design notes
------------
- Shapes are aligned from the *front*: axis ``i`` of one operand is matched
  with axis ``i`` of the other, and axes beyond the shorter operand's rank
  take the longer operand's extent directly.
- ``Shape.__getitem__`` only accepts indices in ``[0, len)``. Counting from the
  end is always spelled explicitly through `normalize_axis`.
"""

from __future__ import annotations

from numbers import Integral
from typing import Iterable, Iterator, Sequence, Union

from ..domain._errors import (
    DimensionOutOfRangeError,
    IndexOutOfRangeError,
    OrderingLengthMismatchError,
    ShapeIncompatibleError,
)

ShapeLike = Union["Shape", Sequence[int], int]


def _as_int(value: object, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise TypeError(f"{what} entries must be integers, got {value!r}")
    return int(value)


def _flatten_dims(dims: tuple) -> tuple[int, ...]:
    # Shape(2, 3), Shape((2, 3)), Shape([2, 3]) and Shape(Shape(2, 3)) are all
    # the same shape.
    if len(dims) == 1 and not isinstance(dims[0], Integral):
        (only,) = dims
        if isinstance(only, (str, bytes)) or not isinstance(only, Iterable):
            raise TypeError(f"Shape expects integers or a sequence, got {only!r}")
        dims = tuple(only)
    return tuple(_as_int(d, "Shape") for d in dims)


class Shape:
    """
    Immutable ordered sequence of per-dimension integers.

    Parameters
    ----------
    *dims : int or Sequence[int]
        Either the entries themselves (``Shape(2, 3)``) or a single sequence
        of entries (``Shape([2, 3])``). ``Shape()`` is the 0-dimensional
        (scalar) shape.

    Notes
    -----
    - Equality is component-wise; shapes of different length are never equal.
      Plain tuples/lists compare equal to the matching `Shape`.
    - The same type represents strides.
    """

    __slots__ = ("_dims",)

    def __init__(self, *dims: Union[int, Iterable[int]]) -> None:
        self._dims: tuple[int, ...] = _flatten_dims(dims)

    @classmethod
    def of(cls, value: ShapeLike) -> "Shape":
        """Coerce an int, a sequence of ints, or a `Shape` into a `Shape`."""
        if isinstance(value, Shape):
            return value
        if isinstance(value, Integral) and not isinstance(value, bool):
            return cls(int(value))
        return cls(value)

    # ------------------------------------------------------------------
    # Sequence protocol
    # ------------------------------------------------------------------
    def __len__(self) -> int:
        return len(self._dims)

    def __iter__(self) -> Iterator[int]:
        return iter(self._dims)

    def __getitem__(self, i: int) -> int:
        """
        Return entry `i`.

        Raises
        ------
        IndexOutOfRangeError
            If `i` is outside ``[0, len(self))``. Negative indices are
            rejected; use `normalize_axis` to count from the end.
        """
        if not isinstance(i, Integral) or isinstance(i, bool):
            raise TypeError(f"Shape indices must be integers, got {i!r}")
        if i < 0 or i >= len(self._dims):
            raise IndexOutOfRangeError(i, len(self._dims), what="Shape index")
        return self._dims[i]

    def to_tuple(self) -> tuple[int, ...]:
        return self._dims

    # ------------------------------------------------------------------
    # Value semantics
    # ------------------------------------------------------------------
    def __eq__(self, other: object) -> bool:
        if isinstance(other, Shape):
            return self._dims == other._dims
        if isinstance(other, (tuple, list)):
            return self._dims == tuple(other)
        return NotImplemented

    def __ne__(self, other: object) -> bool:
        eq = self.__eq__(other)
        return eq if eq is NotImplemented else not eq

    def __hash__(self) -> int:
        return hash(self._dims)

    def __repr__(self) -> str:
        return "Shape(" + ",".join(str(d) for d in self._dims) + ")"

    # ------------------------------------------------------------------
    # Algebra
    # ------------------------------------------------------------------
    def volume(self) -> int:
        """
        Return the product of all entries.

        The 0-length shape has volume 1: it describes a scalar.
        """
        result = 1
        for d in self._dims:
            result *= d
        return result

    def flatten_dimension(self, dim: int) -> "Shape":
        """
        Return a copy of this shape with entry `dim` forced to 1.

        Parameters
        ----------
        dim : int
            Axis to flatten. Negative values count from the end.

        Raises
        ------
        DimensionOutOfRangeError
            If `dim` is outside ``[-len, len)``.
        """
        dim = normalize_axis(dim, len(self._dims))
        dims = list(self._dims)
        dims[dim] = 1
        return Shape(dims)


def normalize_axis(axis: int, ndim: int) -> int:
    """
    Map a possibly negative axis onto ``[0, ndim)``.

    ``-1`` is the last axis, ``-ndim`` the first.

    Raises
    ------
    TypeError
        If `axis` is not an integer.
    DimensionOutOfRangeError
        If the normalized axis is still outside ``[0, ndim)``.
    """
    if not isinstance(axis, Integral) or isinstance(axis, bool):
        raise TypeError(f"axis must be int, got {type(axis).__name__}")
    axis_ = int(axis)
    if axis_ < 0:
        axis_ += ndim
    if axis_ < 0 or axis_ >= ndim:
        raise DimensionOutOfRangeError(int(axis), ndim)
    return axis_


def shapes_are_compatible(a: Shape, b: Shape) -> bool:
    """
    Return True if `a` and `b` can be broadcast together.

    Only the axes both shapes have are checked; axes beyond the shorter
    shape's rank are implicitly compatible (size 1 on the missing side).
    """
    for i in range(min(len(a), len(b))):
        if a[i] != 1 and b[i] != 1 and a[i] != b[i]:
            return False
    return True


def broadcast_shape(a: Shape, b: Shape) -> Shape:
    """
    Compute the broadcast output shape of `a` and `b`.

    The output has ``max(len(a), len(b))`` entries. Where only one shape has
    an axis, its extent is used directly; where both do, the extents must be
    equal or one of them must be 1, and the larger one wins.

    Raises
    ------
    ShapeIncompatibleError
        At the first aligned axis whose extents conflict.
    """
    dims: list[int] = []
    for i in range(max(len(a), len(b))):
        if i >= len(a):
            dims.append(b[i])
        elif i >= len(b):
            dims.append(a[i])
        elif a[i] == 1 or b[i] == 1 or a[i] == b[i]:
            dims.append(max(a[i], b[i]))
        else:
            raise ShapeIncompatibleError(a.to_tuple(), b.to_tuple(), i)
    return Shape(dims)


def stride_for_shape(shape: Shape) -> Shape:
    """
    Return the row-major strides of `shape`.

    The last stride is 1 and every preceding stride is the next stride times
    the next extent. A 0-dimensional shape has an empty stride.
    """
    n = len(shape)
    strides = [0] * n
    for i in range(n - 1, -1, -1):
        if i == n - 1:
            strides[i] = 1
        else:
            strides[i] = strides[i + 1] * shape[i + 1]
    return Shape(strides)


def permute_shape(shape: Shape, ordering: Sequence[int]) -> Shape:
    """
    Reorder the entries of `shape`: ``result[i] = shape[ordering[i]]``.

    Parameters
    ----------
    shape : Shape
        Shape (or stride) to permute.
    ordering : Sequence[int]
        Axis ordering; must name each axis of `shape` exactly once.

    Raises
    ------
    OrderingLengthMismatchError
        If `ordering` does not have ``len(shape)`` entries, or repeats an axis.
    IndexOutOfRangeError
        If an entry of `ordering` is not a valid axis index.
    """
    order = tuple(_as_int(o, "ordering") for o in ordering)
    if len(order) != len(shape):
        raise OrderingLengthMismatchError(
            order, len(shape), "expected one entry per axis"
        )
    dims = [shape[dim] for dim in order]
    if len(set(order)) != len(order):
        raise OrderingLengthMismatchError(
            order, len(shape), "each axis must appear exactly once"
        )
    return Shape(dims)
