"""
Tensor-engine exceptions for StrideTensor.

This module defines the closed set of failure kinds the strided tensor engine
can report, and one exception type per kind. Every failure aborts the current
operation and surfaces to the immediate caller; the engine never recovers
internally.

Each exception also derives from the closest Python builtin (``IndexError``
or ``ValueError``) so that callers written against ordinary Python containers
keep working, while callers that care about the precise failure can match on
``TensorError.kind``.
"""

from enum import Enum


class TensorErrorKind(Enum):
    """
    Enumeration of every failure the tensor engine can raise.

    Attributes
    ----------
    INDEX_OUT_OF_RANGE : TensorErrorKind
        Element, Shape, or Stride access beyond bounds.
    DIMENSION_OUT_OF_RANGE : TensorErrorKind
        Axis argument outside the valid range after negative-axis
        normalization.
    SHAPE_INCOMPATIBLE : TensorErrorKind
        Two shapes cannot be broadcast together.
    ORDERING_LENGTH_MISMATCH : TensorErrorKind
        A permutation ordering does not name each axis of the tensor exactly
        once.
    EMPTY_REDUCTION : TensorErrorKind
        A reduction was requested over zero elements.
    """

    INDEX_OUT_OF_RANGE = "index_out_of_range"
    DIMENSION_OUT_OF_RANGE = "dimension_out_of_range"
    SHAPE_INCOMPATIBLE = "shape_incompatible"
    ORDERING_LENGTH_MISMATCH = "ordering_length_mismatch"
    EMPTY_REDUCTION = "empty_reduction"


class TensorError(Exception):
    """
    Base class of all tensor-engine failures.

    Attributes
    ----------
    kind : TensorErrorKind
        The failure category.
    """

    kind: TensorErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class IndexOutOfRangeError(TensorError, IndexError):
    """
    Raised when an element, Shape, or Stride index is outside its bounds.

    Attributes
    ----------
    index : int
        The offending index.
    length : int
        Number of valid positions; valid indices are ``[0, length)``.
    """

    kind = TensorErrorKind.INDEX_OUT_OF_RANGE

    def __init__(self, index: int, length: int, what: str = "index") -> None:
        super().__init__(f"{what} {index} out of range [0, {length})")
        self.index = index
        self.length = length


class DimensionOutOfRangeError(TensorError, IndexError):
    """
    Raised when an axis argument is invalid for a tensor's rank.

    Attributes
    ----------
    dim : int
        The axis as given by the caller (before normalization).
    ndim : int
        Rank of the shape the axis was applied to.
    """

    kind = TensorErrorKind.DIMENSION_OUT_OF_RANGE

    def __init__(self, dim: int, ndim: int) -> None:
        super().__init__(
            f"dimension {dim} out of range for rank {ndim} "
            f"(expected value in [{-ndim}, {ndim}))"
        )
        self.dim = dim
        self.ndim = ndim


class ShapeIncompatibleError(TensorError, ValueError):
    """
    Raised when two shapes cannot be broadcast against each other.

    Attributes
    ----------
    shape_a : tuple[int, ...]
        Left operand shape.
    shape_b : tuple[int, ...]
        Right operand shape.
    axis : int
        First aligned axis at which the extents conflict.
    """

    kind = TensorErrorKind.SHAPE_INCOMPATIBLE

    def __init__(
        self, shape_a: tuple[int, ...], shape_b: tuple[int, ...], axis: int
    ) -> None:
        super().__init__(
            f"shapes {shape_a} and {shape_b} are not compatible: "
            f"extents {shape_a[axis]} and {shape_b[axis]} at axis {axis} "
            "differ and neither is 1"
        )
        self.shape_a = shape_a
        self.shape_b = shape_b
        self.axis = axis


class OrderingLengthMismatchError(TensorError, ValueError):
    """
    Raised when a permutation ordering does not fit the shape it permutes.

    Attributes
    ----------
    ordering : tuple[int, ...]
        The ordering supplied by the caller.
    ndim : int
        Rank of the shape being permuted.
    """

    kind = TensorErrorKind.ORDERING_LENGTH_MISMATCH

    def __init__(
        self, ordering: tuple[int, ...], ndim: int, reason: str = ""
    ) -> None:
        msg = f"ordering {ordering} does not match rank {ndim}"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)
        self.ordering = ordering
        self.ndim = ndim


class EmptyReductionError(TensorError, ValueError):
    """
    Raised when a reduction has no elements to fold.

    Attributes
    ----------
    op : str
        Name of the reduction (e.g. "max", "argmin").
    """

    kind = TensorErrorKind.EMPTY_REDUCTION

    def __init__(self, op: str) -> None:
        super().__init__(f"{op} of an empty tensor (or empty axis) is undefined")
        self.op = op
