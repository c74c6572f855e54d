"""
Tensor interface definitions.

This module defines the domain-level interface for strided tensor objects
using structural typing. The interface captures the surface that the
infrastructure mixins (views, arithmetic, reductions, rendering) rely on, so
they can be written against a protocol instead of the concrete `Tensor`.

Notes
-----
The protocol intentionally avoids importing any numerical backend; element
values are typed as plain Python numbers and dtype metadata as `Any`.
"""

from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence, Union, runtime_checkable

from .types._element_kind import ElementKind

Number = Union[int, float]


@runtime_checkable
class ITensor(Protocol):
    """
    Strided tensor interface.

    An `ITensor` is a view ``(buffer, shape, stride)`` over shared storage:
    ``stride[d]`` is the number of buffer elements to advance to move one step
    along logical dimension ``d``.
    """

    # ---------------------------------------------------------------------
    # Layout
    # ---------------------------------------------------------------------
    @property
    def buffer(self) -> Any:
        """Shared backing storage of this tensor."""
        ...

    @property
    def shape(self) -> Any:
        """Per-dimension extents (a `Shape`)."""
        ...

    @property
    def stride(self) -> Any:
        """Per-dimension buffer strides (a `Shape`)."""
        ...

    @property
    def dtype(self) -> Any:
        """Element type of the backing storage."""
        ...

    @property
    def kind(self) -> ElementKind:
        """Element kind used for type-dependent dispatch."""
        ...

    @property
    def ndim(self) -> int:
        """Number of logical dimensions."""
        ...

    def numel(self) -> int:
        """Number of logical elements (the shape's volume)."""
        ...

    # ---------------------------------------------------------------------
    # Element access
    # ---------------------------------------------------------------------
    def at(self, index: int) -> Number:
        """
        Return the element at buffer position `index` (not shape-aware).

        Raises
        ------
        IndexOutOfRangeError
            If `index` is outside ``[0, len(buffer))``.
        """
        ...

    def set_at(self, index: int, value: Number) -> None:
        """
        Overwrite the element at buffer position `index`.

        The write is visible through every tensor sharing the buffer.
        """
        ...

    def item(self) -> Number:
        """Return the single logical element of a one-element tensor."""
        ...

    # ---------------------------------------------------------------------
    # Views
    # ---------------------------------------------------------------------
    def permute(self, *ordering: Any) -> "ITensor":
        """Return a zero-copy view with axes reordered by `ordering`."""
        ...

    def transpose(self) -> "ITensor":
        """Return a zero-copy view with the axis order fully reversed."""
        ...

    def clone(self) -> "ITensor":
        """Return an independent row-major copy of the logical contents."""
        ...

    # ---------------------------------------------------------------------
    # Reductions
    # ---------------------------------------------------------------------
    def sum(self, dim: Optional[int] = None) -> Union[Number, "ITensor"]: ...

    def mean(self, dim: Optional[int] = None) -> Union[Number, "ITensor"]: ...

    def max(self, dim: Optional[int] = None) -> Union[Number, "ITensor"]: ...

    def min(self, dim: Optional[int] = None) -> Union[Number, "ITensor"]: ...

    def argmax(self, dim: Optional[int] = None) -> Union[int, "ITensor"]: ...

    def argmin(self, dim: Optional[int] = None) -> Union[int, "ITensor"]: ...

    # ---------------------------------------------------------------------
    # Host interop
    # ---------------------------------------------------------------------
    def to_numpy(self) -> Any:
        """Materialize the logical view as a backend-native array."""
        ...

    def tolist(self) -> Union[Number, Sequence[Any]]:
        """Return the logical contents as nested Python lists."""
        ...
