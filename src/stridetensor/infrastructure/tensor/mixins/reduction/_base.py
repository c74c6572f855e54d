"""
Reduction mixin defining the public Tensor reduction API.

This module declares :class:`TensorMixinReduction`, an abstract mixin that
specifies the *interface and semantics* of the reductions `sum`, `mean`,
`max`, `min`, `argmax` and `argmin`.

The mixin itself does not implement any numerical logic. Concrete
implementations are registered via the control-path dispatch mechanism and
evaluated by the generic engine in ``_reducer``.
"""

from typing import Any, Optional
from abc import ABC

from .....domain._tensor import ITensor


class TensorMixinReduction(ABC):
    """
    Abstract mixin defining reduction operations for tensors.

    Every reduction comes in two forms selected by `dim`:

    - ``dim=None`` (full reduction): every logical element is folded and a
      Python scalar is returned.
    - ``dim=d`` (axis reduction): elements are folded along axis ``d``
      (negative values count from the end) and a Tensor is returned whose
      shape equals the receiver's with ``shape[d]`` replaced by 1, laid out
      row-major.

    Notes
    -----
    - Methods defined here should be treated as *pure interface declarations*.
    - Reducing an empty tensor, or along an axis of extent 0, raises
      `EmptyReductionError`.
    """

    def sum(self: ITensor, dim: Optional[int] = None) -> Any:
        """
        Sum of elements. The result keeps the receiver's dtype.

        Parameters
        ----------
        dim : Optional[int], optional
            Axis to reduce. If None, all elements are reduced into a scalar.

        Raises
        ------
        DimensionOutOfRangeError
            If `dim` is outside ``[-ndim, ndim)``.
        """
        ...

    def mean(self: ITensor, dim: Optional[int] = None) -> Any:
        """
        Arithmetic mean of elements.

        Floating tensors keep their dtype; integer tensors produce
        ``float64`` means.
        """
        ...

    def max(self: ITensor, dim: Optional[int] = None) -> Any:
        """Maximum element (or per-lane maxima along `dim`)."""
        ...

    def min(self: ITensor, dim: Optional[int] = None) -> Any:
        """Minimum element (or per-lane minima along `dim`)."""
        ...

    def argmax(self: ITensor, dim: Optional[int] = None) -> Any:
        """
        Position of the maximum.

        For a full reduction this is the row-major logical index of the first
        maximal element. Along `dim`, each output element holds the position
        ``k`` in ``[0, shape[dim])`` of the first maximum in its lane, so
        indexing back into the receiver at ``k`` yields `max` along `dim`.
        Results are ``int64``.
        """
        ...

    def argmin(self: ITensor, dim: Optional[int] = None) -> Any:
        """Position of the minimum; see `argmax`."""
        ...
