"""
Zero-copy view transforms: `permute`, `transpose` and `T`.

A view shares the receiver's buffer and only reorders its shape and stride,
so writes through one are visible through the other.

    t = Tensor([1, 2, 3, 4, 5, 6], shape=(2, 3))   # stride (3, 1)
    v = t.transpose()                              # shape (3, 2), stride (1, 3)
"""

from numbers import Integral
from typing import Iterable, Union
from abc import ABC

from .....domain._tensor import ITensor
from ...._shape import permute_shape


class TensorMixinTranspose(ABC):
    """Mixin providing stride-permuting views."""

    def permute(self: ITensor, *ordering: Union[int, Iterable[int]]) -> "ITensor":
        """
        Return a view whose axis ``i`` is the receiver's axis ``ordering[i]``.

        Accepts either ``t.permute(1, 0)`` or ``t.permute((1, 0))``.

        Raises
        ------
        OrderingLengthMismatchError
            If `ordering` does not name each axis exactly once.
        IndexOutOfRangeError
            If an entry of `ordering` is not a valid axis.
        """
        if len(ordering) == 1 and not isinstance(ordering[0], Integral):
            ordering = tuple(ordering[0])
        shape = permute_shape(self.shape, ordering)
        stride = permute_shape(self.stride, ordering)
        return type(self)._from_buffer(self.buffer, shape, stride)

    def transpose(self: ITensor) -> "ITensor":
        """Return a view with every axis reversed (``ordering = [n-1, ..., 0]``)."""
        return self.permute(range(self.ndim - 1, -1, -1))

    @property
    def T(self: ITensor) -> "ITensor":
        return self.transpose()
