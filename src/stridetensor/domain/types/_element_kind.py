"""
Element-kind classification for tensor element types.

The engine is generic over its element type, but a few operations behave
differently for integral and floating elements (division semantics, random
sampling distributions). `ElementKind` is the state value those operations
dispatch on, kept free of any numerical-backend import so it can live in the
domain layer.
"""

from enum import Enum


class ElementKind(Enum):
    """
    Category of a tensor element type.

    Attributes
    ----------
    INTEGER : ElementKind
        Signed or unsigned integral elements. Division truncates toward zero
        and random draws come from a discrete uniform distribution.
    FLOATING : ElementKind
        IEEE floating-point elements. Division is true division and random
        draws come from continuous uniform / normal distributions.
    """

    INTEGER = "integer"
    FLOATING = "floating"

    def __str__(self) -> str:
        return self.value
