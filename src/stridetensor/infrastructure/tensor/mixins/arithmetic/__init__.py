"""
Arithmetic mixins and kind-specific implementations for Tensor operations.

This package aggregates the arithmetic Tensor mixin and its concrete
control-path implementations:

- addition           (``__add__`` / ``__radd__``)
- subtraction        (``__sub__`` / ``__rsub__``)
- multiplication     (``__mul__`` / ``__rmul__``)
- division           (``__truediv__`` / ``__rtruediv__``)

Design notes
------------
- Implementation modules are imported for their *side effects*: registering
  control paths with the tensor control-path manager.
- Tensor-tensor operations go through the broadcasting engine in
  ``_broadcast``.

Public API
----------
- ``TensorMixinArithmetic``
"""

from ._tensor_elementwise import *
from ._tensor_division import *
from ._base import TensorMixinArithmetic

__all__ = [
    TensorMixinArithmetic.__name__,
]
