"""
Reduction mixins and kind-specific implementations for Tensor operations.

This package aggregates the reduction Tensor mixin and its concrete
control-path implementations:

- ``sum``               : summation
- ``mean``              : arithmetic mean
- ``max`` / ``min``     : extrema
- ``argmax`` / ``argmin``: positions of extrema

Public API
----------
Only the base mixin class is exported as part of the public interface:

- ``TensorMixinReduction``

The concrete implementations are imported for side effects so that their
control paths are registered, but they are not intended to be used directly.
"""

from ._tensor_sum import *
from ._tensor_mean import *
from ._tensor_extrema import *
from ._base import TensorMixinReduction

__all__ = [
    TensorMixinReduction.__name__,
]
