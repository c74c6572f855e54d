"""
Memory and view mixins for Tensor.

- ``TensorMixinMemory``    : factories, materialization, copies, `fill`
- ``TensorMixinTranspose`` : `permute`, `transpose`, `T` views
- ``ElementSampler``       : kind-dispatched random source used by the
  random factories
"""

from ._tensor_sampler import *
from ._base import TensorMixinMemory
from ._tensor_transpose import TensorMixinTranspose

__all__ = [
    TensorMixinMemory.__name__,
    TensorMixinTranspose.__name__,
    ElementSampler.__name__,
]
