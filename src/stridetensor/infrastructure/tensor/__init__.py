from ._tensor import Tensor
from .mixins.memory import ElementSampler

__all__ = [
    Tensor.__name__,
    ElementSampler.__name__,
]
