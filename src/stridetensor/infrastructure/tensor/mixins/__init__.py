from .memory import TensorMixinMemory, TensorMixinTranspose
from .arithmetic import TensorMixinArithmetic
from .reduction import TensorMixinReduction

__all__ = [
    TensorMixinMemory.__name__,
    TensorMixinTranspose.__name__,
    TensorMixinArithmetic.__name__,
    TensorMixinReduction.__name__,
]
