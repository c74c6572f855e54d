"""
StrideTensor: a minimal strided n-dimensional tensor engine on NumPy storage.

Public API
----------
- ``Tensor``  : strided view over a shared ``Buffer`` with views, broadcasting
  arithmetic, reductions and nested-bracket printing
- ``Shape``   : immutable extents/strides value type, plus the shape algebra
  helpers (``broadcast_shape``, ``stride_for_shape``, ...)
- ``Buffer``  : fixed-length element storage
- error types rooted at ``TensorError``
- runtime configuration (``manual_seed``, default float dtype)
"""

from .domain._errors import (
    TensorErrorKind,
    TensorError,
    IndexOutOfRangeError,
    DimensionOutOfRangeError,
    ShapeIncompatibleError,
    OrderingLengthMismatchError,
    EmptyReductionError,
)
from .domain.types._element_kind import ElementKind
from .infrastructure import (
    Shape,
    normalize_axis,
    shapes_are_compatible,
    broadcast_shape,
    stride_for_shape,
    permute_shape,
    Buffer,
    manual_seed,
    get_generator,
    get_default_float_dtype,
    set_default_float_dtype,
    Tensor,
    ElementSampler,
)

__version__ = "1.0.0a0"

__all__ = [
    "Tensor",
    "Shape",
    "Buffer",
    "ElementKind",
    "ElementSampler",
    "TensorErrorKind",
    "TensorError",
    "IndexOutOfRangeError",
    "DimensionOutOfRangeError",
    "ShapeIncompatibleError",
    "OrderingLengthMismatchError",
    "EmptyReductionError",
    "normalize_axis",
    "shapes_are_compatible",
    "broadcast_shape",
    "stride_for_shape",
    "permute_shape",
    "manual_seed",
    "get_generator",
    "get_default_float_dtype",
    "set_default_float_dtype",
]
