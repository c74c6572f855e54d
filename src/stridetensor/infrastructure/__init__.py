from ._shape import (
    Shape,
    normalize_axis,
    shapes_are_compatible,
    broadcast_shape,
    stride_for_shape,
    permute_shape,
)
from ._buffer import Buffer
from ._config import (
    manual_seed,
    get_generator,
    get_default_float_dtype,
    set_default_float_dtype,
)
from .tensor import Tensor, ElementSampler
