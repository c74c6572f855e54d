"""
Generic reduction engine.

A reduction is described once by a `Reducer` (an accumulator dtype rule, a
combining function and a finishing transform) and evaluated by two generic
drivers:

- `reduce_full`: fold every logical element into one Python scalar.
- `reduce_axis`: fold along one dimension, keeping it as extent 1.

Both drivers gather the elements to fold into a 2-D ``(lanes, steps)`` block
of buffer values, one lane per output element, and hand the whole block to
the combining function. For axis reductions lane ``k`` starts at the buffer
offset of output position ``k`` and walks ``shape[dim]`` steps along
``stride[dim]``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional

import numpy as np

from .....domain._errors import EmptyReductionError
from .....domain._tensor import ITensor
from ...._buffer import Buffer
from ...._shape import normalize_axis, stride_for_shape
from ..._tensor_indexing import gather_offsets


def _same_dtype(dtype: np.dtype) -> np.dtype:
    return np.dtype(dtype)


def _float64(dtype: np.dtype) -> np.dtype:
    return np.dtype(np.float64)


def _index_dtype(dtype: np.dtype) -> np.dtype:
    return np.dtype(np.int64)


def _unchanged(values: np.ndarray, count: int) -> np.ndarray:
    return values


def _divide_by_count(values: np.ndarray, count: int) -> np.ndarray:
    return values / count


def _add(block: np.ndarray, dtype: np.dtype) -> np.ndarray:
    return np.add.reduce(block, axis=1, dtype=dtype)


def _nan_seeded(block: np.ndarray) -> Optional[np.ndarray]:
    """Lanes whose first element is NaN, or ``None`` for integer blocks."""
    if block.dtype.kind != "f":
        return None
    return np.isnan(block[:, 0])


def _extreme(block: np.ndarray, fold: np.ufunc) -> np.ndarray:
    # A NaN never wins a strict comparison: it is skipped unless it is the
    # seed, in which case nothing can replace it.
    values = fold.reduce(block, axis=1)
    seeded = _nan_seeded(block)
    if seeded is not None:
        values = np.where(seeded, block[:, 0], values)
    return values


def _arg_extreme(block: np.ndarray, pick: Callable, fill: float) -> np.ndarray:
    seeded = _nan_seeded(block)
    if seeded is None:
        # first occurrence wins on ties
        return pick(block, axis=1)
    index = pick(np.where(np.isnan(block), fill, block), axis=1)
    index[seeded] = 0
    return index


def _maximum(block: np.ndarray, dtype: np.dtype) -> np.ndarray:
    return _extreme(block, np.fmax)


def _minimum(block: np.ndarray, dtype: np.dtype) -> np.ndarray:
    return _extreme(block, np.fmin)


def _argmax(block: np.ndarray, dtype: np.dtype) -> np.ndarray:
    return _arg_extreme(block, np.argmax, -np.inf)


def _argmin(block: np.ndarray, dtype: np.dtype) -> np.ndarray:
    return _arg_extreme(block, np.argmin, np.inf)


@dataclass(frozen=True)
class Reducer:
    """
    Description of one named reduction.

    Attributes
    ----------
    name : str
        Operation name, used in error messages.
    accumulator : Callable[[numpy.dtype], numpy.dtype]
        Maps the input dtype to the accumulator (and result) dtype.
    combine : Callable[[numpy.ndarray, numpy.dtype], numpy.ndarray]
        Folds a ``(lanes, steps)`` block into one value per lane.
    finish : Callable[[numpy.ndarray, int], numpy.ndarray]
        Post-processes the folded lanes given the number of folded steps.
    """

    name: str
    accumulator: Callable[[np.dtype], np.dtype]
    combine: Callable[[np.ndarray, np.dtype], np.ndarray]
    finish: Callable[[np.ndarray, int], np.ndarray] = _unchanged

    def fold(self, block: np.ndarray) -> np.ndarray:
        """Reduce each row of `block` and return a 1-D accumulator array."""
        dtype = self.accumulator(block.dtype)
        values = self.combine(block, dtype)
        values = self.finish(values, block.shape[1])
        return np.ascontiguousarray(values, dtype=dtype)


SUM = Reducer("sum", _same_dtype, _add)
MEAN_FLOATING = Reducer("mean", _same_dtype, _add, _divide_by_count)
MEAN_INTEGER = Reducer("mean", _float64, _add, _divide_by_count)
MAX = Reducer("max", _same_dtype, _maximum)
MIN = Reducer("min", _same_dtype, _minimum)
ARGMAX = Reducer("argmax", _index_dtype, _argmax)
ARGMIN = Reducer("argmin", _index_dtype, _argmin)


def reduce_full(tensor: ITensor, reducer: Reducer) -> Any:
    """
    Fold every logical element of `tensor` into a single Python scalar.

    Elements are visited in row-major logical order, so views with
    overlapping or permuted strides reduce exactly like their materialized
    copies. Arg-reductions return the row-major logical index of the winner.

    Raises
    ------
    EmptyReductionError
        If the tensor has no elements.
    """
    volume = tensor.shape.volume()
    if volume == 0:
        raise EmptyReductionError(reducer.name)
    offsets = gather_offsets(tensor.shape, tensor.stride, tensor.shape)
    block = tensor.buffer.array[offsets].reshape(1, volume)
    return reducer.fold(block)[0].item()


def reduce_axis(tensor: ITensor, reducer: Reducer, dim: int) -> ITensor:
    """
    Fold `tensor` along `dim`.

    The result has the receiver's shape with ``shape[dim]`` set to 1 and
    row-major strides. Arg-reductions store the winning position along
    `dim` (not a buffer offset).

    Raises
    ------
    DimensionOutOfRangeError
        If `dim` is not a valid axis.
    EmptyReductionError
        If ``shape[dim]`` is 0.
    """
    dim = normalize_axis(dim, len(tensor.shape))
    out_shape = tensor.shape.flatten_dimension(dim)
    out_stride = stride_for_shape(out_shape)

    steps = tensor.shape[dim]
    if steps == 0:
        raise EmptyReductionError(reducer.name)

    starts = gather_offsets(tensor.shape, tensor.stride, out_shape)
    walk = np.arange(steps, dtype=np.int64) * tensor.stride[dim]
    block = tensor.buffer.array[starts[:, None] + walk[None, :]]

    values = reducer.fold(block)
    return type(tensor)._from_buffer(Buffer.wrap(values), out_shape, out_stride)


def reduce(tensor: ITensor, reducer: Reducer, dim: Optional[int] = None) -> Any:
    """Dispatch to `reduce_full` (``dim is None``) or `reduce_axis`."""
    if dim is None:
        return reduce_full(tensor, reducer)
    return reduce_axis(tensor, reducer, dim)
