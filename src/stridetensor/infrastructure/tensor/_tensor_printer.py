"""
Nested-bracket text rendering of tensors.

The renderer walks the tensor one innermost row at a time without recursing
over dimensions. It keeps a position vector over every dimension except the
last, plus the running buffer offset of the current row, and derives the
opening/closing brackets from how positions roll over.

Example (shape (2, 2, 2))::

    Tensor {
      [[[0,1],
        [2,3]],

       [[4,5],
        [6,7]]]
    }
"""

from __future__ import annotations

from ...domain._tensor import ITensor
from .._shape import normalize_axis

DELIMITER = ","
INDENT = "  "


def _render_row(tensor: ITensor, offset: int) -> str:
    last = normalize_axis(-1, tensor.ndim)
    extent = tensor.shape[last]
    step = tensor.stride[last]
    data = tensor.buffer.array
    return "[" + DELIMITER.join(str(data[offset + i * step]) for i in range(extent)) + "]"


def render_tensor(tensor: ITensor) -> str:
    """
    Render `tensor` as nested-bracket text.

    Rows are newline-delimited, values within a row comma-separated. Each
    block boundary of a higher dimension adds one blank line per closed
    dimension beyond the innermost one. A 0-dimensional tensor renders as a
    single value.
    """
    shape, stride = tensor.shape, tensor.stride
    ndim = len(shape)

    if ndim == 0:
        return "Tensor { " + str(tensor.buffer.array[0]) + " }"
    if shape.volume() == 0:
        return "Tensor { [] }"
    if ndim == 1:
        return "Tensor {\n" + INDENT + _render_row(tensor, 0) + "\n}"

    # positions over every dimension except the innermost one
    length = ndim - 1
    position = [0] * length
    offset = 0
    parts = ["Tensor {"]

    while position[0] < shape[0]:
        parts.append("\n" + INDENT)

        # dimensions after `overflow` just rolled over to 0 and need a new "["
        overflow = length - 1
        while overflow >= 0 and position[overflow] == 0:
            overflow -= 1
        parts.append("".join(" " if i <= overflow else "[" for i in range(length)))

        parts.append(_render_row(tensor, offset))
        offset += stride[length - 1]
        position[length - 1] += 1

        # carry: e.g. shape (2, 3, 4), position [0, 3] -> [1, 0]
        i = length - 1
        while i > 0 and position[i] >= shape[i]:
            parts.append("]")
            offset -= stride[i] * shape[i]
            position[i] = 0
            offset += stride[i - 1]
            position[i - 1] += 1
            i -= 1

        if position[0] < shape[0]:
            parts.append(",")
            parts.append("\n" * (length - 1 - i))

    parts.append("]\n}")
    return "".join(parts)
