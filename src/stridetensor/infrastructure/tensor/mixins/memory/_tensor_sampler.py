"""
Element samplers backing the random tensor generators.

`ElementSampler` draws values of one dtype from the shared generator (see
`manual_seed`). The distribution family depends on the element kind and is
selected with the same control-path dispatch the Tensor operators use:

- ``ElementKind.INTEGER``: discrete uniform over ``[low, high]`` (both ends
  inclusive; the full range of the dtype by default). Normal draws are
  rounded to the nearest integer.
- ``ElementKind.FLOATING``: continuous uniform over ``[low, high)`` (``[0, 1)``
  by default) and Gaussian draws.

With ``size=None`` a sampler returns a single NumPy scalar instead of an array.
"""

from __future__ import annotations

from typing import Any, Optional

import numpy as np

from ..._tensor_builder import tensor_control_path_manager
from .....domain.types._element_kind import ElementKind
from ...._buffer import element_kind_of
from ...._config import get_generator

Number = Any


class ElementSampler:
    """
    Random source for values of a fixed dtype.

    Parameters
    ----------
    dtype : numpy dtype-like
        Element type of the drawn values.
    generator : Optional[numpy.random.Generator]
        Generator to draw from. Defaults to the shared generator at draw time,
        so a later `manual_seed` call is honored.
    """

    def __init__(
        self, dtype: Any, generator: Optional[np.random.Generator] = None
    ) -> None:
        self._dtype = np.dtype(dtype)
        self._kind = element_kind_of(self._dtype)
        self._generator = generator

    @property
    def dtype(self) -> np.dtype:
        return self._dtype

    @property
    def kind(self) -> ElementKind:
        return self._kind

    @property
    def generator(self) -> np.random.Generator:
        return self._generator if self._generator is not None else get_generator()

    def _finalize(self, values: Any, size: Optional[int]) -> Any:
        if size is None:
            return self._dtype.type(values)
        return np.asarray(values).astype(self._dtype, copy=False)

    def uniform(
        self,
        low: Optional[Number] = None,
        high: Optional[Number] = None,
        size: Optional[int] = None,
    ) -> Any:
        """
        Draw uniformly distributed values.

        Parameters
        ----------
        low, high : Optional[Number]
            Bounds. Defaults depend on the element kind (see module notes).
        size : Optional[int]
            Number of values to draw. ``None`` draws one scalar.
        """
        ...

    def normal(
        self, mean: float = 0.0, std: float = 1.0, size: Optional[int] = None
    ) -> Any:
        """
        Draw normally distributed values with the given `mean` and `std`.

        Parameters
        ----------
        mean, std : float
            Distribution parameters. `std` must be non-negative.
        size : Optional[int]
            Number of values to draw. ``None`` draws one scalar.
        """
        ...


@tensor_control_path_manager(ElementSampler, ElementSampler.uniform, ElementKind.INTEGER)
def sampler_uniform_integer(
    self: ElementSampler,
    low: Optional[Number] = None,
    high: Optional[Number] = None,
    size: Optional[int] = None,
) -> Any:
    info = np.iinfo(self.dtype)
    low = info.min if low is None else int(low)
    high = info.max if high is None else int(high)
    values = self.generator.integers(
        low, high, size=size, dtype=self.dtype, endpoint=True
    )
    return self._finalize(values, size)


@tensor_control_path_manager(ElementSampler, ElementSampler.uniform, ElementKind.FLOATING)
def sampler_uniform_floating(
    self: ElementSampler,
    low: Optional[Number] = None,
    high: Optional[Number] = None,
    size: Optional[int] = None,
) -> Any:
    low = 0.0 if low is None else float(low)
    high = 1.0 if high is None else float(high)
    if self.dtype in (np.float32, np.float64):
        unit = self.generator.random(size, dtype=self.dtype)
    else:
        unit = self.generator.random(size)
    return self._finalize(low + (high - low) * unit, size)


@tensor_control_path_manager(ElementSampler, ElementSampler.normal, ElementKind.INTEGER)
def sampler_normal_integer(
    self: ElementSampler,
    mean: float = 0.0,
    std: float = 1.0,
    size: Optional[int] = None,
) -> Any:
    values = np.rint(self.generator.normal(mean, std, size))
    return self._finalize(values, size)


@tensor_control_path_manager(ElementSampler, ElementSampler.normal, ElementKind.FLOATING)
def sampler_normal_floating(
    self: ElementSampler,
    mean: float = 0.0,
    std: float = 1.0,
    size: Optional[int] = None,
) -> Any:
    return self._finalize(self.generator.normal(mean, std, size), size)


__all__ = [
    ElementSampler.__name__,
]
