"""
Process-wide runtime configuration for StrideTensor.

This module owns the small amount of mutable global state the engine has:

- the shared `numpy.random.Generator` consumed by the random generators
  (`Tensor.random`, `Tensor.normal`, `ElementSampler`), and
- the default floating dtype used when float data or a float generator is
  requested without an explicit dtype.

Notes
-----
- Like the rest of the engine, this state is not synchronized; callers that
  reseed or change defaults from several threads must serialize themselves.
"""

from typing import Optional

import numpy as np

_DEFAULT_FLOAT_DTYPE: np.dtype = np.dtype(np.float32)
_DEFAULT_INT_DTYPE: np.dtype = np.dtype(np.int64)

_generator: np.random.Generator = np.random.default_rng()


def manual_seed(seed: Optional[int]) -> np.random.Generator:
    """
    Reseed the shared random generator.

    Parameters
    ----------
    seed : Optional[int]
        Seed for `numpy.random.default_rng`. ``None`` draws fresh entropy
        from the OS.

    Returns
    -------
    numpy.random.Generator
        The newly installed generator.
    """
    global _generator
    _generator = np.random.default_rng(seed)
    return _generator


def get_generator() -> np.random.Generator:
    """Return the shared random generator."""
    return _generator


def get_default_float_dtype() -> np.dtype:
    """Return the dtype used for float data when none is given."""
    return _DEFAULT_FLOAT_DTYPE


def set_default_float_dtype(dtype) -> None:
    """
    Change the dtype used for float data when none is given.

    Raises
    ------
    TypeError
        If `dtype` is not a floating dtype.
    """
    global _DEFAULT_FLOAT_DTYPE
    dt = np.dtype(dtype)
    if not np.issubdtype(dt, np.floating):
        raise TypeError(f"default float dtype must be floating, got {dt}")
    _DEFAULT_FLOAT_DTYPE = dt


def get_default_int_dtype() -> np.dtype:
    """Return the dtype used for integer data when none is given."""
    return _DEFAULT_INT_DTYPE
