from __future__ import annotations

import logging
from enum import Enum
from functools import reduce
from numbers import Real
from typing import Tuple, Union

import numpy as np

from visutils.errors import DegenerateRangeError
from visutils.utils.types import NumArray, ArrayLike

logger = logging.getLogger(__name__)

############################
# TENSOR NORMS AND TRANSFORMS
############################


class NormType(str, Enum):
    """Kind of norm computed by `norm`."""
    INF = "INF"  # max(x)
    L1 = "L1"    # running fold abs(acc + x)
    L2 = "L2"    # sqrt(sum(x**2))


def _numeric_dtype(t: np.ndarray) -> np.dtype:
    dt = t.dtype
    if dt.kind not in ("u", "i", "f"):
        raise TypeError(f"Expected an integer or float array, got dtype {dt}.")
    return dt


def _inplace_target(tensor, name: str = "tensor") -> np.ndarray:
    # np.asarray would copy lists and break the identity of the returned view
    if not isinstance(tensor, np.ndarray):
        raise TypeError(
            f"{name} must be a numpy.ndarray to be modified in place, got {type(tensor).__name__}."
        )
    _numeric_dtype(tensor)
    if not tensor.flags.writeable:
        raise ValueError(f"{name} is read-only.")
    return tensor


def _real_scalar(v, name: str):
    if isinstance(v, (bool, np.bool_)) or not isinstance(v, Real):
        raise TypeError(f"{name} must be a real number, got {type(v).__name__}.")
    return v


def reduction_seeds(dtype) -> Tuple[np.generic, np.generic]:
    """
    Seeds used by the max/min reductions for a given dtype.

    Returns
    -------
    (low, high)
        ``low`` seeds maximum reductions, ``high`` seeds minimum reductions.

        - integers: ``(iinfo.min, iinfo.max)``
        - floats:   ``(finfo.tiny, finfo.max)``

    Notes
    -----
    For floats ``low`` is the smallest *positive normal* value, not ``-max``.
    A maximum taken over all-negative (or all-subnormal) floats therefore
    returns ``finfo.tiny`` rather than the true largest element.
    """
    dt = np.dtype(dtype)
    if dt.kind == "f":
        fi = np.finfo(dt)
        return dt.type(fi.tiny), dt.type(fi.max)
    if dt.kind in ("u", "i"):
        ii = np.iinfo(dt)
        return dt.type(ii.min), dt.type(ii.max)
    raise TypeError(f"No reduction seeds for dtype {dt}.")


def norm(tensor: ArrayLike, norm_type: Union[str, NormType]):
    """
    Norm of a vector, matrix or higher-order tensor.

    Parameters
    ----------
    tensor : array_like
        Integer or float array of any shape.
    norm_type : NormType or str
        INF, L1 or L2.

    Returns
    -------
    scalar
        Numpy scalar of the tensor dtype for float input. Integer input is
        accumulated wide: INF keeps the dtype, L1 returns int64 (float64 for
        uint64 data), L2 returns float64.

    Notes
    -----
    - INF is a seeded maximum (see `reduction_seeds`), not max(abs(x)).
    - L1 folds ``acc = abs(acc + x)`` in row-major order starting from zero.
      It matches sum(abs(x)) only when no partial sum goes negative,
      e.g. ``[1, -2, 3]`` gives 4 where the textbook 1-norm is 6.
    - An empty tensor returns the seed: INF -> low seed, L1/L2 -> 0.
    """
    t = np.asarray(tensor)
    dt = _numeric_dtype(t)
    norm_type = NormType(norm_type)

    if norm_type is NormType.INF:
        low, _ = reduction_seeds(dt)
        return np.max(t, initial=low)
    # integer input accumulates wide
    wide = dt.kind in ("u", "i")
    if norm_type is NormType.L1:
        seed = np.int64(0) if wide else dt.type(0)
        return reduce(lambda acc, v: abs(acc + v), t.flat, seed)
    if wide:
        return np.sqrt(np.sum(np.square(t, dtype=np.float64)))
    return np.sqrt(np.sum(np.square(t)))


def normalized(tensor: NumArray, norm_type: Union[str, NormType] = NormType.L2) -> NumArray:
    """
    Divide a tensor in place by its norm and return it.

    Integer tensors are divided in extended precision and cast back,
    so the result is truncated. A zero norm is not guarded: floats end up
    inf/NaN, integers take whatever the cast of inf/NaN produces.
    """
    t = _inplace_target(tensor)
    norm_type = NormType(norm_type)
    n = norm(t, norm_type)
    if n == 0:
        logger.warning("normalized: %s norm is zero, result will not be finite.", norm_type.value)

    with np.errstate(divide="ignore", invalid="ignore"):
        if t.dtype.kind == "f":
            np.divide(t, n, out=t)
        else:
            np.copyto(t, t.astype(np.longdouble) / n, casting="unsafe")
    return t


def scaled(tensor: NumArray, alpha=1, beta=0) -> NumArray:
    """
    In-place affine scaling ``x = alpha * x + beta``.

    Results are cast back into the tensor dtype (integer tensors truncate).
    Returns the input tensor.
    """
    t = _inplace_target(tensor)
    alpha = _real_scalar(alpha, "alpha")
    beta = _real_scalar(beta, "beta")
    np.copyto(t, alpha * t + beta, casting="unsafe")
    return t


def extrema(tensor: ArrayLike):
    """
    Seeded (min, max) of a tensor.

    The minimum is seeded at the dtype maximum and the maximum at the low seed
    of `reduction_seeds`, so an empty tensor returns ``(high, low)``.
    """
    t = np.asarray(tensor)
    low, high = reduction_seeds(_numeric_dtype(t))
    return np.min(t, initial=high), np.max(t, initial=low)


def ranged(tensor: NumArray, min_value=0, max_value=1, *, strict: bool = False) -> NumArray:
    """
    In-place remap of the tensor value range onto ``[min_value, max_value]``.

    Every element becomes::

        (max_value - min_value) * ((x - lo) / (hi - lo)) + min_value

    with ``(lo, hi) = extrema(tensor)``.

    Parameters
    ----------
    tensor : np.ndarray
        Writeable integer or float array. Integer tensors are remapped in
        extended precision and truncated on the way back.
    min_value, max_value : real
        Target range.
    strict : bool
        If True, a constant tensor (``hi == lo``) raises DegenerateRangeError
        and the tensor is left untouched. Otherwise the division by zero is
        carried out with numpy semantics (NaN/inf) and a warning is logged.

    Returns
    -------
    np.ndarray
        The input tensor.
    """
    t = _inplace_target(tensor)
    min_value = _real_scalar(min_value, "min_value")
    max_value = _real_scalar(max_value, "max_value")
    if t.size == 0:
        return t

    lo, hi = extrema(t)
    if hi == lo:
        if strict:
            raise DegenerateRangeError(lo)
        logger.warning("ranged: constant tensor (min == max == %s), result will not be finite.", lo)

    src = t
    if t.dtype.kind != "f":
        src, lo, hi = t.astype(np.longdouble), np.longdouble(lo), np.longdouble(hi)

    span = max_value - min_value
    with np.errstate(divide="ignore", invalid="ignore"):
        np.copyto(t, span * ((src - lo) / (hi - lo)) + min_value, casting="unsafe")
    return t
