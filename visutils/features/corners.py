"""
Corner extraction from a detector response map.

A response map (Harris, Shi-Tomasi, ...) is a 2D array where each cell holds
the detector strength at that pixel. Extraction keeps the cells strictly above
a threshold, ranks them by descending response and optionally keeps the
top-K. No spatial suppression is performed here.
"""

from __future__ import annotations

import logging
from enum import Enum
from numbers import Integral, Real
from typing import List, Optional, Tuple, Union

import numpy as np

from visutils.errors import InvalidShapeError
from visutils.features.feature import Feature
from visutils.utils.types import ArrayLike, CornerList, IntArray, NumArray

logger = logging.getLogger(__name__)


class TieBreak(str, Enum):
    """
    Policy for cells sharing exactly the same response value.

    KEEP_ALL
        Keep every tied cell, in row-major order within the tie.
    FIRST_WINS
        Keep only the first tied cell in row-major order.
    LAST_WINS
        Keep only the last tied cell in row-major order. This is what a
        response-keyed lookup table yields and is kept for compatibility
        with detectors that relied on it.
    """
    KEEP_ALL = "KEEP_ALL"
    FIRST_WINS = "FIRST_WINS"
    LAST_WINS = "LAST_WINS"


def _check_count(count) -> Optional[int]:
    if count is None:
        return None
    if isinstance(count, (bool, np.bool_)) or not isinstance(count, Integral):
        raise TypeError(f"count must be an int or None, got {type(count).__name__}.")
    if count < 0:
        raise ValueError(f"count must be >= 0 (None means unlimited), got {count}.")
    return int(count)


def _check_threshold(threshold):
    if isinstance(threshold, (bool, np.bool_)) or not isinstance(threshold, Real):
        raise TypeError(f"threshold must be a real number, got {type(threshold).__name__}.")
    return threshold


def _response_map(response: ArrayLike) -> NumArray:
    r = np.asarray(response)
    if r.ndim != 2:
        raise InvalidShapeError(2, r.shape)
    if r.dtype.kind not in ("u", "i", "f"):
        raise TypeError(f"response must be an integer or float array, got dtype {r.dtype}.")
    return r


def _rank(scores: NumArray, tie_break: TieBreak) -> IntArray:
    """Indices into `scores` by descending score, ties resolved by `tie_break`."""
    n = scores.size
    if tie_break is TieBreak.KEEP_ALL:
        # ascending score, descending scan index; reversed -> descending score, ascending index
        return np.lexsort((-np.arange(n), scores))[::-1]

    if tie_break is TieBreak.FIRST_WINS:
        _, keep = np.unique(scores, return_index=True)
    else:
        _, rkeep = np.unique(scores[::-1], return_index=True)
        keep = n - 1 - rkeep
    # np.unique sorts ascending
    return keep[::-1]


def _ranked_cells(
    response: ArrayLike,
    count,
    threshold,
    tie_break: Union[str, TieBreak],
) -> Tuple[IntArray, IntArray, NumArray]:
    r = _response_map(response)
    count = _check_count(count)
    threshold = _check_threshold(threshold)
    tie_break = TieBreak(tie_break)

    if r.size == 0:
        empty = np.empty(0, dtype=np.intp)
        return empty, empty, r.reshape(-1)

    # np.nonzero scans in row-major order
    rows, cols = np.nonzero(r > threshold)
    scores = r[rows, cols]

    order = _rank(scores, tie_break)
    if count is not None:
        order = order[:count]

    logger.debug(
        "extract | shape=%s threshold=%s candidates=%d kept=%d tie_break=%s",
        r.shape, threshold, scores.size, order.size, tie_break.value,
    )
    return rows[order], cols[order], scores[order]


def extract_corners(
    response: ArrayLike,
    count: Optional[int] = None,
    threshold=0,
    *,
    tie_break: Union[str, TieBreak] = TieBreak.KEEP_ALL,
) -> CornerList:
    """
    Extract corner coordinates from a response map.

    Parameters
    ----------
    response : array_like, shape (H, W)
        Corner response map, e.g. the output of a Harris or Shi-Tomasi
        detector.
    count : int or None
        Maximum number of corners returned. None (default) returns every
        cell above the threshold, 0 returns nothing.
    threshold : real
        Cells with response strictly greater than this are corners.
        NaN cells never qualify.
    tie_break : TieBreak or str
        How cells with identical response are handled (default KEEP_ALL).

    Returns
    -------
    list of (row, col)
        Plain-int coordinate pairs ordered by descending response.
        An empty map gives an empty list.

    Raises
    ------
    InvalidShapeError
        If `response` is not 2D.
    ValueError, TypeError
        On a negative or non-integer `count`, or a non-real `threshold`.
    """
    rows, cols, _ = _ranked_cells(response, count, threshold, tie_break)
    return list(zip(rows.tolist(), cols.tolist()))


def extract_features(
    response: ArrayLike,
    count: Optional[int] = None,
    threshold=0,
    *,
    tie_break: Union[str, TieBreak] = TieBreak.KEEP_ALL,
    octave: int = 0,
    width: float = 1.0,
    height: float = 1.0,
) -> List[Feature]:
    """
    Same selection as `extract_corners`, wrapped into Feature records.

    Each feature takes its score from the response map; `octave`, `width`
    and `height` are copied onto every feature.
    """
    rows, cols, scores = _ranked_cells(response, count, threshold, tie_break)
    return [
        Feature(x=r, y=c, octave=octave, width=width, height=height, score=s)
        for r, c, s in zip(rows.tolist(), cols.tolist(), scores.tolist())
    ]
