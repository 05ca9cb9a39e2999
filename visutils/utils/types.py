from __future__ import annotations

from typing import List, Tuple

import numpy as np
from numpy.typing import NDArray, ArrayLike

IntArray = NDArray[np.integer]
NumArray = NDArray[np.number]

Coord = Tuple[int, int]      # (row, col)
CornerList = List[Coord]     # ordered by descending score

__all__ = [
    "ArrayLike",
    "IntArray", "NumArray",
    "Coord", "CornerList",
]
