from __future__ import annotations
from dataclasses import dataclass
from numbers import Integral, Real
from typing import Any, Dict, Mapping

import numpy as np

from visutils.utils.types import Coord


@dataclass(frozen=True, slots=True)
class Feature:
    """
    Feature point produced by a detector.

    Parameters
    ----------
    x : int
        Row index of the feature centroid (0-based).
    y : int
        Column index of the feature centroid (0-based).
    octave : int
        Scale level at which the feature was detected. Filled in by the
        detector; corner extraction itself always works on a single level.
    width, height : float
        Spatial extent of the feature in pixels, both > 0.
    score : float
        Detector response strength.

    Notes
    -----
    Coordinates follow image indexing ``img[x, y] = img[row, col]``, i.e. the
    same order as the pairs returned by `extract_corners`.
    """
    x: int
    y: int
    octave: int = 0
    width: float = 1.0
    height: float = 1.0
    score: float = 0.0

    def __post_init__(self):
        for name in ("x", "y", "octave"):
            v = getattr(self, name)
            if isinstance(v, (bool, np.bool_)) or not isinstance(v, Integral) or v < 0:
                raise ValueError(f"Feature.{name} must be a non-negative int, got {v!r}.")
            object.__setattr__(self, name, int(v))

        for name in ("width", "height"):
            v = getattr(self, name)
            if not isinstance(v, Real) or not np.isfinite(v) or v <= 0:
                raise ValueError(f"Feature.{name} must be a positive finite number, got {v!r}.")
            object.__setattr__(self, name, float(v))

        if not isinstance(self.score, Real):
            raise ValueError(f"Feature.score must be a real number, got {self.score!r}.")
        object.__setattr__(self, "score", float(self.score))

    @property
    def coords(self) -> Coord:
        """(row, col) of the feature centroid."""
        return (self.x, self.y)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "x": self.x,
            "y": self.y,
            "octave": self.octave,
            "width": self.width,
            "height": self.height,
            "score": self.score,
        }

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> "Feature":
        try:
            x, y = d["x"], d["y"]
        except KeyError as e:
            raise ValueError(f"Feature mapping is missing required key {e.args[0]!r}.") from e
        return cls(
            x=x,
            y=y,
            octave=d.get("octave", 0),
            width=d.get("width", 1.0),
            height=d.get("height", 1.0),
            score=d.get("score", 0.0),
        )
