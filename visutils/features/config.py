from __future__ import annotations

from dataclasses import dataclass
from numbers import Integral
from typing import Any, List, Mapping, Optional, Union

import numpy as np

from visutils.features.corners import TieBreak, extract_corners, extract_features
from visutils.features.feature import Feature
from visutils.utils.types import ArrayLike, CornerList


@dataclass(frozen=True, slots=True)
class ExtractionConfig:
    """
    Corner extraction settings.

    Parameters
    ----------
    count
        Keep at most this many corners. None keeps all of them.
    threshold
        Response values strictly above this are corners.
    tie_break
        Handling of cells with identical response (see TieBreak).
    octave, width, height
        Values stamped on Feature records by `extract_features`.

    YAML schema
    -----------
    Maps to::

        extraction:
          count: null
          threshold: 0.0
          tie_break: KEEP_ALL
          octave: 0
          width: 1.0
          height: 1.0
    """
    count: Optional[int] = None
    threshold: float = 0.0
    tie_break: TieBreak = TieBreak.KEEP_ALL
    octave: int = 0
    width: float = 1.0
    height: float = 1.0

    def validate(self) -> None:
        if self.count is not None:
            if isinstance(self.count, (bool, np.bool_)) or not isinstance(self.count, Integral):
                raise ValueError(f"extraction.count must be an int or null, got {self.count!r}.")
            if self.count < 0:
                raise ValueError(f"extraction.count must be >= 0 or null, got {self.count}.")
        if not isinstance(self.tie_break, TieBreak):
            raise ValueError(f"extraction.tie_break must be a TieBreak, got {self.tie_break!r}.")
        if int(self.octave) < 0:
            raise ValueError(f"extraction.octave must be >= 0, got {self.octave}.")
        if float(self.width) <= 0:
            raise ValueError(f"extraction.width must be > 0, got {self.width}.")
        if float(self.height) <= 0:
            raise ValueError(f"extraction.height must be > 0, got {self.height}.")

    def to_dict(self) -> dict[str, Any]:
        return {
            "count": None if self.count is None else int(self.count),
            "threshold": float(self.threshold),
            "tie_break": self.tie_break.value,
            "octave": int(self.octave),
            "width": float(self.width),
            "height": float(self.height),
        }

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> "ExtractionConfig":
        cfg = cls(
            count=d.get("count", None),
            threshold=float(d.get("threshold", 0.0)),
            tie_break=TieBreak(d.get("tie_break", TieBreak.KEEP_ALL.value)),
            octave=int(d.get("octave", 0)),
            width=float(d.get("width", 1.0)),
            height=float(d.get("height", 1.0)),
        )
        cfg.validate()
        return cfg

    @classmethod
    def build(
        cls,
        *,
        count: Optional[int] = None,
        threshold: float = 0.0,
        tie_break: Union[str, TieBreak] = TieBreak.KEEP_ALL,
        octave: int = 0,
        width: float = 1.0,
        height: float = 1.0,
    ) -> "ExtractionConfig":
        """Validated config from plain keyword values (strings accepted for `tie_break`)."""
        tb = tie_break if isinstance(tie_break, TieBreak) else TieBreak(str(tie_break))
        cfg = cls(
            count=count,
            threshold=float(threshold),
            tie_break=tb,
            octave=int(octave),
            width=float(width),
            height=float(height),
        )
        cfg.validate()
        return cfg

    def extract(self, response: ArrayLike) -> CornerList:
        return extract_corners(
            response, self.count, self.threshold, tie_break=self.tie_break
        )

    def extract_features(self, response: ArrayLike) -> List[Feature]:
        return extract_features(
            response,
            self.count,
            self.threshold,
            tie_break=self.tie_break,
            octave=self.octave,
            width=self.width,
            height=self.height,
        )
