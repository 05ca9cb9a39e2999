import logging

from .errors import (
    VisutilsError,
    InvalidShapeError,
    DegenerateRangeError,
)
from .utils.tensor import (
    NormType,
    norm,
    normalized,
    scaled,
    ranged,
    extrema,
)
from .features import (
    Feature,
    TieBreak,
    ExtractionConfig,
    extract_corners,
    extract_features,
)

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
