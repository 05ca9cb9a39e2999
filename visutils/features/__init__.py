from .feature import Feature
from .corners import (
    TieBreak,
    extract_corners,
    extract_features,
)
from .config import ExtractionConfig
