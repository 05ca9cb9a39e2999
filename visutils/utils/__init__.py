from .tensor import (
    NormType,
    norm,
    normalized,
    scaled,
    ranged,
    extrema,
    reduction_seeds,
)
