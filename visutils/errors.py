from __future__ import annotations


class VisutilsError(Exception):
    """Base class for errors raised by visutils."""


class InvalidShapeError(VisutilsError, ValueError):
    """Array dimensionality does not match what the operation requires."""

    def __init__(self, expected_ndim: int, shape) -> None:
        self.expected_ndim = int(expected_ndim)
        self.shape = tuple(shape)
        super().__init__(
            f"Expected a {self.expected_ndim}D array, got shape {self.shape} "
            f"({len(self.shape)}D)."
        )


class DegenerateRangeError(VisutilsError, ZeroDivisionError):
    """Range remapping of a tensor whose minimum equals its maximum."""

    def __init__(self, value) -> None:
        self.value = value
        super().__init__(f"Cannot remap a constant tensor (min == max == {value}).")
