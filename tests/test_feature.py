import dataclasses

import numpy as np
import pytest

from visutils.features.feature import Feature


def test_feature_defaults_and_coords():
    f = Feature(x=4, y=7)
    assert f.coords == (4, 7)
    assert f.octave == 0
    assert f.width == 1.0 and f.height == 1.0
    assert f.score == 0.0


def test_feature_normalizes_numpy_scalars():
    f = Feature(x=np.int64(2), y=np.uint16(3), octave=np.int8(1),
                width=np.float32(2.5), height=3, score=np.float32(0.5))
    assert type(f.x) is int and type(f.y) is int and type(f.octave) is int
    assert type(f.width) is float and type(f.height) is float
    assert type(f.score) is float
    assert f.height == 3.0


def test_feature_is_frozen():
    f = Feature(x=1, y=1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        f.x = 2


@pytest.mark.parametrize("kwargs", [
    {"x": -1, "y": 0},
    {"x": 0, "y": -3},
    {"x": 0.5, "y": 0},
    {"x": True, "y": 0},
    {"x": 0, "y": 0, "octave": -1},
    {"x": 0, "y": 0, "width": 0.0},
    {"x": 0, "y": 0, "height": -2.0},
    {"x": 0, "y": 0, "width": float("inf")},
    {"x": 0, "y": 0, "score": "high"},
])
def test_feature_rejects_invalid_fields(kwargs):
    with pytest.raises(ValueError):
        Feature(**kwargs)


def test_feature_dict_round_trip():
    f = Feature(x=10, y=20, octave=1, width=2.0, height=3.0, score=-0.25)
    d = f.to_dict()
    assert d == {"x": 10, "y": 20, "octave": 1, "width": 2.0, "height": 3.0, "score": -0.25}
    assert Feature.from_dict(d) == f


def test_feature_from_dict_requires_coordinates():
    with pytest.raises(ValueError):
        Feature.from_dict({"x": 1})
    assert Feature.from_dict({"x": 1, "y": 2}) == Feature(x=1, y=2)
