import numpy as np
import pytest

from visutils.features import ExtractionConfig, Feature, extract_corners, extract_features
from visutils.io import (
    dump_yaml,
    load_yaml,
    save_config,
    load_config,
    dump_features,
    load_features,
    dump_corners,
    load_corners,
)


def test_config_yaml_round_trip(tmp_path):
    path = str(tmp_path / "extraction.yaml")
    cfg = ExtractionConfig.build(count=10, threshold=0.01, tie_break="FIRST_WINS")
    save_config(cfg, path)

    assert load_yaml(path)["extraction"]["tie_break"] == "FIRST_WINS"
    assert load_config(path) == cfg


def test_load_config_without_section_gives_defaults(tmp_path):
    path = tmp_path / "other.yaml"
    path.write_text("unrelated: 1\n", encoding="utf-8")
    assert load_config(str(path)) == ExtractionConfig()


def test_load_config_validates(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("extraction:\n  count: -4\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(str(path))


def test_features_yaml_round_trip(tmp_path, response):
    path = str(tmp_path / "features.yaml")
    feats = extract_features(response, octave=1, width=2.0, height=2.0)
    dump_features(feats, path)
    assert load_features(path) == feats


def test_corners_are_written_in_flow_style(tmp_path, response):
    path = tmp_path / "corners.yaml"
    corners = extract_corners(response)
    dump_corners(corners, str(path))

    text = path.read_text(encoding="utf-8")
    assert "- [1, 1]" in text
    assert load_corners(str(path)) == corners


def test_dump_yaml_handles_numpy_values(tmp_path):
    path = str(tmp_path / "np.yaml")
    dump_yaml({"score": np.float32(0.5), "n": np.int64(3), "pair": (1, 2),
               "map": np.array([[1, 2], [3, 4]])}, path)
    data = load_yaml(path)
    assert data == {"score": 0.5, "n": 3, "pair": [1, 2], "map": [[1, 2], [3, 4]]}


def test_load_yaml_rejects_non_mapping_root(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_yaml(str(path))


def test_load_corners_rejects_malformed_pairs(tmp_path):
    path = tmp_path / "corners.yaml"
    path.write_text("corners:\n  - [1, 2, 3]\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_corners(str(path))
