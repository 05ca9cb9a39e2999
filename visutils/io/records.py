from __future__ import annotations

import logging
from typing import Iterable, List

from visutils.features.config import ExtractionConfig
from visutils.features.feature import Feature
from visutils.io._yaml import dump_yaml, load_yaml
from visutils.utils.types import CornerList

logger = logging.getLogger(__name__)


def save_config(cfg: ExtractionConfig, path: str) -> None:
    """Write an ExtractionConfig under the top-level ``extraction`` key."""
    cfg.validate()
    dump_yaml({"extraction": cfg.to_dict()}, path)


def load_config(path: str) -> ExtractionConfig:
    """
    Read an ExtractionConfig from YAML.

    A missing ``extraction`` section yields the defaults.
    """
    data = load_yaml(path)
    section = data.get("extraction", {}) or {}
    if not isinstance(section, dict):
        raise ValueError("'extraction' must be a mapping.")
    return ExtractionConfig.from_dict(section)


def dump_features(features: Iterable[Feature], path: str) -> None:
    items = [f.to_dict() for f in features]
    dump_yaml({"features": items}, path)
    logger.info("dump_features | path=%s n=%d", path, len(items))


def load_features(path: str) -> List[Feature]:
    data = load_yaml(path)
    items = data.get("features", []) or []
    if not isinstance(items, list):
        raise ValueError("'features' must be a list.")
    return [Feature.from_dict(d) for d in items]


def dump_corners(corners: CornerList, path: str) -> None:
    """Write (row, col) pairs as ``corners: [[r, c], ...]``."""
    dump_yaml({"corners": [[int(r), int(c)] for r, c in corners]}, path)


def load_corners(path: str) -> CornerList:
    data = load_yaml(path)
    items = data.get("corners", []) or []
    out = []
    for pair in items:
        if not isinstance(pair, list) or len(pair) != 2:
            raise ValueError(f"Corner entries must be [row, col] pairs, got {pair!r}.")
        out.append((int(pair[0]), int(pair[1])))
    return out
