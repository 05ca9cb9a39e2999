from __future__ import annotations
from typing import Any, Dict

import numpy as np


def _dumper():
    try:
        import yaml
    except ImportError as e:
        raise ImportError("PyYAML is required to write YAML. Install with `pip install pyyaml`.") from e

    class _FeatureDumper(yaml.SafeDumper):
        pass

    def is_scalar(x: Any) -> bool:
        return isinstance(x, (int, float, bool, str))

    def seq_representer(dumper: yaml.Dumper, seq):
        seq = list(seq)
        # (row, col) pairs and other short scalar vectors -> flow: [r, c]
        if len(seq) in (2, 3) and all(is_scalar(v) for v in seq):
            return dumper.represent_sequence("tag:yaml.org,2002:seq", seq, flow_style=True)
        return dumper.represent_sequence("tag:yaml.org,2002:seq", seq, flow_style=False)

    def numpy_scalar_representer(dumper: yaml.Dumper, v: np.generic):
        return dumper.represent_data(v.item())

    def ndarray_representer(dumper: yaml.Dumper, a: np.ndarray):
        return dumper.represent_data(a.tolist())

    _FeatureDumper.add_representer(list, seq_representer)
    _FeatureDumper.add_representer(tuple, seq_representer)
    _FeatureDumper.add_multi_representer(np.generic, numpy_scalar_representer)
    _FeatureDumper.add_representer(np.ndarray, ndarray_representer)
    return yaml, _FeatureDumper


def dump_yaml(data: Dict[str, Any], path: str) -> None:
    yaml, dumper = _dumper()
    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(
            data,
            f,
            Dumper=dumper,
            sort_keys=False,
            default_flow_style=False,
            width=120,
            indent=2,
        )


def load_yaml(path: str) -> Dict[str, Any]:
    try:
        import yaml
    except ImportError as e:
        raise ImportError("PyYAML is required to read YAML. Install with `pip install pyyaml`.") from e
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if not isinstance(data, dict):
        raise ValueError("YAML root must be a mapping (dict).")
    return data
