from ._yaml import dump_yaml, load_yaml
from .records import (
    save_config,
    load_config,
    dump_features,
    load_features,
    dump_corners,
    load_corners,
)
