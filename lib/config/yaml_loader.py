"""Safe YAML loader."""
from pathlib import Path
from typing import Any, Dict

import yaml


def load_yaml(path: str | Path) -> Dict[str, Any]:
    """Return the mapping stored in the YAML file at ``path``.

    An empty document yields an empty mapping.  Any other non-mapping top
    level value is rejected.
    """

    with open(path, encoding="utf-8") as fh:
        data = yaml.safe_load(fh)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping at the top level")
    return data
