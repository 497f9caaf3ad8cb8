"""Safe YAML loader."""
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


def load_yaml(path: str) -> dict:
    with open(path) as fh:
        return yaml.safe_load(fh) or {}


def load_yaml_section(path: Optional[str], section: str) -> Dict[str, Any]:
    """Return ``section`` from the YAML file at ``path``.

    A missing path or file yields an empty mapping.
    """

    if not path or not Path(path).exists():
        return {}
    raw = load_yaml(path)
    if not isinstance(raw, dict):
        raise ValueError(f"{path} must contain a mapping")
    section_data = raw.get(section, {})
    if not isinstance(section_data, dict):
        raise ValueError(f"'{section}' in {path} must be a mapping")
    return section_data
