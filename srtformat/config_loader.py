from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml

DEFAULT_CONFIG_PATH = Path(__file__).parent / "config.default.yaml"
LOCAL_CONFIG_NAME = "srtformat.yaml"


def _read_yaml_dict(path: Path) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"YAML root must be a mapping: {path}")
    return data


def deep_merge(base: Any, override: Any) -> Any:
    """Merge override onto base.

    - dicts merge recursively
    - lists are replaced whole
    - scalars override
    """
    if isinstance(base, dict) and isinstance(override, dict):
        merged: Dict[str, Any] = {}
        for key in base.keys():
            if key in override:
                merged[key] = deep_merge(base[key], override[key])
            else:
                merged[key] = base[key]
        for key in override.keys():
            if key not in base:
                merged[key] = override[key]
        return merged
    return override


def resolve_local_path(explicit: Optional[Path] = None, cwd: Optional[Path] = None) -> Tuple[Path, bool]:
    """Return (local override path, required).

    An explicit path must exist; the implicit one in the working directory is optional.
    """
    if explicit is not None:
        return Path(explicit), True
    return (cwd or Path.cwd()) / LOCAL_CONFIG_NAME, False


def load_default_and_local(
    local_path: Optional[Path] = None,
    default_path: Path = DEFAULT_CONFIG_PATH,
    cwd: Optional[Path] = None,
) -> Tuple[Dict[str, Any], Dict[str, Any], bool]:
    if not default_path.exists():
        raise FileNotFoundError(f"Missing required config: {default_path}")
    default_cfg = _read_yaml_dict(default_path)

    path, required = resolve_local_path(local_path, cwd=cwd)
    if path.exists():
        local_cfg = _read_yaml_dict(path)
        has_local = True
    elif required:
        raise FileNotFoundError(f"Config file not found: {path}")
    else:
        local_cfg = {}
        has_local = False
    return default_cfg, local_cfg, has_local


def load_effective_config(
    local_path: Optional[Path] = None,
    default_path: Path = DEFAULT_CONFIG_PATH,
    cwd: Optional[Path] = None,
) -> Tuple[Dict[str, Any], bool]:
    default_cfg, local_cfg, has_local = load_default_and_local(
        local_path, default_path=default_path, cwd=cwd
    )
    merged = deep_merge(default_cfg, local_cfg)
    return merged, has_local
