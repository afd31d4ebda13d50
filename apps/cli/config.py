from __future__ import annotations
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional
import yaml

class DotDict(dict):
    __getattr__ = dict.get
    __setattr__ = dict.__setitem__
    __delattr__ = dict.__delitem__

@dataclass
class SolveCfg:
    placeholder: str = "X"
    write_solutions: bool = True
    pause_on_exit: bool = True
    show_stats: bool = False
    progress: bool = False

def load_yaml(path: str | Path) -> DotDict:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping at the top level")
    return DotDict(data)

def merge_overrides(cfg: Dict[str, Any], **overrides) -> Dict[str, Any]:
    for k, v in overrides.items():
        if v is None:
            continue
        cfg[k] = v
    return cfg

def resolve_cfg(config_path: Optional[str | Path] = None, **overrides) -> SolveCfg:
    """Defaults < YAML file < CLI overrides (None = not given). Unknown keys raise."""
    data = load_yaml(config_path) if config_path is not None else DotDict()
    merge_overrides(data, **overrides)
    known = {f.name for f in fields(SolveCfg)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"unknown config keys: {', '.join(unknown)}")
    ph = data.placeholder
    if ph is not None and (not isinstance(ph, str) or len(ph) != 1 or ph in "123456789"):
        raise ValueError(f"placeholder must be a single non-digit character, got {ph!r}")
    return SolveCfg(**data)
