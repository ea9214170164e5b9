from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Tuple

import yaml


@dataclass(frozen=True)
class LoadedPreset:
    preset_path: Path
    resolved: Dict[str, Any]
    loaded_files: Tuple[Path, ...]  # includes first, preset itself last


def deep_merge(base: Any, override: Any) -> Any:
    """
    Merge override into base and return the merged value.

    Mappings merge key by key; anything else (lists included) is replaced.
    """
    if isinstance(base, dict) and isinstance(override, dict):
        out = dict(base)
        for k, v in override.items():
            out[k] = deep_merge(out[k], v) if k in out else v
        return out
    if isinstance(override, list):
        return list(override)
    return override


def _read_mapping(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Preset root must be a mapping: {path}")
    return data


def load_preset(preset_path: str | Path, _seen: Tuple[Path, ...] = ()) -> LoadedPreset:
    """
    Load a simulation preset, e.g.::

      include:
        - default.yaml
      n_subjects: 200
      freeze_percentage: 0.6

    Included files are resolved relative to the preset and may include
    further files. Keys of the preset override its includes.
    """
    preset_path = Path(preset_path).expanduser().resolve()
    if preset_path in _seen:
        raise ValueError(f"Preset include cycle through {preset_path}")

    data = _read_mapping(preset_path)
    includes = data.pop("include", None) or []
    if not isinstance(includes, list):
        raise ValueError(f"'include' must be a list in {preset_path}")

    merged: Dict[str, Any] = {}
    loaded: List[Path] = []
    for rel in includes:
        if not isinstance(rel, str):
            raise ValueError(f"include entries must be strings. Got {type(rel)} in {preset_path}")
        sub = load_preset(preset_path.parent / rel, _seen + (preset_path,))
        merged = deep_merge(merged, sub.resolved)
        loaded.extend(p for p in sub.loaded_files if p not in loaded)

    merged = deep_merge(merged, data)
    loaded.append(preset_path)

    return LoadedPreset(
        preset_path=preset_path,
        resolved=merged,
        loaded_files=tuple(loaded),
    )
