from itertools import count
from pathlib import Path


def unique_path(path: Path) -> Path:
    """Return `path`, or `stem_2.suffix`, `stem_3.suffix`... if it is taken."""
    if not path.exists():
        return path
    for i in count(2):
        candidate = path.with_name(f"{path.stem}_{i}{path.suffix}")
        if not candidate.exists():
            return candidate
