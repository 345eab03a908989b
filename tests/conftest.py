"""Configuration for pytest."""

import sys
from pathlib import Path


# Add the src directory to Python's path, robust across mutmut's mutants tree
def _find_src_dir(start: Path, max_up: int = 6) -> Path | None:
    p = start.resolve()
    for _ in range(max_up):
        candidate = p / "src"
        if candidate.exists():
            return candidate
        p = p.parent
    return None


src_dir = _find_src_dir(Path(__file__).parent)
if src_dir:
    sys.path.insert(0, str(src_dir))
