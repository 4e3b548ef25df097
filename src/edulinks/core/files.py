from __future__ import annotations

import os
from pathlib import Path


def ensure_directory(path: Path) -> bool:
    """Create ``path`` if needed; return True when it did not exist before."""
    existed = path.is_dir()
    path.mkdir(parents=True, exist_ok=True)
    return not existed


def write_text_atomic(dst: Path, text: str) -> None:
    ensure_directory(dst.parent)
    temp_path = dst.parent / f".{dst.name}.tmp"
    try:
        temp_path.write_text(text, encoding="utf-8")
        os.replace(temp_path, dst)
    except BaseException:
        temp_path.unlink(missing_ok=True)
        raise
