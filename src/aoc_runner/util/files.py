from __future__ import annotations

import os
import tempfile
from pathlib import Path

from aoc_runner.errors import FileSystemError, ScaffoldConflict


def create_exclusive(path: Path, content: str) -> None:
    """Create ``path`` holding ``content``, failing if it already exists.

    The content goes to a temporary file in the same directory first and is
    then hard-linked into place, so ``path`` is either absent or complete.
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", dir=path.parent)
    except OSError as exc:
        raise FileSystemError(f"Could not prepare a temporary file for {path}") from exc

    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as handle:
            handle.write(content)
        os.link(tmp_path, path)
    except FileExistsError as exc:
        raise ScaffoldConflict(f"{path} was created by someone else in the meantime") from exc
    except OSError as exc:
        raise FileSystemError(f"Could not create {path}") from exc
    finally:
        tmp_path.unlink(missing_ok=True)


def append_line_once(path: Path, line: str) -> bool:
    """Append ``line`` to ``path`` unless an identical line is already there."""
    try:
        if path.exists():
            existing = path.read_text(encoding="utf-8")
            if line in existing.splitlines():
                return False
        else:
            existing = ""
            path.parent.mkdir(parents=True, exist_ok=True)
        prefix = "" if not existing or existing.endswith("\n") else "\n"
        with path.open("a", encoding="utf-8", newline="\n") as handle:
            handle.write(f"{prefix}{line}\n")
    except OSError as exc:
        raise FileSystemError(f"Could not append to {path}") from exc
    return True
