from __future__ import annotations

from pathlib import Path

from aoc_runner.errors import FileSystemError


class InputCache:
    """One file per puzzle day under ``root``; a file's existence is a cache hit."""

    def __init__(self, root: Path) -> None:
        self.root = root

    def path(self, day: int) -> Path:
        return self.root / f"day{day}"

    def has(self, day: int) -> bool:
        return self.path(day).exists()

    def read(self, day: int) -> bytes:
        path = self.path(day)
        try:
            return path.read_bytes()
        except OSError as exc:
            raise FileSystemError(f"Could not read cached input {path}") from exc

    def write(self, day: int, content: bytes) -> Path:
        path = self.path(day)
        try:
            self.root.mkdir(parents=True, exist_ok=True)
            path.write_bytes(content)
        except OSError as exc:
            raise FileSystemError(f"Could not write to file {path}") from exc
        return path
