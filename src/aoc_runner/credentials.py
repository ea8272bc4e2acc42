from __future__ import annotations

import json
from collections.abc import Callable
from dataclasses import asdict, dataclass
from pathlib import Path

import typer

from aoc_runner.errors import ConfigIOError, SerializationError
from aoc_runner.util.logging import get_logger

LOG = get_logger(__name__)
ENV_VAR = "AOC_SESSION"


@dataclass(frozen=True)
class Credential:
    session: str


def _prompt_session(text: str) -> str:
    return typer.prompt(text, hide_input=True)


class CredentialStore:
    """Single-record store for the puzzle site session token."""

    def __init__(self, path: Path, prompt: Callable[[str], str] = _prompt_session) -> None:
        self.path = path
        self.prompt = prompt

    def load(self) -> Credential:
        if self.path.exists():
            return self._read()

        session = self.prompt("Your session value").strip()
        if not session:
            raise SerializationError("An empty session value cannot be stored")
        credential = Credential(session=session)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise ConfigIOError(f"Could not create data directory {self.path.parent}") from exc
        try:
            with self.path.open("x", encoding="utf-8") as handle:
                json.dump(asdict(credential), handle, indent=2)
                handle.write("\n")
        except FileExistsError:
            LOG.warning("Credential file %s appeared while prompting; using it", self.path)
            return self._read()
        except OSError as exc:
            raise ConfigIOError(f"Could not open data file at {self.path}") from exc
        LOG.info("Stored session value at %s", self.path)
        return credential

    def forget(self) -> bool:
        try:
            self.path.unlink()
        except FileNotFoundError:
            return False
        except OSError as exc:
            raise ConfigIOError(f"Could not remove data file at {self.path}") from exc
        return True

    def _read(self) -> Credential:
        try:
            text = self.path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigIOError(f"Could not open data file at {self.path}") from exc
        try:
            raw = json.loads(text)
        except json.JSONDecodeError as exc:
            raise SerializationError(f"Could not read data file {self.path}") from exc
        if not isinstance(raw, dict) or not isinstance(raw.get("session"), str):
            raise SerializationError(f"Data file {self.path} has no session value")
        return Credential(session=raw["session"])
