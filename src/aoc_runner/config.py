from dataclasses import dataclass, field
from pathlib import Path
import tomllib

from aoc_runner.errors import ConfigIOError, SerializationError

DEFAULT_RUN_COMMAND = (
    "cargo",
    "run",
    "--release",
    "--bin",
    "{day_identifier}",
    "--features",
    "{day_identifier}",
    "--",
    "--part",
    "{part}",
    "--input",
    "{input_path}",
)


@dataclass(frozen=True)
class AppConfig:
    input_dir: str = "inputs"


@dataclass(frozen=True)
class FetchConfig:
    base_url: str = "https://adventofcode.com"
    user_agent: str = "aoc-runner/0.1"
    timeout_seconds: float | None = 30.0


@dataclass(frozen=True)
class LayoutConfig:
    bin_dir: str = "src/bin"
    problems_dir: str = "src/problems"
    module_index: str = "src/problems/mod.rs"


@dataclass(frozen=True)
class RunConfig:
    command: tuple[str, ...] = DEFAULT_RUN_COMMAND
    timeout_seconds: float | None = None


@dataclass(frozen=True)
class Config:
    app: AppConfig = field(default_factory=AppConfig)
    fetch: FetchConfig = field(default_factory=FetchConfig)
    layout: LayoutConfig = field(default_factory=LayoutConfig)
    run: RunConfig = field(default_factory=RunConfig)

    @property
    def input_dir(self) -> Path:
        return Path(self.app.input_dir)


DEFAULT_CONFIG_PATH = Path("aoc-runner.toml")
APP_NAME = "aoc-runner"
CREDENTIAL_FILENAME = "aoc_runner.json"


def load_config(path: Path | None = None) -> Config:
    """Load the optional TOML config.

    A missing default file means built-in defaults; an explicit ``path`` must exist.
    """
    config_path = path or DEFAULT_CONFIG_PATH
    if not config_path.exists():
        if path is not None:
            raise ConfigIOError(f"Config file {config_path} does not exist")
        return Config()

    try:
        text = config_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigIOError(f"Could not read config file {config_path}") from exc
    try:
        raw = tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        raise SerializationError(f"Could not parse config file {config_path}") from exc

    app = _section(raw, "app", config_path)
    fetch = _section(raw, "fetch", config_path)
    layout = _section(raw, "layout", config_path)
    run = _section(raw, "run", config_path)
    if "command" in run:
        command = run["command"]
        if (
            not isinstance(command, list)
            or not command
            or not all(isinstance(part, str) for part in command)
        ):
            raise _invalid("run", "command", "a non-empty list of strings", config_path)
        run["command"] = tuple(command)

    try:
        return Config(
            app=AppConfig(**app),
            fetch=FetchConfig(**fetch),
            layout=LayoutConfig(**layout),
            run=RunConfig(**run),
        )
    except TypeError as exc:
        raise SerializationError(f"Invalid setting in config file {config_path}: {exc}") from exc


_STRING_FIELDS = {
    "app": ("input_dir",),
    "fetch": ("base_url", "user_agent"),
    "layout": ("bin_dir", "problems_dir", "module_index"),
}


def _invalid(section: str, key: str, expected: str, config_path: Path) -> SerializationError:
    return SerializationError(
        f"Invalid setting {section}.{key} in {config_path}: expected {expected}"
    )


def _section(raw: dict, name: str, config_path: Path) -> dict:
    section = raw.get(name, {})
    if not isinstance(section, dict):
        raise SerializationError(f"Invalid setting {name} in {config_path}: expected a table")
    section = dict(section)
    for key in _STRING_FIELDS.get(name, ()):
        if key in section and not isinstance(section[key], str):
            raise _invalid(name, key, "a string", config_path)
    if "timeout_seconds" in section:
        timeout = section["timeout_seconds"]
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout < 0:
            raise _invalid(name, "timeout_seconds", "a non-negative number", config_path)
        # TOML has no null; 0 means wait forever.
        section["timeout_seconds"] = None if timeout == 0 else timeout
    return section
