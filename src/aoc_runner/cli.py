import os
from pathlib import Path
from typing import NoReturn

import typer
from rich.console import Console

from aoc_runner.config import APP_NAME, CREDENTIAL_FILENAME, Config, load_config
from aoc_runner.credentials import ENV_VAR, Credential, CredentialStore
from aoc_runner.days import FIRST_DAY, LAST_DAY, is_puzzle_day, resolve_day, resolve_year
from aoc_runner.errors import AocRunnerError, format_error_chain
from aoc_runner.inputs.client import InputClient
from aoc_runner.runner.dispatch import ExecutionRequest, format_duration, run_day
from aoc_runner.scaffold.generator import ScaffoldGenerator, ScaffoldResult
from aoc_runner.util.logging import configure_logging

app = typer.Typer(add_completion=False, help="Fetch, scaffold and run Advent of Code days.")
console = Console()
err_console = Console(stderr=True)

DAY_OPTION = typer.Option(
    None, "--day", "-d", min=FIRST_DAY, max=LAST_DAY, help="Puzzle day (defaults to today)."
)
CONFIG_OPTION = typer.Option(None, "--config", help="Path to an aoc-runner.toml file.")
VERBOSE_OPTION = typer.Option(False, "--verbose", "-v", help="Log each step.")


def credential_store() -> CredentialStore:
    return CredentialStore(Path(typer.get_app_dir(APP_NAME)) / CREDENTIAL_FILENAME)


def _load_credential() -> Credential:
    session = os.environ.get(ENV_VAR, "").strip()
    if session:
        return Credential(session=session)
    return credential_store().load()


def _resolve_day(day: int | None) -> int:
    resolved = resolve_day(day)
    if not is_puzzle_day(resolved):
        raise typer.BadParameter(
            f"today is day {resolved}, pass a day between {FIRST_DAY} and {LAST_DAY}",
            param_hint="'--day'",
        )
    return resolved


def _fail(exc: AocRunnerError) -> NoReturn:
    for line in format_error_chain(exc):
        err_console.print(line, style="red", markup=False, highlight=False)
    raise typer.Exit(code=1)


def _scaffold(cfg: Config, day: int) -> ScaffoldResult:
    generator = ScaffoldGenerator(cfg.layout)
    result = generator.ensure(day)
    if result.entry_point_created:
        console.print(f"Created {generator.entry_point_path(day)}")
    if result.stub_created:
        console.print(f"Created {generator.stub_path(day)}")
    return result


@app.command()
def run(
    day: int | None = DAY_OPTION,
    year: int | None = typer.Option(None, "--year", "-y", help="Puzzle year (defaults to this year)."),
    part: int = typer.Option(1, "--part", "-p", min=1, max=2, help="Which part to solve."),
    input_dir: Path | None = typer.Option(
        None, "--input-dir", "-i", help="Directory holding cached inputs."
    ),
    config: Path | None = CONFIG_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Fetch the day's input, scaffold it if needed, then build and run it."""
    configure_logging(verbose)
    resolved_day = _resolve_day(day)
    try:
        cfg = load_config(config)
        resolved_year = resolve_year(year)
        credential = _load_credential()
        client = InputClient(credential, cfg.fetch, input_dir or cfg.input_dir)
        fetched = client.fetch(resolved_year, resolved_day)
        _scaffold(cfg, resolved_day)
        request = ExecutionRequest(day=resolved_day, part=part, input_path=fetched.path)
        elapsed = run_day(request, cfg.run)
    except AocRunnerError as exc:
        _fail(exc)
    console.print(f"Time taken: {format_duration(elapsed)}")


@app.command()
def stub(
    day: int | None = DAY_OPTION,
    config: Path | None = CONFIG_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Create the entry point and problem stub for a day without running it."""
    configure_logging(verbose)
    resolved_day = _resolve_day(day)
    try:
        cfg = load_config(config)
        result = _scaffold(cfg, resolved_day)
    except AocRunnerError as exc:
        _fail(exc)
    if not (result.entry_point_created or result.stub_created):
        console.print(f"Day {resolved_day} is already scaffolded.")


@app.command()
def forget() -> None:
    """Delete the stored session value so the next run prompts again."""
    store = credential_store()
    try:
        removed = store.forget()
    except AocRunnerError as exc:
        _fail(exc)
    if removed:
        console.print(f"Removed {store.path}")
    else:
        console.print("No stored session value.")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
