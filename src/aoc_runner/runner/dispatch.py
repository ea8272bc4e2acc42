from __future__ import annotations

import subprocess
import time
from dataclasses import dataclass
from pathlib import Path

from aoc_runner.config import RunConfig
from aoc_runner.errors import SubprocessError
from aoc_runner.scaffold.templates import day_identifier
from aoc_runner.util.logging import get_logger

LOG = get_logger(__name__)

_UNITS = (
    (1_000_000_000, "s"),
    (1_000_000, "ms"),
    (1_000, "us"),
)


@dataclass(frozen=True)
class ExecutionRequest:
    day: int
    part: int
    input_path: Path


def build_command(request: ExecutionRequest, run_config: RunConfig) -> list[str]:
    values = {
        "day": str(request.day),
        "day_identifier": day_identifier(request.day),
        "part": str(request.part),
        "input_path": str(request.input_path),
    }
    command = []
    for arg in run_config.command:
        for key, value in values.items():
            arg = arg.replace(f"{{{key}}}", value)
        command.append(arg)
    return command


def run_day(request: ExecutionRequest, run_config: RunConfig) -> int:
    """Build and run the day's artifact, returning elapsed wall-clock nanoseconds.

    The child inherits stdout/stderr. A non-zero exit status is logged but is
    not treated as a failure of the dispatcher.
    """
    command = build_command(request, run_config)
    LOG.info("Running: %s", " ".join(command))
    start = time.perf_counter_ns()
    try:
        completed = subprocess.run(command, check=False, timeout=run_config.timeout_seconds)
    except subprocess.TimeoutExpired as exc:
        raise SubprocessError(
            f"Day {request.day} did not finish within {run_config.timeout_seconds}s"
        ) from exc
    except OSError as exc:
        raise SubprocessError(f"Could not execute the program for day {request.day}") from exc
    elapsed = time.perf_counter_ns() - start
    if completed.returncode != 0:
        LOG.warning("Day %s exited with status %s", request.day, completed.returncode)
    return elapsed


def format_duration(elapsed_ns: int) -> str:
    for threshold, suffix in _UNITS:
        if elapsed_ns >= threshold:
            return f"{elapsed_ns / threshold:.2f}{suffix}"
    return f"{elapsed_ns:.2f}ns"
