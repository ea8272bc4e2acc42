from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from aoc_runner.config import LayoutConfig
from aoc_runner.errors import FileSystemError
from aoc_runner.scaffold.templates import (
    ENTRY_POINT_TEMPLATE,
    MODULE_REGISTRATION_TEMPLATE,
    PROBLEM_TEMPLATE,
    day_identifier,
    render,
)
from aoc_runner.util.files import append_line_once, create_exclusive
from aoc_runner.util.logging import get_logger

LOG = get_logger(__name__)


@dataclass(frozen=True)
class ScaffoldResult:
    day: int
    entry_point_created: bool
    stub_created: bool


class ScaffoldGenerator:
    def __init__(
        self,
        layout: LayoutConfig,
        root: Path = Path("."),
        entry_point_template: str = ENTRY_POINT_TEMPLATE,
        problem_template: str = PROBLEM_TEMPLATE,
    ) -> None:
        self.root = root
        self.bin_dir = root / layout.bin_dir
        self.problems_dir = root / layout.problems_dir
        self.module_index = root / layout.module_index
        self.entry_point_template = entry_point_template
        self.problem_template = problem_template

    def entry_point_path(self, day: int) -> Path:
        return self.bin_dir / f"{day_identifier(day)}.rs"

    def stub_path(self, day: int) -> Path:
        return self.problems_dir / f"{day_identifier(day)}.rs"

    def ensure_entry_point(self, day: int) -> bool:
        path = self.entry_point_path(day)
        if path.exists():
            LOG.info("Entry point for day %s already exists at %s", day, path)
            return False
        content = render(self.entry_point_template, day_identifier(day))
        create_exclusive(path, content)
        LOG.info("Created entry point %s", path)
        return True

    def ensure_stub(self, day: int) -> bool:
        path = self.stub_path(day)
        if path.exists():
            LOG.info("Problem stub for day %s already exists at %s", day, path)
            return False
        identifier = day_identifier(day)
        content = render(self.problem_template, identifier)
        registration = render(MODULE_REGISTRATION_TEMPLATE, identifier)
        create_exclusive(path, content)
        try:
            registered = append_line_once(self.module_index, registration)
        except FileSystemError:
            # A stub only exists alongside its registration.
            path.unlink(missing_ok=True)
            raise
        LOG.info("Created problem stub %s", path)
        if not registered:
            LOG.warning("%s already registered in %s", identifier, self.module_index)
        return True

    def ensure(self, day: int) -> ScaffoldResult:
        return ScaffoldResult(
            day=day,
            entry_point_created=self.ensure_entry_point(day),
            stub_created=self.ensure_stub(day),
        )
