"""Versioned code templates for the per-day artifacts.

Templates are plain strings with a single ``{{day_identifier}}`` placeholder,
replaced by :func:`render`. Rust braces in the templates are left untouched.
"""

from __future__ import annotations

import re

from aoc_runner.errors import TemplateRenderError

PLACEHOLDER = "{{day_identifier}}"
TEMPLATE_VERSION = 1

_IDENTIFIER_RE = re.compile(r"^[a-z_][a-z0-9_]*$")

ENTRY_POINT_TEMPLATE = """use std::time::Instant;

use aoc::problems::{{day_identifier}};
use aoc::Context;

fn main() -> color_eyre::Result<()> {
    color_eyre::install()?;
    let context = Context::from_args()?;

    let start = Instant::now();
    {{day_identifier}}::execute(&context)?;
    eprintln!("{{day_identifier}} part {} solved in {:?}", context.part, start.elapsed());

    Ok(())
}
"""

PROBLEM_TEMPLATE = """use color_eyre::Result;

use crate::Context;

type Parsed = String;

fn parse(input: &str) -> Result<Parsed> {
    Ok(input.to_owned())
}

fn part_1(_parsed: &Parsed) -> Result<String> {
    todo!("{{day_identifier}} part 1")
}

fn part_2(_parsed: &Parsed) -> Result<String> {
    todo!("{{day_identifier}} part 2")
}

pub fn execute(context: &Context) -> Result<()> {
    let parsed = parse(&context.input)?;
    let answer = match context.part {
        1 => part_1(&parsed)?,
        _ => part_2(&parsed)?,
    };
    println!("{}", answer);
    Ok(())
}
"""

MODULE_REGISTRATION_TEMPLATE = '#[cfg(feature = "{{day_identifier}}")] pub mod {{day_identifier}};'


def day_identifier(day: int) -> str:
    return f"day{day}"


def render(template: str, identifier: str) -> str:
    if not _IDENTIFIER_RE.match(identifier):
        raise TemplateRenderError(f"{identifier!r} is not a valid module identifier")
    if PLACEHOLDER not in template:
        raise TemplateRenderError(f"Template has no {PLACEHOLDER} placeholder")
    return template.replace(PLACEHOLDER, identifier)
