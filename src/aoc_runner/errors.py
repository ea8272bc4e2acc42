"""Error taxonomy for the runner.

Every failure the CLI reports derives from :class:`AocRunnerError`. Lower level
exceptions are chained with ``raise ... from`` so the full context can be
printed with :func:`format_error_chain`.
"""

from __future__ import annotations


class AocRunnerError(RuntimeError):
    pass


class ConfigIOError(AocRunnerError):
    """The data directory, credential file or config file could not be used."""


class SerializationError(AocRunnerError):
    """Stored content (credential or config) could not be parsed."""


class RemoteFetchError(AocRunnerError):
    def __init__(self, message: str, year: int, day: int, status: int | None = None) -> None:
        super().__init__(message)
        self.year = year
        self.day = day
        self.status = status


class FileSystemError(AocRunnerError):
    """A cache, artifact or module index file could not be written."""


class TemplateRenderError(AocRunnerError):
    pass


class ScaffoldConflict(AocRunnerError):
    """An artifact appeared between the existence check and its creation."""


class SubprocessError(AocRunnerError):
    pass


def format_error_chain(exc: BaseException) -> list[str]:
    lines = [f"error: {exc}"]
    seen = {id(exc)}
    cause = exc.__cause__
    while cause is not None and id(cause) not in seen:
        seen.add(id(cause))
        lines.append(f"caused by: {cause}")
        cause = cause.__cause__
    return lines
