from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import requests

from aoc_runner.config import FetchConfig
from aoc_runner.credentials import Credential
from aoc_runner.days import resolve_year
from aoc_runner.errors import RemoteFetchError
from aoc_runner.util.cache import InputCache
from aoc_runner.util.logging import get_logger

LOG = get_logger(__name__)


@dataclass(frozen=True)
class FetchResult:
    path: Path
    content: bytes
    from_cache: bool


class InputClient:
    def __init__(
        self,
        credential: Credential,
        fetch_config: FetchConfig,
        cache_root: Path,
    ) -> None:
        self.fetch_config = fetch_config
        self.cache = InputCache(cache_root)
        self.session = requests.Session()
        self.session.headers.update(
            {
                "User-Agent": fetch_config.user_agent,
                "Cookie": f"session={credential.session}",
            }
        )

    def input_url(self, year: int, day: int) -> str:
        return f"{self.fetch_config.base_url.rstrip('/')}/{year}/day/{day}/input"

    def fetch(self, year: int, day: int) -> FetchResult:
        path = self.cache.path(day)
        if self.cache.has(day):
            LOG.info("Cache hit: %s", path)
            return FetchResult(path=path, content=self.cache.read(day), from_cache=True)

        body = self._download(year, day)
        self.cache.write(day, body)
        LOG.info("Cached input for day %s of %s at %s", day, year, path)
        return FetchResult(path=path, content=body, from_cache=False)

    def _download(self, year: int, day: int) -> bytes:
        url = self.input_url(year, day)
        LOG.info("Fetching: %s", url)
        try:
            resp = self.session.get(url, timeout=self.fetch_config.timeout_seconds)
        except requests.RequestException as exc:
            raise RemoteFetchError(
                f"Could not fetch the input for day {day} of AoC {year}", year=year, day=day
            ) from exc
        if not resp.ok:
            raise RemoteFetchError(
                f"Error accessing the input for day {day} of AoC {year} (HTTP {resp.status_code})",
                year=year,
                day=day,
                status=resp.status_code,
            )
        return resp.content


def fetch_input(
    year: int | None,
    day: int,
    credential: Credential,
    cache_root: Path,
    fetch_config: FetchConfig | None = None,
) -> bytes:
    client = InputClient(credential, fetch_config or FetchConfig(), cache_root)
    return client.fetch(resolve_year(year), day).content
