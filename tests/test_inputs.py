import pytest
import requests

from aoc_runner.config import FetchConfig
from aoc_runner.credentials import Credential
from aoc_runner.errors import FileSystemError, RemoteFetchError
from aoc_runner.inputs import client as input_client
from aoc_runner.inputs.client import InputClient, fetch_input
from aoc_runner.util.cache import InputCache


class DummyResponse:
    def __init__(self, content: bytes, status_code: int = 200) -> None:
        self.content = content
        self.status_code = status_code

    @property
    def ok(self) -> bool:
        return self.status_code < 400


def _client(tmp_path) -> InputClient:
    return InputClient(Credential(session="abc123"), FetchConfig(), tmp_path)


def test_cache_hit_skips_fetch(tmp_path, monkeypatch) -> None:
    client = _client(tmp_path)
    (tmp_path / "day3").write_bytes(b"cached\n\x00raw")

    def fail_get(*_args, **_kwargs):
        raise AssertionError("network fetch should not happen on cache hit")

    monkeypatch.setattr(client.session, "get", fail_get)

    result = client.fetch(2022, 3)
    assert result.from_cache is True
    assert result.content == b"cached\n\x00raw"
    assert result.path == tmp_path / "day3"


def test_cache_miss_writes_through(tmp_path, monkeypatch) -> None:
    calls = []

    def fake_get(self, url, **kwargs):
        calls.append((url, self.headers["Cookie"], kwargs.get("timeout")))
        return DummyResponse(b"1\n2\n3\n")

    monkeypatch.setattr(requests.Session, "get", fake_get)

    body = fetch_input(2020, 5, Credential(session="abc123"), tmp_path)

    assert body == b"1\n2\n3\n"
    assert calls == [("https://adventofcode.com/2020/day/5/input", "session=abc123", 30.0)]
    files = list(tmp_path.iterdir())
    assert files == [tmp_path / "day5"]
    assert files[0].read_bytes() == b"1\n2\n3\n"


def test_cache_root_is_created(tmp_path, monkeypatch) -> None:
    cache_root = tmp_path / "nested" / "inputs"
    client = InputClient(Credential(session="abc123"), FetchConfig(), cache_root)
    monkeypatch.setattr(client.session, "get", lambda *_args, **_kwargs: DummyResponse(b"x"))

    result = client.fetch(2023, 12)
    assert result.from_cache is False
    assert (cache_root / "day12").read_bytes() == b"x"


def test_not_found_raises_with_context(tmp_path, monkeypatch) -> None:
    client = _client(tmp_path)
    monkeypatch.setattr(
        client.session, "get", lambda *_args, **_kwargs: DummyResponse(b"nope", status_code=404)
    )

    with pytest.raises(RemoteFetchError) as excinfo:
        client.fetch(2021, 1)

    message = str(excinfo.value)
    assert "1" in message
    assert "2021" in message
    assert excinfo.value.status == 404
    assert (excinfo.value.year, excinfo.value.day) == (2021, 1)
    assert list(tmp_path.iterdir()) == []


def test_transport_failure_is_remote_fetch_error(tmp_path, monkeypatch) -> None:
    client = _client(tmp_path)

    def broken_get(*_args, **_kwargs):
        raise requests.ConnectionError("boom")

    monkeypatch.setattr(client.session, "get", broken_get)

    with pytest.raises(RemoteFetchError) as excinfo:
        client.fetch(2019, 9)

    assert excinfo.value.status is None
    assert isinstance(excinfo.value.__cause__, requests.ConnectionError)
    assert list(tmp_path.iterdir()) == []


def test_fetch_input_defaults_to_current_year(tmp_path, monkeypatch) -> None:
    urls = []

    def fake_get(self, url, **_kwargs):
        urls.append(url)
        return DummyResponse(b"ok")

    monkeypatch.setattr(requests.Session, "get", fake_get)
    monkeypatch.setattr(input_client, "resolve_year", lambda year: 2031 if year is None else year)

    fetch_input(None, 2, Credential(session="abc123"), tmp_path)
    assert urls == ["https://adventofcode.com/2031/day/2/input"]


def test_unwritable_cache_root_raises_file_system_error(tmp_path, monkeypatch) -> None:
    (tmp_path / "blocker").write_text("", encoding="utf-8")
    cache_root = tmp_path / "blocker" / "inputs"
    client = InputClient(Credential(session="abc123"), FetchConfig(), cache_root)
    monkeypatch.setattr(client.session, "get", lambda *_args, **_kwargs: DummyResponse(b"x"))

    with pytest.raises(FileSystemError) as excinfo:
        client.fetch(2022, 6)
    assert str(cache_root / "day6") in str(excinfo.value)


def test_unreadable_cached_input_raises_file_system_error(tmp_path, monkeypatch) -> None:
    client = _client(tmp_path)
    (tmp_path / "day2").mkdir()

    def fail_get(*_args, **_kwargs):
        raise AssertionError("network fetch should not happen on cache hit")

    monkeypatch.setattr(client.session, "get", fail_get)

    with pytest.raises(FileSystemError) as excinfo:
        client.fetch(2022, 2)
    assert str(tmp_path / "day2") in str(excinfo.value)


def test_cache_paths_are_named_by_day(tmp_path) -> None:
    cache = InputCache(tmp_path)
    assert cache.path(14) == tmp_path / "day14"
    assert cache.has(14) is False
    assert cache.write(14, b"abc") == tmp_path / "day14"
    assert cache.has(14) is True
    assert cache.read(14) == b"abc"
