"""Unit tests for cookie file persistence."""

import pytest

from atcoder_init.domain.exceptions import FileSystemError
from atcoder_init.domain.models import CookieJar
from atcoder_init.infrastructure.cookie_store import CookieStore


def test_round_trip(tmp_path):
    store = CookieStore(tmp_path / "cookie.txt")
    jar = CookieJar(["REVEL_SESSION=abc%00UserScreenName%3Aalice%00", "LANG=ja"])

    store.save(jar)

    assert store.exists()
    assert store.load() == jar


def test_file_is_newline_separated(tmp_path):
    path = tmp_path / "cookie.txt"
    CookieStore(path).save(CookieJar(["a=1", "b=2"]))

    assert path.read_text(encoding="utf-8") == "a=1\nb=2"


def test_load_skips_blank_and_invalid_lines(tmp_path):
    path = tmp_path / "cookie.txt"
    path.write_text("a=1\n\n   \nbad\x01value\nb=2\n", encoding="utf-8")

    assert CookieStore(path).load() == CookieJar(["a=1", "b=2"])


def test_load_handles_crlf(tmp_path):
    path = tmp_path / "cookie.txt"
    path.write_bytes(b"a=1\r\nb=2\r\n")

    assert CookieStore(path).load().values == ["a=1", "b=2"]


def test_save_creates_parent_directories(tmp_path):
    path = tmp_path / "nested" / "deeper" / "cookie.txt"

    CookieStore(path).save(CookieJar(["a=1"]))

    assert path.read_text(encoding="utf-8") == "a=1"


def test_missing_file_does_not_exist(tmp_path):
    assert not CookieStore(tmp_path / "missing.txt").exists()


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(FileSystemError):
        CookieStore(tmp_path / "missing.txt").load()


def test_jar_headers_join_values():
    jar = CookieJar(["a=1", "b=2"])

    assert jar.as_headers() == {"Cookie": "a=1; b=2"}
    assert CookieJar().as_headers() == {}
