import io

import pytest
import requests

from modelgen.utils import (
    TextLoaderError,
    load_text,
    load_text_from_file,
    load_text_from_url,
)


class FakeResponse:
    def __init__(self, text, status_code=200):
        self.text = text
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(response=self)


def test_load_text_from_file(tmp_path):
    path = tmp_path / "schema.sql"
    path.write_text("CREATE TABLE a (\n);\n", encoding="utf-8")

    source, text = load_text_from_file(path)

    assert str(path) in source
    assert text.startswith("CREATE TABLE a")


def test_missing_file():
    with pytest.raises(FileNotFoundError):
        load_text(file_path="does/not/exist.sql")


def test_load_text_from_url(monkeypatch):
    calls = []

    def fake_get(url, timeout):
        calls.append((url, timeout))
        return FakeResponse("pub struct A {}")

    monkeypatch.setattr("modelgen.utils.requests.get", fake_get)

    source, text = load_text(url="https://example.com/models.rs", timeout=5)

    assert text == "pub struct A {}"
    assert "https://example.com/models.rs" in source
    assert calls == [("https://example.com/models.rs", 5)]


def test_http_error(monkeypatch):
    monkeypatch.setattr(
        "modelgen.utils.requests.get", lambda url, timeout: FakeResponse("", 404)
    )

    with pytest.raises(TextLoaderError, match="404"):
        load_text_from_url("https://example.com/missing.sql")


def test_timeout(monkeypatch):
    def fake_get(url, timeout):
        raise requests.exceptions.Timeout()

    monkeypatch.setattr("modelgen.utils.requests.get", fake_get)

    with pytest.raises(TextLoaderError, match="timeout"):
        load_text_from_url("https://example.com/slow.sql")


def test_invalid_url():
    with pytest.raises(TextLoaderError):
        load_text_from_url("not a url")


def test_dash_reads_stdin(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("name:z"))

    assert load_text("-")[1] == "name:z"


@pytest.mark.parametrize(
    "kwargs",
    [{}, {"file_path": "a.sql", "url": "https://example.com/a.sql"}, {"url": "https://x.io", "stdin": True}],
)
def test_exactly_one_source(kwargs):
    with pytest.raises(TextLoaderError):
        load_text(**kwargs)
