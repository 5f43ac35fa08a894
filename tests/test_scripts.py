from pathlib import Path

import pytest
from script import fetch_wordlist
from script.prepare_wordlist import prepare
from termwordle.lexicon import build_lexicon

HTML = """
<html><body>
<p>2024-01-02 (Tue) 927 CRANE</p>
<p>2024-01-01 (Mon) 926 SLATE</p>
<p>2023-12-31 (Sun) 925 CRANE</p>
<p>not an answer ABCDEF</p>
</body></html>
"""


def test_prepare_filters_dedupes_and_sorts():
    raw = ["Zebra", " slate ", "crane", "toolong", "ab1de", "slate", ""]
    assert prepare(raw) == ["crane", "slate"]
    assert prepare(raw, case_insensitive=True) == ["crane", "slate", "zebra"]


def test_prepare_output_is_a_valid_source(tmp_path: Path):
    from termwordle.datasets import write_lines
    p = tmp_path / "words.txt"
    write_lines(prepare(["stare", "crane", "stare"]), p)
    assert list(build_lexicon(p)) == ["crane", "stare"]


def test_extract_answers():
    assert fetch_wordlist.extract_answers(HTML) == ["crane", "slate"]


def test_fetch_answers_uses_requests(monkeypatch):
    class _Resp:
        text = HTML

        def raise_for_status(self):
            pass

    calls = []

    def fake_get(url, timeout):
        calls.append((url, timeout))
        return _Resp()

    monkeypatch.setattr(fetch_wordlist.requests, "get", fake_get)
    assert fetch_wordlist.fetch_answers("http://example.test/") == ["crane", "slate"]
    assert calls == [("http://example.test/", 30)]


def test_fetch_answers_propagates_http_errors(monkeypatch):
    import requests

    class _Resp:
        text = ""

        def raise_for_status(self):
            raise requests.HTTPError("boom")

    monkeypatch.setattr(fetch_wordlist.requests, "get", lambda url, timeout: _Resp())
    with pytest.raises(requests.HTTPError):
        fetch_wordlist.fetch_answers()
