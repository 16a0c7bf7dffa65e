from __future__ import annotations

from wikistral.models.reference import Reference
from wikistral.research_core.dedupe import dedupe_references


def _ref(url: str, title: str = "title", content: str = "") -> Reference:
    return Reference(title=title, url=url, content=content, domain="example.com")


def test_dedupe_keeps_first_occurrence_in_order():
    a = _ref("https://example.com/one", title="A")
    b = _ref("https://example.com/two", title="B")
    c = _ref("https://example.com/one", title="C", content="different")

    assert dedupe_references([a, b, c]) == [a, b]


def test_dedupe_key_is_case_and_trailing_slash_insensitive():
    a = _ref("https://Example.com/Page/")
    b = _ref("https://example.com/page")

    assert dedupe_references([a, b]) == [a]


def test_dedupe_only_strips_one_trailing_slash():
    a = _ref("https://example.com/page//")
    b = _ref("https://example.com/page")

    assert dedupe_references([a, b]) == [a, b]


def test_dedupe_is_idempotent():
    refs = [
        _ref("https://a.com/"),
        _ref("https://b.com"),
        _ref("https://A.com"),
        _ref("https://c.com/x"),
    ]
    once = dedupe_references(refs)

    assert dedupe_references(once) == once
    assert [r.url for r in once] == ["https://a.com/", "https://b.com", "https://c.com/x"]


def test_dedupe_empty():
    assert dedupe_references([]) == []
