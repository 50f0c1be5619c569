"""Tests for apiver.http.headers: immutable, case-insensitive Headers."""

import pytest

from apiver.http.headers import Headers


def _h(*pairs: tuple[str, str]) -> Headers:
    """Shorthand: build Headers from string pairs."""
    raw = tuple((k.encode("latin-1"), v.encode("latin-1")) for k, v in pairs)
    return Headers(raw)


class TestHeaders:
    def test_getitem(self) -> None:
        h = _h(("Content-Type", "text/html"))
        assert h["Content-Type"] == "text/html"

    def test_case_insensitive(self) -> None:
        h = _h(("Content-Type", "text/html"))
        assert h["content-type"] == "text/html"
        assert h["CONTENT-TYPE"] == "text/html"

    def test_missing_key_raises(self) -> None:
        h = _h(("Accept", "*/*"))
        with pytest.raises(KeyError):
            h["X-Missing"]

    def test_contains(self) -> None:
        h = _h(("Accept", "*/*"))
        assert "accept" in h
        assert "Accept" in h
        assert "x-missing" not in h

    def test_contains_rejects_non_str(self) -> None:
        h = _h(("Accept", "*/*"))
        assert 42 not in h  # type: ignore[operator]

    def test_len_deduplicates(self) -> None:
        h = _h(("Accept", "text/html"), ("Accept", "text/xml"))
        assert len(h) == 1

    def test_iter_yields_unique_lowercase_keys(self) -> None:
        h = _h(("Accept", "*/*"), ("Content-Type", "text/html"), ("Accept", "text/xml"))
        assert list(h) == ["accept", "content-type"]

    def test_get_with_default(self) -> None:
        h = _h(("Accept", "*/*"))
        assert h.get("accept") == "*/*"
        assert h.get("x-missing") is None
        assert h.get("x-missing", "fallback") == "fallback"

    def test_get_list(self) -> None:
        h = _h(("Accept", "text/html"), ("Accept", "text/xml"), ("Host", "example"))
        assert h.get_list("accept") == ["text/html", "text/xml"]
        assert h.get_list("x-missing") == []


class TestFieldValue:
    def test_single(self) -> None:
        assert _h(("Accept", "text/html")).field_value("accept") == "text/html"

    def test_repeated_values_folded(self) -> None:
        h = _h(("Accept", "text/html"), ("Accept", "application/vnd.acme.v2"))
        assert h.field_value("Accept") == "text/html, application/vnd.acme.v2"

    def test_missing(self) -> None:
        assert _h().field_value("accept") is None


class TestFromPairs:
    def test_from_dict(self) -> None:
        h = Headers.from_pairs({"Content-Type": "application/json"})
        assert h["content-type"] == "application/json"

    def test_from_list(self) -> None:
        h = Headers.from_pairs([("Accept", "a"), ("Accept", "b")])
        assert h.get_list("accept") == ["a", "b"]

    def test_repr(self) -> None:
        assert repr(Headers.from_pairs({"Accept": "*/*"})) == "Headers({'accept': '*/*'})"
