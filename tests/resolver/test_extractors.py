from linkunwrap.resolver.dispatcher import resolve
from linkunwrap.resolver.extractors import (
    Decoded,
    FirstParam,
    LastPathSegment,
    SearchParam,
    StripFromColon,
)
from linkunwrap.resolver.url import parse_url


def test_search_param():
    url = parse_url("https://vk.com/away.php?to=https%3A%2F%2Fexample.com")
    assert SearchParam("to").extract(url) == "https://example.com"
    assert SearchParam("url").extract(url) is None


def test_first_param_falls_back():
    url = parse_url("https://www.google.com/url?url=https://example.com")
    assert FirstParam(("q", "url")).extract(url) == "https://example.com"


def test_first_param_prefers_earlier_key():
    url = parse_url("https://www.google.com/url?url=https://b.example&q=https://a.ex")
    assert FirstParam(("q", "url")).extract(url) == "https://a.ex"


def test_first_param_skips_empty_values():
    url = parse_url("https://www.google.com/url?q=&url=https://example.com")
    assert FirstParam(("q", "url")).extract(url) == "https://example.com"


def test_decoded_decodes_exactly_once():
    url = parse_url("https://x.example/v1/a/http%253A%252F%252Fexample.com")
    assert Decoded(LastPathSegment()).extract(url) == "http%3A%2F%2Fexample.com"


def test_decoded_of_missing_value_is_empty():
    url = parse_url("https://x.example/")
    assert Decoded(SearchParam("u")).extract(url) == ""


def test_strip_from_colon():
    url = parse_url("https://disq.us/url?url=https%3A%2F%2Fexample.com%3Aab12cd")
    assert StripFromColon(SearchParam("url")).extract(url) == "https://example.com"


def test_strip_from_colon_uses_last_colon():
    url = parse_url("https://disq.us/url?url=http://example.com:8080/a:token")
    result = StripFromColon(SearchParam("url")).extract(url)
    assert result == "http://example.com:8080/a"


def test_strip_from_colon_without_colon_is_empty():
    url = parse_url("https://disq.us/url?url=example")
    assert StripFromColon(SearchParam("url")).extract(url) == ""
    assert StripFromColon(SearchParam("missing")).extract(url) == ""


def test_last_path_segment():
    url = parse_url("https://x.example/v1/abc/https%3A%2F%2Fexample.com")
    assert LastPathSegment().extract(url) == "https%3A%2F%2Fexample.com"
    assert LastPathSegment().extract(parse_url("https://x.example/v1/")) == ""


def test_decoded_rejects_invalid_utf8_escapes():
    url = parse_url("https://outgoing.prod.mozaws.net/v1/abc/%FF%FE")
    assert Decoded(LastPathSegment()).extract(url) is None
    assert resolve({"url": url.href}) is None
