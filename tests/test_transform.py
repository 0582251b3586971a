import pytest

from urlmap import (
	parse_url_with_query_string, map_parsed_url, map_url,
	replace_query_in_parsed_url, replace_query_in_url,
	add_query_to_parsed_url, add_query_to_url,
	replace_path_in_url, replace_pathname_in_url,
	append_pathname_to_parsed_url, append_pathname_to_url,
	replace_hash_in_parsed_url, replace_hash_in_url
)
from urlmap.cli import console_init


def parse(url):
	return parse_url_with_query_string(url)


def test_map_parsed_url_forwards():
	received = []
	def fn(parsed_url):
		received.append(parsed_url)
		return parsed_url
	parsed = parse("http://x/")
	assert map_parsed_url(fn)(parsed) is parsed
	assert received == [parsed]


def test_map_url():
	upper_host = map_url(lambda parsed_url: parsed_url._replace(hostname="y"))
	assert upper_host("http://x/a?b=1#c") == "http://y/a?b=1#c"


def test_replace_query_literal():
	assert replace_query_in_url({"b": "2"}, "http://x/?a=1#h") == "http://x/?b=2#h"


def test_replace_query_function():
	def drop_a(query):
		return {key: value for key, value in query.items() if key != "a"}
	assert replace_query_in_url(drop_a)("http://x/?a=1&b=2") == "http://x/?b=2"


def test_replace_query_is_idempotent():
	transform = replace_query_in_url({"a": "1", "b": ["2", "3"]})
	once = transform("http://x/p?z=9")
	assert transform(once) == once


def test_add_query_new_key():
	result = add_query_to_url({"b": "2"})("http://x/?a=1")
	assert parse(result).query == {"a": "1", "b": "2"}


def test_add_query_override():
	result = add_query_to_url({"a": "2"})("http://x/?a=1")
	assert parse(result).query == {"a": "2"}


def test_add_query_none_removes_key():
	assert add_query_to_url({"a": None}, "http://x/?a=1&b=2") == "http://x/?b=2"


def test_add_query_keeps_input_untouched():
	parsed = parse("http://x/?a=1")
	query_to_append = {"b": "2"}
	result = add_query_to_parsed_url(query_to_append)(parsed)
	assert parsed.query == {"a": "1"}
	assert query_to_append == {"b": "2"}
	assert result.query == {"a": "1", "b": "2"}
	assert result is not parsed


@pytest.mark.parametrize("new_path,expected", [
	("/c/d", "http://x/c/d#h"),
	("/c/d?y=2", "http://x/c/d?y=2#h"),
	(None, "http://x#h"),
	("", "http://x#h"),
])
def test_replace_path(new_path, expected):
	assert replace_path_in_url(new_path, "http://x/a/b?q=1#h") == expected


def test_replace_path_function():
	transform = replace_path_in_url(lambda pathname: pathname + "/edit?mode=full")
	assert transform("http://x/item/1?q=1") == "http://x/item/1/edit?mode=full"


def test_replace_pathname_keeps_query():
	assert replace_pathname_in_url("/c", "http://x/a?q=1") == "http://x/c?q=1"


def test_replace_pathname_function():
	result = replace_pathname_in_url(lambda p: p + "/edit")("http://x/item/1")
	assert parse(result).pathname == "/item/1/edit"


def test_replace_pathname_none():
	assert replace_pathname_in_url(None, "http://x/a?q=1") == "http://x?q=1"


@pytest.mark.parametrize("transform,expected", [
	(replace_pathname_in_url("b"), "file:///b"),
	(replace_path_in_url("b?x=1"), "file:///b?x=1"),
])
def test_relative_path_after_slashes_keeps_host_empty(transform, expected):
	result = transform("file:///a")
	assert result == expected
	assert parse(result).hostname is None
	assert parse(result).pathname == "/b"


def test_transform_ignores_profile_setting(tmp_path):
	(tmp_path / "setting.ini").write_text("[DEFAULT]\nkeep_blank_values = false\n", encoding="utf-8")
	console_init(["--profile", str(tmp_path), "parse", "http://x/"])
	assert add_query_to_url({"b": "2"}, "http://x/?a=&c=1") == "http://x/?a=&c=1&b=2"


@pytest.mark.parametrize("url,pathname_to_append,expected", [
	("http://x/foo/bar", "baz", "/foo/bar/baz"),
	("http://x", "baz", "/baz"),
	("http://x/foo/", "/baz/", "/foo/baz"),
	("http://x//foo//bar", "a//b", "/foo/bar/a/b"),
	("http://x/foo", "", "/foo"),
	("http://x", "", "/"),
])
def test_append_pathname(url, pathname_to_append, expected):
	result = append_pathname_to_url(pathname_to_append)(url)
	assert parse(result).pathname == expected


def test_append_pathname_keeps_other_parts():
	result = append_pathname_to_url("c", "https://u@x:81/a?b=1#d")
	assert result == "https://u@x:81/a/c?b=1#d"


def test_append_pathname_to_parsed_url_without_pathname():
	parsed = parse("mailto:")
	assert parsed.pathname is None
	assert append_pathname_to_parsed_url("a/b")(parsed).pathname == "/a/b"


def test_replace_hash():
	url = "http://u@x:81/a?b=1#old"
	result = replace_hash_in_url("top")(url)
	assert parse(result) == parse(url)._replace(hash="#top")


def test_replace_hash_function_and_none():
	assert replace_hash_in_url(lambda h: h + "-2", "http://x/#a") == "http://x/#a-2"
	assert replace_hash_in_url(None, "http://x/#a") == "http://x/"


def test_replace_hash_in_parsed_url_returns_new_value():
	parsed = parse("http://x/#a")
	result = replace_hash_in_parsed_url("#b")(parsed)
	assert parsed.hash == "#a"
	assert result.hash == "#b"


def test_replace_query_in_parsed_url_with_keyword():
	parsed = parse("http://x/?a=1")
	assert replace_query_in_parsed_url({})(parsed_url=parsed).query == {}


def test_transformer_is_reusable():
	add_page = add_query_to_url({"page": "2"})
	assert add_page("http://a/") == "http://a/?page=2"
	assert add_page("http://b/?x=1") == "http://b/?x=1&page=2"
