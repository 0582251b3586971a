#! python3

"""URL transformations.

Each transformation comes in two forms:

* ``*_in_parsed_url`` / ``*_to_parsed_url`` takes the configuration and
  returns a function of ``parsed_url``.
* ``*_in_url`` / ``*_to_url`` takes the configuration and, optionally, the
  url string. Without the url it returns a reusable ``str -> str``
  transformer.

Configuration values may be a literal or a function receiving the current
value of the field.
"""

from .url import parse_url_with_query_string, serialize_url, parse_path_with_query_string
from .util import (
	map_maybe, get_or_else_maybe, resolve_update, get_parts_from_pathname,
	get_pathname_from_parts
)

def map_parsed_url(fn):
	def map_(parsed_url):
		return fn(parsed_url=parsed_url)
	return map_

def map_url(fn):
	"""Lift a ParsedUrl transformation to a str transformation."""
	def map_(url):
		parsed_url = parse_url_with_query_string(url)
		return serialize_url(fn(parsed_url=parsed_url))
	return map_

def url_transformer(parsed_url_transformer):
	"""Build the curried string form of a ParsedUrl transformation factory."""
	def transformer(config, url=None):
		transform = map_url(parsed_url_transformer(config))
		if url is None:
			return transform
		return transform(url)
	return transformer

def replace_query_in_parsed_url(new_query):
	@map_parsed_url
	def replace(parsed_url):
		return parsed_url._replace(query=resolve_update(new_query, parsed_url.query))
	return replace

def add_query_to_parsed_url(query_to_append):
	return replace_query_in_parsed_url(
		lambda existing_query: {**existing_query, **query_to_append}
	)

def replace_path_in_parsed_url(new_path):
	@map_parsed_url
	def replace(parsed_url):
		parsed_path = parse_path_with_query_string(
			resolve_update(new_path, parsed_url.pathname))
		return parsed_url._replace(**parsed_path._asdict())
	return replace

def replace_pathname_in_parsed_url(new_pathname):
	@map_parsed_url
	def replace(parsed_url):
		return parsed_url._replace(
			pathname=resolve_update(new_pathname, parsed_url.pathname))
	return replace

def append_pathname_to_parsed_url(pathname_to_append):
	def append(prev_pathname):
		parts = get_or_else_maybe(
			map_maybe(prev_pathname, get_parts_from_pathname),
			list
		)
		return get_pathname_from_parts(parts + get_parts_from_pathname(pathname_to_append))
	return replace_pathname_in_parsed_url(append)

def replace_hash_in_parsed_url(new_hash):
	@map_parsed_url
	def replace(parsed_url):
		return parsed_url._replace(hash=resolve_update(new_hash, parsed_url.hash))
	return replace

replace_query_in_url = url_transformer(replace_query_in_parsed_url)
add_query_to_url = url_transformer(add_query_to_parsed_url)
replace_path_in_url = url_transformer(replace_path_in_parsed_url)
replace_pathname_in_url = url_transformer(replace_pathname_in_parsed_url)
append_pathname_to_url = url_transformer(append_pathname_to_parsed_url)
replace_hash_in_url = url_transformer(replace_hash_in_parsed_url)
