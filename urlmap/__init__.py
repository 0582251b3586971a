#! python3

"""URL Map

Derive a modified URL from an existing one: replace or merge the query,
replace or append the path, replace the hash.

>>> from urlmap import add_query_to_url
>>> add_query_to_url({"page": "2"}, "https://example.com/list?sort=new")
'https://example.com/list?sort=new&page=2'

Sub modules:
  urlmap.url        Parse and serialize URLs.
  urlmap.transform  URL transformations.
  urlmap.error      Errors.
  urlmap.cli        Command line interface.
"""

__version__ = "2026.10.19"

from .url import (
	ParsedUrl, ParsedPath, parse_url_with_query_string, serialize_url,
	parse_path_with_query_string
)
from .transform import (
	map_parsed_url, map_url,
	replace_query_in_parsed_url, replace_query_in_url,
	add_query_to_parsed_url, add_query_to_url,
	replace_path_in_parsed_url, replace_path_in_url,
	replace_pathname_in_parsed_url, replace_pathname_in_url,
	append_pathname_to_parsed_url, append_pathname_to_url,
	replace_hash_in_parsed_url, replace_hash_in_url
)
