"""URL Map

Usage:
  urlmap [--profile=<profile>] (
    parse <url> |
    query <url> [<param>...] |
    add-query <url> <param>... |
    path <url> [<path>] |
    pathname <url> [<pathname>] |
    append <url> <pathname> |
    hash <url> [<hash>]
  )
  urlmap (--help | --version)

Commands:
  parse <url>         Print the parsed URL as JSON.
  query               Replace the query with <param>s.
  add-query           Merge <param>s into the query.
  path                Replace the path, <path> may contain a query string.
  pathname            Replace the pathname and keep the query.
  append              Append segments of <pathname> to the pathname.
  hash                Replace the hash.

  Omit the optional value of path, pathname or hash to remove it.

Options:
  --profile=<profile>  Set profile location. [default: ~/urlmap]
  --help               Show help message.
  --version            Show current version.

<param> is in the form of key=value. Repeat a key to create a list.
"""

import json
import sys

from docopt import docopt

from . import __version__
from .config import config, setting
from .error import UrlMapError, QueryParamError
from .logger import debug_log
from .profile import set as set_profile
from .url import parse_url_with_query_string, serialize_url, parse_path_with_query_string
from .transform import (
	replace_query_in_parsed_url, add_query_to_parsed_url,
	replace_pathname_in_parsed_url, append_pathname_to_parsed_url,
	replace_hash_in_parsed_url
)

def parse_params(params):
	"""Convert a list of key=value into a query dict."""
	query = {}
	for param in params:
		key, sep, value = param.partition("=")
		if not sep:
			raise QueryParamError(param)
		if key not in query:
			query[key] = value
		elif isinstance(query[key], list):
			query[key].append(value)
		else:
			query[key] = [query[key], value]
	return query

def get_transforms(arguments, keep_blank_values):
	"""Return the ParsedUrl transformations selected by docopt arguments."""
	if arguments["query"]:
		return [replace_query_in_parsed_url(parse_params(arguments["<param>"]))]

	if arguments["add-query"]:
		return [add_query_to_parsed_url(parse_params(arguments["<param>"]))]

	if arguments["path"]:
		# same as replace_path_in_parsed_url, with the query parsed by setting
		parsed_path = parse_path_with_query_string(
			arguments["<path>"], keep_blank_values=keep_blank_values)
		return [
			replace_pathname_in_parsed_url(parsed_path.pathname),
			replace_query_in_parsed_url(parsed_path.query)
		]

	if arguments["pathname"]:
		return [replace_pathname_in_parsed_url(arguments["<pathname>"])]

	if arguments["append"]:
		return [append_pathname_to_parsed_url(arguments["<pathname>"])]

	if arguments["hash"]:
		return [replace_hash_in_parsed_url(arguments["<hash>"])]

	raise UrlMapError("Unknown command")

def transform(arguments):
	"""Run the command selected by docopt arguments. Return the output."""
	keep_blank_values = setting.getboolean("keep_blank_values")
	parsed_url = parse_url_with_query_string(
		arguments["<url>"], keep_blank_values=keep_blank_values)

	if arguments["parse"]:
		return json.dumps(parsed_url._asdict(), indent=4, ensure_ascii=False)

	for fn in get_transforms(arguments, keep_blank_values):
		parsed_url = fn(parsed_url=parsed_url)
	return serialize_url(parsed_url)

def console_init(argv=None):
	"""Console init."""
	arguments = docopt(__doc__, argv=argv, version=__version__)

	if arguments["--profile"]:
		set_profile(arguments["--profile"])
	config.load()

	try:
		output = transform(arguments)
	except (UrlMapError, ValueError) as err:
		print(err, file=sys.stderr)
		sys.exit(1)

	debug_log(arguments["<url>"], output)
	print(output)
