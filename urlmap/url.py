#! python3

"""Convert between URL strings and ParsedUrl records."""

from collections import namedtuple
from urllib.parse import urlsplit, parse_qs, urlencode

URL_PARTS = ("auth", "hash", "hostname", "pathname", "port", "protocol", "query", "slashes")

# urlsplit strips these from the front, and drops UNSAFE_CHARS everywhere
LEADING_JUNK = "".join(chr(i) for i in range(33))
UNSAFE_CHARS = ("\t", "\r", "\n")

ParsedUrl = namedtuple("ParsedUrl", URL_PARTS)
ParsedPath = namedtuple("ParsedPath", ("pathname", "query"))

def parse_query_string(query, keep_blank_values=True):
	"""Decode a query string into a dict.

	A key that occurs once maps to a str, a repeated key maps to a list.
	"""
	query_dict = parse_qs(query, keep_blank_values=keep_blank_values)
	return {
		key: values[0] if len(values) == 1 else values
		for key, values in query_dict.items()
	}

def serialize_query(query):
	"""Encode a query dict. Keys with None value are dropped."""
	return urlencode(
		{key: value for key, value in query.items() if value is not None},
		doseq=True
	)

def clean_url(url):
	"""Return the string urlsplit actually splits."""
	url = url.lstrip(LEADING_JUNK)
	for c in UNSAFE_CHARS:
		url = url.replace(c, "")
	return url

def has_slashes(url, scheme):
	if scheme:
		url = url.partition(":")[2]
	return url.startswith("//")

def parse_url_with_query_string(url, keep_blank_values=True):
	result = urlsplit(url)
	url = clean_url(url)
	auth = result.netloc.rpartition("@")[0] if "@" in result.netloc else None
	# result.port raises ValueError for a bad port
	port = result.port
	return ParsedUrl(
		auth=auth,
		# a bare "#" is kept
		hash="#" + result.fragment if "#" in url else None,
		hostname=result.hostname,
		pathname=result.path or None,
		port=str(port) if port is not None else None,
		protocol=result.scheme + ":" if result.scheme else None,
		query=parse_query_string(result.query, keep_blank_values=keep_blank_values),
		slashes=has_slashes(url, result.scheme)
	)

def serialize_url(parsed_url):
	"""Build the URL string in the order of
	``protocol//auth@hostname:port/pathname?query#hash``.
	"""
	s = ""

	if parsed_url.protocol:
		s += parsed_url.protocol
		if not s.endswith(":"):
			s += ":"

	if parsed_url.slashes or parsed_url.hostname:
		s += "//"
		if parsed_url.auth:
			s += parsed_url.auth + "@"
		if parsed_url.hostname:
			hostname = parsed_url.hostname
			if ":" in hostname:
				hostname = "[" + hostname + "]"
			s += hostname
		if parsed_url.port:
			s += ":" + parsed_url.port

	pathname = parsed_url.pathname or ""
	if pathname and (parsed_url.slashes or parsed_url.hostname) and not pathname.startswith("/"):
		pathname = "/" + pathname
	s += pathname

	query = serialize_query(parsed_url.query or {})
	if query:
		s += "?" + query

	if parsed_url.hash:
		if not parsed_url.hash.startswith("#"):
			s += "#"
		s += parsed_url.hash

	return s

def parse_path_with_query_string(path, keep_blank_values=True):
	"""Parse a path which may contain a query string into ParsedPath.

	A None path is allowed and means "no path".
	"""
	if path is None:
		return ParsedPath(pathname=None, query={})
	pathname, _sep, query = path.partition("#")[0].partition("?")
	return ParsedPath(
		pathname=pathname or None,
		query=parse_query_string(query, keep_blank_values=keep_blank_values)
	)
