#! python3

def map_maybe(value, fn):
	"""Apply fn to value unless value is None."""
	if value is None:
		return None
	return fn(value)

def get_or_else_maybe(value, get_default):
	"""Return value, or call get_default() if value is None."""
	if value is None:
		return get_default()
	return value

def resolve_update(update, value):
	"""An update is either a literal or a function of the old value."""
	if callable(update):
		return update(value)
	return update

def is_non_empty_string(s):
	return isinstance(s, str) and s != ""

def get_parts_from_pathname(pathname):
	return [part for part in pathname.split("/") if is_non_empty_string(part)]

def get_pathname_from_parts(parts):
	return "/" + "/".join(parts)
