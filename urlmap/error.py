class UrlMapError(Exception):
	"""Extend Exception."""
	pass

class QueryParamError(UrlMapError):
	"""Query parameter on the command line is not in key=value form."""
	def __init__(self, param):
		super().__init__("Invalid query parameter {!r}, expect key=value".format(param))
		self.param = param
