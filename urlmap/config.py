#!python3

"""This module provide a global setting object for the command line.

Only defaults are set on import. Call ``config.load()`` to read
``setting.ini`` from the profile.
"""

from configparser import ConfigParser
from os.path import expanduser

from .profile import get as profile

class CaseSensitiveConfigParser(ConfigParser):
	optionxform = str

class Config:
	default = {
		"errorlog": "false",
		"keep_blank_values": "true"
	}
	def __init__(self, path=None):
		self.path = path
		self.config = CaseSensitiveConfigParser(interpolation=None)
		self.reset()

	def reset(self):
		"""Drop loaded values, keep the defaults."""
		for section in self.config.sections():
			self.config.remove_section(section)
		self.config.defaults().clear()
		self.config.read_dict({"DEFAULT": self.default})
		
	def load(self, path=None):
		# this method doesn't raise error
		if path is None:
			path = profile("setting.ini")
		self.path = expanduser(path)
		self.reset()
		self.config.read(self.path, 'utf-8-sig')
	
config = Config()
setting = config.config['DEFAULT']
