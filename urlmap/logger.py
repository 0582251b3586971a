"""Append command line transformations to debug.log in the profile."""

import time

from .config import setting
from .io import content_write
from .profile import get as profile

def format_entry(*args):
	return "{}\t{}\n".format(
		time.strftime("%Y-%m-%d %H:%M:%S"),
		", ".join(str(a) for a in args)
	)

def debug_log(*args):
	"""Do nothing unless errorlog is enabled."""
	if not setting.getboolean("errorlog"):
		return
	content_write(profile("debug.log"), format_entry(*args), append=True)
