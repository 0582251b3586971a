#! python3

"""The profile folder holds setting.ini and debug.log."""

from os.path import abspath, expanduser, join

DEFAULT_PROFILE = "~/urlmap"

_profile = abspath(expanduser(DEFAULT_PROFILE))

def set(profile):
	global _profile
	_profile = abspath(expanduser(profile))

def get(file=None):
	if file is None:
		return _profile
	return join(_profile, file)
