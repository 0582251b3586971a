#! python3

"""Simple io module"""

import io
import os
from os import path

def prepare_folder(folder):
	"""If the folder does not exist, create it."""
	folder = path.expanduser(folder)

	if folder and not path.isdir(folder):
		os.makedirs(folder)

	return folder

def content_write(file, content, append=False):
	"""Write str content to file."""
	file = path.expanduser(file)

	prepare_folder(path.dirname(file))

	mode = "a" if append else "w"
	with io.open(file, mode, encoding="utf-8") as f:
		f.write(content)
