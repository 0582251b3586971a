#! python3

import re

from setuptools import setup, find_packages
from os import path

here = path.abspath(path.dirname(__file__))

def read(file):
	with open(path.join(here, file), encoding='utf-8') as f:
		content = f.read()
	return content
	
def find_version(file):
	return re.search(r"__version__ = (\S*)", read(file)).group(1).strip("\"'")
	
setup(
	name = "urlmap",
	version = find_version("urlmap/__init__.py"),
	description = 'Replace or merge the query, path and hash of URL strings',
	long_description = read('README.rst'),
	author = 'eight',
	author_email = 'eight04@gmail.com',
	license = 'MIT',
	# See https://pypi.python.org/pypi?%3Aaction=list_classifiers
	classifiers = [
		'Development Status :: 4 - Beta',
		"Environment :: Console",
		"Intended Audience :: Developers",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Programming Language :: Python :: 3",
		"Topic :: Internet :: WWW/HTTP",
		"Topic :: Software Development :: Libraries"
	],
	keywords = 'url query path hash',
	packages = find_packages(exclude=["tests"]),
	python_requires = ">=3.8",
	# https://pythonhosted.org/setuptools/setuptools.html#declaring-dependencies
	install_requires = [
		"docopt >=0.6.2, <0.7"
	],
	extras_require = {
		"test": [
			"pytest"
		],
		"dev": [
			"doit",
			"pytest",
			"twine"
		]
	},
	entry_points = {
		"console_scripts": [
			"urlmap = urlmap.cli:console_init"
		]
	}
)
