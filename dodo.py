DOIT_CONFIG = {
	"default_tasks": ["test"],
	"verbosity": 2
}

# Make it always run in root
import os
os.chdir(os.path.abspath(os.path.dirname(__file__)))

def next_version(pre_version, today):
	"""Date version, with a serial suffix for more releases on the same day."""
	version = "{}.{}.{}".format(today.year, today.month, today.day)
	if pre_version != version and not pre_version.startswith(version + "."):
		return version
	serial = pre_version[len(version) + 1:]
	return "{}.{}".format(version, int(serial) + 1 if serial else 1)

def task_test():
	return {
		"actions": ["pytest tests"]
	}

def task_dist():
	return {
		"actions": ["python setup.py sdist bdist_wheel"],
		"task_dep": ["test"]
	}

def task_bump():
	"""Write the new version to urlmap/__init__.py and start a README
	changelog entry for it."""
	def bump():
		import datetime, pathlib, re, urlmap

		version = next_version(urlmap.__version__, datetime.date.today())

		init = pathlib.Path("urlmap/__init__.py")
		init.write_text(re.sub(
			r'__version__ = "[^"]+"',
			'__version__ = "{}"'.format(version),
			init.read_text(encoding="utf-8")
		), encoding="utf-8")

		readme = pathlib.Path("README.rst")
		readme.write_text(readme.read_text(encoding="utf-8").replace(
			"Changelog\n---------\n\n",
			"Changelog\n---------\n\n* {}\n\n  - \n\n".format(version),
			1
		), encoding="utf-8")

		print("Bumped to {}, fill in the changelog in README.rst".format(version))

	return {
		"actions": [bump],
		"task_dep": ["test"]
	}

def task_upload():
	return {
		"actions": ["twine upload dist/*"],
		"task_dep": ["dist"]
	}
