import argparse
import os
import sys

import yaml

from .exceptions import ConfigurationError

_debug_level = 0


class ColorS(object):
	_codes = {'red': 91, 'green': 92, 'yellow': 93, 'blue': 34, 'purple': 95, 'cyan': 96, 'no_color': 0}

	def str(*args):
		return ' '.join([str(s) for s in args])

	def wrap(color, *s):
		return '\033[{}m{}\033[00m'.format(ColorS._codes[color], ColorS.str(*s))

	def red(*s):
		return ColorS.wrap('red', *s)
	def green(*s):
		return ColorS.wrap('green', *s)
	def yellow(*s):
		return ColorS.wrap('yellow', *s)
	def purple(*s):
		return ColorS.wrap('purple', *s)
	def cyan(*s):
		return ColorS.wrap('cyan', *s)
	def no_color(*s):
		return ColorS.wrap('no_color', *s)


def set_debug_level(level):
	global _debug_level
	_debug_level = int(level)

def debug_level():
	return _debug_level

def pwarning(*args, file=None):
	print(ColorS.yellow('[w]', *args), file=file or sys.stderr)

def pdebug(*args, level=1, file=None):
	if _debug_level >= level:
		print(ColorS.purple('[d]', *args), file=file or sys.stderr)

def perror(*args, file=None):
	print(ColorS.red('[e]', *args), file=file or sys.stderr)

def pinfo(*args, file=None):
	print(ColorS.green('[i]', *args), file=file or sys.stdout)

def pindent(*args, file=None):
	print(ColorS.no_color('   ', *args), file=file or sys.stdout)


def config_path(name):
	"""Path of a configuration file shipped with the package."""
	return os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'config', name)

def read_config(file_name):
	if not os.path.isfile(file_name):
		raise ConfigurationError('configuration file not found: {}'.format(file_name))
	with open(file_name, 'r') as stream:
		try:
			config = yaml.safe_load(stream)
		except yaml.YAMLError as e:
			raise ConfigurationError('unable to parse {}: {}'.format(file_name, e)) from e
	if config is None:
		config = {}
	if not isinstance(config, dict):
		raise ConfigurationError('{} does not hold a mapping of settings'.format(file_name))
	return config


class ArgumentParser(argparse.ArgumentParser):
	"""Usage errors print the usage and exit with 1."""
	def error(self, message):
		self.print_usage(sys.stderr)
		perror(message)
		sys.exit(1)


class JRBase(object):
	def __init__(self, **kwargs):
		for key, value in kwargs.items():
			self.__setattr__(key, value)

	def configure_from_args(self, **kwargs):
		for key, value in kwargs.items():
			self.__setattr__(key, value)

	def __str__(self):
		s = ['[i] {}'.format(type(self).__name__)]
		for v in self.__dict__:
			_s = str(self.__dict__[v])
			if len(_s) > 200:
				_s = _s[:200] + '..'
			s.append('   {} = {}'.format(v, _s))
		return '\n'.join(s)
