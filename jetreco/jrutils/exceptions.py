"""
Exceptions raised by the reconstruction and plotting programs.

Every program catches JetRecoError in main(), reports it and exits with 1.
"""


class JetRecoError(Exception):
	"""Base class for all jetreco failures."""
	pass


class UsageError(JetRecoError):
	"""Bad command line arguments or an out of range stage number."""
	pass


class ConfigurationError(JetRecoError):
	"""Missing or malformed configuration."""
	pass


class InputFileError(JetRecoError):
	"""Input file missing, unreadable, or without the requested tree."""

	def __init__(self, message, file_path=None):
		self.file_path = file_path
		if file_path:
			message = '{} (file: {})'.format(message, file_path)
		super().__init__(message)


class MissingColumnError(JetRecoError):
	"""A branch needed by an active stage is absent from the input tree."""

	def __init__(self, branch_name, file_path=None):
		self.branch_name = branch_name
		self.file_path = file_path
		message = 'Failed to find a required branch in the input tree. The missing branch is named: {}'.format(branch_name)
		if file_path:
			message = '{} (file: {})'.format(message, file_path)
		super().__init__(message)


class MissingHistogramError(JetRecoError):
	"""A histogram needed by an active plot stage is absent from the file."""

	def __init__(self, hist_name, file_path=None):
		self.hist_name = hist_name
		self.file_path = file_path
		message = 'Unable to retrieve a required histogram from the input file. The missing histogram is named: {}'.format(hist_name)
		if file_path:
			message = '{} (file: {})'.format(message, file_path)
		super().__init__(message)


class OutputFileError(JetRecoError):
	"""Output file could not be created or has the wrong extension."""
	pass
