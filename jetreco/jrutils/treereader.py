import sys

import uproot

from .jrutils import JRBase, pdebug
from .exceptions import InputFileError, MissingColumnError


class EventReader(JRBase):
	"""
	Reads the selected branches of a flat tree with uproot and yields one
	dict per event (branch name -> scalar or numpy array).
	Only the branches passed at construction are ever read.
	"""
	def __init__(self, **kwargs):
		self.configure_from_args(	file_name=None,
									tree_name=None,
									branches=[],
									event_number_max=None,
									step_size='100 MB')
		super(EventReader, self).__init__(**kwargs)
		if self.event_number_max is None:
			self.event_number_max = sys.maxsize
		self.fin = None
		self.tree = None
		self.open()

	def open(self):
		try:
			self.fin = uproot.open(self.file_name)
		except (OSError, ValueError) as e:
			raise InputFileError('unable to open the input file: {}'.format(e), self.file_name) from e
		try:
			self.tree = self.fin[self.tree_name]
		except KeyError as e:
			self.fin.close()
			raise InputFileError('unable to find the input tree named {}'.format(self.tree_name), self.file_name) from e
		if not isinstance(self.tree, uproot.TTree):
			self.fin.close()
			raise InputFileError('unable to find the input tree named {}, the object is a {}'.format(self.tree_name, type(self.tree).__name__), self.file_name)
		available = set(self.tree.keys())
		for bname in self.branches:
			if bname not in available:
				self.fin.close()
				raise MissingColumnError(bname, self.file_name)
		pdebug('reading {} branches from {}:{}'.format(len(self.branches), self.file_name, self.tree_name))

	def __enter__(self):
		return self

	def __exit__(self, type, value, traceback):
		self.close()

	def __len__(self):
		return min(self.tree.num_entries, self.event_number_max)

	def events(self):
		if not self.branches:
			for _ in range(len(self)):
				yield {}
			return
		for chunk in self.tree.iterate(self.branches, library='np', step_size=self.step_size, entry_stop=len(self)):
			nchunk = len(chunk[self.branches[0]])
			for i in range(nchunk):
				yield {bname: chunk[bname][i] for bname in self.branches}

	def close(self):
		if self.fin is not None:
			self.fin.close()
			self.fin = None
