import ROOT


class Quiet(object):
	"""
	Silences ROOT messages below a severity while the block runs:
		with Quiet('warning'):
			h.Fit(...)
	The previous ignore level is restored on exit.
	"""
	_levels = {'info': ROOT.kInfo + 1, 'warning': ROOT.kWarning + 1, 'error': ROOT.kError + 1}

	def __init__(self, level='info'):
		self.level = Quiet._levels.get(level, level)

	def __enter__(self):
		self.oldlevel = ROOT.gErrorIgnoreLevel
		ROOT.gErrorIgnoreLevel = self.level
		return self

	def __exit__(self, type, value, traceback):
		ROOT.gErrorIgnoreLevel = self.oldlevel
