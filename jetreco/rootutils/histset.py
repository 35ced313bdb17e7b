import os

import ROOT

from jetreco.jrutils import JRBase, pdebug, pwarning
from jetreco.jrutils import InputFileError, MissingHistogramError, OutputFileError


class RootHistogramSet(JRBase):
	"""
	Named ROOT histograms booked from HistDef entries. Histograms are
	detached from any directory and written in booking order.
	"""
	def __init__(self, **kwargs):
		self.configure_from_args(hdefs=[])
		super(RootHistogramSet, self).__init__(**kwargs)
		self.hists = {}
		self.order = []
		for hd in self.hdefs:
			self.book(hd)

	def book(self, hd):
		if hd.name in self.hists:
			raise ValueError('histogram {} is already booked'.format(hd.name))
		h = getattr(ROOT, hd.kind)(hd.name, hd.title, *hd.bins)
		h.SetDirectory(0)
		self.hists[hd.name] = h
		self.order.append(hd.name)
		return h

	def __len__(self):
		return len(self.order)

	def __contains__(self, name):
		return name in self.hists

	def __getitem__(self, name):
		return self.hists[name]

	def fill(self, name, *values, weight=None):
		if weight is None:
			self.hists[name].Fill(*values)
		else:
			self.hists[name].Fill(*values, weight)

	def write(self, file_name):
		fout = ROOT.TFile(file_name, 'recreate')
		if not fout or fout.IsZombie():
			raise OutputFileError('unable to create the output file: {}'.format(file_name))
		fout.cd()
		for name in self.order:
			self.hists[name].Write()
		fout.Close()
		pdebug('wrote {} histograms to {}'.format(len(self.order), file_name))


class HistFile(object):
	"""Read access to a histogram file written by RootHistogramSet."""
	def __init__(self, file_name):
		self.file_name = file_name
		if not os.path.isfile(file_name):
			raise InputFileError('Unable to open the specified input file, please check that it exists', file_name)
		self.fin = ROOT.TFile.Open(file_name, 'READ')
		if not self.fin or self.fin.IsZombie():
			raise InputFileError('Unable to open the specified input file, please check that it exists', file_name)
		self.hists = {}
		self.gev_scaled = set()

	def get(self, name):
		if name in self.hists:
			return self.hists[name]
		h = self.fin.Get(name)
		if not h or not isinstance(h, ROOT.TH1):
			raise MissingHistogramError(name, self.file_name)
		h.SetDirectory(0)
		self.hists[name] = h
		return h

	def get_all(self, names):
		return {name: self.get(name) for name in names}

	def scale_to_gev(self, name):
		"""Axis limits MeV -> GeV, at most once per histogram."""
		if name in self.gev_scaled:
			return self.hists[name]
		h = self.get(name)
		xaxis = h.GetXaxis()
		xaxis.SetLimits(xaxis.GetXmin() / 1.e3, xaxis.GetXmax() / 1.e3)
		self.gev_scaled.add(name)
		return h

	def __enter__(self):
		return self

	def __exit__(self, type, value, traceback):
		self.close()

	def close(self):
		if self.fin:
			self.fin.Close()
			self.fin = None


def normalize(h):
	integral = h.Integral()
	if integral <= 0:
		pwarning('histogram {} has no entries to normalize, left unchanged'.format(h.GetName()))
		return False
	h.Scale(1. / integral)
	return True
