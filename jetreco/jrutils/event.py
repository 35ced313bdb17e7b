import numpy as np


class Jet(object):
	__slots__ = ['pt', 'eta', 'phi', 'm', 'aux']

	def __init__(self, pt, eta=0., phi=0., m=0., aux=None):
		self.pt = float(pt)
		self.eta = float(eta)
		self.phi = float(phi)
		self.m = float(m)
		self.aux = None if aux is None else float(aux)

	def __repr__(self):
		return 'Jet(pt={}, eta={}, phi={}, m={}, aux={})'.format(self.pt, self.eta, self.phi, self.m, self.aux)


class JetCollection(object):
	"""
	Parallel pt, eta, phi, m (and optional aux) arrays of one jet collection,
	kept in descending pt order so that index 0 is the leading jet.
	"""
	def __init__(self, pt, eta=None, phi=None, m=None, aux=None):
		self.pt = np.asarray(pt, dtype=np.float64)
		n = len(self.pt)
		self.eta = np.zeros(n) if eta is None else np.asarray(eta, dtype=np.float64)
		self.phi = np.zeros(n) if phi is None else np.asarray(phi, dtype=np.float64)
		self.m = np.zeros(n) if m is None else np.asarray(m, dtype=np.float64)
		self.aux = None if aux is None else np.asarray(aux, dtype=np.float64)
		if n > 1 and np.any(np.diff(self.pt) > 0):
			order = np.argsort(-self.pt, kind='stable')
			self.pt = self.pt[order]
			self.eta = self.eta[order]
			self.phi = self.phi[order]
			self.m = self.m[order]
			if self.aux is not None:
				self.aux = self.aux[order]

	def __len__(self):
		return len(self.pt)

	def empty(self):
		return len(self.pt) == 0

	def leading(self):
		if self.empty():
			return None
		aux = None if self.aux is None else self.aux[0]
		return Jet(self.pt[0], self.eta[0], self.phi[0], self.m[0], aux)

	@classmethod
	def from_branches(cls, data, prefix, kinematics=('pt', 'eta', 'phi', 'm'), aux=None):
		"""Builds a collection from the '<prefix>_<var>' entries of an event dict."""
		values = {v: data['{}_{}'.format(prefix, v)] for v in kinematics}
		_aux = None if aux is None else data['{}_{}'.format(prefix, aux)]
		return cls(values['pt'], values.get('eta'), values.get('phi'), values.get('m'), aux=_aux)


class Event(object):
	def __init__(self, mu_average=0., npv=0, weight=1., **collections):
		self.mu_average = float(mu_average)
		self.npv = int(npv)
		self.weight = float(weight)
		self.collections = collections

	def __getattr__(self, key):
		try:
			return self.__dict__['collections'][key]
		except KeyError:
			raise AttributeError('event has no collection named {}'.format(key)) from None

	def has(self, name):
		return name in self.collections

	def leading(self, name):
		return self.collections[name].leading()
