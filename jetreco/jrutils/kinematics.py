import math

import numpy as np

# momenta are stored in MeV
GeV = 1e3

# leading truth and reco jets closer than this are considered matched
match_dr_max = 0.3


def delta_phi(phi1, phi2):
	"""Azimuthal difference wrapped into (-pi, pi]."""
	dphi = math.fmod(phi1 - phi2, 2. * math.pi)
	if dphi > math.pi:
		dphi -= 2. * math.pi
	elif dphi <= -math.pi:
		dphi += 2. * math.pi
	return dphi


def delta_r(eta1, phi1, eta2, phi2):
	return math.sqrt((eta1 - eta2) ** 2 + delta_phi(phi1, phi2) ** 2)


def count_above(pts, pt_min):
	# strict floor
	return int(np.count_nonzero(np.asarray(pts) > pt_min))


def mu_regime(mu):
	"""Pileup regime of an event: 'low', 'mid', 'high' or None in the gaps."""
	if mu < 30:
		return 'low'
	if 35 < mu < 45:
		return 'mid'
	if mu > 50:
		return 'high'
	return None


def match_leading(truth, reco, dr_max=match_dr_max):
	"""Returns (dr, matched) for two leading jets, or (None, False) if either is missing."""
	if truth is None or reco is None:
		return None, False
	dr = delta_r(truth.eta, truth.phi, reco.eta, reco.phi)
	return dr, dr < dr_max


def pt_eta_phi_m_to_pxpypze(pt, eta, phi, m):
	pt = np.asarray(pt, dtype=np.float64)
	eta = np.asarray(eta, dtype=np.float64)
	phi = np.asarray(phi, dtype=np.float64)
	m = np.asarray(m, dtype=np.float64)
	px = pt * np.cos(phi)
	py = pt * np.sin(phi)
	pz = pt * np.sinh(eta)
	e = np.sqrt(px * px + py * py + pz * pz + m * m)
	return px, py, pz, e
