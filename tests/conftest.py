import collections

import pytest

from jetreco.jrutils import Event, JetCollection

GeV = 1.e3


class RecordingHists:
    """Stands in for RootHistogramSet: records every fill per histogram."""

    def __init__(self):
        self.hdefs = collections.OrderedDict()
        self.fills = collections.defaultdict(list)

    def book(self, hd):
        assert hd.name not in self.hdefs, "booked twice: {}".format(hd.name)
        self.hdefs[hd.name] = hd

    def __len__(self):
        return len(self.hdefs)

    def fill(self, name, *values, weight=None):
        if name not in self.hdefs:
            raise KeyError(name)
        self.fills[name].append((values, weight))

    def values(self, name):
        return [v[0] if len(v) == 1 else v for v, _ in self.fills[name]]

    def weights(self, name):
        return [w for _, w in self.fills[name]]

    def filled(self):
        return sorted(n for n, f in self.fills.items() if f)


def book_all(stages):
    hists = RecordingHists()
    for s in stages:
        for hd in s.hists:
            hists.book(hd)
    return hists


def jets(*specs, aux=None):
    """jets((pt_GeV, eta, phi), ...) -> JetCollection in MeV."""
    pt = [s[0] * GeV for s in specs]
    eta = [s[1] if len(s) > 1 else 0. for s in specs]
    phi = [s[2] if len(s) > 2 else 0. for s in specs]
    m = [s[3] * GeV if len(s) > 3 else 0. for s in specs]
    return JetCollection(pt, eta, phi, m, aux=aux)


@pytest.fixture
def exp_event():
    def _make(reco=(), truth=(), track=(), jvf=None, mu=20., npv=10, weight=1.):
        return Event(mu_average=mu, npv=npv, weight=weight,
                     RecoJets_R4=jets(*reco, aux=jvf if jvf is not None else [0.] * len(reco)),
                     TruthJets_R4=jets(*truth),
                     TrackJets_R4=jets(*track))
    return _make
