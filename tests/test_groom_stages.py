import pytest

from jetreco.groom import groom_stages
from jetreco.jrutils import Event, JetCollection
from jetreco.stages import StageRunner

from conftest import RecordingHists, GeV


class FakeJet:
    def __init__(self, pt, m=0.):
        self._pt = pt
        self._m = m

    def pt(self):
        return self._pt

    def m(self):
        return self._m


class FakeTools:
    """Grooming halves the jet pt and mass once per variant index."""

    substructure_pt_min = 400 * GeV

    def __init__(self, leading=None, d2=1.5, tau32=0.4):
        self.leading = leading
        self._d2 = d2
        self._tau32 = tau32
        self.clustered = []

    def cluster(self, constituents):
        self.clustered.append(len(constituents))
        return self.leading

    def groom(self, variant, jet):
        f = 0.9 if variant == 'trimmed' else 0.5 + 0.1 * groom_stages.groomed_variants.index(variant)
        return FakeJet(jet.pt() * f, jet.m() * f)

    def d2(self, jet):
        return self._d2

    def tau32(self, jet):
        return self._tau32


def make_event(jets=(), trimmed=(), constituents=1, weight=1.):
    return Event(mu_average=30., npv=15, weight=weight,
                 jets=JetCollection([j[0] * GeV for j in jets], m=[j[1] * GeV for j in jets]),
                 trimmed=JetCollection([j[0] * GeV for j in trimmed], m=[j[1] * GeV for j in trimmed]),
                 constituents=JetCollection([10. * GeV] * constituents))


def run(event, tools, step=0, truth=False):
    runner = StageRunner(stages=groom_stages.make_stages(truth=truth), step=step)
    hists = RecordingHists()
    runner.book(hists)
    ctx = runner.process(event, hists, tools=tools)
    return hists, ctx


def test_step2_mass_gate():
    ev = make_event(jets=[(500., 90.), (300., 20.)], trimmed=[(350., 80.)], weight=2.)
    hists, _ = run(ev, None, step=2)
    assert hists.values('Step2_UngroomPt_noweight') == [500. * GeV]
    assert hists.weights('Step2_UngroomPt_noweight') == [None]
    assert hists.weights('Step2_UngroomPt') == [2.]
    assert hists.values('Step2_UngroomMass') == [90. * GeV]
    assert hists.values('Step2_TrimmedPt') == [350. * GeV]
    assert hists.values('Step2_TrimmedMass') == []

def test_step2_trimmed_independent_of_ungroomed():
    hists, _ = run(make_event(trimmed=[(450., 70.)]), None, step=2)
    assert hists.values('Step2_UngroomPt') == []
    assert hists.values('Step2_TrimmedMass') == [70. * GeV]

def test_step3_clusters_and_trims():
    tools = FakeTools(leading=FakeJet(1000. * GeV, 100. * GeV))
    hists, ctx = run(make_event(constituents=3, weight=0.5), tools, step=3)
    assert tools.clustered == [3]
    assert hists.values('Step3_MyUngroomPt_noweight') == [1000. * GeV]
    assert hists.values('Step3_MyTrimmedPt') == [pytest.approx(900. * GeV)]
    assert hists.weights('Step3_MyTrimmedPt') == [0.5]
    assert set(ctx['jets']) == {'ungroomed', 'trimmed'}

def test_no_clustered_jet_skips_later_stages():
    tools = FakeTools(leading=None)
    hists, ctx = run(make_event(constituents=0), tools)
    assert ctx['jets'] == {}
    assert not any(name.startswith(('Step3_', 'Step4_', 'Step5_')) for name in hists.filled())

def test_step4_groomed_variants():
    tools = FakeTools(leading=FakeJet(1000. * GeV, 100. * GeV))
    hists, ctx = run(make_event(), tools, step=4)
    # pruned keeps half the pt, busdt keeps 90%
    assert hists.values('Step4_MyPrunedPt') == [pytest.approx(500. * GeV)]
    assert hists.values('Step4_MyBUSDTPt') == [pytest.approx(900. * GeV)]
    # 500 GeV is above the mass threshold, 400 GeV is not
    assert hists.values('Step4_MyPrunedMass') == [pytest.approx(50. * GeV)]
    tools = FakeTools(leading=FakeJet(800. * GeV, 100. * GeV))
    hists, _ = run(make_event(), tools, step=4)
    assert hists.values('Step4_MyPrunedMass') == []
    assert len(hists.values('Step4_MySDMass')) == 1
    assert len(hists.values('Step4_MyPrunedPt')) == 1

def test_step5_substructure_all_variants():
    tools = FakeTools(leading=FakeJet(2000. * GeV, 100. * GeV), d2=2.5, tau32=0.3)
    hists, _ = run(make_event(weight=3.), tools)
    for tag in ['Ungroomed', 'Trimmed', 'Pruned', 'SD', 'RSD', 'BUSD', 'BUSDT']:
        assert hists.values('Step5_{}_D2'.format(tag)) == [2.5]
        assert hists.values('Step5_{}_Tau32'.format(tag)) == [0.3]
        assert hists.weights('Step5_{}_D2'.format(tag)) == [3.]

def test_step5_pt_threshold_and_undefined_values():
    tools = FakeTools(leading=FakeJet(700. * GeV, 100. * GeV), d2=None, tau32=0.6)
    hists, _ = run(make_event(), tools)
    assert hists.values('Step5_Ungroomed_D2') == []
    assert hists.values('Step5_Ungroomed_Tau32') == [0.6]
    # pruned at 350 GeV is below the threshold, sd at 420 GeV is not
    assert hists.values('Step5_Pruned_Tau32') == []
    assert hists.values('Step5_SD_Tau32') == [0.6]

def test_make_event_truth_collections():
    data = {'mu_average': 22., 'NPV': 9, 'EventWeight': 0.1,
            'TruthJets_R10_pt': [600. * GeV], 'TruthJets_R10_m': [80. * GeV],
            'TruthJets_R10_Trimmed_pt': [550. * GeV], 'TruthJets_R10_Trimmed_m': [75. * GeV],
            'Particles_pt': [1., 2.], 'Particles_eta': [0., 0.], 'Particles_phi': [0., 1.], 'Particles_m': [0., 0.]}
    ev = groom_stages.make_event(data, truth=True)
    assert ev.jets.leading().m == 80. * GeV
    assert ev.trimmed.leading().pt == 550. * GeV
    assert len(ev.constituents) == 2
    assert ev.weight == pytest.approx(0.1)
    assert not groom_stages.make_event(data, truth=False).has('jets')
