import math

import pytest

from jetreco.exp import exp_stages
from jetreco.stages import StageRunner

from conftest import RecordingHists


def run(event, step=0):
    runner = StageRunner(stages=exp_stages.make_stages(), step=step)
    hists = RecordingHists()
    runner.book(hists)
    runner.process(event, hists)
    return hists


def test_matched_pair_scenario(exp_event):
    ev = exp_event(truth=[(50., 0., 0., 5.)], reco=[(45., 0.05, 0.05, 4.)], weight=2.)
    hists = run(ev)
    assert hists.values('Step5_DRtruth_reco') == [pytest.approx(math.sqrt(2) * 0.05)]
    assert hists.weights('Step5_DRtruth_reco') == [None]
    assert hists.values('Step5_response_reco_pt20') == [pytest.approx(0.9)]
    assert hists.weights('Step5_response_reco_pt20') == [2.]
    assert hists.values('Step5_response_reco_pt100') == []

def test_no_reco_jets_fills_only_truth(exp_event):
    ev = exp_event(truth=[(50., 0., 0.)], reco=[])
    hists = run(ev, step=5)
    assert hists.values('Step2_TruthJet_pt_noweight') == [50.e3]
    assert hists.values('Step2_TruthJet_pt') == [50.e3]
    assert hists.values('Step2_RecoJet_pt_noweight') == []
    assert hists.values('Step2_RecoJet_pt') == []
    assert hists.values('Step5_DRtruth_reco') == []
    assert hists.values('Step3_RecoJet_njets_lowmu') == []

def test_leading_pt_fills_once_per_event(exp_event):
    ev = exp_event(reco=[(30.,), (80.,), (25.,)], truth=[(90.,)], weight=0.5)
    hists = run(ev, step=2)
    assert hists.values('Step2_RecoJet_pt') == [80.e3]
    assert hists.weights('Step2_RecoJet_pt') == [0.5]
    assert hists.weights('Step2_RecoJet_pt_noweight') == [None]

def test_step1_unweighted(exp_event):
    hists = run(exp_event(mu=33.5, npv=17, weight=3.), step=1)
    assert hists.values('Step1_mu') == [33.5]
    assert hists.values('Step1_npv') == [17]
    assert hists.values('Step1_mu_npv') == [(33.5, 17)]
    assert set(hists.weights('Step1_mu')) == {None}

def test_multiplicity_floor_is_strict(exp_event):
    ev = exp_event(reco=[(20.,), (20.001,), (60.,), (5.,)], truth=[(20.,)], mu=10., npv=4, weight=1.5)
    hists = run(ev, step=3)
    assert hists.values('Step3_RecoJet_njets_lowmu') == [2]
    assert hists.weights('Step3_RecoJet_njets_lowmu') == [1.5]
    assert hists.values('Step3_TruthJet_njets_lowmu') == [0]
    assert hists.values('Step3_RecoJets_njets_2D') == [(10., 4, 2)]
    assert hists.values('Step3_RecoJet_njets_midmu') == []

def test_multiplicity_regime_gap(exp_event):
    hists = run(exp_event(reco=[(50.,)], truth=[(50.,)], mu=32.), step=3)
    for r in ['low', 'mid', 'high']:
        assert hists.values('Step3_RecoJet_njets_{}mu'.format(r)) == []
    assert len(hists.values('Step3_RecoJets_njets_2D')) == 1

@pytest.mark.parametrize("mu,regime", [(40., 'mid'), (60., 'high')])
def test_multiplicity_regimes(exp_event, mu, regime):
    hists = run(exp_event(track=[(30.,), (40.,)], truth=[(50.,)], mu=mu), step=4)
    assert hists.values('Step4_TrackJet_njets_{}mu'.format(regime)) == [2]

def test_jvf_floors_are_cumulative(exp_event):
    hists = run(exp_event(reco=[(150.,)], jvf=[0.8], weight=2.), step=4)
    for f in [20, 60, 100]:
        assert hists.values('Step4_RecoJet_jvf_pt{}'.format(f)) == [pytest.approx(0.8)]
        assert hists.weights('Step4_RecoJet_jvf_pt{}'.format(f)) == [2.]
    assert hists.values('Step4_RecoJet_pt_jvf') == [150.e3]

def test_jvf_floor_partial(exp_event):
    hists = run(exp_event(reco=[(70.,)], jvf=[-0.3]), step=4)
    assert len(hists.values('Step4_RecoJet_jvf_pt20')) == 1
    assert len(hists.values('Step4_RecoJet_jvf_pt60')) == 1
    assert hists.values('Step4_RecoJet_jvf_pt100') == []
    assert hists.values('Step4_RecoJet_pt_jvf') == []

def test_negative_jvf_survives_cut(exp_event):
    hists = run(exp_event(reco=[(70.,)], jvf=[-0.6]), step=4)
    assert hists.values('Step4_RecoJet_pt_jvf') == [70.e3]

def test_unmatched_pair_fills_only_separation(exp_event):
    ev = exp_event(truth=[(200., 0., 0.)], reco=[(180., 1., 0.)], track=[(150., 0.1, 0.)])
    hists = run(ev)
    assert hists.values('Step5_DRtruth_reco') == [pytest.approx(1.)]
    for f in [20, 100, 1000]:
        assert hists.values('Step5_response_reco_pt{}'.format(f)) == []
    assert hists.values('Step5_response_track_pt20') == [pytest.approx(0.75)]
    assert hists.values('Step5_response_track_pt100') == [pytest.approx(0.75)]
    assert hists.values('Step5_response_track_pt1000') == []

def test_response_floors_nested(exp_event):
    ev = exp_event(truth=[(1200., 0., 0.)], reco=[(1100., 0., 0.1)])
    hists = run(ev)
    for f in [20, 100, 1000]:
        assert len(hists.values('Step5_response_reco_pt{}'.format(f))) == 1

def test_dr_after_jvf_cut(exp_event):
    ev = exp_event(truth=[(100.,)], reco=[(90., 0.1, 0.)], jvf=[0.2])
    hists = run(ev)
    assert len(hists.values('Step5_DRtruth_reco')) == 1
    assert hists.values('Step5_DRtruth_reco_jvf') == []
    ev = exp_event(truth=[(100.,)], reco=[(90., 0.1, 0.)], jvf=[0.9])
    hists = run(ev)
    assert len(hists.values('Step5_DRtruth_reco_jvf')) == 1

def test_make_event_only_reads_present_collections():
    ev = exp_stages.make_event({'mu_average': 12.5, 'NPV': 3})
    assert ev.mu_average == 12.5 and ev.npv == 3 and ev.weight == 1.
    assert not ev.has('RecoJets_R4')
