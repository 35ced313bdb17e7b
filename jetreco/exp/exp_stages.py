#!/usr/bin/env python3

"""
  Stage definitions for the R=0.4 jet pipeline: event-level pileup
  information, cluster/truth/track jets, pileup dependence, JVF and the
  truth matched jet response.

  All momenta are in MeV.
"""

from jetreco.jrutils import Event, JetCollection, GeV
from jetreco.jrutils import count_above, mu_regime, match_leading
from jetreco.stages import Stage, HistDef

njets_pt_min = 20 * GeV
jvf_pt_floors = [20, 60, 100]
jvf_cut = 0.5
response_pt_floors = [20, 100, 1000]

reco = 'RecoJets_R4'
truth = 'TruthJets_R4'
track = 'TrackJets_R4'

kinematic_vars = ['pt', 'eta', 'phi', 'm']

collection_labels = {reco: 'cluster', truth: 'truth', track: 'track'}

regime_titles = {'low': '#mu_{average} < 30',
                 'mid': '35 < #mu_{average} < 45',
                 'high': '#mu_{average} > 50'}

pt_bins = (199, 10.e3, 2000.e3)
njets_bins = (15, 0, 30)
mu_npv_bins = (90, 0, 90, 60, 0, 60)


#---------------------------------------------------------------
def branches_for(prefix, aux=None):
  names = ['{}_{}'.format(prefix, v) for v in kinematic_vars]
  if aux:
    names.append('{}_{}'.format(prefix, aux))
  return names

#---------------------------------------------------------------
def njets_hists(stem, plural, prefix):
  label = collection_labels[prefix]
  hdefs = [HistDef('{}_njets_{}mu'.format(stem, r), 'TH1F',
                   'Number of {} jets above 20 GeV, {}'.format(label, t), njets_bins)
           for r, t in regime_titles.items()]
  hdefs.append(HistDef('{}_njets_2D'.format(plural), 'TProfile2D',
                       'Average number of {} jets above 20 GeV, vs #mu_{{average}} and NPV'.format(label),
                       mu_npv_bins))
  return hdefs

#---------------------------------------------------------------
# Multiplicity above 20 GeV into the mu regime histogram and the
# (mu, NPV) profile; an empty collection fills nothing.
#---------------------------------------------------------------
def fill_njets(event, hists, jets, stem, plural):
  if jets.empty():
    return
  njets = count_above(jets.pt, njets_pt_min)
  regime = mu_regime(event.mu_average)
  if regime is not None:
    hists.fill('{}_njets_{}mu'.format(stem, regime), njets, weight=event.weight)
  hists.fill('{}_njets_2D'.format(plural), event.mu_average, event.npv, njets, weight=event.weight)


################################################################
# Step 1: event-level information
################################################################
step1_hists = [
  HistDef('Step1_mu', 'TH1I', '#mu_{average}', (90, 0, 90)),
  HistDef('Step1_npv', 'TH1I', 'NPV', (60, 0, 60)),
  HistDef('Step1_mu_npv', 'TH2I', 'Correlation between #mu_{average} and NPV', mu_npv_bins),
]

def fill_step1(event, hists, ctx):
  hists.fill('Step1_mu', event.mu_average)
  hists.fill('Step1_npv', event.npv)
  hists.fill('Step1_mu_npv', event.mu_average, event.npv)


################################################################
# Step 2: R=0.4 cluster and truth jets and the event weight
################################################################
step2_hists = [
  HistDef('Step2_RecoJet_pt_noweight', 'TH1F', 'Leading R=0.4 cluster jet p_{T}, no weights', pt_bins),
  HistDef('Step2_RecoJet_pt', 'TH1F', 'Leading R=0.4 cluster jet p_{T}', pt_bins),
  HistDef('Step2_TruthJet_pt_noweight', 'TH1F', 'Leading R=0.4 truth jet p_{T}, no weights', pt_bins),
  HistDef('Step2_TruthJet_pt', 'TH1F', 'Leading R=0.4 truth jet p_{T}', pt_bins),
]

def fill_step2(event, hists, ctx):
  for prefix, stem in [(reco, 'Step2_RecoJet'), (truth, 'Step2_TruthJet')]:
    j = event.leading(prefix)
    if j is None:
      continue
    hists.fill('{}_pt_noweight'.format(stem), j.pt)
    hists.fill('{}_pt'.format(stem), j.pt, weight=event.weight)


################################################################
# Step 3: pileup dependence
################################################################
step3_hists = njets_hists('Step3_RecoJet', 'Step3_RecoJets', reco) + njets_hists('Step3_TruthJet', 'Step3_TruthJets', truth)

def fill_step3(event, hists, ctx):
  fill_njets(event, hists, getattr(event, reco), 'Step3_RecoJet', 'Step3_RecoJets')
  fill_njets(event, hists, getattr(event, truth), 'Step3_TruthJet', 'Step3_TruthJets')


################################################################
# Step 4: tracks and R=0.4 track jets
################################################################
step4_hists = [HistDef('Step4_RecoJet_jvf_pt{}'.format(f), 'TH1F',
                       'Leading R=0.4 jet JVF, p_{{T}} > {} GeV'.format(f), (44, -1.1, 1.1))
               for f in jvf_pt_floors]
step4_hists += [
  HistDef('Step4_RecoJet_pt_jvf', 'TH1F', 'Leading R=0.4 cluster jet p_{T} after |JVF|>0.5', pt_bins),
  HistDef('Step4_TrackJet_pt', 'TH1F', 'Leading R=0.4 track jet p_{T}', pt_bins),
]
step4_hists += njets_hists('Step4_TrackJet', 'Step4_TrackJets', track)

def fill_step4(event, hists, ctx):
  j = event.leading(reco)
  if j is not None and j.aux is not None:
    # floors are cumulative, a 100 GeV jet lands in all three
    for f in jvf_pt_floors:
      if j.pt > f * GeV:
        hists.fill('Step4_RecoJet_jvf_pt{}'.format(f), j.aux, weight=event.weight)
    if abs(j.aux) > jvf_cut:
      hists.fill('Step4_RecoJet_pt_jvf', j.pt, weight=event.weight)
  jt = event.leading(track)
  if jt is not None:
    hists.fill('Step4_TrackJet_pt', jt.pt, weight=event.weight)
  fill_njets(event, hists, getattr(event, track), 'Step4_TrackJet', 'Step4_TrackJets')


################################################################
# Step 5: jet response studies
################################################################
step5_hists = [
  HistDef('Step5_DRtruth_reco', 'TH1F', 'DR between leading truth and reco jet', (10, 0, 1)),
  HistDef('Step5_DRtruth_reco_jvf', 'TH1F', 'DR between leading truth and reco jet, after |JVF| > 0.5', (10, 0, 1)),
  HistDef('Step5_DRtruth_track', 'TH1F', 'DR between leading truth and track jet', (10, 0, 1)),
]
step5_hists += [HistDef('Step5_response_{}_pt{}'.format(kind, f), 'TH1F',
                        '{} jet p_{{T}} response, p_{{T}}^{{truth}} > {} GeV'.format(label, f), (100, 0, 2))
                for kind, label in [('reco', 'Cluster'), ('track', 'Track')]
                for f in response_pt_floors]

#---------------------------------------------------------------
def fill_response(event, hists, jtruth, j, kind):
  response = j.pt / jtruth.pt
  for f in response_pt_floors:
    if jtruth.pt > f * GeV:
      hists.fill('Step5_response_{}_pt{}'.format(kind, f), response, weight=event.weight)

def fill_step5(event, hists, ctx):
  jtruth = event.leading(truth)
  if jtruth is None:
    return
  jreco = event.leading(reco)
  dr, matched = match_leading(jtruth, jreco)
  if dr is not None:
    hists.fill('Step5_DRtruth_reco', dr)
    if jreco.aux is not None and abs(jreco.aux) > jvf_cut:
      hists.fill('Step5_DRtruth_reco_jvf', dr)
    if matched:
      fill_response(event, hists, jtruth, jreco, 'reco')
  jtrack = event.leading(track)
  dr, matched = match_leading(jtruth, jtrack)
  if dr is not None:
    hists.fill('Step5_DRtruth_track', dr)
    if matched:
      fill_response(event, hists, jtruth, jtrack, 'track')


#---------------------------------------------------------------
def make_stages():
  return [
    Stage(number=1, name='event', description='event-level information',
          branches=['mu_average', 'NPV'], hists=step1_hists, fill=fill_step1),
    Stage(number=2, name='jets', description='cluster and truth jets and the event weight',
          branches=['EventWeight'] + branches_for(reco) + branches_for(truth),
          hists=step2_hists, fill=fill_step2),
    Stage(number=3, name='pileup', description='pileup dependence',
          branches=[], hists=step3_hists, fill=fill_step3),
    Stage(number=4, name='tracks', description='tracks and track jets',
          branches=['{}_jvf'.format(reco)] + branches_for(track),
          hists=step4_hists, fill=fill_step4),
    Stage(number=5, name='response', description='jet response studies',
          branches=[], hists=step5_hists, fill=fill_step5),
  ]

#---------------------------------------------------------------
# Event from the branches read for the requested stages
#---------------------------------------------------------------
def make_event(data):
  collections = {}
  for prefix in [reco, truth, track]:
    if '{}_pt'.format(prefix) in data:
      aux = 'jvf' if '{}_jvf'.format(prefix) in data else None
      collections[prefix] = JetCollection.from_branches(data, prefix, aux=aux)
  return Event(mu_average=data.get('mu_average', 0.),
               npv=data.get('NPV', 0),
               weight=data.get('EventWeight', 1.),
               **collections)
