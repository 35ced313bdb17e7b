#!/usr/bin/env python3

"""
  Stage definitions for the large-R (R=1.0) jet pipeline: event-level
  information, pre-built ungroomed/trimmed jets, self-clustered jets,
  groomed variants and their D2 / tau32 substructure.

  Stages 3 to 5 use a tools object (see GroomingTools) passed through the
  per-event context as ctx['tools']; stage 3 leaves the jets it builds in
  ctx['jets'] for the later stages.
"""

from jetreco.jrutils import Event, JetCollection, GeV
from jetreco.stages import Stage, HistDef

mass_pt_min = 400 * GeV

groomed_variants = ['pruned', 'sd', 'rsd', 'busd', 'busdt']
all_variants = ['ungroomed', 'trimmed'] + groomed_variants

step4_tags = {'pruned': 'Pruned', 'sd': 'SD', 'rsd': 'RSD', 'busd': 'BUSD', 'busdt': 'BUSDT'}
step5_tags = dict(step4_tags, ungroomed='Ungroomed', trimmed='Trimmed')
variant_titles = {'ungroomed': 'Ungroomed', 'trimmed': 'Trimmed', 'pruned': 'Pruned', 'sd': 'SD',
                  'rsd': 'RSD', 'busd': 'BUSD', 'busdt': 'Tight BUSD'}

pt_bins = (215, 50.e3, 2200.e3)
mass_bins = (99, 10.e3, 1000.e3)


#---------------------------------------------------------------
def names_for(truth=False):
  """(jet collection, constituent collection) branch prefixes."""
  if truth:
    return 'TruthJets', 'Particles'
  return 'RecoJets', 'Clusters'


################################################################
# Step 1: event-level information
################################################################
step1_hists = [
  HistDef('Step1_mu', 'TH1I', '#mu_{average}', (100, 0, 100)),
  HistDef('Step1_npv', 'TH1I', 'NPV', (50, 0, 50)),
]

def fill_step1(event, hists, ctx):
  hists.fill('Step1_mu', event.mu_average)
  hists.fill('Step1_npv', event.npv)


################################################################
# Step 2: existing jets and the event weight
################################################################
step2_hists = [
  HistDef('Step2_UngroomPt_noweight', 'TH1F', 'Leading ungroomed R=1.0 jet p_{T}, no weights', pt_bins),
  HistDef('Step2_UngroomPt', 'TH1F', 'Leading ungroomed R=1.0 jet p_{T}', pt_bins),
  HistDef('Step2_TrimmedPt', 'TH1F', 'Leading trimmed R=1.0 jet p_{T}', pt_bins),
  HistDef('Step2_UngroomMass', 'TH1F', 'Leading ungroomed R=1.0 jet mass', mass_bins),
  HistDef('Step2_TrimmedMass', 'TH1F', 'Leading trimmed R=1.0 jet mass', mass_bins),
]

def fill_step2(event, hists, ctx):
  j = event.jets.leading()
  if j is not None:
    hists.fill('Step2_UngroomPt_noweight', j.pt)
    hists.fill('Step2_UngroomPt', j.pt, weight=event.weight)
    if j.pt > mass_pt_min:
      hists.fill('Step2_UngroomMass', j.m, weight=event.weight)
  jt = event.trimmed.leading()
  if jt is not None:
    hists.fill('Step2_TrimmedPt', jt.pt, weight=event.weight)
    if jt.pt > mass_pt_min:
      hists.fill('Step2_TrimmedMass', jt.m, weight=event.weight)


################################################################
# Step 3: building our own R=1.0 jets from the constituents
################################################################
step3_hists = [
  HistDef('Step3_MyUngroomPt_noweight', 'TH1F', 'My leading ungroomed R=1.0 jet p_{T}, no weights', pt_bins),
  HistDef('Step3_MyUngroomPt', 'TH1F', 'My leading ungroomed R=1.0 jet p_{T}', pt_bins),
  HistDef('Step3_MyTrimmedPt_noweight', 'TH1F', 'My leading trimmed R=1.0 jet p_{T}, no weights', pt_bins),
  HistDef('Step3_MyTrimmedPt', 'TH1F', 'My leading trimmed R=1.0 jet p_{T}', pt_bins),
]

def fill_step3(event, hists, ctx):
  tools = ctx['tools']
  jets = ctx['jets'] = {}
  ungroomed = tools.cluster(event.constituents)
  if ungroomed is None:
    return
  trimmed = tools.groom('trimmed', ungroomed)
  jets['ungroomed'] = ungroomed
  jets['trimmed'] = trimmed
  hists.fill('Step3_MyUngroomPt_noweight', ungroomed.pt())
  hists.fill('Step3_MyUngroomPt', ungroomed.pt(), weight=event.weight)
  hists.fill('Step3_MyTrimmedPt_noweight', trimmed.pt())
  hists.fill('Step3_MyTrimmedPt', trimmed.pt(), weight=event.weight)


################################################################
# Step 4: other groomed R=1.0 jets
################################################################
step4_hists = []
for v in groomed_variants:
  step4_hists.append(HistDef('Step4_My{}Pt'.format(step4_tags[v]), 'TH1F',
                             'My leading {} R=1.0 jet p_{{T}}'.format(variant_titles[v]), pt_bins))
  step4_hists.append(HistDef('Step4_My{}Mass'.format(step4_tags[v]), 'TH1F',
                             'My leading {} R=1.0 jet mass'.format(variant_titles[v]), mass_bins))

def fill_step4(event, hists, ctx):
  jets = ctx.get('jets', {})
  ungroomed = jets.get('ungroomed')
  if ungroomed is None:
    return
  tools = ctx['tools']
  for v in groomed_variants:
    groomed = tools.groom(v, ungroomed)
    jets[v] = groomed
    hists.fill('Step4_My{}Pt'.format(step4_tags[v]), groomed.pt(), weight=event.weight)
    if groomed.pt() > mass_pt_min:
      hists.fill('Step4_My{}Mass'.format(step4_tags[v]), groomed.m(), weight=event.weight)


################################################################
# Step 5: substructure of every jet type
################################################################
step5_hists = []
for v in all_variants:
  step5_hists.append(HistDef('Step5_{}_D2'.format(step5_tags[v]), 'TH1F',
                             '{} R=1.0 jet D_{{2}}^{{#beta=1}}'.format(variant_titles[v]), (20, 0, 5)))
  step5_hists.append(HistDef('Step5_{}_Tau32'.format(step5_tags[v]), 'TH1F',
                             '{} R=1.0 jet #tau_{{32}}^{{WTA}}'.format(variant_titles[v]), (20, 0, 1)))

def fill_step5(event, hists, ctx):
  jets = ctx.get('jets', {})
  tools = ctx['tools']
  pt_min = getattr(tools, 'substructure_pt_min', mass_pt_min)
  for v in all_variants:
    j = jets.get(v)
    if j is None or not j.pt() > pt_min:
      continue
    d2 = tools.d2(j)
    if d2 is not None:
      hists.fill('Step5_{}_D2'.format(step5_tags[v]), d2, weight=event.weight)
    tau32 = tools.tau32(j)
    if tau32 is not None:
      hists.fill('Step5_{}_Tau32'.format(step5_tags[v]), tau32, weight=event.weight)


#---------------------------------------------------------------
def make_stages(truth=False):
  jet_type, input_type = names_for(truth)
  return [
    Stage(number=1, name='event', description='event-level information',
          branches=['mu_average', 'NPV'], hists=step1_hists, fill=fill_step1),
    Stage(number=2, name='jets', description='existing jets and the event weight',
          branches=['EventWeight'] + ['{}_R10_{}'.format(jet_type, v) for v in ['pt', 'm']]
                   + ['{}_R10_Trimmed_{}'.format(jet_type, v) for v in ['pt', 'm']],
          hists=step2_hists, fill=fill_step2),
    Stage(number=3, name='clustering', description='building our own R=1.0 jets from {}'.format(input_type.lower()),
          branches=['{}_{}'.format(input_type, v) for v in ['pt', 'eta', 'phi', 'm']],
          hists=step3_hists, fill=fill_step3),
    Stage(number=4, name='grooming', description='building other types of R=1.0 jets',
          branches=[], hists=step4_hists, fill=fill_step4),
    Stage(number=5, name='substructure', description='calculating substructure variables for R=1.0 jets',
          branches=[], hists=step5_hists, fill=fill_step5),
  ]

#---------------------------------------------------------------
def make_event(data, truth=False):
  jet_type, input_type = names_for(truth)
  collections = {}
  if '{}_R10_pt'.format(jet_type) in data:
    collections['jets'] = JetCollection.from_branches(data, '{}_R10'.format(jet_type), kinematics=('pt', 'm'))
    collections['trimmed'] = JetCollection.from_branches(data, '{}_R10_Trimmed'.format(jet_type), kinematics=('pt', 'm'))
  if '{}_pt'.format(input_type) in data:
    collections['constituents'] = JetCollection.from_branches(data, input_type)
  return Event(mu_average=data.get('mu_average', 0.),
               npv=data.get('NPV', 0),
               weight=data.get('EventWeight', 1.),
               **collections)
