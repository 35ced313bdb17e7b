#!/usr/bin/env python3

"""
  fastjet / fjcontrib tools for the large-R jet pipeline: anti-kt clustering
  of clusters (or truth particles), the grooming algorithms and the D2 and
  tau32 substructure ratios.
"""

# Fastjet via python (from external library heppy)
import fastjet as fj
import fjcontrib
import fjext

from jetreco.jrutils import JRBase, ConfigurationError, pdebug, pt_eta_phi_m_to_pxpypze


################################################################
class GroomingTools(JRBase):

  #---------------------------------------------------------------
  # Constructor
  #---------------------------------------------------------------
  def __init__(self, config=None, **kwargs):
    super(GroomingTools, self).__init__(**kwargs)
    self.config = config if config is not None else {}
    try:
      self.initialize_tools()
    except (KeyError, TypeError) as e:
      raise ConfigurationError('incomplete grooming configuration: {}'.format(e)) from e
    # the last clustering has to stay alive while its jets are groomed
    self.cs = None

  #---------------------------------------------------------------
  def initialize_tools(self):
    c = self.config
    self.jet_R = c.get('jet_R', 1.0)
    self.jet_def = fj.JetDefinition(fj.antikt_algorithm, self.jet_R)

    trim = c['trimming']
    self.trimmer = fj.Filter(fj.JetDefinition(fj.kt_algorithm, trim['subjet_R']),
                             fj.SelectorPtFractionMin(trim['fcut']))

    prune = c['pruning']
    self.pruner = fj.Pruner(fj.JetDefinition(fj.cambridge_algorithm, self.jet_R),
                            prune['zcut'], prune['rcut_factor'])

    sd = c['soft_drop']
    self.sd = fjcontrib.SoftDrop(sd['beta'], sd['zcut'], self.jet_R)
    rsd = c['recursive_soft_drop']
    self.rsd = fjcontrib.RecursiveSoftDrop(rsd['beta'], rsd['zcut'], rsd.get('n', -1), self.jet_R)
    busd = c['bottom_up_soft_drop']
    self.busd = fjcontrib.BottomUpSoftDrop(busd['beta'], busd['zcut'], self.jet_R)
    busdt = c['bottom_up_soft_drop_tight']
    self.busdt = fjcontrib.BottomUpSoftDrop(busdt['beta'], busdt['zcut'], self.jet_R)

    self.groomers = {'trimmed': self.trimmer, 'pruned': self.pruner, 'sd': self.sd,
                     'rsd': self.rsd, 'busd': self.busd, 'busdt': self.busdt}

    sub = c.get('substructure', {})
    beta = sub.get('beta', 1.0)
    self.substructure_pt_min = sub.get('pt_min', 400.e3)
    self.ecf1 = fjcontrib.EnergyCorrelator(1, beta)
    self.ecf2 = fjcontrib.EnergyCorrelator(2, beta)
    self.ecf3 = fjcontrib.EnergyCorrelator(3, beta)
    self.nsub2 = fjcontrib.Nsubjettiness(2, fjcontrib.OnePass_WTA_KT_Axes(), fjcontrib.UnnormalizedMeasure(beta))
    self.nsub3 = fjcontrib.Nsubjettiness(3, fjcontrib.OnePass_WTA_KT_Axes(), fjcontrib.UnnormalizedMeasure(beta))

    pdebug('jet definition:', self.jet_def.description())
    pdebug('trimmer:', self.trimmer.description())
    pdebug('soft drop:', self.sd.description())

  #---------------------------------------------------------------
  # Leading anti-kt jet of the constituents, None if there is none
  #---------------------------------------------------------------
  def cluster(self, constituents):
    if len(constituents) == 0:
      self.cs = None
      return None
    px, py, pz, e = pt_eta_phi_m_to_pxpypze(constituents.pt, constituents.eta, constituents.phi, constituents.m)
    parts = fjext.vectorize_px_py_pz_e(px, py, pz, e)
    self.cs = fj.ClusterSequence(parts, self.jet_def)
    jets = fj.sorted_by_pt(self.cs.inclusive_jets())
    if len(jets) == 0:
      return None
    return jets[0]

  #---------------------------------------------------------------
  def groom(self, variant, jet):
    return self.groomers[variant].result(jet)

  #---------------------------------------------------------------
  # D2 = ECF3 * ECF1^3 / ECF2^3, None when ECF2 vanishes
  #---------------------------------------------------------------
  def d2(self, jet):
    ecf2 = self.ecf2.result(jet)
    if ecf2 == 0:
      return None
    return self.ecf3.result(jet) * self.ecf1.result(jet) ** 3 / ecf2 ** 3

  #---------------------------------------------------------------
  def tau32(self, jet):
    tau2 = self.nsub2.result(jet)
    if tau2 == 0:
      return None
    return self.nsub3.result(jet) / tau2
