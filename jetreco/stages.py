"""
  Stage bookkeeping shared by the reconstruction and plotting programs.

  A run is an ordered list of five stages. Requesting stage k runs stages
  1..k, requesting 0 runs all of them. Each stage declares the branches it
  reads, the histograms it books and a fill callable invoked once per event.
"""

import collections

from jetreco.jrutils import JRBase, UsageError, pdebug

nstages = 5

HistDef = collections.namedtuple('HistDef', ['name', 'kind', 'title', 'bins'])


#---------------------------------------------------------------
def check_stage(requested):
  try:
    requested = int(requested)
  except (TypeError, ValueError):
    raise UsageError('Invalid step number: {}'.format(requested)) from None
  if requested < 0 or requested > nstages:
    raise UsageError('Invalid step number: {}'.format(requested))
  return requested

#---------------------------------------------------------------
def stage_active(k, requested):
  return requested == 0 or requested >= k


################################################################
class Stage(JRBase):

  #---------------------------------------------------------------
  # Constructor
  #---------------------------------------------------------------
  def __init__(self, **kwargs):
    self.configure_from_args(number=0, name='', description='',
                             branches=[], hists=[], fill=None)
    super(Stage, self).__init__(**kwargs)

  def hist_names(self):
    return [hd.name for hd in self.hists]


################################################################
class StageRunner(JRBase):
  """Runs the active subset of an ordered stage list over events."""

  #---------------------------------------------------------------
  # Constructor
  #---------------------------------------------------------------
  def __init__(self, **kwargs):
    self.configure_from_args(stages=[], step=0)
    super(StageRunner, self).__init__(**kwargs)
    self.step = check_stage(self.step)
    self.active = [s for s in self.stages if stage_active(s.number, self.step)]

  #---------------------------------------------------------------
  # Branches read by the active stages, in first-use order
  #---------------------------------------------------------------
  def branches(self):
    names = []
    for s in self.active:
      for b in s.branches:
        if b not in names:
          names.append(b)
    return names

  #---------------------------------------------------------------
  def hist_defs(self):
    hdefs = []
    seen = set()
    for s in self.active:
      for hd in s.hists:
        if hd.name in seen:
          raise ValueError('histogram {} booked twice'.format(hd.name))
        seen.add(hd.name)
        hdefs.append(hd)
    return hdefs

  #---------------------------------------------------------------
  def book(self, hists):
    for hd in self.hist_defs():
      hists.book(hd)
    pdebug('booked {} histograms for stages {}'.format(len(hists), [s.number for s in self.active]))

  #---------------------------------------------------------------
  # Objects built by an earlier stage reach later ones through ctx
  #---------------------------------------------------------------
  def process(self, event, hists, **context):
    ctx = dict(context)
    for s in self.active:
      s.fill(event, hists, ctx)
    return ctx
