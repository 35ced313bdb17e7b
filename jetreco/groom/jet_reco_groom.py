#!/usr/bin/env python3

"""
  Large-R jet reconstruction tutorial: rebuilds R=1.0 jets from clusters
  (or truth particles), grooms them and computes D2 and tau32.

  Usage: jetRecoGroom <output root file> <step number> <input tree name> <input root file>
"""

import argparse
import sys

from jetreco.jrutils import ArgumentParser, JetRecoError, config_path, perror, pinfo
from jetreco.process_base import ProcessBase
from jetreco.stages import stage_active
from jetreco.groom import groom_stages

step_help = '''valid step number options:
  0 = all steps
  1 = only step 1  (event-level information)
  2 = up to step 2 (existing jets and the event weight)
  3 = up to step 3 (building our own R=1.0 jets from topoclusters)
  4 = up to step 4 (building other types of R=1.0 jets from topoclusters)
  5 = up to step 5 (calculating substructure variables for R=1.0 jets)'''

################################################################
class JetRecoGroom(ProcessBase):

  #---------------------------------------------------------------
  # Constructor
  #---------------------------------------------------------------
  def __init__(self, truth=False, **kwargs):
    super(JetRecoGroom, self).__init__(**kwargs)
    self.truth = truth

  def make_stages(self):
    return groom_stages.make_stages(truth=self.truth)

  def make_event(self, data):
    return groom_stages.make_event(data, truth=self.truth)

  #---------------------------------------------------------------
  # fastjet tools are only set up when a clustering stage runs
  #---------------------------------------------------------------
  def event_context(self):
    if not stage_active(3, self.step):
      return {}
    from jetreco.groom.groomers import GroomingTools
    tools = GroomingTools(config=self.config)
    input_type = groom_stages.names_for(self.truth)[1]
    pinfo('clustering R={} jets from {}'.format(tools.jet_R, input_type))
    return {'tools': tools}


#---------------------------------------------------------------
def get_parser():
  parser = ArgumentParser(prog='jetRecoGroom', description='Large-R jet reconstruction, grooming and substructure',
                          epilog=step_help, formatter_class=argparse.RawDescriptionHelpFormatter)
  parser.add_argument('output', help='output root file')
  parser.add_argument('step', type=int, help='step number, see below')
  parser.add_argument('tree', help='input tree name')
  parser.add_argument('input', help='input root file')
  parser.add_argument('-c', '--config', default=config_path('groom.yaml'), help='yaml configuration file')
  parser.add_argument('--nev', type=int, default=None, help='maximum number of events')
  parser.add_argument('--truth', action='store_true', default=False,
                      help='use TruthJets and Particles instead of RecoJets and Clusters')
  return parser

#---------------------------------------------------------------
def main(argv=None):
  args = get_parser().parse_args(argv)
  try:
    analysis = JetRecoGroom(input_file=args.input, tree_name=args.tree, output_file=args.output,
                            step=args.step, config_file=args.config, nev=args.nev, truth=args.truth)
    analysis.process()
  except JetRecoError as e:
    perror(e)
    sys.exit(1)


if __name__ == '__main__':
  main()
