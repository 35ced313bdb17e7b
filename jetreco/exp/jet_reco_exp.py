#!/usr/bin/env python3

"""
  R=0.4 jet reconstruction tutorial: pileup, JVF and jet response histograms.

  Usage: jetRecoExp <output root file> <step number> <input tree name> <input root file>
"""

import argparse
import sys

from jetreco.jrutils import ArgumentParser, JetRecoError, config_path, perror
from jetreco.process_base import ProcessBase
from jetreco.exp import exp_stages

step_help = '''valid step number options:
  0 = all steps
  1 = only step 1  (event-level information)
  2 = up to step 2 (cluster and truth jets and the event weight)
  3 = up to step 3 (pileup dependence)
  4 = up to step 4 (tracks and track jets)
  5 = up to step 5 (jet response studies)'''

################################################################
class JetRecoExp(ProcessBase):

  def make_stages(self):
    return exp_stages.make_stages()

  def make_event(self, data):
    return exp_stages.make_event(data)


#---------------------------------------------------------------
def get_parser():
  parser = ArgumentParser(prog='jetRecoExp', description='R=0.4 jet reconstruction and pileup studies',
                          epilog=step_help, formatter_class=argparse.RawDescriptionHelpFormatter)
  parser.add_argument('output', help='output root file')
  parser.add_argument('step', type=int, help='step number, see below')
  parser.add_argument('tree', help='input tree name')
  parser.add_argument('input', help='input root file')
  parser.add_argument('-c', '--config', default=config_path('exp.yaml'), help='yaml configuration file')
  parser.add_argument('--nev', type=int, default=None, help='maximum number of events')
  return parser

#---------------------------------------------------------------
def main(argv=None):
  args = get_parser().parse_args(argv)
  try:
    analysis = JetRecoExp(input_file=args.input, tree_name=args.tree, output_file=args.output,
                          step=args.step, config_file=args.config, nev=args.nev)
    analysis.process()
  except JetRecoError as e:
    perror(e)
    sys.exit(1)


if __name__ == '__main__':
  main()
