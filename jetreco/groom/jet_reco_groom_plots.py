#!/usr/bin/env python3

"""
  Plots for the large-R jet grooming tutorial, one pdf page per comparison.

  Usage: jetRecoGroom_plots <output pdf file> <step number> <input root file>
"""

from jetreco.plotting.plot_utils import plots_main
from jetreco.plotting.styles import groom_pages
from jetreco.groom.jet_reco_groom import step_help


def main(argv=None):
  plots_main(argv, 'jetRecoGroom_plots', 'Plots of the large-R jet grooming and substructure histograms',
             step_help, groom_pages)


if __name__ == '__main__':
  main()
