#!/usr/bin/env python3

"""
  Plots for the R=0.4 jet tutorial, one pdf page per comparison.

  Usage: jetRecoExp_plots <output pdf file> <step number> <input root file>
"""

from jetreco.plotting.plot_utils import plots_main
from jetreco.plotting.styles import exp_pages
from jetreco.exp.jet_reco_exp import step_help


def main(argv=None):
  plots_main(argv, 'jetRecoExp_plots', 'Plots of the R=0.4 jet reconstruction histograms',
             step_help, exp_pages)


if __name__ == '__main__':
  main()
