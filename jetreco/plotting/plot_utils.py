#!/usr/bin/env python3

"""
  ROOT rendering of the stage pages described in jetreco.plotting.styles:
  a canvas printed page by page into one pdf, histograms styled, optionally
  normalized and fitted, and overlaid with a legend.
"""

import argparse
import os
import sys

import ROOT

from jetreco.jrutils import ArgumentParser, JetRecoError, UsageError, OutputFileError
from jetreco.jrutils import perror, pinfo, pwarning, pdebug
from jetreco.rootutils.histset import HistFile, normalize
from jetreco.rootutils.quiet import Quiet
from jetreco.stages import check_stage, stage_active
from jetreco.plotting import styles

ROOT.gROOT.SetBatch(True)


#---------------------------------------------------------------
def color_code(name):
  base, _, offset = name.partition('+')
  return getattr(ROOT, base) + (int(offset) if offset else 0)


################################################################
class PdfBook(object):
  """Multi-page pdf: name[ on open, one Print per page, name] on close."""

  def __init__(self, file_name, width=800, height=600):
    self.file_name = file_name
    self.npages = 0
    self.canvas = ROOT.TCanvas('canvas', 'canvas', width, height)
    self.canvas.cd()
    with Quiet('info'):
      self.canvas.Print(self.file_name + '[')

  def __enter__(self):
    return self

  def __exit__(self, type, value, traceback):
    self.close()

  def print_page(self):
    with Quiet('info'):
      self.canvas.Print(self.file_name)
    self.npages += 1

  def close(self):
    if self.canvas is None:
      return
    with Quiet('info'):
      self.canvas.Print(self.file_name + ']')
    self.canvas = None


#---------------------------------------------------------------
# Gaussian fit over a window; returns (function, sigma/mu) or (None, None)
#---------------------------------------------------------------
def fit_gaussian(h, window, color=None):
  if h.Integral() <= 0:
    pwarning('no entries in {}, skipping the fit'.format(h.GetName()))
    return None, None
  xaxis = h.GetXaxis()
  f = ROOT.TF1('gauss_{}'.format(h.GetName()), 'gaus', xaxis.GetXmin(), xaxis.GetXmax())
  if color is not None:
    f.SetLineColor(color)
  with Quiet('warning'):
    h.Fit(f, 'EQ', '', window[0], window[1])
  mu = f.GetParameter(1)
  if mu == 0:
    return f, None
  return f, f.GetParameter(2) / mu


#---------------------------------------------------------------
def draw_page(book, hist_file, p):
  canvas = book.canvas
  canvas.SetLogx(p['logx'])
  canvas.SetLogy(p['logy'])
  keep = []
  entries = []
  for i, (name, color, label) in enumerate(p['hists']):
    h = hist_file.scale_to_gev(name) if p['gev'] else hist_file.get(name)
    if p['normalize']:
      normalize(h)
    h.SetLineColor(color_code(color))
    h.SetLineWidth(2)
    if p['xrange'] is not None:
      h.GetXaxis().SetRangeUser(*p['xrange'])
    if p['fit'] and name in styles.fit_windows:
      f, sigma_over_mu = fit_gaussian(h, styles.fit_windows[name], color_code(color))
      keep.append(f)
      if label is not None and sigma_over_mu is not None:
        label = styles.sigma_over_mu_label.format(label, sigma_over_mu)
    entries.append((h, label))
    if i == 0:
      style_frame(h, p)
  # the first histogram carries the frame, draw it after all fits are done
  for i, (h, label) in enumerate(entries):
    h.Draw(p['draw'] if i == 0 else '{} same'.format(p['draw']).strip())
  if p['legend'] is not None:
    legend = ROOT.TLegend(*p['legend'])
    for h, label in entries:
      if label is None:
        legend.AddEntry(h)
      else:
        legend.AddEntry(h, label)
    legend.SetBorderSize(0)
    legend.Draw('same')
    keep.append(legend)
  book.print_page()
  return keep

#---------------------------------------------------------------
def style_frame(h, p):
  if p['title'] is not None:
    h.SetTitle(p['title'])
  if p['xtitle'] is not None:
    h.GetXaxis().SetTitle(p['xtitle'])
  if p['ytitle'] is not None:
    h.GetYaxis().SetTitle(p['ytitle'])
  if p['ztitle'] is not None:
    h.GetZaxis().SetTitle(p['ztitle'])
    h.GetZaxis().SetTitleOffset(0.7)
  if p['yrange'] is not None:
    h.GetYaxis().SetRangeUser(*p['yrange'])
  if p['zrange'] is not None:
    h.GetZaxis().SetRangeUser(*p['zrange'])
  if p['more_log_labels']:
    h.GetXaxis().SetMoreLogLabels()
    h.GetXaxis().SetTitleOffset(1.25)
  h.SetStats(0)


#---------------------------------------------------------------
# Fetch every histogram of the active stages, then write the pages
#---------------------------------------------------------------
def make_plots(output_file, step, input_file, pages):
  if not output_file.endswith('.pdf'):
    raise UsageError('The output file should be a pdf file, check that the file name ends with .pdf: {}'.format(output_file))
  if not input_file.endswith('.root'):
    raise UsageError('The input file should be a root file, check that the file name ends with .root: {}'.format(input_file))
  step = check_stage(step)
  stages = [k for k in sorted(pages) if stage_active(k, step)]

  with HistFile(input_file) as hist_file:
    names = styles.page_hist_names([p for k in stages for p in pages[k]])
    hist_file.get_all(names)
    pdebug('retrieved {} histograms from {}'.format(len(names), input_file))

    output_dir = os.path.dirname(os.path.abspath(output_file))
    if not os.path.isdir(output_dir):
      raise OutputFileError('output directory does not exist: {}'.format(output_dir))
    with PdfBook(output_file) as book:
      for k in stages:
        for p in pages[k]:
          draw_page(book, hist_file, p)
        pdebug('stage {}: {} pages'.format(k, len(pages[k])))
  pinfo('wrote {} pages to {}'.format(book.npages, output_file))
  return book.npages

#---------------------------------------------------------------
def get_parser(prog, description, step_help):
  parser = ArgumentParser(prog=prog, description=description, epilog=step_help,
                          formatter_class=argparse.RawDescriptionHelpFormatter)
  parser.add_argument('output', help='output pdf file')
  parser.add_argument('step', type=int, help='step number, see below')
  parser.add_argument('input', help='input root file written by the reconstruction program')
  return parser

#---------------------------------------------------------------
def plots_main(argv, prog, description, step_help, pages):
  args = get_parser(prog, description, step_help).parse_args(argv)
  try:
    make_plots(args.output, args.step, args.input, pages)
  except JetRecoError as e:
    perror(e)
    sys.exit(1)
