#!/usr/bin/env python3

"""
  Base class for the reconstruction programs: reads the configuration,
  selects the branches of the requested stages, loops over the events and
  writes the booked histograms.
"""

import os
import sys
import time

from tqdm import tqdm

from jetreco.jrutils import JRBase, EventReader, ConfigurationError, UsageError
from jetreco.jrutils import read_config, set_debug_level, pinfo, pdebug
from jetreco.rootutils.histset import RootHistogramSet
from jetreco.stages import StageRunner, check_stage

################################################################
class ProcessBase(JRBase):

  #---------------------------------------------------------------
  # Constructor
  #---------------------------------------------------------------
  def __init__(self, input_file='', tree_name='', output_file='', step=0, config_file='', nev=None, **kwargs):
    super(ProcessBase, self).__init__(**kwargs)
    self.input_file = input_file
    self.tree_name = tree_name
    self.output_file = output_file
    self.step = check_stage(step)
    self.config_file = config_file
    self.nev = nev
    if not self.output_file:
      raise UsageError('no output file given')

  #---------------------------------------------------------------
  # Initialize config file into class members
  #---------------------------------------------------------------
  def initialize_config(self):

    config = read_config(self.config_file)

    self.event_number_max = config.get('event_number_max')
    if self.event_number_max is None:
      self.event_number_max = sys.maxsize
    if self.nev is not None:
      self.event_number_max = self.nev
    if self.event_number_max < 0:
      raise ConfigurationError('event_number_max must not be negative: {}'.format(self.event_number_max))

    self.debug_level = config.get('debug_level', 0)
    if not isinstance(self.debug_level, int) or self.debug_level not in [0, 1, 2]:
      raise ConfigurationError('debug_level must be 0, 1 or 2: {}'.format(self.debug_level))
    set_debug_level(self.debug_level)
    self.progress_interval = config.get('progress_interval', 10000)
    if not isinstance(self.progress_interval, int) or self.progress_interval <= 0:
      raise ConfigurationError('progress_interval must be a positive integer')

    self.config = config

  #---------------------------------------------------------------
  # To be implemented by the pipelines
  #---------------------------------------------------------------
  def make_stages(self):
    raise NotImplementedError('You must implement make_stages()!')

  def make_event(self, data):
    raise NotImplementedError('You must implement make_event()!')

  #---------------------------------------------------------------
  # Objects handed to every stage fill (e.g. grooming tools)
  #---------------------------------------------------------------
  def event_context(self):
    return {}

  #---------------------------------------------------------------
  # Main processing function
  #---------------------------------------------------------------
  def process(self):

    start_time = time.time()
    self.initialize_config()

    runner = StageRunner(stages=self.make_stages(), step=self.step)
    pinfo('running stages', [s.number for s in runner.active], 'from', self.input_file)

    hists = RootHistogramSet()
    with EventReader(file_name=self.input_file, tree_name=self.tree_name,
                     branches=runner.branches(), event_number_max=self.event_number_max) as reader:
      runner.book(hists)
      context = self.event_context()

      nevents = len(reader)
      for iev, data in enumerate(tqdm(reader.events(), total=nevents, desc='events')):
        if iev % self.progress_interval == 0:
          pdebug('Processing event {}/{}'.format(iev, nevents))
        runner.process(self.make_event(data), hists, **context)

    output_dir = os.path.dirname(os.path.abspath(self.output_file))
    if not os.path.isdir(output_dir):
      os.makedirs(output_dir)
    hists.write(self.output_file)

    pinfo('wrote {} histograms to {}'.format(len(hists), self.output_file))
    pinfo('--- {:.1f} seconds ---'.format(time.time() - start_time))
    return hists
