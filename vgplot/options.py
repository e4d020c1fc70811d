# Copyright 2025 Robert B. Lowrie
# This software is covered by the MIT License.
# Please see the provided LICENSE file for more details.
'''
Session options.
'''
import json
import os
from typing import Optional

from vgplot.errors import ConfigurationError

# options are saved in this file.  See load_options().
optionsfile = '.vgplot'

class Options:
    '''
    Options for starting and talking to gnuplot.
    '''
    def __init__(self,
                 gnuplot: str='gnuplot',
                 timeout: float=0.05,
                 terminal: Optional[str]=None,
                 tmpdir: Optional[str]=None,
                 debug: bool=False,
                 log_file: Optional[str]=None,
                 cleanup_at_exit: bool=True,
                 persist: bool=True):
        '''
        gnuplot: Executable to run.
        timeout: Seconds to wait for a reply before draining it.
        terminal: If not None, the gnuplot terminal to set at startup.
        tmpdir: Directory for data files. If None, the system default.
        debug: If true, echo each command sent to gnuplot.
        log_file: If not None, also write messages to this file.
        cleanup_at_exit: Delete leftover data files when Python exits.
        persist: Keep plot windows open after gnuplot exits.
        '''
        self.gnuplot = gnuplot
        self.timeout = timeout
        self.terminal = terminal
        self.tmpdir = tmpdir
        self.debug = debug
        self.log_file = log_file
        self.cleanup_at_exit = cleanup_at_exit
        self.persist = persist
    def __repr__(self):
        rep = ''
        for comp in vars(self):
            if len(rep) > 0:
                rep += ', '
            rep += f'{comp} = {getattr(self, comp)}'
        return rep

def load_options(filename: str=optionsfile) -> Options:
    '''
    Returns Options with defaults overridden by the JSON object in filename,
    if it exists, and gnuplot overridden by $VGPLOT_GNUPLOT, if set.
    '''
    opts = Options()
    if os.path.exists(filename):
        with open(filename, 'rt') as f:
            saved = json.load(f)
        for k, v in saved.items():
            if k not in vars(opts):
                raise ConfigurationError(f'Unknown option {k} in {filename}')
            setattr(opts, k, v)
    gnuplot = os.environ.get('VGPLOT_GNUPLOT')
    if gnuplot:
        opts.gnuplot = gnuplot
    return opts

def save_options(opts: Options, filename: str=optionsfile) -> None:
    '''
    Writes opts to filename as JSON.
    '''
    with open(filename, 'wt') as f:
        json.dump(vars(opts), f, indent=4)
