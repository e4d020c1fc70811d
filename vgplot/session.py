# Copyright 2025 Robert B. Lowrie
# This software is covered by the MIT License.
# Please see the provided LICENSE file for more details.
'''
Plot sessions.

A Session is one gnuplot process plus the state of its plot: whether it is
in multiplot mode and which temporary data files the current plot uses.
A Session_Manager keeps a stack of Sessions; the one on top receives
commands.
'''
from typing import Callable, Optional

import vgplot.logger as logger
import vgplot.options as options
import vgplot.process as process
import vgplot.tmpfiles as tmpfiles

# Session states
UNINITIALIZED = 'uninitialized'
ACTIVE = 'active'
CLOSED = 'closed'

def start_gnuplot(opts: options.Options) -> process.Gnuplot_Process:
    '''
    Default process factory for Session.
    '''
    return process.Gnuplot_Process(opts.gnuplot, opts.persist)

class Session:
    '''
    One connection to a gnuplot process.
    '''
    def __init__(self,
                 opts: Optional[options.Options]=None,
                 process_factory: Callable=start_gnuplot):
        '''
        opts: Options object. If None, defaults are used.
        process_factory: Called with opts to start the process the first
            time a command is sent.  The returned object must have write(),
            read_response() and close() methods like Gnuplot_Process.
        '''
        self.opts = options.Options() if opts is None else opts
        self.process_factory = process_factory
        self.process = None
        self.state = UNINITIALIZED
        self.multiplot = False
        self.plotted = False
        self.tmpfiles = []
        self.next_tag = 1
        self.store = tmpfiles.Temp_File_Store(self.opts.tmpdir)
        self.log = logger.Logger(debug=self.opts.debug)
    def _start(self) -> None:
        if self.state == CLOSED:
            raise RuntimeError('Session is closed')
        if self.opts.cleanup_at_exit:
            tmpfiles.install_exit_hook()
        self.process = self.process_factory(self.opts)
        self.state = ACTIVE
        if self.opts.log_file is not None and self.log.log_file is None:
            self.log.log_file = open(self.opts.log_file, 'a')
        if self.opts.terminal is not None:
            self.send(f'set terminal {self.opts.terminal}')
    def send(self, cmd: str) -> None:
        '''
        Sends a command, starting gnuplot if needed.
        '''
        if self.state != ACTIVE:
            self._start()
        self.log.command(cmd)
        self.process.write(cmd)
    def read(self) -> str:
        '''
        Returns whatever gnuplot has replied; see Gnuplot_Process.read_response().
        '''
        if self.state != ACTIVE:
            return ''
        return self.process.read_response(self.opts.timeout).text
    def query(self, cmd: str) -> str:
        '''
        Sends cmd and returns the reply.
        '''
        self.send(cmd)
        return self.read()
    def draw(self, cmd: str) -> str:
        '''
        Sends a command that draws, and writes any reply to the log.
        '''
        text = self.query(cmd)
        self.log.response(text)
        return text
    def new_plot_files(self) -> None:
        '''
        Called before writing the data for a new plot.  Deletes the previous
        plot's files, unless in multiplot mode, where earlier panels
        still use theirs.
        '''
        if not self.multiplot:
            self.delete_files()
    def write_columns(self, columns) -> str:
        path = self.store.write_columns(columns)
        self.tmpfiles.append(path)
        return path
    def write_grid(self, x, y, z) -> str:
        path = self.store.write_grid(x, y, z)
        self.tmpfiles.append(path)
        return path
    def delete_files(self) -> None:
        for path in self.tmpfiles:
            tmpfiles.delete_file(path)
        self.tmpfiles = []
    def set_multiplot(self) -> None:
        '''
        Switches to multiplot mode. There is no switching back, except by
        reset().
        '''
        if not self.multiplot:
            self.send('set multiplot')
            self.multiplot = True
    def reset(self) -> None:
        '''
        Leaves multiplot mode and resets gnuplot's settings.
        '''
        if self.multiplot:
            self.send('unset multiplot')
            self.multiplot = False
        self.send('reset')
        self.plotted = False
        self.delete_files()
    def new_tag(self) -> int:
        tag = self.next_tag
        self.next_tag += 1
        return tag
    def close(self) -> None:
        '''
        Stops gnuplot and deletes the data files.
        '''
        if self.state == ACTIVE:
            self.process.close()
        self.process = None
        self.state = CLOSED
        self.delete_files()
        self.log.close()
    def __enter__(self):
        return self
    def __exit__(self, *exc):
        self.close()
        return False

class Session_Manager:
    '''
    A stack of Sessions.  Only the top Session is active.
    '''
    def __init__(self,
                 opts: Optional[options.Options]=None,
                 process_factory: Callable=start_gnuplot):
        '''
        opts, process_factory: Passed to each new Session.
        '''
        self.opts = options.Options() if opts is None else opts
        self.process_factory = process_factory
        self.sessions = []
    def active(self) -> Session:
        '''
        Returns the active Session, creating one if there is none.
        '''
        if len(self.sessions) == 0:
            return self.new_plot()
        return self.sessions[-1]
    def new_plot(self) -> Session:
        '''
        Starts a new Session on top of the current one.
        '''
        s = Session(self.opts, self.process_factory)
        self.sessions.append(s)
        return s
    def close_plot(self) -> None:
        '''
        Closes the active Session; the one below it becomes active.
        '''
        if len(self.sessions) > 0:
            self.sessions.pop().close()
    def close_all_plots(self) -> None:
        while len(self.sessions) > 0:
            self.close_plot()
    def __len__(self):
        return len(self.sessions)
