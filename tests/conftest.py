# Copyright 2025 Robert B. Lowrie
# This software is covered by the MIT License.
# Please see the provided LICENSE file for more details.
'''
Fixtures that replace the gnuplot process with an in-memory fake.
'''
import pytest

import vgplot.options as options
import vgplot.plot as vg
import vgplot.process as process
import vgplot.session as session

class Fake_Process:
    '''
    Records commands and answers "show" queries from replies.
    '''
    def __init__(self, replies=None):
        self.commands = []
        self.replies = {} if replies is None else replies
        self.closed = False
    def write(self, cmd):
        self.commands.append(cmd)
    def read_response(self, timeout=0.05):
        if len(self.commands) > 0 and self.commands[-1] in self.replies:
            return process.Response(self.replies[self.commands[-1]], True)
        return process.Response('', False)
    def close(self):
        self.closed = True

XRANGE = '\tset xrange [ * : * ] noreverse writeback  # (currently [0.00000:10.0000] )\n'
YRANGE = '\tset yrange [ * : * ] noreverse writeback  # (currently [0.00000:5.00000] )\n'

@pytest.fixture
def processes():
    '''
    The fake processes started, in order.
    '''
    return []

@pytest.fixture
def opts(tmp_path):
    return options.Options(tmpdir=str(tmp_path), cleanup_at_exit=False)

@pytest.fixture
def manager(opts, processes):
    def factory(_opts):
        p = Fake_Process({'show xrange': XRANGE, 'show yrange': YRANGE})
        processes.append(p)
        return p
    m = session.Session_Manager(opts, factory)
    yield m
    m.close_all_plots()

@pytest.fixture
def plotter(manager):
    return vg.Plotter(manager)
