# Copyright 2025 Robert B. Lowrie
# This software is covered by the MIT License.
# Please see the provided LICENSE file for more details.
import json

import pytest

import vgplot.options as options
from vgplot.errors import ConfigurationError

def test_defaults(tmp_path, monkeypatch):
    monkeypatch.delenv('VGPLOT_GNUPLOT', raising=False)
    opts = options.load_options(str(tmp_path / 'missing'))
    assert opts.gnuplot == 'gnuplot'
    assert opts.timeout == 0.05
    assert 'timeout = 0.05' in repr(opts)

def test_save_and_load(tmp_path, monkeypatch):
    monkeypatch.delenv('VGPLOT_GNUPLOT', raising=False)
    fn = str(tmp_path / '.vgplot')
    options.save_options(options.Options(timeout=0.2, terminal='dumb'), fn)
    opts = options.load_options(fn)
    assert opts.timeout == 0.2
    assert opts.terminal == 'dumb'

def test_environment_override(tmp_path, monkeypatch):
    monkeypatch.setenv('VGPLOT_GNUPLOT', '/opt/bin/gnuplot')
    assert options.load_options(str(tmp_path / 'missing')).gnuplot == '/opt/bin/gnuplot'

def test_unknown_option(tmp_path):
    fn = tmp_path / '.vgplot'
    fn.write_text(json.dumps({'colour': 'red'}))
    with pytest.raises(ConfigurationError):
        options.load_options(str(fn))
