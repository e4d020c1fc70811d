# Copyright 2025 Robert B. Lowrie
# This software is covered by the MIT License.
# Please see the provided LICENSE file for more details.
import pytest

import vgplot.style as style
from vgplot.errors import ParseError

@pytest.mark.parametrize('c, mode', list(style.modes.items()))
def test_mode_characters(c, mode):
    s = style.parse_label(f'{c};T;')
    assert s.mode == mode
    assert s.color is None
    assert s.title == 'T'

@pytest.mark.parametrize('c, color', list(style.colors.items()))
def test_color_characters(c, color):
    s = style.parse_label(f'{c};T;')
    assert s.mode == 'lines'
    assert s.color == color
    assert s.title == 'T'

def test_empty_label():
    assert style.parse_label('') == style.Style_Descriptor()

def test_no_semicolon_is_all_styles():
    s = style.parse_label('r+')
    assert (s.mode, s.color, s.title) == ('points', 'red', '')

def test_single_semicolon_title_runs_to_end():
    s = style.parse_label('g;my title')
    assert s.color == 'green'
    assert s.title == 'my title'
    assert s.override is None

def test_override_replaces_styles():
    s = style.parse_label(';T;with points')
    assert s.override == 'with points'
    assert s.title == 'T'
    s = style.parse_label('r:;T;with impulses lw 2')
    assert s.override == 'with impulses lw 2'
    assert s.with_clause() == 'with impulses lw 2'

def test_blank_override_is_ignored():
    s = style.parse_label('b;T;   ')
    assert s.override is None
    assert s.color == 'blue'

def test_override_skips_bad_style_characters():
    assert style.parse_label('xyz;T;with dots').override == 'with dots'

def test_rgb_literal():
    s = style.parse_label('#ff00ff;T;')
    assert s.color == '#ff00ff'
    assert s.title == 'T'
    assert style.parse_label('#00FF00.').color == '#00ff00'
    assert style.parse_label('#00FF00.').mode == 'dots'

def test_last_write_wins():
    s = style.parse_label('r-b:')
    assert s.mode == 'dotted'
    assert s.color == 'blue'
    assert style.parse_label('#123456r').color == 'red'
    assert style.parse_label('r#123456').color == '#123456'

def test_unknown_character():
    with pytest.raises(ParseError) as info:
        style.parse_label('xyz;T;')
    assert info.value.position == 0

@pytest.mark.parametrize('label', ['#12345g', '#1234', '#;T;'])
def test_bad_rgb_literal(label):
    with pytest.raises(ParseError):
        style.parse_label(label)

def test_with_clause():
    assert style.parse_label('').with_clause() == 'with lines'
    assert style.parse_label('r:').with_clause() == 'with lines dashtype 2 linecolor rgb "red"'
    assert style.parse_label('o').with_clause() == 'with points pointtype 6'
    assert style.parse_label('k').with_clause('yerrorbars') == 'with yerrorbars linecolor rgb "black"'

def test_title_clause():
    assert style.parse_label('').title_clause() == 'notitle'
    assert style.parse_label(';say "hi";').title_clause() == 'title "say \\"hi\\""'
