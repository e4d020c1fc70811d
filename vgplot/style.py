# Copyright 2025 Robert B. Lowrie
# This software is covered by the MIT License.
# Please see the provided LICENSE file for more details.
'''
Parses the compact style strings given with each plotted series.

A style string has one of the forms

    [styles]
    ;title;
    [styles];title;[gnuplot style]

where styles is a sequence of the characters

    -  lines (default)      r  red        c  cyan       k  black
    :  dotted lines         g  green      m  magenta    w  white
    .  dots                 b  blue       y  yellow
    +  points               #RRGGBB  color given as six hex digits
    o  circles

Later characters overwrite earlier ones of the same kind, so "r-b:" draws
blue dotted lines.  If any text follows the last semicolon, it is passed
to gnuplot verbatim and the style characters are ignored; for example,
";data;with impulses".
'''
from typing import Optional

from vgplot.errors import ParseError

# Maps a style character to the draw mode.
modes = {'-': 'lines', ':': 'dotted', '.': 'dots', '+': 'points', 'o': 'circles'}
# Maps a style character to a gnuplot color name.
colors = {'r': 'red', 'g': 'green', 'b': 'blue', 'c': 'cyan',
          'm': 'magenta', 'y': 'yellow', 'k': 'black', 'w': 'white'}
# gnuplot "with" clause for each draw mode.
mode_clauses = {'lines': 'lines', 'dotted': 'lines dashtype 2', 'dots': 'dots',
                'points': 'points pointtype 1', 'circles': 'points pointtype 6'}

_hexdigits = '0123456789abcdefABCDEF'

# Parser states
NORMAL = 'normal'
IN_RGB_LITERAL = 'in_rgb_literal'

class Style_Descriptor:
    '''
    The resolved style for one series.

    Attributes:

      mode = one of the values of modes
      color = gnuplot color name, "#rrggbb", or None for the gnuplot default
      title = legend title
      override = if not None, a raw gnuplot style that replaces mode and color
    '''
    def __init__(self, mode: str='lines', color: Optional[str]=None,
                 title: str='', override: Optional[str]=None):
        self.mode = mode
        self.color = color
        self.title = title
        self.override = override
    def title_clause(self) -> str:
        '''
        Returns the gnuplot title clause.
        '''
        if len(self.title) == 0:
            return 'notitle'
        return 'title "' + self.title.replace('"', '\\"') + '"'
    def color_clause(self) -> str:
        '''
        Returns the gnuplot line color clause, or '' for the default color.
        '''
        if self.color is None:
            return ''
        return f'linecolor rgb "{self.color}"'
    def with_clause(self, mode: Optional[str]=None) -> str:
        '''
        Returns the gnuplot style clause, e.g. 'with lines linecolor rgb "red"'.

        mode: gnuplot style to use in place of the draw mode, such as
            "yerrorbars".  Ignored if there is an override.
        '''
        if self.override is not None:
            return self.override
        if mode is None:
            mode = mode_clauses[self.mode]
        clause = f'with {mode}'
        if self.color is not None:
            clause += ' ' + self.color_clause()
        return clause
    def __eq__(self, other):
        return isinstance(other, Style_Descriptor) and vars(self) == vars(other)
    def __repr__(self):
        rep = ''
        for comp in vars(self):
            if len(rep) > 0:
                rep += ', '
            rep += f'{comp} = {getattr(self, comp)!r}'
        return rep

def _split_label(label: str):
    '''
    Splits label into (styles, title, override).
    '''
    first = label.find(';')
    if first < 0:
        return label, '', None
    last = label.rfind(';')
    if first == last:
        return label[:first], label[first+1:], None
    override = label[last+1:]
    if len(override.strip()) == 0:
        override = None
    return label[:first], label[first+1:last], override

def parse_label(label: str) -> Style_Descriptor:
    '''
    Parses a style string into a Style_Descriptor.
    '''
    styles, title, override = _split_label(label)
    style = Style_Descriptor(title=title, override=override)
    if override is not None:
        return style

    state = NORMAL
    rgb = ''
    for i, c in enumerate(styles):
        if state == IN_RGB_LITERAL:
            if c not in _hexdigits:
                raise ParseError(label, i, f'"{c}" is not a hex digit')
            rgb += c
            if len(rgb) == 6:
                style.color = '#' + rgb.lower()
                state = NORMAL
        elif c == '#':
            rgb = ''
            state = IN_RGB_LITERAL
        elif c in modes:
            style.mode = modes[c]
        elif c in colors:
            style.color = colors[c]
        else:
            raise ParseError(label, i, f'unknown style character "{c}"')
    if state == IN_RGB_LITERAL:
        raise ParseError(label, len(styles), 'color literal needs 6 hex digits')
    return style

#######################################################################################################################
# Main
#######################################################################################################################

if __name__ == '__main__':
    '''
    Tests.
    '''
    for label in ['', 'r+;data;', ';fit;with impulses', '#ff00ff:;magenta;', 'r-b:']:
        s = parse_label(label)
        print(f'{label!r}: {s} -> {s.with_clause()} {s.title_clause()}')
