# Copyright 2025 Robert B. Lowrie
# This software is covered by the MIT License.
# Please see the provided LICENSE file for more details.
'''
Groups the positional arguments of a plot call into series.

A plot call takes any mix of the forms

    plot(y)
    plot(x, y)
    plot(x, y, 'label')
    plot(y, 'label')
    plot(x, y, dy, 'label')            # extra data columns, e.g. error bars
    plot(x, y, z)                      # z a 2-D grid
    plot(x1, y1, 'l1', x2, y2, 'l2')   # several series

Each argument is first classified as a Series (1-D array), a Grid (2-D
array) or a Label (string), and the classified list is then split into
Series_Record objects by trying the longest forms first.
'''
from typing import Optional

import numpy as np

from vgplot.errors import ConfigurationError
import vgplot.style as style

class Value:
    '''
    Base class for a classified plot argument.
    '''
    def __init__(self, kind: str, data):
        '''
        kind: Identifier string
        data: numpy array, or str for labels.
        '''
        self.kind = kind
        self.data = data
    def is_label(self) -> bool:
        return self.kind == 'label'
    def __repr__(self):
        return f'{self.kind}({self.data!r})'

class Series(Value):
    '''
    A 1-D numeric sequence.
    '''
    def __init__(self, data: np.ndarray):
        super().__init__('series', data)

class Grid(Value):
    '''
    A 2-D numeric array.
    '''
    def __init__(self, data: np.ndarray):
        super().__init__('grid', data)

class Label(Value):
    '''
    A style string; see vgplot.style.
    '''
    def __init__(self, data: str):
        super().__init__('label', data)

def classify(arg) -> Value:
    '''
    Wraps a single plot argument in a Series, Grid or Label.
    '''
    if isinstance(arg, Value):
        return arg
    if isinstance(arg, str):
        return Label(arg)
    try:
        a = np.asarray(arg, dtype=float)
    except (TypeError, ValueError) as err:
        raise ConfigurationError(f'Plot arguments must be numeric arrays or strings; got {type(arg)}') from err
    if a.ndim == 0:
        a = np.atleast_1d(a)
    if a.ndim == 1:
        return Series(a)
    if a.ndim == 2:
        return Grid(a)
    raise ConfigurationError(f'Plot arrays must be 1-D or 2-D; got {a.ndim}-D')

def classify_all(args) -> list[Value]:
    return [classify(a) for a in args]

class Series_Record:
    '''
    One curve, surface or bar series to render.

    Attributes:

      x = abscissa, or None to plot against the index
      y = ordinate, or None for a surface given only by z
      z = third coordinate for 3-D series, or a 2-D grid for surfaces
      extras = list of additional data columns
      label = raw style string
    '''
    def __init__(self, x: Optional[np.ndarray], y: Optional[np.ndarray],
                 label: str='', z: Optional[np.ndarray]=None,
                 extras: Optional[list]=None):
        self.x = x
        self.y = y
        self.z = z
        self.extras = [] if extras is None else extras
        self.label = label
    def style(self) -> style.Style_Descriptor:
        '''
        Returns the parsed label.
        '''
        return style.parse_label(self.label)
    def is_grid(self) -> bool:
        '''
        Returns true if this record is a surface over a 2-D grid.
        '''
        return self.z is not None and np.ndim(self.z) == 2
    def with_index(self) -> 'Series_Record':
        '''
        Sets x to 0..len(y)-1 if x is None.  Returns self.
        '''
        if self.x is None and self.y is not None:
            self.x = np.arange(len(self.y), dtype=float)
        return self
    def __eq__(self, other):
        if not isinstance(other, Series_Record):
            return False
        if self.label != other.label or len(self.extras) != len(other.extras):
            return False
        pairs = [(self.x, other.x), (self.y, other.y), (self.z, other.z)]
        pairs += list(zip(self.extras, other.extras))
        for a, b in pairs:
            if (a is None) != (b is None):
                return False
            if a is not None and not np.array_equal(a, b):
                return False
        return True
    def __repr__(self):
        return f'Series_Record(x={self.x!r}, y={self.y!r}, z={self.z!r}, extras={self.extras!r}, label={self.label!r})'

def _arrays(values: list[Value]) -> bool:
    '''
    Returns true if none of values is a label.
    '''
    return all(not v.is_label() for v in values)

def _label_at(rest: list[Value], i: int) -> bool:
    return len(rest) > i and rest[i].is_label()

def _record_2d(x: Optional[Value], y: Value, label: str='',
               extras: Optional[list[Value]]=None) -> Series_Record:
    '''
    Builds a 2-D record.  A grid in the y position, or as the first extra
    column, becomes the z-grid of a surface.
    '''
    xdata = None if x is None else x.data
    extras = [] if extras is None else extras
    if len(extras) > 0 and extras[0].kind == 'grid':
        return Series_Record(xdata, y.data, label, z=extras[0].data,
                             extras=[e.data for e in extras[1:]])
    if y.kind == 'grid':
        if x is not None:
            raise ConfigurationError('A grid must be given alone or as z after x and y')
        return Series_Record(None, None, label, z=y.data)
    return Series_Record(xdata, y.data, label, extras=[e.data for e in extras])

def group_2d(args) -> list[Series_Record]:
    '''
    Groups plot arguments into a list of Series_Record.

    Records with no abscissa have x set to None; call with_index() to
    substitute the index before writing the data.
    '''
    values = classify_all(args)
    records = []
    i = 0
    while i < len(values):
        rest = values[i:]
        if len(rest) >= 6 and _label_at(rest, 5) and _arrays(rest[:5]):
            records.append(_record_2d(rest[0], rest[1], rest[5].data, rest[2:5]))
            i += 6
        elif len(rest) >= 5 and _label_at(rest, 4) and _arrays(rest[:4]):
            records.append(_record_2d(rest[0], rest[1], rest[4].data, rest[2:4]))
            i += 5
        elif len(rest) >= 4 and _label_at(rest, 3) and _arrays(rest[:3]):
            records.append(_record_2d(rest[0], rest[1], rest[3].data, rest[2:3]))
            i += 4
        elif len(rest) >= 3 and rest[2].kind == 'grid' and _arrays(rest[:2]):
            records.append(_record_2d(rest[0], rest[1], '', rest[2:3]))
            i += 3
        elif len(rest) >= 3 and _label_at(rest, 2) and _arrays(rest[:2]):
            records.append(_record_2d(rest[0], rest[1], rest[2].data))
            i += 3
        elif rest[0].is_label():
            raise ConfigurationError(f'Label {rest[0].data!r} has no data to go with it')
        elif _label_at(rest, 1):
            records.append(_record_2d(None, rest[0], rest[1].data))
            i += 2
        elif len(rest) >= 2:
            records.append(_record_2d(rest[0], rest[1]))
            i += 2
        else:
            records.append(_record_2d(None, rest[0]))
            i += 1
    return records

def group_3d(args) -> list[Series_Record]:
    '''
    Groups plot3d arguments, which always come as x, y, z triples, each
    optionally followed by one extra column and a label.
    '''
    values = classify_all(args)
    records = []
    i = 0
    while i < len(values):
        rest = values[i:]
        if len(rest) < 3 or not _arrays(rest[:3]):
            raise ConfigurationError('3-D plots require x, y and z arrays for each series')
        x, y, z = [v.data for v in rest[:3]]
        if _label_at(rest, 3):
            records.append(Series_Record(x, y, rest[3].data, z=z))
            i += 4
        elif _label_at(rest, 4) and not rest[3].is_label():
            records.append(Series_Record(x, y, rest[4].data, z=z, extras=[rest[3].data]))
            i += 5
        else:
            records.append(Series_Record(x, y, '', z=z))
            i += 3
    return records

def group_bar(args) -> list[Series_Record]:
    '''
    Groups bar arguments.  Unlike group_2d(), a missing x is replaced by
    0..len(y)-1 immediately.  y may be a grid, with one series per column.
    '''
    values = classify_all(args)
    records = []
    i = 0
    while i < len(values):
        rest = values[i:]
        if rest[0].is_label():
            raise ConfigurationError(f'Label {rest[0].data!r} has no data to go with it')
        if len(rest) >= 3 and _label_at(rest, 2) and _arrays(rest[:2]):
            x, y, label = rest[0].data, rest[1].data, rest[2].data
            i += 3
        elif _label_at(rest, 1):
            x, y, label = None, rest[0].data, rest[1].data
            i += 2
        elif len(rest) >= 2:
            x, y, label = rest[0].data, rest[1].data, ''
            i += 2
        else:
            x, y, label = None, rest[0].data, ''
            i += 1
        if x is None:
            x = np.arange(len(y), dtype=float)
        records.append(Series_Record(x, y, label))
    return records

#######################################################################################################################
# Main
#######################################################################################################################

if __name__ == '__main__':
    '''
    Tests.
    '''
    x = np.linspace(0, 1, 3)
    for r in group_2d([x, x**2, 'r;square;', x**3]):
        print(r)
