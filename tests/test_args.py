# Copyright 2025 Robert B. Lowrie
# This software is covered by the MIT License.
# Please see the provided LICENSE file for more details.
import numpy as np
import pytest

import vgplot.args as args
from vgplot.args import Series_Record
from vgplot.errors import ConfigurationError

x = np.array([0.0, 1.0, 2.0])
y = np.array([1.0, 4.0, 9.0])
x2 = np.array([5.0, 6.0])
y2 = np.array([7.0, 8.0])
dy = np.array([0.1, 0.2, 0.3])
z = np.arange(6.0).reshape(2, 3)

def test_classify():
    assert args.classify('r;a;').kind == 'label'
    assert args.classify([1, 2]).kind == 'series'
    assert args.classify(3.0).kind == 'series'
    assert args.classify([[1, 2], [3, 4]]).kind == 'grid'
    with pytest.raises(ConfigurationError):
        args.classify(np.zeros((2, 2, 2)))

def test_y_only():
    assert args.group_2d([y]) == [Series_Record(None, y)]

def test_x_y():
    assert args.group_2d([x, y]) == [Series_Record(x, y, '')]

def test_x_y_label():
    assert args.group_2d([x, y, 'L']) == [Series_Record(x, y, 'L')]

def test_y_label():
    assert args.group_2d([y, 'L']) == [Series_Record(None, y, 'L')]

def test_two_labelled_series():
    records = args.group_2d([x, y, 'L1', x2, y2, 'L2'])
    assert records == [Series_Record(x, y, 'L1'), Series_Record(x2, y2, 'L2')]

def test_two_unlabelled_series():
    records = args.group_2d([x, y, x2, y2])
    assert records == [Series_Record(x, y), Series_Record(x2, y2)]

def test_mixed_series():
    records = args.group_2d([y, 'a', x, y, 'b', y2])
    assert records == [Series_Record(None, y, 'a'), Series_Record(x, y, 'b'),
                       Series_Record(None, y2)]

def test_extra_columns():
    assert args.group_2d([x, y, dy, 'e']) == [Series_Record(x, y, 'e', extras=[dy])]
    assert args.group_2d([x, y, dy, dy, 'e']) == [Series_Record(x, y, 'e', extras=[dy, dy])]
    assert args.group_2d([x, y, dy, dy, dy, 'e']) == [Series_Record(x, y, 'e', extras=[dy, dy, dy])]

def test_label_between_series_is_not_an_extra_column():
    records = args.group_2d([x, y, 'L', y2, 'M'])
    assert records == [Series_Record(x, y, 'L'), Series_Record(None, y2, 'M')]

def test_grid():
    assert args.group_2d([x, y[:2], z]) == [Series_Record(x, y[:2], '', z=z)]
    assert args.group_2d([x, y[:2], z, 's']) == [Series_Record(x, y[:2], 's', z=z)]
    assert args.group_2d([z]) == [Series_Record(None, None, z=z)]
    assert args.group_2d([z])[0].is_grid()

def test_grid_with_single_coordinate():
    with pytest.raises(ConfigurationError):
        args.group_2d([x, z])

def test_empty():
    assert args.group_2d([]) == []

def test_leading_label():
    with pytest.raises(ConfigurationError):
        args.group_2d(['L', y])

def test_with_index():
    r = args.group_2d([y])[0].with_index()
    np.testing.assert_array_equal(r.x, [0, 1, 2])

def test_style():
    assert args.group_2d([y, 'r;a;'])[0].style().color == 'red'

def test_group_3d():
    records = args.group_3d([x, y, dy, 'a', x, y, dy])
    assert records == [Series_Record(x, y, 'a', z=dy), Series_Record(x, y, '', z=dy)]

def test_group_3d_extra_column():
    records = args.group_3d([x, y, dy, y, 'c'])
    assert records == [Series_Record(x, y, 'c', z=dy, extras=[y])]

def test_group_3d_needs_triples():
    with pytest.raises(ConfigurationError):
        args.group_3d([x, y])
    with pytest.raises(ConfigurationError):
        args.group_3d([x, 'a', y])

def test_group_bar():
    index = np.arange(3.0)
    assert args.group_bar([y]) == [Series_Record(index, y)]
    assert args.group_bar([y, 'a']) == [Series_Record(index, y, 'a')]
    assert args.group_bar([x, y]) == [Series_Record(x, y)]
    assert args.group_bar([x, y, 'a', dy, 'b']) == [Series_Record(x, y, 'a'),
                                                    Series_Record(index, dy, 'b')]
