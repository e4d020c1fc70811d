# Copyright 2025 Robert B. Lowrie
# This software is covered by the MIT License.
# Please see the provided LICENSE file for more details.
import os

import numpy as np
import pytest

import vgplot.numtext as numtext
import vgplot.tmpfiles as tmpfiles
from vgplot.errors import ConfigurationError

def test_write_columns(tmp_path):
    store = tmpfiles.Temp_File_Store(str(tmp_path))
    path = store.write_columns([[0, 1, 2], [1.5, -2, 1e-30]])
    assert os.path.basename(path).startswith('vgplot-0-')
    assert path.endswith('.dat')
    lines = open(path).read().splitlines()
    assert len(lines) == 3
    assert lines[1].split() == ['1.000000000000e+00', '-2.000000000000e+00']
    x, y = numtext.load_data_file(path)
    np.testing.assert_allclose(y, [1.5, -2, 1e-30])

def test_write_columns_truncates(tmp_path):
    store = tmpfiles.Temp_File_Store(str(tmp_path))
    path = store.write_columns([[0, 1, 2], [1, 2]])
    assert len(open(path).read().splitlines()) == 2

def test_write_grid(tmp_path):
    store = tmpfiles.Temp_File_Store(str(tmp_path))
    z = np.arange(6.0).reshape(2, 3)
    path = store.write_grid(None, None, z)
    blocks = open(path).read().split('\n\n')
    assert len([b for b in blocks if b.strip()]) == 2
    x, y, zz = numtext.load_data_file(path)
    np.testing.assert_array_equal(x, [0, 1, 2, 0, 1, 2])
    np.testing.assert_array_equal(y, [0, 0, 0, 1, 1, 1])
    np.testing.assert_array_equal(zz, z.ravel())

def test_write_grid_shape_mismatch(tmp_path):
    store = tmpfiles.Temp_File_Store(str(tmp_path))
    with pytest.raises(ConfigurationError):
        store.write_grid(np.arange(4.0), np.arange(2.0), np.zeros((2, 3)))

def test_delete_file_tolerates_missing(tmp_path):
    store = tmpfiles.Temp_File_Store(str(tmp_path))
    path = store.write_columns([[1], [2]])
    tmpfiles.delete_file(path)
    assert not os.path.exists(path)
    tmpfiles.delete_file(path)

def test_delete_leftovers(tmp_path):
    store = tmpfiles.Temp_File_Store(str(tmp_path))
    paths = [store.write_columns([[1], [2]]) for _ in range(3)]
    os.remove(paths[0])
    tmpfiles.delete_leftovers()
    assert not any(os.path.exists(p) for p in paths)
