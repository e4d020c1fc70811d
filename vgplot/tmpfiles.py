# Copyright 2025 Robert B. Lowrie
# This software is covered by the MIT License.
# Please see the provided LICENSE file for more details.
'''
Temporary data files read by gnuplot.

Each file holds one row per sample, with columns separated by spaces and
written in scientific notation.  Grid data (surfaces) is written one grid
row at a time, with a blank line after each row.
'''
import atexit
import os
import tempfile
from typing import Optional

import numpy as np

from vgplot.errors import ConfigurationError

# Files created and not yet deleted, for the exit hook.
_leftovers = set()
_hook_installed = False

def delete_file(path: str) -> None:
    '''
    Deletes path. A file that is already gone is not an error.
    '''
    try:
        os.remove(path)
    except FileNotFoundError:
        pass
    _leftovers.discard(path)

def delete_leftovers() -> None:
    '''
    Deletes every temporary file that has not been deleted yet.
    '''
    for path in list(_leftovers):
        delete_file(path)

def install_exit_hook() -> None:
    '''
    Arranges for delete_leftovers() to run when the interpreter exits.
    '''
    global _hook_installed
    if not _hook_installed:
        atexit.register(delete_leftovers)
        _hook_installed = True

def _format_row(values) -> str:
    return ' '.join(f'{v:.12e}' for v in values) + '\n'

class Temp_File_Store:
    '''
    Creates uniquely named files vgplot-<n>-XXXX.dat in a directory.
    '''
    def __init__(self, tmpdir: Optional[str]=None):
        '''
        tmpdir: Directory for the files. If None, the system default is used.
        '''
        self.tmpdir = tmpdir
        self.count = 0
    def new_file(self):
        '''
        Returns (file object, path) for a new, empty file.
        '''
        fd, path = tempfile.mkstemp(prefix=f'vgplot-{self.count}-', suffix='.dat',
                                    dir=self.tmpdir)
        self.count += 1
        _leftovers.add(path)
        return os.fdopen(fd, 'w'), path
    def write_columns(self, columns) -> str:
        '''
        Writes equal-length columns, one row per sample, and returns the path.
        Longer columns are truncated to the shortest.
        '''
        columns = [np.ravel(np.asarray(c, dtype=float)) for c in columns]
        n = min(len(c) for c in columns)
        f, path = self.new_file()
        with f:
            for i in range(n):
                f.write(_format_row(c[i] for c in columns))
        return path
    def write_grid(self, x, y, z) -> str:
        '''
        Writes a surface and returns the path.

        z: 2-D array; z[i, j] is the value at row i, column j.
        x, y: 1-D arrays of length ncols and nrows respectively, 2-D arrays
            the shape of z, or None for the column and row indices.
        '''
        z = np.asarray(z, dtype=float)
        nrows, ncols = z.shape
        if x is None:
            x = np.arange(ncols, dtype=float)
        if y is None:
            y = np.arange(nrows, dtype=float)
        x = np.asarray(x, dtype=float)
        y = np.asarray(y, dtype=float)
        if x.ndim == 1 and y.ndim == 1:
            x, y = np.meshgrid(x, y)
        if x.shape != z.shape or y.shape != z.shape:
            raise ConfigurationError(f'Grid shapes differ: x {x.shape}, y {y.shape}, z {z.shape}')
        f, path = self.new_file()
        with f:
            for i in range(nrows):
                for j in range(ncols):
                    f.write(_format_row((x[i,j], y[i,j], z[i,j])))
                f.write('\n')
        return path

#######################################################################################################################
# Main
#######################################################################################################################

if __name__ == '__main__':
    '''
    Tests.
    '''
    store = Temp_File_Store()
    path = store.write_columns([[0, 1, 2], [0, 1, 4]])
    print(open(path).read())
    delete_file(path)
