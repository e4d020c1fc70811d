# Copyright 2025 Robert B. Lowrie
# This software is covered by the MIT License.
# Please see the provided LICENSE file for more details.
'''
Stairstep (zero-order hold) curves.
'''
from typing import Optional

import numpy as np

from vgplot.my_types import ArrayLike

def stairstep(x: ArrayLike, y: Optional[ArrayLike]=None):
    '''
    Returns the (x, y) arrays that draw y as a staircase, holding each
    value flat until the next x.  For n points the result has 2n-1 points:

        x: x0, x1, x1, x2, x2, ...
        y: y0, y0, y1, y1, y2, ...

    x: Abscissa.  If y is None, x is taken as the ordinate and the
        abscissa is 0..n-1.
    y: Ordinate.  If x and y differ in length, the longer is truncated.
    '''
    if y is None:
        y = np.asarray(x, dtype=float)
        x = np.arange(len(y), dtype=float)
    else:
        x = np.asarray(x, dtype=float)
        y = np.asarray(y, dtype=float)
    n = min(len(x), len(y))
    if n <= 1:
        return x[:n], y[:n]
    xs = np.empty(2 * n - 1)
    ys = np.empty(2 * n - 1)
    xs[0] = x[0]
    ys[0] = y[0]
    j = 1
    for i in range(1, n):
        xs[j] = x[i]
        ys[j] = y[i-1]
        xs[j+1] = x[i]
        ys[j+1] = y[i]
        j += 2
    return xs, ys

#######################################################################################################################
# Main
#######################################################################################################################

if __name__ == '__main__':
    '''
    Tests.
    '''
    xs, ys = stairstep([0, 1, 2], [0, 5, 3])
    print(f'x: {xs}\ny: {ys}')
