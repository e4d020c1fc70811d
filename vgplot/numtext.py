# Copyright 2025 Robert B. Lowrie
# This software is covered by the MIT License.
# Please see the provided LICENSE file for more details.
'''
Reads numbers from text files that have no declared layout.  The format is

x1 y1 [z1 ...]
x2 y2 [z2 ...]
# Comment line
.
.
xN yN [zN ...]

Columns are separated either by whitespace or by a single delimiter
character, such as a comma.  The delimiter is inferred from the first line
that holds data, and every later data line must have the same number of
columns as the first.  Anything after a # is ignored.

Empty fields, as in "1,2,,3", are skipped, so that line has 3 columns.
'''
from typing import Optional

import numpy as np

from vgplot.errors import FormatError

# Sentinel returned by get_separator() for whitespace-separated data.
WHITESPACE = 'whitespace'

# Characters that may appear in a number, plus the blanks around it.
_number_chars = '.eEdD+- \t'

def _strip_comment(line: str) -> str:
    '''
    Returns the part of line before any # comment marker.
    '''
    i = line.find('#')
    if i >= 0:
        return line[:i]
    return line

def get_separator(line: str) -> Optional[str]:
    '''
    Infers the column separator of a line.

    Returns the first character that cannot be part of a number, WHITESPACE
    if there is data but no such character, or None if the line has no data
    (a blank or comment line).
    '''
    data = False
    for c in line.rstrip('\r\n'):
        if c.isdigit():
            data = True
        elif c == '#':
            break
        elif c in _number_chars:
            continue
        else:
            return c
    if data:
        return WHITESPACE
    return None

def _split(line: str, separator: Optional[str]) -> list[str]:
    '''
    Splits line on separator and on blanks, dropping empty tokens.
    '''
    line = _strip_comment(line)
    if separator is not None and separator != WHITESPACE:
        line = line.replace(separator, ' ')
    return line.split()

def count_data_columns(line: str, separator: Optional[str]=None) -> int:
    '''
    Returns the number of non-empty columns before any # in line.
    Tabs and spaces always separate columns, in addition to separator.
    '''
    if separator is None:
        separator = get_separator(line)
    return len(_split(line, separator))

def to_float(token: str) -> float:
    '''
    Converts a token to a float, also accepting d or D as the exponent marker.
    '''
    return float(token.replace('d', 'e').replace('D', 'e'))

def parse_line(line: str, separator: Optional[str]=WHITESPACE) -> list[float]:
    '''
    Returns the numbers in line that come before any # comment.

    separator: WHITESPACE or a single delimiter character.
    '''
    return [to_float(s) for s in _split(line, separator)]

def load_data_file(filename: str, separator: Optional[str]=None) -> list[np.ndarray]:
    '''
    Reads a data file and returns a list of columns, each a numpy array.

    filename: Name of the file.
    separator: Column delimiter.  If None, it is inferred from the first
        line that holds data.
    '''
    columns = None
    num_columns = 0
    with open(filename, 'r') as fd:
        for lineNum, line in enumerate(fd, start=1):
            if separator is None:
                separator = get_separator(line)
                if separator is None:
                    continue
            n = count_data_columns(line, separator)
            if n == 0:
                continue
            if columns is None:
                num_columns = n
                columns = [[] for _ in range(num_columns)]
            elif n != num_columns:
                raise FormatError(f'Expected {num_columns} columns, found {n}',
                                  filename, lineNum)
            try:
                values = parse_line(line, separator)
            except ValueError as err:
                raise FormatError(str(err), filename, lineNum) from err
            for c, v in zip(columns, values):
                c.append(v)
    if columns is None:
        return []
    return [np.array(c) for c in columns]

#######################################################################################################################
# Main
#######################################################################################################################

if __name__ == '__main__':
    '''
    Tests.
    '''
    for line in ['1,2,3', '1 2 3', '1.5d3;2', '# comment', '']:
        s = get_separator(line)
        print(f'{line!r}: separator {s!r}, {count_data_columns(line, s)} columns')
