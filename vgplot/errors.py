# Copyright 2025 Robert B. Lowrie
# This software is covered by the MIT License.
# Please see the provided LICENSE file for more details.
'''
Exceptions raised by vgplot.
'''

class Error(Exception):
    '''
    Base class for exceptions in this package.
    '''
    pass

class ParseError(Error):
    '''
    Raised for a malformed style string.
    '''
    def __init__(self, label: str, position: int, reason: str):
        super().__init__(label, position, reason)
        self.label = label
        self.position = position
        self.reason = reason
    def __str__(self):
        return f'Unable to parse style "{self.label}" at position {self.position}: {self.reason}'

class FormatError(Error):
    '''
    Raised for data that does not have the expected layout, such as a
    data file whose number of columns changes.
    '''
    def __init__(self, message: str, filename=None, lineNum=None):
        super().__init__(message, filename, lineNum)
        self.message = message
        self.filename = filename
        self.lineNum = lineNum
    def __str__(self):
        if self.filename is None:
            return self.message
        return f'File {self.filename}, line {self.lineNum}: {self.message}'

class OutOfBounds(Error):
    '''
    Raised for a subplot index outside the grid.
    '''
    def __init__(self, index: int, rows: int, cols: int):
        super().__init__(index, rows, cols)
        self.index = index
        self.rows = rows
        self.cols = cols
    def __str__(self):
        return f'Subplot index {self.index} outside of [0, {self.rows * self.cols}) for a {self.rows}x{self.cols} grid'

class UnrecognizedOption(Error):
    '''
    Raised for an unknown keyword option.
    '''
    def __init__(self, option, context: str):
        super().__init__(option, context)
        self.option = option
        self.context = context
    def __str__(self):
        return f'Unrecognized {self.context} option: {self.option!r}'

class ConfigurationError(Error):
    '''
    Raised for missing or ambiguous arguments.
    '''
    pass

class MissingCapability(Error):
    '''
    Raised when no gnuplot terminal can be found for an export.
    '''
    def __init__(self, filename: str):
        super().__init__(filename)
        self.filename = filename
    def __str__(self):
        return f'Unable to guess a terminal for {self.filename}; specify one explicitly'
