# Copyright 2025 Robert B. Lowrie
# This software is covered by the MIT License.
# Please see the provided LICENSE file for more details.
'''
Message output for plot sessions.
'''
import sys
from typing import Optional
from io import TextIOWrapper

class Logger:
    '''
    Sends messages to stderr and, optionally, to a transcript file.
    '''
    def __init__(self,
                 log_file: Optional[TextIOWrapper]=None,
                 debug: bool=False):
        '''
        log_file: An output object, typically created by open().
            If None, messages only go to stderr.
        debug: If true, commands sent to gnuplot are also written.
        '''
        self.terminal = sys.stderr
        self.log_file = log_file
        self.debug = debug

    def write(self, message: str):
        '''
        Write message to the terminal and the log file.
        '''
        self.terminal.write(message)
        if self.log_file is not None:
            self.log_file.write(message)
        self.flush()

    def flush(self):
        '''
        Flush the output buffers
        '''
        self.terminal.flush()
        if self.log_file is not None:
            self.log_file.flush()

    def command(self, cmd: str):
        '''
        Echo a command sent to gnuplot, if debugging.
        '''
        if self.debug:
            self.write(f'gnuplot> {cmd}\n')

    def response(self, text: str):
        '''
        Write a reply from gnuplot, if there is one.
        '''
        if len(text.strip()) > 0:
            if not text.endswith('\n'):
                text += '\n'
            self.write(text)

    def close(self):
        if self.log_file is not None:
            self.log_file.close()
            self.log_file = None
