# Copyright 2025 Robert B. Lowrie
# This software is covered by the MIT License.
# Please see the provided LICENSE file for more details.
'''
A running gnuplot process.

Commands are written to gnuplot's stdin.  gnuplot writes replies, including
the output of "show" commands and error messages, to stderr, which is merged
into stdout here.  gnuplot gives no marker for the end of a reply, so
read_response() waits up to a timeout for output to start and then takes
whatever is available; the reply may be incomplete.
'''
import os
import select
import subprocess as sp

class Response:
    '''
    Text read back from gnuplot.

    Attributes:

      text = the text read
      complete = false if no output arrived within the timeout.  Even if
                 true, more output may still be on its way.
    '''
    def __init__(self, text: str, complete: bool):
        self.text = text
        self.complete = complete

class Gnuplot_Process:
    '''
    Owns one gnuplot subprocess.
    '''
    def __init__(self, gnuplot: str='gnuplot', persist: bool=True):
        '''
        gnuplot: Executable to run.
        persist: If true, pass -persist so windows outlive the process.
        '''
        cmd = [gnuplot]
        if persist:
            cmd.append('-persist')
        self.proc = sp.Popen(cmd,
                             stdin=sp.PIPE,
                             stdout=sp.PIPE,
                             stderr=sp.STDOUT)
        self.fd = self.proc.stdout.fileno()
        os.set_blocking(self.fd, False)
    def write(self, cmd: str) -> None:
        '''
        Sends a command line to gnuplot.
        '''
        self.proc.stdin.write((cmd + '\n').encode())
        self.proc.stdin.flush()
    def read_response(self, timeout: float=0.05) -> Response:
        '''
        Waits up to timeout seconds for output, then drains what is available
        without blocking.
        '''
        ready, _, _ = select.select([self.fd], [], [], timeout)
        if not ready:
            return Response('', False)
        chunks = []
        while True:
            try:
                data = os.read(self.fd, 4096)
            except BlockingIOError:
                break
            if len(data) == 0:
                break
            chunks.append(data)
        return Response(b''.join(chunks).decode(errors='replace'), True)
    def close(self, timeout: float=1.0) -> None:
        '''
        Asks gnuplot to quit, and kills it if it does not.
        '''
        if self.proc.poll() is None:
            try:
                self.write('quit')
                self.proc.stdin.close()
            except BrokenPipeError:
                pass
            try:
                self.proc.wait(timeout)
            except sp.TimeoutExpired:
                self.proc.kill()
                self.proc.wait()
        self.proc.stdout.close()
