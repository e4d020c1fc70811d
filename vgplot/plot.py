# Copyright 2025 Robert B. Lowrie
# This software is covered by the MIT License.
# Please see the provided LICENSE file for more details.
'''
Plotting commands, driving gnuplot.

Each series is written to a temporary data file, and gnuplot is sent a plot
command that reads the files.  For example,

    import numpy as np
    import vgplot.plot as vg

    x = np.linspace(0, 2 * np.pi, 100)
    vg.plot(x, np.sin(x), 'r;sine;', x, np.cos(x), 'b:;cosine;')
    vg.title('Trig functions')
    vg.axis([0, 2 * np.pi])
    vg.close_all_plots()

See vgplot.args for the argument forms and vgplot.style for the style
strings.  The module-level functions act on a default Plotter; create a
Plotter with your own Session_Manager for finer control.
'''
import numbers
import os
import re
from typing import Optional, Sequence

import numpy as np

import vgplot.args as args_mod
import vgplot.numtext as numtext
import vgplot.session as sessions
import vgplot.stairs as stairs_mod
import vgplot.options as options
from vgplot.errors import (ConfigurationError, FormatError, MissingCapability,
                           OutOfBounds, UnrecognizedOption)
from vgplot.my_types import Limit
from vgplot.style import Style_Descriptor, mode_clauses

# Axis-limit value meaning "let gnuplot choose".
AUTOSCALE = True

# gnuplot style for the number of extra data columns in a 2-D series.
extra_modes = {0: None, 1: 'yerrorbars', 2: 'yerrorbars', 3: 'candlesticks'}

# Maps a file extension to the gnuplot terminal for print_plot().
terminals = {'.png': 'png', '.pdf': 'pdfcairo', '.svg': 'svg',
             '.eps': 'postscript eps color', '.ps': 'postscript color',
             '.jpg': 'jpeg', '.jpeg': 'jpeg', '.gif': 'gif',
             '.tex': 'latex', '.txt': 'dumb'}

# Maps legend() keywords to "set key" options.
legend_keywords = {'show': 'on', 'on': 'on', 'hide': 'off', 'off': 'off',
                   'box': 'box', 'nobox': 'nobox',
                   'left': 'left', 'right': 'right', 'center': 'center',
                   'top': 'top', 'bottom': 'bottom',
                   'inside': 'inside', 'outside': 'outside',
                   'horizontal': 'horizontal', 'vertical': 'vertical',
                   'reverse': 'reverse', 'noreverse': 'noreverse'}

# Matches "[ min : max ]" in the reply to "show xrange".
_range_re = re.compile(r'\[\s*([^\[\]:]*?)\s*:\s*([^\[\]:]*?)\s*\]')

def _quote(s: str) -> str:
    return '"' + s.replace('\\', '\\\\').replace('"', '\\"') + '"'

def _is_number(v) -> bool:
    return isinstance(v, numbers.Real) and not isinstance(v, bool)

def _range_value(s: str) -> Limit:
    if s in ('', '*'):
        return AUTOSCALE
    try:
        return float(s)
    except ValueError as err:
        raise FormatError(f'Bad range value "{s}" in gnuplot reply') from err

def parse_range(text: str):
    '''
    Returns (min, max) from gnuplot's reply to "show xrange" and the like.
    The last [min:max] pair is used, since gnuplot reports the current range
    after the set range, e.g.

        set xrange [ * : * ] noreverse writeback  # (currently [-10.0000:10.0000] )

    A "*" gives AUTOSCALE.
    '''
    matches = _range_re.findall(text)
    if len(matches) == 0:
        raise FormatError(f'No range found in gnuplot reply: {text!r}')
    lo, hi = matches[-1]
    return _range_value(lo), _range_value(hi)

def merge_limits(current: Sequence[Limit], request: Sequence[Limit]) -> tuple:
    '''
    Returns the new (xmin, xmax, ymin, ymax).

    current: The current limits.
    request: Up to 4 values.  Each is a number, AUTOSCALE, or None to keep
        the current value.  Missing values are treated as None.
    '''
    if len(request) > 4:
        raise ConfigurationError(f'At most 4 axis limits may be given; got {len(request)}')
    merged = []
    for i in range(4):
        r = request[i] if i < len(request) else None
        if r is None:
            merged.append(current[i])
        elif r is AUTOSCALE:
            merged.append(AUTOSCALE)
        elif _is_number(r):
            merged.append(float(r))
        else:
            raise ConfigurationError(f'Axis limit must be a number, AUTOSCALE or None; got {r!r}')
    return tuple(merged)

def _limit_text(v: Limit) -> str:
    if v is AUTOSCALE:
        return '*'
    return f'{v:.12g}'

def legend_command(options: Sequence) -> str:
    '''
    Returns the "set key" command for legend() options.
    '''
    frags = []
    i = 0
    while i < len(options):
        o = options[i]
        key = o.lower() if isinstance(o, str) else None
        if key == 'at':
            if i + 2 >= len(options) or not (_is_number(options[i+1]) and _is_number(options[i+2])):
                raise ConfigurationError('legend option "at" must be followed by two numbers')
            frags.append(f'at {options[i+1]:g},{options[i+2]:g}')
            i += 3
        elif key in legend_keywords:
            frags.append(legend_keywords[key])
            i += 1
        else:
            raise UnrecognizedOption(o, 'legend')
    if len(frags) == 0:
        frags.append('on')
    return 'set key ' + ' '.join(frags)

def guess_terminal(filename: str) -> Optional[str]:
    '''
    Returns the gnuplot terminal for filename's extension, or None.
    '''
    ext = os.path.splitext(filename)[1].lower()
    return terminals.get(ext)

class Plotter:
    '''
    The plotting commands.  Each acts on the active Session of a
    Session_Manager, starting one if needed.
    '''
    def __init__(self, manager: Optional[sessions.Session_Manager]=None):
        self.manager = sessions.Session_Manager() if manager is None else manager
    def session(self) -> sessions.Session:
        return self.manager.active()

    # Sessions
    def new_plot(self) -> sessions.Session:
        '''
        Starts a new plot window; later commands go to it.
        '''
        return self.manager.new_plot()
    def close_plot(self) -> None:
        '''
        Closes the active plot; the previous one becomes active.
        '''
        self.manager.close_plot()
    def close_all_plots(self) -> None:
        self.manager.close_all_plots()

    # Drawing
    def _styles(self, records: list[args_mod.Series_Record]) -> list[Style_Descriptor]:
        '''
        Returns the parsed style of each record.  Called before the previous
        plot's files are deleted, so a bad argument leaves that plot intact.
        '''
        if len(records) == 0:
            raise ConfigurationError('Nothing to plot')
        return [r.style() for r in records]
    def _draw(self, verb: str, clauses: list[str]) -> str:
        s = self.session()
        s.plotted = True
        return s.draw(verb + ' ' + ', '.join(clauses))
    def _clause_2d(self, s: sessions.Session, r: args_mod.Series_Record,
                   st: Style_Descriptor) -> str:
        if r.is_grid():
            path = s.write_grid(r.x, r.y, r.z)
            return f'"{path}" using 1:2:3 {st.override or "with image"} {st.title_clause()}'
        r.with_index()
        columns = [r.x, r.y] + r.extras
        path = s.write_columns(columns)
        using = ':'.join(str(i + 1) for i in range(len(columns)))
        mode = extra_modes[len(r.extras)]
        return f'"{path}" using {using} {st.with_clause(mode)} {st.title_clause()}'
    def plot(self, *args) -> str:
        '''
        Plots 2-D series; see vgplot.args for the argument forms.
        Returns gnuplot's reply.
        '''
        records = args_mod.group_2d(args)
        styles = self._styles(records)
        s = self.session()
        s.new_plot_files()
        return self._draw('plot', [self._clause_2d(s, r, st) for r, st in zip(records, styles)])
    def plot3d(self, *args) -> str:
        '''
        Plots 3-D curves, given as x, y, z[, c][, label] groups.  The
        optional column c colors the curve through the palette.
        '''
        records = args_mod.group_3d(args)
        styles = self._styles(records)
        s = self.session()
        s.new_plot_files()
        clauses = []
        for r, st in zip(records, styles):
            if np.ndim(r.z) == 2:
                path = s.write_grid(r.x, r.y, r.z)
                using = '1:2:3'
            else:
                path = s.write_columns([r.x, r.y, r.z] + r.extras)
                using = ':'.join(str(i + 1) for i in range(3 + len(r.extras)))
            mode = None
            if len(r.extras) > 0:
                mode = mode_clauses[st.mode] + " palette"
            clauses.append(f'"{path}" using {using} {st.with_clause(mode)} {st.title_clause()}')
        return self._draw('splot', clauses)
    def surface(self, *args) -> str:
        '''
        Plots surfaces, given as z or x, y, z with z a 2-D array, each
        optionally followed by a label.  x and y may be 1-D (column and
        row coordinates) or 2-D like z.
        '''
        records = args_mod.group_2d(args)
        for r in records:
            if not r.is_grid():
                raise ConfigurationError('surface() requires a 2-D z array for each series')
        styles = self._styles(records)
        s = self.session()
        s.new_plot_files()
        clauses = []
        for r, st in zip(records, styles):
            path = s.write_grid(r.x, r.y, r.z)
            clauses.append(f'"{path}" using 1:2:3 {st.override or "with pm3d"} {st.title_clause()}')
        return self._draw('splot', clauses)
    def bar(self, *args, style: str='grouped', width: float=0.8, gap: float=2) -> str:
        '''
        Plots a bar chart.  Arguments are y, x y, y label or x y label
        groups; y may be 2-D with one series per column.  All series
        must have the same number of bars.

        style: "grouped" (side by side) or "stacked".
        width: Bar width, relative to the space available.
        gap: Gap between groups of bars, in bar widths.
        '''
        records = []
        for r in args_mod.group_bar(args):
            if np.ndim(r.y) == 2:
                for j in range(np.shape(r.y)[1]):
                    records.append(args_mod.Series_Record(r.x, r.y[:, j], r.label if j == 0 else ''))
            else:
                records.append(r)
        lengths = set(len(r.y) for r in records)
        if len(lengths) > 1:
            raise ConfigurationError(f'All bar series must have the same length; got {sorted(lengths)}')
        if style == 'grouped':
            histogram = f'clustered gap {gap:g}'
        elif style == 'stacked':
            histogram = 'rowstacked'
        else:
            raise UnrecognizedOption(style, 'bar style')
        styles = self._styles(records)
        s = self.session()
        s.new_plot_files()
        s.send(f'set style histogram {histogram}')
        s.send('set style fill solid border -1')
        s.send(f'set boxwidth {width:g}')
        clauses = []
        for i, (r, st) in enumerate(zip(records, styles)):
            path = s.write_columns([r.x, r.y])
            using = '2:xtic(sprintf("%g",$1))' if i == 0 else '2'
            clauses.append(f'"{path}" using {using} {st.with_clause("histograms")} {st.title_clause()}')
        return self._draw('plot', clauses)
    def stairs(self, *args) -> str:
        '''
        Plots stairstep curves; the arguments are as for plot().
        '''
        records = args_mod.group_2d(args)
        for r in records:
            if r.is_grid() or len(r.extras) > 0:
                raise ConfigurationError('stairs() takes only x, y and label arguments')
        styles = self._styles(records)
        s = self.session()
        s.new_plot_files()
        clauses = []
        for r, st in zip(records, styles):
            r.with_index()
            xs, ys = stairs_mod.stairstep(r.x, r.y)
            path = s.write_columns([xs, ys])
            clauses.append(f'"{path}" using 1:2 {st.with_clause()} {st.title_clause()}')
        return self._draw('plot', clauses)
    def replot(self) -> str:
        '''
        Redraws the plot.  Does nothing before the first plot, or in
        multiplot mode.
        '''
        s = self.session()
        if not s.plotted or s.multiplot:
            return ''
        return s.draw('replot')
    def _set(self, cmd: str, replot: bool) -> None:
        self.session().send(cmd)
        if replot:
            self.replot()

    # Layout
    def subplot(self, rows: int, cols: int, index: int) -> None:
        '''
        Selects panel index (0-based, row by row) of a rows x cols grid for
        the next plot.  The first call switches the plot to multiplot mode.
        '''
        if rows < 1 or cols < 1:
            raise ConfigurationError(f'Subplot grid must be at least 1x1; got {rows}x{cols}')
        if index < 0 or index >= rows * cols:
            raise OutOfBounds(index, rows, cols)
        s = self.session()
        s.set_multiplot()
        w = 1.0 / cols
        h = 1.0 / rows
        row, col = divmod(index, cols)
        s.send(f'set size {w:g},{h:g}')
        s.send(f'set origin {col * w:g},{1.0 - (row + 1) * h:g}')
    def reset(self) -> None:
        '''
        Leaves multiplot mode and restores gnuplot's default settings.
        '''
        self.session().reset()

    # Axes
    def get_axis_limits(self) -> tuple:
        '''
        Returns the current (xmin, xmax, ymin, ymax) as reported by gnuplot.
        '''
        s = self.session()
        xr = parse_range(s.query('show xrange'))
        yr = parse_range(s.query('show yrange'))
        return xr + yr
    def axis(self, limits: Optional[Sequence[Limit]]=None, replot: bool=True) -> tuple:
        '''
        Sets and returns the axis limits (xmin, xmax, ymin, ymax).

        limits: Up to 4 values, each a number, AUTOSCALE, or None to keep the
            current value.  If limits is None, the limits are only returned.
        replot: If true, redraw the plot.
        '''
        current = self.get_axis_limits()
        if limits is None:
            return current
        new = merge_limits(current, limits)
        s = self.session()
        s.send(f'set xrange [{_limit_text(new[0])}:{_limit_text(new[1])}]')
        s.send(f'set yrange [{_limit_text(new[2])}:{_limit_text(new[3])}]')
        if replot:
            self.replot()
        return new
    def grid(self, on: bool=True, replot: bool=True) -> None:
        self._set('set grid' if on else 'unset grid', replot)
    def title(self, text: str, replot: bool=True) -> None:
        self._set(f'set title {_quote(text)}', replot)
    def xlabel(self, text: str, replot: bool=True) -> None:
        self._set(f'set xlabel {_quote(text)}', replot)
    def ylabel(self, text: str, replot: bool=True) -> None:
        self._set(f'set ylabel {_quote(text)}', replot)
    def zlabel(self, text: str, replot: bool=True) -> None:
        self._set(f'set zlabel {_quote(text)}', replot)
    def legend(self, *options, replot: bool=True) -> None:
        '''
        Sets the legend.  Options are keywords such as "show", "hide", "box",
        "nobox", "left", "top", "outside", or "at", x, y.
        '''
        self._set(legend_command(options), replot)

    # Text labels
    def text(self, x: float, y: float, string: str, z: Optional[float]=None,
             tag: Optional[int]=None, replot: bool=True) -> int:
        '''
        Places string at (x, y[, z]) and returns its tag, for text_delete().
        '''
        if tag is None:
            tag = self.session().new_tag()
        at = f'{x:g},{y:g}' if z is None else f'{x:g},{y:g},{z:g}'
        self._set(f'set label {tag} {_quote(string)} at {at}', replot)
        return tag
    def text_show(self) -> str:
        '''
        Returns gnuplot's list of text labels.
        '''
        return self.session().query('show label')
    def text_delete(self, *tags: int, replot: bool=True) -> None:
        '''
        Deletes the labels with the given tags, or all labels if none given.
        '''
        s = self.session()
        if len(tags) == 0:
            s.send('unset label')
        for tag in tags:
            s.send(f'unset label {tag}')
        if replot:
            self.replot()

    # Output
    def print_plot(self, filename: str, terminal: Optional[str]=None) -> None:
        '''
        Writes the current plot to filename.

        terminal: gnuplot terminal, e.g. "pngcairo size 800,600".  If None,
            it is guessed from the file extension.
        '''
        if terminal is None:
            terminal = guess_terminal(filename)
            if terminal is None:
                raise MissingCapability(filename)
        s = self.session()
        s.send('set terminal push')
        s.send(f'set terminal {terminal}')
        s.send(f'set output {_quote(filename)}')
        s.draw('replot')
        s.send('set output')
        s.send('set terminal pop')
        print(f'Image written to {filename}')
    def format_plot(self, command: str, response: bool=False) -> str:
        '''
        Sends a raw gnuplot command.  If response is true, returns the reply.
        '''
        s = self.session()
        if response:
            return s.query(command)
        s.send(command)
        return ''

    # Data files
    def load_data_file(self, filename: str, separator: Optional[str]=None) -> list[np.ndarray]:
        '''
        Returns the columns of a data file; see vgplot.numtext.
        '''
        return numtext.load_data_file(filename, separator)
    def plot_data_file(self, filename: str, x_column: Optional[int]=None,
                       separator: Optional[str]=None) -> str:
        '''
        Plots each column of a data file.

        x_column: Column to use as the abscissa. If None, every column is
            plotted against its index.
        '''
        columns = self.load_data_file(filename, separator)
        if len(columns) == 0:
            raise FormatError(f'No data found in {filename}')
        if x_column is not None and not 0 <= x_column < len(columns):
            raise ConfigurationError(f'x_column {x_column} not in file {filename} with {len(columns)} columns')
        name = os.path.basename(filename)
        plot_args = []
        for i, c in enumerate(columns):
            if i == x_column:
                continue
            if x_column is not None:
                plot_args.append(columns[x_column])
            plot_args += [c, f';{name}[{i}];']
        return self.plot(*plot_args)

#######################################################################################################################
# Functions acting on the default Plotter
#######################################################################################################################

_default = None

def default_plotter() -> Plotter:
    global _default
    if _default is None:
        _default = Plotter(sessions.Session_Manager(options.load_options()))
    return _default

def plot(*args):
    return default_plotter().plot(*args)
def plot3d(*args):
    return default_plotter().plot3d(*args)
def surface(*args):
    return default_plotter().surface(*args)
def bar(*args, **kwargs):
    return default_plotter().bar(*args, **kwargs)
def stairs(*args):
    return default_plotter().stairs(*args)
def replot():
    return default_plotter().replot()
def subplot(rows, cols, index):
    return default_plotter().subplot(rows, cols, index)
def axis(limits=None, replot=True):
    return default_plotter().axis(limits, replot)
def grid(on=True, replot=True):
    return default_plotter().grid(on, replot)
def title(text, replot=True):
    return default_plotter().title(text, replot)
def xlabel(text, replot=True):
    return default_plotter().xlabel(text, replot)
def ylabel(text, replot=True):
    return default_plotter().ylabel(text, replot)
def zlabel(text, replot=True):
    return default_plotter().zlabel(text, replot)
def legend(*options, replot=True):
    return default_plotter().legend(*options, replot=replot)
def text(x, y, string, **kwargs):
    return default_plotter().text(x, y, string, **kwargs)
def text_show():
    return default_plotter().text_show()
def text_delete(*tags, replot=True):
    return default_plotter().text_delete(*tags, replot=replot)
def print_plot(filename, terminal=None):
    return default_plotter().print_plot(filename, terminal)
def format_plot(command, response=False):
    return default_plotter().format_plot(command, response)
def load_data_file(filename, separator=None):
    return default_plotter().load_data_file(filename, separator)
def plot_data_file(filename, x_column=None, separator=None):
    return default_plotter().plot_data_file(filename, x_column, separator)
def new_plot():
    return default_plotter().new_plot()
def close_plot():
    return default_plotter().close_plot()
def close_all_plots():
    return default_plotter().close_all_plots()

#######################################################################################################################
# Main
#######################################################################################################################

if __name__ == '__main__':
    '''
    Demo; requires gnuplot.
    '''
    x = np.linspace(0, 2 * np.pi, 50)
    plot(x, np.sin(x), 'r;sine;', x, np.cos(x), 'b:;cosine;')
    title('Trig functions')
    print(f'Axis limits: {axis()}')
    input('Press Enter to continue')
    close_all_plots()
