#!/usr/bin/env python
# Copyright 2025 Robert B. Lowrie
# This software is covered by the MIT License.
# Please see the provided LICENSE file for more details.
'''
Plots columns of numeric text files with gnuplot.  Each file is plotted in
its own window; see vgplot.numtext for the file format.
'''

import argparse
import json

import vgplot.options as options
import vgplot.plot as vg
import vgplot.session as session

# options are saved in this file.  See also --load.
optionsfile = '.plotdat'

#######################################################################################################################
# Main
#######################################################################################################################

if __name__ == '__main__':
    # Initially parse just the --load option.  Then set up the main parser, based on
    # its value.
    init_parser = argparse.ArgumentParser(add_help=False)
    init_parser.add_argument('--load', nargs='?', default=None, const=optionsfile,
                            metavar='LOADFILE',
                            help='Load options from file %(metavar)s. Command-line options'
                            ' override loaded options. If --load is specified with'
                            ' no argument, then %(const)s is used as %(metavar)s, which'
                            ' is also written after each invocation.')

    init_args, remains = init_parser.parse_known_args()

    parser = argparse.ArgumentParser('plotdat.py',
                                    description='Plots data files with gnuplot.',
                                    parents=[init_parser])

    nargs = '+'
    if init_args.load:
        nargs = '*'
    parser.add_argument('file', nargs=nargs,
                        help='Data file(s). Optional if --load is specified.')
    parser.add_argument('--abscissa', type=int, default=None,
                        help='Column in each file to plot as abscissa.'
                        ' Default is to plot against the row index.')
    parser.add_argument('--separator', default=None,
                        help='Column delimiter. Default is to infer it from each file.')
    parser.add_argument('-t', '--title', default=None, type=str,
                        help='Plot title. The default is no title.')
    parser.add_argument('--grid', default=True, action='store_true',
                        help='If true, add grid to each plot. '
                        '(default: %(default)s)')
    parser.add_argument('--no-grid', dest='grid',
                        action='store_false', help='Opposite of --grid')
    parser.add_argument('-o', '--output', nargs='?', default=None,
                        const='plotdat.png', metavar='OUTPUTFILE',
                        help='Also write the last plot to file %(metavar)s.'
                        ' If --output is specified with no argument,'
                        ' then %(const)s is used as %(metavar)s.')
    parser.add_argument('--debug', default=False, action='store_true',
                        help='Echo commands sent to gnuplot. (default: %(default)s)')

    if init_args.load:
        with open(init_args.load, 'rt') as f:
            t_args = argparse.Namespace()
            t_args.__dict__.update(json.load(f))
            saved_files = t_args.file[:]
            args = parser.parse_args(remains, namespace=t_args)
            if len(args.file) == 0:
                args.file = saved_files
    else:
        args = parser.parse_args(remains)

    if len(args.file) == 0:
        parser.error('Must supply FILE arguments on command line or in the --load file.')

    opts = options.load_options()
    opts.debug = args.debug
    plotter = vg.Plotter(session.Session_Manager(opts))
    for i, fn in enumerate(args.file):
        if i > 0:
            plotter.new_plot()
        plotter.grid(args.grid, replot=False)
        if args.title is not None:
            plotter.title(args.title, replot=False)
        plotter.plot_data_file(fn, args.abscissa, args.separator)

    # Dump the command-line options
    with open(optionsfile, 'wt') as f:
        json.dump(vars(args), f, indent=4)

    if args.output is not None:
        plotter.print_plot(args.output)
    input('Press Enter to close the plots')
    plotter.close_all_plots()
