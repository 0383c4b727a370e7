# ====================================================================================== #
# Command line tools.
# ====================================================================================== #
import argparse
import logging
import sys

from .distributions import binned_distribution, discrete_distribution, power_law_distribution
from .errors import DistributionError
from .output import format_rows, write_rows

logger = logging.getLogger(__name__)


def _parser(description):
    """Options shared by every tool."""
    parser = argparse.ArgumentParser(
        description=description,
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument('-i', '--input_path', type=str,
                        help='Path to the raw data file.')
    # the misspelled name is what older scripts pass
    parser.add_argument('-c', '--column_idx', '--columnn_idx', dest='column_idx',
                        type=int, default=0,
                        help='Column index of the raw data (starting from column 0).')
    parser.add_argument('-r', '--row_idx', type=int, default=None,
                        help='Row index of the raw data (starting from row 0). '
                             'Overrides column mode.')
    parser.add_argument('-p', '--precision', type=int, default=8,
                        help='Precision of the output.')
    parser.add_argument('--ignore_null', action='store_true',
                        help='Ignore null entries (with given tolerance).')
    parser.add_argument('-t', '--tolerance', type=float, default=1e-10,
                        help='Tolerance on null entries.')
    parser.add_argument('-q', '--quiet', action='store_true',
                        help='Only report errors and warnings.')
    return parser

def _setup_logging(quiet):
    """Send diagnostics to stderr.

    Returns
    -------
    function
        Restores the previous logging configuration.
    """

    root = logging.getLogger('discretedist')
    saved = root.handlers, root.level, root.propagate

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter('%(message)s'))
    root.handlers = [handler]
    root.setLevel(logging.WARNING if quiet else logging.INFO)
    root.propagate = False

    def restore():
        handler.close()
        root.handlers, root.level, root.propagate = saved
    return restore

def _run(parser, argv, compute):
    """Parse arguments, compute the distribution and print it.

    Parameters
    ----------
    parser : argparse.ArgumentParser
    argv : list of str, None
    compute : function
        Takes the parsed arguments and returns keys and values.

    Returns
    -------
    int
        Exit status.
    """

    argv = sys.argv[1:] if argv is None else argv
    if not argv:
        parser.print_help()
        return 0
    args = parser.parse_args(argv)
    restore_logging = _setup_logging(args.quiet)
    try:
        return _compute_and_print(args, compute)
    finally:
        restore_logging()

def _compute_and_print(args, compute):
    if args.input_path is None:
        logger.error("No input file provided. Use the -i or --input_path= flag.")
        return 1
    if args.precision<0:
        logger.error("Precision must be non-negative, got %d.", args.precision)
        return 1

    try:
        keys, values = compute(args)
    except DistributionError as e:
        logger.error("ERR: [%s] %s", e.__class__.__name__, e)
        return 1

    write_rows(format_rows(keys, values, precision=args.precision), sys.stdout)
    return 0

def binned_main(argv=None):
    parser = _parser('Binned discrete distribution from raw data.')
    parser.add_argument('-b', '--number_of_bins', type=int, default=10,
                        help='Number of bins.')
    parser.add_argument('-l', '--lower_bound', type=float, default=None,
                        help='Lower bound of the bins.')
    parser.add_argument('-u', '--upper_bound', type=float, default=None,
                        help='Upper bound of the bins.')

    def compute(args):
        return binned_distribution(args.input_path, args.lower_bound, args.upper_bound,
                                   number_of_bins=args.number_of_bins,
                                   column_idx=args.column_idx,
                                   row_idx=args.row_idx,
                                   ignore_null=args.ignore_null,
                                   tolerance=args.tolerance)
    return _run(parser, argv, compute)

def discrete_main(argv=None):
    parser = _parser('Discrete distribution from raw data.')
    parser.add_argument('--are_int', action='store_true',
                        help='Key values are integer.')

    def compute(args):
        return discrete_distribution(args.input_path,
                                     are_int=args.are_int,
                                     column_idx=args.column_idx,
                                     row_idx=args.row_idx,
                                     ignore_null=args.ignore_null,
                                     tolerance=args.tolerance)
    return _run(parser, argv, compute)

def power_law_main(argv=None):
    parser = _parser('Empirical power law graphical representation.')
    parser.add_argument('-L', '--logarithmic_bins', action='store_true',
                        help='Produce logarithmically binned histogram.')
    parser.add_argument('-C', '--ccdf', action='store_true',
                        help='Produce the un-binned empirical CCDF.')

    def compute(args):
        return power_law_distribution(args.input_path,
                                      logarithmic_bins=args.logarithmic_bins,
                                      ccdf=args.ccdf,
                                      column_idx=args.column_idx,
                                      row_idx=args.row_idx,
                                      ignore_null=args.ignore_null,
                                      tolerance=args.tolerance)
    return _run(parser, argv, compute)
