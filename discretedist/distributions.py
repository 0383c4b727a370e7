# ====================================================================================== #
# Empirical distributions of a column or row of raw data.
# ====================================================================================== #
import logging
import numpy as np

from .bins import BinTable, LinearBins, LogBins, UniqueValueBins
from .errors import ConfigurationError
from .extract import filter_null, read_values
from .utils import ccdf as _ccdf
from .utils import pmf

logger = logging.getLogger(__name__)


def _load(input_path, column_idx, row_idx, ignore_null, tolerance):
    values, lines = read_values(input_path, column_idx=column_idx, row_idx=row_idx)
    return filter_null(values, lines, ignore_null=ignore_null, tolerance=tolerance)

def binned_distribution(input_path, lower_bound, upper_bound,
                        number_of_bins=10,
                        column_idx=0,
                        row_idx=None,
                        ignore_null=False,
                        tolerance=1e-10):
    """Distribution of the raw data in bins of equal width.

    Every value must fall in [lower_bound, upper_bound).

    Parameters
    ----------
    input_path : str
    lower_bound : float
    upper_bound : float
    number_of_bins : int, 10
    column_idx : int, 0
    row_idx : int, None
        If given, read every value on this row instead of a column.
    ignore_null : bool, False
        If True, ignore values whose magnitude is at most tolerance.
    tolerance : float, 1e-10

    Returns
    -------
    ndarray
        Centers of bins.
    ndarray
        Normalized probability distribution.
    """

    if lower_bound is None or upper_bound is None:
        raise ConfigurationError("[Missing parameter] Set lower and upper bound of the bins "
                                 "with -l and -u flags.")
    bins = LinearBins(lower_bound, upper_bound, number_of_bins)

    values, lines = _load(input_path, column_idx, row_idx, ignore_null, tolerance)
    table = BinTable(bins)
    table.accumulate(values, lines)

    return bins.representatives(), pmf(table.counts)

def discrete_distribution(input_path,
                          are_int=False,
                          column_idx=0,
                          row_idx=None,
                          ignore_null=False,
                          tolerance=1e-10):
    """Unbinned distribution: probability of each distinct value.

    Parameters
    ----------
    input_path : str
    are_int : bool, False
        If True, values are keyed by their integer part (truncated toward zero).
    column_idx : int, 0
    row_idx : int, None
    ignore_null : bool, False
    tolerance : float, 1e-10

    Returns
    -------
    ndarray
        Distinct values, sorted. Integer typed if are_int is True.
    ndarray
        Normalized probability distribution.
    """

    values, lines = _load(input_path, column_idx, row_idx, ignore_null, tolerance)

    bins = UniqueValueBins.from_values(values, are_int=are_int)
    table = BinTable(bins)
    table.accumulate(values, lines)

    return bins.representatives(), pmf(table.counts)

def power_law_distribution(input_path,
                           logarithmic_bins=False,
                           ccdf=False,
                           column_idx=0,
                           row_idx=None,
                           ignore_null=False,
                           tolerance=1e-10):
    """Graphical representations of a long list of integers: the empirical distribution,
    its CCDF, or a logarithmically binned histogram.

    Values are truncated to integers.

    Parameters
    ----------
    input_path : str
    logarithmic_bins : bool, False
        If True, bin in ten logarithmic bins per decade starting at 1.
    ccdf : bool, False
        If True, return the unbinned empirical CCDF. Exclusive with logarithmic_bins.
    column_idx : int, 0
    row_idx : int, None
    ignore_null : bool, False
    tolerance : float, 1e-10

    Returns
    -------
    ndarray
        Distinct values or, with logarithmic bins, a two column array of the lower and
        upper limit of each bin.
    ndarray
        Probability or CCDF of each bin.
    """

    if logarithmic_bins and ccdf:
        raise ConfigurationError("Both --ccdf and --logarithmic_bins flags are present. "
                                 "Select only one.")

    values, lines = _load(input_path, column_idx, row_idx, ignore_null, tolerance)
    values = np.trunc(values)

    if logarithmic_bins:
        logger.info("Logarithmically binned mode selected.")
        bins = LogBins.from_values(values)
        table = BinTable(bins)
        table.accumulate(values, lines)
        return bins.representatives(), pmf(table.counts)

    logger.info("Computing the empirical distribution.")
    bins = UniqueValueBins.from_values(values, are_int=True)
    table = BinTable(bins)
    table.accumulate(values, lines)

    if ccdf:
        logger.info("CCDF mode selected.")
        return bins.representatives(), _ccdf(table.counts)
    logger.info("Normal mode selected.")
    return bins.representatives(), pmf(table.counts)
