# ====================================================================================== #
# Printing distributions as tab-separated tables.
# ====================================================================================== #
import sys
import numpy as np


def _format(x, precision):
    if isinstance(x, (int, np.integer)):
        return "%d" % x
    return "%.*f" % (precision, x)

def format_rows(keys, values, precision=8):
    """One line per bin: the bin's key column(s) then its value, separated by tabs.

    Parameters
    ----------
    keys : ndarray
        Representative value of each bin. Two dimensional when each bin is described
        by its limits. Integer keys are printed as integers.
    values : ndarray
    precision : int, 8
        Number of decimals.

    Returns
    -------
    list of str
    """

    assert precision>=0
    keys = np.asarray(keys)
    if keys.ndim==1:
        keys = keys[:,None]
    assert len(keys)==len(values)

    width = 2 * precision
    rows = []
    for k, v in zip(keys, values):
        cols = [_format(k[0], precision).ljust(width)]
        cols.extend(_format(x, precision) for x in k[1:])
        cols.append(_format(v, precision))
        rows.append("\t".join(cols))
    return rows

def write_rows(rows, stream=None):
    stream = stream or sys.stdout
    for row in rows:
        stream.write(row + "\n")
