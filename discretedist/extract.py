# ====================================================================================== #
# Reading raw values out of whitespace-delimited text files.
# ====================================================================================== #
import logging
import numpy as np

from .errors import ConfigurationError, InputUnreadable, MalformedRecord, RowIndexOutOfRange

logger = logging.getLogger(__name__)


def _parse(token, path, lineno):
    try:
        x = float(token)
    except ValueError:
        raise MalformedRecord(path, lineno, "cannot read %r as a number" % token)
    if not np.isfinite(x):
        raise MalformedRecord(path, lineno, "%r is not a finite number" % token)
    return x

def _open(path):
    try:
        return open(path, 'r')
    except OSError as e:
        raise InputUnreadable(path, e.strerror)

def read_values(input_path, column_idx=0, row_idx=None):
    """Extract the raw data from a single column or a single row of a file.

    Parameters
    ----------
    input_path : str
    column_idx : int, 0
        Column of the raw data, starting from column 0. The same column is read on
        every line. Extra columns are ignored.
    row_idx : int, None
        Row of the raw data, starting from row 0. Every value on that line is read. If
        given, this overrides column mode.

    Returns
    -------
    ndarray
        Values.
    ndarray
        Line number (starting from 1) each value was read from.
    """

    if column_idx<0:
        raise ConfigurationError("Column index must be non-negative, got %d."%column_idx)
    if row_idx is not None and row_idx<0:
        raise ConfigurationError("Row index must be non-negative, got %d."%row_idx)

    values = []
    lines = []
    with _open(input_path) as f:
        if row_idx is None:
            for lineno, line in enumerate(f, 1):
                tokens = line.split()
                # blank lines hold no record
                if not tokens:
                    continue
                if len(tokens)<=column_idx:
                    raise MalformedRecord(input_path, lineno,
                                          "%d columns, cannot read column %d"%(len(tokens),
                                                                               column_idx))
                values.append(_parse(tokens[column_idx], input_path, lineno))
                lines.append(lineno)
        else:
            n_lines = 0
            for line in f:
                if n_lines==row_idx:
                    break
                n_lines += 1
            else:
                raise RowIndexOutOfRange(input_path, row_idx, n_lines)
            lineno = row_idx + 1
            for token in line.split():
                values.append(_parse(token, input_path, lineno))
                lines.append(lineno)

    logger.debug("Read %d values from %s", len(values), input_path)
    return np.array(values, dtype=float), np.array(lines, dtype=np.int64)

def filter_null(values, lines, ignore_null=False, tolerance=1e-10):
    """Drop entries whose magnitude does not exceed the tolerance.

    Parameters
    ----------
    values : ndarray
    lines : ndarray
    ignore_null : bool, False
        If False, everything is kept.
    tolerance : float, 1e-10

    Returns
    -------
    ndarray
        Kept values.
    ndarray
        Line numbers of kept values.
    """

    if not ignore_null:
        return values, lines
    keep = np.abs(values)>tolerance
    if not keep.all():
        logger.debug("Ignoring %d null entries", (~keep).sum())
    return values[keep], lines[keep]
