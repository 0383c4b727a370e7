# ====================================================================================== #
# Bin specifications and histogram accumulation.
# ====================================================================================== #
import logging
import numpy as np
from numba import njit

from .errors import (ConfigurationError, EmptyDistribution, InvalidLogDomain,
                     ValueAboveRange, ValueBelowRange)

logger = logging.getLogger(__name__)

# sentinel bin indices returned by search_bins
BELOW_RANGE = -1
ABOVE_RANGE = -2


@njit
def search_bins(boundaries, values, closed_right=False):
    """Locate the half-open interval [boundaries[i], boundaries[i+1]) containing each
    value.

    Parameters
    ----------
    boundaries : ndarray
        Strictly increasing bin limits. There is one fewer bin than limits.
    values : ndarray
    closed_right : bool, False
        If True, the last bin also contains its upper limit.

    Returns
    -------
    ndarray
        Bin index of each value, or BELOW_RANGE/ABOVE_RANGE.
    """

    n = boundaries.size
    ix = np.zeros(values.size, dtype=np.int64)

    for k in range(values.size):
        x = values[k]
        # nan fails every comparison and lands here
        if not x>=boundaries[0]:
            ix[k] = BELOW_RANGE
        elif x>boundaries[n-1] or (x==boundaries[n-1] and not closed_right):
            ix[k] = ABOVE_RANGE
        elif x==boundaries[n-1]:
            ix[k] = n-2
        else:
            # invariant: boundaries[lo] <= x < boundaries[hi]
            lo = 0
            hi = n-1
            while hi-lo>1:
                mid = (lo+hi)//2
                if boundaries[mid]<=x:
                    lo = mid
                else:
                    hi = mid
            ix[k] = lo
    return ix


class LinearBins():
    def __init__(self, lower_bound, upper_bound, number_of_bins=10):
        """Bins of equal width covering [lower_bound, upper_bound).

        Parameters
        ----------
        lower_bound : float
        upper_bound : float
        number_of_bins : int, 10
        """

        if number_of_bins<1:
            raise ConfigurationError("Number of bins must be at least 1, got %d."%number_of_bins)
        if not upper_bound>lower_bound:
            raise ConfigurationError("Upper bound %r must exceed lower bound %r."%(upper_bound,
                                                                                  lower_bound))
        self.lower_bound = lower_bound
        self.upper_bound = upper_bound
        self.n_bins = number_of_bins
        self.boundaries = (lower_bound +
                           np.arange(number_of_bins+1) / number_of_bins * (upper_bound-lower_bound))
        self.closed_right = False

    def representatives(self):
        """Bin midpoints."""
        return (self.boundaries[1:] + self.boundaries[:-1]) / 2

    def assign(self, values):
        return search_bins(self.boundaries, values, self.closed_right)


class UniqueValueBins():
    def __init__(self, keys, are_int=False):
        """One bin per distinct key.

        Parameters
        ----------
        keys : ndarray
            Sorted distinct keys.
        are_int : bool, False
            If True, values are truncated toward zero before they are matched to a key.
        """

        self.keys = keys
        self.are_int = are_int
        self.n_bins = keys.size
        self.closed_right = False

    @classmethod
    def from_values(cls, values, are_int=False):
        """Collect the distinct keys present in the data."""
        if are_int:
            keys = np.unique(np.trunc(values).astype(np.int64))
        else:
            keys = np.unique(values)
        return cls(keys, are_int=are_int)

    @property
    def boundaries(self):
        """Nominal limits 0.1 either side of each key (meaningful for integer data)."""
        if self.n_bins==0:
            return np.zeros(0)
        b = np.zeros(self.n_bins+1)
        b[:-1] = self.keys - .1
        b[-1] = b[-2] + .2
        return b

    def representatives(self):
        return self.keys

    def _keys_of(self, values):
        if self.are_int:
            return np.trunc(values).astype(np.int64)
        return values

    def assign(self, values):
        keys = self._keys_of(values)
        ix = np.searchsorted(self.keys, keys)

        # only exact matches to a known key are in a bin
        hit = ix<self.n_bins
        hit[hit] = self.keys[ix[hit]]==keys[hit]
        below = ~hit & (ix==0)
        ix[~hit] = ABOVE_RANGE
        ix[below] = BELOW_RANGE
        return ix


class LogBins():
    def __init__(self, max_exponent):
        """Logarithmic bins from 1 to 10**max_exponent, ten per decade.

        The last subdivision of the final decade is merged into the last bin so that
        there are 10*max_exponent-1 bins, and the last bin contains its upper limit.

        Parameters
        ----------
        max_exponent : int
        """

        assert max_exponent>=1
        self.max_exponent = max_exponent
        self.n_bins = 10 * max_exponent - 1

        exponents = (np.repeat(np.arange(max_exponent), 10) +
                     np.tile(np.arange(10), max_exponent) * .1)
        self.boundaries = np.zeros(self.n_bins+1)
        self.boundaries[:-1] = 10.**exponents[:self.n_bins]
        self.boundaries[-1] = 10.**max_exponent
        self.closed_right = True

    @classmethod
    def from_values(cls, values):
        """Choose the number of decades needed to cover the largest value.

        Parameters
        ----------
        values : ndarray

        Returns
        -------
        LogBins
        """

        if values.size==0:
            raise EmptyDistribution("No values to bin.")
        max_element = values.max()
        if not max_element>0:
            raise InvalidLogDomain("Logarithmic bins need a positive value, largest is %g."%
                                   max_element)
        max_exponent = max(1, int(np.ceil(np.log10(max_element))))
        # log10 rounds down for integers just above a power of ten
        while 10.**max_exponent<max_element:
            max_exponent += 1
        bins = cls(max_exponent)
        logger.info("\tmax_bin = %g", bins.boundaries[-1])
        logger.info("\tmax_exponent = %d", max_exponent)
        logger.info("\tnumber_of_bins = %d", bins.n_bins)
        return bins

    def representatives(self):
        """Lower and upper limit of each bin as columns."""
        return np.vstack((self.boundaries[:-1], self.boundaries[1:])).T

    def assign(self, values):
        return search_bins(self.boundaries, values, self.closed_right)


class BinTable():
    def __init__(self, bins):
        """Counts accumulated in a fixed set of bins.

        Parameters
        ----------
        bins : LinearBins, UniqueValueBins, or LogBins
        """

        self.bins = bins
        self.counts = np.zeros(bins.n_bins)

    def accumulate(self, values, lines):
        """Increment the count of the bin containing each value.

        Parameters
        ----------
        values : ndarray
        lines : ndarray
            Line number of each value, used to report values outside the bins.
        """

        if values.size==0:
            return
        ix = self.bins.assign(values)

        bad = np.where(ix<0)[0]
        if bad.size:
            i = bad[0]
            err = ValueBelowRange if ix[i]==BELOW_RANGE else ValueAboveRange
            if isinstance(self.bins, UniqueValueBins):
                raise err(values[i], lines[i])
            b = self.bins.boundaries
            raise err(values[i], lines[i], float(b[0]), float(b[-1]), self.bins.closed_right)

        self.counts += np.bincount(ix, minlength=self.bins.n_bins)

    @property
    def total(self):
        return self.counts.sum()
