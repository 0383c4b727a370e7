# ====================================================================================== #
# Utilities for normalizing histograms.
# ====================================================================================== #
import numpy as np

from .errors import EmptyDistribution


def pmf(counts):
    """Empirical probability mass of each bin.

    Parameters
    ----------
    counts : ndarray

    Returns
    -------
    ndarray
        Normalized probability distribution.
    """

    norm = counts.sum()
    if norm==0:
        raise EmptyDistribution("No values survived filtering, cannot normalize.")
    return counts / norm

def ccdf(counts):
    """Empirical complementary cumulative distribution, 1 minus the probability mass up
    to and including each bin.

    Parameters
    ----------
    counts : ndarray

    Returns
    -------
    ndarray
    """

    # round-off must not make the tail negative
    return np.maximum(1 - np.cumsum(pmf(counts)), 0.)
