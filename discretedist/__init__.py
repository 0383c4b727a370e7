# ====================================================================================== #
# Empirical discrete distributions of raw data columns and rows.
# ====================================================================================== #
from .distributions import binned_distribution, discrete_distribution, power_law_distribution
from .errors import *

__version__ = '0.1.0'
