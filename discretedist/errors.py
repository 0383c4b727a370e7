# ====================================================================================== #
# Exceptions raised while building empirical distributions.
# ====================================================================================== #


class DistributionError(Exception):
    """Base class for every error the pipelines raise."""


class ConfigurationError(DistributionError):
    """Missing or contradictory parameters, detected before any data is read."""


class InputUnreadable(ConfigurationError):
    def __init__(self, path, reason=None):
        self.path = path
        msg = "Cannot open %s" % path
        if reason:
            msg += " (%s)" % reason
        super().__init__(msg)


class MalformedRecord(DistributionError):
    def __init__(self, path, line, reason):
        self.path = path
        self.line = line
        super().__init__("%s:%d: %s" % (path, line, reason))


class RowIndexOutOfRange(DistributionError):
    def __init__(self, path, row_idx, n_lines):
        self.path = path
        self.row_idx = row_idx
        self.n_lines = n_lines
        super().__init__("%s has %d lines, cannot select row %d (starting from row 0)."%(
                         path, n_lines, row_idx))


class ValueOutOfRange(DistributionError):
    """A value falls outside every bin."""
    side = None

    def __init__(self, value, line, lower=None, upper=None, closed_right=False):
        self.value = float(value)
        self.line = int(line)
        self.lower = lower
        self.upper = upper
        # bins without a continuous range, i.e. one bin per distinct value
        if lower is None:
            msg = "Value %g on line %d is %s every binned value."%(self.value, self.line,
                                                                   self.side)
        else:
            msg = "Value %g on line %d is %s the bin range [%g, %g%s."%(
                  self.value, self.line, self.side, lower, upper, "]" if closed_right else ")")
        super().__init__(msg)


class ValueBelowRange(ValueOutOfRange):
    side = "below"


class ValueAboveRange(ValueOutOfRange):
    side = "above"


class EmptyDistribution(DistributionError):
    """No value survived filtering, so there is nothing to normalize."""


class InvalidLogDomain(DistributionError):
    """Logarithmic bins need at least one strictly positive value."""
