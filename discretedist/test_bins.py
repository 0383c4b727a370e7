# ====================================================================================== #
# Testing module for bins and histogram accumulation.
# ====================================================================================== #
import pytest
from .bins import *
from .errors import *


def test_search_bins():
    boundaries = np.array([0., 1, 2, 3])
    values = np.array([0, .5, 1, 2.999, 3, -.1, np.nan, 4])

    ix = search_bins(boundaries, values)
    assert np.array_equal(ix, [0, 0, 1, 2, ABOVE_RANGE, BELOW_RANGE, BELOW_RANGE, ABOVE_RANGE])

    ix = search_bins(boundaries, values, True)
    assert ix[4]==2 and ix[7]==ABOVE_RANGE
    print("Test passed: Half-open bins with tagged out of range values.")

def test_linear_bins():
    bins = LinearBins(0, 3, 3)
    assert np.allclose(bins.boundaries, [0, 1, 2, 3])
    assert np.allclose(bins.representatives(), [.5, 1.5, 2.5])

    rng = np.random.RandomState(0)
    values = rng.uniform(-2, 5, size=1000)
    bins = LinearBins(-2, 5, 13)
    table = BinTable(bins)
    table.accumulate(values, np.arange(1, 1001))
    assert table.total==1000
    assert (np.diff(bins.boundaries)>0).all()
    print("Test passed: Every value in range is counted once.")

def test_linear_bins_config():
    with pytest.raises(ConfigurationError):
        LinearBins(0, 1, 0)
    with pytest.raises(ConfigurationError):
        LinearBins(1, 1, 10)
    with pytest.raises(ConfigurationError):
        LinearBins(2, 1, 10)

def test_linear_bins_out_of_range():
    table = BinTable(LinearBins(0, 3, 3))
    with pytest.raises(ValueBelowRange) as e:
        table.accumulate(np.array([1, -.5, 2]), np.array([1, 2, 3]))
    assert e.value.line==2 and e.value.value==-.5

    # upper bound is excluded
    with pytest.raises(ValueAboveRange) as e:
        table.accumulate(np.array([1, 2, 3.]), np.array([4, 5, 6]))
    assert e.value.line==6
    assert table.total==0
    print("Test passed: Values outside bounds are errors.")

def test_unique_bins():
    values = np.array([3, 1, 2.5, 3, 1, 1])
    bins = UniqueValueBins.from_values(values)
    assert np.array_equal(bins.representatives(), [1, 2.5, 3])

    table = BinTable(bins)
    table.accumulate(values, np.arange(1, 7))
    assert np.array_equal(table.counts, [3, 1, 2])

    assert np.allclose(bins.boundaries, [.9, 2.4, 2.9, 3.1])
    assert np.array_equal(bins.assign(np.array([0., 2, 4])),
                          [BELOW_RANGE, ABOVE_RANGE, ABOVE_RANGE])
    print("Test passed: One bin per distinct value.")

def test_unique_bins_int():
    values = np.array([-1.5, -.5, .5, 1.7, 1.2])
    bins = UniqueValueBins.from_values(values, are_int=True)
    # truncation toward zero, not rounding
    assert np.array_equal(bins.representatives(), [-1, 0, 1])
    assert bins.representatives().dtype.kind=='i'

    table = BinTable(bins)
    table.accumulate(values, np.arange(1, 6))
    assert np.array_equal(table.counts, [1, 2, 2])
    print("Test passed: Integer keys are truncated.")

def test_log_bins():
    bins = LogBins(3)
    assert bins.n_bins==29
    assert bins.boundaries.size==30
    assert (np.diff(bins.boundaries)>0).all()
    assert bins.boundaries[0]==1 and bins.boundaries[-1]==1000
    assert np.isclose(bins.boundaries[10], 10)
    assert np.isclose(bins.boundaries[-2], 10**2.8)

    # every value from 1 to the top maps to exactly one bin
    values = np.arange(1, 1001, dtype=float)
    table = BinTable(bins)
    table.accumulate(values, np.arange(1, 1001))
    assert table.total==1000
    assert table.counts[-1]==(1000 - np.ceil(10**2.8) + 1)
    assert table.counts[0]==1

    rep = bins.representatives()
    assert rep.shape==(29, 2)
    assert np.array_equal(rep[1:,0], rep[:-1,1])
    print("Test passed: Logarithmic bins cover the data.")

def test_log_bins_from_values():
    bins = LogBins.from_values(np.array([1., 3, 100]))
    assert bins.max_exponent==2 and bins.n_bins==19

    bins = LogBins.from_values(np.array([1., 101]))
    assert bins.max_exponent==3

    bins = LogBins.from_values(np.array([1., 1]))
    assert bins.max_exponent==1 and bins.boundaries[-1]==10

    with pytest.raises(InvalidLogDomain):
        LogBins.from_values(np.array([0., -3]))
    with pytest.raises(EmptyDistribution):
        LogBins.from_values(np.array([]))

    table = BinTable(LogBins.from_values(np.array([0., 5])))
    with pytest.raises(ValueBelowRange):
        table.accumulate(np.array([0., 5]), np.array([1, 2]))

def test_log_bins_cover_max():
    # log10 of this is exactly 15.0 in floating point
    values = np.array([1., 1000000000000001.])
    bins = LogBins.from_values(values)
    assert bins.max_exponent==16
    assert bins.boundaries[-1]>=values.max()

    table = BinTable(bins)
    table.accumulate(values, np.array([1, 2]))
    assert table.total==2

    bins = LogBins.from_values(np.array([1e15]))
    assert bins.max_exponent==15
    print("Test passed: Largest value always has a logarithmic bin.")

def test_out_of_range_message():
    with pytest.raises(ValueAboveRange) as e:
        BinTable(LinearBins(0, 3, 3)).accumulate(np.array([4.]), np.array([7]))
    assert str(e.value).endswith("[0, 3).")

    # last logarithmic bin is closed
    with pytest.raises(ValueAboveRange) as e:
        BinTable(LogBins(1)).accumulate(np.array([11.]), np.array([3]))
    assert str(e.value).endswith("[1, 10].")

    bins = UniqueValueBins.from_values(np.array([1., 2]))
    with pytest.raises(ValueBelowRange) as e:
        BinTable(bins).accumulate(np.array([0.]), np.array([1]))
    assert e.value.lower is None
    assert 'range' not in str(e.value)
