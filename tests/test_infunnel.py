import numpy as np
import pytest

from seawater_utils.errors import ArgumentCountError, DimensionMismatchError
from seawater_utils.thermo.funnel import infunnel


def test_typical_ocean_sample_is_inside():
    assert np.array_equal(infunnel([[35.0]], [[10.0]], 100.0), [[1.0]])


@pytest.mark.parametrize(
    "SA, CT, p",
    [
        (35.0, 2.0, 9000.0),   # too deep
        (-1.0, 10.0, 0.0),     # negative salinity
        (43.0, 10.0, 0.0),     # too salty
        (35.0, -5.0, 0.0),     # below freezing near the surface
        (1.0, 5.0, 1000.0),    # too fresh at mid depth
        (35.0, 30.0, 1000.0),  # too warm at mid depth
        (25.0, 2.0, 7000.0),   # too fresh at depth
        (35.0, 12.0, 7000.0),  # too warm at depth
    ],
)
def test_outside_cases(SA, CT, p):
    assert infunnel([[SA]], [[CT]], p)[0, 0] == 0.0


def test_nan_input_gives_nan():
    out = infunnel([[35.0, np.nan]], [[10.0, 10.0]], 0.0)
    assert out.shape == (1, 2)
    assert out[0, 0] == 1.0
    assert np.isnan(out[0, 1])


def test_broadcasts_pressure_column():
    SA = np.full((2, 3), 35.0)
    CT = np.full((2, 3), 3.0)
    p = np.array([[100.0], [9000.0]])
    out = infunnel(SA, CT, p)
    assert np.array_equal(out, [[1.0, 1.0, 1.0], [0.0, 0.0, 0.0]])


def test_argument_and_shape_checks():
    with pytest.raises(ArgumentCountError):
        infunnel([[35.0]], [[10.0]])
    with pytest.raises(DimensionMismatchError):
        infunnel(np.ones((2, 3)), np.ones((3, 2)), 0.0)
