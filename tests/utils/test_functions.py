
from geodetics.utils.functions import dms_components, round_half_up


def test_round_half_up():
    assert round_half_up(1.59, 1) == 1.6
    assert round_half_up(1.51, 1) == 1.5
    assert round_half_up(1.55, 1) == 1.6
    assert round_half_up(1.65, 1) == 1.7

    assert round_half_up(-1.59, 1) == -1.6
    assert round_half_up(-1.51, 1) == -1.5
    assert round_half_up(-1.55, 1) == -1.5
    assert round_half_up(-1.65, 1) == -1.6


def test_dms_components():
    assert dms_components(38.88922) == (38, 53, 21.192)
    assert dms_components(-77.04978) == (77, 2, 59.208)
    assert dms_components(0.) == (0, 0, 0.)

    # Seconds that round up to 60 carry into minutes and degrees
    assert dms_components(10.9999999999) == (11, 0, 0.)
