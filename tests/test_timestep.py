import pytest

from elmengine.timestep import Timestep


def test_default_is_zero():
    ts = Timestep()
    assert ts.seconds == 0.0
    assert ts.milliseconds == 0.0


def test_milliseconds_from_seconds():
    assert Timestep(0.5).milliseconds == pytest.approx(500.0)


def test_float_conversion_matches_seconds():
    ts = Timestep(0.25)
    assert float(ts) == ts.seconds


def test_timestep_is_immutable():
    ts = Timestep(1.0)
    with pytest.raises(AttributeError):
        ts.seconds = 2.0  # type: ignore[misc]
    assert ts.seconds == 1.0
    assert ts.milliseconds == pytest.approx(1000.0)


def test_equal_timesteps_compare_equal():
    first = Timestep(0.125)
    second = Timestep(0.125)
    assert first == second
    assert first.seconds == 0.125
    assert first.milliseconds == pytest.approx(125.0)
    assert (first == Timestep(0.25)) is False