import math

import pytest

from elmengine.telemetry import ApplicationTelemetry
from elmengine.timestep import Timestep


def test_starts_without_measurement():
    telemetry = ApplicationTelemetry()
    assert telemetry.smooth_frame_time == 0.0
    assert telemetry.fps == math.inf


def test_no_update_before_thirty_frames():
    telemetry = ApplicationTelemetry()
    for _ in range(29):
        telemetry.on_update(Timestep(0.02))
    assert telemetry.smooth_frame_time == 0.0


def test_average_after_thirty_frames():
    telemetry = ApplicationTelemetry()
    for _ in range(30):
        telemetry.on_update(Timestep(0.02))
    assert telemetry.smooth_frame_time == pytest.approx(0.02)
    assert telemetry.fps == pytest.approx(1.0 / telemetry.smooth_frame_time)


def test_next_block_starts_fresh():
    telemetry = ApplicationTelemetry()
    for _ in range(30):
        telemetry.on_update(Timestep(0.02))
    for _ in range(30):
        telemetry.on_update(Timestep(0.01))
    assert telemetry.smooth_frame_time == pytest.approx(0.01)


def test_instances_are_independent():
    a = ApplicationTelemetry()
    b = ApplicationTelemetry()
    for _ in range(15):
        a.on_update(Timestep(0.05))
        b.on_update(Timestep(0.05))
    assert a.smooth_frame_time == 0.0
    assert b.smooth_frame_time == 0.0