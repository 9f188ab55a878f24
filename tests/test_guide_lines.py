import pytest

from joystick_panel.config import ConfigurationError
from joystick_panel.geometry import GuideSegment, Point
from joystick_panel.guide_lines import GuideLineGeometry


@pytest.mark.parametrize("angles", [[], [45]])
def test_fewer_than_two_angles_are_rejected(angles):
    guides = GuideLineGeometry([0, 90])

    with pytest.raises(ConfigurationError):
        guides.set_angles(angles)

    assert guides.angles == (0, 90)


def test_rejection_is_logged(caplog):
    guides = GuideLineGeometry()

    with pytest.raises(ConfigurationError):
        guides.set_angles([10])

    assert "Rejected guide angles" in caplog.text


def test_no_angles_means_no_segments():
    assert GuideLineGeometry().compute_segments(Point(50, 50), 40.0) == ()


def test_segments_run_from_center_to_rim():
    guides = GuideLineGeometry([0, 90, 180, 270])
    center = Point(50.0, 50.0)

    segments = guides.compute_segments(center, 40.0)

    assert [s.start for s in segments] == [center] * 4
    ends = [(s.end.x, s.end.y) for s in segments]
    assert ends[0] == pytest.approx((90.0, 50.0))
    assert ends[1] == pytest.approx((50.0, 10.0))   # north is up on screen
    assert ends[2] == pytest.approx((10.0, 50.0))
    assert ends[3] == pytest.approx((50.0, 90.0))


def test_segment_order_follows_angle_order():
    guides = GuideLineGeometry()
    guides.set_angles([300, 0, 120])

    segments = guides.compute_segments(Point(0.0, 0.0), 10.0)

    assert len(segments) == 3
    assert segments[1] == GuideSegment(Point(0.0, 0.0), Point(10.0, 0.0))
    assert segments[0].end.y == pytest.approx(8.660254, abs=1e-6)
    assert segments[2].end.x == pytest.approx(-5.0)


def test_clear_removes_angles():
    guides = GuideLineGeometry([0, 180])
    guides.clear()

    assert guides.angles == ()
