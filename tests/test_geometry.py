import math

import pytest

from floppyviz.disk import FloppyDisk
from floppyviz.geometry import (
    Rect,
    envelope_geometry,
    head_geometry,
    head_sector,
    sector_boundaries,
    square_rect,
    track_layout,
)


@pytest.fixture
def rect():
    return square_rect(400, 400, 20)


def test_rect_edges_and_center():
    r = Rect(2.0, 3.0, 10.0, 20.0)
    assert r.right == r.x + r.width
    assert r.bottom == r.y + r.height
    assert r.center() == (7.0, 13.0)


def test_square_rect_default_widget_size():
    assert square_rect(400, 400, 20) == Rect(20, 20, 360, 360)


@pytest.mark.parametrize("width,height", [(600, 400), (400, 600), (500, 500)])
def test_square_rect_is_centered_square(width, height):
    r = square_rect(width, height, 20)
    assert r.width == r.height == min(width, height) - 40
    assert r.center() == pytest.approx((width / 2, height / 2))


def test_envelope_index_hole_position(rect):
    env = envelope_geometry(rect, 2.0)
    cx, cy = env.center
    ix, iy = env.index_hole_center
    assert math.dist(env.center, env.index_hole_center) == pytest.approx(rect.width * 0.13)
    assert math.degrees(math.atan2(iy - cy, ix - cx)) == pytest.approx(30.0)
    assert env.disk_index_hole_radius < env.index_hole_radius


def test_envelope_window_shift_follows_track_spacing(rect):
    a = envelope_geometry(rect, 0.0)
    b = envelope_geometry(rect, 4.0)
    assert b.rw_window.y - a.rw_window.y == pytest.approx(2.5 * 4.0)
    assert a.rw_window.center()[0] == pytest.approx(a.center[0])
    assert a.rw_corner_radius == pytest.approx(a.rw_window.width / 2)


def test_envelope_notch_and_guides(rect):
    env = envelope_geometry(rect, 1.0)
    assert env.write_protect.right == pytest.approx(rect.right)
    assert env.write_protect.width == pytest.approx(env.write_protect.height)
    left, right = env.guides
    cx = env.center[0]
    assert cx - left[2][0] == pytest.approx(right[2][0] - cx)
    for tri in env.guides:
        assert tri[0][1] == tri[1][1] == rect.bottom
        assert tri[2][1] < rect.bottom
    assert env.disk_radius * 2 < rect.width
    assert env.hub_radius < env.disk_radius


def test_track_layout_rings(rect):
    layout = track_layout(rect, 80, 0)
    assert len(layout.radii) == 81
    diffs = [b - a for a, b in zip(layout.radii, layout.radii[1:])]
    assert all(d == pytest.approx(layout.spacing) for d in diffs)
    assert layout.radii[0] == layout.min_radius
    assert layout.max_radius == layout.radii[-1]


def test_track_zero_is_outermost(rect):
    layout = track_layout(rect, 40, 0)
    assert layout.has_current
    assert layout.track_radius == pytest.approx(layout.max_radius)
    assert layout.track_outer_radius - layout.track_inner_radius == pytest.approx(layout.spacing)
    inner = track_layout(rect, 40, 39)
    assert inner.track_radius == pytest.approx(inner.min_radius + inner.spacing)


@pytest.mark.parametrize("track", [-1, 80, 200])
def test_track_out_of_range(rect, track):
    assert track_layout(rect, 80, track).has_current is False


def test_track_layout_rejects_zero_tracks(rect):
    with pytest.raises(ValueError):
        track_layout(rect, 0, 0)


def test_sector_boundaries(rect):
    layout = track_layout(rect, 80, 0)
    lines = sector_boundaries(rect, layout, 16, 0.0)
    assert len(lines) == 16
    center = rect.center()
    for inner, outer in lines:
        assert math.dist(center, inner) == pytest.approx(layout.min_radius)
        assert math.dist(center, outer) == pytest.approx(layout.max_radius)
    ix, iy = lines[0][1]
    angle = math.degrees(math.atan2(iy - center[1], ix - center[0]))
    assert angle == pytest.approx(30.0)


def test_sector_boundaries_rotate(rect):
    layout = track_layout(rect, 80, 0)
    base = sector_boundaries(rect, layout, 8, 0.0)
    turned = sector_boundaries(rect, layout, 8, 45.0)
    # 45 degrees is exactly one sector of eight: line i moves to line i+1
    for i in range(7):
        assert turned[i][1] == pytest.approx(base[i + 1][1])


def test_sector_boundaries_rejects_zero(rect):
    with pytest.raises(ValueError):
        sector_boundaries(rect, track_layout(rect, 80, 0), 0, 0.0)


def test_head_sector_at_rest():
    assert head_sector(0.0, 16) == 2
    assert head_sector(0.0, 1) == 0


@pytest.mark.parametrize("angle", [0.0, 13.5, 90.0, 200.0, 359.0, 725.0, -30.0])
def test_head_sector_periodic_and_in_range(angle):
    sector = head_sector(angle, 16)
    assert 0 <= sector < 16
    assert head_sector(angle + 360.0, 16) == sector


def test_head_sector_rejects_zero():
    with pytest.raises(ValueError):
        head_sector(0.0, 0)


def test_head_on_track_zero(rect):
    disk = FloppyDisk()
    layout = track_layout(rect, disk.num_tracks(), disk.track)
    head = head_geometry(rect, layout, disk)
    assert head.mapped_track == 0
    assert head.track_radius == pytest.approx(layout.max_radius)
    assert head.y == pytest.approx(rect.center()[1] + layout.max_radius)
    assert head.x == pytest.approx(rect.center()[0])
    assert head.head.center() == pytest.approx((head.x, head.y))
    assert head.mount.center() == pytest.approx((head.x, head.y))
    assert head.write is False


def test_head_track_clamped(rect):
    disk = FloppyDisk()
    disk.track = 200
    layout = track_layout(rect, disk.num_tracks(), disk.track)
    head = head_geometry(rect, layout, disk)
    assert head.mapped_track == disk.num_tracks() - 1
    assert head.track_radius == pytest.approx(layout.min_radius + layout.spacing)


def test_head_follows_animation_step(rect):
    disk = FloppyDisk()
    disk.write_operation = True
    disk.start_head_animation()
    for _ in range(10):
        disk.animate_head()
    layout = track_layout(rect, disk.num_tracks(), disk.track)
    head = head_geometry(rect, layout, disk)
    assert head.mapped_track == disk.track
    assert layout.min_radius <= head.track_radius <= layout.max_radius
    assert head.write is True
    assert head.pad_corner_radius == pytest.approx(head.head_corner_radius / 2)


def test_head_moves_inward_with_track(rect):
    disk = FloppyDisk()
    ys = []
    for track in (5, 20, 60):
        disk.track = track
        layout = track_layout(rect, disk.num_tracks(), track)
        ys.append(head_geometry(rect, layout, disk).y)
    assert ys == sorted(ys, reverse=True)