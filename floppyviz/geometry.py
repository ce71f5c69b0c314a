"""Layout of the floppy drawing: envelope, tracks, sectors and head.

All lengths are in pixels. The envelope square is 5.25 inches wide, so one
inch is ``rect.width / 5.25``. Angles are in degrees, measured clockwise
from the three o'clock direction because screen y grows downwards.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from floppyviz.disk import ANIMATION_STEPS, FloppyDisk

ENVELOPE_INCHES = 5.25
ENVELOPE_CORNER_RADIUS = 16.0
INDEX_HOLE_RADIAL_PCT = 0.13
ENVELOPE_INDEX_HOLE_RADIUS_PCT = 0.018
DISK_INDEX_HOLE_RADIUS_PCT = 0.0095
INDEX_HOLE_ANGLE_DEG = 30.0
HEAD_ANGLE_DEG = 90.0
DEFAULT_MARGIN = 20

Point = tuple[float, float]


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    x: float
    y: float
    width: float
    height: float

    @property
    def left(self) -> float:
        return self.x

    @property
    def top(self) -> float:
        return self.y

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def center(self) -> Point:
        """Return the centre point of the rectangle."""
        return (self.x + self.width / 2.0, self.y + self.height / 2.0)


@dataclass(frozen=True)
class EnvelopeGeometry:
    """Holes, notches and windows of the disk jacket."""

    center: Point
    scale: float
    corner_radius: float
    hub_radius: float
    index_hole_center: Point
    index_hole_radius: float
    index_hole_distance: float
    rw_window: Rect
    rw_corner_radius: float
    write_protect: Rect
    guides: tuple[tuple[Point, Point, Point], ...]
    disk_radius: float
    disk_index_hole_radius: float


@dataclass(frozen=True)
class TrackLayout:
    """Radii of the concentric tracks and of the current track's ring.

    Track 0 is the outermost ring. ``has_current`` tells whether the current
    track lies on the disk at all.
    """

    center: Point
    scale: float
    num_tracks: int
    min_radius: float
    max_radius: float
    spacing: float
    radii: tuple[float, ...]
    current_track: int
    has_current: bool
    track_inner_radius: float
    track_outer_radius: float
    track_radius: float


@dataclass(frozen=True)
class HeadGeometry:
    """Position and shapes of the read/write head in its window."""

    window: Rect
    mapped_track: int
    track_radius: float
    x: float
    y: float
    mount: Rect
    head: Rect
    head_corner_radius: float
    pad: Rect
    pad_corner_radius: float
    write: bool


def _polar(center: Point, radius: float, angle_deg: float) -> Point:
    angle = math.radians(angle_deg)
    return (center[0] + radius * math.cos(angle), center[1] + radius * math.sin(angle))


def _centered_rect(cx: float, cy: float, width: float, height: float) -> Rect:
    return Rect(cx - width / 2.0, cy - height / 2.0, width, height)


def _clamp(low, value, high):
    return max(low, min(value, high))


def square_rect(width: int, height: int, margin: int = DEFAULT_MARGIN) -> Rect:
    """Return the largest square centred in the area, inset by ``margin``."""
    side = min(width, height) - 2 * margin
    x0 = int((width - side) / 2)
    y0 = int((height - side) / 2)
    return Rect(x0, y0, side, side)


def envelope_geometry(rect: Rect, track_spacing: float) -> EnvelopeGeometry:
    """Lay out the jacket inside ``rect``.

    The read/write window is shifted down by two and a half track spacings.
    """
    center = rect.center()
    scale = rect.width / ENVELOPE_INCHES
    hub_radius = scale * 0.5

    index_distance = rect.width * INDEX_HOLE_RADIAL_PCT
    index_center = _polar(center, index_distance, INDEX_HOLE_ANGLE_DEG)

    rw_width = scale * 0.45
    rw_height = scale * 1.7
    rw_x = center[0] - rw_width / 2.0
    rw_y = rect.bottom - scale * 0.20 - rw_height + 2.5 * track_spacing

    wp_size = scale * 0.25
    write_protect = Rect(rect.right - wp_size, rect.top + scale * 0.5, wp_size, wp_size)

    guide_width = scale * 0.3
    guide_height = scale * 0.08
    guide_spacing = scale * 0.85
    guides = tuple(
        (
            (gx - guide_width / 2.0, rect.bottom),
            (gx + guide_width / 2.0, rect.bottom),
            (gx, rect.bottom - guide_height),
        )
        for gx in (center[0] - guide_spacing / 2.0, center[0] + guide_spacing / 2.0)
    )

    return EnvelopeGeometry(
        center=center,
        scale=scale,
        corner_radius=ENVELOPE_CORNER_RADIUS,
        hub_radius=hub_radius,
        index_hole_center=index_center,
        index_hole_radius=rect.width * ENVELOPE_INDEX_HOLE_RADIUS_PCT,
        index_hole_distance=index_distance,
        rw_window=Rect(rw_x, rw_y, rw_width, rw_height),
        rw_corner_radius=rw_width / 2.0,
        write_protect=write_protect,
        guides=guides,
        disk_radius=scale * 2.5,
        disk_index_hole_radius=rect.width * DISK_INDEX_HOLE_RADIUS_PCT,
    )


def track_layout(rect: Rect, num_tracks: int, current_track: int) -> TrackLayout:
    """Compute the track rings and the ring of ``current_track``."""
    if num_tracks <= 0:
        raise ValueError(f"number of tracks must be positive, got {num_tracks}")
    center = rect.center()
    scale = rect.width / ENVELOPE_INCHES
    min_radius = scale * 0.8
    spacing = 1.1 * ((scale * 2.3 - min_radius) / num_tracks)
    radii = tuple(min_radius + i * spacing for i in range(num_tracks + 1))

    index = num_tracks - current_track
    return TrackLayout(
        center=center,
        scale=scale,
        num_tracks=num_tracks,
        min_radius=min_radius,
        max_radius=radii[-1],
        spacing=spacing,
        radii=radii,
        current_track=current_track,
        has_current=0 <= current_track < num_tracks,
        track_inner_radius=min_radius + (index - 0.5) * spacing,
        track_outer_radius=min_radius + (index + 0.5) * spacing,
        track_radius=min_radius + index * spacing,
    )


def sector_boundaries(
    rect: Rect, layout: TrackLayout, sector_count: int, rotation_angle: float
) -> list[tuple[Point, Point]]:
    """Return the radial sector lines, inner point first; the first is at the index hole."""
    if sector_count <= 0:
        raise ValueError(f"sector count must be positive, got {sector_count}")
    center = rect.center()
    span = 360.0 / sector_count
    lines = []
    for i in range(sector_count):
        angle = INDEX_HOLE_ANGLE_DEG + i * span + rotation_angle
        lines.append((_polar(center, layout.min_radius, angle),
                      _polar(center, layout.max_radius, angle)))
    return lines


def head_sector(rotation_angle: float, sector_count: int) -> int:
    """Return the sector that lies under the head for the given disk rotation."""
    if sector_count <= 0:
        raise ValueError(f"sector count must be positive, got {sector_count}")
    span = 360.0 / sector_count
    rotation = math.fmod(rotation_angle, 360.0)
    if rotation < 0:
        rotation += 360.0
    disk_angle = HEAD_ANGLE_DEG - rotation
    if disk_angle < 0:
        disk_angle += 360.0
    sector = int(math.fmod(disk_angle - INDEX_HOLE_ANGLE_DEG + 360.0, 360.0) / span)
    if sector < 0:
        sector += sector_count
    if sector >= sector_count:
        sector -= sector_count
    return sector


def head_geometry(rect: Rect, layout: TrackLayout, disk: FloppyDisk) -> HeadGeometry:
    """Place the head over the track it is on, inside the read/write window."""
    center = rect.center()
    scale = rect.width / ENVELOPE_INCHES
    rw_width = scale * 0.45
    rw_height = scale * 1.7
    window = Rect(center[0] - rw_width / 2.0,
                  rect.bottom - scale * 0.15 - rw_height, rw_width, rw_height)

    num_tracks = disk.num_tracks()
    if disk.head_animating:
        fraction = _clamp(0.0, disk.animation_step / (ANIMATION_STEPS - 1), 1.0)
        mapped = int(fraction * (num_tracks - 1))
    else:
        mapped = _clamp(0, disk.track, num_tracks - 1)

    if disk.highlight_track and mapped == disk.track:
        radius = (layout.track_inner_radius + layout.track_outer_radius) / 2.0
    elif mapped == 0:
        radius = layout.max_radius
    else:
        radius = layout.min_radius + (num_tracks - mapped) * layout.spacing
    radius = _clamp(layout.min_radius, radius, layout.max_radius)

    head_x = window.center()[0]
    head_y = center[1] + radius * math.sin(math.radians(HEAD_ANGLE_DEG))

    head_width = rw_width * 0.7
    head_height = rw_width * 0.28
    head_radius = head_height * 0.4
    pad = Rect(head_x - head_width * 0.12, head_y - head_height * 0.18,
               head_width * 0.24, head_height * 0.36)

    return HeadGeometry(
        window=window,
        mapped_track=mapped,
        track_radius=radius,
        x=head_x,
        y=head_y,
        mount=_centered_rect(head_x, head_y, rw_width * 0.95, rw_width * 0.38),
        head=_centered_rect(head_x, head_y, head_width, head_height),
        head_corner_radius=head_radius,
        pad=pad,
        pad_corner_radius=head_radius * 0.5,
        write=disk.write_operation,
    )