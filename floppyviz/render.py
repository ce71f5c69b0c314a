"""Display lists for the floppy disk view and the controller status panel.

Rendering produces plain shape records in painting order. A toolkit-specific
painter only has to walk the list. Colours are RGBA tuples, and ``None`` means
that no pen or brush is used. A shape's ``cutouts`` are subtracted from its
filled area. ``clip`` names the mask the shape is painted through:

* ``windows``: the hub hole, the index hole and the read/write window.
* ``windows_and_notch``: those openings plus the write-protect notch,
  limited to the disk circle.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional, Union

from floppyviz.disk import FloppyDisk
from floppyviz.fdc import TITLE, FdcState
from floppyviz.geometry import (
    INDEX_HOLE_ANGLE_DEG,
    Point,
    Rect,
    TrackLayout,
    envelope_geometry,
    head_geometry,
    head_sector,
    sector_boundaries,
    square_rect,
    track_layout,
)

Color = tuple[int, int, int, int]

BLACK: Color = (0, 0, 0, 255)
WHITE: Color = (255, 255, 255, 255)
RED: Color = (255, 0, 0, 255)
GRAY: Color = (160, 160, 164, 255)

CLIP_WINDOWS = "windows"
CLIP_WINDOWS_AND_NOTCH = "windows_and_notch"

FONT_FAMILY = "Arial"


@dataclass(frozen=True)
class Ellipse:
    """An ellipse, or a pie slice of one when ``start_angle`` is set.

    Angles are in degrees, clockwise from three o'clock on screen.
    """

    center: Point
    rx: float
    ry: float
    pen: Optional[Color] = None
    pen_width: float = 1.0
    dashed: bool = False
    brush: Optional[Color] = None
    start_angle: Optional[float] = None
    span: float = 360.0
    cutouts: tuple = ()
    clip: str = ""
    role: str = ""


@dataclass(frozen=True)
class Polygon:
    """A closed polygon; rectangles may have rounded corners."""

    points: tuple[Point, ...]
    pen: Optional[Color] = None
    pen_width: float = 1.0
    dashed: bool = False
    brush: Optional[Color] = None
    gradient: tuple[tuple[float, Color], ...] = ()
    corner_radius: float = 0.0
    cutouts: tuple = ()
    clip: str = ""
    role: str = ""


@dataclass(frozen=True)
class Line:
    """A straight line segment."""

    start: Point
    end: Point
    pen: Color = BLACK
    pen_width: float = 1.0
    clip: str = ""
    role: str = ""


@dataclass(frozen=True)
class Text:
    """A line of text whose baseline starts at (x, y)."""

    x: float
    y: float
    text: str
    size: int = 10
    bold: bool = False
    color: Color = BLACK
    family: str = FONT_FAMILY
    role: str = ""


Shape = Union[Ellipse, Polygon, Line, Text]


def _rect_points(rect: Rect) -> tuple[Point, ...]:
    return (
        (rect.left, rect.top),
        (rect.right, rect.top),
        (rect.right, rect.bottom),
        (rect.left, rect.bottom),
    )


def _rect(rect: Rect, **kwargs) -> Polygon:
    return Polygon(points=_rect_points(rect), **kwargs)


def _circle(center: Point, radius: float, **kwargs) -> Ellipse:
    return Ellipse(center=center, rx=radius, ry=radius, **kwargs)


def _adjusted(rect: Rect, margin: float) -> Rect:
    return Rect(rect.x - margin, rect.y - margin,
                rect.width + 2 * margin, rect.height + 2 * margin)


def _envelope_shapes(disk: FloppyDisk, rect: Rect, layout: TrackLayout) -> list[Shape]:
    env = envelope_geometry(rect, layout.spacing)
    center = env.center
    rw = env.rw_window

    hub = _circle(center, env.hub_radius)
    index_hole = _circle(env.index_hole_center, env.index_hole_radius)
    rw_hole = _rect(rw, corner_radius=env.rw_corner_radius)
    notch = _rect(env.write_protect)
    guides = tuple(Polygon(points=g) for g in env.guides)

    alpha = int(disk.envelope_transparency * 255)
    shapes: list[Shape] = [
        _rect(
            rect,
            pen=BLACK,
            pen_width=2,
            brush=(60, 60, 80, alpha),
            corner_radius=env.corner_radius,
            cutouts=(hub, index_hole, rw_hole, notch, *guides),
            role="envelope",
        ),
        _rect(
            rect,
            pen=BLACK,
            dashed=True,
            corner_radius=env.corner_radius,
            cutouts=(_rect(_adjusted(env.write_protect, 1.0)),),
            role="envelope_outline",
        ),
        _circle(center, env.hub_radius, pen=BLACK, dashed=True, role="hub_outline"),
        _circle(env.index_hole_center, env.index_hole_radius, pen=BLACK,
                brush=(160, 160, 160, 255), role="index_hole"),
        _rect(rw, pen=BLACK, corner_radius=env.rw_corner_radius, role="rw_window"),
    ]

    from floppyviz.geometry import _polar  # shared polar helper

    disk_hole_center = _polar(center, env.index_hole_distance,
                              INDEX_HOLE_ANGLE_DEG + disk.rotation_angle)
    shapes.append(
        _circle(
            center,
            env.disk_radius,
            pen=BLACK,
            pen_width=2,
            brush=BLACK,
            cutouts=(_circle(disk_hole_center, env.disk_index_hole_radius),),
            clip=CLIP_WINDOWS,
            role="disk",
        )
    )
    shapes.extend(_sector_shapes(disk, rect, layout, CLIP_WINDOWS_AND_NOTCH))
    return shapes


def _track_shapes(disk: FloppyDisk, layout: TrackLayout) -> list[Shape]:
    center = layout.center
    shapes: list[Shape] = [
        _circle(center, radius, pen=(100, 100, 255, 120),
                pen_width=layout.scale * 0.01, role="track")
        for radius in layout.radii
    ]
    if disk.highlight_track and layout.has_current:
        shapes.append(
            _circle(
                center,
                layout.track_outer_radius,
                brush=(0, 200, 0, 80),
                cutouts=(_circle(center, layout.track_inner_radius),),
                role="track_fill",
            )
        )
        shapes.append(
            _circle(center, layout.track_radius, pen=(0, 200, 0, 180),
                    pen_width=layout.scale * 0.02, role="track_outline")
        )
    return shapes


def _sector_shapes(disk: FloppyDisk, rect: Rect, layout: TrackLayout,
                   clip: str = "") -> list[Shape]:
    count = disk.sector_count
    shapes: list[Shape] = []
    for i, (inner, outer) in enumerate(
        sector_boundaries(rect, layout, count, disk.rotation_angle)
    ):
        if i == 0:
            pen, width = WHITE, 2.0
        else:
            pen, width = (255, 0, 0, 100), 1.0
        shapes.append(Line(inner, outer, pen=pen, pen_width=width, clip=clip,
                           role="sector_boundary"))

    if disk.highlight_sector and 0 <= disk.current_sector < count:
        span = 360.0 / count
        sector = head_sector(disk.rotation_angle, count)
        start = INDEX_HOLE_ANGLE_DEG + sector * span + disk.rotation_angle
        center = layout.center
        shapes.append(
            _circle(
                center,
                layout.max_radius,
                brush=(255, 0, 0, 60),
                start_angle=start,
                span=span,
                cutouts=(_circle(center, layout.min_radius),),
                clip=clip,
                role="sector_highlight",
            )
        )
        shapes.append(
            _circle(
                center,
                layout.track_outer_radius,
                brush=(255, 0, 0, 180),
                start_angle=start,
                span=span,
                cutouts=(_circle(center, layout.track_inner_radius),),
                clip=clip,
                role="sector_track",
            )
        )
    return shapes


def _head_shapes(disk: FloppyDisk, rect: Rect, layout: TrackLayout) -> list[Shape]:
    head = head_geometry(rect, layout, disk)
    gradient = (
        (0.0, (220, 220, 220, 255)),
        (0.5, (180, 180, 180, 255)),
        (1.0, (120, 120, 120, 255)),
    )
    shapes: list[Shape] = [
        _rect(head.mount, pen=BLACK, brush=(120, 180, 255, 90), role="head_mount"),
        _rect(head.head, pen=BLACK, gradient=gradient,
              corner_radius=head.head_corner_radius, role="head"),
        _rect(head.pad, pen=BLACK, brush=(60, 60, 60, 255),
              corner_radius=head.pad_corner_radius, role="head_pad"),
    ]
    if head.write:
        shapes.append(_rect(head.head, pen=BLACK, brush=(255, 0, 0, 120),
                            corner_radius=head.head_corner_radius, role="head_write"))
    return shapes


def render_disk(disk: FloppyDisk, width: int, height: int) -> list[Shape]:
    """Return the shapes of the disk view for an area of the given size.

    The back view mirrors everything except the status line.
    """
    rect = square_rect(width, height)
    layout = track_layout(rect, disk.num_tracks(), disk.track)
    body: list[Shape] = [
        *_envelope_shapes(disk, rect, layout),
        *_track_shapes(disk, layout),
        *_sector_shapes(disk, rect, layout),
        *_head_shapes(disk, rect, layout),
    ]
    if not disk.front_view:
        body = flip_horizontal(body, width)
    body.append(Text(10, height - 10, disk.status_text(), role="status"))
    return body


def render_fdc(state: FdcState, width: int, height: int) -> list[Shape]:
    """Return the shapes of the controller status panel."""
    shapes: list[Shape] = [
        _rect(Rect(0, 0, width, height), brush=WHITE, role="background"),
        Text(10, 20, TITLE, size=12, bold=True, role="title"),
    ]
    top = 40
    for i, row in enumerate(state.register_rows()):
        y = top + 30 * i
        shapes.append(Text(10, y, f"{row.name}:", role="register"))
        shapes.append(Text(90, y, row.binary, role="register"))
        shapes.append(Text(210, y, row.hex, role="register"))
    for i, indicator in enumerate(state.indicators()):
        y = top + 30 * i
        color = RED if indicator.active else GRAY
        shapes.append(Text(200, y, f"{indicator.name}:", role="indicator_label"))
        shapes.append(Ellipse(center=(245, y), rx=5, ry=5, pen=color, brush=color,
                              role="indicator"))
    return shapes


def _mirror(point: Point, width: float) -> Point:
    return (width - point[0], point[1])


def _flip(shape: Shape, width: float) -> Shape:
    if isinstance(shape, Ellipse):
        start = shape.start_angle
        if start is not None:
            start = 180.0 - start - shape.span
        return replace(
            shape,
            center=_mirror(shape.center, width),
            start_angle=start,
            cutouts=tuple(_flip(c, width) for c in shape.cutouts),
        )
    if isinstance(shape, Polygon):
        return replace(
            shape,
            points=tuple(_mirror(p, width) for p in shape.points),
            cutouts=tuple(_flip(c, width) for c in shape.cutouts),
        )
    if isinstance(shape, Line):
        return replace(shape, start=_mirror(shape.start, width),
                       end=_mirror(shape.end, width))
    if isinstance(shape, Text):
        return replace(shape, x=width - shape.x)
    raise TypeError(f"cannot flip {type(shape).__name__}")


def flip_horizontal(shapes, width: float) -> list[Shape]:
    """Mirror the shapes about the vertical centre line of an area ``width`` wide."""
    return [_flip(shape, width) for shape in shapes]