"""Animation control for the floppy view and a window that shows it."""

from __future__ import annotations

import argparse
import math
import sys
from typing import Optional, Sequence

from floppyviz.disk import FloppyDisk
from floppyviz.fdc import FdcState
from floppyviz.render import (
    BLACK,
    Ellipse,
    Line,
    Polygon,
    Text,
    render_disk,
    render_fdc,
)

FRAME_INTERVAL_MS = 16
DEGREES_PER_FRAME = 30.0
DEFAULT_SPEED_INDEX = 5
DEFAULT_SPEED = 1.0

SPEEDS = {
    0: 0.01,
    1: 0.05,
    2: 0.1,
    3: 0.25,
    4: 0.5,
    5: 1.0,
    6: 2.0,
}
SPEED_LABELS = ("0.01x", "0.05x", "0.1x", "0.25x", "0.5x", "1x", "2x")

DISK_VIEW_SIZE = (400, 400)
FDC_VIEW_SIZE = (300, 200)


class Simulator:
    """Drives the disk rotation, the index pulse and the head animation.

    Each call to :meth:`update_animation` is one frame of
    ``FRAME_INTERVAL_MS`` milliseconds. The head steps and side changes run
    on their own intervals, measured in the same frame time.
    """

    def __init__(self, disk: Optional[FloppyDisk] = None,
                 fdc: Optional[FdcState] = None) -> None:
        self.disk = disk if disk is not None else FloppyDisk()
        self.fdc = fdc if fdc is not None else FdcState()
        self.playing = False
        self.speed = DEFAULT_SPEED
        self.angle = 0.0
        self.index_pulse_counter = 0
        self.view_label = "Front"
        self._head_elapsed = 0
        self._side_elapsed = 0
        self.set_speed_index(DEFAULT_SPEED_INDEX)

    def play_pause(self) -> bool:
        """Toggle between playing and paused; return whether it now plays."""
        self.playing = not self.playing
        if self.playing:
            self._head_elapsed = 0
            self._side_elapsed = 0
            self.disk.start_head_animation()
        else:
            self.disk.stop_head_animation()
        return self.playing

    def reset(self) -> None:
        """Stop everything and put the drive back into its initial state."""
        self.playing = False
        self.disk.stop_head_animation()
        self.disk.track = 0
        self.disk.side = 0
        self.disk.head_position = 0
        self.disk.write_operation = False
        self.disk.double_sided = True
        self.disk.double_density = True

    def set_speed_index(self, index: int) -> float:
        """Select a speed from the speed list; unknown indices mean 1x."""
        self.speed = SPEEDS.get(index, DEFAULT_SPEED)
        self.disk.set_animation_speed(self.speed)
        return self.speed

    def toggle_view(self, front: bool) -> str:
        """Show the front or the back of the disk; return the view's label."""
        self.disk.front_view = bool(front)
        self.view_label = "Front" if front else "Back"
        return self.view_label

    def update_animation(self) -> None:
        """Advance the simulation by one frame while playing."""
        if not self.playing:
            return

        increment = DEGREES_PER_FRAME * self.speed
        self.angle += increment
        if self.angle >= 360:
            self.angle = math.fmod(self.angle, 360.0)

        sector_count = self.disk.sector_count
        sector = int(math.fmod(self.angle, 360.0) / (360.0 / sector_count))
        self.disk.set_current_sector(sector)

        self.index_pulse_counter += 1
        if self.index_pulse_counter >= 360 / increment:
            self.index_pulse_counter = 0
            self.disk.index_pulse = True
        elif self.index_pulse_counter == 2:
            self.disk.index_pulse = False

        self.disk.rotation_angle = self.angle
        self._advance_head(FRAME_INTERVAL_MS)

    def _advance_head(self, elapsed_ms: int) -> None:
        if not self.disk.head_animating:
            return
        self._head_elapsed += elapsed_ms
        self._side_elapsed += elapsed_ms
        track_interval = max(self.disk.track_interval(), 1)
        side_interval = max(self.disk.side_interval(), 1)
        while self._side_elapsed >= side_interval:
            self._side_elapsed -= side_interval
            self.disk.animate_side()
        while self._head_elapsed >= track_interval:
            self._head_elapsed -= track_interval
            self.disk.animate_head()


def _tk_color(color) -> str:
    if color is None or color[3] == 0:
        return ""
    return "#{:02x}{:02x}{:02x}".format(*color[:3])


def _bbox(center, rx, ry):
    return (center[0] - rx, center[1] - ry, center[0] + rx, center[1] + ry)


def _ring_inner(shape: Ellipse) -> Optional[float]:
    if len(shape.cutouts) == 1:
        cut = shape.cutouts[0]
        if isinstance(cut, Ellipse) and cut.center == shape.center:
            return cut.rx
    return None


def _pen_options(pen, width, dashed) -> dict:
    options = {"outline": _tk_color(pen), "width": width if pen is not None else 0}
    if dashed:
        options["dash"] = (4, 2)
    return options


def _paint_cutout(canvas, cut, fill: str) -> None:
    if isinstance(cut, Ellipse):
        canvas.create_oval(*_bbox(cut.center, cut.rx, cut.ry), fill=fill, outline="")
    elif isinstance(cut, Polygon):
        flat = [c for p in cut.points for c in p]
        canvas.create_polygon(*flat, fill=fill, outline="")


def _paint_ellipse(canvas, shape: Ellipse, background: str) -> None:
    brush = _tk_color(shape.brush)
    inner = _ring_inner(shape)
    if inner is not None and shape.brush is not None:
        mid = (shape.rx + inner) / 2.0
        band = max(shape.rx - inner, 1.0)
        box = _bbox(shape.center, mid, mid)
        if shape.start_angle is None:
            canvas.create_oval(*box, outline=brush, width=band)
        else:
            canvas.create_arc(*box, start=-(shape.start_angle + shape.span),
                              extent=shape.span, style="arc", outline=brush, width=band)
        return
    box = _bbox(shape.center, shape.rx, shape.ry)
    options = _pen_options(shape.pen, shape.pen_width, shape.dashed)
    if shape.start_angle is None:
        canvas.create_oval(*box, fill=brush, **options)
    else:
        canvas.create_arc(*box, start=-(shape.start_angle + shape.span),
                          extent=shape.span, style="pieslice", fill=brush, **options)
    for cut in shape.cutouts:
        _paint_cutout(canvas, cut, background)


def _paint_polygon(canvas, shape: Polygon, background: str) -> None:
    if shape.brush is not None:
        fill = _tk_color(shape.brush)
    elif shape.gradient:
        fill = _tk_color(shape.gradient[len(shape.gradient) // 2][1])
    else:
        fill = ""
    flat = [c for p in shape.points for c in p]
    canvas.create_polygon(*flat, fill=fill,
                          **_pen_options(shape.pen, shape.pen_width, shape.dashed))
    for cut in shape.cutouts:
        # Openings in the jacket show the black disk behind them.
        shows_disk = shape.role == "envelope" and (
            isinstance(cut, Ellipse) or cut.corner_radius > 0
        )
        if shape.role == "envelope_outline":
            continue
        _paint_cutout(canvas, cut, _tk_color(BLACK) if shows_disk else background)


def _paint(canvas, shapes, background: str) -> None:
    canvas.delete("all")
    for shape in shapes:
        if isinstance(shape, Text):
            weight = "bold" if shape.bold else "normal"
            canvas.create_text(shape.x, shape.y, text=shape.text, anchor="sw",
                               fill=_tk_color(shape.color),
                               font=(shape.family, shape.size, weight))
        elif shape.clip:
            # A plain canvas cannot clip; the disk shows through painted openings.
            continue
        elif isinstance(shape, Line):
            canvas.create_line(*shape.start, *shape.end, fill=_tk_color(shape.pen),
                               width=shape.pen_width)
        elif isinstance(shape, Ellipse):
            _paint_ellipse(canvas, shape, background)
        elif isinstance(shape, Polygon):
            _paint_polygon(canvas, shape, background)


class FloppyApp:
    """A window with the disk view, the controller panel and the controls."""

    def __init__(self, simulator: Optional[Simulator] = None) -> None:
        self.simulator = simulator if simulator is not None else Simulator()

    def run(self) -> None:
        """Open the window and animate until it is closed."""
        import tkinter as tk
        from tkinter import ttk

        sim = self.simulator
        root = tk.Tk()
        root.title("Floppy")
        background = "#f0f0f0"

        toolbar = ttk.Frame(root)
        toolbar.pack(side=tk.TOP, fill=tk.X)
        play_text = tk.StringVar(value="Play")

        def on_play() -> None:
            play_text.set("Pause" if sim.play_pause() else "Play")

        def on_reset() -> None:
            sim.reset()
            play_text.set("Play")

        ttk.Button(toolbar, textvariable=play_text, command=on_play).pack(side=tk.LEFT)
        ttk.Button(toolbar, text="Reset", command=on_reset).pack(side=tk.LEFT)

        speed_box = ttk.Combobox(toolbar, values=SPEED_LABELS, state="readonly", width=6)
        speed_box.current(DEFAULT_SPEED_INDEX)
        speed_box.bind("<<ComboboxSelected>>",
                       lambda _event: sim.set_speed_index(speed_box.current()))
        speed_box.pack(side=tk.LEFT)

        front = tk.BooleanVar(value=sim.disk.front_view)
        view_text = tk.StringVar(value=sim.toggle_view(front.get()))
        ttk.Checkbutton(toolbar, textvariable=view_text, variable=front,
                        command=lambda: view_text.set(sim.toggle_view(front.get()))
                        ).pack(side=tk.LEFT)

        body = ttk.Frame(root)
        body.pack(fill=tk.BOTH, expand=True)
        disk_canvas = tk.Canvas(body, width=DISK_VIEW_SIZE[0], height=DISK_VIEW_SIZE[1],
                                background=background, highlightthickness=0)
        disk_canvas.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)
        fdc_canvas = tk.Canvas(body, width=FDC_VIEW_SIZE[0], height=FDC_VIEW_SIZE[1],
                               background="#ffffff", highlightthickness=0)
        fdc_canvas.pack(side=tk.LEFT, anchor=tk.N)

        def frame() -> None:
            sim.update_animation()
            width = max(disk_canvas.winfo_width(), DISK_VIEW_SIZE[0])
            height = max(disk_canvas.winfo_height(), DISK_VIEW_SIZE[1])
            _paint(disk_canvas, render_disk(sim.disk, width, height), background)
            _paint(fdc_canvas, render_fdc(sim.fdc, *FDC_VIEW_SIZE), "#ffffff")
            root.after(FRAME_INTERVAL_MS, frame)

        frame()
        root.mainloop()


def _non_negative(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {value}")
    return value


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the window, or with ``--frames`` run headless and print the status."""
    parser = argparse.ArgumentParser(prog="floppyviz",
                                     description="Animated 5.25-inch floppy disk drive.")
    parser.add_argument("--frames", type=_non_negative,
                        help="run this many frames without a window and print the status")
    parser.add_argument("--speed-index", type=int, default=DEFAULT_SPEED_INDEX,
                        help="speed list entry, 0 (0.01x) to 6 (2x)")
    parser.add_argument("--back", action="store_true", help="show the back of the disk")
    args = parser.parse_args(argv)

    sim = Simulator()
    sim.set_speed_index(args.speed_index)
    sim.toggle_view(not args.back)

    if args.frames is not None:
        sim.play_pause()
        for _ in range(args.frames):
            sim.update_animation()
        print(sim.disk.status_text())
        return 0

    FloppyApp(sim).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())