# floppyviz

A model of a 5.25-inch floppy disk spinning in its drive: the disk turns
inside its jacket, the read/write head sweeps back and forth across the
tracks, the head flips between the two sides of a double-sided disk, and the
sector passing under the head is highlighted as the disk rotates. A companion
panel shows the registers and the INT and DRQ lines of a WD1793 floppy disk
controller.

There are no runtime dependencies beyond the standard library; the window
uses `tkinter`.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running

```
floppyviz
```

opens a window with the disk view, the controller panel and a toolbar:

- **Play / Pause** starts and pauses the rotation and the head sweep; pausing
  keeps the head where it is.
- **Reset** stops the animation and puts the drive back to track 0, side 0,
  read operation, double sided, double density.
- A speed list: 0.01x, 0.05x, 0.1x, 0.25x, 0.5x, 1x (the default) and 2x.
- **Front / Back** switches between the front and the mirrored back view.

Options:

```
floppyviz --speed-index 6        # start at 2x (entries 0 to 6; unknown entries mean 1x)
floppyviz --back                 # start with the back view
floppyviz --frames 100           # no window: play 100 frames and print the status line
```

With `--frames` the program runs without a window and prints a line such as
`Track: 0  Side: 0  Sector: 0  Read  DD`. The frame count must not be
negative.

## Using it as a library

### The drive — `floppyviz.disk`

`FloppyDisk` holds the drive's state as plain attributes (`track`, `side`,
`head_position`, `write_operation`, `double_sided`, `double_density`,
`rotation_angle`, `index_pulse`, `highlight_track`, `highlight_sector`,
`front_view`) and a few checked properties:

- `envelope_transparency` is clamped to 0.0–1.0.
- `sector_count` (16 by default) is never less than one.
- `current_sector` and `set_current_sector(sector)` accept only sectors from
  0 to `sector_count - 1`; other values are ignored.

Head animation:

- `start_head_animation()`, `stop_head_animation()` and
  `reset_head_animation()`; stopping keeps the position, resetting returns
  to step 0, track 0 and side 0.
- `animate_head()` advances the head one of 80 steps, bouncing between the
  outermost and innermost track, and updates the current sector from the
  rotation angle. `animate_side()` flips the side of a double-sided disk.
  Both do nothing unless the animation is running.
- `set_animation_speed(speed)` ignores speeds that are not positive.
  `track_interval()` is the time between head steps in milliseconds (1000
  at 1x) and `side_interval()` is half of it.
- `num_tracks()` is 80 for double density and 40 for single density.
- `status_text()` gives the status line shown under the disk.

### Geometry — `floppyviz.geometry`

Pixel layout for a given drawing area, with one inch equal to a fifth of
5.25 of the envelope's width:

- `square_rect(width, height, margin)` — the largest centred square, inset
  by `margin` (20 by default), as a `Rect`.
- `envelope_geometry(rect, track_spacing)` — hub hole, index hole,
  read/write window, write-protect notch and insertion guides
  (`EnvelopeGeometry`).
- `track_layout(rect, num_tracks, current_track)` — the track rings and the
  ring of the current track (`TrackLayout`); track 0 is the outermost.
- `sector_boundaries(rect, layout, sector_count, rotation_angle)` — the
  radial sector lines, the first one at the index hole.
- `head_sector(rotation_angle, sector_count)` — the sector under the head.
- `head_geometry(rect, layout, disk)` — where the head sits in its window
  (`HeadGeometry`).

Functions given a non-positive track or sector count raise `ValueError`.

### Rendering — `floppyviz.render`

Turns state into display lists of plain shapes (`Ellipse`, `Polygon`,
`Line`, `Text`) in painting order, with RGBA colours:

- `render_disk(disk, width, height)` — the jacket, disk, tracks, sectors,
  head and status line; the back view mirrors everything except the status
  line.
- `render_fdc(state, width, height)` — the controller panel.
- `flip_horizontal(shapes, width)` — mirrors shapes about the vertical
  centre line.

### The controller panel — `floppyviz.fdc`

`FdcState` holds the status, command, track, sector and data registers,
truncated to eight bits on assignment, and the `interrupt` and
`data_request` lines. `register_rows()` lists each register with its binary
and hex form; `indicators()` lists INT and DRQ. `format_binary(0x5A)` gives
`01011010` and `format_hex(0x5A)` gives `0x5a`.

### The application — `floppyviz.app`

`Simulator` drives the drive frame by frame: `play_pause()`, `reset()`,
`set_speed_index(index)`, `toggle_view(front)` and `update_animation()`.
Each frame stands for 16 ms, turns the disk by 30 degrees at 1x speed,
raises a short index pulse once per revolution and steps the head and side
animation on their own intervals. `FloppyApp(simulator).run()` opens the
window, and `main(argv)` is what the `floppyviz` command calls.

## What it does not do

- It does not emulate a disk controller. The WD1793 panel only displays the
  values held in `FdcState`; nothing in the simulation executes commands or
  changes those registers, so in the window they stay at zero.
- It does not read or write disk images or any data; tracks and sectors are
  positions in the animation only.
- The window's plain canvas cannot clip, so shapes that `render_disk` marks
  with a clip mask (the disk and sector marks seen through the jacket's
  openings) are not drawn there; the openings are shown filled in black.