# wirefdf

`wirefdf` draws a wireframe model from an FdF height map and shows it in a
window. Each map point is joined to its right-hand and lower neighbours, the
grid is projected isometrically, and you move, zoom and rotate the model from
the keyboard.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running

```
wirefdf maps/42.fdf
```

The window is 1920×1080 and is drawn with pygame. Give exactly one map file;
otherwise a usage line is printed and the command exits with status 1. A few
progress lines are printed while the window starts and after it closes. If the
display cannot be opened, the error is reported on standard error and the
command exits with status 1.

## Map files

A map is plain text: one row of the grid per line, with values separated by
spaces. Each value is a height, optionally followed by a comma and a colour in
hexadecimal:

```
0 0 0 0
0 10 10,0xFF0000 0
0 0 0 0
```

- The number of values must match on every line that has any; if it does
  not, the map is rejected as having an inconsistent width.
- Lines with no values do not count towards the map's height.
- Only the first 20 lines of a file are read.
- Heights are read like C's `atoi`: leading blanks and a sign are accepted,
  anything after the digits is ignored, and a value without digits is 0.
- A colour must start with `0x` followed by hexadecimal digits. Without a
  colour, or with a malformed one, the point is coloured by its height on a
  scale from green at the lowest point to red at the highest. When the whole
  map is flat these points are drawn white.

An unreadable or empty map is reported on standard error and the command
exits with status 1.

## Controls

| Key          | Action                                 |
|--------------|----------------------------------------|
| Arrow keys   | Move the model by 20 units             |
| `=` / `-`    | Zoom in / out by a factor of 1.2       |
| `W` / `S`    | Change the projection's x angle by 0.1 |
| `A` / `D`    | Change the projection's y angle by 0.1 |
| `Q` / `E`    | Rotate the model about the z axis      |
| `R`          | Return to the starting view            |
| `Esc`        | Close the window                       |

Closing the window also ends the program. The model is redrawn after every
key press.

## Using it as a library

```python
from wirefdf.mapfile import parse_map
from wirefdf.model import Camera
from wirefdf.render import Image, render_map

height_map = parse_map("maps/42.fdf")
camera = Camera()
camera.reset(height_map.width, height_map.height)

image = Image(1920, 1080)
render_map(image, height_map, camera)
print(hex(image.get_pixel(960, 540)))
```

- `wirefdf.mapfile.parse_map` raises `wirefdf.model.FdfError` when a map
  cannot be read or is invalid.
- `wirefdf.transform.apply_rotation` and `wirefdf.render.project_point` give
  the geometry without drawing anything; `wirefdf.render.draw_segment` draws a
  line between two screen points into an `Image`.
- `wirefdf.events.handle_key` applies one `Key` press to a `Camera` and
  returns `False` for the key that closes the window.
- `wirefdf.colors.parse_color` and `wirefdf.colors.height_color` give the
  colours used for points.
- `wirefdf.textutil.LineReader` reads a text or binary stream one line at a
  time, with each line keeping its newline.

## What it does not do

There are no mouse controls, and although `Camera` has `rot_x` and `rot_y`
fields, no key changes them. The rendered image is shown on screen only; it
is not saved to a file.