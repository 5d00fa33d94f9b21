# sketchbook

This package collects small programs written as programming exercises. Each one does a single job:

| Module | What it does | Command |
| --- | --- | --- |
| `sketchbook.morse` | Builds a binary Morse tree, looks up and decodes codes, and generates a decoder script for a word | `sketchbook-morse` |
| `sketchbook.brainfuck` | Brainfuck interpreter with a 32768-cell byte tape | `sketchbook-brainfuck` |
| `sketchbook.clock` | Draws an analogue clock face as SVG for a given time | `sketchbook-clock` |
| `sketchbook.lineinput` | Reads one line of input, character by character | `sketchbook-readline` |
| `sketchbook.pancake` | Pancake sort that reports every flip | `sketchbook-pancake` |
| `sketchbook.conics` | Renders a circle, an ellipse, a hyperbola and a parabola from their focal definitions | `sketchbook-conics` |
| `sketchbook.earthmap` | Renders an equirectangular world map with lakes, a 15° grid and a red marker in Budapest | `sketchbook-earthmap` |

The coastline and lake outlines used by the map live in `sketchbook.coast_data_1`,
`sketchbook.coast_data_2` and `sketchbook.lake_data`; each has a `polygons()` function that
returns tuples of `(longitude, latitude)` points.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install .[test]
pytest
```

## Commands

```
sketchbook-morse [WORD] [-o FILE]          # writes a decoder script for WORD (default "alma") to morse_decoder.py
sketchbook-brainfuck [PROGRAM]             # runs PROGRAM; without one, prints "Goodbye world!"
sketchbook-clock [HOUR [MINUTE [SECOND]]] [-o FILE]   # asks for missing values, writes clock.svg
sketchbook-readline                        # reads one line from standard input and prints it back
sketchbook-pancake [VALUES ...]            # sorts the integers given (or an example list) and prints each flip
sketchbook-conics [-o FILE]                # writes conics.png
sketchbook-earthmap [-o FILE]              # writes earthmap.png
```

`sketchbook-brainfuck` prints a message when the head runs off the tape, and exits with status 1
when a loop bracket has no partner.

## Using the library

### Morse code

```python
from sketchbook.morse import standard_tree, render_decoder

tree = standard_tree()
tree.code_for("a")        # ".-"
tree.decode("-.-.")       # "c"
script = render_decoder(tree, "alma")
```

`MorseTree.insert(letter, code)` adds a letter to a tree of your own; in each `MorseNode` the
`dot` branch is a dot and the `dash` branch a dash. `code_for` raises `KeyError` for a letter that
is not in the tree, and `decode` raises `ValueError` when the code leads to no letter.
`render_decoder` returns the text of a standalone Python script whose nested conditions decode
each letter and which prints the word when run.

### Brainfuck

```python
import io
from sketchbook.brainfuck import run, TapeOverflowError, UnbalancedLoopError

out = io.BytesIO()
run("++++++++[>++++++++<-]>+.", io.BytesIO(), out)
out.getvalue()            # b"A"
```

`run` reads bytes from a binary input stream and writes bytes to a binary output stream
(standard input and output by default). Cells hold bytes that wrap around; when input runs out,
`,` stores 255. The interpreter raises `TapeOverflowError` if the head moves off the tape and
`UnbalancedLoopError` if a bracket has no partner; both are subclasses of `BrainfuckError`.

### Clock

```python
from sketchbook.clock import clock_svg

svg = clock_svg(10, 8, 30)
```

The result is a 200×200 SVG document. The hour hand is red, the minute hand green and the second
hand black.

### Line input

```python
import io
from sketchbook.lineinput import read_line

read_line(io.StringIO("hello\nworld"))   # "hello"
```

The newline is consumed but not returned; at end of input the characters read so far are returned.

### Pancake sort

```python
from sketchbook.pancake import pancake_sort, format_steps

pancake_sort([2, 1, 2, 4, 5, 7, 6, 9, 10, 2])
print(format_steps([2, 1, 2, 4, 5, 7, 6, 9, 10, 2]))
```

`format_steps` returns the starting list followed by the list after every flip.

### Conic sections

`distance(x1, y1, x2, y2)` returns the Euclidean distance between two points.
`classify_pixel(x, y)` returns the RGB colour of the curve through that pixel, or `None`.
`render_conics(width, height)` returns a Pillow image of all four curves with a caption
(640×480 by default).

### World map

`gps_to_screen(lon, lat)` projects a coordinate onto the 1080×540 map. `split_polygons(flat)` turns
a flat coordinate list, in which a `0, 0` pair closes a polygon and a `-1, -1` pair ends the data,
into polygons. `draw_polygons(draw, polygons, fill)` and `draw_grid(draw)` draw onto a Pillow
`ImageDraw`, and `render_map()` returns the whole map as a Pillow image.

## What it does not do

The drawing programs do not open a window: `sketchbook-clock`, `sketchbook-conics` and
`sketchbook-earthmap` only write image files, which you open with any image viewer.