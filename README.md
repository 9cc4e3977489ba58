# labviewer

`labviewer` holds the building blocks of a maze-robot simulation viewer. It
has the geometry of a lab and readers for the XML that the simulator and the
viewer's configuration use. It also has a small command that reads the
viewer's settings. It has no dependencies beyond the standard library.

## Modules

- `labviewer.geometry`: the shapes a lab is made of.
  - `Vertex(x, y)` is a point. `copy()` returns an independent copy.
  - `Wall(corners, height)` is a polygon outline with a height. Use
    `Wall.from_points(points, height)` to build one from any iterable of
    points, and `add_corner(vertex)` to add a corner. Corners are stored as
    copies.
  - `Beacon(position, height)` is a beacon. Its height defaults to `1.0`.
  - `Target(position, radius)` is a circular target area.
  - `GridElement(position, direction)` is a start position. Its direction is
    in degrees.
  - `Grid` is the ordered list of start positions.
    - `add_position(element)` appends a copy of a start position.
    - `position(index)` returns a start position and raises `IndexError`
      when the index is out of range.
    - `len(grid)` gives the number of positions, and a grid can be iterated.
- `labviewer.replies`: `parse_reply(data)` reads the simulator's `<Reply>` to
  a viewer registration. It accepts bytes or text and ignores anything after
  a NUL character. It returns a `Reply` with these fields:
  - `status` is `True` only for `Status="Ok"`.
  - `parameters` is a `SimParameters` with `cycle_time`, `sim_time`,
    `compass_time`, `beacon_noise`, `obstacle_noise` and `motors_noise`.

  Numbers that cannot be read become `0`. `parse_reply` raises `ReplyError`
  in these cases: malformed XML, an unknown tag, `<Parameters>` outside a
  `<Reply>`, or no `<Reply>` at all.
- `labviewer.params`: the viewer's settings.
  - `ViewerParameters` holds `lower_color`, `higher_color`, `image`, `port`,
    `server_addr`, `auto_start`, `auto_connect`, `control` and
    `reset_on_connect`.
  - `parse_parameters(data)` reads a `<Viewer .../>` document. It understands
    the attributes `Host`, `Port`, `Lowercolor`, `Highercolor`, `Control`,
    `AutoConnect` and `AutoStart`. A flag attribute is true when its first
    character is `y`. A port that is not a number from 0 to 65535 becomes `0`.
  - `load_parameters(path)` reads such a file from disk.

  Both raise `ParameterFileError` when the file cannot be opened, is
  malformed, or holds any element other than `Viewer`.
- `labviewer.maze`: `LabMap` is a character map of a maze of 7 × 14 cells.
  - `LabMap.parse(data)` builds it from the `<Row Pos="..." Pattern="..."/>`
    elements of a lab description. Malformed XML raises `ValueError`.
  - `LabMap.load(path)` reads a lab description from a file.
  - `add_row(row, pattern)` marks the walls of one pattern row.
  - `has_wall_above(row, col)` tells whether a cell has a wall on top. It
    raises `IndexError` for a cell without an upper wall position.
  - `rows` gives the map rows from the bottom up.
  - `render()` returns the map as text, top row first.
- `labviewer.cli`: the `labviewer` command, with `parse_args(argv)`, `main()`
  and `UsageError`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
labviewer [--host simulatorAddress:port]
          [--lowercolor color]
          [--highercolor color]
          [--paramfile file.xml]
          [--nocontrol]
          [--autoconnect]
          [--autostart]
          [--noresetonconnect]
          [--help]
```

The command parses its options and prints a banner. If a parameter file was
given, it loads that file. It then prints the resulting settings: the server
address and port, the two wall colours, and whether each of these is on:
control, auto connect, auto start and reset on connect.

Option rules:

- `--host` takes `address` or `address:port`. Without a port, the current
  port is kept.
- An option value that starts with `-` counts as missing.
- `--help` prints the synopsis and exits with status 0.
- An unknown option or a missing value prints "Invalid parameters" and exits
  with status 1.
- A parameter file replaces every setting taken from the command line. A
  parameter file that cannot be read also exits with status 1.

The defaults are:

| Setting           | Default     |
|-------------------|-------------|
| server address    | `127.0.0.1` |
| port              | `6000`      |
| lower wall colour | `blue`      |
| higher wall colour| `green`     |
| control           | on          |
| auto connect      | off         |
| auto start        | off         |
| reset on connect  | on          |

## Library use

```python
from labviewer.geometry import Grid, GridElement, Vertex
from labviewer.replies import parse_reply
from labviewer.params import parse_parameters

grid = Grid([GridElement(Vertex(1.0, 7.0), 0.0)])
assert len(grid) == 1

reply = parse_reply(b'<Reply Status="Ok"><Parameters SimTime="1800"/></Reply>')
assert reply.status and reply.parameters.sim_time == 1800

params = parse_parameters('<Viewer Host="localhost" Port="6000" AutoConnect="yes"/>')
assert params.auto_connect
```

Read a maze description and print it:

```python
from labviewer.maze import LabMap

maze = LabMap.load("lab.xml")
print(maze.render())
```

## What this package does not do

The `labviewer` command only reads and reports settings. It does not connect
to a simulator, and it does not draw the lab, the robots or the scores. The
package has no model of robots or of a whole lab with its robot slots. It
also cannot read the simulator's `<Lab>`, `<Grid>`, `<Robot>` or `<Restart>`
messages. Of the simulator's traffic, only the registration reply is read.