# lifecube

`lifecube` runs Conway's Game of Life and supplies the pieces needed to show it in 3D.

- `lifecube.life`: the `Layer` grid. Its edges wrap around, so the grid is a torus. You can seed it at random, step it one generation at a time and draw it as text. It also provides the `lifecube` command.
- `lifecube.camera`: a free-look `Camera` dataclass. It comes with `look_at` and `perspective` helpers that build 4x4 numpy matrices.
- `lifecube.controls`: keyboard movement through `Key` and `process_input`, and mouse look and zoom through `Cursor`.
- `lifecube.mesh`: cube geometry as `Mesh` objects with `VertexAttribute` layouts. `cube_mesh()` gives 36 interleaved vertices with texture coordinates and face normals. `indexed_cube_mesh()` gives 8 corners drawn through 36 indices. `indexed_cube_normals()` gives the per-corner normals of the indexed cube.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install .[test]
pytest
```

## Running the simulation in a terminal

```
lifecube
```

The command seeds a 40 by 15 grid at random. It prints the grid with `#` for live cells, clears the screen, and moves on one generation every half second, for 500 generations. These options change that:

- `--width`, `--height`: the size of the grid. Both must be positive.
- `--generations`: how many generations to show.
- `--delay`: the pause between generations, in seconds.
- `--ratio`: the share of cells that start alive.
- `--seed`: a seed for the random start, so that a run can be repeated.

## Using the library

```python
import random
from lifecube.life import Layer

layer = Layer(width=40, height=15)
layer.random_init(random.Random(1))   # cells already alive stay alive
layer.step()                          # or: new_grid = layer.next()
print(layer.render())
```

`Layer.data` is a boolean numpy array with shape `(height, width)`. `Layer.check(y, x)` tells whether one cell lives in the next generation. A cell lives in the next generation when its 3x3 neighbourhood, the cell itself included, holds exactly 3 live cells. It also lives when that count is 4 and the cell is alive now.

Camera and controls:

```python
from lifecube.camera import Camera
from lifecube.controls import Cursor, Key, process_input

camera = Camera()
should_close = process_input(camera, {Key.W}, 0.016)  # True if Key.ESCAPE is pressed
cursor = Cursor(camera)
cursor.mouse_callback(410.0, 300.0)   # turn the camera; pitch stays within ±89 degrees
cursor.scroll_callback(0.0, 2.0)      # zoom; the field of view stays between 1 and 45 degrees
view, projection = camera.view(), camera.projection()
```

Meshes:

```python
from lifecube.mesh import cube_mesh

mesh = cube_mesh()
for a, b, c in mesh.triangles():
    ...
```

## What this package does not do

`lifecube` opens no window and draws nothing on screen apart from the text display of the `lifecube` command. It provides view and projection matrices, input handling and vertex data, but no renderer to use them. It does not load shaders or textures either.