# gradientgen

Render colour gradients and noise textures as images.

A gradient is built from two things:

- a **colour line** (`gradientgen.color.ColorLine`): an ordered list of
  `Color(r, g, b)` stops, placed evenly along 0..1 unless explicit positions
  are given, which is sampled at a position `t`;
- a **method**: any object with a `t(coordinate)` method that maps a pixel
  coordinate `(x, y)` to such a `t` (the `gradientgen.gradient.GradientParam`
  protocol).

Methods come in three families:

| Module                  | Methods                                            |
|-------------------------|----------------------------------------------------|
| `gradientgen.shapes`    | `Linear`, `Radial`, `Conical`, `Diamond`, `Square` |
| `gradientgen.functions` | `Polynomial`, `Sinusoidal`, `Spiral`               |
| `gradientgen.noise`     | `PerlinNoise`, `RandomNoise`                       |

All methods are frozen dataclasses configured through keyword arguments,
for example `Radial(center=(200.0, 200.0), radius=150.0)` or
`PerlinNoise(grid_size=(256, 256), n_octaves=3, seed=42)`. A few helpers
return adjusted copies: `Radial.with_radius_to(coordinate)`,
`Polynomial.direct_between(a, b)` and `Sinusoidal.direct_between(a, b)`.

Values of `t` that fall outside 0..1 are brought back into range by an
`Addressing` mode (`CLAMP`, `WRAP` or `MIRROR`) on the methods that take one.
An `Easing` (`LINEAR`, `SMOOTHSTEP`, `SMOOTHERSTEP`) set through
`GradientConfig` reshapes every `t` before the colour is looked up. Both live
in `gradientgen.utils`, together with `Vec2D` and `normalize_range`.

## Installation

```
pip install .
```

## Command line

```
gradientgen
```

renders a multi-octave Perlin noise texture with a blue-to-pink colour line
and saves it as a PNG image. Options:

| Option            | Default             | Meaning                         |
|-------------------|---------------------|---------------------------------|
| `-o`, `--output`  | `output/img85.png`  | file to write                   |
| `--size`          | `1024`              | width and height in pixels      |
| `--grid-size`     | `512`               | Perlin grid cell size           |
| `--octaves`       | `5`                 | number of extra octaves         |
| `--seed`          | random              | noise seed                      |

The command exits with status 1 and a message on standard error if the grid
is too small for the number of octaves or the image cannot be saved. The
output directory is not created for you.

## Library use

```python
from gradientgen.color import Color, ColorLine
from gradientgen.gradient import Gradient, GradientConfig
from gradientgen.shapes import Linear
from gradientgen.utils import Easing

colors = ColorLine([
    Color(51, 102, 255),
    Color(102, 51, 255),
    Color(153, 51, 255),
    Color(204, 102, 255),
    Color(255, 153, 255),
])

gradient = Gradient(Linear(), colors).configured(
    GradientConfig(easing=Easing.SMOOTHSTEP)
)
gradient.to_image().save("linear.png")
```

A `Gradient` is 800 by 800 pixels unless `height` and `width` are given, or
changed with `resized(height, width)`. `to_image()` returns a Pillow RGB image
and logs the smallest and largest `t` seen at INFO level; `to_matrix()`
returns the sampled colours as rows of `Color` values, leaving out the last
row and column.

`ColorLine(colors, spread)` places stops at custom positions;
`with_spread(spread)` returns a copy with new positions. A colour line needs
at least two colours and exactly one position per colour, otherwise
`ValueError` is raised.

Noise methods take a `seed` so that a texture can be reproduced; without one
a random seed is chosen. `PerlinNoise` raises `ValueError` when the grid size
halved once per octave would drop below one pixel.

## Running the tests

```
pip install .[test]
pytest
```