# ndraster

N-dimensional image data in Python: rasters of any dimension, inclusive
bounding boxes, resampling methods and affine transforms.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Overview

- `ndraster.box`: `Box` is an N-dimensional box. Its front and back
  positions are both inclusive. You can iterate over it in storage order
  (first axis fastest), intersect boxes (`&`), merge them (`|`) and compare
  them for containment (`<=`, `<`, `>=`, `>`). `grow`, `shrink`,
  `translate` and `project` return new boxes. `BorderedBox` splits a box into
  an inner part and border parts. Helper functions: `clamp`,
  `clamp_to_shape`, `extend`, `erase`, `insert`.
- `ndraster.container`: `DataContainer` is a one-dimensional NumPy-backed
  container with element-wise arithmetic. Results keep the container's value
  type. Integer division truncates towards zero.
- `ndraster.raster`: `Raster` is a contiguous N-dimensional container. It
  supports:
  - indexing by raw index or by position;
  - bounds-checked access with backward indexing (`at`);
  - contiguous `slice` and `section` views that share the data;
  - `fill`, `range`, `generate` and `apply`.
- `ndraster.rasterops`: `rasterize`, and the pixel-wise complex helpers
  `real`, `imag`, `absolute`, `arg` and `norm`.
- `ndraster.interpolation`: the boundary and resampling methods `Constant`,
  `Nearest`, `Periodic`, `Linear` and `Cubic`. `interpolation(parent, method)`
  creates an `Interpolation` decorator from them.
- `ndraster.affinity`: `Affinity` combines translation, scaling and rotation
  about a center, and has `warp` and `transform`. The module also provides
  `center`, `inverse`, `translate`, `scale`, `upsample`, `downsample`,
  `rotate_rad` and `rotate_deg` for whole rasters.
- `ndraster.matrix`: `Matrix`, a row-major matrix with `identity`,
  `diagonal`, `determinant` and in-place `inverse`.
- `ndraster.slice`: `Slice`, a linear index spacing with inclusive front and
  back.
- `ndraster.exceptions`: the errors the package raises. These are
  `LinxError`, `OutOfBoundsError`, `SizeError` and `NullPtrError`.

## Example

```python
from ndraster.raster import Raster
from ndraster.interpolation import Linear, Nearest, interpolation
from ndraster.affinity import Affinity

raster = Raster((2, 2)).range(1)      # values 1.0, 2.0, 3.0, 4.0
nn = interpolation(raster, Nearest())
print(nn((0.5, 0.5)))                 # 4.0

linear = interpolation(raster, Linear())
print(linear((0.5, 0.5)))             # 2.5

rotation = Affinity.rotation_deg(90, 0, 1)
print(rotation((3.0, 4.0)))           # approximately (-4.0, 3.0)
```

## What this package does not do

This package is a library only. It installs no command-line program; for
example, it has no command to time computations on rasters. It also has no
step-by-step pipeline or task scheduler. Use the modules above from your own
code.