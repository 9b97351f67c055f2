# frontmesh

frontmesh triangulates a set of 2D points with an advancing-front method.
The starting front is the convex hull of the points, which QuickHull computes.
A small interactive viewer built on matplotlib draws the points and their
triangulations.

## Installation

```
pip install .
```

To also install the test dependencies:

```
pip install .[test]
```

## Library use

```python
from frontmesh.quickhull import compute_hull
from frontmesh.advancing_front import compute_triangulation

points = [(0.0, 0.0), (4.0, 0.0), (4.0, 3.0), (0.0, 3.0), (2.0, 1.0)]

hull = compute_hull(points)
triangles = compute_triangulation(points)
```

`compute_hull(points)` takes a sequence of `(x, y)` pairs. It returns the
hull vertices as tuples of floats, in clockwise order, starting at the
leftmost point. An input with two points or fewer is returned unchanged.

`compute_triangulation(points)` returns a list of triangles. Each triangle
is a tuple of three `(x, y)` points in counter-clockwise order.

`frontmesh.advancing_front` also provides these names:

- `Edge`: a segment with `point1`, `point2` and an `in_frontier` flag. Two
  edges compare equal whatever their direction.
- `segments_intersect(e1, e2)`: true when two edges cross at a point
  interior to both.

### OBJ input

`frontmesh.objparse.parse_obj(path)` reads vertex groups from a Wavefront
OBJ file and returns a list of groups. Each group is a list of `(x, y)`
points.

- A `v x y [z]` line adds a point to the current group. The z coordinate is
  ignored. A missing or unreadable coordinate is read as `0.0`.
- A `g` line starts a new group. Vertices that come before the first `g`
  line go into an implicit first group.
- Every other line is ignored.

If the file cannot be opened, `OSError` is raised.

### Camera

`frontmesh.camera` provides the following:

- `ProjectionType`, with the members `ORTHOGRAPHIC` and `PERSPECTIVE`.
- `Camera`, a dataclass with these fields: `position`, `look_at`,
  `view_up`, `projection_type`, `near`, `far`, `bottom`, `top`, `left` and
  `right`. `view_matrix()` and `projection_matrix()` each return a 4×4
  numpy array. The matrices are in (row, column) layout and act on column
  vectors.
- `Scene`, a dataclass that holds one `camera`.

## Viewer

```
frontmesh [FILE.obj]
```

With a file, the viewer triangulates the vertex groups read from that file.
Without one, it uses 50 random points. The points lie inside the
default 0–500 view and keep a margin from its edges. On any error the
message is printed to standard error and the command exits with status 1.

Keys:

- `1` shows or hides the triangulation of all points together.
- `2` shows or hides the separate triangulation of each group.
- `Escape` closes the window.

`frontmesh.app` also exposes the pieces that make up the viewer:

- `default_camera()`
- `random_points(count, low, high, rng)`
- `load_groups(path, camera, rng)`
- The `Viewer` class, with the methods `toggle_triangulation()`,
  `toggle_group_triangulations()`, `on_key(event)`, `close()` and `show()`.