"""Interactive viewer that draws a point set and its triangulations."""

from __future__ import annotations

import argparse
import os
import random
import sys
from collections.abc import Iterable, Sequence
from typing import Any, Optional, Union

from frontmesh.advancing_front import compute_triangulation
from frontmesh.camera import Camera, ProjectionType
from frontmesh.objparse import parse_obj

Point = tuple[float, float]

RANDOM_POINT_COUNT = 50
WINDOW_SIZE = 700
WINDOW_TITLE = "Triangulation Visualizer"


def default_camera() -> Camera:
    """Orthographic camera covering the square from 0 to 500 on both axes."""
    return Camera(
        position=(0.0, 0.0, 1.0),
        look_at=(0.0, 0.0, -1.0),
        view_up=(0.0, 1.0, 0.0),
        projection_type=ProjectionType.ORTHOGRAPHIC,
        near=0.01,
        far=100.0,
        bottom=0.0,
        top=500.0,
        left=0.0,
        right=500.0,
    )


def random_points(
    count: int, low: float, high: float, rng: Optional[random.Random] = None
) -> list[Point]:
    """Return ``count`` points whose coordinates are drawn uniformly from [low, high]."""
    if count < 0:
        raise ValueError("count must not be negative")
    generator = rng if rng is not None else random.Random()
    points: list[Point] = []
    for _ in range(count):
        x = generator.uniform(low, high)
        y = generator.uniform(low, high)
        points.append((x, y))
    return points


def load_groups(
    path: Union[str, os.PathLike, None] = None,
    camera: Optional[Camera] = None,
    rng: Optional[random.Random] = None,
) -> list[list[Point]]:
    """Read vertex groups from an OBJ file, or make one group of random points.

    Random points keep a margin of a twentieth of the camera's horizontal
    extent from its left and right edges, on both axes.
    """
    if path is not None:
        return parse_obj(path)
    cam = camera if camera is not None else default_camera()
    margin = (cam.right - cam.left) / 20.0
    return [random_points(RANDOM_POINT_COUNT, cam.left + margin, cam.right - margin, rng)]


class Viewer:
    """Shows points, their joint triangulation and per-group triangulations.

    Key 1 toggles the joint triangulation, key 2 the per-group ones and
    Escape closes the window.
    """

    def __init__(
        self,
        groups: Iterable[Iterable[Sequence[float]]],
        camera: Optional[Camera] = None,
    ) -> None:
        self.groups: list[list[Point]] = [
            [(float(p[0]), float(p[1])) for p in group] for group in groups
        ]
        self.camera = camera if camera is not None else default_camera()
        self.vertices: list[Point] = [p for group in self.groups for p in group]
        self.triangulation = compute_triangulation(self.vertices)
        self.group_triangulations = [compute_triangulation(g) for g in self.groups]
        self.show_triangulation = False
        self.show_group_triangulations = False
        self.closed = False
        self._figure: Any = None
        self._axes: Any = None

    def toggle_triangulation(self) -> bool:
        """Switch drawing of the joint triangulation; return the new state."""
        self.show_triangulation = not self.show_triangulation
        self._redraw()
        return self.show_triangulation

    def toggle_group_triangulations(self) -> bool:
        """Switch drawing of the per-group triangulations; return the new state."""
        self.show_group_triangulations = not self.show_group_triangulations
        self._redraw()
        return self.show_group_triangulations

    def on_key(self, event: Any) -> None:
        """Handle a key press event carrying a ``key`` attribute."""
        key = getattr(event, "key", None)
        if key == "escape":
            self.close()
        elif key == "1":
            self.toggle_triangulation()
        elif key == "2":
            self.toggle_group_triangulations()

    def close(self) -> None:
        """Close the window, if one is open."""
        self.closed = True
        if self._figure is not None:
            import matplotlib.pyplot as plt

            plt.close(self._figure)
            self._figure = None
            self._axes = None

    def show(self) -> None:
        """Open the window and block until it is closed."""
        import matplotlib.pyplot as plt

        dpi = 100
        self._figure = plt.figure(
            figsize=(WINDOW_SIZE / dpi, WINDOW_SIZE / dpi), dpi=dpi, facecolor="black"
        )
        manager = getattr(self._figure.canvas, "manager", None)
        if manager is not None:
            manager.set_window_title(WINDOW_TITLE)
        self._axes = self._figure.add_axes((0.0, 0.0, 1.0, 1.0))
        self._figure.canvas.mpl_connect("key_press_event", self.on_key)
        self.closed = False
        self._redraw()
        plt.show()
        self.closed = True

    def _redraw(self) -> None:
        if self._axes is None:
            return
        from matplotlib.collections import PolyCollection

        ax = self._axes
        ax.clear()
        ax.set_facecolor("black")
        ax.set_xlim(self.camera.left, self.camera.right)
        ax.set_ylim(self.camera.bottom, self.camera.top)
        ax.set_axis_off()

        if self.vertices:
            xs, ys = zip(*self.vertices)
            ax.scatter(xs, ys, s=25, c="white", marker="s")

        meshes = []
        if self.show_triangulation:
            meshes.append(self.triangulation)
        if self.show_group_triangulations:
            meshes.extend(self.group_triangulations)
        for mesh in meshes:
            if mesh:
                ax.add_collection(
                    PolyCollection(
                        [list(t) for t in mesh],
                        facecolors="none",
                        edgecolors="white",
                        linewidths=1.0,
                    )
                )

        self._figure.canvas.draw_idle()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the viewer on an OBJ file, or on random points when none is given."""
    parser = argparse.ArgumentParser(description="Show triangulations of planar points.")
    parser.add_argument("obj_file", nargs="?", help="OBJ file whose vertices are triangulated")
    args = parser.parse_args(argv)

    camera = default_camera()
    try:
        groups = load_groups(args.obj_file, camera)
        viewer = Viewer(groups, camera)
        viewer.show()
    except Exception as error:  # report any failure and exit unsuccessfully
        print(error, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())