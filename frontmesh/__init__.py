"""Advancing-front triangulation of 2D point sets, with a convex hull, OBJ reader, camera and viewer."""

__version__ = "0.1.0"