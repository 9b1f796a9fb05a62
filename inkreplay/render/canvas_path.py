"""Rasterise a stroke's path commands onto a numpy canvas with OpenCV"""

import cv2
import numpy as np

from ..drawing.path import PathSink

# Sub-pixel precision for OpenCV drawing (coordinates are multiplied by 2**SHIFT)
SHIFT = 4
_SCALE = 1 << SHIFT


def _fixed(point):
    """Convert a Vector2 to OpenCV fixed-point integer coordinates."""
    return (int(round(point.x * _SCALE)), int(round(point.y * _SCALE)))


class CanvasPath(PathSink):
    """One stroke painted onto a shared BGR canvas.

    Each extend_path closes a quadrilateral between the previous and the new
    cross-section; draw() fills the pending quads and puts a round cap on
    every joint so consecutive segments blend without notches.
    """

    def __init__(self, canvas, color):
        self.canvas = canvas
        self.color = tuple(int(c) for c in color)
        self.last_edges = None
        self.pending = []

    def start_path(self, point, radius):
        self._fill_circle(point, radius)

    def init_path(self, edge_a, edge_b):
        self.last_edges = (edge_a.copy(), edge_b.copy())

    def extend_path(self, edge_a, edge_b):
        edges = (edge_a.copy(), edge_b.copy())
        if self.last_edges is not None:
            prev_a, prev_b = self.last_edges
            self.pending.append((prev_a, edges[0], edges[1], prev_b))
        self.last_edges = edges

    def draw(self):
        if not self.pending:
            return
        polygons = [np.array([_fixed(p) for p in quad], dtype=np.int32) for quad in self.pending]
        cv2.fillPoly(self.canvas, polygons, self.color, lineType=cv2.LINE_AA, shift=SHIFT)

        # Round joint at the end of every segment
        for _, edge_a, edge_b, _ in self.pending:
            center = (edge_a + edge_b) * 0.5
            self._fill_circle(center, edge_a.distance_to(edge_b) / 2)
        self.pending = []

    def _fill_circle(self, center, radius):
        if radius <= 0:
            return
        cv2.circle(self.canvas, _fixed(center), int(round(radius * _SCALE)),
                   self.color, -1, lineType=cv2.LINE_AA, shift=SHIFT)
