import os
import sys
import unittest

import numpy as np

# Ensure the project root is in path
sys.path.append(os.path.join(os.path.dirname(__file__), ".."))

from canvas import Canvas
from colors import BLACK, WHITE, Color
from geometry import Point
from shapes import Rect

RED = Color(255, 0, 0)


def painted(canvas, color=RED):
    buffer = canvas.get_rgb_buffer()
    return np.all(buffer == np.array(color.as_tuple(), dtype=np.uint8), axis=2)


class TestCanvas(unittest.TestCase):
    def test_size_and_background(self):
        canvas = Canvas(30, 20, BLACK)
        buffer = canvas.get_rgb_buffer()
        self.assertEqual(buffer.shape, (20, 30, 3))
        self.assertEqual(buffer.dtype, np.uint8)
        self.assertTrue(np.all(buffer == 0))

    def test_rect_covers_exactly_width_by_height(self):
        canvas = Canvas(20, 20)
        Rect(RED, Point(2, 3), 10, 5).draw(canvas)
        mask = painted(canvas)
        self.assertEqual(int(mask.sum()), 50)
        rows, cols = np.nonzero(mask)
        self.assertEqual((cols.min(), cols.max()), (2, 11))
        self.assertEqual((rows.min(), rows.max()), (3, 7))

    def test_ellipse(self):
        canvas = Canvas(40, 40)
        canvas.draw_ellipse(Point(20, 20), Point(10, 5), RED)
        self.assertEqual(canvas.get_pixel(20, 20), RED)
        self.assertEqual(canvas.get_pixel(29, 20), RED)
        self.assertEqual(canvas.get_pixel(20, 28), WHITE)
        self.assertEqual(canvas.get_pixel(0, 0), WHITE)

    def test_mirrored_radius_is_drawn(self):
        canvas = Canvas(20, 20)
        canvas.draw_ellipse(Point(10, 10), Point(-3, -3), RED)
        self.assertEqual(canvas.get_pixel(10, 10), RED)

    def test_line_rounds_coordinates(self):
        canvas = Canvas(10, 10)
        canvas.draw_line(Point(0.4, 2.2), Point(8.6, 1.8), RED)
        for x in range(0, 10):
            self.assertEqual(canvas.get_pixel(x, 2), RED)
        self.assertEqual(canvas.get_pixel(5, 3), WHITE)

    def test_degenerate_polygons(self):
        canvas = Canvas(10, 10)
        canvas.draw_polygon([], RED)
        canvas.draw_polygon([Point(1, 1)], RED)
        canvas.draw_polygon([Point(3, 5), Point(6, 5)], RED)
        self.assertEqual(canvas.get_pixel(1, 1), RED)
        self.assertEqual(canvas.get_pixel(4, 5), RED)
        self.assertEqual(int(painted(canvas).sum()), 5)

    def test_out_of_bounds_is_clipped(self):
        canvas = Canvas(10, 10)
        canvas.draw_polygon([Point(-50, -50), Point(5, -50), Point(5, 4), Point(-50, 4)], RED)
        canvas.draw_ellipse(Point(100, 100), Point(3, 3), RED)
        canvas.draw_line(Point(-5, 9), Point(50, 9), RED)
        mask = painted(canvas)
        self.assertEqual(int(mask[:5, :6].sum()), 30)
        self.assertTrue(mask[9].all())
        self.assertFalse(mask[5:9].any())


if __name__ == "__main__":
    unittest.main()
