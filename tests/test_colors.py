import os
import sys
import unittest

# Ensure the project root is in path
sys.path.append(os.path.join(os.path.dirname(__file__), ".."))

from colors import Color, UnresolvedColorError, parse_color, parse_rgb_triplet


class TestColors(unittest.TestCase):
    def test_hex_colors(self):
        self.assertEqual(parse_color("#ff0000"), Color(255, 0, 0))
        self.assertEqual(parse_color("#0F0"), Color(0, 255, 0))
        self.assertEqual(parse_color("  #0000ff "), Color(0, 0, 255))

    def test_named_colors(self):
        self.assertEqual(parse_color("red"), Color(255, 0, 0))
        self.assertEqual(parse_color("Black"), Color(0, 0, 0))
        self.assertEqual(parse_color("white"), Color(255, 255, 255))

    def test_alpha_channel_is_dropped(self):
        self.assertEqual(parse_color("#11223344"), Color(0x11, 0x22, 0x33))

    def test_unknown_color_raises(self):
        with self.assertRaises(UnresolvedColorError):
            parse_color("notacolor")
        with self.assertRaises(UnresolvedColorError):
            parse_color("#12")

    def test_none_is_not_paintable(self):
        with self.assertRaises(UnresolvedColorError):
            parse_color("none")
        with self.assertRaises(UnresolvedColorError):
            parse_color("")

    def test_rgb_function(self):
        self.assertEqual(parse_color("rgb(10, 20, 30)"), Color(10, 20, 30))

    def test_out_of_range_rgb_is_unresolved(self):
        with self.assertRaises(UnresolvedColorError):
            parse_color("rgb(300,0,0)")

    def test_channel_range_enforced(self):
        with self.assertRaises(ValueError):
            Color(256, 0, 0)
        with self.assertRaises(ValueError):
            Color(0, -1, 0)

    def test_rgb_triplet(self):
        self.assertEqual(parse_rgb_triplet("10, 20,30"), Color(10, 20, 30))
        self.assertEqual(parse_rgb_triplet("300,-5,0"), Color(255, 0, 0))
        with self.assertRaises(ValueError):
            parse_rgb_triplet("1,2")
        with self.assertRaises(ValueError):
            parse_rgb_triplet("a,b,c")


if __name__ == "__main__":
    unittest.main()
