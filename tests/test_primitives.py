import unittest

from gridcalendar.model.geometry import LayoutParams, compute_layout
from gridcalendar.model.primitives import Line, Point, Rectangle
from gridcalendar.utils import in2pt, pt2in, sp2in


class TestUnits(unittest.TestCase):
    def test_points(self) -> None:
        self.assertAlmostEqual(pt2in(72.0), 1.0)
        self.assertAlmostEqual(in2pt(8.5), 612.0)

    def test_scaled_points(self) -> None:
        # 1in = 72.27pt = 72.27 * 65536sp
        self.assertAlmostEqual(sp2in(72.27 * 65536), 1.0)


class TestPrimitives(unittest.TestCase):
    def test_rectangle_corners(self) -> None:
        rect = Rectangle(x=1.0, y=2.0, width=3.0, height=4.0, line_width=1.2)
        self.assertEqual(rect.origin, Point(1.0, 2.0))
        self.assertEqual(rect.corner, Point(4.0, 6.0))

    def test_line_length(self) -> None:
        self.assertAlmostEqual(Line(x1=0.0, y1=0.0, x2=3.0, y2=4.0, line_width=1.0).length, 5.0)

    def test_point_arithmetic(self) -> None:
        self.assertEqual(Point(1.0, 2.0) + Point(0.5, 0.5), Point(1.5, 2.5))
        self.assertEqual(Point(1.0, 2.0) - Point(1.0, 1.0), Point(0.0, 1.0))

    def test_primitives_are_immutable(self) -> None:
        rect = Rectangle(x=1.0, y=2.0, width=3.0, height=4.0, line_width=1.2)
        with self.assertRaises(AttributeError):
            rect.x = 0.0

    def test_cell_center(self) -> None:
        params = LayoutParams(total_width=5.0, total_height=3.0, num_rows=1, num_cols=1,
                              left_margin=1.0, header_height=1.0, gap=0.0)
        cell = compute_layout(params).cell(1, 1)
        self.assertEqual(cell.center, (3.0, 1.0))


if __name__ == "__main__":
    unittest.main(verbosity=2)
