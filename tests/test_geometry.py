import unittest

import numpy as np

from gridcalendar.config import GridOptions
from gridcalendar.model.errors import DegenerateGeometry
from gridcalendar.model.geometry import GridMode, LayoutParams, SeparatorSpec, compute_layout


def _params(**kw) -> LayoutParams:
    base = dict(total_width=48.0, total_height=24.0, num_rows=6, num_cols=53,
                left_margin=1.0, header_height=0.4, gap=0.06, line_width=1.2)
    base.update(kw)
    return LayoutParams(**base)


class TestGappedGeometry(unittest.TestCase):
    def test_scenario_single_row(self) -> None:
        params = LayoutParams(total_width=10, total_height=5, left_margin=1, header_height=0.5,
                              gap=0, num_cols=9, num_rows=1)
        layout = compute_layout(params, GridMode.GAPPED)
        self.assertAlmostEqual(layout.cell_width, 1.0)
        self.assertAlmostEqual(layout.cell_height, 4.5)

    def test_widths_and_gaps_fill_box_area(self) -> None:
        for num_cols, num_rows, gap in [(1, 1, 0.1), (7, 3, 0.06), (53, 10, 0.02), (12, 40, 0.0)]:
            params = _params(num_cols=num_cols, num_rows=num_rows, gap=gap)
            layout = compute_layout(params)
            total_w = layout.cell_width * num_cols + (num_cols - 1) * gap
            total_h = layout.cell_height * num_rows + (num_rows - 1) * gap
            self.assertAlmostEqual(total_w, params.box_area_width)
            self.assertAlmostEqual(total_h, params.box_area_height)
            self.assertTrue(layout.fits_canvas())

    def test_cell_origins(self) -> None:
        layout = compute_layout(_params(num_cols=4, num_rows=3, total_width=9.18, total_height=6.52,
                                        left_margin=1.0, header_height=0.4, gap=0.06))
        # box area 8.18 x 6.12 -> cells 2.0 x 2.0
        self.assertAlmostEqual(layout.cell_width, 2.0)
        self.assertAlmostEqual(layout.cell_height, 2.0)
        x, y = layout.cell_origin(1, 1)
        self.assertAlmostEqual(x, 1.0)
        self.assertAlmostEqual(y, 6.12 - 2.0)
        x, y = layout.cell_origin(3, 4)
        self.assertAlmostEqual(x, 1.0 + 3 * 2.06)
        self.assertAlmostEqual(y, 0.0)

    def test_numpy_origins_match_accessors(self) -> None:
        layout = compute_layout(_params(num_cols=12, num_rows=5))
        xs = [layout.cell_origin(1, c)[0] for c in range(1, 13)]
        ys = [layout.cell_origin(r, 1)[1] for r in range(1, 6)]
        np.testing.assert_allclose(layout.column_xs(), xs)
        np.testing.assert_allclose(layout.row_ys(), ys)

    def test_label_anchors(self) -> None:
        layout = compute_layout(_params(num_cols=4, num_rows=3, total_width=9.18, total_height=6.52))
        x, y = layout.column_label_anchor(2)
        self.assertAlmostEqual(x, 1.0 + 2.06 + 1.0)
        self.assertAlmostEqual(y, 6.52 - 0.2)
        x, y = layout.row_label_anchor(2)
        self.assertAlmostEqual(x, 0.5)
        self.assertAlmostEqual(y, 6.12 - 2.06 - 1.0)

    def test_cells_row_major(self) -> None:
        layout = compute_layout(_params(num_cols=3, num_rows=2))
        order = [(c.row, c.col) for c in layout.cells()]
        self.assertEqual(order, [(1, 1), (1, 2), (1, 3), (2, 1), (2, 2), (2, 3)])

    def test_no_dividers_in_gapped_mode(self) -> None:
        self.assertEqual(compute_layout(_params()).divider_xs(), [])

    def test_out_of_range_cell(self) -> None:
        layout = compute_layout(_params(num_cols=3, num_rows=2))
        with self.assertRaises(IndexError):
            layout.cell_origin(3, 1)
        with self.assertRaises(IndexError):
            layout.cell_origin(1, 0)


class TestRowBoxGeometry(unittest.TestCase):
    def test_cell_width_has_no_column_gap(self) -> None:
        params = _params(num_cols=12, num_rows=4, total_width=25.0, left_margin=1.0)
        layout = compute_layout(params, GridMode.ROW_BOX)
        self.assertAlmostEqual(layout.cell_width, 2.0)
        self.assertAlmostEqual(layout.row_width, 24.0)

    def test_rows_and_gaps_fill_box_area(self) -> None:
        params = _params(num_cols=12, num_rows=9, gap=0.1)
        layout = compute_layout(params, "rowbox")
        total = sum(layout.cell_height for _ in range(9)) + 8 * 0.1
        self.assertAlmostEqual(total, params.box_area_height)
        self.assertTrue(layout.fits_canvas())

    def test_row_origin_always_at_left_margin(self) -> None:
        layout = compute_layout(_params(num_cols=12, num_rows=4, left_margin=1.5), GridMode.ROW_BOX)
        for row in range(1, 5):
            self.assertEqual(layout.row_origin(row)[0], 1.5)

    def test_divider_positions(self) -> None:
        layout = compute_layout(_params(num_cols=4, num_rows=2, total_width=9.0, left_margin=1.0),
                                GridMode.ROW_BOX)
        np.testing.assert_allclose(layout.divider_xs(), [3.0, 5.0, 7.0])

    def test_column_label_centered(self) -> None:
        layout = compute_layout(_params(num_cols=4, num_rows=2, total_width=9.0, left_margin=1.0),
                                GridMode.ROW_BOX)
        self.assertAlmostEqual(layout.column_label_anchor(1)[0], 2.0)
        self.assertAlmostEqual(layout.column_label_anchor(4)[0], 8.0)


class TestDegenerateInput(unittest.TestCase):
    def test_margin_wider_than_canvas(self) -> None:
        with self.assertRaises(DegenerateGeometry):
            compute_layout(_params(total_width=1.0, left_margin=1.0))

    def test_header_taller_than_canvas(self) -> None:
        with self.assertRaises(DegenerateGeometry):
            compute_layout(_params(total_height=0.3, header_height=0.4), GridMode.ROW_BOX)

    def test_gaps_consume_box_area(self) -> None:
        with self.assertRaises(DegenerateGeometry) as ctx:
            compute_layout(_params(total_width=3.0, num_cols=53, gap=0.06))
        self.assertLess(ctx.exception.cell_width, 0.0)

    def test_invalid_parameters(self) -> None:
        for kw in (dict(num_rows=0), dict(num_cols=-1), dict(num_cols=2.5), dict(gap=-0.1),
                   dict(line_width=0.0), dict(total_width=0.0)):
            with self.assertRaises(ValueError, msg=str(kw)):
                compute_layout(_params(**kw))

    def test_unknown_mode(self) -> None:
        with self.assertRaises(ValueError):
            compute_layout(_params(), "spiral")


class TestSeparatorSpec(unittest.TestCase):
    def test_rows_scenario(self) -> None:
        self.assertEqual(SeparatorSpec(interval=4, start_row=1).rows(10), [1, 5, 9])

    def test_last_row_has_no_separator(self) -> None:
        self.assertEqual(SeparatorSpec(interval=3, start_row=3).rows(9), [3, 6])

    def test_disabled(self) -> None:
        self.assertEqual(SeparatorSpec(interval=0).rows(10), [])

    def test_separator_y_is_mid_gap(self) -> None:
        layout = compute_layout(_params(num_rows=4, gap=0.2))
        below_row_1 = layout.cell_origin(1, 1)[1]
        top_row_2 = layout.cell_origin(2, 1)[1] + layout.cell_height
        self.assertAlmostEqual(layout.separator_y(1), (below_row_1 + top_row_2) / 2)

    def test_validate(self) -> None:
        for spec in (SeparatorSpec(interval=-1), SeparatorSpec(start_row=0), SeparatorSpec(width=0.0)):
            with self.assertRaises(ValueError):
                spec.validate()


class TestFromOptions(unittest.TestCase):
    def test_options_feed_params(self) -> None:
        options = GridOptions().merged(gap=0.1, left_margin=2.0)
        params = LayoutParams.from_options(20.0, 10.0, num_rows=2, num_cols=5, options=options)
        self.assertEqual(params.gap, 0.1)
        self.assertEqual(params.left_margin, 2.0)
        self.assertEqual(params.header_height, 0.4)

    def test_unknown_option(self) -> None:
        with self.assertRaises(ValueError):
            GridOptions().merged(colour="red")

    def test_none_overrides_ignored(self) -> None:
        self.assertEqual(GridOptions().merged(gap=None), GridOptions())


if __name__ == "__main__":
    unittest.main(verbosity=2)
