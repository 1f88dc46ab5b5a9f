"""Tests for coordinate transforms."""

import pytest

from fontscope.core.transform import HorizontalTransform, VerticalTransform


class TestHorizontalTransform:
    """Tests for the horizontal transform."""

    def test_origin_maps_to_pen_and_baseline(self) -> None:
        transform = HorizontalTransform(scale=0.1, cursor_x=20, baseline_y=140)
        assert transform.apply(0, 0) == (20, 140)

    def test_y_axis_flipped(self) -> None:
        """Font Y-up becomes output Y-down."""
        transform = HorizontalTransform(scale=0.1, cursor_x=20, baseline_y=140)
        assert transform.apply(300, 700) == (50, 70)
        assert transform.apply(0, -120) == (20, 152)

    def test_rounds_to_precision(self) -> None:
        transform = HorizontalTransform(scale=1 / 3, cursor_x=0, baseline_y=0)
        assert transform.apply(1, 1) == (0.33, -0.33)

    def test_custom_precision(self) -> None:
        transform = HorizontalTransform(scale=1 / 3, cursor_x=0, baseline_y=0, precision=4)
        assert transform.apply(1, 0) == (0.3333, 0)


class TestVerticalTransform:
    """Tests for the vertical transform."""

    def test_centered_on_own_advance(self) -> None:
        """A glyph spanning its full advance is symmetric around the column center."""
        transform = VerticalTransform(
            scale=0.1,
            column_center_x=250,
            glyph_top_y=158,
            horizontal_advance=100,
        )
        left, _ = transform.apply(0, 0)
        right, _ = transform.apply(1000, 0)
        assert left == 200
        assert right == 300
        assert (left + right) / 2 == pytest.approx(250)

    def test_narrow_glyph_uses_its_own_advance(self) -> None:
        transform = VerticalTransform(
            scale=0.1,
            column_center_x=250,
            glyph_top_y=0,
            horizontal_advance=30,
        )
        assert transform.apply(0, 0)[0] == 235
        assert transform.apply(300, 0)[0] == 265

    def test_y_relative_to_glyph_top(self) -> None:
        transform = VerticalTransform(
            scale=0.1,
            column_center_x=0,
            glyph_top_y=160,
            horizontal_advance=0,
        )
        assert transform.apply(0, 900)[1] == 70
        assert transform.apply(0, 0)[1] == 160
