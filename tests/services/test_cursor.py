"""Tests for services/cursor.py — scrubber index and sector time loss."""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from lapviz.services.cursor import SectorWindow, cursor_index, sector_size, sector_window, time_lost


@dataclass(frozen=True)
class _Sample:
    delta: float


def _series(deltas: list[float]) -> list[_Sample]:
    return [_Sample(d) for d in deltas]


class TestCursorIndex:
    def test_empty_series(self):
        assert cursor_index(50, 0) is None

    @pytest.mark.parametrize(
        ("cursor", "expected"),
        [(0, 0), (50, 4), (100, 9), (33.3, 2), (99.9, 8)],
    )
    def test_floor_mapping(self, cursor, expected):
        assert cursor_index(cursor, 10) == expected

    def test_clamped(self):
        assert cursor_index(-20, 10) == 0
        assert cursor_index(250, 10) == 9

    def test_single_sample(self):
        assert cursor_index(100, 1) == 0

    def test_nan(self):
        assert cursor_index(float("nan"), 10) == 0


class TestSectorWindow:
    def test_sector_size_floors(self):
        assert sector_size(9) == 3
        assert sector_size(10) == 3
        assert sector_size(2) == 0

    def test_inside_second_sector(self):
        assert sector_window(4, 9) == SectorWindow(start=3, end=4, number=2)

    def test_inside_last_sector(self):
        assert sector_window(8, 9) == SectorWindow(start=6, end=8, number=3)

    @pytest.mark.parametrize("index", [0, 3, 6])
    def test_boundary_is_empty(self, index):
        window = sector_window(index, 9)
        assert window.start == index
        assert window.end == index
        assert len(window) == 0

    def test_leftover_samples_label_as_last_sector(self):
        window = sector_window(9, 10)
        assert window.start == 9
        assert window.end == 9
        assert window.number == 3

    def test_too_short_for_sectors(self):
        assert sector_window(1, 2) == SectorWindow(start=0, end=0, number=1)

    def test_integer_division_on_500_samples(self):
        # size 166: index 200 sits in the second sector
        window = sector_window(200, 500)
        assert (window.start, window.end, window.number) == (166, 200, 2)


class TestTimeLost:
    def test_sums_window(self):
        series = _series([0.1, 0.1, 0.1, 0.02, 0.03, -0.01, 0.5, 0.5, 0.5])
        assert time_lost(series, SectorWindow(3, 5, 2)) == pytest.approx(0.05)

    def test_excludes_cursor_sample(self):
        series = _series([0.0, 0.0, 0.0, 0.2, 1.0, 0.0, 0.0, 0.0, 0.0])
        assert time_lost(series, sector_window(4, 9)) == pytest.approx(0.2)

    def test_boundary_is_zero(self):
        series = _series([0.3] * 9)
        assert time_lost(series, sector_window(3, 9)) == 0

    def test_gain_is_negative(self):
        series = _series([-0.1] * 9)
        assert time_lost(series, sector_window(8, 9)) == pytest.approx(-0.2)
