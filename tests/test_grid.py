# SPDX-License-Identifier: MIT

import pytest
from conftest import BASE_DAY, at

from daygrid.service.grid import (
    CONFLICT_CHAR,
    CONFLICT_STYLE,
    OCCUPIED_CHAR,
    OVERLAP_FULL,
    PreconditionError,
    build_header_row,
    column_index,
    region_columns,
    regions_for_row,
    render_grid,
    row_width,
)
from daygrid.service.style import color_style
from daygrid.time import MINUTES_PER_DAY, absolute_day_to_display_str
from daygrid.view.timeline import grid_to_plain_rows, grid_to_rich_text

BLUE = color_style("blue")
GREEN = color_style("green")


class TestColumnIndex:
    def test_window_start_maps_to_first_column(self):
        assert column_index(270) == 1
        assert column_index(279) == 1
        assert column_index(280) == 2

    def test_minutes_before_offset_wrap_to_end_of_row(self):
        assert column_index(269) == 144
        assert column_index(0) == 118

    def test_monotonic_across_display_window(self):
        columns = [
            column_index(minute % MINUTES_PER_DAY)
            for minute in range(270, 270 + MINUTES_PER_DAY)
        ]

        assert columns == sorted(columns)
        assert columns[0] == 1
        assert columns[-1] == 144

    def test_custom_offset_and_quantum(self):
        assert column_index(0, day_start_offset_minutes=0, quantum_minutes=30) == 1
        assert column_index(90, day_start_offset_minutes=0, quantum_minutes=30) == 4
        assert row_width(30) == 49


class TestRegionColumns:
    def test_half_open_range(self, make_interval):
        assert region_columns(make_interval(at(0, 10), at(0, 11))) == (34, 40)

    def test_zero_width_is_widened_to_one_column(self, make_interval):
        assert region_columns(make_interval(at(0, 10), at(0, 10))) == (34, 35)
        assert region_columns(make_interval(at(0, 10), at(0, 10, 5))) == (34, 35)

    def test_end_wrapping_before_start_is_clamped(self, make_interval):
        # 23:50 + 1410 minutes ends at 23:20 the next day
        interval = make_interval(at(0, 23, 50), at(1, 23, 20))

        assert region_columns(interval) == (117, 145)

    def test_end_at_window_start_fills_to_end_of_row(self, make_interval):
        assert region_columns(make_interval(at(0, 3), at(0, 4, 30))) == (136, 145)


class TestHeaderRow:
    def test_hour_labels(self):
        header = build_header_row()
        text = "".join(cell["char"] for cell in header["cells"])

        assert len(header["cells"]) == 145
        assert header["day"] is None
        assert text.startswith("|   |05:00|06:00|07:00")
        assert text.endswith("|03:00|04")

    def test_coarse_quantum_skips_labels_that_do_not_fit(self):
        header = build_header_row(day_start_offset_minutes=0, quantum_minutes=60)
        text = "".join(cell["char"] for cell in header["cells"])

        assert len(text) == 25
        assert text.startswith("||00:00|06:00")


class TestRenderGrid:
    def test_overlap_is_stamped_with_conflict_style(self, make_interval):
        a = make_interval(at(0, 10), at(0, 11), label="A", style=BLUE)
        b = make_interval(at(0, 10, 30), at(0, 10, 45), label="B", style=GREEN)

        grid = render_grid([a, b])
        cells = grid["rows"][1]["cells"]

        assert cells[37]["style"] == CONFLICT_STYLE
        assert cells[37]["overlap"] is True
        assert cells[37]["occupied"] is True
        assert cells[37]["char"] == CONFLICT_CHAR
        assert cells[37]["label"] == "B"
        for column in (34, 35, 36, 38, 39):
            assert cells[column]["style"] == BLUE
            assert cells[column]["overlap"] is False
            assert cells[column]["char"] == OCCUPIED_CHAR
            assert cells[column]["label"] == "A"
        assert cells[33]["occupied"] is False
        assert cells[40]["occupied"] is False

        first, second = grid["regions"]
        assert (first["start_column"], first["end_column"]) == (34, 40)
        assert first["overlap"] is False
        assert first["style"] == BLUE
        assert (second["start_column"], second["end_column"]) == (37, 38)
        assert second["overlap"] is True
        assert second["style"] == CONFLICT_STYLE
        assert second["label"] == "B"

    def test_no_conflict_without_overlap(self, make_interval):
        intervals = [
            make_interval(at(0, 9), at(0, 10), style=BLUE),
            make_interval(at(0, 10), at(0, 11), style=GREEN),
            make_interval(at(1, 10), at(1, 11), style=BLUE),
        ]

        grid = render_grid(intervals)

        assert not any(region["overlap"] for region in grid["regions"])
        for row in grid["rows"]:
            for cell in row["cells"]:
                assert cell["style"] != CONFLICT_STYLE
                assert cell["overlap"] is False

    def test_same_columns_on_different_days_do_not_conflict(self, make_interval):
        grid = render_grid(
            [
                make_interval(at(0, 10), at(0, 11)),
                make_interval(at(1, 10), at(1, 11)),
            ]
        )

        assert [region["row_index"] for region in grid["regions"]] == [1, 2]
        assert not any(region["overlap"] for region in grid["regions"])

    def test_gap_day_gets_an_unstyled_row(self, make_interval):
        grid = render_grid(
            [
                make_interval(at(0, 9), at(0, 10), label="first"),
                make_interval(at(2, 9), at(2, 10), label="third"),
            ]
        )

        assert len(grid["rows"]) == 4
        assert [row["day"] for row in grid["rows"]] == [
            None,
            BASE_DAY,
            BASE_DAY + 1,
            BASE_DAY + 2,
        ]
        gap = grid["rows"][2]
        assert gap["label"] == absolute_day_to_display_str(BASE_DAY + 1)
        assert all(not cell["occupied"] for cell in gap["cells"])
        assert all(cell["style"] is None for cell in gap["cells"])
        assert all(not cell["elapsed"] for cell in gap["cells"])
        assert [region["row_index"] for region in grid["regions"]] == [1, 3]

    def test_rows_have_constant_width(self, make_interval):
        grid = render_grid(
            [make_interval(at(0, 9), at(0, 10)), make_interval(at(3, 9), at(3, 10))]
        )

        assert {len(row["cells"]) for row in grid["rows"]} == {145}
        assert all(row["cells"][0]["char"] == "|" for row in grid["rows"][1:])

    def test_elapsed_shading_applies_to_current_day_only(self, make_interval):
        now = at(1, 12)
        grid = render_grid(
            [
                make_interval(at(0, 9), at(0, 10)),
                make_interval(at(2, 9), at(2, 10)),
            ],
            now=now,
        )
        now_column = column_index(12 * 60)

        header, past, today, future = grid["rows"]
        for row in (header, today):
            assert all(cell["elapsed"] for cell in row["cells"][1 : now_column + 1])
            assert not any(cell["elapsed"] for cell in row["cells"][now_column + 1 :])
            assert row["cells"][0]["elapsed"] is False
        assert not any(cell["elapsed"] for cell in past["cells"])
        assert not any(cell["elapsed"] for cell in future["cells"])
        assert grid["now"] == now

    def test_no_intervals_yields_header_only(self):
        grid = render_grid([], now=at(0, 12))

        assert len(grid["rows"]) == 1
        assert grid["regions"] == []
        assert any(cell["elapsed"] for cell in grid["rows"][0]["cells"])

    def test_no_shading_without_now(self, make_interval):
        grid = render_grid([make_interval(at(0, 9), at(0, 10))])

        for row in grid["rows"]:
            assert not any(cell["elapsed"] for cell in row["cells"])

    def test_rendering_is_idempotent(self, make_interval):
        intervals = [
            make_interval(at(0, 10), at(0, 11), label="A", style=BLUE),
            make_interval(at(0, 10, 30), at(0, 10, 45), label="B", style=GREEN),
            make_interval(at(2, 23, 50), at(3, 23, 20), label="C"),
        ]

        first = render_grid(intervals, now=at(0, 10, 40))
        second = render_grid(intervals, now=at(0, 10, 40))

        assert first == second
        assert grid_to_plain_rows(first) == grid_to_plain_rows(second)
        assert grid_to_rich_text(first).spans == grid_to_rich_text(second).spans

    def test_mutating_a_grid_does_not_leak_into_later_renders(self, make_interval):
        intervals = [
            make_interval(at(0, 10), at(0, 11), label="A", style=BLUE),
            make_interval(at(0, 10, 30), at(0, 10, 45), label="B"),
        ]
        first = render_grid(intervals)
        first["regions"][1]["style"]["value"] = "mutated"
        first["regions"][0]["style"]["value"] = "mutated"

        second = render_grid(intervals)

        assert second["regions"][1]["style"] == CONFLICT_STYLE
        assert second["regions"][0]["style"] == BLUE
        assert CONFLICT_STYLE["value"] == "conflict"
        assert BLUE["value"] == "blue"

    def test_elapsed_shading_before_the_day_start_offset(self, make_interval):
        grid = render_grid([make_interval(at(0, 10), at(0, 11))], now=at(0, 1))
        midnight_column = column_index(0)
        now_column = column_index(60)

        for row in grid["rows"][:2]:
            cells = row["cells"]
            assert not any(cell["elapsed"] for cell in cells[:midnight_column])
            passed = cells[midnight_column : now_column + 1]
            assert all(cell["elapsed"] for cell in passed)
            assert not any(cell["elapsed"] for cell in cells[now_column + 1 :])
        assert grid["rows"][1]["cells"][column_index(600)]["elapsed"] is False

    def test_label_does_not_erase_previous_label(self, make_interval):
        grid = render_grid(
            [
                make_interval(at(0, 10), at(0, 11), label="A"),
                make_interval(at(0, 10, 30), at(0, 10, 45)),
            ]
        )

        assert grid["rows"][1]["cells"][37]["label"] == "A"
        assert grid["regions"][1]["label"] is None

    def test_out_of_order_input_fails_fast(self, make_interval):
        later = make_interval(at(0, 11), at(0, 12), label="later")
        earlier = make_interval(at(0, 9), at(0, 10), label="earlier")

        with pytest.raises(PreconditionError) as excinfo:
            render_grid([later, earlier])

        assert excinfo.value.previous is later
        assert excinfo.value.current is earlier
        assert "'earlier'" in str(excinfo.value)

    def test_interval_ending_before_start_is_rejected(self, make_interval):
        with pytest.raises(ValueError):
            render_grid([make_interval(at(0, 11), at(0, 10))])

    @pytest.mark.parametrize(
        "options",
        [
            {"quantum_minutes": 7},
            {"quantum_minutes": 0},
            {"day_start_offset_minutes": -1},
            {"day_start_offset_minutes": 1440},
            {"overlap_detection": "fuzzy"},
        ],
    )
    def test_invalid_options(self, options):
        with pytest.raises(ValueError):
            render_grid([], **options)


class TestOverlapDetection:
    def _wrapped_and_spanning(self, make_interval):
        # 02:00 lands at the end of the row; the evening interval reaches
        # across it without touching either of its own boundary columns
        return [
            make_interval(at(0, 2), at(0, 3), label="night"),
            make_interval(at(0, 22), at(0, 22) + 330, label="evening"),
        ]

    def test_endpoint_sampling_misses_interior_overlap(self, make_interval):
        grid = render_grid(self._wrapped_and_spanning(make_interval))

        night, evening = grid["regions"]
        assert (night["start_column"], night["end_column"]) == (130, 136)
        assert (evening["start_column"], evening["end_column"]) == (106, 139)
        assert evening["overlap"] is False

    def test_full_scan_detects_interior_overlap(self, make_interval):
        grid = render_grid(
            self._wrapped_and_spanning(make_interval), overlap_detection=OVERLAP_FULL
        )

        evening = grid["regions"][1]
        assert evening["overlap"] is True
        assert evening["style"] == CONFLICT_STYLE
        cells = grid["rows"][1]["cells"]
        assert all(cell["overlap"] for cell in cells[106:139])

    def test_endpoint_sampling_checks_the_end_column(self, make_interval):
        grid = render_grid(
            [
                make_interval(at(0, 2), at(0, 3), label="night"),
                make_interval(at(0, 22), at(1, 2, 5), label="evening"),
            ]
        )

        assert grid["regions"][1]["end_column"] == 130
        assert grid["regions"][1]["overlap"] is True


def test_regions_for_row(make_interval):
    grid = render_grid(
        [
            make_interval(at(0, 9), at(0, 10), label="a"),
            make_interval(at(1, 9), at(1, 10), label="b"),
            make_interval(at(1, 11), at(1, 12), label="c"),
        ]
    )

    assert [region["label"] for region in regions_for_row(grid, 2)] == ["b", "c"]
    assert regions_for_row(grid, 0) == []
