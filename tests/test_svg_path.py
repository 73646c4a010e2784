import math

import pytest

from xmlui.svg_path import (
    COMMON_ICONS,
    Path,
    PathCommand,
    PathOp,
    arc_to_bezier,
    parse_path_data,
    parse_path_data_scaled,
    tokenize_path_data,
)


def test_tokenize_basic_commands():
    cmds = tokenize_path_data("M10 20 L30,40 z")
    assert cmds == [
        PathCommand("M", [10.0, 20.0], True),
        PathCommand("L", [30.0, 40.0], True),
        PathCommand("Z", [], False),
    ]


def test_tokenize_relative_is_uppercased_and_not_absolute():
    cmds = tokenize_path_data("l5 6")
    assert cmds[0].command == "L"
    assert cmds[0].absolute is False
    assert cmds[0].args == [5.0, 6.0]


def test_tokenize_sign_separates_numbers():
    assert tokenize_path_data("M10-5")[0].args == [10.0, -5.0]


def test_tokenize_second_decimal_point_starts_number():
    assert tokenize_path_data("M.5.5")[0].args == [0.5, 0.5]


def test_tokenize_packed_arc_flags():
    cmds = tokenize_path_data("a1 1 0 11 5 5")
    assert cmds[0].args == [1.0, 1.0, 0.0, 1.0, 1.0, 5.0, 5.0]


def test_tokenize_drops_numbers_before_first_command():
    cmds = tokenize_path_data("1 2 M3 4")
    assert len(cmds) == 1
    assert cmds[0].args == [3.0, 4.0]


def test_parse_empty_returns_none():
    assert parse_path_data("") is None
    assert parse_path_data("   ") is None


def test_parse_absolute_move_and_line():
    path = parse_path_data("M10 20 L30 40")
    assert path.ops == [PathOp("M", (10.0, 20.0)), PathOp("L", (30.0, 40.0))]


def test_relative_matches_absolute():
    assert parse_path_data("m10 10 l5 5 c1 1 2 2 3 3") == parse_path_data(
        "M10 10 L15 15 C16 16 17 17 18 18"
    )


def test_horizontal_and_vertical_lines():
    assert parse_path_data("M1 2 H5 V7") == parse_path_data("M1 2 L5 2 L5 7")


def test_extra_move_pairs_become_lines():
    assert parse_path_data("M1 2 3 4") == parse_path_data("M1 2 L3 4")


def test_close_resets_current_point_to_subpath_start():
    assert parse_path_data("M1 1 L5 1 Z l1 1") == parse_path_data("M1 1 L5 1 Z L2 2")


def test_smooth_cubic_reflects_previous_control():
    path = parse_path_data("M0 0 C1 2 3 4 5 6 S7 8 9 10")
    prev = path.ops[1].points
    smooth = path.ops[2].points
    assert smooth[0] == 2 * prev[4] - prev[2]
    assert smooth[1] == 2 * prev[5] - prev[3]


def test_smooth_cubic_without_previous_uses_current_point():
    path = parse_path_data("M4 5 S7 8 9 10")
    assert path.ops[1].points[:2] == (4.0, 5.0)


def test_smooth_quadratic_reflects_previous_control():
    path = parse_path_data("M0 0 Q1 2 3 4 T9 10")
    prev = path.ops[1].points
    smooth = path.ops[2].points
    assert smooth[:2] == (2 * prev[2] - prev[0], 2 * prev[3] - prev[1])


def test_scaled_parse_maps_every_point():
    d = "M1 2 L3 4 Q5 6 7 8 Z"
    plain = parse_path_data(d)
    scaled = parse_path_data_scaled(d, 10, 20, 2, 3)
    assert len(plain) == len(scaled)
    for a, b in zip(plain, scaled):
        assert a.kind == b.kind
        assert b.points[0::2] == tuple(10 + x * 2 for x in a.points[0::2])
        assert b.points[1::2] == tuple(20 + y * 3 for y in a.points[1::2])


def test_arc_zero_radius_is_line():
    path = Path()
    arc_to_bezier(path, 0, 0, 0, 5, 0, False, True, 7, 8)
    assert path.ops == [PathOp("L", (7, 8))]


def test_arc_points_lie_on_circle():
    path = parse_path_data("M0 0 A10 10 0 0 1 20 0")
    cubics = [op for op in path if op.kind == "C"]
    assert len(cubics) >= 2
    for op in cubics:
        x, y = op.end
        assert math.hypot(x - 10, y) == pytest.approx(10, abs=1e-9)
    assert cubics[-1].end == pytest.approx((20, 0), abs=1e-9)


def test_arc_sweep_flag_chooses_side():
    up = parse_path_data("M0 0 A10 10 0 0 1 20 0")
    down = parse_path_data("M0 0 A10 10 0 0 0 20 0")
    up_y = [op.end[1] for op in up if op.kind == "C"][0]
    down_y = [op.end[1] for op in down if op.kind == "C"][0]
    assert up_y * down_y < 0


def test_arc_small_radius_is_scaled_up_to_reach_end():
    path = parse_path_data("M0 0 A1 1 0 0 1 20 0")
    assert [op for op in path if op.kind == "C"][-1].end == pytest.approx((20, 0), abs=1e-9)


def test_bounds_of_empty_path_is_none():
    assert Path().bounds() is None


def test_bounds_cover_points():
    path = parse_path_data("M18 6L6 18M6 6l12 12")
    assert path.bounds() == (6.0, 6.0, 12.0, 12.0)


@pytest.mark.parametrize("name", sorted(COMMON_ICONS))
def test_common_icons_parse(name):
    path = parse_path_data(COMMON_ICONS[name])
    assert path.ops[0].kind == "M"
    x, y, w, h = path.bounds()
    assert x >= -1 and y >= -1
    assert x + w <= 25 and y + h <= 25


def test_path_builder_records_ops():
    path = Path()
    path.move_to(1, 2)
    path.line_to(3, 4)
    path.quad_to(5, 6, 7, 8)
    path.cubic_to(1, 1, 2, 2, 3, 3)
    path.close()
    assert [op.kind for op in path] == ["M", "L", "Q", "C", "Z"]
    assert path.ops[-1].end is None
    assert path.ops[3].end == (3, 3)