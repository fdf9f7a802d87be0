"""Tests for the normalizer (tokens -> absolute M/L/C/Q/Z)."""

import math

import pytest

from pathnorm.svg.commands import CANONICAL_KINDS, CanonicalCommand, Token
from pathnorm.svg.formatter import format_commands
from pathnorm.svg.normalizer import is_unusable, normalize
from pathnorm.svg.tokenizer import tokenize
from tests.conftest import CANONICAL_PATH, HOME_PATH


def _norm(path_data: str) -> list[CanonicalCommand]:
    return normalize(tokenize(path_data))


def _cmd(kind: str, *params: float) -> CanonicalCommand:
    return CanonicalCommand(kind, tuple(float(p) for p in params))


def test_relative_move_and_line_accumulate():
    result = normalize([Token("m", (10.0, 20.0)), Token("l", (30.0, 40.0))])
    assert result == [_cmd("M", 10, 20), _cmd("L", 40, 60)]


def test_horizontal_and_vertical_become_lines():
    assert _norm("M 0 10 H 50")[1] == _cmd("L", 50, 10)
    assert _norm("M 10 0 V 50")[1] == _cmd("L", 10, 50)
    assert _norm("M 10 20 h 30")[1] == _cmd("L", 40, 20)
    assert _norm("M 10 20 v 30")[1] == _cmd("L", 10, 50)


def test_repeated_horizontal_groups():
    assert _norm("M 0 0 h 10 10 10") == [_cmd("M", 0, 0), _cmd("L", 10, 0), _cmd("L", 20, 0), _cmd("L", 30, 0)]


def test_extra_moveto_pairs_are_linetos():
    assert _norm("M 10 10 20 20 30 30") == [_cmd("M", 10, 10), _cmd("L", 20, 20), _cmd("L", 30, 30)]
    assert _norm("m 10 10 5 5") == [_cmd("M", 10, 10), _cmd("L", 15, 15)]


def test_relative_cubic():
    assert _norm("M 10 10 c 1 2 3 4 5 6")[1] == _cmd("C", 11, 12, 13, 14, 15, 16)


def test_smooth_cubic_reflects_previous_cubic():
    result = _norm("M 0 0 C 10 20 30 40 50 60 S 90 80 100 100")
    assert result[2].kind == "C"
    assert result[2].params[:2] == pytest.approx((70, 80))
    assert result[2].params[2:] == pytest.approx((90, 80, 100, 100))


def test_smooth_cubic_without_previous_cubic_uses_current_point():
    assert _norm("M 10 10 S 20 20 30 30")[1] == _cmd("C", 10, 10, 20, 20, 30, 30)


def test_smooth_cubic_after_quadratic_does_not_reflect():
    result = _norm("M 0 0 Q 5 5 10 0 S 15 5 20 0")
    assert result[2].params[:2] == (10.0, 0.0)


def test_smooth_cubic_repeated_groups_chain_reflection():
    result = _norm("M0 0 S 10 10 20 0 30 -10 40 0")
    assert result[1] == _cmd("C", 0, 0, 10, 10, 20, 0)
    assert result[2] == _cmd("C", 30, -10, 30, -10, 40, 0)


def test_relative_smooth_cubic():
    result = _norm("M 0 0 c 10 0 20 10 30 10 s 10 -10 20 -10")
    assert result[2] == _cmd("C", 40, 10, 40, 0, 50, 0)


def test_smooth_quadratic_reflects_previous_quadratic():
    result = _norm("M 0 0 Q 10 20 30 30 T 60 60")
    assert result[2].kind == "Q"
    assert result[2].params == pytest.approx((50, 40, 60, 60))


def test_smooth_quadratic_chain():
    result = _norm("M 0 0 Q 10 10 20 0 T 40 0 T 60 0")
    assert result[2] == _cmd("Q", 30, -10, 40, 0)
    assert result[3] == _cmd("Q", 50, 10, 60, 0)


def test_smooth_quadratic_without_previous_quadratic_uses_current_point():
    assert _norm("M 5 5 T 10 10")[1] == _cmd("Q", 5, 5, 10, 10)
    result = _norm("M 0 0 C 1 1 2 2 3 3 T 10 10")
    assert result[2] == _cmd("Q", 3, 3, 10, 10)


def test_smooth_cubic_after_arc_does_not_reflect():
    result = _norm("M 0 0 A 10 10 0 0 1 20 0 S 30 10 40 0")
    assert result[-1].params[:2] == (20.0, 0.0)


def test_close_returns_cursor_to_subpath_start():
    assert _norm("M 10 10 L 20 20 z m 5 5")[-1] == _cmd("M", 15, 15)


def test_drawing_after_close_opens_new_subpath():
    assert _norm("M 10 10 L 20 10 Z l 5 5") == [
        _cmd("M", 10, 10),
        _cmd("L", 20, 10),
        _cmd("Z"),
        _cmd("M", 10, 10),
        _cmd("L", 15, 15),
    ]


def test_drawing_without_moveto_starts_at_origin():
    assert normalize([Token("L", (10.0, 10.0))]) == [_cmd("M", 0, 0), _cmd("L", 10, 10)]


def test_incomplete_groups_are_ignored():
    assert _norm("M 0 0 L 10") == [_cmd("M", 0, 0)]
    assert _norm("M 0 0 L 10 10 20") == [_cmd("M", 0, 0), _cmd("L", 10, 10)]
    assert _norm("M 0 0 C 1 2 3") == [_cmd("M", 0, 0)]
    assert _norm("M 0 0 A 1 1 0 0 1") == [_cmd("M", 0, 0)]


def test_zero_radius_arc_is_a_line():
    assert _norm("M 0 0 A 0 10 0 0 1 50 50") == [_cmd("M", 0, 0), _cmd("L", 50, 50)]


def test_coincident_arc_emits_nothing():
    assert _norm("M 10 10 A 5 5 0 0 1 10 10") == [_cmd("M", 10, 10)]


def test_arc_becomes_cubics():
    result = _norm("M 0 0 A 25 25 0 0 1 50 0")
    assert len(result) >= 2
    for cmd in result[1:]:
        assert cmd.kind == "C"
        assert len(cmd.params) == 6
    assert result[-1].end_point == (50.0, 0.0)


def test_relative_arc_endpoint():
    result = _norm("M 10 10 a 5 5 0 0 1 10 0 l 1 1")
    assert result[-2].end_point == (20.0, 10.0)
    assert result[-1] == _cmd("L", 21, 11)


def test_output_has_only_canonical_kinds():
    kinds = {cmd.kind for cmd in _norm(HOME_PATH + " m 1 1 s 1 1 2 2 t 3 3 h 1 v 1")}
    assert kinds <= CANONICAL_KINDS


def test_every_subpath_starts_with_moveto():
    for path_data in ("M 0 0 L 1 1 Z L 2 2 Z M 5 5 L 6 6", "Z L 1 1", "M 0 0 L 5 5 Z Z", "z z m 1 1 z"):
        result = _norm(path_data)
        for i, cmd in enumerate(result):
            if i == 0 or result[i - 1].kind == "Z":
                assert cmd.kind == "M"


def test_canonical_input_is_unchanged():
    first = _norm(CANONICAL_PATH)
    assert _norm(format_commands(first)) == first
    assert first == [
        _cmd("M", 0, 0),
        _cmd("L", 10, 0),
        _cmd("C", 10, 5, 5, 10, 0, 10),
        _cmd("Z"),
        _cmd("M", 20, 20),
        _cmd("L", 30, 30),
    ]


def test_empty_tokens():
    assert normalize([]) == []


def test_is_unusable():
    assert not is_unusable("", [])
    assert not is_unusable("  \n", [])
    assert is_unusable("M", _norm("M"))
    assert is_unusable("M 10", _norm("M 10"))
    assert not is_unusable("M 0 0", _norm("M 0 0"))


def test_overflowing_numbers_never_reach_the_output():
    assert _norm("M 0 0 A 5 5 1e999 0 1 10 0") == [_cmd("M", 0, 0)]
    assert _norm("M 0 0 L 1e999 0") == [_cmd("M", 0, 0)]


def test_non_finite_groups_in_hand_built_tokens_are_skipped():
    tokens = [
        Token("M", (0.0, 0.0)),
        Token("L", (math.inf, 0.0, 5.0, 5.0)),
        Token("A", (5.0, 5.0, math.inf, 0.0, 1.0, 10.0, 0.0)),
    ]
    assert normalize(tokens) == [_cmd("M", 0, 0), _cmd("L", 5, 5)]


def test_stray_close_is_ignored():
    assert _norm("Z L 1 1") == [_cmd("M", 0, 0), _cmd("L", 1, 1)]
    assert _norm("M 0 0 L 5 5 Z Z") == [_cmd("M", 0, 0), _cmd("L", 5, 5), _cmd("Z")]
    assert _norm("Z") == []
