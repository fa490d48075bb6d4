"""Tests for the path-data tokenizer and state machine."""

import numpy as np
import pytest

from pathsampler.engine.pathdata import (
    PathCommand,
    PathDataMachine,
    is_closed,
    sample_path_data,
    sample_subpath,
    split_subpaths,
    tokenize,
)
from pathsampler.utils.bezier import quadratic_points


def _contains(points, xy, tol=1e-9):
    return bool(np.any(np.all(np.abs(points - np.asarray(xy)) < tol, axis=1)))


# ── Tokenizer ──────────────────────────────────────────────────────────────


def test_tokenize_letters_and_args():
    cmds = tokenize("M10,20 l5 -5 H 0 z")
    assert [c.letter for c in cmds] == ["M", "l", "H", "z"]
    assert cmds[0].args == (10.0, 20.0)
    assert cmds[1].args == (5.0, -5.0)
    assert cmds[1].relative
    assert cmds[3].args == ()


def test_tokenize_compact_numbers():
    cmds = tokenize("M15 21v-8a1 1 0 0 0-1-1h-4")
    assert [c.kind for c in cmds] == ["M", "V", "A", "H"]
    assert cmds[2].args == (1.0, 1.0, 0.0, 0.0, 0.0, -1.0, -1.0)


def test_split_subpaths_keeps_move_with_subpath():
    parts = split_subpaths("M0 0 L1 1 Z m5 5 l1 0")
    assert parts == ["M0 0 L1 1 Z ", "m5 5 l1 0"]


def test_split_subpaths_drops_blank_parts():
    assert split_subpaths("   ") == []
    assert split_subpaths("") == []


def test_is_closed_checks_trailing_token():
    assert is_closed("M0 0 L1 0 L1 1 Z")
    assert is_closed("M0 0 L1 0 z  ")
    assert not is_closed("M0 0 Z L1 1")
    assert not is_closed("M0 0 L0 0")


# ── State machine ──────────────────────────────────────────────────────────


def test_square_path_keeps_vertices_and_closes():
    pts = sample_subpath("M 10 10 L 90 10 L 90 90 Z", density=5.0)
    assert tuple(pts[0]) == (10.0, 10.0)
    assert _contains(pts, (90, 10))
    assert _contains(pts, (90, 90))
    assert tuple(pts[-1]) == (10.0, 10.0)


def test_move_always_emitted():
    pts = sample_subpath("M 3 4", density=1.0)
    assert pts.tolist() == [[3.0, 4.0]]


def test_line_does_not_duplicate_current_point():
    pts = sample_subpath("M0 0 L10 0", density=5.0)
    assert pts.tolist() == [[0.0, 0.0], [5.0, 0.0], [10.0, 0.0]]


def test_relative_line_and_hv():
    pts = sample_subpath("M10 10 l10 0 v10 h-10 V10", density=100.0)
    assert pts.tolist() == [[10, 10], [20, 10], [20, 20], [10, 20], [10, 10]]


def test_absolute_hv():
    pts = sample_subpath("M0 0 H5 V7", density=100.0)
    assert pts.tolist() == [[0, 0], [5, 0], [5, 7]]


def test_cubic_emits_all_but_first():
    pts = sample_subpath("M0 0 C0 10 10 10 10 0", density=1.0)
    # 10 segments -> 11 curve points, first dropped, plus the move-to
    assert len(pts) == 11
    assert tuple(pts[-1]) == (10.0, 0.0)


def test_relative_cubic_offsets_from_current_point():
    a = sample_subpath("M5 5 c0 10 10 10 10 0", density=1.0)
    b = sample_subpath("M5 5 C5 15 15 15 15 5", density=1.0)
    assert np.allclose(a, b)


def test_quadratic_then_smooth_reflects_control():
    density = 2.0
    pts = sample_subpath("M0 0 Q5 10 10 0 T20 0", density=density)
    # T's control is (10,0) reflected: 2*(10,0) - (5,10) = (15,-10)
    expected = quadratic_points((10, 0), (15, -10), (20, 0), density)[1:]
    assert np.allclose(pts[-len(expected):], expected)
    # the second arc dips below the axis
    assert pts[-len(expected):, 1].min() < 0


def test_smooth_chain_reflects_previous_reflection():
    machine = PathDataMachine(density=5.0)
    machine.run(tokenize("M0 0 Q5 10 10 0 T20 0 T30 0"))
    # first T control = (15,-10); second T control = 2*(20,0) - (15,-10) = (25,10)
    assert machine.state.last_control == (25.0, 10.0)
    assert machine.state.current == (30.0, 0.0)


def test_smooth_after_move_uses_current_point():
    # no preceding Q: control point resets to the move-to target, so T is straight
    pts = sample_subpath("M0 0 T10 0", density=5.0)
    assert np.allclose(pts[:, 1], 0.0)


def test_close_interpolates_back_to_start():
    pts = sample_subpath("M0 0 L10 0 L10 10 z", density=5.0)
    # closing edge from (10,10) to (0,0): length 14.1 -> 2 segments
    assert tuple(pts[-1]) == (0.0, 0.0)
    assert np.allclose(pts[-2], (5.0, 5.0))


def test_close_already_at_start_adds_nothing():
    pts = sample_subpath("M0 0 L10 0 L0 0 Z", density=100.0)
    assert pts.tolist() == [[0, 0], [10, 0], [0, 0]]


def test_close_resets_current_to_start():
    machine = PathDataMachine(density=100.0)
    machine.run(tokenize("M1 1 L5 1 Z l2 0"))
    assert machine.state.current == (3.0, 1.0)


def test_open_subpath_never_self_closes():
    pts = sample_subpath("M0 0 L10 0 L10 10", density=100.0)
    assert tuple(pts[-1]) == (10.0, 10.0)


def test_close_paths_disabled_skips_closure_point():
    pts = sample_subpath("M0 0 L10 0 L10 10 L0 10 L0 0.5 Z", density=100.0, close_paths=False)
    # Z itself still draws back to start; only the explicit closure duplicate is governed
    assert tuple(pts[-1]) == (0.0, 0.0)


def test_unsupported_command_warns_and_continues():
    warnings = []
    pts = sample_subpath("M3 10 A2 2 0 0 1 5 8 L10 8", density=100.0, on_warning=warnings.append)
    assert warnings == ["Unsupported path command: A"]
    # arc skipped; line runs from the move-to point
    assert pts.tolist() == [[3, 10], [10, 8]]


def test_smooth_cubic_unsupported():
    warnings = []
    sample_subpath("M0 0 C0 5 5 5 5 0 S10 -5 10 0", density=1.0, on_warning=warnings.append)
    assert warnings == ["Unsupported path command: S"]


def test_insufficient_args_skipped_entirely():
    pts = sample_subpath("M0 0 L5 C1 2 3 L10 0", density=100.0)
    assert pts.tolist() == [[0, 0], [10, 0]]


def test_malformed_numbers_dropped():
    pts = sample_subpath("M0,0 L foo 10 0", density=100.0)
    assert pts.tolist() == [[0, 0], [10, 0]]


def test_extra_argument_groups_ignored():
    pts = sample_subpath("M0 0 L10 0 20 0", density=100.0)
    assert pts.tolist() == [[0, 0], [10, 0]]


def test_path_data_splits_and_resets_cursor_per_subpath():
    paths = sample_path_data("M10 10 L20 10 Z m5 5 l1 0", density=100.0)
    assert len(paths) == 2
    assert tuple(paths[0][-1]) == (10.0, 10.0)
    # relative move in a new sub-path starts from the origin
    assert paths[1].tolist() == [[5, 5], [6, 5]]


def test_path_data_without_leading_move_starts_at_origin():
    (pts,) = sample_path_data("L10 0", density=100.0)
    assert pts.tolist() == [[10, 0]]


def test_empty_path_data():
    assert sample_path_data("", density=1.0) == []
    assert sample_path_data("Z", density=1.0) == []


def test_on_points_sees_every_chunk():
    seen = []
    sample_subpath("M0 0 L10 0 L10 10", density=5.0, on_points=seen.append)
    assert seen == [1, 2, 2]


class _Refused(Exception):
    pass


def _refuse_large(count):
    if count > 1:
        raise _Refused(count)


@pytest.mark.parametrize("d", ["M0 0 L1e13 0", "M0 0 Q5e12 5e12 1e13 0", "M0 0 C0 1 1e13 1 1e13 0"])
def test_on_points_runs_before_the_chunk_is_built(d):
    machine = PathDataMachine(density=0.5, on_points=_refuse_large)
    with pytest.raises(_Refused) as exc:
        machine.run(tokenize(d))
    assert exc.value.args[0] >= 2e13
    assert machine.points().tolist() == [[0.0, 0.0]]


def test_step_accepts_single_command():
    machine = PathDataMachine(density=1.0)
    machine.step(PathCommand("M", (2.0, 3.0)))
    assert machine.state.subpath_start == (2.0, 3.0)
    assert machine.points().tolist() == [[2.0, 3.0]]


@pytest.mark.parametrize("d", ["M0 0 L1e3 0", "M0 0 Q500 500 1000 0", "M0 0 C0 1 1 1 1 0 Z"])
def test_all_points_finite(d):
    (pts,) = sample_path_data(d, density=3.0)
    assert np.all(np.isfinite(pts))
