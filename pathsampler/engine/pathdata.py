"""Path-data (``d`` attribute) tokenizer and sampling state machine.

The machine walks one sub-path's commands in order, threading an explicit
CursorState, and emits an Nx2 point array. Structural vertices (move-to
targets, line ends, curve ends) are always emitted exactly; the points in
between are spaced by ``density``.

Malformed input never raises: bad numbers are dropped, commands with too
few arguments are skipped, and unsupported commands (``S``, ``A``) are
reported through ``on_warning`` and skipped.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterator
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from pathsampler.engine.context import CursorState
from pathsampler.utils.bezier import cubic_points, curve_segments, quadratic_points
from pathsampler.utils.geometry import CLOSE_TOLERANCE, close_path, empty_path, interpolate, interpolated_size
from pathsampler.utils.numbers import parse_numbers

logger = logging.getLogger(__name__)

_COMMAND_RE = re.compile(r"[MLHVCSQTAZmlhvcsqtaz][^MLHVCSQTAZmlhvcsqtaz]*")
_SUBPATH_SPLIT_RE = re.compile(r"(?=[Mm])")
_CLOSED_RE = re.compile(r"[Zz]\s*$")

# Arguments each supported command needs. S and A are tokenized but not drawn.
_ARITY = {"M": 2, "L": 2, "H": 1, "V": 1, "C": 6, "Q": 4, "T": 2, "Z": 0}


@dataclass(frozen=True)
class PathCommand:
    letter: str
    args: tuple[float, ...]

    @property
    def kind(self) -> str:
        return self.letter.upper()

    @property
    def relative(self) -> bool:
        return self.letter.islower()


def tokenize(d: str) -> list[PathCommand]:
    """Split path data into commands, each a letter plus its numeric arguments."""
    return [PathCommand(run[0], tuple(parse_numbers(run[1:]))) for run in _COMMAND_RE.findall(d)]


def split_subpaths(d: str) -> list[str]:
    """Split at every M/m, keeping the move-to with the sub-path it starts."""
    return [part for part in _SUBPATH_SPLIT_RE.split(d) if part.strip()]


def is_closed(subpath: str) -> bool:
    """A sub-path is closed only when its last command is Z/z."""
    return bool(_CLOSED_RE.search(subpath.strip()))


class PathDataMachine:
    """Samples the commands of one sub-path.

    A fresh machine (and CursorState) is used per sub-path, so nothing
    leaks between sub-paths or between calls.
    """

    def __init__(
        self,
        density: float,
        on_warning: Callable[[str], None] | None = None,
        on_points: Callable[[int | float], None] | None = None,
    ) -> None:
        self.density = density
        self.state = CursorState()
        self._on_warning = on_warning
        # Called with the size of every chunk before it is built
        self._on_points = on_points
        self._chunks: list[NDArray[np.float64]] = []

    # ── Public API ───────────────────────────────────────────────────────

    def run(self, commands: list[PathCommand]) -> NDArray[np.float64]:
        for cmd in commands:
            self.step(cmd)
        return self.points()

    def points(self) -> NDArray[np.float64]:
        if not self._chunks:
            return empty_path()
        return np.vstack(self._chunks)

    def step(self, cmd: PathCommand) -> None:
        """Consume one command, updating the cursor and emitting points."""
        kind = cmd.kind
        handler = _HANDLERS.get(kind)
        if handler is None:
            self._warn(f"Unsupported path command: {cmd.letter}")
            return
        if len(cmd.args) < _ARITY[kind]:
            logger.debug("Skipping %s: needs %d args, got %d", cmd.letter, _ARITY[kind], len(cmd.args))
            return
        handler(self, cmd)

    # ── Helpers ──────────────────────────────────────────────────────────

    def _warn(self, message: str) -> None:
        if self._on_warning is not None:
            self._on_warning(message)
        else:
            logger.warning(message)

    def _reserve(self, count: int | float) -> None:
        if count and self._on_points is not None:
            self._on_points(count)

    def _emit(self, pts: NDArray[np.float64]) -> None:
        if len(pts) > 0:
            self._chunks.append(pts)

    def _resolve(self, cmd: PathCommand, x: float, y: float) -> tuple[float, float]:
        if cmd.relative:
            cx, cy = self.state.current
            return (cx + x, cy + y)
        return (x, y)

    def _line_to(self, target: tuple[float, float]) -> None:
        # Drop the first point: it is the already-emitted current point
        self._reserve(interpolated_size(self.state.current, target, self.density) - 1)
        self._emit(interpolate(self.state.current, target, self.density)[1:])
        self.state.current = target

    # ── Command handlers ─────────────────────────────────────────────────

    def _move(self, cmd: PathCommand) -> None:
        target = self._resolve(cmd, cmd.args[0], cmd.args[1])
        self._reserve(1)
        self._emit(np.array([target], dtype=np.float64))
        self.state.current = target
        self.state.subpath_start = target
        self.state.last_control = target

    def _line(self, cmd: PathCommand) -> None:
        self._line_to(self._resolve(cmd, cmd.args[0], cmd.args[1]))

    def _horizontal(self, cmd: PathCommand) -> None:
        cx, cy = self.state.current
        x = cx + cmd.args[0] if cmd.relative else cmd.args[0]
        self._line_to((x, cy))

    def _vertical(self, cmd: PathCommand) -> None:
        cx, cy = self.state.current
        y = cy + cmd.args[0] if cmd.relative else cmd.args[0]
        self._line_to((cx, y))

    def _cubic(self, cmd: PathCommand) -> None:
        a = cmd.args
        c1 = self._resolve(cmd, a[0], a[1])
        c2 = self._resolve(cmd, a[2], a[3])
        end = self._resolve(cmd, a[4], a[5])
        self._reserve(curve_segments(self.state.current, end, self.density))
        self._emit(cubic_points(self.state.current, c1, c2, end, self.density)[1:])
        self.state.current = end

    def _quadratic(self, cmd: PathCommand) -> None:
        a = cmd.args
        ctrl = self._resolve(cmd, a[0], a[1])
        end = self._resolve(cmd, a[2], a[3])
        self._reserve(curve_segments(self.state.current, end, self.density))
        self._emit(quadratic_points(self.state.current, ctrl, end, self.density)[1:])
        self.state.last_control = ctrl
        self.state.current = end

    def _smooth_quadratic(self, cmd: PathCommand) -> None:
        end = self._resolve(cmd, cmd.args[0], cmd.args[1])
        cx, cy = self.state.current
        lx, ly = self.state.last_control
        # Reflect the previous control point about the current point
        ctrl = (2 * cx - lx, 2 * cy - ly)
        self._reserve(curve_segments(self.state.current, end, self.density))
        self._emit(quadratic_points(self.state.current, ctrl, end, self.density)[1:])
        self.state.last_control = ctrl
        self.state.current = end

    def _close(self, cmd: PathCommand) -> None:
        cx, cy = self.state.current
        sx, sy = self.state.subpath_start
        if abs(cx - sx) > CLOSE_TOLERANCE or abs(cy - sy) > CLOSE_TOLERANCE:
            self._line_to(self.state.subpath_start)
        self.state.current = self.state.subpath_start


_HANDLERS: dict[str, Callable[[PathDataMachine, PathCommand], None]] = {
    "M": PathDataMachine._move,
    "L": PathDataMachine._line,
    "H": PathDataMachine._horizontal,
    "V": PathDataMachine._vertical,
    "C": PathDataMachine._cubic,
    "Q": PathDataMachine._quadratic,
    "T": PathDataMachine._smooth_quadratic,
    "Z": PathDataMachine._close,
}


def sample_subpath(
    subpath: str,
    density: float,
    close_paths: bool = True,
    on_warning: Callable[[str], None] | None = None,
    on_points: Callable[[int | float], None] | None = None,
) -> NDArray[np.float64]:
    """Sample one sub-path; Z-terminated sub-paths end on their first point."""
    machine = PathDataMachine(density, on_warning=on_warning, on_points=on_points)
    points = machine.run(tokenize(subpath))
    if close_paths and is_closed(subpath):
        points = close_path(points)
    return points


def iter_subpath_points(
    d: str,
    density: float,
    close_paths: bool = True,
    on_warning: Callable[[str], None] | None = None,
    on_points: Callable[[int | float], None] | None = None,
) -> Iterator[NDArray[np.float64]]:
    """Yield the non-empty point array of every sub-path in ``d``."""
    for subpath in split_subpaths(d):
        points = sample_subpath(subpath, density, close_paths, on_warning, on_points)
        if len(points) > 0:
            yield points


def sample_path_data(
    d: str,
    density: float,
    close_paths: bool = True,
    on_warning: Callable[[str], None] | None = None,
) -> list[NDArray[np.float64]]:
    """Sample a whole ``d`` attribute into one array per sub-path."""
    return list(iter_subpath_points(d, density, close_paths, on_warning))
