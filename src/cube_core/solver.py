# =========================
# file: cube_core/solver.py
# =========================
"""Heuristic layer-by-layer solver.

The solver replays one fixed template per stage on a private copy of the cube
until the stage's check passes or its attempt budget runs out. It does not
inspect where pieces actually are, so for most scrambles it proposes a
sequence that does not fully solve the cube. :class:`SolveOutcome` makes that
visible: ``kind`` is ``"solved"``, ``"partial"`` or ``"fallback"``.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

import numpy as np

from .config import Config
from .core import BaseStage, StageReport
from .notation import parse_move
from .scramble import RandomSource, make_rng
from .sim.cube_state import CubeState
from .stages import (
    WhiteCrossStage,
    WhiteCornersStage,
    SecondLayerStage,
    YellowCrossStage,
    YellowCornersStage,
    LastLayerCornersStage,
    LastLayerEdgesStage,
)

logger = logging.getLogger(__name__)

CubeStateLike = Union[CubeState, Mapping[str, Sequence[str]]]

FALLBACK_SOLUTION: tuple = (
    "R", "U", "R'", "U'", "R", "U", "R'", "U'",
    "F", "R", "U", "R'", "U'", "F'",
    "R", "U", "R'", "U", "R", "U2", "R'",
    "R", "U", "R'", "F'", "R", "U", "R'", "U'", "R'", "F", "R2", "U'", "R'",
)

SOLUTION_STEPS: tuple = (
    {"name": "White cross", "description": "Form the white cross on the bottom layer"},
    {"name": "White corners", "description": "Complete the white bottom face"},
    {"name": "Second layer", "description": "Solve the middle-layer edges"},
    {"name": "Yellow cross", "description": "Form the yellow cross on the top layer"},
    {"name": "Yellow corners", "description": "Orient the top-layer corners"},
    {"name": "Last layer permutation", "description": "Finish permuting the top layer"},
)


@dataclass
class SolveOutcome:
    kind: str  # "solved" | "partial" | "fallback"
    moves: List[str] = field(default_factory=list)
    raw_move_count: int = 0
    stages: List[StageReport] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def is_fallback(self) -> bool:
        return self.kind == "fallback"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "moves": list(self.moves),
            "raw_move_count": self.raw_move_count,
            "stages": [
                {"name": s.name, "attempts": s.attempts, "moves": len(s.moves), "satisfied": s.satisfied}
                for s in self.stages
            ],
            "error": self.error,
        }


def optimize_solution(solution: Sequence[str]) -> List[str]:
    """
    Collapse runs of consecutive same-face, same-direction moves.

    A half turn counts as two clockwise quarter turns. The run's quarter-turn
    count k is reduced mod 4: 0 drops the run, 1 is a single turn, 2 is a
    half turn, 3 is one turn the other way. Runs are never merged across a
    different face, even when the faces commute.
    """
    optimized: List[str] = []
    i = 0
    n = len(solution)

    while i < n:
        current = parse_move(solution[i])
        if current is None:
            optimized.append(solution[i])
            i += 1
            continue

        count = 2 if current.double else 1
        j = i + 1
        while j < n:
            nxt = parse_move(solution[j])
            if nxt is None or nxt.face != current.face or nxt.clockwise != current.clockwise:
                break
            count += 2 if nxt.double else 1
            j += 1

        face = current.face
        final = count % 4
        if final == 1:
            optimized.append(face if current.clockwise else face + "'")
        elif final == 2:
            optimized.append(face + "2")
        elif final == 3:
            optimized.append(face + "'" if current.clockwise else face)

        i = j

    return optimized


class HeuristicSolver:
    """Six-stage layer-by-layer template player."""

    STAGE_CLASSES = (
        WhiteCrossStage,
        WhiteCornersStage,
        SecondLayerStage,
        YellowCrossStage,
        YellowCornersStage,
        LastLayerCornersStage,
        LastLayerEdgesStage,
    )

    def __init__(self, rng: RandomSource = None, config: Optional[Config] = None):
        self.config = config or Config()
        self.rng: np.random.Generator = make_rng(self.config.seed if rng is None else rng)
        self.stages: List[BaseStage] = [cls(self.config, self.rng) for cls in self.STAGE_CLASSES]

    # ---------- helpers ----------
    @staticmethod
    def create_working_state(cube_state: CubeStateLike) -> CubeState:
        """Isolated copy: nothing done to it reaches the caller's state."""
        working = CubeState()
        if isinstance(cube_state, CubeState):
            working.set_state(cube_state.get_state_copy())
            working.move_history = cube_state.get_move_history()
        else:
            working.set_state(cube_state)
        return working

    @staticmethod
    def get_fallback_solution() -> List[str]:
        return list(FALLBACK_SOLUTION)

    @staticmethod
    def get_solution_steps() -> List[Dict[str, str]]:
        return [dict(step) for step in SOLUTION_STEPS]

    # ---------- main ----------
    def _run_pipeline(self, working: CubeState) -> List[StageReport]:
        return [stage.run(working) for stage in self.stages]

    def solve_detailed(self, cube_state: CubeStateLike) -> SolveOutcome:
        try:
            working = self.create_working_state(cube_state)
            if working.is_completed:
                return SolveOutcome(kind="solved")
            reports = self._run_pipeline(working)
        except Exception as exc:
            logger.warning("Solver pipeline failed (%s); returning fallback sequence", exc, exc_info=True)
            fallback = self.get_fallback_solution()
            return SolveOutcome(
                kind="fallback",
                moves=fallback,
                raw_move_count=len(fallback),
                error=str(exc),
            )

        raw = [m for report in reports for m in report.moves]
        kind = "solved" if working.check_completed() else "partial"
        outcome = SolveOutcome(
            kind=kind,
            moves=optimize_solution(raw),
            raw_move_count=len(raw),
            stages=reports,
        )
        logger.info(
            "Solve finished: kind=%s raw=%d optimized=%d",
            outcome.kind, outcome.raw_move_count, len(outcome.moves),
        )
        return outcome

    def solve(self, cube_state: CubeStateLike) -> List[str]:
        """Optimized move list; empty only when the cube is already complete."""
        return self.solve_detailed(cube_state).moves

    optimize_solution = staticmethod(optimize_solution)
