# =============================
# file: cube_core/orchestrator.py
# =============================
from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Tuple

from .config import Config
from .scramble import RandomSource, ScrambleGenerator, make_rng
from .sim.cube_state import CubeState
from .solver import HeuristicSolver, SolveOutcome

logger = logging.getLogger(__name__)

MOVE_EXECUTED = "move_executed"
MOVE_UNDONE = "move_undone"
CUBE_RESET = "cube_reset"
CUBE_SCRAMBLED = "cube_scrambled"
CUBE_COMPLETED = "cube_completed"
SOLUTION_READY = "solution_ready"
SOLUTION_STEP = "solution_step"
SOLUTION_FINISHED = "solution_finished"
SOLUTION_STOPPED = "solution_stopped"


@dataclass
class SessionEvent:
    kind: str
    move: Optional[str] = None
    move_count: int = 0
    completed: bool = False
    payload: Dict[str, Any] = field(default_factory=dict)


Listener = Callable[[SessionEvent], None]


@dataclass
class SolutionPlayback:
    outcome: SolveOutcome
    current_step: int = 0
    executing: bool = False

    @property
    def remaining(self) -> List[str]:
        return self.outcome.moves[self.current_step:]

    @property
    def done(self) -> List[str]:
        return self.outcome.moves[: self.current_step]


class CubeSession:
    """Live cube plus scramble/solve helpers; reports every change as a SessionEvent."""

    def __init__(self, config: Optional[Config] = None, rng: RandomSource = None):
        self.config = config or Config()
        self.rng = make_rng(self.config.seed if rng is None else rng)
        logger.info("Initializing cube session seed=%s", self.config.seed)

        self.cube = CubeState()
        self.scrambler = ScrambleGenerator(self.rng, self.config)
        self.solver = HeuristicSolver(self.rng, self.config)

        self.move_count = 0
        self.is_scrambled = False
        self.current_scramble: List[str] = []
        self.playback: Optional[SolutionPlayback] = None
        self._listeners: List[Listener] = []

    # ---------- observers ----------
    def subscribe(self, listener: Listener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _emit(self, event_kind: str, move: Optional[str] = None, **payload: Any) -> SessionEvent:
        event = SessionEvent(
            kind=event_kind,
            move=move,
            move_count=self.move_count,
            completed=self.cube.is_completed,
            payload=payload,
        )
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                logger.exception("Session listener failed on %s", event_kind)
        return event

    # ---------- commands ----------
    def scramble(self, length: Optional[int] = None, difficulty: str = "medium", kind: Optional[str] = None) -> SessionEvent:
        """Reset, apply a fresh scramble and clear history (scramble moves are not player moves)."""
        if kind:
            moves = self.scrambler.generate_special_scramble(kind)
        else:
            moves = self.scrambler.generate_scramble(length, difficulty)
        return self.apply_scramble(moves, difficulty=difficulty, kind=kind)

    def apply_scramble(self, moves: List[str], **payload: Any) -> SessionEvent:
        """Start from solved and apply a given scramble. Malformed moves are skipped."""
        self.cube.reset()
        self.cube.apply_sequence(moves)
        self.cube.clear_history()

        self.current_scramble = list(moves)
        self.move_count = 0
        self.is_scrambled = True
        self.playback = None
        return self._emit(CUBE_SCRAMBLED, scramble=list(moves), **payload)

    def execute_move(self, move: str) -> Optional[SessionEvent]:
        was_completed = self.cube.is_completed
        if not self.cube.execute_move(move):
            return None

        self.move_count += 1
        event = self._emit(MOVE_EXECUTED, self.cube.move_history[-1])
        if self.is_scrambled and self.cube.is_completed and not was_completed:
            self.is_scrambled = False
            self._emit(CUBE_COMPLETED, self.cube.move_history[-1])
        return event

    def undo(self) -> Optional[SessionEvent]:
        """Revert the last move. Not available while a solution is being played."""
        if self.playback is not None and self.playback.executing:
            return None

        history = self.cube.get_move_history()
        if not self.cube.undo_last_move():
            return None
        self.move_count = max(0, self.move_count - 1)
        # a paused solution no longer matches the cube
        self.playback = None
        return self._emit(MOVE_UNDONE, history[-1], reverse=self.cube.get_reverse_move(history[-1]))

    def reset(self) -> SessionEvent:
        self.cube.reset()
        self.move_count = 0
        self.is_scrambled = False
        self.current_scramble = []
        self.playback = None
        return self._emit(CUBE_RESET)

    # ---------- solution playback ----------
    def request_solution(self) -> Optional[SessionEvent]:
        """Solve a copy of the live cube; None when there is nothing to solve."""
        if self.cube.is_completed:
            return None
        outcome = self.solver.solve_detailed(self.cube)
        self.playback = SolutionPlayback(outcome=outcome)
        return self._emit(SOLUTION_READY, moves=list(outcome.moves), outcome=outcome.kind)

    def step_solution(self) -> Optional[SessionEvent]:
        """Play the next solution move. Timing between steps belongs to the caller."""
        if self.playback is None:
            return None

        self.playback.executing = True
        if not self.playback.remaining:
            return self._finish_solution()

        move = self.playback.remaining[0]
        self.execute_move(move)
        self.playback.current_step += 1
        return self._emit(
            SOLUTION_STEP, move,
            step=self.playback.current_step, total=len(self.playback.outcome.moves),
        )

    def play_solution(self) -> Optional[SessionEvent]:
        """Play every remaining move in one go."""
        if self.playback is None and self.request_solution() is None:
            return None
        while self.playback.remaining:
            self.step_solution()
        return self._finish_solution()

    def _finish_solution(self) -> SessionEvent:
        outcome = self.playback.outcome if self.playback else None
        self.playback = None
        return self._emit(
            SOLUTION_FINISHED,
            outcome=outcome.kind if outcome else None,
            solved=self.cube.check_completed(),
        )

    def stop_solution(self) -> Optional[SessionEvent]:
        if self.playback is None or not self.playback.executing:
            return None
        self.playback.executing = False
        return self._emit(SOLUTION_STOPPED, step=self.playback.current_step)

    def solution_progress(self) -> Tuple[List[str], List[str]]:
        if self.playback is None:
            return [], []
        return self.playback.done, self.playback.remaining

    # ---------- snapshots ----------
    def get_game_state(self) -> Dict[str, Any]:
        return {
            "move_count": self.move_count,
            "is_scrambled": self.is_scrambled,
            "current_scramble": list(self.current_scramble),
            "cube_completed": self.cube.is_completed,
            "move_history": self.cube.get_move_history(),
            "facelets": self.cube.get_state_copy(),
            "solution": {
                "showing": self.playback is not None,
                "executing": bool(self.playback and self.playback.executing),
                "current_step": self.playback.current_step if self.playback else 0,
                "moves": list(self.playback.outcome.moves) if self.playback else [],
            },
        }
