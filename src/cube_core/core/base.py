# ========================
# file: cube_core/core/base.py
# ========================
from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional, Tuple
import logging

import numpy as np

from ..config import Config
from ..sim.cube_state import CubeState

logger = logging.getLogger(__name__)


@dataclass
class StageReport:
    name: str
    attempts: int = 0
    moves: List[str] = field(default_factory=list)
    satisfied: bool = False


class BaseStage(ABC):
    """Abstract base for the solver's layer-by-layer stages.

    A stage loops up to `budget` times: if its predicate holds it stops,
    otherwise it plays `template` followed by one U-face adjustment turn.
    Running out of budget is not an error.
    """

    name: str = "stage"
    title: str = ""
    description: str = ""
    template: Tuple[str, ...] = ()
    default_budget: int = 10

    def __init__(self, config: Optional[Config] = None, rng: Optional[np.random.Generator] = None):
        self.config = config or Config()
        self.rng = rng if rng is not None else np.random.default_rng()
        self.budget = self.config.budget_for(self.name, self.default_budget)

    @abstractmethod
    def is_satisfied(self, state: CubeState) -> bool:
        ...

    def adjustment(self) -> str:
        return "U"

    def _play(self, state: CubeState, move: str, moves: List[str]) -> None:
        if not state.execute_move(move):
            raise ValueError(f"Stage '{self.name}' produced an invalid move {move!r}")
        moves.append(move)

    def run(self, state: CubeState) -> StageReport:
        report = StageReport(name=self.name)
        for _ in range(self.budget):
            if self.is_satisfied(state):
                report.satisfied = True
                break
            report.attempts += 1
            for move in self.template:
                self._play(state, move, report.moves)
            self._play(state, self.adjustment(), report.moves)
        else:
            report.satisfied = self.is_satisfied(state)

        logger.debug(
            "Stage %s: attempts=%d moves=%d satisfied=%s",
            self.name, report.attempts, len(report.moves), report.satisfied,
        )
        return report
