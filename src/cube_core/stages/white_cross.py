# =================================
# file: cube_core/stages/white_cross.py
# =================================
from __future__ import annotations

from ..core import BaseStage
from ..sim.cube_state import CubeState

CROSS_EDGES = (1, 3, 5, 7)


class WhiteCrossStage(BaseStage):
    """Bottom-layer cross: the four D edge facelets must show the target colour."""

    name = "white_cross"
    title = "White cross"
    description = "Form the cross on the bottom layer"
    template = ("F", "U", "R", "U'", "R'", "F'")
    default_budget = 20

    target_color = "yellow"
    adjustments = ("U", "U'", "U2")

    def is_satisfied(self, state: CubeState) -> bool:
        return all(state.sticker("D", i) == self.target_color for i in CROSS_EDGES)

    def adjustment(self) -> str:
        # random U turn between attempts
        return self.adjustments[self.rng.integers(len(self.adjustments))]
