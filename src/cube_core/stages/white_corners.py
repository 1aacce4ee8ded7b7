# ===================================
# file: cube_core/stages/white_corners.py
# ===================================
from __future__ import annotations

from ..core import BaseStage
from ..sim.cube_state import CubeState


class WhiteCornersStage(BaseStage):
    """Finish the bottom face with the right-hand trigger."""

    name = "white_corners"
    title = "White corners"
    description = "Complete the bottom face"
    template = ("R", "U", "R'", "U'")
    default_budget = 30

    target_color = "yellow"

    def is_satisfied(self, state: CubeState) -> bool:
        return all(c == self.target_color for c in state.face("D"))
