# ====================================
# file: cube_core/stages/yellow_corners.py
# ====================================
from __future__ import annotations

from ..core import BaseStage
from ..sim.cube_state import CubeState


class YellowCornersStage(BaseStage):
    """Orient the top corners with the Sune until the whole U face is one colour."""

    name = "yellow_corners"
    title = "Yellow corners"
    description = "Orient the top-layer corners"
    template = ("R", "U", "R'", "U", "R", "U2", "R'")
    default_budget = 20

    target_color = "white"

    def is_satisfied(self, state: CubeState) -> bool:
        return all(c == self.target_color for c in state.face("U"))
