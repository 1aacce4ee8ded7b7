# ==================================
# file: cube_core/stages/yellow_cross.py
# ==================================
from __future__ import annotations

from ..core import BaseStage
from ..sim.cube_state import CubeState
from .white_cross import CROSS_EDGES


class YellowCrossStage(BaseStage):
    """Top-layer cross, checked on the U edge facelets."""

    name = "yellow_cross"
    title = "Yellow cross"
    description = "Form the cross on the top layer"
    template = ("F", "R", "U", "R'", "U'", "F'")
    default_budget = 15

    target_color = "white"

    def is_satisfied(self, state: CubeState) -> bool:
        return all(state.sticker("U", i) == self.target_color for i in CROSS_EDGES)
