# ================================
# file: cube_core/stages/last_layer.py
# ================================
"""Last-layer permutation, split into a corner pass and an edge pass."""
from __future__ import annotations

from ..core import BaseStage
from ..sim.cube_state import CubeState
from .second_layer import middle_rows_match_centres


class LastLayerCornersStage(BaseStage):
    name = "last_layer_corners"
    title = "Last layer corners"
    description = "Permute the top-layer corners"
    template = ("R'", "F", "R'", "B2", "R", "F'", "R'", "B2", "R2")
    default_budget = 10

    def is_satisfied(self, state: CubeState) -> bool:
        # corner placement is approximated by the middle-layer check
        return middle_rows_match_centres(state)


class LastLayerEdgesStage(BaseStage):
    name = "last_layer_edges"
    title = "Last layer edges"
    description = "Permute the top-layer edges"
    template = ("R", "U", "R'", "F'", "R", "U", "R'", "U'", "R'", "F", "R2", "U'", "R'")
    default_budget = 10

    def is_satisfied(self, state: CubeState) -> bool:
        return state.check_completed()
