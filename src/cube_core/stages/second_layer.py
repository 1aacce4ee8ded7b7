# ==================================
# file: cube_core/stages/second_layer.py
# ==================================
from __future__ import annotations

from ..core import BaseStage
from ..sim.cube_state import CubeState

SIDE_FACES = ("F", "R", "B", "L")


def middle_rows_match_centres(state: CubeState) -> bool:
    """Every side face's middle row (3, 4, 5) equals its centre colour."""
    for face in SIDE_FACES:
        stickers = state.face(face)
        if not all(c == stickers[4] for c in stickers[3:6]):
            return False
    return True


class SecondLayerStage(BaseStage):
    name = "second_layer"
    title = "Second layer"
    description = "Place the middle-layer edges"
    template = ("U", "R", "U'", "R'", "U'", "F'", "U", "F")
    default_budget = 25

    def is_satisfied(self, state: CubeState) -> bool:
        return middle_rows_match_centres(state)
