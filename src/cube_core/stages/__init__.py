# ==============================
# file: cube_core/stages/__init__.py
# ==============================
# Re-export stage classes for the solver pipeline
from .white_cross import WhiteCrossStage
from .white_corners import WhiteCornersStage
from .second_layer import SecondLayerStage
from .yellow_cross import YellowCrossStage
from .yellow_corners import YellowCornersStage
from .last_layer import LastLayerCornersStage, LastLayerEdgesStage

__all__ = [
    "WhiteCrossStage",
    "WhiteCornersStage",
    "SecondLayerStage",
    "YellowCrossStage",
    "YellowCornersStage",
    "LastLayerCornersStage",
    "LastLayerEdgesStage",
]
