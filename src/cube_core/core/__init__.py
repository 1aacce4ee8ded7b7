from .base import BaseStage, StageReport

__all__ = ["BaseStage", "StageReport"]
