from .cube_state import CubeState, MOVE_PERMUTATIONS, Snapshot

__all__ = ["CubeState", "MOVE_PERMUTATIONS", "Snapshot"]
