# src/cube_core/__init__.py
from __future__ import annotations

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("cube-core")  # ← use the *distribution* name (with hyphen)
except PackageNotFoundError:  # not installed (e.g., running from source without pip -e .)
    __version__ = "0+unknown"

from .config import Config
from .notation import AVAILABLE_MOVES, Move, parse_move, reverse_move
from .sim.cube_state import CubeState
from .scramble import ScrambleGenerator, ScrambleValidation
from .solver import HeuristicSolver, SolveOutcome, optimize_solution
from .orchestrator import CubeSession, SessionEvent

__all__ = [
    "AVAILABLE_MOVES",
    "Config",
    "CubeSession",
    "CubeState",
    "HeuristicSolver",
    "Move",
    "ScrambleGenerator",
    "ScrambleValidation",
    "SessionEvent",
    "SolveOutcome",
    "optimize_solution",
    "parse_move",
    "reverse_move",
]
