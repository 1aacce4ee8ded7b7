# ===========================
# file: cube_core/notation.py
# ===========================
"""Move notation shared by the engine, the scramble generator and the solver.

A move is one of ``R L U D F B`` optionally followed by ``'`` (counter-clockwise)
or ``2`` (half turn)::

    >>> parse_move(" r' ")
    Move(face='R', clockwise=False, double=False)
    >>> reverse_move("U2")
    'U2'
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

#: Faces in the order the engine stores them
FACES: Tuple[str, ...] = ("U", "D", "R", "L", "F", "B")

OPPOSITE_FACES: Dict[str, str] = {
    "R": "L", "L": "R",
    "U": "D", "D": "U",
    "F": "B", "B": "F",
}

MODIFIERS: Tuple[str, ...] = ("", "'", "2")

#: The 18 valid tokens of the wire format
AVAILABLE_MOVES: Tuple[str, ...] = (
    "R", "L", "U", "D", "F", "B",
    "R'", "L'", "U'", "D'", "F'", "B'",
    "R2", "L2", "U2", "D2", "F2", "B2",
)

MOVE_RE = re.compile(r"^([RLUDFB])(['2]?)$")
STRICT_MOVE_RE = re.compile(r"^[RLUDFB]['2]?$")


@dataclass(frozen=True)
class Move:
    face: str
    clockwise: bool = True
    double: bool = False

    @property
    def turns(self) -> int:
        """+1 clockwise quarter, -1 counter-clockwise quarter, +2 half turn."""
        if self.double:
            return 2
        return 1 if self.clockwise else -1

    @property
    def notation(self) -> str:
        if self.double:
            return self.face + "2"
        return self.face if self.clockwise else self.face + "'"

    def inverse(self) -> "Move":
        if self.double:
            return self
        return Move(self.face, clockwise=not self.clockwise)

    def __str__(self) -> str:
        return self.notation


def parse_move(move) -> Optional[Move]:
    """Parse a notation into a :class:`Move`; ``None`` when it is not a move."""
    if not isinstance(move, str):
        return None
    match = MOVE_RE.match(move.strip().upper())
    if not match:
        return None
    face, modifier = match.group(1), match.group(2)
    return Move(face=face, clockwise=modifier != "'", double=modifier == "2")


def is_valid_move_format(move) -> bool:
    return isinstance(move, str) and STRICT_MOVE_RE.fullmatch(move) is not None


def reverse_move(move) -> Optional[str]:
    parsed = parse_move(move)
    if parsed is None:
        return None
    return parsed.inverse().notation


def face_of(move) -> Optional[str]:
    if not isinstance(move, str) or not move:
        return None
    return move[0]


def sequence_to_string(moves: Iterable[str]) -> str:
    return " ".join(moves)


def string_to_sequence(text: str) -> List[str]:
    return [m for m in text.strip().split() if m]
