from __future__ import annotations

"""cube_state.py
Facelet state and permutation engine for a 3x3 cube.
The public surface mirrors what a UI layer needs:

    >>> cube = CubeState()
    >>> cube.execute_move("R")
    True
    >>> cube.undo_last_move()
    True
    >>> cube.is_completed
    True

Stickers live in a flat numpy array of 54 colour ids (face order U D R L F B,
row-major inside a face). Every move is a precomputed gather permutation, so
applying one is a single fancy-index and can never relabel a colour.
"""

import logging
from collections import Counter
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

import numpy as np

from ..notation import FACES, Move, parse_move, reverse_move
from ..utils import format_cube_net

logger = logging.getLogger(__name__)

Snapshot = Dict[str, List[str]]

# ---------------------------------------------------------------------------
# Move tables
# ---------------------------------------------------------------------------
#: new[dst] = old[src] for a clockwise quarter turn of a face (centre fixed)
FACE_ROTATION_CW: Tuple[Tuple[int, int], ...] = (
    (0, 6), (1, 3), (2, 0),
    (3, 7), (5, 1),
    (6, 8), (7, 5), (8, 2),
)

#: Neighbour strips touched by turning each face, in clockwise order.
#: A clockwise turn moves strip i-1's stickers into strip i.
ADJACENT_STRIPS: Dict[str, Tuple[Tuple[str, Tuple[int, int, int]], ...]] = {
    "R": (("U", (2, 5, 8)), ("F", (2, 5, 8)), ("D", (2, 5, 8)), ("B", (6, 3, 0))),
    "L": (("U", (0, 3, 6)), ("B", (8, 5, 2)), ("D", (0, 3, 6)), ("F", (0, 3, 6))),
    "U": (("B", (0, 1, 2)), ("R", (0, 1, 2)), ("F", (0, 1, 2)), ("L", (0, 1, 2))),
    "D": (("F", (6, 7, 8)), ("R", (6, 7, 8)), ("B", (6, 7, 8)), ("L", (6, 7, 8))),
    "F": (("U", (6, 7, 8)), ("R", (0, 3, 6)), ("D", (2, 1, 0)), ("L", (8, 5, 2))),
    "B": (("U", (2, 1, 0)), ("L", (0, 3, 6)), ("D", (6, 7, 8)), ("R", (8, 5, 2))),
}

_FACE_OFFSET = {face: 9 * i for i, face in enumerate(FACES)}


def _quarter_turn_permutation(face: str) -> np.ndarray:
    perm = np.arange(54)
    base = _FACE_OFFSET[face]
    for dst, src in FACE_ROTATION_CW:
        perm[base + dst] = base + src

    strips = ADJACENT_STRIPS[face]
    for i, (to_face, to_idx) in enumerate(strips):
        from_face, from_idx = strips[i - 1]
        for t, f in zip(to_idx, from_idx):
            perm[_FACE_OFFSET[to_face] + t] = _FACE_OFFSET[from_face] + f
    return perm


def _build_move_table() -> Dict[str, np.ndarray]:
    table: Dict[str, np.ndarray] = {}
    for face in FACES:
        cw = _quarter_turn_permutation(face)
        table[face] = cw
        table[face + "'"] = np.argsort(cw)
        table[face + "2"] = cw[cw]
    return table


MOVE_PERMUTATIONS: Dict[str, np.ndarray] = _build_move_table()


# ---------------------------------------------------------------------------
# Core class
# ---------------------------------------------------------------------------
class CubeState:
    """Owns the 54 stickers, the player's move history and the completion flag."""

    FACE_ORDER: Tuple[str, ...] = FACES

    #: Colour per face at the solved state, in FACE_ORDER
    COLORS: Tuple[str, ...] = ("white", "yellow", "red", "orange", "blue", "green")

    SOLVED_COLORS: Dict[str, str] = dict(zip(FACES, COLORS))

    _COLOR_ALIASES = {
        "w": "white", "white": "white",
        "y": "yellow", "yellow": "yellow",
        "o": "orange", "orange": "orange",
        "r": "red", "red": "red",
        "g": "green", "green": "green",
        "b": "blue", "blue": "blue",
    }

    _COLOR_IDS = {colour: i for i, colour in enumerate(COLORS)}

    def __init__(self, snapshot: Optional[Mapping[str, Sequence[str]]] = None) -> None:
        self.reset()
        if snapshot is not None:
            self.set_state(snapshot)

    def __str__(self) -> str:
        return format_cube_net(self.get_state_copy())

    def __repr__(self) -> str:
        return f"CubeState(completed={self.is_completed}, moves={len(self.move_history)})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CubeState):
            return NotImplemented
        return bool(np.array_equal(self._state, other._state))

    __hash__ = None  # mutable

    # ---------------------------------------------------------------------
    # Lifecycle
    # ---------------------------------------------------------------------
    def reset(self) -> None:
        """Restore the solved colours and forget the move history."""
        self._state: np.ndarray = np.repeat(np.arange(6, dtype=np.int8), 9)
        self.move_history: List[str] = []
        self.is_completed: bool = True

    def clone(self) -> "CubeState":
        """Return an independent copy (stickers and history)."""
        new_state = CubeState()
        new_state._state = self._state.copy()
        new_state.move_history = list(self.move_history)
        new_state.is_completed = self.is_completed
        return new_state

    # ---------------------------------------------------------------------
    # Moves
    # ---------------------------------------------------------------------
    @staticmethod
    def parse_move(move) -> Optional[Move]:
        return parse_move(move)

    @staticmethod
    def get_reverse_move(move) -> Optional[str]:
        return reverse_move(move)

    def _apply(self, move: Move) -> None:
        self._state = self._state[MOVE_PERMUTATIONS[move.notation]]

    def execute_move(self, move) -> bool:
        """Apply one move and record it. Returns False (state untouched) if it does not parse."""
        parsed = parse_move(move)
        if parsed is None:
            logger.debug("Ignoring malformed move %r", move)
            return False

        self._apply(parsed)
        self.move_history.append(parsed.notation)
        self.check_completed()
        return True

    def apply_sequence(self, moves: Iterable[str]) -> int:
        """Execute each move in turn; returns how many were accepted."""
        return sum(1 for m in moves if self.execute_move(m))

    def undo_last_move(self) -> bool:
        if not self.move_history:
            return False

        last = self.move_history.pop()
        # history only ever holds canonical notations, so this always parses
        self._apply(parse_move(last).inverse())
        self.check_completed()
        return True

    # ---------------------------------------------------------------------
    # Queries
    # ---------------------------------------------------------------------
    def check_completed(self) -> bool:
        """True iff every face is a single colour (any colour)."""
        faces = self._state.reshape(6, 9)
        self.is_completed = bool((faces == faces[:, :1]).all())
        return self.is_completed

    def get_move_history(self) -> List[str]:
        return list(self.move_history)

    def clear_history(self) -> None:
        self.move_history = []

    def face(self, face: str) -> List[str]:
        """Colours of one face, row-major."""
        base = _FACE_OFFSET[face]
        return [self.COLORS[c] for c in self._state[base: base + 9]]

    def sticker(self, face: str, index: int) -> str:
        return self.COLORS[self._state[_FACE_OFFSET[face] + index]]

    def color_counts(self) -> Counter:
        return Counter(self.COLORS[c] for c in self._state)

    # ---------------------------------------------------------------------
    # Snapshots
    # ---------------------------------------------------------------------
    def get_state_copy(self) -> Snapshot:
        """Value copy of the stickers: {face: [9 colour names]}."""
        return {face: self.face(face) for face in self.FACE_ORDER}

    def _canon(self, name) -> str:
        key = str(name).lower().strip()
        return self._COLOR_ALIASES.get(key, key)

    def set_state(self, snapshot: Mapping[str, Sequence[str]]) -> None:
        """Replace the stickers with a copy of *snapshot*; history is kept."""
        missing = [f for f in self.FACE_ORDER if f not in snapshot]
        if missing:
            raise ValueError(f"Snapshot is missing faces: {missing}")

        ids: List[int] = []
        for face in self.FACE_ORDER:
            colours = list(snapshot[face])
            if len(colours) != 9:
                raise ValueError(f"Face '{face}' must have 9 stickers, got {len(colours)}.")
            for colour in colours:
                canon = self._canon(colour)
                if canon not in self._COLOR_IDS:
                    raise ValueError(f"Unknown sticker colour '{colour}' on face '{face}'.")
                ids.append(self._COLOR_IDS[canon])

        state = np.array(ids, dtype=np.int8)
        counts = np.bincount(state, minlength=6)
        if not (counts == 9).all():
            logger.warning("Snapshot colour counts are not 9 each: %s", dict(zip(self.COLORS, counts.tolist())))

        self._state = state
        self.check_completed()
