# ===========================
# file: cube_core/scramble.py
# ===========================
from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

import numpy as np

from .config import Config
from .notation import (
    FACES,
    MODIFIERS,
    OPPOSITE_FACES,
    face_of,
    is_valid_move_format,
    reverse_move,
    sequence_to_string,
    string_to_sequence,
)

logger = logging.getLogger(__name__)

RandomSource = Union[np.random.Generator, int, None]


def make_rng(source: RandomSource = None) -> np.random.Generator:
    """Accept a Generator, a seed or None (fresh entropy)."""
    if isinstance(source, np.random.Generator):
        return source
    return np.random.default_rng(source)


@dataclass
class ScrambleValidation:
    is_valid: bool
    errors: List[str] = field(default_factory=list)

    # dict-style access for callers that expect {"isValid", "errors"}
    def __getitem__(self, key: str) -> Any:
        if key in ("isValid", "is_valid"):
            return self.is_valid
        if key == "errors":
            return self.errors
        raise KeyError(key)

    def __bool__(self) -> bool:
        return self.is_valid


#: (faces, sequence length, probability of a counter-clockwise turn)
PRACTICE_PROFILES: Dict[str, Tuple[Tuple[str, ...], int, float]] = {
    "cross-solved": (("R", "L", "U", "F", "B"), 15, 0.3),
    "f2l-practice": (("R", "L", "U", "F", "B"), 12, 0.3),
    "oll-practice": (("R", "L", "U", "F", "B"), 8, 0.4),
    "pll-practice": (("R", "L", "U"), 6, 0.3),
}

PRESET_SCRAMBLES: Dict[str, Tuple[str, ...]] = {
    "superflip": ("R", "U", "R", "F", "R", "F", "L", "U", "R", "U", "D", "R", "U", "R", "D", "B", "R", "F", "L", "D"),
    "checkerboard": ("F2", "B2", "R2", "L2", "U2", "D2"),
    "dots": ("F", "R", "U", "R'", "U", "R'", "F"),
    "simple": ("R", "U", "R'", "U'"),
    "cross": ("F", "R", "U'", "R'", "F'"),
}


class ScrambleGenerator:
    """Random scrambles with no same-face neighbours and no A, opposite(A), A sandwiches."""

    def __init__(self, rng: RandomSource = None, config: Optional[Config] = None):
        self.config = config or Config()
        self.rng = make_rng(self.config.seed if rng is None else rng)

    # ---------- rules ----------
    @staticmethod
    def is_valid_move(move: str, last_face: Optional[str], last_last_face: Optional[str]) -> bool:
        """Check *move* against the faces of the two previously accepted moves."""
        current = face_of(move)

        if current == last_face:
            return False

        if OPPOSITE_FACES.get(current) == last_face and current == last_last_face:
            return False

        return True

    # ---------- sampling ----------
    def _sample_move(self, difficulty: str) -> str:
        face = FACES[self.rng.integers(len(FACES))]
        if difficulty == "easy":
            modifier = "" if self.rng.random() < 0.5 else "'"
        else:
            modifier = MODIFIERS[self.rng.integers(len(MODIFIERS))]
        return face + modifier

    def _sample_practice_move(self, faces: Sequence[str], prime_prob: float) -> str:
        face = faces[self.rng.integers(len(faces))]
        return face + ("'" if self.rng.random() < prime_prob else "")

    def _build(self, length: int, sampler) -> List[str]:
        max_attempts = self.config.max_scramble_attempts
        scramble: List[str] = []
        last_face: Optional[str] = None
        last_last_face: Optional[str] = None

        for position in range(length):
            for _ in range(max_attempts):
                move = sampler()
                if self.is_valid_move(move, last_face, last_last_face):
                    break
            else:
                logger.warning(
                    "Max attempts (%d) reached at position %d; returning %d of %d moves",
                    max_attempts, position, len(scramble), length,
                )
                break

            scramble.append(move)
            last_last_face = last_face
            last_face = face_of(move)

        return scramble

    def generate_scramble(self, length: Optional[int] = None, difficulty: str = "medium") -> List[str]:
        """
        Build a scramble one move at a time.

        `length` defaults to the difficulty's length (easy 12, medium 20, hard 25).
        Easy scrambles use only quarter turns. The result may be shorter than
        requested if a position exhausts its retry budget.
        """
        if length is None:
            length = self.config.length_for(difficulty)
        if length < 0:
            raise ValueError(f"Scramble length must be non-negative, got {length}")
        return self._build(length, lambda: self._sample_move(difficulty))

    def generate_special_scramble(self, kind: str) -> List[str]:
        """Practice scrambles over a restricted set of faces."""
        if kind not in PRACTICE_PROFILES:
            return self.generate_scramble()
        faces, length, prime_prob = PRACTICE_PROFILES[kind]
        return self._build(length, lambda: self._sample_practice_move(faces, prime_prob))

    @staticmethod
    def get_preset_scrambles() -> Dict[str, List[str]]:
        return {name: list(moves) for name, moves in PRESET_SCRAMBLES.items()}

    # ---------- checks & transforms ----------
    def validate_scramble(self, scramble: Sequence[str]) -> ScrambleValidation:
        errors: List[str] = []

        for i, move in enumerate(scramble):
            if not is_valid_move_format(move):
                errors.append(f"Invalid move format: {move}")
                continue

            if i > 0:
                last_face = face_of(scramble[i - 1])
                last_last_face = face_of(scramble[i - 2]) if i > 1 else None
                if not self.is_valid_move(move, last_face, last_last_face):
                    errors.append(f"Invalid move sequence at position {i + 1}: {move}")

        return ScrambleValidation(is_valid=not errors, errors=errors)

    @staticmethod
    def generate_reverse_scramble(scramble: Sequence[str]) -> List[str]:
        """
        Move-by-move inverse: reversed order, each move inverted.

        Tokens that are not moves are dropped, matching how
        `CubeState.apply_sequence` skips them when the scramble is applied.
        """
        reverse: List[str] = []
        for move in reversed(scramble):
            inverse = reverse_move(move)
            if inverse is None:
                logger.debug("Dropping malformed move %r from reverse scramble", move)
                continue
            reverse.append(inverse)
        return reverse

    @staticmethod
    def scramble_to_string(scramble: Sequence[str]) -> str:
        return sequence_to_string(scramble)

    @staticmethod
    def string_to_scramble(text: str) -> List[str]:
        return string_to_sequence(text)
