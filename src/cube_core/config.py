# =====================
# file: cube_core/config.py
# =====================
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional

@dataclass
class Config:
    difficulty_lengths: Dict[str, int] = field(
        default_factory=lambda: {"easy": 12, "medium": 20, "hard": 25}
    )
    default_length: int = 20
    max_scramble_attempts: int = 100
    stage_budgets: Dict[str, int] = field(
        default_factory=lambda: {
            "white_cross": 20,
            "white_corners": 30,
            "second_layer": 25,
            "yellow_cross": 15,
            "yellow_corners": 20,
            "last_layer_corners": 10,
            "last_layer_edges": 10,
        }
    )
    results_dir: Path = Path("results")
    seed: Optional[int] = None

    def length_for(self, difficulty: str) -> int:
        return self.difficulty_lengths.get(difficulty, self.default_length)

    def budget_for(self, stage_name: str, fallback: int) -> int:
        return self.stage_budgets.get(stage_name, fallback)
