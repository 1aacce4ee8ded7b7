# ==================
# file: cube_core/io.py
# ==================
from __future__ import annotations
import json
import logging
from pathlib import Path
from typing import Any, Dict, List

from .notation import string_to_sequence

logger = logging.getLogger(__name__)


def save_results(file_path: Path, results: Dict[str, Any]):
    """Append one run record to the JSON list at *file_path*, creating it if needed."""
    file_path.parent.mkdir(parents=True, exist_ok=True)
    records: List[Dict[str, Any]] = []
    if file_path.exists():
        try:
            loaded = json.loads(file_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError:
            logger.warning("Run records in %s are not valid JSON; starting a new list.", file_path)
        else:
            if isinstance(loaded, list):
                records = loaded
            else:
                logger.warning("Run records in %s are not a JSON list; starting a new list.", file_path)
    records.append(results)
    file_path.write_text(json.dumps(records, indent=4), encoding="utf-8")
    logger.info("Saved run record #%d → %s", len(records), file_path)


def load_sequences(path: Path) -> List[List[str]]:
    """
    Read move sequences from a JSON list (each item a list of moves or a
    space-separated string) or from a text file with one sequence per line.
    """
    if not path.exists():
        raise FileNotFoundError(f"Sequence file not found at {path}")
    text = path.read_text(encoding="utf-8")

    if path.suffix == ".json":
        data = json.loads(text)
        if not isinstance(data, list):
            raise ValueError(f"Expected a JSON list of sequences in {path}")
        return [string_to_sequence(item) if isinstance(item, str) else [str(m) for m in item] for item in data]

    return [string_to_sequence(line) for line in text.splitlines() if line.strip()]
