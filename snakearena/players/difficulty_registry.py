"""
Registry for AI difficulty presets.

Maps preset keys ('easy', 'medium', 'hard') to the aggressiveness and
caution weights used by the heuristic player.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional


@dataclass(frozen=True)
class DifficultyPreset:
    key: str
    aggressiveness: float
    caution: float
    description: str = ""


DIFFICULTY_PRESETS: Dict[str, DifficultyPreset] = {
    "easy": DifficultyPreset("easy", 0.4, 0.3, "Drifts toward food, rarely plans an exit"),
    "medium": DifficultyPreset("medium", 0.7, 0.5, "Chases food with some care for open space"),
    "hard": DifficultyPreset("hard", 0.9, 0.8, "Chases food hard and avoids dead ends"),
}

DEFAULT_DIFFICULTY = "medium"

# Canonical list of available preset keys
AVAILABLE_DIFFICULTIES = list(DIFFICULTY_PRESETS.keys())


def get_preset(key: Optional[str] = None) -> DifficultyPreset:
    """
    Get the preset for a given key.

    Args:
        key: One of 'easy', 'medium', 'hard' (case-insensitive). If None or
             empty, returns the default preset.

    Returns:
        The matching DifficultyPreset.

    Raises:
        ValueError: If key is not recognized.
    """
    if not key or key.strip() == "":
        key = DEFAULT_DIFFICULTY

    key = key.strip().lower()

    if key not in DIFFICULTY_PRESETS:
        available = ", ".join(AVAILABLE_DIFFICULTIES)
        raise ValueError(
            f"Unknown difficulty '{key}'. Available difficulties: {available}"
        )

    return DIFFICULTY_PRESETS[key]


def list_presets() -> List[dict]:
    """
    Return metadata about all available presets.

    Returns:
        List of dicts with 'key', 'aggressiveness', 'caution' and 'description'.
    """
    return [
        {
            "key": p.key,
            "aggressiveness": p.aggressiveness,
            "caution": p.caution,
            "description": p.description,
        }
        for p in DIFFICULTY_PRESETS.values()
    ]
