"""Team archetype classification from the members' letter mix.

All functions are *pure*.
"""

from __future__ import annotations

from team_chemistry.personality_types import LETTERS, require_type
from team_chemistry.reference_data import (
    ChemistryData,
    TeamArchetype,
    TeamTypeId,
    get_chemistry_data,
)


# ---------------------------------------------------------------------------
# Rules: evaluated in order, first match wins
# ---------------------------------------------------------------------------
# (archetype, (letter, min %), (letter, min %))
_TEAM_TYPE_RULES: list[tuple[TeamTypeId, tuple[str, float], tuple[str, float]]] = [
    ("battle", ("T", 60), ("J", 50)),
    ("healing", ("F", 60), ("I", 50)),
    ("chaos", ("P", 60), ("E", 50)),
    ("think-tank", ("N", 60), ("T", 50)),
    ("family", ("F", 60), ("E", 50)),
    ("machine", ("S", 60), ("J", 50)),
]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------
def letter_percentages(types: list[str]) -> dict[str, float]:
    """Share of members (0-100) whose type carries each of the 8 letters."""
    counts = dict.fromkeys(LETTERS, 0)
    for t in types:
        for letter in require_type(t):
            counts[letter] += 1
    total = len(types)
    return {letter: (count / total) * 100 if total else 0.0 for letter, count in counts.items()}


def determine_team_type(types: list[str], data: ChemistryData | None = None) -> TeamArchetype:
    """Return the first archetype whose thresholds the team meets.

    An empty team gets the fallback archetype (the last in the table).
    """
    data = data or get_chemistry_data()
    if not types:
        return data.team_types[-1]

    pct = letter_percentages(types)
    for type_id, (first, first_min), (second, second_min) in _TEAM_TYPE_RULES:
        if pct[first] >= first_min and pct[second] >= second_min:
            return data.team_type(type_id)
    return data.team_type("balanced")
