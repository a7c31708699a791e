"""Pairwise chemistry scoring between two personality types.

Curated overrides win; otherwise the score is the mean of four per-axis
sub-scores. All functions are *pure*: no side-effects, no I/O.
"""

from __future__ import annotations

import math

from pydantic import BaseModel

from team_chemistry.personality_types import get_type_info, require_type
from team_chemistry.reference_data import (
    GRADES,
    ChemistryData,
    ChemistryOverride,
    ChemistryRole,
    Grade,
    get_chemistry_data,
)
from team_chemistry.roster import TeamMember, to_chemistry_role


# ---------------------------------------------------------------------------
# Result model
# ---------------------------------------------------------------------------
class CompatibilityResult(BaseModel):
    """Chemistry between the viewer and one other type."""

    score: int
    grade: Grade
    grade_label: str
    synergy: str
    conflict: str
    tip: str
    special_tip: str | None = None
    role_tip: str


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------
DEFAULT_AXIS_SCORE = 50
DEFAULT_SYNERGY = "Your differences can turn into real synergy."
DEFAULT_CONFLICT = "Watch out for differences in how you communicate."

_AXIS_ORDER = "EISNTFJP"

# role → (letter position in the other type, letter that selects matched_tip)
_ROLE_TIP_RULES: dict[ChemistryRole, tuple[int, str]] = {
    "leader": (2, "F"),
    "junior": (3, "J"),
    "peer": (0, "I"),
}


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def round_half_up(value: float) -> int:
    """Round .5 upwards (``round`` would round half to even)."""
    return math.floor(value + 0.5)


def axis_key(a: str, b: str) -> str:
    """Normalized key for a letter pair, e.g. ``("I", "E") -> "E-I"``."""
    if a == b:
        return f"{a}-{a}"
    return f"{a}-{b}" if _AXIS_ORDER.index(a) < _AXIS_ORDER.index(b) else f"{b}-{a}"


def axis_score(a: str, b: str, data: ChemistryData | None = None) -> int:
    data = data or get_chemistry_data()
    return data.axis_scores.get(axis_key(a, b), DEFAULT_AXIS_SCORE)


def score_to_grade(score: int, data: ChemistryData | None = None) -> Grade:
    """First grade (S→F) whose threshold *score* meets; F otherwise."""
    data = data or get_chemistry_data()
    for grade in GRADES:
        if score >= data.grade_thresholds[grade]:
            return grade
    return "F"


def role_tip(role: ChemistryRole, their_type: str, data: ChemistryData | None = None) -> str:
    """Advice for the viewer in *role* dealing with *their_type*."""
    data = data or get_chemistry_data()
    if role not in _ROLE_TIP_RULES:
        raise ValueError(f"Unknown chemistry role: {role!r}")
    position, letter = _ROLE_TIP_RULES[role]
    modifier = data.role_modifiers[role]

    if their_type[position] != letter:
        return f"{modifier.prefix} {modifier.default_tip}"
    tip = f"{modifier.prefix} {modifier.matched_tip}"
    if role == "leader":
        tip = f"{tip} {get_type_info(their_type).comm_style}"
    return tip


def _find_override(my_type: str, their_type: str, data: ChemistryData) -> ChemistryOverride | None:
    return data.overrides.get(f"{my_type}-{their_type}") or data.overrides.get(
        f"{their_type}-{my_type}"
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------
def calculate_chemistry(
    my_type: str,
    their_type: str,
    role: ChemistryRole,
    data: ChemistryData | None = None,
) -> CompatibilityResult:
    """Return graded chemistry for two types from the viewer's *role*."""
    my_type = require_type(my_type)
    their_type = require_type(their_type)
    data = data or get_chemistry_data()

    override = _find_override(my_type, their_type, data)
    if override is not None:
        score = override.score
        synergy = override.synergy
        conflict = override.conflict
        special_tip = override.special_tip
    else:
        sub_scores = [axis_score(a, b, data) for a, b in zip(my_type, their_type)]
        score = round_half_up(sum(sub_scores) / len(sub_scores))

        ei_template = data.axis_templates.get(axis_key(my_type[0], their_type[0]))
        tf_template = data.axis_templates.get(axis_key(my_type[2], their_type[2]))
        synergy = ei_template.synergy if ei_template and ei_template.synergy else DEFAULT_SYNERGY
        conflict = tf_template.conflict if tf_template and tf_template.conflict else DEFAULT_CONFLICT
        special_tip = None

    grade = score_to_grade(score, data)
    tip_for_role = role_tip(role, their_type, data)

    return CompatibilityResult(
        score=score,
        grade=grade,
        grade_label=data.grade_labels[grade],
        synergy=synergy,
        conflict=conflict,
        tip=special_tip or tip_for_role,
        special_tip=special_tip,
        role_tip=tip_for_role,
    )


def chemistry_with_member(
    my_type: str,
    member: TeamMember,
    data: ChemistryData | None = None,
) -> CompatibilityResult:
    """Chemistry between the viewer and a roster member, using the member's stored role."""
    return calculate_chemistry(my_type, member.mbti_type, to_chemistry_role(member.role), data)
