"""All-pairs chemistry for a roster.

All functions are *pure*.
"""

from __future__ import annotations

from pydantic import BaseModel

from team_chemistry.engine.compatibility import CompatibilityResult, calculate_chemistry
from team_chemistry.reference_data import ChemistryData, get_chemistry_data
from team_chemistry.roster import TeamMember, ensure_unique_ids


class PairResult(BaseModel):
    """Chemistry for one unordered pair; member_a comes first in the roster."""

    member_a: TeamMember
    member_b: TeamMember
    chemistry: CompatibilityResult


def compute_all_pairs(
    members: list[TeamMember],
    data: ChemistryData | None = None,
) -> list[PairResult]:
    """Compute chemistry for every unordered pair (upper-triangle only).

    Pairs between two roster members are peer relationships, so the role is
    always ``"peer"`` regardless of the members' stored roles.
    """
    ensure_unique_ids(members)
    data = data or get_chemistry_data()

    results: list[PairResult] = []
    for i, ma in enumerate(members):
        for mb in members[i + 1:]:
            results.append(PairResult(
                member_a=ma,
                member_b=mb,
                chemistry=calculate_chemistry(ma.mbti_type, mb.mbti_type, "peer", data),
            ))
    return results
