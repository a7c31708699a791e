"""Team chemistry: MBTI compatibility scoring and team insights."""

from .engine.compatibility import CompatibilityResult, calculate_chemistry, chemistry_with_member
from .engine.pairs import PairResult, compute_all_pairs
from .engine.team_insights import (
    MemberInsight,
    TeamInsight,
    compute_member_insight,
    compute_team_insight,
    find_best_triple,
)
from .engine.team_type import determine_team_type
from .personality_types import MBTI_TYPES, get_type_info
from .roster import TeamMember, TeamStore, build_all_members

__all__ = [
    "MBTI_TYPES",
    "CompatibilityResult",
    "MemberInsight",
    "PairResult",
    "TeamInsight",
    "TeamMember",
    "TeamStore",
    "build_all_members",
    "calculate_chemistry",
    "chemistry_with_member",
    "compute_all_pairs",
    "compute_member_insight",
    "compute_team_insight",
    "determine_team_type",
    "find_best_triple",
    "get_type_info",
]
