"""Team and member rollups over a set of pair results.

Key connector, isolation risk, best triple, synergy score and grade/type
histograms. All functions are *pure*.

Tie-breaks follow roster order and the order of *pairs*:

- best partner: first pair among the highest scores
- worst partner: last pair among the lowest scores
- key connector: first member among the highest averages
- isolation risk: last member among the lowest averages
- best triple: first (i < j < k) triple among the highest triple scores
"""

from __future__ import annotations

from collections import Counter

from pydantic import BaseModel, Field

from team_chemistry.engine.compatibility import CompatibilityResult, round_half_up
from team_chemistry.engine.pairs import PairResult
from team_chemistry.personality_types import MbtiType
from team_chemistry.reference_data import GRADES, Grade
from team_chemistry.roster import TeamMember, ensure_unique_ids


def empty_grade_counts() -> dict[Grade, int]:
    return {g: 0 for g in GRADES}


# ---------------------------------------------------------------------------
# Result models
# ---------------------------------------------------------------------------
class PartnerLink(BaseModel):
    member: TeamMember
    chemistry: CompatibilityResult


class MemberInsight(BaseModel):
    """How one member gets along with the rest of the roster."""

    member: TeamMember
    avg_score: int = 0
    best_partner: PartnerLink | None = None
    worst_partner: PartnerLink | None = None
    connection_count: dict[Grade, int] = Field(default_factory=empty_grade_counts)


class BestTriple(BaseModel):
    members: tuple[TeamMember, TeamMember, TeamMember]
    score: int


class TeamInsight(BaseModel):
    """Whole-team rollup."""

    synergy_score: int = 0
    key_connector: TeamMember | None = None
    isolation_risk: TeamMember | None = None
    best_triple: tuple[TeamMember, TeamMember, TeamMember] | None = None
    best_triple_score: int = 0
    type_distribution: dict[MbtiType, int] = Field(default_factory=dict)
    grade_distribution: dict[Grade, int] = Field(default_factory=empty_grade_counts)
    total_pairs: int = 0


# ---------------------------------------------------------------------------
# Member insight
# ---------------------------------------------------------------------------
def compute_member_insight(member: TeamMember, pairs: list[PairResult]) -> MemberInsight:
    """Average score and best/worst partner for *member*."""
    own_pairs = [p for p in pairs if member.id in (p.member_a.id, p.member_b.id)]
    if not own_pairs:
        return MemberInsight(member=member)

    avg = round_half_up(sum(p.chemistry.score for p in own_pairs) / len(own_pairs))

    # Stable sort: equal scores keep their input order, even with reverse=True.
    ranked = sorted(own_pairs, key=lambda p: p.chemistry.score, reverse=True)
    best, worst = ranked[0], ranked[-1]

    counts = empty_grade_counts()
    for p in own_pairs:
        counts[p.chemistry.grade] += 1

    return MemberInsight(
        member=member,
        avg_score=avg,
        best_partner=_link(member, best),
        worst_partner=_link(member, worst),
        connection_count=counts,
    )


def _link(member: TeamMember, pair: PairResult) -> PartnerLink:
    partner = pair.member_b if pair.member_a.id == member.id else pair.member_a
    return PartnerLink(member=partner, chemistry=pair.chemistry)


# ---------------------------------------------------------------------------
# Best triple
# ---------------------------------------------------------------------------
def find_best_triple(members: list[TeamMember], pairs: list[PairResult]) -> BestTriple | None:
    """Exhaustive C(n,3) search for the triple with the highest mean pair score.

    A pair missing from *pairs* counts as 0.
    """
    if len(members) < 3:
        return None

    scores: dict[frozenset[str], int] = {
        frozenset((p.member_a.id, p.member_b.id)): p.chemistry.score for p in pairs
    }

    def pair_score(a: TeamMember, b: TeamMember) -> int:
        return scores.get(frozenset((a.id, b.id)), 0)

    best: BestTriple | None = None
    n = len(members)
    for i in range(n):
        for j in range(i + 1, n):
            for k in range(j + 1, n):
                a, b, c = members[i], members[j], members[k]
                avg = round_half_up((pair_score(a, b) + pair_score(b, c) + pair_score(a, c)) / 3)
                if best is None or avg > best.score:
                    best = BestTriple(members=(a, b, c), score=avg)
    return best


# ---------------------------------------------------------------------------
# Team insight
# ---------------------------------------------------------------------------
def compute_team_insight(members: list[TeamMember], pairs: list[PairResult]) -> TeamInsight:
    """Roll *pairs* up into a :class:`TeamInsight` for *members*."""
    ensure_unique_ids(members)

    grade_distribution = empty_grade_counts()
    for p in pairs:
        grade_distribution[p.chemistry.grade] += 1

    synergy = round_half_up(sum(p.chemistry.score for p in pairs) / len(pairs)) if pairs else 0

    insights = [compute_member_insight(m, pairs) for m in members]
    key_connector: TeamMember | None = None
    isolation_risk: TeamMember | None = None
    if insights:
        top = max(i.avg_score for i in insights)
        bottom = min(i.avg_score for i in insights)
        key_connector = next(i.member for i in insights if i.avg_score == top)
        isolation_risk = [i.member for i in insights if i.avg_score == bottom][-1]
    if len(members) < 2:
        isolation_risk = None

    triple = find_best_triple(members, pairs)

    return TeamInsight(
        synergy_score=synergy,
        key_connector=key_connector,
        isolation_risk=isolation_risk,
        best_triple=triple.members if triple else None,
        best_triple_score=triple.score if triple else 0,
        type_distribution=dict(Counter(m.mbti_type for m in members)),
        grade_distribution=grade_distribution,
        total_pairs=len(pairs),
    )
