"""Tests for team_chemistry/engine/pairs.py."""

import pytest

from team_chemistry.engine.pairs import PairResult, compute_all_pairs
from team_chemistry.roster import TeamMember


def _members(*types: str) -> list[TeamMember]:
    return [
        TeamMember(id=f"m{i}", nickname=f"M{i}", mbti_type=t, role="peer")
        for i, t in enumerate(types)
    ]


class TestAllPairs:
    def test_empty(self):
        assert compute_all_pairs([]) == []

    def test_single_member(self):
        assert compute_all_pairs(_members("INTJ")) == []

    def test_two_members(self):
        results = compute_all_pairs(_members("ISTJ", "ENFP"))
        assert len(results) == 1  # upper-triangle only
        assert isinstance(results[0], PairResult)
        assert results[0].chemistry.score == 60

    @pytest.mark.parametrize("n", [3, 4, 5, 8])
    def test_pair_count(self, n):
        types = ["ISTJ", "ENFP", "INTJ", "ESFP", "INFJ", "ENTP", "ESTJ", "ISFP"][:n]
        results = compute_all_pairs(_members(*types))
        assert len(results) == n * (n - 1) // 2
        keys = {frozenset((p.member_a.id, p.member_b.id)) for p in results}
        assert len(keys) == len(results)

    def test_member_a_precedes_member_b(self):
        members = _members("ISTJ", "ENFP", "INTJ", "ESFP")
        order = {m.id: i for i, m in enumerate(members)}
        for p in compute_all_pairs(members):
            assert order[p.member_a.id] < order[p.member_b.id]

    def test_enumeration_order_is_stable(self):
        members = _members("ISTJ", "ENFP", "INTJ")
        ids = [(p.member_a.id, p.member_b.id) for p in compute_all_pairs(members)]
        assert ids == [("m0", "m1"), ("m0", "m2"), ("m1", "m2")]

    def test_stored_roles_are_ignored(self):
        members = [
            TeamMember(id="a", nickname="A", mbti_type="ENTJ", role="boss"),
            TeamMember(id="b", nickname="B", mbti_type="ISFP", role="junior"),
        ]
        pair = compute_all_pairs(members)[0]
        assert pair.chemistry.role_tip.startswith("As their peer:")

    def test_duplicate_ids_rejected(self):
        members = [
            TeamMember(id="x", nickname="A", mbti_type="ENTJ"),
            TeamMember(id="x", nickname="B", mbti_type="ISFP"),
        ]
        with pytest.raises(ValueError, match="Duplicate member ids"):
            compute_all_pairs(members)

    def test_idempotent(self):
        members = _members("ISTJ", "ENFP", "INTJ", "ESFP")
        assert compute_all_pairs(members) == compute_all_pairs(members)
