"""Tests for team_chemistry/engine/team_type.py."""

import pytest

from team_chemistry.engine.team_type import determine_team_type, letter_percentages
from team_chemistry.reference_data import get_chemistry_data


class TestLetterPercentages:
    def test_share_of_members(self):
        pct = letter_percentages(["ESTJ", "ISTJ"])
        assert pct["E"] == 50
        assert pct["I"] == 50
        assert pct["S"] == 100
        assert pct["N"] == 0
        assert pct["T"] == 100
        assert pct["J"] == 100

    def test_each_axis_sums_to_100(self):
        pct = letter_percentages(["ENFP", "ISTJ", "INTP"])
        for a, b in (("E", "I"), ("S", "N"), ("T", "F"), ("J", "P")):
            assert pct[a] + pct[b] == pytest.approx(100)

    def test_empty(self):
        assert all(v == 0 for v in letter_percentages([]).values())

    def test_unknown_type(self):
        with pytest.raises(ValueError):
            letter_percentages(["XXXX"])


class TestDetermineTeamType:
    def test_empty_team_is_fallback(self):
        result = determine_team_type([])
        assert result.id == "balanced"
        assert result == get_chemistry_data().team_types[-1]

    def test_first_rule_wins(self):
        # T 100 / J 100 matches battle; S 100 / J 100 would also match machine.
        assert determine_team_type(["ESTJ", "ESTJ", "ISTJ"]).id == "battle"

    @pytest.mark.parametrize(
        ("types", "expected"),
        [
            (["INFP", "ISFJ"], "healing"),
            (["ENFP", "ESTP"], "chaos"),
            (["INTP", "INTP", "ENTJ"], "think-tank"),
            (["ENFJ", "ESFJ"], "family"),
            (["ISTJ", "ESFJ"], "machine"),
            (["INTJ", "ESFP"], "balanced"),
        ],
    )
    def test_archetypes(self, types, expected):
        assert determine_team_type(types).id == expected

    def test_archetype_has_display_data(self):
        result = determine_team_type(["ESTJ"])
        assert result.name
        assert result.emoji
        assert result.description

    def test_idempotent(self):
        types = ["ENFP", "ISTJ", "INTP"]
        assert determine_team_type(types) == determine_team_type(types)
