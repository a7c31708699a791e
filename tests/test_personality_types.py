"""Tests for team_chemistry/personality_types.py: catalog completeness & quiz scoring."""

import json

from pydantic import ValidationError
import pytest

from team_chemistry.personality_types import (
    AXES,
    LETTERS,
    MBTI_TYPES,
    TypeInfo,
    confidence_level,
    get_type_catalog,
    get_type_info,
    infer_type_from_scores,
    is_mbti_type,
    load_type_catalog,
    require_type,
)


class TestTypeCodes:
    def test_sixteen_types(self):
        assert len(MBTI_TYPES) == 16
        assert len(set(MBTI_TYPES)) == 16

    def test_every_code_uses_one_letter_per_axis(self):
        for code in MBTI_TYPES:
            assert len(code) == 4
            for letter, axis in zip(code, AXES):
                assert letter in axis

    def test_letters(self):
        assert LETTERS == ("E", "I", "S", "N", "T", "F", "J", "P")


class TestCatalog:
    def test_bundled_catalog_covers_all_types(self):
        catalog = get_type_catalog()
        assert set(catalog.types) == set(MBTI_TYPES)

    def test_all_types_have_required_fields(self):
        for code in MBTI_TYPES:
            info = get_type_info(code)
            assert isinstance(info, TypeInfo)
            assert info.title
            assert info.comm_style
            assert len(info.description) >= 5

    def test_catalog_missing_type_rejected(self, tmp_path):
        raw = get_type_catalog().model_dump()
        del raw["types"]["ENTJ"]
        path = tmp_path / "types.json"
        path.write_text(json.dumps(raw), encoding="utf-8")
        with pytest.raises(ValidationError, match="ENTJ"):
            load_type_catalog(path)

    def test_get_type_info_unknown(self):
        with pytest.raises(ValueError):
            get_type_info("ABCD")


class TestLookupHelpers:
    def test_is_mbti_type(self):
        assert is_mbti_type("INTJ")
        assert not is_mbti_type("intj")
        assert not is_mbti_type("XXXX")

    def test_require_type_returns_value(self):
        assert require_type("ESFP") == "ESFP"

    def test_require_type_rejects_unknown(self):
        with pytest.raises(ValueError, match="Unknown personality type"):
            require_type("EEEE")


class TestInferType:
    def test_empty_scores_default_to_first_letters(self):
        assert infer_type_from_scores({}) == "ESTJ"

    def test_dominant_letters(self):
        scores = {"I": 2, "E": 1, "N": 1, "F": 3, "P": 1}
        assert infer_type_from_scores(scores) == "INFP"

    def test_tie_goes_to_first_letter(self):
        scores = {"E": 2, "I": 2, "S": 1, "N": 1, "T": 0, "F": 0, "J": 3, "P": 3}
        assert infer_type_from_scores(scores) == "ESTJ"


class TestConfidenceLevel:
    def test_no_answers_is_fifty(self):
        assert confidence_level({}) == 50

    def test_capped_at_99(self):
        scores = {"E": 3, "S": 3, "T": 3, "J": 3}
        assert confidence_level(scores) == 99

    def test_partial_signal(self):
        # E axis: 1/4 = 0.25, others 0 → mean 0.0625 → 56.25 → 56
        assert confidence_level({"E": 2, "I": 1}) == 56
