"""MBTI personality type catalog.

Defines the 16 four-letter type codes, their axis letters and the descriptive
card metadata shipped in ``data/types.json``.
"""

from __future__ import annotations

from functools import lru_cache
import json
from pathlib import Path
from typing import Literal, get_args

from pydantic import BaseModel, Field, model_validator


# ---------------------------------------------------------------------------
# Type codes & axes
# ---------------------------------------------------------------------------
MbtiType = Literal[
    "ISTJ", "ISFJ", "INFJ", "INTJ",
    "ISTP", "ISFP", "INFP", "INTP",
    "ESTP", "ESFP", "ENFP", "ENTP",
    "ESTJ", "ESFJ", "ENFJ", "ENTJ",
]

MBTI_TYPES: tuple[MbtiType, ...] = get_args(MbtiType)

# Axis order matches the letter positions of a type code.
AXES: tuple[tuple[str, str], ...] = (
    ("E", "I"),
    ("S", "N"),
    ("T", "F"),
    ("J", "P"),
)

LETTERS: tuple[str, ...] = tuple(letter for axis in AXES for letter in axis)

_DATA_DIR = Path(__file__).parent / "data"


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------
class TypeInfo(BaseModel):
    """Card metadata for a single personality type."""

    title: str = Field(..., min_length=1)
    emoji: str = Field(..., min_length=1)
    subtitle: str = Field(..., min_length=1)
    description: str = Field(..., min_length=5)
    work_style: str
    comm_style: str
    landmine: str
    strength: str
    weakness: str
    lunch_style: str
    slack_style: str
    survival_tip: str


class TypeCatalog(BaseModel):
    """Versioned registry of all 16 types."""

    version: str = "1.0"
    types: dict[MbtiType, TypeInfo]

    @model_validator(mode="after")
    def _covers_all_types(self) -> TypeCatalog:
        missing = [t for t in MBTI_TYPES if t not in self.types]
        if missing:
            raise ValueError(f"Type catalog is missing: {', '.join(missing)}")
        return self


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------
def load_type_catalog(path: str | Path | None = None) -> TypeCatalog:
    """Load and validate a type catalog JSON file (defaults to the bundled one)."""
    source = Path(path) if path is not None else _DATA_DIR / "types.json"
    with open(source, encoding="utf-8") as fh:
        return TypeCatalog.model_validate(json.load(fh))


@lru_cache(maxsize=1)
def get_type_catalog() -> TypeCatalog:
    return load_type_catalog()


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def is_mbti_type(value: str) -> bool:
    return value in MBTI_TYPES


def require_type(value: str) -> MbtiType:
    """Return *value* as a catalog type or raise ``ValueError``."""
    if value not in MBTI_TYPES:
        raise ValueError(f"Unknown personality type: {value!r}")
    return value  # type: ignore[return-value]


def get_type_info(mbti_type: str, catalog: TypeCatalog | None = None) -> TypeInfo:
    """Look up the card metadata for *mbti_type*."""
    catalog = catalog or get_type_catalog()
    return catalog.types[require_type(mbti_type)]


# ---------------------------------------------------------------------------
# Observation quiz scoring
# ---------------------------------------------------------------------------
def infer_type_from_scores(scores: dict[str, int]) -> MbtiType:
    """Pick the dominant letter per axis from tallied quiz answers.

    Ties go to the first letter of the axis (E, S, T, J).
    """
    letters = [
        first if scores.get(first, 0) >= scores.get(second, 0) else second
        for first, second in AXES
    ]
    return "".join(letters)  # type: ignore[return-value]


def confidence_level(scores: dict[str, int]) -> int:
    """Return a 50-99 confidence figure for an inferred type.

    Each axis contributes |a - b| / (a + b + 1); the mean is scaled onto
    50..99.
    """
    diffs = [
        abs(scores.get(first, 0) - scores.get(second, 0))
        / (scores.get(first, 0) + scores.get(second, 0) + 1)
        for first, second in AXES
    ]
    avg_diff = sum(diffs) / len(AXES)
    return min(int(avg_diff * 100 + 50 + 0.5), 99)
