"""Static chemistry tables: overrides, axis scores, templates, grades, roles and team types.

The tables ship as ``data/chemistry.json`` and are loaded once per process.
Every engine function accepts an alternate :class:`ChemistryData` so tests
and experiments can inject their own tables.
"""

from __future__ import annotations

from functools import lru_cache
import json
import logging
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, model_validator

from team_chemistry.personality_types import MBTI_TYPES


logger = logging.getLogger(__name__)

_DATA_DIR = Path(__file__).parent / "data"

Grade = Literal["S", "A", "B", "C", "F"]
GRADES: tuple[Grade, ...] = ("S", "A", "B", "C", "F")

ChemistryRole = Literal["leader", "peer", "junior"]
CHEMISTRY_ROLES: tuple[ChemistryRole, ...] = ("leader", "peer", "junior")

TeamTypeId = Literal["battle", "healing", "chaos", "think-tank", "family", "machine", "balanced"]
TEAM_TYPE_IDS: tuple[TeamTypeId, ...] = (
    "battle", "healing", "chaos", "think-tank", "family", "machine", "balanced",
)


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------
class ChemistryOverride(BaseModel):
    """Hand-written chemistry for a specific type pair."""

    score: int
    synergy: str = Field(..., min_length=1)
    conflict: str = Field(..., min_length=1)
    special_tip: str | None = None


class AxisTemplate(BaseModel):
    synergy: str
    conflict: str
    tip: str = ""


class RoleModifier(BaseModel):
    """Role-tip wording for one viewer position."""

    prefix: str
    matched_tip: str
    default_tip: str


class TeamArchetype(BaseModel):
    """A team-level label chosen from the members' letter mix."""

    id: TeamTypeId
    name: str = Field(..., min_length=1)
    emoji: str = Field(..., min_length=1)
    description: str = Field(..., min_length=5)


class ChemistryData(BaseModel):
    """All tables the compatibility engine reads."""

    version: str = "1.0"
    overrides: dict[str, ChemistryOverride] = Field(default_factory=dict)
    axis_scores: dict[str, int] = Field(default_factory=dict)
    axis_templates: dict[str, AxisTemplate] = Field(default_factory=dict)
    grade_thresholds: dict[Grade, int]
    grade_labels: dict[Grade, str]
    role_modifiers: dict[ChemistryRole, RoleModifier]
    team_types: list[TeamArchetype] = Field(..., min_length=1)

    @model_validator(mode="after")
    def _validate_tables(self) -> ChemistryData:
        for key in self.overrides:
            parts = key.split("-")
            if len(parts) != 2 or not all(p in MBTI_TYPES for p in parts):
                raise ValueError(f"Invalid override key: {key!r}")

        missing_grades = [g for g in GRADES if g not in self.grade_thresholds]
        if missing_grades:
            raise ValueError(f"Missing grade thresholds: {', '.join(missing_grades)}")
        thresholds = [self.grade_thresholds[g] for g in GRADES]
        if any(hi <= lo for hi, lo in zip(thresholds, thresholds[1:])):
            raise ValueError("Grade thresholds must strictly decrease from S to F")
        missing_labels = [g for g in GRADES if g not in self.grade_labels]
        if missing_labels:
            raise ValueError(f"Missing grade labels: {', '.join(missing_labels)}")

        missing_roles = [r for r in CHEMISTRY_ROLES if r not in self.role_modifiers]
        if missing_roles:
            raise ValueError(f"Missing role modifiers: {', '.join(missing_roles)}")

        ids = [t.id for t in self.team_types]
        if sorted(ids) != sorted(TEAM_TYPE_IDS):
            raise ValueError("team_types must list each archetype exactly once")
        if ids[-1] != "balanced":
            raise ValueError("The balanced archetype must be the last team type")
        return self

    def team_type(self, type_id: TeamTypeId) -> TeamArchetype:
        return next(t for t in self.team_types if t.id == type_id)


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------
def load_chemistry_data(path: str | Path | None = None) -> ChemistryData:
    """Load and validate chemistry tables from JSON (defaults to the bundled file)."""
    source = Path(path) if path is not None else _DATA_DIR / "chemistry.json"
    try:
        with open(source, encoding="utf-8") as fh:
            raw = json.load(fh)
    except (OSError, json.JSONDecodeError) as exc:
        raise ValueError(f"Failed to load chemistry data from {source}: {exc}") from exc

    data = ChemistryData.model_validate(raw)
    logger.info(
        "Chemistry data v%s loaded: %d overrides, %d axis scores",
        data.version,
        len(data.overrides),
        len(data.axis_scores),
    )
    return data


@lru_cache(maxsize=1)
def get_chemistry_data() -> ChemistryData:
    """Return the bundled tables, loaded on first use."""
    return load_chemistry_data()
