"""Team roster models: members, relationship roles and the persisted store.

Members are immutable snapshots; every store helper returns a new
:class:`TeamStore` instead of mutating the one passed in.
"""

from __future__ import annotations

from collections import Counter
import time
from typing import Literal
import uuid

from pydantic import BaseModel, ConfigDict, Field

from team_chemistry.personality_types import MbtiType
from team_chemistry.reference_data import ChemistryRole


# ---------------------------------------------------------------------------
# Roles
# ---------------------------------------------------------------------------
# How a stored member relates to the viewer.
MemberRole = Literal["boss", "senior", "peer", "junior"]

# Viewer position used for role tips: a boss or senior makes the viewer their
# junior, a junior makes the viewer their leader.
ROLE_PERSPECTIVE: dict[MemberRole, ChemistryRole] = {
    "boss": "junior",
    "senior": "junior",
    "peer": "peer",
    "junior": "leader",
}


def to_chemistry_role(role: str) -> ChemistryRole:
    """Map a stored member role onto the viewer's chemistry role."""
    try:
        return ROLE_PERSPECTIVE[role]  # type: ignore[index]
    except KeyError:
        raise ValueError(f"Unknown member role: {role!r}") from None


# ---------------------------------------------------------------------------
# Members
# ---------------------------------------------------------------------------
ME_ID = "__me__"


class TeamMember(BaseModel):
    """A coworker (or the viewer) with an assigned personality type."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    nickname: str = Field(..., min_length=1, max_length=50)
    mbti_type: MbtiType
    role: MemberRole = "peer"
    added_at: int = Field(default=0, ge=0)


def create_me_member(my_type: MbtiType, nickname: str = "Me") -> TeamMember:
    """Synthesize the viewer as a roster entry. Never persisted."""
    return TeamMember(id=ME_ID, nickname=nickname, mbti_type=my_type, role="peer", added_at=0)


def build_all_members(my_type: MbtiType | None, members: list[TeamMember]) -> list[TeamMember]:
    """Prepend the viewer to *members* when the viewer's type is known."""
    if my_type is None:
        return list(members)
    return [create_me_member(my_type), *members]


def ensure_unique_ids(members: list[TeamMember]) -> None:
    """Raise ``ValueError`` if two members share an id."""
    dupes = [mid for mid, count in Counter(m.id for m in members).items() if count > 1]
    if dupes:
        raise ValueError(f"Duplicate member ids: {', '.join(dupes)}")


# ---------------------------------------------------------------------------
# Store
# ---------------------------------------------------------------------------
class TeamStore(BaseModel):
    """Everything the app persists: the viewer's type plus the roster."""

    my_type: MbtiType | None = None
    my_role: ChemistryRole = "peer"
    members: list[TeamMember] = Field(default_factory=list)
    analysis_count: int = Field(default=0, ge=0)
    ai_credits: int = Field(default=0, ge=0)


def _new_member_id(now_ms: int) -> str:
    return f"{now_ms}-{uuid.uuid4().hex[:4]}"


def add_member(
    store: TeamStore,
    nickname: str,
    mbti_type: MbtiType,
    role: MemberRole,
    now_ms: int | None = None,
) -> TeamStore:
    """Append a new member with a fresh id."""
    now_ms = int(time.time() * 1000) if now_ms is None else now_ms
    member = TeamMember(
        id=_new_member_id(now_ms),
        nickname=nickname,
        mbti_type=mbti_type,
        role=role,
        added_at=now_ms,
    )
    return store.model_copy(update={"members": [*store.members, member]})


def remove_member(store: TeamStore, member_id: str) -> TeamStore:
    return store.model_copy(update={"members": [m for m in store.members if m.id != member_id]})


def update_member(
    store: TeamStore,
    member_id: str,
    *,
    nickname: str | None = None,
    mbti_type: MbtiType | None = None,
    role: MemberRole | None = None,
) -> TeamStore:
    """Edit nickname, type or role of one member; unknown ids are ignored."""
    updates = {
        k: v
        for k, v in (("nickname", nickname), ("mbti_type", mbti_type), ("role", role))
        if v is not None
    }
    if not updates:
        return store
    members = [
        TeamMember.model_validate({**m.model_dump(), **updates}) if m.id == member_id else m
        for m in store.members
    ]
    return store.model_copy(update={"members": members})


def increment_analysis(store: TeamStore) -> TeamStore:
    return store.model_copy(update={"analysis_count": store.analysis_count + 1})


def add_ai_credits(store: TeamStore, count: int) -> TeamStore:
    if count < 0:
        raise ValueError("count must be non-negative")
    return store.model_copy(update={"ai_credits": store.ai_credits + count})


def use_ai_credit(store: TeamStore) -> TeamStore:
    """Spend one AI credit; a store with no credits is returned unchanged."""
    if store.ai_credits <= 0:
        return store
    return store.model_copy(update={"ai_credits": store.ai_credits - 1})
