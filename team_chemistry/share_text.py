"""Share-sheet text for type cards, chemistry results and team reports."""

from __future__ import annotations

from typing import Literal

ShareKind = Literal["card", "chemistry", "team"]


def generate_share_text(kind: str, data: dict[str, str]) -> str:
    """Render share text for *kind*; unknown kinds give an empty string.

    Expected keys:
        card:      emoji, title, subtitle
        chemistry: grade, my_type, their_type, synergy
        team:      emoji, team_type, description
    """
    if kind == "card":
        return (
            f"🏢 My work personality: {data['emoji']} {data['title']}\n"
            f"\"{data['subtitle']}\"\n\nTake the test too 👉"
        )
    if kind == "chemistry":
        return (
            f"💼 Work chemistry: grade {data['grade']}!\n"
            f"{data['my_type']} × {data['their_type']}\n"
            f"\"{data['synergy']}\"\n\nTry yours 👉"
        )
    if kind == "team":
        return (
            f"📊 Team MBTI - our team chemistry report\n"
            f"{data['emoji']} {data['team_type']}\n"
            f"\"{data['description']}\"\n\nAnalyze your team 👉"
        )
    return ""
