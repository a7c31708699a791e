"""Optional AI narrative for a pair of types.

Builds the coaching prompt for a (viewer type, other type, role, scenario,
context) request and passes it to the configured LLMs in order. The text that
comes back is returned as-is. Failures never raise to the caller: the
response carries an ``error`` message instead.
"""

from __future__ import annotations

from collections.abc import Callable
import logging
import threading
import time
from typing import Literal

from crewai import LLM
from pydantic import BaseModel

from team_chemistry.llm_config import get_available_llms
from team_chemistry.personality_types import MbtiType


logger = logging.getLogger(__name__)

NarrativeScenario = Literal["coaching", "team-analysis", "villain-sim"]


# ---------------------------------------------------------------------------
# Prompt text
# ---------------------------------------------------------------------------
SYSTEM_PROMPT = """You are a workplace culture coach. Using MBTI, you analyze relationships between coworkers and give practical advice.

Rules:
- Keep it concise (roughly 100-200 words)
- Polite, professional tone with a light touch of humor
- Concrete advice that can be applied today
- Include example phrases the reader can actually say or send"""

SCENARIO_PROMPTS: dict[str, str] = {
    "coaching": (
        "Recommend an effective way for these two to talk, with ready-to-use lines. "
        "Format them as messages that can be copied and sent as-is."
    ),
    "team-analysis": (
        "Analyze this relationship in depth, then suggest how to prevent conflict "
        "and maximize synergy."
    ),
    "villain-sim": (
        "Give three scenario-based strategies for when the other person makes things "
        "difficult. Include a real line to say for each strategy."
    ),
}

CONTEXT_LABELS: dict[str, str] = {
    "salary": "negotiating salary",
    "feedback": "giving feedback",
    "conflict": "a conflict has come up",
    "request": "asking for work to be done",
    "passive-aggressive": "the other person is being passive-aggressive",
    "credit-steal": "the other person is taking credit for my work",
    "micromanage": "the other person is micromanaging",
    "gossip": "the other person is gossiping",
    "project": "project staffing",
    "leadership": "leadership style",
    "growth": "career growth",
    "conflict-prevention": "conflict prevention",
}

ROLE_LABELS: dict[str, str] = {
    "leader": "their manager (leader)",
    "peer": "their peer",
    "junior": "their junior",
}

RATE_LIMITED_ERROR = "Too many requests. Please try again in a moment."
FAILED_ERROR = "The analysis request failed. Please try again in a moment."


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------
class NarrativeRequest(BaseModel):
    my_type: MbtiType
    their_type: MbtiType
    role: str
    scenario: NarrativeScenario = "coaching"
    context: str | None = None


class NarrativeResponse(BaseModel):
    result: str = ""
    error: str | None = None


def build_user_prompt(request: NarrativeRequest) -> str:
    """Render the user message for *request*."""
    context = request.context or ""
    return "\n".join([
        f"My MBTI: {request.my_type}",
        f"Their MBTI: {request.their_type}",
        f"My role: {ROLE_LABELS.get(request.role, request.role)}",
        f"Situation: {CONTEXT_LABELS.get(context) or context or 'general'}",
        "",
        SCENARIO_PROMPTS.get(request.scenario, SCENARIO_PROMPTS["coaching"]),
    ])


# ---------------------------------------------------------------------------
# Rate limiting
# ---------------------------------------------------------------------------
class RateLimiter:
    """Sliding-window request limiter keyed by client id. Thread-safe."""

    def __init__(
        self,
        max_requests: int = 10,
        window_seconds: float = 60.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._max_requests = max_requests
        self._window = window_seconds
        self._clock = clock
        self._hits: dict[str, list[float]] = {}
        self._lock = threading.Lock()

    def allow(self, client_id: str) -> bool:
        """Record a request for *client_id*; False if the window is full."""
        with self._lock:
            now = self._clock()
            recent = [t for t in self._hits.get(client_id, []) if now - t < self._window]
            if len(recent) >= self._max_requests:
                self._hits[client_id] = recent
                return False
            recent.append(now)
            self._hits[client_id] = recent
            return True


# ---------------------------------------------------------------------------
# Service
# ---------------------------------------------------------------------------
class NarrativeService:
    """Sends narrative requests to a chain of LLMs, first success wins."""

    def __init__(
        self,
        llms: list[tuple[str, LLM]] | None = None,
        rate_limiter: RateLimiter | None = None,
    ) -> None:
        self._llms = get_available_llms() if llms is None else llms
        self._rate_limiter = rate_limiter or RateLimiter()

    def analyze(self, request: NarrativeRequest, client_id: str = "unknown") -> NarrativeResponse:
        if not self._rate_limiter.allow(client_id):
            logger.info("Narrative request rate-limited for client %s", client_id)
            return NarrativeResponse(error=RATE_LIMITED_ERROR)

        messages = [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": build_user_prompt(request)},
        ]
        for label, llm in self._llms:
            try:
                text = llm.call(messages)
            except Exception:
                logger.warning("Narrative LLM %s failed", label, exc_info=True)
                continue
            return NarrativeResponse(result=str(text or ""))

        logger.error(
            "All narrative LLMs failed for %s x %s (%s)",
            request.my_type,
            request.their_type,
            request.scenario,
        )
        return NarrativeResponse(error=FAILED_ERROR)
