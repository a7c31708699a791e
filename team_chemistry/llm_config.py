"""LLM configuration for narrative chemistry analysis, with fallback support.

Provides factory functions for creating the primary (Anthropic) and
OpenRouter fallback LLMs from environment variables.
"""

import logging
import os

from crewai import LLM

logger = logging.getLogger(__name__)

DEFAULT_MODEL_NAME = "anthropic/claude-haiku-4-5-20251001"
MAX_TOKENS = 600


def create_primary_llm() -> LLM:
    """Create the primary LLM from environment variables.

    Returns:
        LLM configured with ANTHROPIC_API_KEY and NARRATIVE_MODEL_NAME
        (defaults to ``DEFAULT_MODEL_NAME``).

    Raises:
        ValueError: If ANTHROPIC_API_KEY is missing.
    """
    api_key = os.getenv("ANTHROPIC_API_KEY", "")
    model_name = os.getenv("NARRATIVE_MODEL_NAME", "") or DEFAULT_MODEL_NAME

    if not api_key:
        raise ValueError("ANTHROPIC_API_KEY is not set")

    if "/" not in model_name:
        model_name = f"anthropic/{model_name}"

    logger.info("Primary narrative LLM: model=%s", model_name)
    return LLM(model=model_name, api_key=api_key, max_tokens=MAX_TOKENS)


def create_openrouter_llm() -> LLM | None:
    """Create an OpenRouter fallback LLM if configured.

    Reads OPENROUTER_API_KEY and OPENROUTER_MODEL_NAME from env.

    Returns:
        LLM instance or None if not configured.
    """
    api_key = os.getenv("OPENROUTER_API_KEY", "")
    model_name = os.getenv("OPENROUTER_MODEL_NAME", "")

    if not api_key or not model_name:
        logger.info("OpenRouter fallback not configured (missing OPENROUTER_API_KEY or OPENROUTER_MODEL_NAME)")
        return None

    full_model = f"openrouter/{model_name}" if not model_name.startswith("openrouter/") else model_name

    logger.info("OpenRouter fallback LLM: model=%s", full_model)
    return LLM(
        model=full_model,
        base_url="https://openrouter.ai/api/v1",
        api_key=api_key,
        max_tokens=MAX_TOKENS,
    )


def get_available_llms() -> list[tuple[str, LLM]]:
    """Return a list of (label, LLM) for all configured LLMs.

    The primary LLM is always first. OpenRouter is appended if configured.
    Entries with missing configuration are skipped.
    """
    llms: list[tuple[str, LLM]] = []

    try:
        llms.append(("primary", create_primary_llm()))
    except ValueError as e:
        logger.warning("Primary LLM not available: %s", e)

    openrouter = create_openrouter_llm()
    if openrouter is not None:
        llms.append(("openrouter", openrouter))

    return llms
