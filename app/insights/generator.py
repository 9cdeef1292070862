"""
Insight Generator - the model call behind AI insights.

Anything with the shape ``async (FinancialSnapshot) -> List[Insight]`` can act
as a generator; the OpenAI-backed one is used in production.
"""
import logging
from typing import List, Optional, Protocol

from openai import AsyncOpenAI

from app.insights.engine import SYSTEM_PROMPT, build_insights_prompt, parse_insights
from app.insights.schemas import Insight, FinancialSnapshot

logger = logging.getLogger(__name__)


class InsightGenerator(Protocol):
    async def __call__(self, snapshot: FinancialSnapshot) -> List[Insight]:
        ...


class OpenAIInsightGenerator:
    """Generates insights with an OpenAI chat completion in JSON mode."""

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-4o-mini",
        max_tokens: int = 800,
        client: Optional[AsyncOpenAI] = None,
    ):
        self.model = model
        self.max_tokens = max_tokens
        self.client = client or AsyncOpenAI(api_key=api_key)

    async def __call__(self, snapshot: FinancialSnapshot) -> List[Insight]:
        response = await self.client.chat.completions.create(
            model=self.model,
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": build_insights_prompt(snapshot)},
            ],
            response_format={"type": "json_object"},
            max_tokens=self.max_tokens,
            temperature=0.7,
        )

        content = response.choices[0].message.content or ""
        return parse_insights(content.strip())


def get_insight_generator() -> Optional[InsightGenerator]:
    """OpenAI generator, or None when OPENAI_API_KEY is not configured."""
    from app.config import settings

    if not settings.OPENAI_API_KEY:
        logger.warning("OPENAI_API_KEY not configured, insights unavailable")
        return None

    return OpenAIInsightGenerator(
        api_key=settings.OPENAI_API_KEY,
        model=settings.OPENAI_MODEL,
        max_tokens=settings.OPENAI_MAX_TOKENS,
    )
