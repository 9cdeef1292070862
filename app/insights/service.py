"""Insights service - cache-first insight retrieval."""
import logging
from typing import List

from app.insights.cache import InsightCache
from app.insights.generator import InsightGenerator
from app.insights.schemas import Insight, FinancialSnapshot

logger = logging.getLogger(__name__)


async def get_insights(
    user_id: str,
    snapshot: FinancialSnapshot,
    generator: InsightGenerator,
    cache: InsightCache,
    force: bool = False,
) -> List[Insight]:
    """
    Return the user's insights, generating fresh ones only when needed.

    Cached insights are served until they expire unless ``force`` is set.
    Generator errors propagate; nothing is cached on failure.
    """
    if not force:
        cached = cache.get(user_id)
        if cached is not None:
            logger.debug(f"Serving cached insights for user {user_id}")
            return cached

    insights = await generator(snapshot)
    cache.set(user_id, insights)
    logger.info(f"Generated {len(insights)} insights for user {user_id}")
    return insights
