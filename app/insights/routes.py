"""Insights API routes."""
import logging
import math
import re
from typing import Optional

import openai
from fastapi import APIRouter, Depends, HTTPException

from app.insights.cache import InsightCache, insight_cache
from app.insights.engine import InsightFormatError, build_snapshot
from app.insights.generator import InsightGenerator, get_insight_generator
from app.insights.schemas import InsightsRequest, InsightsResponse
from app.insights.service import get_insights

logger = logging.getLogger(__name__)

router = APIRouter()

DEFAULT_RETRY_AFTER_SECONDS = 60
_RETRY_IN = re.compile(r"retry in (\d+\.?\d*)s")


def get_insight_cache() -> InsightCache:
    return insight_cache


def retry_after_seconds(error: Exception) -> int:
    """Seconds to wait, from a "retry in Ns" hint in the error message."""
    match = _RETRY_IN.search(str(error))
    if match:
        return math.ceil(float(match.group(1)))
    return DEFAULT_RETRY_AFTER_SECONDS


@router.post("", response_model=InsightsResponse)
async def create_insights(
    request: InsightsRequest,
    generator: Optional[InsightGenerator] = Depends(get_insight_generator),
    cache: InsightCache = Depends(get_insight_cache),
):
    """
    Four AI-generated insights about the household budget.

    Results are cached per user for INSIGHTS_CACHE_HOURS; set ``force`` to
    regenerate.
    """
    if generator is None:
        raise HTTPException(status_code=503, detail="OPENAI_API_KEY is not configured.")

    snapshot = build_snapshot(request.entries, request.assets)

    try:
        insights = await get_insights(
            request.user_id,
            snapshot,
            generator,
            cache,
            force=request.force,
        )
    except openai.RateLimitError as e:
        retry_after = retry_after_seconds(e)
        logger.warning(f"Insights rate limited for user {request.user_id}, retry in {retry_after}s")
        raise HTTPException(
            status_code=429,
            detail="AI is taking a quick breather due to high demand. Please wait a moment.",
            headers={"Retry-After": str(retry_after)},
        )
    except InsightFormatError as e:
        logger.error(f"Insights reply had unexpected format: {e}")
        raise HTTPException(status_code=500, detail="AI returned unexpected format. Try refreshing.")
    except Exception:
        logger.exception(f"Insights generation failed for user {request.user_id}")
        raise HTTPException(status_code=500, detail="Failed to generate insights.")

    return InsightsResponse(insights=insights)
