# Insights Module
# AI budget advice from aggregated household numbers
#
# Components:
# - engine.py: Snapshot aggregation, prompt rendering, reply parsing
# - generator.py: OpenAI-backed insight generator
# - cache.py: Per-user TTL cache
# - service.py: Cache-first retrieval
# - routes.py: /insights endpoint

from .schemas import Insight, InsightsResponse, FinancialSnapshot
from .engine import InsightFormatError, build_snapshot, build_insights_prompt, parse_insights
from .cache import InsightCache, insight_cache
from .generator import InsightGenerator, OpenAIInsightGenerator, get_insight_generator
from .service import get_insights

__all__ = [
    "Insight",
    "InsightsResponse",
    "FinancialSnapshot",
    "InsightFormatError",
    "build_snapshot",
    "build_insights_prompt",
    "parse_insights",
    "InsightCache",
    "insight_cache",
    "InsightGenerator",
    "OpenAIInsightGenerator",
    "get_insight_generator",
    "get_insights",
]
