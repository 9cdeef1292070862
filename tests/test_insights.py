"""
Tests for AI insights: snapshot aggregation, prompt rendering, reply parsing,
the per-user cache and the OpenAI-backed generator.
"""

import json
import pytest
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

from app.insights.cache import InsightCache
from app.insights.engine import (
    InsightFormatError,
    SYSTEM_PROMPT,
    build_insights_prompt,
    build_snapshot,
    parse_insights,
)
from app.insights.generator import OpenAIInsightGenerator, get_insight_generator
from app.insights.routes import retry_after_seconds
from app.insights.schemas import Insight
from app.insights.service import get_insights


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def household(make_entry, make_asset):
    entries = [
        make_entry(category="income", name="Salary", amount=Decimal("50000.00")),
        make_entry(category="bill", name="Rent", amount=Decimal("8000.00"), due_day=1),
        make_entry(category="bill", name="Insurance", amount=Decimal("2000.00"),
                   recurrence="yearly", due_day=10, due_month=3),
        make_entry(category="saving", name="Emergency fund", amount=Decimal("5000.00")),
        make_entry(category="expense", name="Groceries", amount=Decimal("2000.00")),
    ]
    assets = [
        make_asset(type="asset", value=Decimal("100000.00")),
        make_asset(type="investment", value=Decimal("20000.00")),
        make_asset(type="liability", value=Decimal("30000.00")),
    ]
    return entries, assets


@pytest.fixture
def snapshot(household):
    return build_snapshot(*household)


@pytest.fixture
def insights():
    return [
        Insight(type="positive", title="Solid savings habit", body="You save 10%."),
        Insight(type="warning", title="Bills are creeping up", body="Bills take 20%."),
    ]


def _reply(items) -> str:
    return json.dumps({"insights": items})


# =============================================================================
# Unit Tests - Snapshot
# =============================================================================

class TestBuildSnapshot:
    """Aggregated numbers handed to the advisor."""

    def test_totals(self, snapshot):
        assert snapshot.income == Decimal("50000.00")
        assert snapshot.bill_total == Decimal("10000.00")
        assert snapshot.savings_total == Decimal("5000.00")
        assert snapshot.leftover == Decimal("35000.00")

    def test_balance_sheet_ignores_investments(self, snapshot):
        assert snapshot.total_assets == Decimal("100000.00")
        assert snapshot.total_liabilities == Decimal("30000.00")
        assert snapshot.net_worth == Decimal("70000.00")

    def test_rates(self, snapshot):
        assert snapshot.savings_rate == "10.0"
        assert snapshot.bill_rate == "20.0"

    def test_rates_without_income(self, make_entry):
        snapshot = build_snapshot([make_entry(category="bill", amount=Decimal("100.00"))], [])
        assert snapshot.savings_rate == "0"
        assert snapshot.bill_rate == "0"

    def test_named_lists(self, snapshot):
        assert [i.name for i in snapshot.incomes] == ["Salary"]
        assert [(b.name, b.recurrence) for b in snapshot.bills] == [("Rent", "monthly"), ("Insurance", "yearly")]
        assert [s.name for s in snapshot.savings] == ["Emergency fund"]


# =============================================================================
# Unit Tests - Prompt
# =============================================================================

class TestBuildInsightsPrompt:

    def test_includes_household_numbers(self, snapshot):
        prompt = build_insights_prompt(snapshot)

        assert "Salary ₱50,000.00" in prompt
        assert "Rent ₱8,000.00 (monthly); Insurance ₱2,000.00 (yearly)" in prompt
        assert "Total: ₱10,000.00/month (20.0% of income)" in prompt
        assert "Net worth: ₱70,000.00" in prompt
        assert '{"insights":[' in prompt

    def test_empty_lists_read_none(self):
        prompt = build_insights_prompt(build_snapshot([], []))
        assert "Income sources: none" in prompt
        assert "Savings: none" in prompt


# =============================================================================
# Unit Tests - Parse
# =============================================================================

class TestParseInsights:
    """Reading the model's JSON reply."""

    def test_valid_reply(self):
        result = parse_insights(_reply([
            {"type": "positive", "title": "Great start", "body": "Keep going."},
            {"type": "tip", "title": "Automate savings", "body": "Set a transfer."},
        ]))
        assert [i.type for i in result] == ["positive", "tip"]
        assert result[1].title == "Automate savings"

    def test_invalid_json(self):
        with pytest.raises(InsightFormatError):
            parse_insights("```json\n{}\n```")

    def test_missing_list(self):
        with pytest.raises(InsightFormatError):
            parse_insights(json.dumps({"advice": []}))
        with pytest.raises(InsightFormatError):
            parse_insights(json.dumps([{"type": "tip", "title": "a", "body": "b"}]))

    def test_empty_list(self):
        with pytest.raises(InsightFormatError):
            parse_insights(_reply([]))

    def test_unknown_type(self):
        with pytest.raises(InsightFormatError):
            parse_insights(_reply([{"type": "alarm", "title": "a", "body": "b"}]))

    def test_empty_title(self):
        with pytest.raises(InsightFormatError):
            parse_insights(_reply([{"type": "info", "title": "", "body": "b"}]))


# =============================================================================
# Unit Tests - Cache
# =============================================================================

class TestInsightCache:
    """Per-user TTL cache with an injected clock."""

    @pytest.fixture
    def clock(self):
        now = {"value": datetime(2024, 6, 15, 8, 0, tzinfo=timezone.utc)}

        def _clock():
            return now["value"]

        _clock.advance = lambda **kwargs: now.update(value=now["value"] + timedelta(**kwargs))
        return _clock

    def test_hit_before_expiry(self, clock, insights):
        cache = InsightCache(ttl_hours=24, clock=clock)
        cache.set("user-1", insights)

        clock.advance(hours=23, minutes=59)

        assert cache.get("user-1") == insights

    def test_expires_after_ttl(self, clock, insights):
        cache = InsightCache(ttl_hours=24, clock=clock)
        cache.set("user-1", insights)

        clock.advance(hours=24)

        assert cache.get("user-1") is None

    def test_keyed_by_user(self, clock, insights):
        cache = InsightCache(clock=clock)
        cache.set("user-1", insights)
        assert cache.get("user-2") is None

    def test_invalidate_and_clear(self, clock, insights):
        cache = InsightCache(clock=clock)
        cache.set("user-1", insights)
        cache.set("user-2", insights)

        cache.invalidate("user-1")
        assert cache.get("user-1") is None
        assert cache.get("user-2") == insights

        cache.clear()
        assert cache.get("user-2") is None


# =============================================================================
# Async Tests - Service
# =============================================================================

class TestGetInsights:
    """Cache-first retrieval."""

    @pytest.mark.asyncio
    async def test_generates_and_caches(self, snapshot, insights):
        generator = AsyncMock(return_value=insights)
        cache = InsightCache()

        result = await get_insights("user-1", snapshot, generator, cache)

        assert result == insights
        generator.assert_awaited_once_with(snapshot)
        assert cache.get("user-1") == insights

    @pytest.mark.asyncio
    async def test_serves_cached(self, snapshot, insights):
        generator = AsyncMock(return_value=[])
        cache = InsightCache()
        cache.set("user-1", insights)

        result = await get_insights("user-1", snapshot, generator, cache)

        assert result == insights
        generator.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_force_regenerates(self, snapshot, insights):
        fresh = [Insight(type="info", title="Fresh look", body="New numbers.")]
        generator = AsyncMock(return_value=fresh)
        cache = InsightCache()
        cache.set("user-1", insights)

        result = await get_insights("user-1", snapshot, generator, cache, force=True)

        assert result == fresh
        assert cache.get("user-1") == fresh

    @pytest.mark.asyncio
    async def test_failure_not_cached(self, snapshot):
        generator = AsyncMock(side_effect=InsightFormatError("bad reply"))
        cache = InsightCache()

        with pytest.raises(InsightFormatError):
            await get_insights("user-1", snapshot, generator, cache)

        assert cache.get("user-1") is None


# =============================================================================
# Async Tests - OpenAI generator
# =============================================================================

def _completion(content):
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


class TestOpenAIInsightGenerator:

    @pytest.mark.asyncio
    async def test_calls_chat_completions_in_json_mode(self, snapshot):
        client = MagicMock()
        client.chat.completions.create = AsyncMock(return_value=_completion(
            "  " + _reply([{"type": "tip", "title": "Trim bills", "body": "Call your ISP."}]) + "\n"
        ))
        generator = OpenAIInsightGenerator(api_key="sk-test", model="gpt-4o-mini", max_tokens=800, client=client)

        result = await generator(snapshot)

        assert result == [Insight(type="tip", title="Trim bills", body="Call your ISP.")]
        kwargs = client.chat.completions.create.await_args.kwargs
        assert kwargs["model"] == "gpt-4o-mini"
        assert kwargs["max_tokens"] == 800
        assert kwargs["response_format"] == {"type": "json_object"}
        assert kwargs["messages"][0] == {"role": "system", "content": SYSTEM_PROMPT}
        assert kwargs["messages"][1]["content"] == build_insights_prompt(snapshot)

    @pytest.mark.asyncio
    async def test_empty_reply_is_format_error(self, snapshot):
        client = MagicMock()
        client.chat.completions.create = AsyncMock(return_value=_completion(None))
        generator = OpenAIInsightGenerator(api_key="sk-test", client=client)

        with pytest.raises(InsightFormatError):
            await generator(snapshot)


class TestGetInsightGenerator:

    def test_none_without_key(self, monkeypatch):
        from app.config import settings
        monkeypatch.setattr(settings, "OPENAI_API_KEY", "")
        assert get_insight_generator() is None

    def test_openai_with_key(self, monkeypatch):
        from app.config import settings
        monkeypatch.setattr(settings, "OPENAI_API_KEY", "sk-test")
        monkeypatch.setattr(settings, "OPENAI_MODEL", "gpt-4o")

        generator = get_insight_generator()

        assert isinstance(generator, OpenAIInsightGenerator)
        assert generator.model == "gpt-4o"


# =============================================================================
# Unit Tests - Retry hint
# =============================================================================

class TestRetryAfterSeconds:

    def test_parses_hint_and_rounds_up(self):
        assert retry_after_seconds(Exception("Rate limit reached. Please retry in 12.3s.")) == 13
        assert retry_after_seconds(Exception("retry in 5s")) == 5

    def test_default(self):
        assert retry_after_seconds(Exception("Too many requests")) == 60
