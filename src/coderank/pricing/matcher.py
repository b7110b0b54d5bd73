"""Resolve noisy model names to pricing records.

Matching is progressive and the first tier that finds anything wins:

1. exact lookup of the normalized name,
2. substring containment in either direction, scanning the table in
   declaration order (first hit, not best hit),
3. family regexes for known naming variants missing from the table.

Anything else resolves to ``UNKNOWN_PRICING``. False positives in tiers 2
and 3 are accepted in exchange for coverage: the result is only displayed.
"""

from __future__ import annotations

import re
from typing import Mapping, Optional, Pattern, Sequence, Tuple

import structlog

from ..core.models import PricingRecord, SubscriptionPlan
from ..core.normalize import normalize_model_name
from .data import PRICING_TABLE, SUBSCRIPTION_TABLE, UNKNOWN_PRICING

logger = structlog.get_logger(__name__)

FamilyRule = Tuple[Pattern[str], str]

# (pattern over the normalized name, pricing key). First match wins.
# Qualified variants ("high", "thinking", point releases) precede their parent
# family; reordering changes which price a name receives.
FAMILY_RULES: Sequence[FamilyRule] = (
    # GPT-5.x
    (re.compile(r"gpt-5\.2.*high"), "gpt-5.2-high"),
    (re.compile(r"gpt-5\.2"), "gpt-5.2"),
    (re.compile(r"gpt-5.*medium"), "gpt-5-medium"),
    (re.compile(r"gpt-5"), "gpt-5"),
    # GPT-4.x
    (re.compile(r"gpt-4o"), "gpt-4o"),
    (re.compile(r"gpt-4"), "gpt-4-turbo"),
    # Claude 4.x
    (re.compile(r"claude.*opus.*4\.5"), "claude-opus-4.5"),
    (re.compile(r"claude.*sonnet.*4\.5"), "claude-sonnet-4.5"),
    (re.compile(r"claude.*opus.*4\.1"), "claude-opus-4.1"),
    (re.compile(r"claude.*sonnet.*4\.1"), "claude-sonnet-4.1"),
    # Claude 3.x
    (re.compile(r"claude.*sonnet"), "claude-3.5-sonnet"),
    (re.compile(r"claude.*opus"), "claude-3-opus"),
    (re.compile(r"claude.*haiku"), "claude-3-haiku"),
    # Gemini 3.x
    (re.compile(r"gemini.*3.*pro"), "gemini-3-pro"),
    (re.compile(r"gemini.*3.*flash"), "gemini-3-flash"),
    # Gemini 1.x/2.x
    (re.compile(r"gemini.*pro"), "gemini-1.5-pro"),
    (re.compile(r"gemini.*flash"), "gemini-1.5-flash"),
    # DeepSeek: coder before the generation checks
    (re.compile(r"deepseek.*coder"), "deepseek-coder"),
    (re.compile(r"deepseek.*v3"), "deepseek-v3"),
    (re.compile(r"deepseek.*r1"), "deepseek-r1"),
    # Llama
    (re.compile(r"llama.*405"), "llama-3.1-405b"),
    (re.compile(r"llama.*70"), "llama-3.1-70b"),
    # Qwen
    (re.compile(r"qwen.*coder"), "qwen-2.5-coder"),
    # OpenAI reasoning models
    (re.compile(r"o1-mini"), "o1-mini"),
    (re.compile(r"o1"), "o1"),
    (re.compile(r"o3-mini"), "o3-mini"),
    # Grok
    (re.compile(r"grok.*4\.1.*thinking"), "grok-4.1-thinking"),
    (re.compile(r"grok.*4\.1"), "grok-4.1-thinking"),
    (re.compile(r"grok.*4"), "grok-4"),
    (re.compile(r"grok"), "grok-2"),
    # Chinese labs
    (re.compile(r"ernie.*5"), "ernie-5.0"),
    (re.compile(r"ernie"), "ernie-4.0"),
    (re.compile(r"glm.*4\.7"), "glm-4.7"),
    (re.compile(r"glm"), "glm-4"),
    (re.compile(r"minimax.*m2|m2\.1"), "minimax-m2.1"),
)


class PricingMatcher:
    """Pricing and subscription lookups over injected read-only tables."""

    def __init__(
        self,
        table: Mapping[str, PricingRecord] = PRICING_TABLE,
        family_rules: Sequence[FamilyRule] = FAMILY_RULES,
        subscriptions: Mapping[str, SubscriptionPlan] = SUBSCRIPTION_TABLE,
    ) -> None:
        self._table = table
        self._family_rules = family_rules
        self._subscriptions = subscriptions

    def find_pricing(self, model_name: str) -> PricingRecord:
        normalized = normalize_model_name(model_name)
        if not normalized:
            return UNKNOWN_PRICING

        exact = self._table.get(normalized)
        if exact is not None:
            return exact

        for key, pricing in self._table.items():
            if key in normalized or normalized in key:
                logger.debug("pricing_substring_match", model=model_name, key=key)
                return pricing

        for pattern, key in self._family_rules:
            if pattern.search(normalized):
                pricing = self._table.get(key)
                if pricing is None:
                    # rule points outside the injected table
                    break
                logger.debug("pricing_family_match", model=model_name, key=key)
                return pricing

        logger.debug("pricing_unknown", model=model_name, normalized=normalized)
        return UNKNOWN_PRICING

    def find_subscription(self, organization: str) -> Optional[SubscriptionPlan]:
        return self._subscriptions.get(organization)


_default_matcher = PricingMatcher()


def default_matcher() -> PricingMatcher:
    return _default_matcher


def find_pricing(model_name: str) -> PricingRecord:
    return _default_matcher.find_pricing(model_name)


def find_subscription(organization: str) -> Optional[SubscriptionPlan]:
    return _default_matcher.find_subscription(organization)
