"""Static pricing and subscription tables.

Prices are USD per 1M tokens; subscription prices are USD per month.
Both tables are read-only and loaded once at import time.

Pricing keys must already be in normalized form (a key run through
``normalize_model_name`` comes back unchanged) so exact lookups can hit.
Declaration order matters: the substring tier of the matcher scans keys in
this order and takes the first hit.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from ..core.models import PricingRecord, SubscriptionPlan, SubscriptionTier


def _official(input_price: float, output_price: float) -> PricingRecord:
    return PricingRecord(
        input_price_per_million=input_price,
        output_price_per_million=output_price,
        source="official",
    )


def _estimated(input_price: float, output_price: float) -> PricingRecord:
    return PricingRecord(
        input_price_per_million=input_price,
        output_price_per_million=output_price,
        source="estimated",
    )


UNKNOWN_PRICING = PricingRecord(
    input_price_per_million=0,
    output_price_per_million=0,
    source="unknown",
)

PRICING_TABLE: Mapping[str, PricingRecord] = MappingProxyType({
    # OpenAI
    "gpt-4o": _official(2.50, 10.00),
    "gpt-4o-mini": _official(0.15, 0.60),
    "gpt-4-turbo": _official(10.00, 30.00),
    "gpt-4": _official(30.00, 60.00),
    "o1": _official(15.00, 60.00),
    "o1-mini": _official(3.00, 12.00),
    "o3-mini": _official(1.10, 4.40),
    # Anthropic, Claude 4.x
    "claude-opus-4.5": _official(15.00, 75.00),
    "claude-sonnet-4.5": _official(3.00, 15.00),
    "claude-opus-4.1": _official(15.00, 75.00),
    "claude-sonnet-4.1": _official(3.00, 15.00),
    # Anthropic, Claude 3.x
    "claude-3.5-sonnet": _official(3.00, 15.00),
    "claude-3-5-sonnet": _official(3.00, 15.00),
    "claude-3-5-sonnet-20241022": _official(3.00, 15.00),
    "claude-3-opus": _official(15.00, 75.00),
    "claude-3-sonnet": _official(3.00, 15.00),
    "claude-3-haiku": _official(0.25, 1.25),
    # Google, Gemini 3.x
    "gemini-3-pro": _estimated(2.00, 8.00),
    "gemini-3-flash": _estimated(0.15, 0.60),
    # Google, Gemini 1.x/2.x
    "gemini-1.5-pro": _official(1.25, 5.00),
    "gemini-2.0-flash": _official(0.10, 0.40),
    "gemini-1.5-flash": _official(0.075, 0.30),
    "gemini-pro": _official(0.50, 1.50),
    "gemini-2.0-flash-thinking": _estimated(0.10, 0.40),
    # DeepSeek
    "deepseek-v3": _official(0.27, 1.10),
    "deepseek-coder": _official(0.14, 0.28),
    "deepseek-coder-v2": _official(0.14, 0.28),
    "deepseek-r1": _official(0.55, 2.19),
    # Meta Llama, hosted prices vary by provider
    "llama-3.1-405b": _estimated(3.00, 3.00),
    "llama-3.1-70b": _estimated(0.88, 0.88),
    "llama-3.3-70b": _estimated(0.88, 0.88),
    "llama-3-70b": _estimated(0.88, 0.88),
    # Mistral
    "mistral-large": _official(2.00, 6.00),
    "mixtral-8x7b": _official(0.70, 0.70),
    "codestral": _official(0.20, 0.60),
    # Cohere
    "command-r-plus": _official(2.50, 10.00),
    "command-r": _official(0.15, 0.60),
    # Qwen
    "qwen-2.5-coder": _estimated(0.30, 0.60),
    "qwen-2.5-72b": _estimated(0.90, 0.90),
    "qwen2.5-coder-32b": _estimated(0.30, 0.60),
    # xAI
    "grok-4.1-thinking": _estimated(5.00, 25.00),
    "grok-4": _estimated(3.00, 15.00),
    "grok-2": _official(2.00, 10.00),
    "grok-beta": _estimated(5.00, 15.00),
    # OpenAI, GPT-5.x
    "gpt-5.2-high": _estimated(10.00, 40.00),
    "gpt-5.2": _estimated(7.50, 30.00),
    "gpt-5-medium": _estimated(3.00, 12.00),
    "gpt-5": _estimated(5.00, 20.00),
    # Baidu
    "ernie-5.0": _estimated(1.50, 6.00),
    "ernie-4.0": _estimated(1.00, 4.00),
    # Zhipu
    "glm-4.7": _estimated(1.00, 4.00),
    "glm-4": _estimated(0.70, 2.80),
    # MiniMax
    "minimax-m2.1": _estimated(0.50, 2.00),
})


SUBSCRIPTION_TABLE: Mapping[str, SubscriptionPlan] = MappingProxyType({
    "OpenAI": SubscriptionPlan(
        provider="OpenAI",
        web_url="https://chat.openai.com",
        tiers=[
            SubscriptionTier(name="Free", price=0, features=["GPT-4o mini", "Limited GPT-4o", "Basic features"]),
            SubscriptionTier(
                name="Plus",
                price=20,
                features=["GPT-4o", "GPT-4o mini", "o1-mini", "DALL-E", "Advanced analysis"],
            ),
            SubscriptionTier(
                name="Pro",
                price=200,
                features=["Unlimited GPT-4o", "o1 pro mode", "Extended thinking", "Priority access"],
            ),
        ],
        model_access=["gpt-4o", "gpt-4o-mini", "o1", "o1-mini"],
    ),
    "Anthropic": SubscriptionPlan(
        provider="Anthropic",
        web_url="https://claude.ai",
        tiers=[
            SubscriptionTier(name="Free", price=0, features=["Claude 3.5 Sonnet", "Limited messages", "Basic features"]),
            SubscriptionTier(
                name="Pro",
                price=20,
                features=["Claude 3.5 Sonnet", "Claude 3 Opus", "5x more usage", "Priority access"],
            ),
            SubscriptionTier(
                name="Team",
                price=30,
                features=["Everything in Pro", "Higher limits", "Admin tools", "Per user/month"],
            ),
        ],
        model_access=["claude-3.5-sonnet", "claude-3-opus", "claude-3-haiku"],
    ),
    "Google": SubscriptionPlan(
        provider="Google",
        web_url="https://gemini.google.com",
        tiers=[
            SubscriptionTier(name="Free", price=0, features=["Gemini 1.5 Flash", "Basic features", "Limited usage"]),
            SubscriptionTier(
                name="Advanced",
                price=20,
                features=["Gemini 1.5 Pro", "Gemini 2.0", "2TB storage", "Google One included"],
            ),
        ],
        model_access=["gemini-1.5-pro", "gemini-1.5-flash", "gemini-2.0-flash"],
    ),
    "DeepSeek": SubscriptionPlan(
        provider="DeepSeek",
        web_url="https://chat.deepseek.com",
        tiers=[
            SubscriptionTier(
                name="Free",
                price=0,
                features=["DeepSeek-V3", "DeepSeek-R1", "Unlimited messages", "Full features"],
            ),
        ],
        model_access=["deepseek-v3", "deepseek-r1", "deepseek-coder"],
    ),
    "Alibaba": SubscriptionPlan(
        provider="Alibaba",
        web_url="https://tongyi.aliyun.com",
        tiers=[
            SubscriptionTier(name="Free", price=0, features=["Qwen models", "Web interface", "Basic features"]),
        ],
        model_access=["qwen-2.5-coder", "qwen-2.5-72b"],
    ),
    "xAI": SubscriptionPlan(
        provider="xAI",
        web_url="https://x.ai",
        tiers=[
            SubscriptionTier(name="Free", price=0, features=["Grok via X/Twitter", "Limited usage", "Basic features"]),
            SubscriptionTier(
                name="Premium+",
                price=22,
                features=["Grok 4", "Unlimited messages", "Priority access", "X Premium+ required"],
            ),
        ],
        model_access=["grok-4", "grok-4.1-thinking"],
    ),
})
