"""Leaderboard label cleanup.

Leaderboard labels carry date stamps, context-window tags and reasoning-mode
markers ("claude-opus-4-5-20251101-thinking-32k"). Those are stripped before
the label is classified and rewritten to a canonical display name; a thinking
marker is re-attached afterwards as a "(Thinking)" annotation.
"""

from __future__ import annotations

import enum
import re
from typing import List, NamedTuple, Pattern, Tuple

from .vendors import classify_provider


class ThinkingVariant(enum.Enum):
    NONE = ""
    THINKING = " (Thinking)"
    MINIMAL = " (Thinking Minimal)"


class ResolvedLabel(NamedTuple):
    name: str
    organization: str


_THINKING = re.compile(r"thinking", re.I)
_MINIMAL = re.compile(r"minimal", re.I)
_THINKING_MINIMAL = re.compile(r"thinking[-_]?minimal", re.I)

# Applied in sequence, every one of them, before classification
VOLATILE_TOKENS: List[Pattern[str]] = [
    re.compile(r"[-_]?\d{8,}[-_]?"),
    re.compile(r"[-_]?thinking[-_]?minimal", re.I),
    re.compile(r"[-_]?thinking[-_]?\d*k?", re.I),
    re.compile(r"[-_]?\d+k$", re.I),
    re.compile(r"[-_]?preview$", re.I),
    re.compile(r"[-_]?latest$", re.I),
    re.compile(r"[-_]?pre$", re.I),
]

_WHITESPACE = re.compile(r"\s+")
_WORD_START = re.compile(r"\b\w")
_HYPHEN = re.compile(r"-")

# First match replaces the whole name. Longer version strings must precede
# their prefixes ("Opus 4.5" before "Opus 4", "GPT-5.2 High" before "GPT-5").
DISPLAY_REWRITES: List[Tuple[Pattern[str], str]] = [
    # Claude
    (re.compile(r"claude[-_]?opus[-_]?4[-_.]?5", re.I), "Claude Opus 4.5"),
    (re.compile(r"claude[-_]?sonnet[-_]?4[-_.]?5", re.I), "Claude Sonnet 4.5"),
    (re.compile(r"claude[-_]?opus[-_]?4[-_.]?1", re.I), "Claude Opus 4.1"),
    (re.compile(r"claude[-_]?sonnet[-_]?4[-_.]?1", re.I), "Claude Sonnet 4.1"),
    (re.compile(r"claude[-_]?3[-_.]?5[-_]?sonnet", re.I), "Claude 3.5 Sonnet"),
    (re.compile(r"claude[-_]?3[-_]?opus", re.I), "Claude 3 Opus"),
    # GPT
    (re.compile(r"gpt[-_]?5[-_.]?2[-_]?high", re.I), "GPT-5.2 High"),
    (re.compile(r"gpt[-_]?5[-_.]?2\b", re.I), "GPT-5.2"),
    (re.compile(r"gpt[-_]?5[-_.]?1[-_]?high", re.I), "GPT-5.1 High"),
    (re.compile(r"gpt[-_]?5[-_]?medium", re.I), "GPT-5 Medium"),
    (re.compile(r"gpt[-_]?5", re.I), "GPT-5"),
    (re.compile(r"gpt[-_]?4[-_]?o[-_]?mini", re.I), "GPT-4o Mini"),
    (re.compile(r"gpt[-_]?4[-_]?o", re.I), "GPT-4o"),
    (re.compile(r"o1[-_]?mini", re.I), "o1-mini"),
    (re.compile(r"\bo1\b", re.I), "o1"),
    # Gemini
    (re.compile(r"gemini[-_]?3[-_]?pro", re.I), "Gemini 3 Pro"),
    (re.compile(r"gemini[-_]?3[-_]?flash", re.I), "Gemini 3 Flash"),
    (re.compile(r"gemini[-_]?2[-_.]?0[-_]?flash", re.I), "Gemini 2.0 Flash"),
    (re.compile(r"gemini[-_]?1[-_.]?5[-_]?pro", re.I), "Gemini 1.5 Pro"),
    # Grok
    (re.compile(r"grok[-_]?4[-_.]?1[-_]?thinking", re.I), "Grok 4.1 Thinking"),
    (re.compile(r"grok[-_]?4[-_.]?1", re.I), "Grok 4.1"),
    (re.compile(r"grok[-_]?4", re.I), "Grok 4"),
    # DeepSeek
    (re.compile(r"deepseek[-_]?r1", re.I), "DeepSeek-R1"),
    (re.compile(r"deepseek[-_]?v3", re.I), "DeepSeek-V3"),
    # Chinese labs
    (re.compile(r"ernie[-_]?5[-_.]?0", re.I), "ERNIE 5.0"),
    (re.compile(r"glm[-_]?4[-_.]?7", re.I), "GLM-4.7"),
    (re.compile(r"glm[-_]?4", re.I), "GLM-4"),
    (re.compile(r"minimax[-_]?m2", re.I), "MiniMax M2"),
    (re.compile(r"qwen[-_]?2[-_.]?5", re.I), "Qwen 2.5"),
    # Llama
    (re.compile(r"llama[-_]?3[-_.]?3", re.I), "Llama 3.3"),
]


def _capitalize_words(name: str) -> str:
    return _WORD_START.sub(lambda m: m.group(0).upper(), name)


def thinking_variant(name: str) -> ThinkingVariant:
    if _THINKING_MINIMAL.search(name):
        return ThinkingVariant.MINIMAL
    if _THINKING.search(name) and not _MINIMAL.search(name):
        return ThinkingVariant.THINKING
    return ThinkingVariant.NONE


def strip_volatile_tokens(name: str) -> Tuple[str, ThinkingVariant]:
    """Remove date stamps, reasoning-mode markers and release-channel suffixes."""
    stripped = (name or "").strip()
    variant = thinking_variant(stripped)
    for pattern in VOLATILE_TOKENS:
        stripped = pattern.sub("", stripped)
    stripped = _WHITESPACE.sub(" ", stripped).strip()
    return stripped, variant


def rewrite_family(name: str) -> Tuple[str, bool]:
    for pattern, replacement in DISPLAY_REWRITES:
        if pattern.search(name):
            return replacement, True
    return name, False


def resolve_label(raw_label: str) -> ResolvedLabel:
    """Resolve a raw leaderboard label to its display name and organization."""
    stripped, variant = strip_volatile_tokens(raw_label)
    match = classify_provider(stripped)
    name, rewritten = rewrite_family(match.name)
    if not rewritten and name == name.lower():
        name = _capitalize_words(name)
    return ResolvedLabel(name=name + variant.value, organization=match.organization)


def clean_display_name(name: str) -> str:
    return resolve_label(name).name


def to_display_label(name: str) -> str:
    """Dashboard label: hyphens become spaces, every word starts upper-case."""
    return _capitalize_words(_HYPHEN.sub(" ", name))
