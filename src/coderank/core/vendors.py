from __future__ import annotations

import re
from typing import List, NamedTuple, Pattern, Tuple


UNKNOWN_ORGANIZATION = "Unknown"

OPEN_LICENSES = {"DeepSeek": "MIT"}


class ProviderMatch(NamedTuple):
    name: str
    organization: str


# (pattern, organization, strip matched prefix from the name)
# Evaluated top to bottom, first match wins. Order is load-bearing: do not sort or merge.
PROVIDER_RULES: List[Tuple[Pattern[str], str, bool]] = [
    (re.compile(r"^anthropic[-_]?", re.I), "Anthropic", True),
    (re.compile(r"^openai[-_]?", re.I), "OpenAI", True),
    (re.compile(r"^google[-_]?", re.I), "Google", True),
    (re.compile(r"^deepseek[-_]?", re.I), "DeepSeek", False),
    (re.compile(r"^meta[-_]?", re.I), "Meta", True),
    (re.compile(r"^mistral[-_]?", re.I), "Mistral", False),
    (re.compile(r"^alibaba[-_]?|^qwen", re.I), "Alibaba", False),
    (re.compile(r"^xai[-_]?|^grok", re.I), "xAI", False),
    (re.compile(r"^cohere[-_]?", re.I), "Cohere", True),
    (re.compile(r"^baidu[-_]?|^ernie", re.I), "Baidu", False),
    (re.compile(r"^zhipu[-_]?|^glm", re.I), "Zhipu", False),
    (re.compile(r"^minimax[-_]?", re.I), "MiniMax", True),
    (re.compile(r"^01[-_]?ai[-_]?|^yi[-_]?", re.I), "01.AI", False),
    (re.compile(r"^bytedance[-_]?|^doubao", re.I), "ByteDance", False),
]

# Family keywords anywhere in the name, used only when no prefix rule matched.
# Same first-match-wins contract as PROVIDER_RULES.
ORGANIZATION_HINTS: List[Tuple[Pattern[str], str]] = [
    (re.compile(r"claude", re.I), "Anthropic"),
    (re.compile(r"gpt|o1|o3", re.I), "OpenAI"),
    (re.compile(r"gemini", re.I), "Google"),
    (re.compile(r"deepseek", re.I), "DeepSeek"),
    (re.compile(r"grok", re.I), "xAI"),
    (re.compile(r"llama", re.I), "Meta"),
    (re.compile(r"qwen", re.I), "Alibaba"),
    (re.compile(r"mistral|mixtral", re.I), "Mistral"),
    (re.compile(r"ernie", re.I), "Baidu"),
    (re.compile(r"glm", re.I), "Zhipu"),
    (re.compile(r"minimax", re.I), "MiniMax"),
]


def sniff_organization(name: str) -> str:
    for pattern, organization in ORGANIZATION_HINTS:
        if pattern.search(name):
            return organization
    return UNKNOWN_ORGANIZATION


def classify_provider(raw_name: str) -> ProviderMatch:
    """Split a leaderboard label into (name, owning organization).

    A provider prefix is the strong signal; labels without one fall back to
    family keywords found anywhere in the name.
    """
    name = (raw_name or "").strip()
    for pattern, organization, remove in PROVIDER_RULES:
        match = pattern.search(name)
        if match is None:
            continue
        if remove:
            name = (name[: match.start()] + name[match.end():]).strip()
        return ProviderMatch(name=name, organization=organization)
    return ProviderMatch(name=name, organization=sniff_organization(name))


def identify_creator(model_name: str) -> str:
    return classify_provider(model_name).organization


def license_for(organization: str) -> str:
    return OPEN_LICENSES.get(organization, "Proprietary")
