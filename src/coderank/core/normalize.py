from __future__ import annotations

import re


_PARENTHETICAL = re.compile(r"\(.*?\)")
_SEPARATORS = re.compile(r"[-_\s]+")

NOISE_SUFFIXES = ("-instruct", "-chat", "-preview", "-latest")
PROVIDER_PREFIXES = (
    "openai/",
    "openai-",
    "anthropic/",
    "anthropic-",
    "google/",
    "google-",
    "meta/",
    "meta-",
)


def _strip_affixes(name: str) -> str:
    for suffix in NOISE_SUFFIXES:
        if name.endswith(suffix):
            name = name[: -len(suffix)]
    for prefix in PROVIDER_PREFIXES:
        if name.startswith(prefix):
            name = name[len(prefix):]
    return name.strip("-")


def normalize_model_name(raw: str) -> str:
    """Canonicalize a model name into the lowercase, hyphenated pricing key form.

    "GPT-4o (OpenAI)" -> "gpt-4o", "openai/gpt-4" -> "gpt-4",
    "llama_3 70b instruct" -> "llama-3-70b".

    Suffix and prefix stripping repeats until the name stops changing, so the
    result is stable under a second call.
    """
    name = (raw or "").lower()
    name = _PARENTHETICAL.sub("", name)
    name = _SEPARATORS.sub("-", name).strip("-")
    previous = None
    while name != previous:
        previous = name
        name = _strip_affixes(name)
    return name
