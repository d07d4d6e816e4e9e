"""Strip question phrasing from a query to expose its subject."""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Mapping

from wikichat.search.models import Language, validate_language

# Ordered: the first phrase that prefixes the query wins.
FILLER_PHRASES: Mapping[Language, tuple[str, ...]] = MappingProxyType(
    {
        "en": (
            "who is",
            "who was",
            "what is",
            "what was",
            "tell me about",
            "where is",
            "how about",
            "the",
            "a",
            "an",
        ),
        "bg": (
            "кой е",
            "коя е",
            "какво е",
            "кои са",
            "кажи ми за",
            "къде е",
            "кой беше",
            "кои бяха",
        ),
        "ru": (
            "кто такой",
            "кто такая",
            "что такое",
            "расскажи о",
            "где находится",
            "кто был",
            "что это",
        ),
    }
)

_PUNCTUATION_RE = re.compile(r"[?？!！]")


def normalize(query: str, lang: Language) -> str:
    """
    Return the core subject of a query.

    At most one filler phrase is removed. When none matches, or nothing is
    left after cleaning, the query is returned unchanged.
    """
    fillers = FILLER_PHRASES[validate_language(lang)]
    cleaned = _PUNCTUATION_RE.sub("", query.lower()).strip()

    for phrase in fillers:
        if cleaned.startswith(phrase + " "):
            subject = cleaned[len(phrase) + 1 :].strip()
            return subject or query

    return query
