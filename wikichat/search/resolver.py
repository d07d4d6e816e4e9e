"""Resolve a free-text query into ranked Wikipedia articles."""

from __future__ import annotations

import asyncio
from collections.abc import Iterable
from typing import TYPE_CHECKING

from loguru import logger

from wikichat.search import api
from wikichat.search.models import CandidateResult, Language, SearchPage, validate_language
from wikichat.search.normalizer import normalize
from wikichat.search.scoring import score

if TYPE_CHECKING:
    from wikichat.config.schema import WikipediaConfig


def merge_candidates(
    first: Iterable[CandidateResult],
    second: Iterable[CandidateResult],
) -> list[CandidateResult]:
    """
    Merge two candidate lists keyed by title.

    A later duplicate replaces an earlier one only when it scores strictly
    higher, so on ties the entry from `first` is kept.
    """
    merged: dict[str, CandidateResult] = {}
    for candidates in (first, second):
        for candidate in candidates:
            existing = merged.get(candidate.title)
            if existing is None or candidate.relevance_score > existing.relevance_score:
                merged[candidate.title] = candidate
    return list(merged.values())


def rank(candidates: Iterable[CandidateResult]) -> list[CandidateResult]:
    """Sort by relevance, highest first; equal scores keep their order."""
    return sorted(candidates, key=lambda c: c.relevance_score, reverse=True)


class ResultResolver:
    """Multi-strategy search against one language edition of Wikipedia."""

    def __init__(self, config: "WikipediaConfig | None" = None):
        from wikichat.config.schema import WikipediaConfig

        self.config = config or WikipediaConfig()

    async def resolve(self, raw_query: str, lang: Language) -> list[CandidateResult]:
        """
        Return at most `max_results` candidates, best first.

        Fetch failures are logged and count as empty results; an empty list
        means no article was found.
        """
        lang = validate_language(lang)
        normalized = normalize(raw_query, lang)

        searches = [self._search(normalized, raw_query, normalized, lang)]
        if normalized != raw_query:
            searches.append(self._search(raw_query, raw_query, normalized, lang))
        results = await asyncio.gather(*searches)

        ranked = rank(merge_candidates(results[0], results[1] if len(results) > 1 else []))
        if not ranked:
            logger.info("No search hits for '{}' ({}), trying title suggestions", normalized, lang)
            ranked = await self._fallback(raw_query, normalized, lang)

        return ranked[: self.config.max_results]

    async def _search(
        self,
        term: str,
        raw_query: str,
        normalized: str,
        lang: Language,
    ) -> list[CandidateResult]:
        try:
            pages = await api.search_pages(term=term, lang=lang, config=self.config)
        except Exception as e:
            logger.warning("Wikipedia search failed for '{}' ({}): {}", term, lang, e)
            return []

        logger.debug("Search '{}' ({}) returned {} pages", term, lang, len(pages))
        return self._score_pages(pages, raw_query, normalized, lang)

    async def _fallback(self, raw_query: str, normalized: str, lang: Language) -> list[CandidateResult]:
        try:
            titles = await api.suggest_titles(term=normalized, lang=lang, config=self.config)
        except Exception as e:
            logger.warning("Wikipedia suggestions failed for '{}' ({}): {}", normalized, lang, e)
            return []

        if not titles:
            logger.debug("No title suggestions for '{}' ({})", normalized, lang)
            return []

        try:
            pages = await api.fetch_page_details(titles=titles, lang=lang, config=self.config)
        except Exception as e:
            logger.warning("Wikipedia page details failed for {} ({}): {}", titles, lang, e)
            return []

        logger.debug("Fallback for '{}' ({}) resolved {}/{} titles", normalized, lang, len(pages), len(titles))
        return rank(self._score_pages(pages, raw_query, normalized, lang))

    @staticmethod
    def _score_pages(
        pages: list[SearchPage],
        raw_query: str,
        normalized: str,
        lang: Language,
    ) -> list[CandidateResult]:
        return [page.to_candidate(lang, score(page.title, raw_query, normalized)) for page in pages]


async def resolve(
    raw_query: str,
    lang: Language,
    config: "WikipediaConfig | None" = None,
) -> list[CandidateResult]:
    """Resolve a query with a one-off resolver."""
    return await ResultResolver(config).resolve(raw_query, lang)
