"""Answer chat questions from Wikipedia."""

from __future__ import annotations

import asyncio

from loguru import logger

from wikichat.chat.reply import ChatReply, build_reply
from wikichat.config.schema import Config
from wikichat.search.models import CandidateResult, Language
from wikichat.search.resolver import ResultResolver


class ChatService:
    """Resolve a question and format the reply."""

    def __init__(self, config: Config | None = None, resolver: ResultResolver | None = None):
        self.config = config or Config()
        self.resolver = resolver or ResultResolver(self.config.wikipedia)

    async def lookup(self, query: str, lang: Language | None = None) -> list[CandidateResult]:
        """Ranked results, or an empty list when the lookup times out."""
        language = lang or self.config.chat.language
        try:
            return await asyncio.wait_for(
                self.resolver.resolve(query, language),
                timeout=self.config.chat.request_timeout,
            )
        except asyncio.TimeoutError:
            logger.warning(
                "Lookup for '{}' ({}) timed out after {}s",
                query,
                language,
                self.config.chat.request_timeout,
            )
            return []

    async def ask(self, query: str, lang: Language | None = None) -> ChatReply:
        language = lang or self.config.chat.language
        results = await self.lookup(query, language)
        return build_reply(
            query,
            results,
            language,
            low_confidence_threshold=self.config.chat.low_confidence_threshold,
            related_topics=self.config.chat.related_topics,
        )
