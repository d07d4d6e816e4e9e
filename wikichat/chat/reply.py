"""Turn ranked results into a chat reply."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any
from urllib.parse import quote

from wikichat.search.models import CandidateResult, Language, validate_language

_HEDGE = {
    "en": "I found some potential matches, but I'm not entirely sure. Here is the most relevant one:",
    "bg": "Открих няколко възможни съвпадения, но не съм напълно сигурен. Ето най-подходящото:",
    "ru": "Я нашел несколько потенциальных совпадений, но не совсем уверен. Вот наиболее подходящее:",
}
_RELATED = {
    "en": "Related topics",
    "bg": "Свързани теми",
    "ru": "Связанные темы",
}
_NOT_FOUND = {
    "en": 'I couldn\'t find any specific Wikipedia articles for "{query}".',
    "bg": 'Не можах да открия статии в Wikipedia за "{query}".',
    "ru": 'Я не смог найти статей в Wikipedia по запросу "{query}".',
}
_SEARCH_LINK = {
    "en": "Search directly on Wikipedia",
    "bg": "Потърсете директно в Wikipedia",
    "ru": "Искать напрямую в Wikipedia",
}


@dataclass(slots=True)
class SourceInfo:
    """Source card shown under a reply."""

    title: str
    url: str
    thumbnail: str | None = None


@dataclass(slots=True)
class ChatReply:
    content: str
    sources: list[SourceInfo] = field(default_factory=list)
    low_confidence: bool = False

    @property
    def found(self) -> bool:
        return bool(self.sources)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def search_url(query: str, lang: Language) -> str:
    return f"https://{lang}.wikipedia.org/w/index.php?search={quote(query, safe='')}"


def build_reply(
    query: str,
    results: list[CandidateResult],
    lang: Language,
    *,
    low_confidence_threshold: float = 30.0,
    related_topics: int = 3,
) -> ChatReply:
    """
    Format the top result as markdown, hedged when its score is below
    `low_confidence_threshold`, and list up to `related_topics` other titles.
    An empty result list yields a not-found message with a search link.
    """
    lang = validate_language(lang)
    if not results:
        content = (
            f"{_NOT_FOUND[lang].format(query=query)} \n\n"
            f"[{_SEARCH_LINK[lang]}]({search_url(query, lang)})"
        )
        return ChatReply(content=content)

    top = results[0]
    article = f"### {top.title}\n{top.extract}"
    low_confidence = top.relevance_score < low_confidence_threshold
    content = f"{_HEDGE[lang]}\n\n{article}" if low_confidence else article

    others = [r.title for r in results[1 : 1 + related_topics]]
    if others:
        content += f"\n\n---\n\n**{_RELATED[lang]}:** {', '.join(others)}"

    sources = [SourceInfo(title=r.title, url=r.url, thumbnail=r.thumbnail) for r in results]
    return ChatReply(content=content, sources=sources, low_confidence=low_confidence)
