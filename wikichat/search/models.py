"""Result records and MediaWiki payload schemas."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Literal
from urllib.parse import quote

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

Language = Literal["en", "bg", "ru"]

SUPPORTED_LANGUAGES: tuple[Language, ...] = ("en", "bg", "ru")


def validate_language(lang: str) -> Language:
    if lang not in SUPPORTED_LANGUAGES:
        raise ValueError(f"unsupported language: {lang} (expected one of {list(SUPPORTED_LANGUAGES)})")
    return lang  # type: ignore[return-value]


def article_url(title: str, lang: Language) -> str:
    """Canonical article link used when the API omits `fullurl`."""
    return f"https://{lang}.wikipedia.org/wiki/{quote(title, safe='')}"


@dataclass(slots=True)
class CandidateResult:
    """One scored page summary."""

    title: str
    extract: str
    url: str
    thumbnail: str | None = None
    relevance_score: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


class Thumbnail(BaseModel):
    source: str | None = None


class SearchPage(BaseModel):
    """A page record from `query.pages`."""

    model_config = ConfigDict(extra="ignore")

    title: str = Field(min_length=1)
    extract: str | None = None
    fullurl: str | None = None
    thumbnail: Thumbnail | None = None
    missing: bool = False
    invalid: bool = False

    @classmethod
    def from_raw(cls, raw: Any) -> "SearchPage":
        if isinstance(raw, dict):
            # formatversion=1 flags pages with an empty string
            raw = {**raw, **{key: raw[key] is not False for key in ("missing", "invalid") if key in raw}}
        return cls.model_validate(raw)

    def to_candidate(self, lang: Language, relevance_score: float = 0.0) -> CandidateResult:
        return CandidateResult(
            title=self.title,
            extract=self.extract or "",
            url=self.fullurl or article_url(self.title, lang),
            thumbnail=self.thumbnail.source if self.thumbnail else None,
            relevance_score=relevance_score,
        )


class QueryBlock(BaseModel):
    pages: dict[str, Any] | list[Any] = Field(default_factory=dict)


class QueryPayload(BaseModel):
    """Top level of an `action=query` response."""

    model_config = ConfigDict(extra="ignore")

    query: QueryBlock | None = None


_SUGGESTIONS = TypeAdapter(list[str])


def parse_pages(payload: Any) -> list[SearchPage]:
    """Decode `query.pages`, skipping malformed and missing entries."""
    data = QueryPayload.model_validate(payload)
    if data.query is None:
        return []

    raw_pages = data.query.pages
    items = list(raw_pages.values()) if isinstance(raw_pages, dict) else list(raw_pages)

    pages: list[SearchPage] = []
    for item in items:
        try:
            page = SearchPage.from_raw(item)
        except ValidationError as e:
            logger.debug("Skipping malformed page record: {}", e.errors()[:1])
            continue
        if page.missing or page.invalid:
            continue
        pages.append(page)
    return pages


def parse_suggestions(payload: Any) -> list[str]:
    """Decode an opensearch response `[term, [titles], [descriptions], [urls]]`."""
    if not isinstance(payload, list) or len(payload) < 2:
        raise ValueError("opensearch response must be a list of at least two elements")
    return [title for title in _SUGGESTIONS.validate_python(payload[1]) if title]
