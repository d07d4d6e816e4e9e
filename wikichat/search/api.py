"""MediaWiki Action API adapters."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import httpx

from wikichat.search.models import Language, SearchPage, parse_pages, parse_suggestions

if TYPE_CHECKING:
    from wikichat.config.schema import WikipediaConfig

_PAGE_PROPS = {
    "prop": "extracts|info|pageimages",
    "exintro": "1",
    "explaintext": "1",
    "inprop": "url",
    "piprop": "thumbnail",
    "format": "json",
}


def _config(config: "WikipediaConfig | None") -> "WikipediaConfig":
    from wikichat.config.schema import WikipediaConfig

    return config or WikipediaConfig()


async def _get_json(cfg: "WikipediaConfig", lang: Language, params: dict[str, str]) -> Any:
    async with httpx.AsyncClient() as client:
        response = await client.get(
            cfg.endpoint(lang),
            params=params,
            headers={"Accept": "application/json", "User-Agent": cfg.user_agent},
            timeout=cfg.timeout,
        )
        response.raise_for_status()

    return response.json()


async def search_pages(
    *,
    term: str,
    lang: Language,
    config: "WikipediaConfig | None" = None,
) -> list[SearchPage]:
    """Full-text search returning page summaries with short extracts."""
    cfg = _config(config)
    params = {
        "action": "query",
        "generator": "search",
        "gsrsearch": term,
        "gsrlimit": str(cfg.search_limit),
        **_PAGE_PROPS,
        "exsentences": str(cfg.extract_sentences),
        "pithumbsize": str(cfg.thumbnail_size),
        "redirects": "1",
    }
    return parse_pages(await _get_json(cfg, lang, params))


async def suggest_titles(
    *,
    term: str,
    lang: Language,
    config: "WikipediaConfig | None" = None,
) -> list[str]:
    """Title suggestions from opensearch, main namespace only."""
    cfg = _config(config)
    params = {
        "action": "opensearch",
        "search": term,
        "limit": str(cfg.suggestion_limit),
        "namespace": "0",
        "format": "json",
    }
    return parse_suggestions(await _get_json(cfg, lang, params))


async def fetch_page_details(
    *,
    titles: list[str],
    lang: Language,
    config: "WikipediaConfig | None" = None,
) -> list[SearchPage]:
    """Fetch summaries for exact titles in one call; missing pages are dropped."""
    if not titles:
        return []
    cfg = _config(config)
    params = {
        "action": "query",
        "titles": "|".join(titles),
        **_PAGE_PROPS,
        "pithumbsize": str(cfg.thumbnail_size),
    }
    return parse_pages(await _get_json(cfg, lang, params))
