"""Lexical relevance of a page title to a query."""

EXACT_MATCH = 100.0
PREFIX_MATCH = 80.0
SUBSTRING_MATCH = 50.0
WORD_OVERLAP_WEIGHT = 40.0
MIN_WORD_LENGTH = 3


def score(title: str, raw_query: str, normalized_query: str) -> float:
    """
    Score a title against the raw and normalized query, case-insensitively.

    Only the strongest of exact, prefix and substring match applies; the
    fraction of normalized-query words found in the title adds up to 40 more.
    """
    t = title.lower()
    q = raw_query.lower()
    nq = normalized_query.lower()

    total = 0.0
    if t == q or t == nq:
        total += EXACT_MATCH
    elif t.startswith(nq):
        total += PREFIX_MATCH
    elif nq in t:
        total += SUBSTRING_MATCH

    words = [w for w in nq.split() if len(w) >= MIN_WORD_LENGTH]
    if words:
        matches = sum(1 for w in words if w in t)
        total += matches / len(words) * WORD_OVERLAP_WEIGHT

    return total
