"""Query normalization, scoring and Wikipedia article resolution."""

from wikichat.search.models import SUPPORTED_LANGUAGES, CandidateResult, Language
from wikichat.search.normalizer import normalize
from wikichat.search.resolver import ResultResolver, merge_candidates, rank, resolve
from wikichat.search.scoring import score

__all__ = [
    "CandidateResult",
    "Language",
    "ResultResolver",
    "SUPPORTED_LANGUAGES",
    "merge_candidates",
    "normalize",
    "rank",
    "resolve",
    "score",
]
