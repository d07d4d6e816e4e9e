import pytest

from wikichat.search.normalizer import FILLER_PHRASES, normalize


@pytest.mark.parametrize(
    ("query", "lang", "expected"),
    [
        ("Who is Marie Curie?", "en", "marie curie"),
        ("tell me about Ancient Rome!", "en", "ancient rome"),
        ("Кой е Иван Вазов?", "bg", "иван вазов"),
        ("Кажи ми за Пловдив", "bg", "пловдив"),
        ("Кто такой Пушкин？", "ru", "пушкин"),
        ("Что такое фотосинтез！", "ru", "фотосинтез"),
    ],
)
def test_normalize_strips_filler_prefix(query: str, lang: str, expected: str) -> None:
    assert normalize(query, lang) == expected  # type: ignore[arg-type]


def test_normalize_strips_only_one_prefix() -> None:
    assert normalize("What is the Sun?", "en") == "the sun"
    assert normalize("the a team", "en") == "a team"


def test_normalize_returns_query_verbatim_when_no_filler_matches() -> None:
    assert normalize("Ancient Rome", "en") == "Ancient Rome"
    assert normalize("theory of relativity", "en") == "theory of relativity"
    assert normalize("who is", "en") == "who is"
    assert normalize("Photosynthesis?", "en") == "Photosynthesis?"


def test_normalize_returns_query_when_cleaning_leaves_nothing() -> None:
    assert normalize("?!", "en") == "?!"


def test_normalize_requires_space_after_filler() -> None:
    assert normalize("кой ето", "bg") == "кой ето"
    assert normalize("Antarctica", "en") == "Antarctica"


def test_filler_tables_are_read_only() -> None:
    with pytest.raises(TypeError):
        FILLER_PHRASES["en"] = ("hello",)  # type: ignore[index]


@pytest.mark.parametrize(
    ("query", "lang"),
    [
        ("Who is Marie Curie?", "en"),
        ("Where is Sofia", "en"),
        ("Ancient Rome", "en"),
        ("Какво е ДНК?", "bg"),
        ("Где находится Байкал?", "ru"),
        ("Москва", "ru"),
    ],
)
def test_normalize_is_idempotent(query: str, lang: str) -> None:
    once = normalize(query, lang)  # type: ignore[arg-type]
    assert normalize(once, lang) == once  # type: ignore[arg-type]


def test_normalize_rejects_unknown_language() -> None:
    with pytest.raises(ValueError, match="unsupported language"):
        normalize("Who is Marie Curie?", "de")  # type: ignore[arg-type]
