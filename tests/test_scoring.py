import pytest

from wikichat.search.scoring import score


def test_exact_match_scores_100_without_long_words() -> None:
    assert score("Li", "Li", "li") == 100


def test_exact_match_on_raw_query() -> None:
    assert score("Go", "go", "something else entirely") == 100


def test_exact_match_adds_word_overlap() -> None:
    assert score("Ancient Rome", "Ancient Rome", "Ancient Rome") == 140


def test_exact_match_is_case_insensitive() -> None:
    assert score("MARIE CURIE", "Who is Marie Curie?", "marie curie") == 140


def test_prefix_match() -> None:
    assert score("Marie Curie Museum", "Who is Marie Curie?", "marie curie") == 120


def test_substring_match() -> None:
    assert score("Pierre and Marie Curie", "Who is Marie Curie?", "marie curie") == 90


def test_partial_word_overlap_only() -> None:
    assert score("Curie family", "Who is Marie Curie?", "marie curie") == pytest.approx(20)


def test_no_match_scores_zero() -> None:
    assert score("Photosynthesis", "Who is Marie Curie?", "marie curie") == 0


def test_short_words_do_not_count_towards_overlap() -> None:
    assert score("Go (game)", "go", "go") == 80
    assert score("Isle of Man", "of", "of") == 50


def test_tier_ordering() -> None:
    nq = "rome"
    exact = score("Rome", "Rome", nq)
    prefix = score("Rome (disambiguation)", "Rome", nq)
    contains = score("Ancient Rome", "Rome", nq)
    assert exact >= prefix >= contains
    assert exact > contains


def test_score_is_deterministic() -> None:
    assert score("Sofia", "Where is Sofia", "sofia") == score("Sofia", "Where is Sofia", "sofia")
