# tests/auditor/test_keyword_density.py
import pytest

from auditor.dom.document import MarkupDocument
from auditor.services.keyword_density_service import KeywordDensityCalculator


@pytest.fixture
def calculator():
    return KeywordDensityCalculator()


def body(text: str) -> MarkupDocument:
    return MarkupDocument(f"<html><body>{text}</body></html>")


def test_basic_density(calculator):
    """2 van de 3 woorden -> 66.67%."""
    assert calculator.density(body("cat cat dog"), "cat") == 66.67


@pytest.mark.parametrize("keyword", ["", None, "   "])
def test_empty_keyword_is_zero(calculator, keyword):
    assert calculator.density(body("cat cat dog"), keyword) == 0


def test_empty_body_is_zero(calculator):
    assert calculator.density(MarkupDocument("<html><body></body></html>"), "x") == 0
    assert calculator.density(MarkupDocument(""), "x") == 0


def test_case_insensitive_whole_word(calculator):
    doc = body("Cat concatenate CAT")
    assert calculator.occurrences(doc, "cat") == 2
    assert calculator.density(doc, "cat") == 66.67


def test_regex_metacharacters_are_literal(calculator):
    doc = body("c++ is fun, c++ rocks")
    assert calculator.occurrences(doc, "c++") == 2
    assert calculator.density(doc, "c++") == 40.0


@pytest.mark.parametrize("keyword", ["(", "a.b", "[x]", "*", "\\"])
def test_unbalanced_patterns_never_raise(calculator, keyword):
    doc = body("axb a.b [x] plain text")
    assert calculator.density(doc, keyword) >= 0


def test_dot_does_not_match_any_character(calculator):
    doc = body("axb a.b")
    assert calculator.occurrences(doc, "a.b") == 1


def test_multi_word_keyword_is_not_double_counted(calculator):
    doc = body("ab ab ab")
    assert calculator.occurrences(doc, "ab ab") == 1


def test_punctuation_is_a_word_boundary(calculator):
    doc = body("SEO, seo. (seo) seo-tools seos")
    assert calculator.occurrences(doc, "seo") == 4


def test_invisible_text_is_ignored(calculator):
    doc = MarkupDocument("<body><script>cat cat</script><p>dog</p></body>")
    assert calculator.density(doc, "cat") == 0


def test_head_title_is_not_counted_without_body(calculator):
    doc = MarkupDocument("<html><head><title>cat</title></head><p>dog</p></html>")
    assert calculator.density(doc, "cat") == 0


def test_text_after_closing_body_is_counted(calculator):
    doc = MarkupDocument("<html><body><p>dog</p></body><p>cat</p></html>")
    assert calculator.density(doc, "cat") == 50.0


def test_density_rounds_to_two_decimals(calculator):
    doc = body("seo " + "word " * 5)
    # 1 / 6 * 100 = 16.666...
    assert calculator.density(doc, "seo") == 16.67
