# tests/auditor/test_markup_document.py
import pytest

from auditor.dom.document import MarkupDocument


def test_text_of_collapses_whitespace():
    """Tekst van het eerste element wordt getrimd en witruimte samengevoegd."""
    doc = MarkupDocument("<title>\n  Hello \t  World \n</title><title>Second</title>")
    assert doc.text_of("title") == "Hello World"


def test_text_of_missing_element_is_empty():
    doc = MarkupDocument("<p>no title here</p>")
    assert doc.text_of("title") == ""


def test_attribute_of_distinguishes_absent_from_empty():
    """Een leeg attribuut is iets anders dan een ontbrekend element of attribuut."""
    doc = MarkupDocument('<meta name="description" content=""><meta name="robots">')
    assert doc.attribute_of('meta[name="description"]', "content") == ""
    assert doc.attribute_of('meta[name="robots"]', "content") is None
    assert doc.attribute_of('meta[name="viewport"]', "content") is None


def test_attribute_of_joins_multi_valued_attributes():
    doc = MarkupDocument('<link rel="shortcut icon" href="/favicon.ico">')
    assert doc.attribute_of("link", "rel") == "shortcut icon"


def test_count_and_count_without_attribute():
    doc = MarkupDocument('<img src="a.png" alt="A"><img src="b.png"><img src="c.png" alt="  ">')
    assert doc.count("img") == 3
    assert doc.count_without_attribute("img", "alt") == 2
    assert doc.count("video") == 0


def test_body_text_excludes_invisible_content():
    """Scripts, styles en commentaar tellen niet mee als zichtbare tekst."""
    html = """
    <html><head><title>Head title</title></head>
    <body>
      <p>Visible   text</p>
      <script>var hidden = 1;</script>
      <style>body { color: red; }</style>
      <!-- a comment -->
      <noscript>enable js</noscript>
      <div>more</div>
    </body></html>
    """
    doc = MarkupDocument(html)
    assert doc.body_text() == "Visible text more"


def test_body_text_without_body_uses_whole_document():
    doc = MarkupDocument("just some loose words")
    assert doc.body_text() == "just some loose words"


def test_body_text_without_body_skips_head():
    """Zonder <body> telt de <title> uit de head niet mee als paginatekst."""
    doc = MarkupDocument("<html><head><title>cat</title></head><p>dog</p></html>")
    assert doc.body_text() == "dog"
    assert doc.word_count() == 1


def test_body_text_includes_content_after_closing_body():
    """Inhoud na </body> hoort bij de body, zoals een browser hem herstelt."""
    doc = MarkupDocument("<html><body><p>dog</p></body><p>cat</p></html>")
    assert doc.body_text() == "dog cat"


def test_body_text_keeps_inline_svg_title():
    doc = MarkupDocument("<body><p>Logo</p><svg><title>Icon label</title></svg></body>")
    assert doc.body_text() == "Logo Icon label"


def test_adjacent_blocks_do_not_merge_words():
    doc = MarkupDocument("<body><p>one</p><p>two</p></body>")
    assert doc.body_text() == "one two"
    assert doc.word_count() == 2


@pytest.mark.parametrize("html", [None, "", "   ", "<html><body></body></html>"])
def test_empty_input_yields_zero_words(html):
    doc = MarkupDocument(html)
    assert doc.body_text() == ""
    assert doc.word_count() == 0


def test_malformed_markup_is_recovered():
    """Ongebalanceerde en onbekende tags worden getolereerd."""
    doc = MarkupDocument("<html><body><h1>Broken <b>heading</h1><p>text <unknown>tag</div></body>")
    assert doc.text_of("h1") == "Broken heading"
    assert "text" in doc.body_text()


def test_bom_is_stripped():
    doc = MarkupDocument("\ufeff<title>Title with BOM</title>")
    assert doc.text_of("title") == "Title with BOM"


def test_lengths():
    html = "<p>abc</p>"
    doc = MarkupDocument(html)
    assert doc.raw_length() == len(html)
    assert doc.serialized_length() == len("<p>abc</p>")
    assert doc.text_ratio() == 30.0


def test_text_ratio_of_empty_document():
    assert MarkupDocument("").text_ratio() == 0.0


@pytest.mark.parametrize("html, expected", [
    ('<body style="font-size: 12px">x</body>', 12.0),
    ("<style>body { color: #333; font-size:15.5px }</style><body>x</body>", 15.5),
    ("<style>html, body {font-size: 13px;}</style><body>x</body>", 13.0),
    ("<style>.nobody { font-size: 8px }</style><body>x</body>", None),
    ('<body style="font-size: 1.2em">x</body>', None),
    ("<body>x</body>", None),
])
def test_declared_font_size(html, expected):
    assert MarkupDocument(html).declared_font_size() == expected


def test_queries_do_not_change_the_document():
    html = '<html><body><h1>Title</h1><img src="a.png"></body></html>'
    doc = MarkupDocument(html)
    before = doc.serialized_length()
    doc.text_of("h1")
    doc.count_without_attribute("img", "alt")
    doc.body_text()
    assert doc.serialized_length() == before
