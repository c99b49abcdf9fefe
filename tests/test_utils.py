from bs4 import BeautifulSoup

from universal.utils import filter_entities, summarize, get_text, element_children


class TestFilterEntities:
    def test_mojibake_emdash(self):
        assert filter_entities("\u00e2\u0080\u0094") == "\u2014"

    def test_mojibake_endash(self):
        assert filter_entities("\u00e2\u0080\u0093") == "\u2013"

    def test_mojibake_right_single_quote(self):
        assert filter_entities("\u00e2\u0080\u0099") == "\u2019"

    def test_mojibake_left_double_quote(self):
        assert filter_entities("\u00e2\u0080\u009c") == "\u201c"

    def test_mojibake_right_double_quote(self):
        assert filter_entities("\u00e2\u0080\u009d") == "\u201d"

    def test_mojibake_ellipsis(self):
        assert filter_entities("\u00e2\u0080\u00a6") == "\u2026"

    def test_mojibake_multiplication(self):
        assert filter_entities("\u00c3\u0097") == "\u00d7"

    def test_mojibake_degree(self):
        assert filter_entities("\u00c2\u00ba") == "\u00ba"

    def test_mojibake_nonbreaking_hyphen(self):
        assert filter_entities("\u00e2\u0080\u0091") == "\u2011"

    def test_percent_encoded_backslash(self):
        assert filter_entities("%5C") == "\\"

    def test_amp_entity(self):
        assert filter_entities("&amp;") == "&"

    def test_modifier_letter_apostrophe(self):
        assert filter_entities("\u00ca\u00bc") == "\u2019"

    def test_nbsp_c2a0(self):
        assert filter_entities("a\u00c2\u00a0b") == "a b"

    def test_nbsp_a0(self):
        assert filter_entities("a\u00a0b") == "a b"

    def test_newline_normalization(self):
        assert filter_entities("line one\nline two") == "line one line two"

    def test_newline_strips_surrounding_whitespace(self):
        assert filter_entities("a \n b") == "a b"




class TestSummarize:
    """Tests for summarize(), the plain-text view of formatted text."""

    def test_inline_markup_stripped(self):
        assert summarize("Gives <b>bold</b> strength.") == "Gives bold strength."

    def test_empty_returns_empty(self):
        assert summarize("") == ""

    def test_none_returns_empty(self):
        assert summarize(None) == ""

    def test_paragraphs_separated(self):
        assert summarize("<p>First.</p><p>Second.</p>") == "First. Second."

    def test_list_items_separated(self):
        html = "<list><li>One</li><li>Two</li></list>"
        assert summarize(html) == "One Two"

    def test_whitespace_collapsed(self):
        assert summarize("<p>  a\n\n   b  </p>") == "a b"

    def test_mid_word_markup_not_split(self):
        assert summarize("<i>Sp</i>ell") == "Spell"

    def test_amp_entity_filtered(self):
        assert summarize("Salt &amp;amp; iron") == "Salt & iron"


class TestElementChildren:
    """Tests for element_children()."""

    def test_skips_text_nodes(self):
        bs = BeautifulSoup("<a> text <b/> more <c/></a>", "xml")
        assert [c.name for c in element_children(bs.a)] == ["b", "c"]

    def test_none_returns_empty(self):
        assert element_children(None) == []


class TestGetText:
    def test_concatenates_nested_text(self):
        bs = BeautifulSoup("<a>one <b>two</b> three</a>", "xml")
        assert get_text(bs.a) == "one two three"
