"""
Tests for the single-line tag scanner.
"""

from component_creator.codegen.parser import (
    TagShape,
    extract_attributes,
    match_tag,
    parse_usage,
)


# ═══════════════════════════════════════════════════════════════════
#  match_tag
# ═══════════════════════════════════════════════════════════════════


class TestMatchTag:
    def test_self_closing(self):
        tag = match_tag("Foo", '<Foo propA={42} propB={"x"} />')
        assert tag is not None
        assert tag.content is None
        assert tag.attribute_text == ' propA={42} propB={"x"} '
        assert tag.shape == TagShape.SELF_CLOSING

    def test_paired_with_content(self):
        tag = match_tag("Foo", "<Foo>some text</Foo>")
        assert tag.content == "some text"
        assert tag.shape == TagShape.PAIRED_WITH_CONTENT

    def test_paired_empty(self):
        tag = match_tag("Foo", "<Foo></Foo>")
        assert tag.content == ""
        assert tag.shape == TagShape.PAIRED_EMPTY

    def test_paired_whitespace_only_is_empty(self):
        assert match_tag("Foo", "<Foo>   </Foo>").shape == TagShape.PAIRED_EMPTY

    def test_paired_attributes_captured(self):
        tag = match_tag("Card", "<Card title={'Hi'}><p>x</p></Card>")
        assert tag.attribute_text == " title={'Hi'}"
        assert tag.shape == TagShape.PAIRED_WITH_CONTENT

    def test_no_tag(self):
        assert match_tag("Foo", "const x = 1;") is None

    def test_unclosed_open_tag_does_not_match(self):
        assert match_tag("Foo", "<Foo a={1}>") is None

    def test_first_match_wins(self):
        tag = match_tag("Foo", "<Foo a={1} /> or <Foo b={2} />")
        assert tag.shape == TagShape.SELF_CLOSING
        assert tag.attribute_text == " a={1} "

    def test_paired_form_can_span_an_earlier_self_closing_tag(self):
        """The open-tag alternative is tried first and may run to a later close tag."""
        tag = match_tag("Foo", "<Foo a={1} /><Foo>kids</Foo>")
        assert tag.shape == TagShape.PAIRED_WITH_CONTENT
        assert tag.content == "<Foo>kids"


# ═══════════════════════════════════════════════════════════════════
#  extract_attributes
# ═══════════════════════════════════════════════════════════════════


class TestExtractAttributes:
    def test_order_follows_source(self):
        attrs = extract_attributes(' b={1} a={"x"} c={true}')
        assert list(attrs) == ["b", "a", "c"]
        assert attrs == {"b": "1", "a": '"x"', "c": "true"}

    def test_plain_string_attributes_ignored(self):
        assert extract_attributes(' className="x" id={7}') == {"id": "7"}

    def test_duplicate_key_last_value_first_position(self):
        attrs = extract_attributes(" a={1} b={2} a={3}")
        assert list(attrs) == ["a", "b"]
        assert attrs["a"] == "3"

    def test_empty_text(self):
        assert extract_attributes("") == {}

    def test_value_stops_at_first_closing_brace(self):
        assert extract_attributes(" style={{color: 'red'}}") == {"style": "{color: 'red'"}


# ═══════════════════════════════════════════════════════════════════
#  parse_usage
# ═══════════════════════════════════════════════════════════════════


class TestParseUsage:
    def test_missing_tag_is_none(self):
        """No tag is distinguishable from a tag without attributes."""
        assert parse_usage("Foo", "return null;") is None

    def test_tag_without_attributes(self):
        usage = parse_usage("Foo", "  <Foo />")
        assert usage is not None
        assert usage.attributes == {}
        assert not usage.wraps_children

    def test_wraps_children(self):
        usage = parse_usage("Layout", "<Layout dense={true}>{page}</Layout>")
        assert usage.wraps_children
        assert usage.attributes == {"dense": "true"}
