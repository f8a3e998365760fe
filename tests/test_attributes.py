"""Tests for attribute rendering."""

import unittest

from sublimehtml import create, serialize_attributes
from sublimehtml.tags import a, button, div, input_, option


class TestAttributeRendering(unittest.TestCase):
    def test_empty_attributes_render_nothing(self):
        assert serialize_attributes({}) == ""
        assert div().render() == "<div></div>"

    def test_attributes_keep_insertion_order(self):
        html = create("div", attributes={"id": "main", "title": "t", "lang": "en"}).render()
        assert html == '<div id="main" title="t" lang="en"></div>'

    def test_values_are_escaped(self):
        html = div(title='"quoted" & <tagged> \'single\'').render()
        assert html == '<div title="&quot;quoted&quot; &amp; &lt;tagged&gt; &#039;single&#039;"></div>'

    def test_numbers_are_converted(self):
        assert create("td", colspan=2).render() == '<td colspan="2"></td>'

    def test_none_and_false_are_omitted(self):
        html = div(id=None, title=False, lang="en").render()
        assert html == '<div lang="en"></div>'

    def test_all_attributes_omitted_leaves_no_space(self):
        assert div(id=None).render() == "<div></div>"

    def test_empty_string_value_is_kept(self):
        assert create("img", src="x.png", alt="").render() == '<img src="x.png" alt="">'

    def test_zero_is_not_omitted(self):
        assert div(tabindex=0).render() == '<div tabindex="0"></div>'

    def test_trailing_underscore_is_stripped(self):
        html = create("label", "Name", for_="name", class_="field").render()
        assert html == '<label for="name" class="field">Name</label>'

    def test_keyword_attributes_override_mapping(self):
        html = div(attributes={"id": "a", "title": "t"}, id="b").render()
        assert html == '<div id="b" title="t"></div>'

    def test_hyphenated_names_through_mapping(self):
        html = div(attributes={"data-id": "7", "aria-label": "Close"}).render()
        assert html == '<div data-id="7" aria-label="Close"></div>'


class TestBooleanAttributes(unittest.TestCase):
    def test_true_renders_bare_name(self):
        assert button("Go", disabled=True).render() == "<button disabled>Go</button>"

    def test_false_and_none_are_absent(self):
        assert button("Go", disabled=False).render() == "<button>Go</button>"
        assert button("Go", disabled=None).render() == "<button>Go</button>"

    def test_truthy_values_render_bare_name(self):
        assert option("x", selected="selected").render() == "<option selected>x</option>"

    def test_falsy_values_are_absent(self):
        assert input_(checked=0, required="").render() == "<input>"

    def test_true_on_other_attribute_is_converted_to_string(self):
        html = div(draggable=True, attributes={"aria-hidden": True}).render()
        assert html == '<div aria-hidden="True" draggable="True"></div>'

    def test_mixed_boolean_and_valued(self):
        html = input_(type="checkbox", checked=True, name="agree").render()
        assert html == '<input type="checkbox" checked name="agree">'


class TestStyleAttribute(unittest.TestCase):
    def test_mapping_is_joined(self):
        html = div(style={"color": "red", "font-size": "12px"}).render()
        assert html == '<div style="color:red;font-size:12px"></div>'

    def test_invalid_properties_are_dropped(self):
        html = div(style={"color": "red", "back;ground": "x", "width2": "1px"}).render()
        assert html == '<div style="color:red"></div>'

    def test_empty_values_are_dropped(self):
        html = div(style={"color": None, "margin": "", "padding": 0}).render()
        assert html == '<div style="padding:0"></div>'

    def test_empty_result_omits_attribute(self):
        assert div(style={"color": None}).render() == "<div></div>"
        assert div(style={}).render() == "<div></div>"

    def test_name_match_is_case_insensitive(self):
        html = create("div", attributes={"Style": {"color": "red"}}).render()
        assert html == '<div Style="color:red"></div>'

    def test_string_style_is_escaped(self):
        html = div(style='font-family:"Arial"').render()
        assert html == '<div style="font-family:&quot;Arial&quot;"></div>'

    def test_style_values_are_escaped(self):
        html = div(style={"content": '"x"'}).render()
        assert html == '<div style="content:&quot;x&quot;"></div>'


class TestClassAttribute(unittest.TestCase):
    def test_list_is_joined_with_spaces(self):
        assert div(class_=["a", "b"]).render() == '<div class="a b"></div>'

    def test_empty_entries_are_dropped(self):
        assert div(class_=["a", "", None, "b"]).render() == '<div class="a b"></div>'

    def test_empty_result_omits_attribute(self):
        assert div(class_=["", ""]).render() == "<div></div>"
        assert div(class_=[]).render() == "<div></div>"

    def test_name_match_is_case_insensitive(self):
        html = create("div", attributes={"Class": ["a", "b"]}).render()
        assert html == '<div Class="a b"></div>'

    def test_tuple_is_joined(self):
        assert div(class_=("x", "y")).render() == '<div class="x y"></div>'

    def test_class_names_are_escaped(self):
        assert div(class_=['a"b']).render() == '<div class="a&quot;b"></div>'


class TestUrlAttributes(unittest.TestCase):
    def test_safe_urls_are_escaped(self):
        html = a("Search", href="/search?q=a&page=2").render()
        assert html == '<a href="/search?q=a&amp;page=2">Search</a>'

    def test_data_image_is_allowed(self):
        html = create("img", src="data:image/png;base64,AAAA").render()
        assert html == '<img src="data:image/png;base64,AAAA">'


class TestAttributeLogging(unittest.TestCase):
    def test_dropped_style_property_is_logged(self):
        with self.assertLogs("sublimehtml.serialize", level="DEBUG") as logs:
            div(style={"bad prop": "x"}).render()
        assert any("bad prop" in message for message in logs.output)
