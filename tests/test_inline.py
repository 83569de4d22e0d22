"""
Tests for inline rich text rendering.
"""

import logging
from conftest import text_span
from notion_html.api.models import Annotations
from notion_html.render.inline import (
    escape_html,
    format_text,
    plain_text,
    render_rich_text,
    style_for_color,
)


def test_escape_html():
    """All five markup characters are escaped."""
    assert escape_html("""<a & "b" 'c'>""") == (
        "&lt;a &amp; &quot;b&quot; &#039;c&#039;&gt;"
    )
    assert escape_html(None) == ""


def test_text_escaped_once():
    html = render_rich_text([text_span("Tom & Jerry <3")])
    assert html == "Tom &amp; Jerry &lt;3"
    assert "&amp;amp;" not in html


def test_newlines_become_line_breaks():
    assert render_rich_text([text_span("line one\nline two")]) == (
        "line one<br>line two"
    )


def test_annotations_fixed_nesting_order():
    """Tag nesting does not depend on how annotations are listed."""
    span = text_span("Hi")
    span["annotations"] = {
        "color": "red",
        "italic": True,
        "bold": True,
        "code": False,
        "underline": False,
        "strikethrough": False,
    }
    expected = '<span style="color: red"><em><strong>Hi</strong></em></span>'
    assert render_rich_text([span]) == expected

    span["annotations"] = {"bold": True, "italic": True, "color": "red"}
    assert render_rich_text([span]) == expected


def test_all_annotations():
    span = text_span(
        "x",
        bold=True,
        italic=True,
        underline=True,
        strikethrough=True,
        code=True,
    )
    assert render_rich_text([span]) == (
        "<code><s><u><em><strong>x</strong></em></u></s></code>"
    )


def test_background_color():
    span = text_span("note", color="yellow_background")
    assert render_rich_text([span]) == (
        '<span style="background-color: yellow">note</span>'
    )


def test_style_for_color():
    assert style_for_color("default") is None
    assert style_for_color(None) is None
    assert style_for_color("gray") == "color: gray"
    assert style_for_color("red_background") == "background-color: red"


def test_format_text_without_annotations():
    assert format_text("plain", Annotations()) == "plain"


def test_link_wraps_annotated_content():
    span = text_span("docs", href="https://example.com/?a=1&b=2", bold=True)
    assert render_rich_text([span]) == (
        '<a href="https://example.com/?a=1&amp;b=2" target="_blank" '
        'rel="noopener noreferrer"><strong>docs</strong></a>'
    )


def test_spans_keep_order():
    spans = [text_span("a"), text_span("b", bold=True), text_span("c")]
    assert render_rich_text(spans) == "a<strong>b</strong>c"


def test_date_mention():
    span = {
        "type": "mention",
        "mention": {"type": "date", "date": {"start": "2024-01-01", "end": None}},
        "plain_text": "January 1, 2024",
    }
    assert render_rich_text([span]) == (
        '<time datetime="2024-01-01">January 1, 2024</time>'
    )


def test_other_mentions_fall_back_to_span():
    span = {
        "type": "mention",
        "mention": {"type": "user", "user": {"id": "u1"}},
        "plain_text": "@Sam\nLee",
    }
    # newlines are only translated for text spans
    assert render_rich_text([span]) == "<span>@Sam\nLee</span>"


def test_equation():
    span = {
        "type": "equation",
        "equation": {"expression": "e = mc^2"},
        "plain_text": "e = mc^2",
    }
    assert render_rich_text([span]) == (
        '<span class="equation" data-equation="e = mc^2">e = mc^2</span>'
    )


def test_unknown_span_type_is_verbatim():
    span = {"type": "template_mention", "plain_text": "<b>raw</b>"}
    assert render_rich_text([span]) == "<b>raw</b>"


def test_invalid_input():
    assert render_rich_text(None) == ""
    assert render_rich_text("not a list") == ""


def test_invalid_span_is_skipped(caplog):
    with caplog.at_level(logging.WARNING):
        html = render_rich_text(["bogus", text_span("ok")])
    assert html == "ok"
    assert "invalid rich text span" in caplog.text


def test_plain_text():
    assert plain_text([text_span("a"), text_span("b")]) == "ab"
    assert plain_text(None) == ""


def test_date_mention_with_malformed_date(caplog):
    """A date mention without a usable date falls back to a plain span."""
    span = {
        "type": "mention",
        "mention": {"type": "date", "date": "2024-01-01"},
        "plain_text": "2024-01-01",
    }
    with caplog.at_level(logging.WARNING):
        assert render_rich_text([span]) == "<span>2024-01-01</span>"
    assert "Invalid date mention" in caplog.text


def test_date_mention_with_non_string_start():
    span = {
        "type": "mention",
        "mention": {"type": "date", "date": {"start": 20240101}},
        "plain_text": "Jan 1",
    }
    assert render_rich_text([span]) == "<span>Jan 1</span>"


def test_escape_html_coerces_non_strings():
    assert escape_html(20240101) == "20240101"
