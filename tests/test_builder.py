import logging

import pytest

from hypertext_literal.builder import (
    CommentText,
    HTMLBuilder,
    Unescaped,
    comment,
    render_comment,
    render_interpolation,
    render_parts,
    unsafe_unescaped,
)
from hypertext_literal.config import ConfigError, HypertextConfig
from hypertext_literal.markup import HTML
from hypertext_literal.models import Disposition, Quote


def test_literal_without_interpolation():
    assert render_parts(["<h1>Hello, world!</h1>"], []) == HTML("<h1>Hello, world!</h1>")


def test_text_interpolation():
    assert render_parts(["<h1>Hello, ", "!</h1>"], ["world"]) == HTML("<h1>Hello, world!</h1>")


def test_escaped_text_interpolation():
    assert str(render_parts(["<h1>Hello, ", "!</h1>"], ["<world>"])) == (
        "<h1>Hello, &lt;world&gt;!</h1>"
    )


def test_element_name_interpolation():
    result = render_parts(["<", ">Hello, world!</", ">"], ["h1", "h1"])

    assert str(result) == "<h1>Hello, world!</h1>"


def test_partial_element_name_interpolation():
    result = render_parts(["<h", ">Hello, world!</h", ">"], [1, 1])

    assert str(result) == "<h1>Hello, world!</h1>"


def test_string_tags_are_escaped():
    result = render_parts(["", "Hello, world!", ""], ["<h1>", "</h1>"])

    assert str(result) == "&lt;h1&gt;Hello, world!&lt;/h1&gt;"


def test_markup_tags_are_trusted():
    result = render_parts(["", "Hello, world!", ""], [HTML("<h1>"), HTML("</h1>")])

    assert str(result) == "<h1>Hello, world!</h1>"


def test_attribute_value_interpolation_by_quote_style():
    title = 'Python.org | "Welcome to Python.org"'
    result = render_parts(
        ["<a id='", "' href=\"", '" title=', ">Python.org</a>"],
        ["logo", "https://python.org/", title],
    )

    assert str(result) == (
        "<a id='logo' href=\"https://python.org/\" "
        'title="Python.org | \\"Welcome to Python.org\\"">Python.org</a>'
    )


def test_empty_attribute_list_interpolation():
    result = render_parts(["<div ", "></div>"], [[]])

    assert str(result) == "<div ></div>"


def test_attribute_map_with_injected_name_is_dropped():
    result = render_parts(["<div ", "></div>"], [{'x" onclick="alert(1)': 1, "id": "a"}])

    assert str(result) == '<div id="a"></div>'


def test_class_attribute_interpolation():
    result = render_parts(["<div ", "></div>"], [{"class": ["alpha", "bravo", "charlie"]}])

    assert str(result) == '<div class="alpha bravo charlie"></div>'


def test_style_attribute_interpolation():
    style = {"background": "orangered", "font-weight": 700}

    result = render_parts(["<span style=", ">Python</span>"], [style])

    assert str(result) == '<span style="background: orangered; font-weight: 700;">Python</span>'


def test_style_attribute_is_order_independent():
    forward = render_parts(["<span ", ">whoa</span>"], [{"style": {"background": "yellow", "font-weight": "bold"}}])
    backward = render_parts(["<span ", ">whoa</span>"], [{"style": {"font-weight": "bold", "background": "yellow"}}])

    assert forward == backward
    assert str(forward) == '<span style="background: yellow; font-weight: bold;">whoa</span>'


def test_nested_attributes_interpolation():
    attributes = {
        "aria": {"role": "article"},
        "data": {"index": 1, "count": 3},
        "style": {"background": "orangered", "font-weight": 700},
    }

    result = render_parts(["<section ", ">…</section>"], [attributes])

    assert str(result) == (
        '<section aria-role="article" data-count="3" data-index="1" '
        'style="background: orangered; font-weight: 700;">…</section>'
    )


def test_boolean_attribute_interpolation():
    attributes = {
        "aria": {"label": True},
        "autocomplete": True,
        "spellcheck": True,
        "translate": True,
        "type": "text",
    }

    result = render_parts(["<input ", "/>"], [attributes])

    assert str(result) == (
        '<input aria-label="true" autocomplete="on" spellcheck="spellcheck" '
        'translate="yes" type="text"/>'
    )


def test_false_boolean_attribute_is_omitted():
    result = render_parts(["<button ", ">Go</button>"], [{"disabled": False, "type": "submit"}])

    assert str(result) == '<button type="submit">Go</button>'


def test_unsafe_unescaped_interpolation():
    inline = "<strong>&amp;</strong>"

    result = render_parts(["<span>", "</span>"], [unsafe_unescaped(inline)])

    assert str(result) == "<span><strong>&amp;</strong></span>"


def test_default_interpolation_escapes_markup_strings():
    inline = "<strong>&amp;</strong>"

    result = render_parts(["<span>", "</span>"], [inline])

    assert str(result) == "<span>&lt;strong&gt;&amp;amp;&lt;/strong&gt;</span>"


def test_comment_interpolation_in_text():
    result = render_parts(["", ""], [comment("(　ﾟДﾟ)<!!")])

    assert str(result) == "<!-- (　ﾟДﾟ)<!! -->"


def test_comment_interpolation_in_comment():
    result = render_parts(["<!-- ", " -->"], [comment("<!-- (－_－) zzZ -->")])

    assert str(result) == "<!-- (－_－) zzZ -->"


def test_plain_value_in_comment_strips_delimiters():
    result = render_parts(["<!-- ", " -->"], ["<!-- x -->"])

    assert str(result) == "<!-- x -->"


def test_comment_value_cannot_rebuild_closing_delimiter():
    payload = "---->><img src=x onerror=alert(1)>"

    wrapped = render_parts(["<p>", "</p>"], [comment(payload)])
    inside = render_parts(["<!-- ", " -->"], ["---->><script>alert(1)</script>"])

    assert str(wrapped) == "<p><!-- <img src=x onerror=alert(1)> --></p>"
    assert str(inside) == "<!-- <script>alert(1)</script> -->"


def test_markup_list_interpolation():
    entries = [HTML("<dt>a</dt>"), HTML("<dt>b</dt>")]

    result = render_parts(["<dl>\n", "\n</dl>"], [entries])

    assert str(result) == "<dl>\n<dt>a</dt>\n<dt>b</dt>\n</dl>"


def test_markup_list_uses_configured_separator():
    entries = [HTML("<li>a</li>"), HTML("<li>b</li>")]

    result = render_parts(["<ul>", "</ul>"], [entries], HypertextConfig(markup_separator=""))

    assert str(result) == "<ul><li>a</li><li>b</li></ul>"


def test_mixed_list_is_escaped():
    result = render_parts(["<p>", "</p>"], [[HTML("<b>"), "<i>"]])

    assert "<i>" not in str(result)


def test_nested_documents_are_trusted():
    inner = render_parts(["<h1>Results for <var>", "</var>:</h1>"], ["🕵️"])

    page = render_parts(["<main>\n", "\n</main>"], [inner])

    assert str(page) == "<main>\n<h1>Results for <var>🕵️</var>:</h1>\n</main>"


def test_svg_document_with_attribute_groups():
    def box(x, y, size, fill):
        return render_parts(
            ["<rect x=", " y=", " width=", " height=", "\n      ", "/>"],
            [float(x), float(y), float(size), float(size), {"fill": fill}],
        )

    svg = render_parts(
        [
            '<?xml version="1.0" encoding="utf-8"?>\n'
            "<svg xmlns='http://www.w3.org/2000/svg' viewBox='0 0 100 100'>\n  <g ",
            ">\n    ",
            "\n  </g>\n</svg>",
        ],
        [{"stroke-width": 3, "stroke": "#FFFFEE"}, box(12, 28, 60, "#F06507")],
    )

    assert str(svg) == (
        '<?xml version="1.0" encoding="utf-8"?>\n'
        "<svg xmlns='http://www.w3.org/2000/svg' viewBox='0 0 100 100'>\n"
        '  <g stroke="#FFFFEE" stroke-width="3">\n'
        '    <rect x="12.0" y="28.0" width="60.0" height="60.0"\n'
        '      fill="#F06507"/>\n'
        "  </g>\n</svg>"
    )


def test_attribute_value_protocol_and_fallback():
    class Price:
        def __html_attr_value__(self, attribute, element):
            return "12.50" if attribute == "value" else None

        def __str__(self):
            return "$12.50"

    assert str(render_parts(["<input value=", ">"], [Price()])) == '<input value="12.50">'
    assert str(render_parts(["<input title=", ">"], [Price()])) == '<input title="$12.50">'


def test_false_boolean_in_attribute_value_falls_back_to_text():
    assert str(render_parts(["<input disabled='", "'>"], [False])) == "<input disabled='false'>"


def test_render_interpolation_is_idempotent():
    disposition = Disposition.for_attribute("a", "title", Quote.DOUBLE)

    first = render_interpolation('say "hi"', disposition)
    second = render_interpolation('say "hi"', disposition)

    assert first == second == 'say \\"hi\\"'


def test_render_interpolation_element_fallback_escapes():
    assert render_interpolation('onclick="x()"', Disposition.for_element("a")) == (
        "onclick=&quot;x()&quot;"
    )


def test_render_comment_wraps_outside_comment():
    assert render_comment("  note  ", Disposition.text()) == "<!-- note -->"
    assert render_comment("note", Disposition.comment()) == "note"


def test_builder_tracks_disposition():
    builder = HTMLBuilder()

    builder.append_literal("<input ")
    assert builder.disposition == Disposition.for_element("input")

    builder.append_value({"type": "text"})
    builder.append_literal(" value=")
    assert builder.disposition == Disposition.for_attribute("input", "value")

    builder.append_value("x")
    builder.append_literal(">")

    assert builder.build() == HTML('<input type="text" value="x">')


def test_unsafe_text_is_fed_to_parser():
    builder = HTMLBuilder()

    builder.append_unsafe("<a ")

    assert builder.disposition == Disposition.for_element("a")


def test_append_value_dispatches_explicit_modes():
    builder = HTMLBuilder()

    builder.append_value(Unescaped("<b>"))
    builder.append_value(CommentText("note"))

    assert builder.build() == HTML("<b><!-- note -->")


@pytest.mark.parametrize(
    "conversion, format_spec, value, expected",
    [
        (None, "", "<x>", "&lt;x&gt;"),
        ("r", "", "<x>", "&apos;&lt;x&gt;&apos;"),
        ("a", "", "é", "&apos;\\xe9&apos;"),
        (None, ".2f", 3.14159, "3.14"),
        (None, "unsafe", "<x>", "<x>"),
        (None, "comment", "x", "<!-- x -->"),
    ],
)
def test_append_field(conversion, format_spec, value, expected):
    builder = HTMLBuilder()

    builder.append_field(value, conversion, format_spec)

    assert str(builder.build()) == expected


def test_append_field_rejects_unknown_conversion():
    with pytest.raises(ValueError):
        HTMLBuilder().append_field("x", "q")


def test_builder_logs_interpolations(caplog):
    with caplog.at_level(logging.DEBUG, logger="hypertext_literal.builder"):
        render_parts(["<p>", "</p>"], ["x"])

    assert "Interpolating str in text" in caplog.text


def test_builder_rejects_invalid_config():
    with pytest.raises(ConfigError):
        HTMLBuilder(HypertextConfig(nested_attribute_groups=("",)))


def test_render_parts_rejects_mismatched_lengths():
    with pytest.raises(ValueError):
        render_parts(["a", "b"], [])
    with pytest.raises(ValueError):
        render_parts([], [])
