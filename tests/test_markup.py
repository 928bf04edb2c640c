import pickle

import pytest

from hypertext_literal.markup import HTML


def test_str_and_html_return_content():
    markup = HTML("<h1>Hello, world!</h1>")

    assert str(markup) == "<h1>Hello, world!</h1>"
    assert markup.__html__() == "<h1>Hello, world!</h1>"


def test_equality_hashing_and_ordering():
    assert HTML("<a>") == HTML("<a>")
    assert HTML("<a>") != HTML("<b>")
    assert len({HTML("<a>"), HTML("<a>")}) == 1
    assert sorted([HTML("b"), HTML("a")]) == [HTML("a"), HTML("b")]
    assert HTML("a") < HTML("b")


def test_immutable():
    markup = HTML("x")

    with pytest.raises(AttributeError):
        markup.content = "y"


def test_json_persistence():
    markup = HTML('<p class="x">é</p>')

    assert HTML.from_json(markup.to_json()) == markup


def test_from_json_rejects_non_string():
    with pytest.raises(ValueError):
        HTML.from_json("[1, 2]")


def test_pickle_round_trip():
    markup = HTML("<br>")

    assert pickle.loads(pickle.dumps(markup)) == markup


def test_join():
    assert HTML.join("\n", [HTML("<li>a</li>"), HTML("<li>b</li>")]) == HTML(
        "<li>a</li>\n<li>b</li>"
    )
