import pytest

from elementbuilder.markup import Markup, Tag, escape


def test_tag_lowercases_name():
    tag = Tag("DIV", {"id": "main"})
    assert tag.render() == '<div id="main"></div>'


def test_void_tag():
    tag = Tag("img", {"src": "a.png"})
    assert tag.startTag() == '<img src="a.png" />'
    assert tag.endTag() == ""
    assert str(tag) == '<img src="a.png" />'


def test_void_tag_rejects_content():
    with pytest.raises(ValueError):
        Tag("br").addText("x")
    with pytest.raises(ValueError):
        Tag("span", isvoid=True).addHtml("<b>x</b>")


def test_tagless_outputs_content_only():
    tag = Tag(None).addText("a<b").addHtml("<hr />")
    assert tag.render() == "a&lt;b<hr />"


def test_attribute_values():
    tag = Tag("input")
    tag.setAttribute("disabled")
    tag.setAttribute("checked", True)
    tag.setAttribute("hidden", False)
    tag.setAttribute("title", 'say "hi" & <go>')
    assert tag.attributesMarkup() == (
        ' disabled checked title="say &quot;hi&quot; &amp; &lt;go&gt;"'
    )


def test_remove_attribute():
    tag = Tag("p", {"id": "x", "lang": "en"}).removeAttribute("id")
    assert tag.render() == '<p lang="en"></p>'
    assert tag.getAttribute("id") is None


def test_data_attribute_none_is_empty():
    tag = Tag("div").setData("id").setData("role", "menu")
    assert tag.attributesMarkup() == ' data-id="" data-role="menu"'


def test_href_query():
    assert Tag("a").setHref("/p").getAttribute("href") == "/p"
    assert Tag("a").setHref("/p", {"q": "1", "skip": None}).getAttribute("href") == "/p?q=1"
    assert Tag("a").setHref("/p?a=1", {"b": "x y"}).getAttribute("href") == "/p?a=1&b=x+y"
    assert Tag("a").setHref("/p", {"t": [1, 2]}).getAttribute("href") == "/p?t=1&t=2"
    assert Tag("a").setHref("/p", {"skip": None}).getAttribute("href") == "/p"


def test_href_is_escaped_in_output():
    tag = Tag("a").setHref("/p", {"a": "1", "b": "2"})
    assert tag.startTag() == '<a href="/p?a=1&amp;b=2">'


def test_set_name_keeps_attributes_and_content():
    tag = Tag("span", {"id": "x"}).addText("hi")
    tag.setName("em")
    assert tag.render() == '<em id="x">hi</em>'


def test_set_text_replaces():
    tag = Tag("p").addText("one").addText(" two")
    assert tag.render() == "<p>one two</p>"
    tag.setText("three")
    assert tag.render() == "<p>three</p>"


def test_nested_tag_content():
    inner = Tag("b").addText("bold")
    outer = Tag("p").addText("x ").addHtml(inner)
    assert outer.render() == "<p>x <b>bold</b></p>"


def test_copy_is_independent():
    tag = Tag("p", {"id": "x"}).addText("a")
    other = tag.copy()
    other.setAttribute("id", "y").addText("b")
    assert tag.render() == '<p id="x">a</p>'
    assert other.render() == '<p id="y">ab</p>'


def test_escape():
    assert escape("<a href='x'>") == "&lt;a href=&#x27;x&#x27;&gt;"
    assert escape(Markup("<b>")) == "<b>"
    assert escape(Tag("i")) == "<i></i>"
    assert escape(5) == "5"
    assert isinstance(escape("x"), Markup)


def test_href_boolean_query_values():
    tag = Tag("a").setHref("/p", {"a": True, "b": False, "c": [True, 2]})
    assert tag.getAttribute("href") == "/p?a=1&b=0&c=1&c=2"
