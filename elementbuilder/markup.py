"""
markup - the low level markup primitive used by the element builder

A Tag holds a tag name, attributes and an ordered list of content items.
Content is either trusted markup (inserted verbatim) or plain text (escaped
on output). Attribute values are always escaped.

Does not enforce correct html structure.
"""
from __future__ import annotations
from typing import Any, Optional, List, Mapping
from html import escape as _htmlescape
from urllib.parse import urlencode

# rendered as <tag ... /> with no end tag; adding text or children raises
VOID_ELEMENTS = {
    "area",
    "base",
    "br",
    "col",
    "embed",
    "hr",
    "img",
    "input",
    "link",
    "meta",
    "param",
    "source",
    "track",
    "wbr",
}


class Markup(str):
    """
    A string of trusted markup. Never escaped when output.
    """

    def __html__(self) -> Markup:
        return self

    def __repr__(self) -> str:
        return f"Markup({str.__repr__(self)})"


def escape(value: Any) -> Markup:
    """
    escape - return value as markup. Objects that provide __html__ are
    trusted and returned unchanged, everything else is converted to a
    string and html escaped (quotes included)
    """
    if hasattr(value, "__html__"):
        return Markup(value.__html__())
    return Markup(_htmlescape(str(value), quote=True))


def _queryvalue(value: Any) -> Any:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (list, tuple)):
        return [_queryvalue(v) for v in value]
    return value


class Tag:
    """
    A single html tag with attributes and content
    """

    def __init__(
        self,
        tagName: Optional[str] = None,
        attributes: Optional[Mapping[str, Any]] = None,
        isvoid: bool = False,
    ):
        """
        tagName: type of this tag. If tagName is empty or None, opening/closing
            tags are not emitted, only the content
        attributes: mapping of attribute name to value
        isvoid: set this as a void element when true. If false, this may still
            be a void element if the tag is one of the void element tags.
        """
        self.tagName = ""
        self._forcevoid = isvoid
        self.isvoid = isvoid
        self.setName(tagName)
        self.attributes: dict[str, Any] = {}
        self.content: List[Any] = []
        if attributes:
            self.addAttributes(attributes)

    def setName(self, tagName: Optional[str]) -> Tag:
        """
        setName - change the tag name. Attributes and content are kept
        """
        self.tagName = (tagName or "").lower()
        self.isvoid = self._forcevoid or (self.tagName in VOID_ELEMENTS)
        return self

    def setAttribute(self, name: str, value: Any = None) -> Tag:
        """
        setAttribute - set (create or overwrite) an attribute
        name: name of attribute
        value: value of attribute. None (or True) gives a valueless attribute,
            False means the attribute is not output
        """
        self.attributes[name] = value
        return self

    def addAttributes(self, attributes: Mapping[str, Any]) -> Tag:
        for name, value in attributes.items():
            self.setAttribute(name, value)
        return self

    def getAttribute(self, name: str) -> Any:
        return self.attributes.get(name, None)

    def removeAttribute(self, name: str) -> Tag:
        self.attributes.pop(name, None)
        return self

    def setData(self, name: str, value: Any = None) -> Tag:
        """
        setData - set a data-* attribute. A None value is stored as an empty
        string, not as a valueless attribute
        """
        return self.setAttribute("data-" + name, "" if value is None else value)

    def setHref(self, url: str, query: Optional[Mapping[str, Any]] = None) -> Tag:
        """
        setHref - set the href attribute

        url: base url
        query: optional mapping of query parameters. None values are skipped,
            list/tuple values are output as repeated keys, booleans as 1/0
        """
        if query:
            params = {
                k: _queryvalue(v) for k, v in query.items() if v is not None
            }
            encoded = urlencode(params, doseq=True)
            if encoded:
                url += ("&" if "?" in url else "?") + encoded
        return self.setAttribute("href", url)

    def _checkcontent(self) -> None:
        if self.isvoid:
            raise ValueError(
                f"Content not permitted on Void elements. Tag: {self.tagName}"
            )

    def addHtml(self, item: Any) -> Tag:
        """
        addHtml - append trusted content (Markup, Tag or any object with
        __html__). A plain string is taken to be markup
        """
        self._checkcontent()
        if isinstance(item, str) and not hasattr(item, "__html__"):
            item = Markup(item)
        self.content.append(item)
        return self

    def addText(self, text: Any) -> Tag:
        """
        addText - append text content, escaped on output
        """
        self._checkcontent()
        if text is None:
            return self
        if not hasattr(text, "__html__"):
            text = str(text)
        self.content.append(text)
        return self

    def setText(self, text: Any) -> Tag:
        """
        setText - replace all content with the supplied text
        """
        self.content = []
        return self.addText(text)

    def copy(self) -> Tag:
        """
        copy - shallow copy. The copy has its own attribute and content
        containers, the content items themselves are shared
        """
        other = Tag(self.tagName, self.attributes, isvoid=self._forcevoid)
        other.content = list(self.content)
        return other

    def attributesMarkup(self) -> str:
        """
        attributesMarkup - the serialized attribute list, each attribute with
        a leading space
        """
        dest: list[str] = []
        for k, v in self.attributes.items():
            if v is False:
                continue
            if v is None or v is True:
                dest.append(f" {k}")
            else:
                dest.append(f' {k}="{_htmlescape(str(v), quote=True)}"')
        return "".join(dest)

    def startTag(self) -> str:
        if not self.tagName:
            return ""
        if self.isvoid:
            return f"<{self.tagName}{self.attributesMarkup()} />"
        return f"<{self.tagName}{self.attributesMarkup()}>"

    def endTag(self) -> str:
        if not self.tagName or self.isvoid:
            return ""
        return f"</{self.tagName}>"

    def renderlist(self) -> list[str]:
        """
        renderlist - render this tag and its content

        returns a list of strings that can be joined to create the rendered html
        """
        dest: list[str] = [self.startTag()]
        for c in self.content:
            dest.append(escape(c))
        dest.append(self.endTag())
        return dest

    def render(self) -> str:
        return "".join(self.renderlist())

    def __str__(self) -> str:
        return self.render()

    def __html__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"<Tag {self.tagName or '(none)'}>"
