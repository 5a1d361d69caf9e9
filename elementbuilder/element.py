"""
element - fluent html element builder with a cached render

A BaseElement wraps a Tag (see markup.py) together with css classes,
named children and a hidden flag. All mutators return the element so calls
can be chained. The rendered Tag is cached until the element is marked
dirty again.

Marking an element dirty does not mark its parent dirty. A parent that has
already rendered keeps returning its cached output, including the old
output of its children, until invalidate() is called on the parent.
"""
from __future__ import annotations
import logging
import weakref
from types import MappingProxyType
from typing import Any, Optional, Mapping, Union

from .markup import Markup, Tag, escape

logger = logging.getLogger(__name__)

# a child is either another element or a fragment of trusted markup
Child = Union["BaseElement", Markup, Tag]


class ChildNotFoundError(LookupError):
    """
    Raised when a named child does not exist
    """

    def __init__(self, name: str):
        super().__init__(f"Child not found: {name}")
        self.name = name


class BaseElement:
    """
    An html element with lazily rendered, cached output
    """

    # base class for this type of element, set by specialisations
    defaultClass: str = ""

    def __init__(
        self,
        tagName: Optional[str] = None,
        attributes: Optional[Mapping[str, Any]] = None,
        textContent: Any = None,
    ):
        """
        tagName: element tag. None gives a container that only outputs its
            content
        attributes: initial attributes
        textContent: initial text, escaped on output
        """
        self.element = Tag(tagName, attributes)
        if textContent is not None:
            self.element.setText(textContent)
        self.extraClass = ""
        self.hidden = False
        self.children: dict[str, Child] = {}
        self._parent: Optional[weakref.ref[BaseElement]] = None
        self._render: Optional[Tag] = None
        self._dirty = True

    @classmethod
    def prepared(
        cls,
        tagName: Optional[str] = None,
        attributes: Optional[Mapping[str, Any]] = None,
        textContent: Any = None,
    ) -> BaseElement:
        """
        prepared - create an element and apply attributes and text through
        the public mutators, so overrides in subclasses take effect.
        A tagName of None uses the default tag of the class
        """
        element = cls() if tagName is None else cls(tagName)
        element.setAttributes(attributes or {})
        if textContent is not None:
            element.setTextContent(textContent)
        return element

    def beforeRender(self) -> None:
        """
        beforeRender - called at the start of every render, even when the
        element is hidden or the cached render is reused
        """

    def render(self) -> Optional[Tag]:
        """
        render - return the rendered Tag for this element, or None when
        hidden. The cached render is returned unchanged while the element
        is clean; children are only visited when the element is dirty
        """
        self.beforeRender()
        if self.hidden:
            return None
        if not self._dirty and self._render is not None:
            logger.debug("using cached render of <%s>", self.element.tagName)
            return self._render
        return self._rerender()

    def _rerender(self) -> Tag:
        logger.debug(
            "rendering <%s> with %d children", self.element.tagName, len(self.children)
        )
        rendered = self.element.copy()
        text = rendered.content
        rendered.content = []
        for child in self.children.values():
            if isinstance(child, BaseElement):
                child._parent = weakref.ref(self)
                childrender = child.render()
                if childrender is not None:
                    rendered.addHtml(escape(childrender))
            else:
                # frozen as markup when rendered
                rendered.addHtml(escape(child))
        for item in text:
            rendered.addText(escape(item) if hasattr(item, "__html__") else item)

        classname = self.buildCombinedClass()
        if classname:
            rendered.setAttribute("class", classname)

        self._dirty = False
        self._render = rendered
        return rendered

    def renderStartTag(self) -> Optional[str]:
        """
        renderStartTag - the opening tag only, None when hidden
        """
        rendered = self.render()
        return None if rendered is None else rendered.startTag()

    def renderEndTag(self) -> Optional[str]:
        """
        renderEndTag - the closing tag only, None when hidden
        """
        rendered = self.render()
        return None if rendered is None else rendered.endTag()

    def __str__(self) -> str:
        rendered = self.render()
        return "" if rendered is None else rendered.render()

    def __html__(self) -> str:
        return str(self)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.element.tagName or '(none)'}>"

    def invalidate(self) -> BaseElement:
        """
        invalidate - force the next render to be recomputed
        """
        self._dirty = True
        return self

    # structure

    def setTag(self, tagName: Optional[str]) -> BaseElement:
        """
        setTag - change the element tag. Attributes, text and children are
        kept
        """
        self.element.setName(tagName)
        return self.invalidate()

    def setElement(self, element: Tag) -> BaseElement:
        """
        setElement - replace the underlying Tag (tag, attributes and text)
        """
        self.element = element
        return self.invalidate()

    def addChild(self, name: str, child: Any) -> BaseElement:
        """
        addChild - add a named child, replacing any child with that name

        child: a BaseElement, a Tag or other object providing __html__, or a
            string of raw markup (not escaped)
        """
        if not isinstance(child, (BaseElement, Tag)):
            child = Markup(child.__html__() if hasattr(child, "__html__") else child)
        self.children[name] = child
        return self.invalidate()

    def getChild(self, name: str) -> Child:
        try:
            return self.children[name]
        except KeyError:
            logger.debug("no child %r in <%s>", name, self.element.tagName)
            raise ChildNotFoundError(name) from None

    def getChildren(self) -> Mapping[str, Child]:
        return MappingProxyType(self.children)

    def addSpanElement(
        self,
        spanClass: Optional[str] = None,
        attributes: Optional[Mapping[str, Any]] = None,
        name: str = "span",
    ) -> BaseElement:
        """
        addSpanElement - add a <span> child with the supplied class
        """
        return self.addChild(
            name, BaseElement("span", attributes).setExtraClass(spanClass or "")
        )

    def addIconElement(
        self,
        iconClass: Optional[str] = None,
        attributes: Optional[Mapping[str, Any]] = None,
        name: str = "icon",
    ) -> BaseElement:
        """
        addIconElement - add an <i> child with the supplied (icon) class
        """
        return self.addChild(
            name, BaseElement("i", attributes).setExtraClass(iconClass or "")
        )

    def setParent(self, parent: Optional[BaseElement]) -> BaseElement:
        self._parent = None if parent is None else weakref.ref(parent)
        return self.invalidate()

    def getParent(self) -> Optional[BaseElement]:
        """
        getParent - the element this element was last rendered into, if it
        still exists
        """
        return None if self._parent is None else self._parent()

    def setHidden(self, hidden: bool = True) -> BaseElement:
        """
        setHidden - hide or show the element. The cached render is kept, so
        showing an element again returns its previous render
        """
        self.hidden = hidden
        return self

    def isHidden(self) -> bool:
        return self.hidden

    # content

    def setTextContent(self, textContent: Any) -> BaseElement:
        self.element.setText(textContent)
        return self.invalidate()

    def addTextContent(self, textContent: Any) -> BaseElement:
        self.element.addText(textContent)
        return self.invalidate()

    # attributes

    def setAttribute(self, name: str, value: Any = None) -> BaseElement:
        """
        setAttribute - set a single attribute. A None value gives a
        valueless attribute (eg disabled)
        """
        self.element.setAttribute(name, value)
        return self.invalidate()

    def setAttributes(self, attributes: Mapping[str, Any]) -> BaseElement:
        self.element.addAttributes(attributes)
        return self.invalidate()

    def setDataAttribute(self, name: str, value: Any = None) -> BaseElement:
        """
        setDataAttribute - set data-<name>. Unlike setAttribute, a None
        value is output as an empty string
        """
        self.element.setData(name, value)
        return self.invalidate()

    def setDataAttributes(self, attributes: Mapping[str, Any]) -> BaseElement:
        for name, value in attributes.items():
            self.setDataAttribute(name, value)
        return self.invalidate()

    def setTitle(self, title: Optional[str] = None) -> BaseElement:
        """
        setTitle - set the title attribute, None removes it
        """
        if title is None:
            self.element.removeAttribute("title")
        else:
            self.element.setAttribute("title", title)
        return self.invalidate()

    def getAttributesMarkup(self) -> str:
        """
        getAttributesMarkup - the serialized attributes, including the
        combined class. Renders first if the element is dirty
        """
        if self._dirty or self._render is None:
            self.beforeRender()
            self._rerender()
        return self._render.attributesMarkup()

    # classes

    def setDefaultClass(self, defaultClass: str) -> BaseElement:
        self.defaultClass = defaultClass
        return self.invalidate()

    def setExtraClass(self, extraClass: str) -> BaseElement:
        self.extraClass = extraClass
        return self.invalidate()

    def addExtraClass(self, extraClass: str) -> BaseElement:
        """
        addExtraClass - append to the extra class. Duplicates are not
        removed
        """
        self.extraClass = " ".join(self.extraClass.split() + extraClass.split())
        return self.invalidate()

    def removeClassToken(self, token: str) -> BaseElement:
        """
        removeClassToken - remove the first occurrence of token, looking in
        the extra class first and then the default class
        """
        for attr in ("extraClass", "defaultClass"):
            tokens = getattr(self, attr).split()
            if token in tokens:
                tokens.remove(token)
                setattr(self, attr, " ".join(tokens))
                break
        return self.invalidate()

    def buildCombinedClass(self) -> str:
        """
        buildCombinedClass - default class followed by the extra class,
        single spaced. Empty when neither is set
        """
        return " ".join((self.defaultClass + " " + self.extraClass).split())
