"""
href - hyperlink element with target and confirmation dialog helpers
"""
from __future__ import annotations
from typing import Any, Optional, Mapping

from .element import BaseElement


class Confirmation:
    """
    Inline event handler that asks the user to confirm, eg
        return confirm('Delete this item?');
    The message is not escaped for javascript.
    """

    def __init__(self, confirmationText: str):
        self.confirmationText = confirmationText

    def getConfirmation(self, confirmationText: Optional[str] = None) -> str:
        if confirmationText is None:
            confirmationText = self.confirmationText
        return f"return confirm('{confirmationText}');"

    def __str__(self) -> str:
        return self.getConfirmation()

    def __repr__(self) -> str:
        return f"Confirmation({self.confirmationText!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Confirmation):
            return NotImplemented
        return self.confirmationText == other.confirmationText

    def __hash__(self) -> int:
        return hash(self.confirmationText)


class HrefElement(BaseElement):
    """
    An <a> element
    """

    def __init__(
        self,
        tagName: Optional[str] = "a",
        attributes: Optional[Mapping[str, Any]] = None,
        textContent: Any = None,
    ):
        super().__init__(tagName, attributes, textContent)

    def setLink(self, link: str, query: Optional[Mapping[str, Any]] = None) -> HrefElement:
        """
        setLink - set href from a url and optional query parameters
        """
        self.element.setHref(link, query)
        self.invalidate()
        return self

    def setTarget(self, target: str = "_blank") -> HrefElement:
        self.setAttribute("target", target)
        return self

    def setTargetBlank(self, blank: bool = True) -> HrefElement:
        if blank:
            return self.setTarget("_blank")
        self.element.removeAttribute("target")
        self.invalidate()
        return self

    def setConfirmation(
        self, confirmationText: str, event: str = "onclick"
    ) -> HrefElement:
        """
        setConfirmation - ask for confirmation when event fires (onclick by
        default)
        """
        self.setAttribute(event, Confirmation(confirmationText))
        return self
