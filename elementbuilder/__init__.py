"""
elementbuilder - build html elements with a fluent interface
"""
from .markup import VOID_ELEMENTS, Markup, Tag, escape
from .element import BaseElement, ChildNotFoundError
from .href import Confirmation, HrefElement

__all__ = [
    "VOID_ELEMENTS",
    "Markup",
    "Tag",
    "escape",
    "BaseElement",
    "ChildNotFoundError",
    "Confirmation",
    "HrefElement",
]
