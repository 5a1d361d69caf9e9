import pytest

from elementbuilder import BaseElement


class CountingElement(BaseElement):
    """BaseElement that counts render calls"""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.renders = 0

    def beforeRender(self) -> None:
        self.renders += 1


@pytest.fixture
def counting():
    return CountingElement


@pytest.fixture
def listing():
    """a <ul> with two <li> children named first and second"""
    ul = BaseElement("ul")
    ul.addChild("first", BaseElement("li", textContent="one"))
    ul.addChild("second", BaseElement("li", textContent="two"))
    return ul
