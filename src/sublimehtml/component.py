"""Base class for reusable, renderable view components."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .node import ElementNode


class Component(ABC):
    """A reusable piece of markup.

    Subclasses implement `render()` and return an element. Components can be
    passed anywhere child content is accepted; `str(component)` gives the
    rendered HTML.

        class Card(Component):
            def __init__(self, title):
                self.title = title

            def render(self):
                return section(h2(self.title), class_="card")
    """

    @abstractmethod
    def render(self) -> ElementNode:
        raise NotImplementedError

    def __str__(self) -> str:
        return self.render().render()
