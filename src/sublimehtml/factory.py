"""Render entry point and the tag factory handed to view callbacks."""

from __future__ import annotations

import inspect
from collections.abc import Callable
from typing import Any

from .markup import RawMarkup, raw
from .node import ElementNode, create, document, fragment
from .tags import TAG_FUNCTIONS, TagFunction

_POSITIONAL_KINDS = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
    inspect.Parameter.VAR_POSITIONAL,
)


class TagFactory:
    """Access to every tag constructor through one object.

    `tags.div(...)` and `tags.div_(...)` both build a <div>; the name is
    lowercased and one trailing underscore is dropped. Only the tags in
    `sublimehtml.tags` are reachable this way; use `tag()` for anything else
    (custom elements, for instance).
    """

    __slots__ = ()

    def __getattr__(self, name: str) -> TagFunction:
        tag = name.lower()
        if tag.endswith("_"):
            tag = tag[:-1]
        try:
            return TAG_FUNCTIONS[tag]
        except KeyError:
            msg = f"{type(self).__name__!r} object has no tag constructor {name!r}"
            raise AttributeError(msg) from None

    def tag(self, name: str, *args: Any, **kwargs: Any) -> ElementNode:
        return create(name, *args, **kwargs)

    def raw(self, html: str) -> RawMarkup:
        return raw(html)

    def document(self, node: ElementNode) -> str:
        return document(node)

    def fragment(self, *children: Any) -> str:
        return fragment(*children)


def accepts_factory(view: Callable[..., Any]) -> bool:
    """True if `view` can be called with one positional argument."""
    try:
        signature = inspect.signature(view)
    except (TypeError, ValueError):
        # Some builtins and C callables have no introspectable signature.
        return False
    return any(param.kind in _POSITIONAL_KINDS for param in signature.parameters.values())


def sublime(view: Callable[..., Any]) -> str:
    """Call `view` and return its output as an HTML string.

    If `view` takes a positional parameter it receives a `TagFactory`.

    - an ElementNode is rendered
    - RawMarkup is unwrapped
    - None gives ""
    - anything else is converted with str(), without escaping
    """
    result = view(TagFactory()) if accepts_factory(view) else view()

    if isinstance(result, ElementNode):
        return result.render()
    if isinstance(result, RawMarkup):
        return result.html
    if result is None:
        return ""
    return str(result)
