"""Immutable element nodes and child normalization."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Union

from .component import Component
from .constants import ATTRIBUTE_NAME_PATTERN, DOCTYPE, EVENT_HANDLER_PATTERN, TAG_NAME_PATTERN
from .errors import ForbiddenEventHandler, InvalidAttributeName, InvalidTag
from .markup import Raw, RawMarkup, Text
from .serialize import escape, is_void, render_node, stream_node
from .urls import DEFAULT_URL_POLICY, UrlPolicy

logger = logging.getLogger("sublimehtml.node")

ChildItem = Union["ElementNode", Text, Raw]


def validate_tag(tag: Any) -> None:
    if not isinstance(tag, str) or not TAG_NAME_PATTERN.fullmatch(tag):
        raise InvalidTag(tag)


def validate_attribute_name(name: Any) -> None:
    if not isinstance(name, str) or not ATTRIBUTE_NAME_PATTERN.fullmatch(name):
        raise InvalidAttributeName(name)
    if EVENT_HANDLER_PATTERN.match(name):
        raise ForbiddenEventHandler(name)


@dataclass(frozen=True, slots=True, eq=False)
class ElementNode:
    """One HTML element: tag name, attributes and flattened children.

    Nodes never change after construction. `with_children()` and
    `with_attributes()` return new nodes that share the unchanged parts.
    """

    tag: str
    attributes: Mapping[str, Any] = field(default_factory=dict)
    children: tuple[ChildItem, ...] = ()
    _rendered: str | None = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        validate_tag(self.tag)
        attributes = dict(self.attributes)
        for name in attributes:
            validate_attribute_name(name)
        object.__setattr__(self, "attributes", MappingProxyType(attributes))

        children = normalize_children(self.children)
        if children and is_void(self.tag):
            logger.debug("Void element <%s> will not render its %d children", self.tag, len(children))
        object.__setattr__(self, "children", children)

    def with_children(self, *children: Any) -> ElementNode:
        return ElementNode(self.tag, self.attributes, self.children + normalize_children(children))

    def with_attributes(self, attributes: Mapping[str, Any] | None = None, **attrs: Any) -> ElementNode:
        merged = dict(self.attributes)
        if attributes:
            merged.update(attributes)
        merged.update(_keyword_attributes(attrs))
        return ElementNode(self.tag, merged, self.children)

    def render(self, policy: UrlPolicy | None = None) -> str:
        """Render to an HTML string, computed once and then reused.

        A custom `policy` applies to the whole subtree; that result is not
        cached. Like `stream()`, rendering recurses once per level.
        """
        if policy is not None and policy is not DEFAULT_URL_POLICY:
            return render_node(self, policy=policy)
        rendered = self._rendered
        if rendered is None:
            rendered = render_node(self)
            # Two threads may both get here; they store the same string.
            object.__setattr__(self, "_rendered", rendered)
        return rendered

    def stream(self, policy: UrlPolicy = DEFAULT_URL_POLICY) -> Iterator[str]:
        """Lazily yield the same markup as `render()`, in fragments.

        Nothing is cached. Each call starts an independent traversal.
        Traversal recurses once per level, so trees nested deeper than the
        interpreter recursion limit (about 1000 levels) raise RecursionError.
        """
        return stream_node(self, policy=policy)

    def __str__(self) -> str:
        return self.render()


def _keyword_attributes(attrs: Mapping[str, Any]) -> dict[str, Any]:
    # class_="x" -> class="x", for_="y" -> for="y"
    return {(name[:-1] if name.endswith("_") else name): value for name, value in attrs.items()}


def _iter_children(value: Any) -> Iterator[ChildItem]:
    if isinstance(value, (ElementNode, Text, Raw)):
        yield value
    elif isinstance(value, RawMarkup):
        yield Raw(value.html)
    elif isinstance(value, Component):
        yield from _iter_children(value.render())
    elif value is None or value is False:
        return
    elif isinstance(value, Iterable) and not isinstance(value, (str, bytes, bytearray, Mapping)):
        for item in value:
            yield from _iter_children(item)
    else:
        yield Text(escape(value))


def normalize_children(value: Any) -> tuple[ChildItem, ...]:
    """Flatten arbitrary child input into renderable items.

    - nodes and already-normalized items are kept as they are
    - RawMarkup becomes Raw (never escaped)
    - components are replaced by the node they render
    - None and False are dropped
    - lists, tuples, generators and other iterables are flattened recursively
    - anything else is converted with str() and escaped
    """
    return tuple(_iter_children(value))


def create(
    tag: str,
    *args: Any,
    children: Any = None,
    attributes: Mapping[str, Any] | None = None,
    **attrs: Any,
) -> ElementNode:
    """Build an element.

    Positional arguments and `children` are child content, in that order.
    Attributes come from the `attributes` mapping and then from keyword
    arguments, later values winning. A trailing underscore is removed from
    keyword names so Python keywords can be used (`class_`, `for_`).

    Example:
        create("a", "Home", href="/", class_=["nav", "active"])
    """
    items = normalize_children(args)
    if children is not None:
        items += normalize_children(children)

    merged: dict[str, Any] = dict(attributes) if attributes else {}
    merged.update(_keyword_attributes(attrs))
    return ElementNode(tag, merged, items)


def document(node: ElementNode) -> str:
    return DOCTYPE + node.render()


def fragment(*children: Any) -> str:
    """Render children with no wrapping element."""
    return "".join(
        child.html if isinstance(child, (Text, Raw)) else child.render() for child in normalize_children(children)
    )
