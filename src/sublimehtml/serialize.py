"""HTML serialization for element trees."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from .constants import BOOLEAN_ATTRIBUTE_SET, STYLE_PROPERTY_PATTERN, VOID_ELEMENT_SET
from .markup import Raw, Text
from .urls import DEFAULT_URL_POLICY, UrlPolicy, check_url

logger = logging.getLogger("sublimehtml.serialize")


def escape(value: Any) -> str:
    """Escape text for use in element content or a quoted attribute value."""
    return (
        str(value)
        .replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&#039;")
    )


def render_style(styles: Mapping[Any, Any]) -> str:
    """Turn a {property: value} mapping into a `style` attribute value."""
    parts: list[str] = []
    for prop, value in styles.items():
        if value is None or value == "":
            continue
        if not isinstance(prop, str) or not STYLE_PROPERTY_PATTERN.fullmatch(prop):
            logger.debug("Dropping style declaration with invalid property %r", prop)
            continue
        parts.append(f"{prop}:{value}")
    return ";".join(parts)


def render_class(classes: Iterable[Any]) -> str:
    return " ".join(str(name) for name in classes if name is not None and name != "")


def serialize_attributes(attributes: Mapping[str, Any], *, policy: UrlPolicy = DEFAULT_URL_POLICY) -> str:
    """Render attributes in insertion order.

    Returns "" when nothing is emitted, otherwise the attributes joined by
    single spaces with one leading space. Raises DangerousUrlScheme for a
    blocked URL in an attribute covered by `policy`.
    """
    parts: list[str] = []
    for name, value in attributes.items():
        if value is None or value is False:
            continue

        key = name.lower()
        if key in BOOLEAN_ATTRIBUTE_SET:
            if value:
                parts.append(name)
            continue

        if key == "style" and isinstance(value, Mapping):
            value = render_style(value)
            if not value:
                continue

        if key == "class" and isinstance(value, (list, tuple)):
            value = render_class(value)
            if not value:
                continue

        check_url(name, value, policy)

        parts.append(f'{name}="{escape(value)}"')

    if not parts:
        return ""
    return " " + " ".join(parts)


def is_void(tag: str) -> bool:
    return tag.lower() in VOID_ELEMENT_SET


def serialize_start_tag(node: Any, *, policy: UrlPolicy = DEFAULT_URL_POLICY) -> str:
    return f"<{node.tag}{serialize_attributes(node.attributes, policy=policy)}>"


def serialize_end_tag(tag: str) -> str:
    return f"</{tag}>"


def render_node(node: Any, *, policy: UrlPolicy = DEFAULT_URL_POLICY) -> str:
    """Render `node` to a string.

    With the default policy child elements are rendered through their own
    `render()`, so their memoized output is reused. Any other policy renders
    the whole subtree again.
    """
    open_tag = serialize_start_tag(node, policy=policy)
    if is_void(node.tag):
        return open_tag

    parts: list[str] = [open_tag]
    for child in node.children:
        if isinstance(child, (Text, Raw)):
            parts.append(child.html)
        elif policy is DEFAULT_URL_POLICY:
            parts.append(child.render())
        else:
            parts.append(render_node(child, policy=policy))
    parts.append(serialize_end_tag(node.tag))
    return "".join(parts)


def stream_node(node: Any, *, policy: UrlPolicy = DEFAULT_URL_POLICY) -> Iterator[str]:
    """Yield the markup of `node` in fragments, without touching any cache.

    A node's attributes are rendered before its first fragment is yielded.
    """
    yield serialize_start_tag(node, policy=policy)
    if is_void(node.tag):
        return

    for child in node.children:
        if isinstance(child, (Text, Raw)):
            yield child.html
        else:
            yield from stream_node(child, policy=policy)
    yield serialize_end_tag(node.tag)
