"""HTML Builder Constants

This module defines the name sets and patterns used when validating and
serializing element trees. Elements are kept in lists to maintain a
consistent iteration order; the frozen sets are used for lookups.

Usage:
    from sublimehtml.constants import VOID_ELEMENTS, HTML_ELEMENTS

References:
    - https://html.spec.whatwg.org/multipage/syntax.html#void-elements
    - https://html.spec.whatwg.org/multipage/indices.html#attributes-3
"""

import re

# Elements that never have content or an end tag
VOID_ELEMENTS = [
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
]

# Attributes rendered as a bare name when truthy
BOOLEAN_ATTRIBUTES = [
    "disabled",
    "readonly",
    "required",
    "checked",
    "selected",
    "multiple",
    "autofocus",
    "autoplay",
    "controls",
    "loop",
    "muted",
    "open",
    "reversed",
    "novalidate",
    "formnovalidate",
    "async",
    "defer",
    "ismap",
    "itemscope",
    "allowfullscreen",
]

# Attributes whose values are checked for dangerous URL schemes
URL_ATTRIBUTES = [
    "href",
    "src",
    "action",
    "formaction",
]

# Prefixes (lowercase) that are never allowed in a URL attribute
DANGEROUS_URL_SCHEMES = [
    "javascript:",
    "data:text/html",
    "vbscript:",
]

# Tags that get a dedicated constructor in sublimehtml.tags
HTML_ELEMENTS = [
    # Document structure
    "html",
    "head",
    "body",
    "title",
    "meta",
    "link",
    "style",
    "script",
    "base",
    # Content sectioning
    "header",
    "footer",
    "main",
    "section",
    "article",
    "aside",
    "nav",
    "address",
    "hgroup",
    "search",
    # Text content
    "div",
    "span",
    "p",
    "h1",
    "h2",
    "h3",
    "h4",
    "h5",
    "h6",
    "blockquote",
    "pre",
    "menu",
    "figure",
    "figcaption",
    "hr",
    # Inline text semantics
    "a",
    "abbr",
    "b",
    "bdi",
    "bdo",
    "br",
    "cite",
    "code",
    "data",
    "dfn",
    "em",
    "i",
    "kbd",
    "mark",
    "q",
    "rp",
    "rt",
    "ruby",
    "s",
    "samp",
    "small",
    "strong",
    "sub",
    "sup",
    "time",
    "u",
    "var",
    "wbr",
    # Edits
    "del",
    "ins",
    # Lists
    "ul",
    "ol",
    "li",
    "dl",
    "dt",
    "dd",
    # Media and embedded content
    "img",
    "video",
    "audio",
    "source",
    "track",
    "picture",
    "canvas",
    "svg",
    "iframe",
    "embed",
    "object",
    "param",
    "area",
    "map",
    # Forms
    "form",
    "input",
    "button",
    "select",
    "option",
    "optgroup",
    "textarea",
    "label",
    "fieldset",
    "legend",
    "datalist",
    "meter",
    "output",
    "progress",
    # Tables
    "table",
    "thead",
    "tbody",
    "tfoot",
    "tr",
    "th",
    "td",
    "caption",
    "col",
    "colgroup",
    # Interactive
    "details",
    "summary",
    "dialog",
    # Scripting and web components
    "noscript",
    "slot",
    "template",
]

VOID_ELEMENT_SET = frozenset(VOID_ELEMENTS)
BOOLEAN_ATTRIBUTE_SET = frozenset(BOOLEAN_ATTRIBUTES)

# Name patterns are applied with fullmatch(); the event handler pattern with match().
TAG_NAME_PATTERN = re.compile(r"[a-z][a-z0-9]*(?:-[a-z0-9]+)*", re.IGNORECASE)
ATTRIBUTE_NAME_PATTERN = re.compile(r"[a-z][a-z0-9_:-]*", re.IGNORECASE)
EVENT_HANDLER_PATTERN = re.compile(r"on", re.IGNORECASE)
STYLE_PROPERTY_PATTERN = re.compile(r"[a-z-]+", re.IGNORECASE)

DOCTYPE = "<!DOCTYPE html>\n"
