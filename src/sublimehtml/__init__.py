from .component import Component
from .errors import DangerousUrlScheme, ForbiddenEventHandler, InvalidAttributeName, InvalidTag, SublimeError
from .factory import TagFactory, accepts_factory, sublime
from .markup import Raw, RawMarkup, Text, raw
from .node import ElementNode, create, document, fragment, normalize_children
from .serialize import escape, serialize_attributes
from .urls import DEFAULT_URL_POLICY, UrlPolicy, check_url, is_dangerous_url

__all__ = [
    "DEFAULT_URL_POLICY",
    "Component",
    "DangerousUrlScheme",
    "ElementNode",
    "ForbiddenEventHandler",
    "InvalidAttributeName",
    "InvalidTag",
    "Raw",
    "RawMarkup",
    "SublimeError",
    "TagFactory",
    "Text",
    "UrlPolicy",
    "accepts_factory",
    "check_url",
    "create",
    "document",
    "escape",
    "fragment",
    "is_dangerous_url",
    "normalize_children",
    "raw",
    "serialize_attributes",
    "sublime",
]
