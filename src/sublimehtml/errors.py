"""Exceptions raised while building and rendering element trees.

Keep this module small and dependency-free: it is imported by every other
module in the package and by tests.
"""


class SublimeError(ValueError):
    """Base exception for all validation failures.

    `value` holds the offending tag name, attribute name or URL.
    """

    def __init__(self, message, value=None):
        super().__init__(message)
        self.value = value


class InvalidTag(SublimeError):
    """Raised when a tag name is not a valid HTML element name."""

    def __init__(self, tag):
        super().__init__(f"Invalid HTML tag: {tag!r}", tag)


class InvalidAttributeName(SublimeError):
    """Raised when an attribute name is not a valid HTML attribute name."""

    def __init__(self, name):
        super().__init__(f"Invalid attribute name: {name!r}", name)


class ForbiddenEventHandler(SublimeError):
    """Raised for inline event handler attributes such as `onclick`."""

    def __init__(self, name):
        super().__init__(
            f"Inline event handlers are not allowed, use addEventListener instead: {name!r}",
            name,
        )


class DangerousUrlScheme(SublimeError):
    """Raised when a URL attribute starts with a blocked scheme."""

    def __init__(self, attribute, url, scheme):
        super().__init__(f"Dangerous protocol {scheme!r} in {attribute} URL: {url!r}", url)
        self.attribute = attribute
        self.scheme = scheme
