"""URL scheme policy for security-sensitive attributes.

Attributes listed in a policy (by default `href`, `src`, `action` and
`formaction`) are checked when attributes are rendered. A value whose
trimmed, lowercased form starts with a blocked scheme raises
`DangerousUrlScheme` and no markup is produced for the element.

This is a blocklist, not a sanitizer: anything that does not match a
blocked prefix is emitted (escaped) as-is.
"""

from __future__ import annotations

from collections.abc import Collection
from dataclasses import dataclass, field
from typing import Any

from .constants import DANGEROUS_URL_SCHEMES, URL_ATTRIBUTES
from .errors import DangerousUrlScheme

# Characters stripped from both ends before the scheme comparison.
_URL_TRIM_CHARS = " \t\n\r\x00\x0b\x0c"


@dataclass(frozen=True, slots=True)
class UrlPolicy:
    """Which attributes carry URLs, and which schemes they may not use.

    - `url_attributes`: attribute names (lowercase) that are checked.
    - `blocked_schemes`: lowercase prefixes, e.g. "javascript:". Prefixes may
      include more than the scheme ("data:text/html").
    """

    url_attributes: Collection[str] = field(default_factory=lambda: frozenset(URL_ATTRIBUTES))
    blocked_schemes: Collection[str] = field(default_factory=lambda: tuple(DANGEROUS_URL_SCHEMES))

    def __post_init__(self) -> None:
        # Accept lists/sets from user code, normalize for internal use.
        if not isinstance(self.url_attributes, frozenset) or any(
            name != name.lower() for name in self.url_attributes
        ):
            object.__setattr__(self, "url_attributes", frozenset(str(name).lower() for name in self.url_attributes))
        # Kept ordered so the reported scheme is deterministic.
        if not isinstance(self.blocked_schemes, tuple) or any(
            scheme != scheme.lower() for scheme in self.blocked_schemes
        ):
            object.__setattr__(self, "blocked_schemes", tuple(str(scheme).lower() for scheme in self.blocked_schemes))

    def applies_to(self, name: str) -> bool:
        return name.lower() in self.url_attributes

    def blocked_scheme(self, url: str) -> str | None:
        """Return the blocked prefix `url` starts with, or None."""
        normalized = url.strip(_URL_TRIM_CHARS).lower()
        for scheme in self.blocked_schemes:
            if normalized.startswith(scheme):
                return scheme
        return None


DEFAULT_URL_POLICY: UrlPolicy = UrlPolicy()


def is_dangerous_url(url: Any, policy: UrlPolicy = DEFAULT_URL_POLICY) -> bool:
    return policy.blocked_scheme(str(url)) is not None


def check_url(name: str, value: Any, policy: UrlPolicy = DEFAULT_URL_POLICY) -> None:
    """Raise `DangerousUrlScheme` if attribute `name` holds a blocked URL.

    Attributes the policy does not cover are ignored.
    """
    if not policy.applies_to(name):
        return
    url = str(value)
    scheme = policy.blocked_scheme(url)
    if scheme is not None:
        raise DangerousUrlScheme(name, url, scheme)
