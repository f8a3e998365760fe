"""Leaf values that can appear in an element's children."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RawMarkup:
    """A string that is already valid HTML and must not be escaped.

    Wrapping untrusted input in RawMarkup disables all protection for it;
    the caller is responsible for its safety.
    """

    html: str

    def __str__(self) -> str:
        return self.html


@dataclass(frozen=True, slots=True)
class Text:
    """Text content, stored escaped."""

    html: str


@dataclass(frozen=True, slots=True)
class Raw:
    """Raw markup content, emitted verbatim."""

    html: str


def raw(html: str) -> RawMarkup:
    return RawMarkup(html)
