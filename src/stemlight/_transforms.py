"""Rendering of match records into strings: literal or callback markers."""

from __future__ import annotations

import html
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, TypeVar

from ._errors import TransformError
from ._types import MatchInfo

T = TypeVar("T")

Transform = Callable[[MatchInfo], str]
Attributes = Mapping[str, str | None]


def as_transform(
    value: str | Callable[[T], str], name: str = "transform"
) -> Callable[[T], str]:
    """Treat a literal string as a function returning that string.

    Raises:
        TransformError: If ``value`` is neither a string nor callable.
    """
    if isinstance(value, str):
        return lambda _arg: value
    if callable(value):
        return value
    raise TransformError(
        f"{name} must be a string or a callable, got {type(value).__name__}"
    )


def _identity(text: str) -> str:
    return text


@dataclass(slots=True, frozen=True)
class Transforms:
    """Start/end markers and a content filter applied by ``Matcher.wrap``.

    Args:
        start_tag: Literal opening marker, or ``MatchInfo -> str``.
        end_tag: Literal closing marker, or ``MatchInfo -> str``.
        content: ``str -> str`` applied to every chunk of text, match or
            not. Defaults to identity.
    """

    start_tag: Transform = ""
    end_tag: Transform = ""
    content: Callable[[str], str] | None = None

    def __post_init__(self) -> None:
        # Literal markers become constant functions; frozen, so bypass
        # __setattr__.
        object.__setattr__(
            self, "start_tag", as_transform(self.start_tag, "start_tag"),
        )
        object.__setattr__(
            self, "end_tag", as_transform(self.end_tag, "end_tag"),
        )
        object.__setattr__(
            self, "content",
            _identity if self.content is None
            else as_transform(self.content, "content"),
        )

    @classmethod
    def coerce(cls, value: Any) -> "Transforms":
        """Accept a Transforms instance or a mapping of its arguments."""
        if isinstance(value, cls):
            return value
        if isinstance(value, Mapping):
            unknown = set(value) - {"start_tag", "end_tag", "content"}
            if unknown:
                raise TransformError(
                    f"unknown transform keys: {', '.join(sorted(unknown))}"
                )
            return cls(**value)
        raise TransformError(
            f"transforms must be Transforms or a mapping, "
            f"got {type(value).__name__}"
        )


def html_transforms(
    tag_name: str | Transform,
    attributes: Attributes | Callable[[MatchInfo], Attributes] | None = None,
) -> Transforms:
    """HTML-escaping transforms wrapping each match in an element.

    Attributes with a ``None`` value are left out.
    """
    tag = as_transform(tag_name, "tag_name")
    if attributes is not None and not (
        callable(attributes) or isinstance(attributes, Mapping)
    ):
        raise TransformError(
            f"attributes must be a mapping or a callable, "
            f"got {type(attributes).__name__}"
        )

    def start_tag(m: MatchInfo) -> str:
        if callable(attributes):
            attrs = attributes(m)
        else:
            attrs = attributes or {}
        rendered = "".join(
            f' {html.escape(k)}="{html.escape(v)}"'
            for k, v in attrs.items() if v is not None
        )
        return f"<{html.escape(tag(m))}{rendered}>"

    def end_tag(m: MatchInfo) -> str:
        return f"</{html.escape(tag(m))}>"

    return Transforms(start_tag, end_tag, content=html.escape)


def wrappers_to_transforms(
    wrapper: Callable[[str], str],
    repeat_wrapper: Callable[[str], str] | None = None,
) -> Transforms:
    """Derive markers from functions that wrap a string.

    ``wrapper`` marks the first occurrence of each keyword and
    ``repeat_wrapper`` (default: ``wrapper``) every later one.
    """
    first = wrapper("\0").split("\0", 1)
    repeat = repeat_wrapper("\0").split("\0", 1) if repeat_wrapper else first
    if len(first) != 2 or len(repeat) != 2:
        raise TransformError("wrapper must include its argument in the result")

    def start_tag(m: MatchInfo) -> str:
        return repeat[0] if m.count else first[0]

    def end_tag(m: MatchInfo) -> str:
        return repeat[1] if m.count else first[1]

    return Transforms(start_tag, end_tag)
