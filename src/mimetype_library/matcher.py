"""Builds predicates that tell whether a MIME type is allowed by an encodings spec

An encodings spec is a comma-separated list of patterns, e.g.

    "application/json"
    "image/*"
    "application/json, text/*"
    "*/*"

Building AND running a matcher are both on the request's hot path. All matching
state is bound once when the matcher is built (bound methods or small callables
with __slots__) so that calling it does not allocate anything new.

Matchers are immutable and can be shared across threads/requests.
"""

import logging
from collections.abc import Callable, Iterable
from functools import partial
from operator import eq
from typing import TypeAlias

from ._strings import is_mime_like, is_wildcard_encoding, strip_last_char
from .mimetype_constants import ENCODINGS_SEPARATOR, MIMETYPE_ANY

_logger = logging.getLogger(__name__)


MimeMatcher: TypeAlias = Callable[[str], bool]


def _any_encoding_matcher(mime: str) -> bool:  # noqa: ARG001
    return True


def _no_encoding_matcher(mime: str) -> bool:  # noqa: ARG001
    return False


class _WildcardEncodingMatcher:
    __slots__ = ("_prefixes",)

    def __init__(self, prefixes: Iterable[str]) -> None:
        # NOTE: str.startswith accepts a tuple and tries every prefix
        self._prefixes: tuple[str, ...] = tuple(dict.fromkeys(prefixes))

    def __call__(self, mime: str) -> bool:
        return mime.startswith(self._prefixes)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(prefixes={self._prefixes!r})"


class _AnyOfEncodingMatchers:
    __slots__ = ("_exact", "_wildcard")

    def __init__(self, exact: MimeMatcher, wildcard: MimeMatcher) -> None:
        self._exact = exact
        self._wildcard = wildcard

    def __call__(self, mime: str) -> bool:
        return self._exact(mime) or self._wildcard(mime)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(exact={self._exact!r}, "
            f"wildcard={self._wildcard!r})"
        )


def _build_exact_encoding_matcher(encodings: list[str]) -> MimeMatcher | None:
    mimes = frozenset(filter(is_mime_like, encodings))
    if not mimes:
        return None
    return mimes.__contains__


def _build_wildcard_encoding_matcher(encodings: list[str]) -> MimeMatcher | None:
    prefixes = [strip_last_char(e) for e in encodings if is_wildcard_encoding(e)]
    if not prefixes:
        return None
    return _WildcardEncodingMatcher(prefixes)


def build_mime_matcher(allowed_encodings: str) -> MimeMatcher:
    """Creates a predicate `mime -> bool` for a spec of allowed encodings

    - Only the spec tokens are trimmed. The candidate mime passed to the matcher
      is compared as-is (case-sensitive, no trimming)
    - '*/*' anywhere in the spec accepts everything
    - 'type/*' accepts any mime starting with 'type/'
    - Malformed tokens (e.g. '*/html', 'json') are ignored. A spec without
      valid tokens produces a matcher that rejects everything

    Never raises. Build it once per spec and reuse it.
    """
    if MIMETYPE_ANY in allowed_encodings:
        _logger.debug("%r accepts any encoding", allowed_encodings)
        return _any_encoding_matcher

    # most common case: a single concrete mime type
    if ENCODINGS_SEPARATOR not in allowed_encodings and is_mime_like(
        allowed_encodings
    ):
        return partial(eq, allowed_encodings.strip())

    encodings = [e.strip() for e in allowed_encodings.split(ENCODINGS_SEPARATOR)]
    if not encodings:
        return _no_encoding_matcher

    exact_matcher = _build_exact_encoding_matcher(encodings)
    wildcard_matcher = _build_wildcard_encoding_matcher(encodings)

    if exact_matcher and wildcard_matcher:
        return _AnyOfEncodingMatchers(exact_matcher, wildcard_matcher)

    matcher = wildcard_matcher or exact_matcher
    if matcher is None:
        _logger.debug(
            "%r has no valid encodings: all mime types will be rejected",
            allowed_encodings,
        )
        return _no_encoding_matcher
    return matcher
