"""Splitting strategies and strategy transformers.

Basic strategies build a :class:`Splitter` from the default one by setting
the delimiter. Transformers take a splitter and return a copy with one
policy changed, so they compose like ordinary functions::

    drop_init_blank(keep_delims_left(on_sublist("app")))
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Callable, Iterable, Tuple

from sequence_splitter.domain.models import (
    DEFAULT_SPLITTER,
    DelimiterDisposition,
    ElementPredicate,
    EndPolicy,
    RunPolicy,
    Splitter,
    Sublist,
)

Transformer = Callable[[Splitter], Splitter]


@dataclass(frozen=True)
class _MemberOf:
    """Predicate testing membership by equality, not substring."""

    elements: Tuple[Any, ...]

    @property
    def __name__(self) -> str:
        return f"one_of{list(self.elements)!r}"

    def __call__(self, element: Any) -> bool:
        return element in self.elements


# Basic strategies


def one_of(elements: Iterable[Any]) -> Splitter:
    """Split on any one of the given elements.

    Example:
        ``split(one_of("xyz"), "aazbxyzcxd") == ['aa', 'b', '', '', 'c', 'd']``
    """
    return replace(DEFAULT_SPLITTER, delimiter=ElementPredicate(_MemberOf(tuple(elements))))


def on_sublist(elements: Iterable[Any]) -> Splitter:
    """Split on an exact subsequence.

    Example:
        ``split(on_sublist("xyz"), "aazbxyzcxd") == ['aazb', 'cxd']``
    """
    return replace(DEFAULT_SPLITTER, delimiter=Sublist(tuple(elements)))


def when_elt(predicate: Callable[[Any], bool]) -> Splitter:
    """Split on any element satisfying ``predicate``.

    Example:
        ``split(when_elt(lambda x: x < 0), [2, 4, -3, 6, -9, 1]) == [[2, 4], [6], [1]]``
    """
    return replace(DEFAULT_SPLITTER, delimiter=ElementPredicate(predicate))


# Transformers


def keep_delims(splitter: Splitter) -> Splitter:
    """Keep delimiters as separate chunks: ``a:b:c`` -> ``a : b : c``."""
    return replace(splitter, delimiter_disposition=DelimiterDisposition.KEEP)


def keep_delims_left(splitter: Splitter) -> Splitter:
    """Keep delimiters by prepending them to the chunk that follows."""
    return replace(splitter, delimiter_disposition=DelimiterDisposition.KEEP_WITH_FOLLOWING)


def keep_delims_right(splitter: Splitter) -> Splitter:
    """Keep delimiters by appending them to the chunk that precedes."""
    return replace(splitter, delimiter_disposition=DelimiterDisposition.KEEP_WITH_PRECEDING)


def condense(splitter: Splitter) -> Splitter:
    """Treat consecutive delimiters as one."""
    return replace(splitter, run_policy=RunPolicy.CONDENSE)


def drop_init_blank(splitter: Splitter) -> Splitter:
    """Skip the blank chunk produced by a leading delimiter."""
    return replace(splitter, leading_blank_policy=EndPolicy.DROP_BLANK)


def drop_final_blank(splitter: Splitter) -> Splitter:
    """Skip the blank chunk produced by a trailing delimiter."""
    return replace(splitter, trailing_blank_policy=EndPolicy.DROP_BLANK)


def compose(*transformers: Transformer) -> Transformer:
    """Compose transformers right to left, like ``f . g . h``."""

    def composed(splitter: Splitter) -> Splitter:
        for transformer in reversed(transformers):
            splitter = transformer(splitter)
        return splitter

    return composed


# Derived combinators


def drop_blanks(splitter: Splitter) -> Splitter:
    """Drop all blank chunks from the output."""
    return compose(drop_init_blank, drop_final_blank, condense)(splitter)


def starts_with(elements: Iterable[Any]) -> Splitter:
    """Chunks that each start with the given subsequence.

    Example:
        ``split(starts_with("app"), "applyappicativeapplaudapproachapple") == ['apply', 'appicative', 'applaud', 'approach', 'apple']``
    """
    return compose(drop_init_blank, keep_delims_left)(on_sublist(elements))


def starts_with_one_of(elements: Iterable[Any]) -> Splitter:
    """Chunks that each start with one of the given elements.

    Example:
        ``split(starts_with_one_of("ABCDEFGHIJKLMNOPQRSTUVWXYZ"), "ACamelCaseIdentifier") == ['A', 'Camel', 'Case', 'Identifier']``
    """
    return compose(drop_init_blank, keep_delims_left)(one_of(elements))


def ends_with(elements: Iterable[Any]) -> Splitter:
    """Chunks that each end with the given subsequence.

    Example:
        ``split(ends_with("ly"), "happilyslowlygnarlylily") == ['happily', 'slowly', 'gnarly', 'lily']``
    """
    return compose(drop_final_blank, keep_delims_right)(on_sublist(elements))


def ends_with_one_of(elements: Iterable[Any]) -> Splitter:
    """Chunks that each end with one of the given elements.

    Example:
        ``split(condense(ends_with_one_of(".,?! ")), "Hi, there!  How are you?") == ['Hi, ', 'there!  ', 'How ', 'are ', 'you?']``
    """
    return compose(drop_final_blank, keep_delims_right)(one_of(elements))
