"""Domain models for the sequence splitter.

A split is described by a :class:`Splitter`: one delimiter plus four
independent policies. Splitting first tags the input as a list of
:class:`Chunk` and :class:`Delim` segments, then rewrites that list
according to the policies.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Sequence, Tuple, Union


class DelimiterDisposition(str, Enum):
    """What happens to matched delimiter text."""

    DROP = "drop"
    KEEP = "keep"
    # Prepend each delimiter to the chunk after it.
    KEEP_WITH_FOLLOWING = "keep_with_following"
    # Append each delimiter to the chunk before it.
    KEEP_WITH_PRECEDING = "keep_with_preceding"


class RunPolicy(str, Enum):
    """How consecutive delimiters are treated."""

    CONDENSE = "condense"
    KEEP_BLANK_FIELDS = "keep_blank_fields"


class EndPolicy(str, Enum):
    """Whether a blank chunk at either end of the output survives."""

    DROP_BLANK = "drop_blank"
    KEEP_BLANK = "keep_blank"


@dataclass(frozen=True)
class ElementPredicate:
    """Delimiter matching any single element for which ``predicate`` holds."""

    predicate: Callable[[Any], bool]


@dataclass(frozen=True)
class Sublist:
    """Delimiter matching an exact, contiguous run of elements."""

    elements: Tuple[Any, ...]


Delimiter = Union[ElementPredicate, Sublist]


def _never(_element: Any) -> bool:
    return False


@dataclass(frozen=True)
class Splitter:
    """A complete splitting strategy."""

    delimiter: Delimiter
    delimiter_disposition: DelimiterDisposition = DelimiterDisposition.DROP
    run_policy: RunPolicy = RunPolicy.KEEP_BLANK_FIELDS
    leading_blank_policy: EndPolicy = EndPolicy.KEEP_BLANK
    trailing_blank_policy: EndPolicy = EndPolicy.KEEP_BLANK

    def to_dict(self) -> dict:
        """Describe the policies (the delimiter itself may be an opaque callable)."""
        return {
            "delimiter": describe_delimiter(self.delimiter),
            "delimiter_disposition": self.delimiter_disposition.value,
            "run_policy": self.run_policy.value,
            "leading_blank_policy": self.leading_blank_policy.value,
            "trailing_blank_policy": self.trailing_blank_policy.value,
        }


# Overriding only the delimiter of this splitter keeps every blank field and
# both end blanks; only the delimiters themselves are dropped.
DEFAULT_SPLITTER = Splitter(delimiter=ElementPredicate(_never))


@dataclass(frozen=True)
class Chunk:
    """A run of input elements that did not match the delimiter."""

    content: Sequence[Any]


@dataclass(frozen=True)
class Delim:
    """A run of input elements that matched the delimiter."""

    content: Sequence[Any]


Segment = Union[Chunk, Delim]


def is_delim(segment: Segment) -> bool:
    return isinstance(segment, Delim)


def is_blank_chunk(segment: Segment) -> bool:
    return isinstance(segment, Chunk) and len(segment.content) == 0


def from_segment(segment: Segment) -> Sequence[Any]:
    """Drop the tag, returning the wrapped elements."""
    return segment.content


def describe_delimiter(delimiter: Delimiter) -> str:
    if isinstance(delimiter, Sublist):
        return f"sublist{list(delimiter.elements)!r}"
    name = getattr(delimiter.predicate, "__name__", type(delimiter.predicate).__name__)
    return f"predicate:{name}"
