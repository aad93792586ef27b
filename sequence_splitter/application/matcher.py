"""Delimiter matching at a position of a sequence."""
from __future__ import annotations

from typing import Any, Optional, Sequence, Tuple

from sequence_splitter.domain.models import Delimiter, ElementPredicate, Sublist


def match_length(delimiter: Delimiter, sequence: Sequence[Any], position: int = 0) -> Optional[int]:
    """Return how many elements the delimiter matches at ``position``.

    Args:
        delimiter: Delimiter to try
        sequence: Sequence being scanned
        position: Index where the match must start

    Returns:
        Number of matched elements, or None when there is no match. An empty
        sublist matches zero elements everywhere, including at the end.
    """
    if isinstance(delimiter, ElementPredicate):
        if position < len(sequence) and delimiter.predicate(sequence[position]):
            return 1
        return None

    if isinstance(delimiter, Sublist):
        size = len(delimiter.elements)
        if position + size > len(sequence):
            return None
        for offset, expected in enumerate(delimiter.elements):
            if sequence[position + offset] != expected:
                return None
        return size

    raise TypeError(f"Unsupported delimiter: {delimiter!r}")


def match_delimiter(
    delimiter: Delimiter, sequence: Sequence[Any]
) -> Optional[Tuple[Sequence[Any], Sequence[Any]]]:
    """Try to match a delimiter at the start of ``sequence``.

    Returns:
        ``(matched, remainder)`` slices of ``sequence``, or None
    """
    length = match_length(delimiter, sequence)
    if length is None:
        return None
    return sequence[:length], sequence[length:]
