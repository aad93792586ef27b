"""Entry points for splitting and chunking sequences."""
from __future__ import annotations

import logging
from itertools import count
from typing import Any, Callable, Iterable, List, Sequence

from sequence_splitter.application.pipeline import post_process
from sequence_splitter.application.strategies import (
    drop_final_blank,
    on_sublist,
    one_of,
    when_elt,
)
from sequence_splitter.application.tagging import as_sequence, split_internal
from sequence_splitter.domain.models import Splitter

logger = logging.getLogger(__name__)


def split(splitter: Splitter, items: Iterable[Any]) -> List[Sequence[Any]]:
    """Split ``items`` according to ``splitter``.

    Chunks have the type of the input when it is a str, bytes, list or
    tuple; any other iterable is read into a list first.

    Args:
        splitter: Splitting strategy
        items: Finite sequence to split

    Returns:
        List of chunks
    """
    sequence = as_sequence(items)
    segments = split_internal(splitter.delimiter, sequence)
    chunks = post_process(splitter, segments, sequence[:0])
    logger.debug(
        "Split %d elements into %d segments and %d chunks",
        len(sequence),
        len(segments),
        len(chunks),
    )
    return chunks


def split_one_of(elements: Iterable[Any], items: Iterable[Any]) -> List[Sequence[Any]]:
    """Split on any of the given elements."""
    return split(one_of(elements), items)


def split_on(elements: Iterable[Any], items: Iterable[Any]) -> List[Sequence[Any]]:
    """Split on the given subsequence: ``split_on("..", "a..b...c")`` gives ``["a", "b", ".c"]``."""
    return split(on_sublist(elements), items)


def split_when(predicate: Callable[[Any], bool], items: Iterable[Any]) -> List[Sequence[Any]]:
    return split(when_elt(predicate), items)


sep_by = split_on
sep_by_one_of = split_one_of


def end_by(elements: Iterable[Any], items: Iterable[Any]) -> List[Sequence[Any]]:
    """Split into chunks terminated by the given subsequence."""
    return split(drop_final_blank(on_sublist(elements)), items)


def end_by_one_of(elements: Iterable[Any], items: Iterable[Any]) -> List[Sequence[Any]]:
    """Split into chunks terminated by one of the given elements."""
    return split(drop_final_blank(one_of(elements)), items)


# Inverse of joining with a separator that also terminates the last item.
unintercalate = end_by


def chunk_every(size: int, items: Iterable[Any]) -> List[Sequence[Any]]:
    """Group every ``size`` consecutive elements; the last group may be shorter.

    Raises:
        ValueError: If size is not positive
    """
    if size <= 0:
        raise ValueError("size must be positive")
    sequence = as_sequence(items)
    return [sequence[start : start + size] for start in range(0, len(sequence), size)]


def chunk_by_sizes(sizes: Iterable[int], items: Iterable[Any]) -> List[Sequence[Any]]:
    """Cut consecutive chunks of the requested sizes.

    Stops as soon as the sizes or the input run out. A size larger than the
    remaining input is not realized and the leftover input is dropped.
    ``sizes`` may be infinite.

    Raises:
        ValueError: If a negative size is reached
    """
    sequence = as_sequence(items)
    chunks: List[Sequence[Any]] = []
    position = 0
    for size in sizes:
        if size < 0:
            raise ValueError("sizes must be non-negative")
        if position >= len(sequence) or position + size > len(sequence):
            break
        chunks.append(sequence[position : position + size])
        position += size
    return chunks


def chunk_by_powers_of_two(items: Iterable[Any]) -> List[Sequence[Any]]:
    """Chunks of size 1, 2, 4, 8, ..."""
    return chunk_by_sizes((2**exponent for exponent in count()), items)
