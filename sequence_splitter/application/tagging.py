"""Conversion of a flat sequence into tagged chunk/delimiter segments."""
from __future__ import annotations

from typing import Any, Iterable, List, Optional, Sequence

from sequence_splitter.application.matcher import match_length
from sequence_splitter.domain.models import Chunk, Delim, Delimiter, Segment

# Types whose slices keep their own type, so chunks come back as str, bytes...
SLICEABLE_TYPES = (str, bytes, list, tuple)


def as_sequence(items: Iterable[Any]) -> Sequence[Any]:
    """Materialize ``items`` into something that can be sliced."""
    if isinstance(items, SLICEABLE_TYPES):
        return items
    return list(items)


def split_internal(delimiter: Delimiter, sequence: Sequence[Any]) -> List[Segment]:
    """Tag runs of ``sequence`` as chunks or delimiters.

    The result is lossless: joining the content of every segment in order
    gives back ``sequence``. A zero-length match still consumes the current
    element into a chunk so that the scan always advances.
    """
    segments: List[Segment] = []
    chunk_start: Optional[int] = None
    position = 0
    total = len(sequence)

    while position < total:
        length = match_length(delimiter, sequence, position)
        if length is not None:
            if chunk_start is not None:
                segments.append(Chunk(sequence[chunk_start:position]))
                chunk_start = None
            segments.append(Delim(sequence[position : position + length]))
            if length:
                position += length
                continue

        if chunk_start is None:
            chunk_start = position
        position += 1

    if chunk_start is not None:
        segments.append(Chunk(sequence[chunk_start:]))
    return segments
