"""Post-processing stages applied to a tagged segment list.

Each stage is a pure function of one policy and the segment list. The
stages run in a fixed order; see :func:`post_process`.
"""
from __future__ import annotations

from typing import Any, List, Sequence

from sequence_splitter.domain.models import (
    Chunk,
    Delim,
    DelimiterDisposition,
    EndPolicy,
    RunPolicy,
    Segment,
    Splitter,
    from_segment,
    is_blank_chunk,
    is_delim,
)


def condense_delims(policy: RunPolicy, segments: List[Segment]) -> List[Segment]:
    """Collapse each run of consecutive delimiters into a single delimiter."""
    if policy is RunPolicy.KEEP_BLANK_FIELDS:
        return segments

    condensed: List[Segment] = []
    for segment in segments:
        if is_delim(segment) and condensed and is_delim(condensed[-1]):
            condensed[-1] = Delim(condensed[-1].content + segment.content)
        else:
            condensed.append(segment)
    return condensed


def insert_blanks(segments: List[Segment], empty: Sequence[Any]) -> List[Segment]:
    """Make sure every delimiter has a chunk on both sides.

    A blank chunk goes between two adjacent delimiters, before a leading
    delimiter and after a trailing one. An empty list becomes a single
    blank chunk.
    """
    if not segments:
        return [Chunk(empty)]

    result: List[Segment] = []
    if is_delim(segments[0]):
        result.append(Chunk(empty))
    for index, segment in enumerate(segments):
        result.append(segment)
        if is_delim(segment):
            following = segments[index + 1] if index + 1 < len(segments) else None
            if following is None or is_delim(following):
                result.append(Chunk(empty))
    return result


def drop_delims(disposition: DelimiterDisposition, segments: List[Segment]) -> List[Segment]:
    if disposition is not DelimiterDisposition.DROP:
        return segments
    return [segment for segment in segments if not is_delim(segment)]


def merge_delims(disposition: DelimiterDisposition, segments: List[Segment]) -> List[Segment]:
    """Glue delimiters onto a neighbouring chunk."""
    if disposition is DelimiterDisposition.KEEP_WITH_FOLLOWING:
        return _merge_with_following(segments)
    if disposition is DelimiterDisposition.KEEP_WITH_PRECEDING:
        return _merge_with_preceding(segments)
    return segments


def _merge_with_following(segments: List[Segment]) -> List[Segment]:
    merged: List[Segment] = []
    index = 0
    while index < len(segments):
        segment = segments[index]
        following = segments[index + 1] if index + 1 < len(segments) else None
        if is_delim(segment) and isinstance(following, Chunk):
            merged.append(Chunk(segment.content + following.content))
            index += 2
        else:
            merged.append(segment)
            index += 1
    return merged


def _merge_with_preceding(segments: List[Segment]) -> List[Segment]:
    merged: List[Segment] = []
    index = 0
    while index < len(segments):
        segment = segments[index]
        following = segments[index + 1] if index + 1 < len(segments) else None
        if isinstance(segment, Chunk) and isinstance(following, Delim):
            merged.append(Chunk(segment.content + following.content))
            index += 2
        else:
            merged.append(segment)
            index += 1
    return merged


def drop_initial(policy: EndPolicy, segments: List[Segment]) -> List[Segment]:
    if policy is EndPolicy.DROP_BLANK and segments and is_blank_chunk(segments[0]):
        return segments[1:]
    return segments


def drop_final(policy: EndPolicy, segments: List[Segment]) -> List[Segment]:
    if policy is EndPolicy.DROP_BLANK and segments and is_blank_chunk(segments[-1]):
        return segments[:-1]
    return segments


def post_process(splitter: Splitter, segments: List[Segment], empty: Sequence[Any]) -> List[Sequence[Any]]:
    """Apply every policy of ``splitter`` and untag the result.

    Args:
        splitter: Strategy whose policies are applied
        segments: Lossless tagged list produced by the tagging transform
        empty: Empty value of the input's type, used for blank chunks

    Returns:
        The output chunks in order
    """
    segments = condense_delims(splitter.run_policy, segments)
    segments = insert_blanks(segments, empty)
    segments = drop_delims(splitter.delimiter_disposition, segments)
    segments = merge_delims(splitter.delimiter_disposition, segments)
    segments = drop_initial(splitter.leading_blank_policy, segments)
    segments = drop_final(splitter.trailing_blank_policy, segments)
    return [from_segment(segment) for segment in segments]
