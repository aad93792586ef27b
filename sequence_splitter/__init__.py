"""Sequence splitting with composable delimiter and blank-chunk policies.

Build a :class:`Splitter` with one of the basic strategies, adjust it with
transformers, and pass it to :func:`split`::

    split(condense(one_of("xyz")), "aazbxyzcxd")  # ['aa', 'b', 'c', 'd']
"""

from sequence_splitter.domain.models import (
    DEFAULT_SPLITTER,
    Chunk,
    Delim,
    Delimiter,
    DelimiterDisposition,
    ElementPredicate,
    EndPolicy,
    RunPolicy,
    Splitter,
    Sublist,
)
from sequence_splitter.application.matcher import match_delimiter
from sequence_splitter.application.tagging import split_internal
from sequence_splitter.application.strategies import (
    compose,
    condense,
    drop_blanks,
    drop_final_blank,
    drop_init_blank,
    ends_with,
    ends_with_one_of,
    keep_delims,
    keep_delims_left,
    keep_delims_right,
    on_sublist,
    one_of,
    starts_with,
    starts_with_one_of,
    when_elt,
)
from sequence_splitter.application.splitting import (
    chunk_by_powers_of_two,
    chunk_by_sizes,
    chunk_every,
    end_by,
    end_by_one_of,
    sep_by,
    sep_by_one_of,
    split,
    split_on,
    split_one_of,
    split_when,
    unintercalate,
)

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_SPLITTER",
    "Chunk",
    "Delim",
    "Delimiter",
    "DelimiterDisposition",
    "ElementPredicate",
    "EndPolicy",
    "RunPolicy",
    "Splitter",
    "Sublist",
    "match_delimiter",
    "split_internal",
    "compose",
    "condense",
    "drop_blanks",
    "drop_final_blank",
    "drop_init_blank",
    "ends_with",
    "ends_with_one_of",
    "keep_delims",
    "keep_delims_left",
    "keep_delims_right",
    "on_sublist",
    "one_of",
    "starts_with",
    "starts_with_one_of",
    "when_elt",
    "chunk_by_powers_of_two",
    "chunk_by_sizes",
    "chunk_every",
    "end_by",
    "end_by_one_of",
    "sep_by",
    "sep_by_one_of",
    "split",
    "split_on",
    "split_one_of",
    "split_when",
    "unintercalate",
]
