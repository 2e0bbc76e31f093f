"""Single forward pass that splits the buffer and fills the token graph."""

import logging
from collections.abc import Iterator

import regex as re

from .config import DELIMITERS
from .interner import Interner
from .successors import SuccessorTable
from .types import Buffer, Span

log = logging.getLogger(__name__)

# maximal runs of anything that is not a delimiter
_TOKEN_PAT = re.compile(
    b"[^" + b"".join(b"\\x%02x" % c for c in DELIMITERS) + b"]+"
)


def iter_spans(buffer: Buffer) -> Iterator[Span]:
    """Yield ``(start, stop)`` of every non-empty token from left to right."""
    for m in _TOKEN_PAT.finditer(buffer):
        yield m.span()


def fill(interner: Interner, successors: SuccessorTable, buffer: Buffer) -> int:
    """
    Intern every token of ``buffer`` and record each adjacent pair.

    :param interner: Interner borrowing the same ``buffer``.
    :param successors: Table that receives one node per new token id.
    :param buffer: Sanitized source text.
    :return: Number of tokens consumed (not distinct tokens).
    """
    prev_id = None
    n_tokens = 0
    for start, stop in iter_spans(buffer):
        curr_id = interner.intern(start, stop)
        # new ids are always the next dense id, so the table stays aligned
        if curr_id == len(successors):
            successors.add_node()
        if prev_id is not None:
            successors.record(prev_id, curr_id)
        prev_id = curr_id
        n_tokens += 1

    log.debug(f"tokenized {n_tokens} tokens ({len(interner)} distinct)")
    return n_tokens
