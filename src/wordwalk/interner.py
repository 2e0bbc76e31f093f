"""
Token interning over a borrowed byte buffer.

Tokens are never copied: each distinct token is stored as the ``(start, stop)``
span of its first occurrence and read back as a read-only ``memoryview`` slice.
Lookups by text go through a fixed-size open addressing hash index with
linear probing.
"""

import logging
from collections.abc import Iterator

from .config import DEFAULT_HASH_SIZE
from .errors import InternerCapacityError, ModelFrozenError
from .types import Buffer, Span, TokenId

log = logging.getLogger(__name__)

_EMPTY = -1
_HASH_SEED = 5381
_HASH_MASK = (1 << 64) - 1


def hash_token(data: Buffer) -> int:
    """djb2 (xor variant) over the raw bytes, truncated to 64 bits."""
    h = _HASH_SEED
    for c in data:
        h = (((h << 5) + h) ^ c) & _HASH_MASK
    return h


class Interner:
    """
    Deduplicating table that maps token bytes to dense ids.

    Ids are assigned in first-seen order starting at 0. The dense id -> span
    list grows as needed, but the hash index has a fixed number of slots
    (``capacity``) and is never rehashed: once every slot holds an id, the
    next new token raises :class:`InternerCapacityError`. Size ``capacity``
    well above the expected number of distinct tokens.
    """

    def __init__(self, buffer: Buffer, capacity: int = DEFAULT_HASH_SIZE) -> None:
        """Borrow ``buffer`` read-only and allocate an empty hash index."""
        if capacity < 1:
            raise ValueError(f"capacity must be positive (got {capacity})")
        self._buf = memoryview(buffer).cast("B").toreadonly()
        self.capacity = capacity
        # token id -> span of its first occurrence in the buffer
        self._spans: list[Span] = []
        # hash slot -> token id, or _EMPTY
        self._index: list[TokenId] = [_EMPTY] * capacity
        self._frozen = False

    def __len__(self) -> int:
        return len(self._spans)

    def __iter__(self) -> Iterator[TokenId]:
        return iter(range(len(self._spans)))

    @property
    def frozen(self) -> bool:
        """Whether new tokens are still accepted."""
        return self._frozen

    def freeze(self) -> None:
        """Stop accepting new tokens; existing ids stay valid."""
        self._frozen = True

    @property
    def buffer(self) -> memoryview:
        """Read-only view of the backing buffer."""
        return self._buf

    def intern(self, start: int, stop: int) -> TokenId:
        """
        Return the id of the token at ``buffer[start:stop]``, assigning a new one if unseen.

        :param start: Offset of the first byte of the token.
        :param stop: Offset one past the last byte of the token.
        :return: Existing id for byte-identical text, otherwise the next sequential id.
        :raises ValueError: If the span is empty or outside the buffer.
        :raises InternerCapacityError: If the hash index has no free slot for a new token.
        :raises ModelFrozenError: If the interner was frozen by :meth:`freeze`.
        """
        if self._frozen:
            raise ModelFrozenError("interner is frozen, no new tokens accepted")
        if not 0 <= start < stop <= len(self._buf):
            raise ValueError(
                f"invalid token span [{start}, {stop}) for buffer of {len(self._buf)} bytes"
            )
        view = self._buf[start:stop]
        try:
            slot, found = self._probe(view)
        except InternerCapacityError:
            log.error(f"hash index full after {len(self._spans)} distinct tokens")
            raise
        if found != _EMPTY:
            return found

        tok_id = len(self._spans)
        self._spans.append((start, stop))
        self._index[slot] = tok_id
        return tok_id

    def find(self, text: bytes | str) -> TokenId | None:
        """Return the id of ``text`` without interning it, or ``None`` if never seen."""
        if isinstance(text, str):
            try:
                text = text.encode("ascii")
            except UnicodeEncodeError:
                # str queries are ASCII only; raw byte lookups take bytes
                return None
        if not text:
            return None
        try:
            _, found = self._probe(memoryview(text))
        except InternerCapacityError:
            # full index and no match
            return None
        return found if found != _EMPTY else None

    def lookup(self, tok_id: TokenId) -> memoryview:
        """
        Return the token bytes for ``tok_id`` as a zero-copy view.

        :raises IndexError: If ``tok_id`` was never issued by :meth:`intern`.
        """
        start, stop = self.span(tok_id)
        return self._buf[start:stop]

    def span(self, tok_id: TokenId) -> Span:
        """Return the ``(start, stop)`` buffer offsets of ``tok_id``."""
        if not 0 <= tok_id < len(self._spans):
            raise IndexError(f"unknown token id {tok_id} (interned: {len(self._spans)})")
        return self._spans[tok_id]

    def text(self, tok_id: TokenId) -> str:
        """Return the token for ``tok_id`` decoded for display."""
        return self.lookup(tok_id).tobytes().decode("ascii", errors="replace")

    def _probe(self, view: memoryview) -> tuple[int, TokenId]:
        """
        Walk the probe sequence for ``view``.

        Returns ``(slot, id)`` for a match, or ``(slot, _EMPTY)`` where ``slot``
        is the first empty slot on the sequence.
        """
        home = hash_token(view) % self.capacity
        for probe in range(self.capacity):
            slot = (home + probe) % self.capacity
            tok_id = self._index[slot]
            if tok_id == _EMPTY:
                return slot, _EMPTY
            start, stop = self._spans[tok_id]
            if self._buf[start:stop] == view:
                return slot, tok_id

        raise InternerCapacityError("hash index full", capacity=self.capacity)
