"""
Read-only Markov model built from a single pass over the source text.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from ._decorators import timed
from ._tokenize import fill
from .config import DEFAULT_HASH_SIZE
from .interner import Interner
from .successors import SuccessorTable
from .types import Buffer, TokenId

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ModelStats:
    """Summary counts for a built model."""

    n_tokens: int
    n_distinct: int
    n_edges: int
    n_dead_ends: int
    n_starts: int


@dataclass(frozen=True)
class Model:
    """
    Interned tokens plus their successor lists.

    Token views borrow the buffer given to :func:`build_model`, which must not
    be mutated for as long as the model is in use. Both tables are frozen by
    :func:`build_model`, so interning or recording through them raises
    :class:`ModelFrozenError`.
    """

    interner: Interner
    successors: SuccessorTable
    n_tokens: int = 0

    def __len__(self) -> int:
        return len(self.interner)

    def token(self, tok_id: TokenId) -> memoryview:
        """Return the raw bytes of ``tok_id``."""
        return self.interner.lookup(tok_id)

    def text(self, tok_id: TokenId) -> str:
        """Return ``tok_id`` decoded for display."""
        return self.interner.text(tok_id)

    def successors_of(self, tok_id: TokenId) -> Sequence[TokenId]:
        """Return the observed successors of ``tok_id``, duplicates included."""
        return self.successors.successors_of(tok_id)

    def find(self, text: bytes | str) -> TokenId | None:
        """Return the id of ``text`` if it occurs in the source, else ``None``."""
        return self.interner.find(text)

    def is_start(self, tok_id: TokenId) -> bool:
        """Whether ``tok_id`` begins with an ASCII uppercase letter."""
        return is_start_token(self.token(tok_id))

    def stats(self) -> ModelStats:
        """Compute summary counts over the whole model."""
        return ModelStats(
            n_tokens=self.n_tokens,
            n_distinct=len(self.interner),
            n_edges=self.successors.edge_count(),
            n_dead_ends=len(self.successors.dead_ends()),
            n_starts=sum(1 for tok_id in self.interner if self.is_start(tok_id)),
        )


def is_start_token(token: memoryview | bytes) -> bool:
    """Heuristic sentence start: the first byte is ``A``-``Z``."""
    return len(token) > 0 and 0x41 <= token[0] <= 0x5A


@timed("model build")
def build_model(buffer: Buffer | str, hash_size: int = DEFAULT_HASH_SIZE) -> Model:
    """
    Build a model from sanitized text in one forward pass.

    Tokens are maximal runs of bytes other than space, CR and LF. A ``str`` is
    encoded to ASCII first (unencodable characters become ``?``); byte buffers
    are borrowed without copying.

    :param buffer: Sanitized source text.
    :param hash_size: Fixed slot count of the interner hash index.
    :return: Fully populated, frozen model.
    :raises InternerCapacityError: If the text has more distinct tokens than ``hash_size`` allows.
    """
    if isinstance(buffer, str):
        buffer = buffer.encode("ascii", errors="replace")

    interner = Interner(buffer, capacity=hash_size)
    successors = SuccessorTable()
    n_tokens = fill(interner, successors, interner.buffer)
    interner.freeze()
    successors.freeze()

    model = Model(interner=interner, successors=successors, n_tokens=n_tokens)
    if n_tokens == 0:
        log.warning("source text contains no tokens")
    else:
        stats = model.stats()
        log.info(
            f"model built: {stats.n_tokens} tokens, {stats.n_distinct} distinct, "
            f"{stats.n_edges} transitions, {stats.n_dead_ends} dead ends, "
            f"{stats.n_starts} sentence starts"
        )
    return model
