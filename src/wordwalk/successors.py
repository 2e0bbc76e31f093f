"""Per-token successor lists for the first-order Markov graph."""

from collections.abc import Sequence

from .errors import ModelFrozenError
from .types import TokenId


class SuccessorTable:
    """
    Adjacency lists keyed by token id.

    Every observed ``(prev, next)`` transition is appended, duplicates
    included, so a uniform draw from ``successors_of(prev)`` follows the
    empirical next-token frequencies of the source text.

    Lists grow while the table is being filled; :meth:`freeze` turns each one
    into a tuple so later reads hand out the stored sequence without copying.
    """

    def __init__(self) -> None:
        # token id -> successor ids in observation order
        self._succs: list[list[TokenId] | tuple[TokenId, ...]] = []
        self._frozen = False

    def __len__(self) -> int:
        return len(self._succs)

    @property
    def frozen(self) -> bool:
        """Whether new nodes and transitions are still accepted."""
        return self._frozen

    def freeze(self) -> None:
        """Make every successor list immutable and reject further changes."""
        if not self._frozen:
            self._succs = [tuple(succ) for succ in self._succs]
            self._frozen = True

    def add_node(self) -> TokenId:
        """Allocate an empty successor list for the next token id and return that id."""
        self._check_mutable()
        self._succs.append([])
        return len(self._succs) - 1

    def record(self, prev_id: TokenId, next_id: TokenId) -> None:
        """
        Append ``next_id`` to the successors of ``prev_id``.

        :raises IndexError: If either id has no node in the table.
        :raises ModelFrozenError: If the table was frozen by :meth:`freeze`.
        """
        self._check_mutable()
        self._check_id(prev_id)
        self._check_id(next_id)
        self._succs[prev_id].append(next_id)

    def successors_of(self, tok_id: TokenId) -> Sequence[TokenId]:
        """
        Return successors of ``tok_id`` in insertion order; empty means a dead end.

        :raises IndexError: If ``tok_id`` has no node in the table.
        """
        self._check_id(tok_id)
        succ = self._succs[tok_id]
        # copy only while lists can still grow under the caller
        return succ if self._frozen else tuple(succ)

    def edge_count(self) -> int:
        """Return the total number of recorded transitions."""
        return sum(len(succ) for succ in self._succs)

    def dead_ends(self) -> list[TokenId]:
        """Return ids that were never followed by another token."""
        return [tok_id for tok_id, succ in enumerate(self._succs) if not succ]

    def _check_id(self, tok_id: TokenId) -> None:
        if not 0 <= tok_id < len(self._succs):
            raise IndexError(f"unknown token id {tok_id} (nodes: {len(self._succs)})")

    def _check_mutable(self) -> None:
        if self._frozen:
            raise ModelFrozenError("successor table is frozen, no new transitions accepted")
