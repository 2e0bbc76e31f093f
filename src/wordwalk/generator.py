"""
Random-walk sentence generation over a built model.

A walk starts on a token beginning with an uppercase letter and follows
uniformly drawn successors until it reaches a token ending in ``.``, ``?``
or ``!``, hits a dead end, or would exceed the length (or token) cap. The
successor graph may contain cycles; those caps are what guarantee
termination.
"""

import logging
import random

from .config import (
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_MAX_LENGTH,
    DEFAULT_START_ATTEMPTS,
    SENTENCE_ENDS,
)
from .errors import GenerationError
from .model import Model, is_start_token
from .types import TokenId

log = logging.getLogger(__name__)


def ends_sentence(token: memoryview | bytes) -> bool:
    """Whether ``token`` ends in sentence-final punctuation."""
    return len(token) > 0 and token[-1] in SENTENCE_ENDS


class SentenceGenerator:
    """
    Generates whole-token sentences from a :class:`Model`.

    Example:
       >>> model = build_model(b"The cat sat. Did the cat run? The cat ran!")
       >>> gen = SentenceGenerator(model, rng=random.Random(7))
       >>> print(gen.generate_ending_in("?"))
    """

    def __init__(
        self,
        model: Model,
        *,
        rng: random.Random | None = None,
        max_length: int = DEFAULT_MAX_LENGTH,
        max_tokens: int | None = None,
        start_attempts: int = DEFAULT_START_ATTEMPTS,
    ) -> None:
        """
        Configure a generator.

        :param model: Model to walk; never mutated.
        :param rng: Random source; a fresh unseeded ``random.Random`` when omitted.
        :param max_length: Inclusive cap on sentence length in bytes, separators included.
        :param max_tokens: Optional cap on the number of tokens per sentence.
        :param start_attempts: Random draws tried before scanning for a start token.
        :raises GenerationError: If any limit is out of range.
        """
        if max_length < 1:
            raise GenerationError(
                "max_length must be positive", param="max_length", value=max_length
            )
        if max_tokens is not None and max_tokens < 1:
            raise GenerationError(
                "max_tokens must be positive", param="max_tokens", value=max_tokens
            )
        if start_attempts < 0:
            raise GenerationError(
                "start_attempts must not be negative",
                param="start_attempts",
                value=start_attempts,
            )
        self.model = model
        self.rng = rng if rng is not None else random.Random()
        self.max_length = max_length
        self.max_tokens = max_tokens
        self.start_attempts = start_attempts

    def select_start(self) -> TokenId | None:
        """
        Pick a plausible sentence start.

        Tries ``start_attempts`` uniform draws over all tokens, then falls back
        to the lowest qualifying id. Returns ``None`` if no token starts with an
        uppercase letter and fits in ``max_length``.
        """
        n = len(self.model)
        if n == 0:
            return None

        for _ in range(self.start_attempts):
            tok_id = self.rng.randrange(n)
            if self._can_start(tok_id):
                return tok_id

        # deterministic fallback so sparse corpora still produce something
        for tok_id in range(n):
            if self._can_start(tok_id):
                log.debug(f"no random start after {self.start_attempts} draws, using id {tok_id}")
                return tok_id

        log.warning("no token starts with an uppercase letter")
        return None

    def generate(self) -> str | None:
        """
        Walk the model once from a fresh start token.

        :return: Space-joined tokens, or ``None`` if there is no start candidate.
        """
        curr = self.select_start()
        if curr is None:
            return None

        token = self.model.token(curr)
        parts = [self.model.text(curr)]
        length = len(token)

        while not ends_sentence(token):
            succs = self.model.successors_of(curr)
            if not succs:
                log.debug(f"dead end at {self.model.text(curr)!r}")
                break
            if self.max_tokens is not None and len(parts) >= self.max_tokens:
                break

            nxt = self.rng.choice(succs)
            nxt_token = self.model.token(nxt)
            # a token is appended whole or not at all
            if length + 1 + len(nxt_token) > self.max_length:
                break

            parts.append(self.model.text(nxt))
            length += 1 + len(nxt_token)
            curr, token = nxt, nxt_token

        return " ".join(parts)

    def generate_ending_in(
        self, target: str, max_attempts: int = DEFAULT_MAX_ATTEMPTS
    ) -> str | None:
        """
        Rejection-sample sentences until one ends in ``target``.

        :param target: Single character the sentence must end with, e.g. ``"?"``.
        :param max_attempts: Number of walks to try.
        :return: First matching sentence, or ``None`` if none matched.
        :raises GenerationError: If ``target`` is not one character or ``max_attempts`` is negative.
        """
        if not isinstance(target, str) or len(target) != 1:
            raise GenerationError(
                "target must be a single character", param="target", value=target
            )
        if max_attempts < 0:
            raise GenerationError(
                "max_attempts must not be negative",
                param="max_attempts",
                value=max_attempts,
            )

        for attempt in range(1, max_attempts + 1):
            sentence = self.generate()
            if sentence is None:
                # no start token exists, retrying cannot help
                return None
            if sentence.endswith(target):
                log.debug(f"sentence ending in {target!r} found after {attempt} attempts")
                return sentence

        log.warning(f"no sentence ending in {target!r} after {max_attempts} attempts")
        return None

    def _can_start(self, tok_id: TokenId) -> bool:
        token = self.model.token(tok_id)
        return is_start_token(token) and len(token) <= self.max_length


def generate_sentence(
    model: Model,
    max_length: int = DEFAULT_MAX_LENGTH,
    *,
    rng: random.Random | None = None,
) -> str | None:
    """Generate one sentence, or ``None`` if the model has no start token."""
    return SentenceGenerator(model, rng=rng, max_length=max_length).generate()


def generate_sentence_ending_in(
    model: Model,
    target: str,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    max_length: int = DEFAULT_MAX_LENGTH,
    *,
    rng: random.Random | None = None,
) -> str | None:
    """Generate a sentence ending in ``target``, or ``None`` if not found in ``max_attempts``."""
    gen = SentenceGenerator(model, rng=rng, max_length=max_length)
    return gen.generate_ending_in(target, max_attempts)
