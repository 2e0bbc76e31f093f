"""WordWalk: first-order Markov sentence generation over interned tokens."""

from .config import Settings
from .corpus import load_corpus
from .errors import (
    CorpusError,
    GenerationError,
    InternerCapacityError,
    ModelFrozenError,
    WordWalkError,
)
from .generator import (
    SentenceGenerator,
    generate_sentence,
    generate_sentence_ending_in,
)
from .interner import Interner
from .model import Model, ModelStats, build_model
from .successors import SuccessorTable

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("wordwalk")
except PackageNotFoundError:
    __version__ = "dev"

__all__ = [
    "Interner",
    "SuccessorTable",
    "Model",
    "ModelStats",
    "SentenceGenerator",
    "Settings",
    "WordWalkError",
    "InternerCapacityError",
    "ModelFrozenError",
    "CorpusError",
    "GenerationError",
    "build_model",
    "generate_sentence",
    "generate_sentence_ending_in",
    "load_corpus",
]
