"""Character window language model: train on a corpus, generate text.

Import from this package in the scripts under `scripts/`.
"""

from .config import ModelConfig
from .corpus import CorpusConfig, load_corpus_csv, normalize_corpus, read_corpus
from .frequency import CharObservation, EmptyDistributionError, FrequencyTable
from .language_model import LanguageModel

__all__ = [
    "CharObservation",
    "CorpusConfig",
    "EmptyDistributionError",
    "FrequencyTable",
    "LanguageModel",
    "ModelConfig",
    "load_corpus_csv",
    "normalize_corpus",
    "read_corpus",
]
