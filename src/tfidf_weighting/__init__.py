"""
TF-IDF statistics over tokenized corpora.

Raw documents are tokenized once with :class:`DocumentTokenizer`;
the resulting token sequences feed the term frequency and
inverse document frequency functions, or :class:`TfidfFeaturizer`.
"""

from .tokenization import DocumentTokenizer, get_stop_words
from .vocabulary import build_vocabulary
from .weighting import (
    TermWeighting,
    IDFWeighting,
    term_frequency,
    term_frequencies,
    inverse_document_frequency,
    inverse_document_frequencies,
)
from .featurizer import TfidfFeaturizer

__version__ = "0.1.0"
