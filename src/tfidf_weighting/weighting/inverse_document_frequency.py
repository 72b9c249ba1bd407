"""Inverse document frequency of a term, or of every term in a corpus."""
from typing import Dict, Optional, Union

import numpy as np

from tfidf_weighting.type import Corpus
from tfidf_weighting.tokenization import Stemmer, porter_stemmer
from tfidf_weighting.vocabulary import build_vocabulary
from tfidf_weighting.weighting.schemes import (
    IDFWeighting,
    IDFWeightingName,
    as_idf_weighting,
)


def inverse_document_frequency(
    term: str,
    stem_first: bool,
    corpus: Corpus,
    weighting: Union[IDFWeighting, IDFWeightingName, int] = IDFWeighting.LOG,
    stemmer: Optional[Stemmer] = None,
) -> float:
    """Compute the inverse document frequency of ``term`` over a tokenized ``corpus``.

    The document count of ``term`` starts at 1, so it is always one higher
    than the number of documents containing ``term``. With ``LOG`` the result is
    ``ln(n_docs / (1 + doc_freq))``, which is ``-inf`` for an empty corpus.
    ``UNARY``, ``LOG_SMOOTH``, ``LOG_MAX`` and ``PROB`` have no formula and return 0.

    Args:
        term: The term to look up
        stem_first: If True, stem ``term`` before looking it up
        corpus: Tokenized documents
        weighting: Inverse document frequency weighting scheme
        stemmer: Stemmer applied when ``stem_first`` is set. Defaults to Porter.

    Raises:
        ValueError: If ``weighting`` is not an idf weighting scheme
    """
    weighting = as_idf_weighting(weighting)
    if stem_first:
        term = (stemmer or porter_stemmer())(term)

    n_docs = len(corpus)
    n_docs_with_term = 1.0
    for document in corpus:
        if term in document:
            n_docs_with_term += 1.0

    if weighting == IDFWeighting.LOG:
        with np.errstate(divide="ignore"):
            return float(np.log(np.float64(n_docs) / n_docs_with_term))
    return 0.0


def inverse_document_frequencies(
    corpus: Corpus,
    weighting: Union[IDFWeighting, IDFWeightingName, int] = IDFWeighting.LOG,
) -> Dict[str, float]:
    """Map every vocabulary term of ``corpus`` to its inverse document frequency.

    An empty corpus yields an empty mapping.
    """
    weighting = as_idf_weighting(weighting)
    return {
        term: inverse_document_frequency(term, False, corpus, weighting)
        for term in build_vocabulary(corpus)
    }
