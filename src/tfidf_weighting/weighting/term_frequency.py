"""Term frequency of a single term and frequency vectors over a corpus vocabulary."""
import math
from typing import List, Optional, Union

from tfidf_weighting.type import Corpus, Document
from tfidf_weighting.tokenization import Stemmer, porter_stemmer
from tfidf_weighting.vocabulary import build_vocabulary
from tfidf_weighting.weighting.schemes import (
    TermWeighting,
    TermWeightingName,
    as_term_weighting,
)


def term_frequency(
    term: str,
    stem_first: bool,
    document: Document,
    weighting: Union[TermWeighting, TermWeightingName, int] = TermWeighting.RAW,
    stemmer: Optional[Stemmer] = None,
) -> float:
    """Score ``term`` by its number of occurrences in an already tokenized ``document``.

    Only ``LOG`` has a formula of its own (``1 + ln(count)``, and 0 for an absent term).
    ``BINARY``, ``DOUBLE_HALF`` and ``DOUBLE_K`` return the raw count like ``RAW``.

    Args:
        term: The term to look up
        stem_first: If True, stem ``term`` before counting
        document: A tokenized document
        weighting: Term weighting scheme
        stemmer: Stemmer applied when ``stem_first`` is set. Defaults to Porter.

    Raises:
        ValueError: If ``weighting`` is not a term weighting scheme
    """
    weighting = as_term_weighting(weighting)
    if stem_first:
        term = (stemmer or porter_stemmer())(term)

    frequency = 0.0
    for token in document:
        if token == term:
            frequency += 1.0

    if weighting == TermWeighting.LOG and frequency != 0.0:
        frequency = 1.0 + math.log(frequency)
    return frequency


def term_frequencies(compare_document: Document, corpus: Corpus) -> List[float]:
    """Raw counts in ``compare_document`` of each vocabulary term of ``corpus``.

    Entries follow the first-occurrence order of the corpus vocabulary.
    ``compare_document`` need not be part of ``corpus``; its terms outside
    the vocabulary are ignored.
    """
    return [
        term_frequency(term, False, compare_document, TermWeighting.RAW)
        for term in build_vocabulary(corpus)
    ]
