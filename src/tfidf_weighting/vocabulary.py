from typing import List, Set

from tfidf_weighting.type import Corpus, Token


def build_vocabulary(corpus: Corpus) -> List[Token]:
    """List the distinct terms of ``corpus`` in order of first occurrence.

    Documents are scanned in corpus order and tokens in document order,
    so the same token multiset can yield a different order for a reordered corpus.
    """
    seen: Set[Token] = set()
    vocabulary: List[Token] = []
    for document in corpus:
        for token in document:
            if token not in seen:
                seen.add(token)
                vocabulary.append(token)
    return vocabulary
