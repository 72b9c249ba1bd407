"""Class definition for TfidfFeaturizer."""
import logging
from collections import Counter
from typing import Dict, Union

import numpy as np
import pandas as pd
from tqdm import tqdm
from sklearn.base import BaseEstimator, TransformerMixin
from sklearn.utils.validation import check_is_fitted

from tfidf_weighting.type import Corpus
from tfidf_weighting.vocabulary import build_vocabulary
from tfidf_weighting.weighting import (
    IDFWeighting,
    as_idf_weighting,
    inverse_document_frequencies,
)
from tfidf_weighting.weighting.schemes import IDFWeightingName


logger = logging.getLogger(__name__)


class TfidfFeaturizer(BaseEstimator, TransformerMixin):
    """Turn tokenized documents into term frequency vectors over a fitted vocabulary.

    This class is sklearn-compatible and implements the sklearn Transformers interface.
    """

    def __init__(
        self,
        use_idf: bool = False,
        idf_weighting: Union[IDFWeighting, IDFWeightingName, int] = "log",
        show_progress: bool = False,
    ):
        """
        Args:
            use_idf: If True, scale each raw count by the idf of its term
            idf_weighting: Inverse document frequency weighting scheme
            show_progress: If True, display a progress bar in :meth:`transform`

        Raises:
            ValueError: If :obj:`idf_weighting` is not an idf weighting scheme
        """
        as_idf_weighting(idf_weighting)

        self.use_idf = use_idf
        self.idf_weighting = idf_weighting
        self.show_progress = show_progress

    def fit(self, corpus: Corpus, y=None):
        """Learn the vocabulary and inverse document frequencies of :obj:`corpus`.

        Fitted attributes:
            ``vocabulary_``: Distinct terms in order of first occurrence
            ``idf_``: A :obj:`pd.Series` of idf values indexed by ``vocabulary_``
            ``vocab2id_``: Column index of each vocabulary term

        Args:
            corpus: Tokenized documents
        """
        corpus = [list(document) for document in corpus]
        self.vocabulary_ = build_vocabulary(corpus)
        self.vocab2id_: Dict[str, int] = {
            term: i for i, term in enumerate(self.vocabulary_)
        }
        idfs = inverse_document_frequencies(corpus, self.idf_weighting)
        self.idf_ = pd.Series(
            [idfs[term] for term in self.vocabulary_],
            index=self.vocabulary_,
            dtype=np.float64,
        )
        logger.debug(
            f"Fitted {len(corpus)} documents with a vocabulary of {len(self.vocabulary_)} terms"
        )
        return self

    def transform(self, docs: Corpus) -> np.ndarray:
        """Compute one feature row per document in :obj:`docs`.

        Args:
            docs: Tokenized documents

        Returns:
            An array of shape (:math:`N`, :math:`V`), where :math:`V` is the size of ``vocabulary_``
        """
        check_is_fitted(self, ["vocabulary_", "vocab2id_", "idf_"])

        features = np.zeros((len(docs), len(self.vocabulary_)), dtype=np.float64)
        pbar = tqdm(
            docs,
            desc="computing term frequencies",
            unit="doc",
            dynamic_ncols=True,
            disable=not self.show_progress,
        )
        for i, doc in enumerate(pbar):
            for term, count in Counter(doc).items():
                if term in self.vocab2id_:
                    features[i, self.vocab2id_[term]] = count

        if self.use_idf:
            features *= self.idf_.to_numpy()
        return features
