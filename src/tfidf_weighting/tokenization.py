"""Turn raw documents into sequences of stemmed terms."""
import logging
from functools import lru_cache
from typing import Callable, Collection, List, Optional, Sequence

import nltk
from typing_extensions import Literal
from nltk.stem import PorterStemmer
from nltk.tokenize import RegexpTokenizer
from sklearn.base import BaseEstimator
from sklearn.feature_extraction.text import ENGLISH_STOP_WORDS

from tfidf_weighting.type import Document, RawDocument, Token


logger = logging.getLogger(__name__)

RawTokenizer = Callable[[str], Sequence[str]]
Stemmer = Callable[[str], str]
StopWordSource = Literal["sklearn", "nltk"]


@lru_cache(maxsize=None)
def default_raw_tokenizer() -> RawTokenizer:
    """Split text into runs of word characters."""
    return RegexpTokenizer(r"\w+").tokenize


@lru_cache(maxsize=None)
def porter_stemmer() -> Stemmer:
    """Return the stem function of a Porter stemmer running the original algorithm."""
    return PorterStemmer(mode=PorterStemmer.ORIGINAL_ALGORITHM).stem


def get_stop_words(source: StopWordSource = "sklearn", num_retries: int = 5) -> frozenset:
    """Load English stop words.

    The "sklearn" list ships with scikit-learn. The "nltk" list needs the NLTK
    ``stopwords`` package, which is downloaded and reloaded up to ``num_retries`` times.

    Args:
        source: Where to load the stop words from
        num_retries: Download attempts for the "nltk" source

    Raises:
        ValueError: If ``source`` is unknown or the NLTK stop words could not be loaded
    """
    if source == "sklearn":
        return frozenset(ENGLISH_STOP_WORDS)
    if source != "nltk":
        raise ValueError(f'"{source}" is not a valid stop word source.')

    for _ in range(num_retries):
        try:
            stopwords = nltk.corpus.stopwords.words("english")
        except LookupError:  # Stopwords folder not yet downloaded
            logger.warning("NLTK stop words not found. Downloading...")
            nltk.download("stopwords", quiet=True)
            continue
        break
    else:
        raise ValueError(f"{num_retries} attempts at loading stopwords failed.")
    return frozenset(stopwords)


@lru_cache(maxsize=None)
def _default_stop_words() -> frozenset:
    return get_stop_words("sklearn")


class DocumentTokenizer(BaseEstimator):
    """Lowercase, split, drop stop words and stem a raw document.

    Collaborators left as ``None`` fall back to a ``\\w+`` regex tokenizer,
    scikit-learn's English stop words and the Porter stemmer.
    """

    def __init__(
        self,
        raw_tokenizer: Optional[RawTokenizer] = None,
        stop_words: Optional[Collection[str]] = None,
        stemmer: Optional[Stemmer] = None,
    ):
        """
        Args:
            raw_tokenizer: Splits normalized text into raw tokens
            stop_words: Tokens to discard before stemming
            stemmer: Maps a raw token to its stem
        """
        self.raw_tokenizer = raw_tokenizer
        self.stop_words = stop_words
        self.stemmer = stemmer

    @property
    def _resolved_raw_tokenizer(self) -> RawTokenizer:
        if self.raw_tokenizer is not None:
            return self.raw_tokenizer
        return default_raw_tokenizer()

    @property
    def _resolved_stop_words(self) -> Collection[str]:
        if self.stop_words is not None:
            return self.stop_words
        return _default_stop_words()

    @property
    def _resolved_stemmer(self) -> Stemmer:
        if self.stemmer is not None:
            return self.stemmer
        return porter_stemmer()

    def tokenize(self, document: RawDocument) -> Document:
        """Tokenize ``document``. Might return an empty list."""
        stop_words = self._resolved_stop_words
        stem = self._resolved_stemmer

        tokens: List[Token] = []
        for token in self._resolved_raw_tokenizer(document.lower()):
            if token in stop_words:
                continue
            tokens.append(stem(token))
        return tokens

    def tokenize_batch(self, documents: Sequence[RawDocument]) -> List[Document]:
        return [self.tokenize(document) for document in documents]
