from types import SimpleNamespace

import pytest
from hypothesis import given, strategies as st

from tfidf_weighting import tokenization
from tfidf_weighting.tokenization import (
    DocumentTokenizer,
    get_stop_words,
    porter_stemmer,
)

STOP_WORDS = frozenset({"the", "a", "and", "is"})


def _strip_trailing_s(word: str) -> str:
    return word[:-1] if word.endswith("s") else word


@pytest.fixture
def tokenizer() -> DocumentTokenizer:
    return DocumentTokenizer(
        raw_tokenizer=str.split, stop_words=STOP_WORDS, stemmer=_strip_trailing_s
    )


############################
##### `.tokenize` tests #####
############################
def test_tokenize_lowercases_before_filtering_stop_words(tokenizer: DocumentTokenizer):
    assert tokenizer.tokenize("The Cats AND the Dogs") == ["cat", "dog"]


def test_tokenize_preserves_token_order_and_duplicates(tokenizer: DocumentTokenizer):
    assert tokenizer.tokenize("dogs cats dogs") == ["dog", "cat", "dog"]


@pytest.mark.parametrize("text", ["", "   ", "the a and is", "THE A"])
def test_tokenize_return_empty_document_when_nothing_survives(
    tokenizer: DocumentTokenizer, text
):
    assert tokenizer.tokenize(text) == []


def test_tokenize_checks_stop_words_before_stemming(tokenizer: DocumentTokenizer):
    # "as" stems to "a", which is a stop word only after stemming
    assert tokenizer.tokenize("as") == ["a"]


@given(words=st.lists(st.sampled_from(["cats", "dogs", "the", "sat", "and"])))
def test_tokenize_output_is_fixed_point_of_stemmer(words):
    tokenizer = DocumentTokenizer(
        raw_tokenizer=str.split, stop_words=STOP_WORDS, stemmer=_strip_trailing_s
    )
    tokens = tokenizer.tokenize(" ".join(words))
    assert [_strip_trailing_s(token) for token in tokens] == tokens
    assert not set(tokens) & STOP_WORDS


def test_tokenize_batch_keeps_document_order(tokenizer: DocumentTokenizer):
    docs = ["the cats sat", "", "a dog ran"]
    assert tokenizer.tokenize_batch(docs) == [["cat", "sat"], [], ["dog", "ran"]]


def test_default_tokenizer_splits_on_non_word_characters_and_stems():
    tokenizer = DocumentTokenizer()
    assert tokenizer.tokenize("The cats were running, quickly!") == [
        "cat",
        "run",
        "quickli",
    ]


def test_get_params_returns_injected_collaborators(tokenizer: DocumentTokenizer):
    params = tokenizer.get_params()
    assert params["raw_tokenizer"] is str.split
    assert params["stop_words"] is STOP_WORDS


def test_tokenize_uses_stemmer_replaced_by_set_params():
    tokenizer = DocumentTokenizer(str.split, frozenset(), str.upper)
    assert tokenizer.tokenize("cats dogs") == ["CATS", "DOGS"]

    tokenizer.set_params(stemmer=str.lower)
    assert tokenizer.tokenize("cats dogs") == ["cats", "dogs"]


def test_tokenize_uses_stop_words_replaced_by_set_params():
    tokenizer = DocumentTokenizer(str.split, frozenset(), str.lower)
    tokenizer.set_params(stop_words=frozenset({"cats"}))
    assert tokenizer.tokenize("cats dogs") == ["dogs"]


def test_tokenize_falls_back_to_defaults_after_set_params_none(tokenizer: DocumentTokenizer):
    tokenizer.set_params(raw_tokenizer=None, stop_words=None, stemmer=None)
    assert tokenizer.tokenize("The cats, running") == ["cat", "run"]


#################################
##### `get_stop_words` tests #####
#################################
def test_get_stop_words_sklearn_contains_function_words():
    stop_words = get_stop_words("sklearn")
    assert isinstance(stop_words, frozenset)
    assert {"the", "and", "of"} <= stop_words


def test_get_stop_words_raise_error_with_invalid_source():
    with pytest.raises(ValueError):
        get_stop_words("invalid_source")


def test_get_stop_words_nltk_downloads_then_retries(monkeypatch):
    calls = {"words": 0, "download": 0}

    def words(language):
        calls["words"] += 1
        if calls["words"] == 1:
            raise LookupError("stopwords not found")
        return ["the", "and"]

    def download(package, quiet=False):
        calls["download"] += 1

    monkeypatch.setattr(
        tokenization.nltk, "corpus", SimpleNamespace(stopwords=SimpleNamespace(words=words))
    )
    monkeypatch.setattr(tokenization.nltk, "download", download)

    assert get_stop_words("nltk") == frozenset({"the", "and"})
    assert calls == {"words": 2, "download": 1}


def test_get_stop_words_nltk_raise_error_after_exhausting_retries(monkeypatch):
    def words(language):
        raise LookupError("stopwords not found")

    monkeypatch.setattr(
        tokenization.nltk, "corpus", SimpleNamespace(stopwords=SimpleNamespace(words=words))
    )
    monkeypatch.setattr(tokenization.nltk, "download", lambda *args, **kwargs: None)

    with pytest.raises(ValueError):
        get_stop_words("nltk", num_retries=3)


def test_porter_stemmer_is_idempotent_on_stems():
    stem = porter_stemmer()
    for word in ("running", "cats", "ponies"):
        assert stem(stem(word)) == stem(word)
