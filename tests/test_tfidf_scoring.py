from __future__ import annotations

import math
from concurrent.futures import ThreadPoolExecutor

import pytest

from src.domain.documents import CountMapDocument, TermListDocument, TermSetDocument
from src.domain.idf import (
    InverseFrequencyIdf,
    InverseFrequencyMaxIdf,
    InverseFrequencySmoothIdf,
    UnaryIdf,
)
from src.domain.scoring import DEFAULT, TfIdf, tfidf
from src.domain.tf import (
    BinaryTf,
    DoubleHalfNormalizationTf,
    LogNormalizationTf,
    RawCountTf,
    RawFrequencyTf,
)
from src.tfidf_kit.exceptions import UnsupportedDocumentError


@pytest.fixture()
def corpus() -> list[dict[str, int]]:
    return [{"a": 3, "b": 2, "c": 4}, {"a": 2, "d": 5}]


def test_default_scores_shared_term_zero(corpus: list[dict[str, int]]) -> None:
    assert tfidf("a", corpus[0], corpus) == 0.0


def test_default_scores_rare_term_above_half(corpus: list[dict[str, int]]) -> None:
    assert tfidf("c", corpus[0], corpus) > 0.5


def test_default_pairing() -> None:
    assert isinstance(DEFAULT.tf, DoubleHalfNormalizationTf)
    assert isinstance(DEFAULT.idf, InverseFrequencyIdf)


def test_custom_pairing_raw_frequency_smooth(corpus: list[dict[str, int]]) -> None:
    scorer = TfIdf(tf=RawFrequencyTf(), idf=InverseFrequencySmoothIdf())
    assert scorer.tfidf("a", corpus[0], corpus) > 0
    assert scorer.tfidf("c", corpus[0], corpus) == pytest.approx(4 / 9 * math.log(3))


@pytest.mark.parametrize(
    "tf", [BinaryTf(), RawCountTf(), RawFrequencyTf(), LogNormalizationTf()]
)
def test_unary_idf_reduces_to_tf(
    tf,  # type: ignore[no-untyped-def]
    corpus: list[dict[str, int]],
) -> None:
    doc = CountMapDocument(corpus[0])
    scorer = TfIdf(tf=tf, idf=UnaryIdf())
    for term in ("a", "b", "c", "zzz"):
        assert scorer.tfidf(term, doc, corpus) == tf.compute(term, doc)


def test_scorer_is_callable(corpus: list[dict[str, int]]) -> None:
    assert DEFAULT("c", corpus[0], corpus) == DEFAULT.tfidf("c", corpus[0], corpus)


def test_name_lists_both_strategies() -> None:
    assert DEFAULT.name == "DoubleHalfNormalizationTf*InverseFrequencyIdf"


def test_non_finite_results_pass_through(corpus: list[dict[str, int]]) -> None:
    scorer = TfIdf(tf=RawCountTf(), idf=InverseFrequencyIdf())
    outside = {"q": 2}
    # Term seen in the scored document but nowhere in the corpus
    assert scorer.tfidf("q", outside, corpus) == math.inf
    # 0 * inf
    assert math.isnan(scorer.tfidf("zzz", corpus[0], corpus))


def test_smooth_keeps_unseen_terms_finite(corpus: list[dict[str, int]]) -> None:
    scorer = TfIdf(tf=RawCountTf(), idf=InverseFrequencySmoothIdf())
    assert scorer.tfidf("zzz", corpus[0], corpus) == 0.0


def test_accepts_mixed_document_shapes() -> None:
    docs = [
        CountMapDocument({"a": 1, "b": 1}),
        [("a", 2), ("c", 1)],
        TermListDocument(["c", "c", "d"]),
    ]
    value = DEFAULT.tfidf("b", docs[0], docs)
    assert value == pytest.approx(1.0 * math.log(3))


def test_corpus_may_be_a_generator(corpus: list[dict[str, int]]) -> None:
    gen = (d for d in corpus)
    assert DEFAULT.tfidf("c", corpus[0], gen) == pytest.approx(math.log(2))


def test_repeated_calls_are_identical(corpus: list[dict[str, int]]) -> None:
    first = DEFAULT.tfidf("c", corpus[0], corpus)
    for _ in range(20):
        assert DEFAULT.tfidf("c", corpus[0], corpus) == first
    # Inputs untouched
    assert corpus == [{"a": 3, "b": 2, "c": 4}, {"a": 2, "d": 5}]


def test_concurrent_calls_agree(corpus: list[dict[str, int]]) -> None:
    terms = ["a", "b", "c", "d"] * 25
    expected = [DEFAULT.tfidf(t, corpus[0], corpus) for t in terms]
    with ThreadPoolExecutor(max_workers=4) as pool:
        got = list(pool.map(lambda t: DEFAULT.tfidf(t, corpus[0], corpus), terms))
    # d is absent from doc0 but present in the corpus: plain 0.0, no nan
    assert got == expected


def test_numpy_count_corpus_scores_like_plain_ints() -> None:
    import numpy as np

    np_corpus = [{"a": np.int64(3), "c": np.int64(4)}, {"a": np.int64(2)}]
    plain = [{"a": 3, "c": 4}, {"a": 2}]
    assert DEFAULT.tfidf("c", np_corpus[0], np_corpus) == DEFAULT.tfidf("c", plain[0], plain)
    assert DEFAULT.tfidf("c", np_corpus[0], np_corpus) == pytest.approx(math.log(2))


def test_scored_document_too_weak_for_tf() -> None:
    scorer = TfIdf(tf=RawCountTf(), idf=UnaryIdf())
    with pytest.raises(UnsupportedDocumentError, match="RawCountTf needs scored documents"):
        scorer.tfidf("a", TermSetDocument({"a"}), [TermSetDocument({"a"})])
    # Binary only needs membership
    assert TfIdf(tf=BinaryTf(), idf=UnaryIdf()).tfidf("a", TermSetDocument({"a"}), []) == 1.0


def test_corpus_too_weak_for_max_idf() -> None:
    scorer = TfIdf(tf=RawCountTf(), idf=InverseFrequencyMaxIdf())
    corpus = [CountMapDocument({"a": 1}), TermSetDocument({"a", "b"})]
    with pytest.raises(UnsupportedDocumentError, match="InverseFrequencyMaxIdf"):
        scorer.tfidf("a", corpus[0], corpus)
    # Naive corpus is enough for plain inverse frequency
    naive = [TermSetDocument({"a"}), TermSetDocument({"b"})]
    value = TfIdf(tf=RawCountTf(), idf=InverseFrequencyIdf()).tfidf("a", {"a": 2}, naive)
    assert value == pytest.approx(2 * math.log(2))
