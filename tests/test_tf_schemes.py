from __future__ import annotations

import math

import pytest

from src.domain.documents import CountMapDocument, TermSetDocument
from src.domain.tf import (
    BinaryTf,
    DoubleHalfNormalizationTf,
    DoubleNormalizationTf,
    LogNormalizationTf,
    RawCountTf,
    RawFrequencyTf,
)

DOC = CountMapDocument({"a": 3, "b": 2, "c": 4})

ALL_TF = [
    BinaryTf(),
    RawCountTf(),
    RawFrequencyTf(),
    LogNormalizationTf(),
    DoubleNormalizationTf(k=0.2),
    DoubleHalfNormalizationTf(),
]


@pytest.mark.parametrize("strategy", ALL_TF, ids=lambda s: type(s).__name__)
def test_absent_term_scores_zero(strategy) -> None:  # type: ignore[no-untyped-def]
    assert strategy.compute("zzz", DOC) == 0.0
    assert strategy.compute("zzz", CountMapDocument({})) == 0.0


def test_binary_is_zero_or_one() -> None:
    tf = BinaryTf()
    assert tf.compute("a", DOC) == 1.0
    assert tf.compute("zzz", DOC) == 0.0
    # Only needs membership
    assert tf.compute("x", TermSetDocument({"x"})) == 1.0
    assert {tf.compute(t, DOC) for t in ["a", "b", "c", "d", "e"]} <= {0.0, 1.0}


def test_raw_count() -> None:
    assert RawCountTf().compute("c", DOC) == 4.0


def test_raw_frequency_is_fraction_of_total() -> None:
    assert RawFrequencyTf().compute("a", DOC) == pytest.approx(3 / 9)


def test_raw_frequency_of_empty_document_is_zero() -> None:
    assert RawFrequencyTf().compute("a", CountMapDocument({})) == 0.0


def test_log_normalization() -> None:
    tf = LogNormalizationTf()
    assert tf.compute("a", DOC) == pytest.approx(1 + math.log(3))
    # A single occurrence scores exactly 1
    assert tf.compute("x", CountMapDocument({"x": 1})) == 1.0


def test_log_normalization_is_monotonic_in_count() -> None:
    tf = LogNormalizationTf()
    scores = [tf.compute("t", CountMapDocument({"t": n})) for n in range(0, 50)]
    assert all(a <= b for a, b in zip(scores, scores[1:], strict=False))


def test_double_half_normalization_uses_document_max() -> None:
    tf = DoubleHalfNormalizationTf()
    assert tf.compute("a", DOC) == pytest.approx(0.5 + 0.5 * 3 / 4)
    assert tf.compute("c", DOC) == 1.0


def test_double_k_normalization() -> None:
    tf = DoubleNormalizationTf(k=0.4)
    assert tf.compute("b", DOC) == pytest.approx(0.4 + 0.6 * 2 / 4)


@pytest.mark.parametrize("k", [-0.1, 1.0, 2.0])
def test_double_k_rejects_factor_out_of_range(k: float) -> None:
    with pytest.raises(ValueError):
        DoubleNormalizationTf(k=k)


def test_double_half_factor_is_fixed() -> None:
    assert DoubleHalfNormalizationTf().k == 0.5
    with pytest.raises(TypeError):
        DoubleHalfNormalizationTf(k=0.3)  # type: ignore[call-arg]


def test_strategies_declare_required_capability() -> None:
    from src.application.ports.document_port import (
        ExpandableDocument,
        NaiveDocument,
        ProcessedDocument,
    )

    assert BinaryTf.requires is NaiveDocument
    assert RawFrequencyTf.requires is ProcessedDocument
    assert DoubleHalfNormalizationTf.requires is ExpandableDocument
