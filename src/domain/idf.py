"""Inverse-document-frequency weighting schemes.

``N`` is the number of documents in the corpus and ``n`` the number of them
containing the term. The unsmoothed schemes divide by ``n`` and follow IEEE
float semantics when it is zero: the result is ``inf`` (or ``nan`` for an
empty corpus) rather than an exception. Callers that need a finite value for
unseen terms pick the smooth or max scheme.
"""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import ClassVar

import numpy as np

from src.application.ports.document_port import (
    ExpandableDocument,
    NaiveDocument,
    Term,
)


def _log_ratio(num: float, den: float) -> float:
    """``ln(num / den)`` without raising on a zero denominator or argument."""
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.log(np.float64(num) / np.float64(den)))


def document_frequency(term: Term, corpus: Iterable[NaiveDocument]) -> tuple[int, int]:
    """Return ``(n, N)`` for ``term`` in a single pass over ``corpus``."""
    n = 0
    total = 0
    for doc in corpus:
        total += 1
        if doc.contains(term):
            n += 1
    return n, total


@dataclass(frozen=True)
class UnaryIdf:
    """Constant 1; turns the combined score into plain TF."""

    requires: ClassVar[type] = NaiveDocument

    def compute(self, term: Term, corpus: Iterable[NaiveDocument]) -> float:
        return 1.0


@dataclass(frozen=True)
class SmoothedInverseFrequencyIdf:
    """``ln(factor + N / n)``.

    A positive factor marks a smoothed variant: an unseen term is counted as
    occurring in one document, so the result stays finite.
    """

    factor: float = 1.0
    requires: ClassVar[type] = NaiveDocument

    def __post_init__(self) -> None:
        if self.factor < 0:
            raise ValueError(f"smoothing factor must be non-negative, got {self.factor}")

    def compute(self, term: Term, corpus: Iterable[NaiveDocument]) -> float:
        n, total = document_frequency(term, corpus)
        if self.factor > 0:
            return math.log(self.factor + total / max(n, 1))
        return _log_ratio(total, n)


@dataclass(frozen=True)
class InverseFrequencyIdf(SmoothedInverseFrequencyIdf):
    """``ln(N / n)``; ``inf`` for a term no document contains."""

    factor: float = field(default=0.0, init=False)


@dataclass(frozen=True)
class InverseFrequencySmoothIdf(SmoothedInverseFrequencyIdf):
    """``ln(1 + N / n)``; ``ln(1 + N)`` for a term no document contains."""

    factor: float = field(default=1.0, init=False)


@dataclass(frozen=True)
class InverseFrequencyMaxIdf:
    """``ln(max n' / n)`` where ``max n'`` is the highest document frequency of
    any term in the corpus.

    Both frequencies come out of the same pass. ``n`` is floored at 1 and an
    empty corpus uses ``max n' = 1``, so the value is always finite.
    """

    requires: ClassVar[type] = ExpandableDocument

    def compute(self, term: Term, corpus: Iterable[ExpandableDocument]) -> float:
        df: Counter[Term] = Counter()
        n = 0
        for doc in corpus:
            df.update({t for t, c in doc.term_counts() if c > 0})
            if doc.contains(term):
                n += 1
        max_df = max(df.values(), default=1)
        return math.log(max_df / max(n, 1))


@dataclass(frozen=True)
class ProbabilisticIdf:
    """``ln((N - n) / n)``.

    Negative once more than half the corpus contains the term and ``-inf``
    when every document does; not clamped.
    """

    requires: ClassVar[type] = NaiveDocument

    def compute(self, term: Term, corpus: Iterable[NaiveDocument]) -> float:
        n, total = document_frequency(term, corpus)
        return _log_ratio(total - n, n)
