"""Term-frequency weighting schemes.

Every scheme returns ``0.0`` for a term the document does not contain.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import ClassVar

from src.application.ports.document_port import (
    ExpandableDocument,
    NaiveDocument,
    ProcessedDocument,
    Term,
)

from .documents import max_count


@dataclass(frozen=True)
class BinaryTf:
    """1 if the document contains the term, otherwise 0."""

    requires: ClassVar[type] = NaiveDocument

    def compute(self, term: Term, document: NaiveDocument) -> float:
        return 1.0 if document.contains(term) else 0.0


@dataclass(frozen=True)
class RawCountTf:
    """Number of times the term occurs in the document."""

    requires: ClassVar[type] = ProcessedDocument

    def compute(self, term: Term, document: ProcessedDocument) -> float:
        return float(document.count(term))


@dataclass(frozen=True)
class RawFrequencyTf:
    """Occurrences of the term divided by the document's total term count."""

    requires: ClassVar[type] = ProcessedDocument

    def compute(self, term: Term, document: ProcessedDocument) -> float:
        total = document.total_count()
        if total <= 0:
            return 0.0
        return document.count(term) / total


@dataclass(frozen=True)
class LogNormalizationTf:
    """``1 + ln(f)`` for a present term, where ``f`` is its count."""

    requires: ClassVar[type] = ProcessedDocument

    def compute(self, term: Term, document: ProcessedDocument) -> float:
        f = document.count(term)
        if f <= 0:
            return 0.0
        return 1.0 + math.log(f)


@dataclass(frozen=True)
class DoubleNormalizationTf:
    """Double normalization with factor ``k``: ``k + (1 - k) * f / max f``.

    ``max f`` is the largest count of any term in the same document, which is
    why the document has to be expandable.
    """

    k: float = 0.5
    requires: ClassVar[type] = ExpandableDocument

    def __post_init__(self) -> None:
        if not 0.0 <= self.k < 1.0:
            raise ValueError(f"normalization factor k must be in [0, 1), got {self.k}")

    def compute(self, term: Term, document: ExpandableDocument) -> float:
        f = document.count(term)
        if f <= 0:
            return 0.0
        # f > 0 implies max f >= f
        return self.k + (1.0 - self.k) * (f / max_count(document))


@dataclass(frozen=True)
class DoubleHalfNormalizationTf(DoubleNormalizationTf):
    """Double normalization with ``k = 0.5``."""

    k: float = field(default=0.5, init=False)
