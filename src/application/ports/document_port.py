from __future__ import annotations

from collections.abc import Hashable, Iterable
from typing import Protocol, runtime_checkable

# Terms are opaque caller values; equality and hashing are the caller's.
Term = Hashable


@runtime_checkable
class NaiveDocument(Protocol):
    """A document that only knows whether a term occurs in it."""

    def contains(self, term: Term) -> bool:  # pragma: no cover - interface
        ...


@runtime_checkable
class ProcessedDocument(NaiveDocument, Protocol):
    """A document that knows how often each term occurs.

    ``contains(term)`` must agree with ``count(term) > 0``.
    """

    def count(self, term: Term) -> int:  # pragma: no cover - interface
        ...

    def total_count(self) -> int:  # pragma: no cover - interface
        ...


@runtime_checkable
class ExpandableDocument(ProcessedDocument, Protocol):
    """A processed document that can enumerate its ``(term, count)`` pairs.

    The returned iterable must be restartable; order is irrelevant.
    """

    def term_counts(self) -> Iterable[tuple[Term, int]]:  # pragma: no cover - interface
        ...
