from __future__ import annotations

import numbers
from collections import Counter
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from src.application.ports.document_port import ExpandableDocument, NaiveDocument, Term
from src.tfidf_kit.exceptions import UnsupportedDocumentError


def _check_count(term: Term, n: Any) -> int:
    if isinstance(n, bool) or not isinstance(n, numbers.Integral):
        raise ValueError(f"count for term {term!r} must be an integer, got {type(n).__name__}")
    if n < 0:
        raise ValueError(f"count for term {term!r} must be non-negative, got {n}")
    return int(n)


class _CountsView:
    """Shared read operations over a frozen ``term -> count`` mapping.

    Subclasses store the mapping in ``_counts``; only positive counts are kept
    there so containment and enumeration stay consistent with ``count``.
    """

    _counts: Mapping[Term, int]

    def contains(self, term: Term) -> bool:
        return term in self._counts

    def count(self, term: Term) -> int:
        return self._counts.get(term, 0)

    def total_count(self) -> int:
        return sum(self._counts.values())

    def term_counts(self) -> Iterable[tuple[Term, int]]:
        return tuple(self._counts.items())

    def __len__(self) -> int:
        return len(self._counts)

    # Equal when the positive counts agree, whatever container built them
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, _CountsView):
            return NotImplemented
        return dict(self._counts) == dict(other._counts)

    def __hash__(self) -> int:
        return hash(frozenset(self._counts.items()))


@dataclass(frozen=True, eq=False)
class CountMapDocument(_CountsView):
    """Sparse ``term -> count`` document."""

    counts: Mapping[Term, int]
    _counts: Mapping[Term, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        kept = {t: _check_count(t, n) for t, n in self.counts.items()}
        object.__setattr__(self, "counts", MappingProxyType(kept))
        object.__setattr__(
            self, "_counts", MappingProxyType({t: n for t, n in kept.items() if n > 0})
        )


@dataclass(frozen=True, eq=False)
class PairListDocument(_CountsView):
    """Document given as ``(term, count)`` pairs; repeated terms accumulate."""

    pairs: Sequence[tuple[Term, int]]
    _counts: Mapping[Term, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        acc: dict[Term, int] = {}
        for term, n in self.pairs:
            acc[term] = acc.get(term, 0) + _check_count(term, n)
        object.__setattr__(self, "pairs", tuple(self.pairs))
        object.__setattr__(self, "_counts", MappingProxyType({t: n for t, n in acc.items() if n}))


@dataclass(frozen=True, eq=False)
class TermListDocument(_CountsView):
    """Document built from a raw token sequence, one entry per occurrence."""

    terms: Sequence[Term]
    _counts: Mapping[Term, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "terms", tuple(self.terms))
        object.__setattr__(self, "_counts", MappingProxyType(dict(Counter(self.terms))))


@dataclass(frozen=True)
class TermSetDocument:
    """Naive document: membership only, no counts."""

    terms: frozenset[Term]

    def __post_init__(self) -> None:
        object.__setattr__(self, "terms", frozenset(self.terms))

    def contains(self, term: Term) -> bool:
        return term in self.terms


def max_count(document: ExpandableDocument) -> int:
    """Largest count of any term in ``document``; 0 when it is empty."""
    return max((n for _t, n in document.term_counts()), default=0)


def _is_pair(item: object) -> bool:
    return (
        isinstance(item, tuple)
        and len(item) == 2
        and isinstance(item[1], numbers.Integral)
        and not isinstance(item[1], bool)
    )


def as_document(obj: Any) -> NaiveDocument:
    """Return ``obj`` as a document, wrapping plain containers.

    Objects already exposing ``contains`` pass through unchanged. A mapping is
    read as ``term -> count`` and a list/tuple of ``(term, count)`` pairs as a
    pair list.
    """
    if isinstance(obj, NaiveDocument):
        return obj
    if isinstance(obj, Mapping):
        return CountMapDocument(obj)
    if isinstance(obj, (list, tuple)) and all(_is_pair(item) for item in obj):
        return PairListDocument(obj)
    raise UnsupportedDocumentError(
        f"cannot use {type(obj).__name__} as a document; pass a mapping of term counts, "
        "a list of (term, count) pairs or an object with a contains() method"
    )
