from __future__ import annotations

from collections.abc import Iterable
from typing import Any, ClassVar, Protocol

from .document_port import NaiveDocument, Term


class TfStrategy(Protocol):
    """Term-frequency weighting of one term inside one document."""

    # Minimum document capability the strategy reads through.
    requires: ClassVar[type[Any]]

    def compute(self, term: Term, document: NaiveDocument) -> float:  # pragma: no cover
        ...


class IdfStrategy(Protocol):
    """Inverse-document-frequency weighting of one term across a corpus."""

    requires: ClassVar[type[Any]]

    def compute(
        self, term: Term, corpus: Iterable[NaiveDocument]
    ) -> float:  # pragma: no cover - interface
        ...
