from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

from src.application.ports.document_port import NaiveDocument, Term
from src.application.ports.weighting_port import IdfStrategy, TfStrategy
from src.tfidf_kit.exceptions import UnsupportedDocumentError

from .documents import as_document
from .idf import InverseFrequencyIdf
from .tf import DoubleHalfNormalizationTf


def _require(obj: Any, capability: type, strategy: object, role: str) -> NaiveDocument:
    doc = as_document(obj)
    if not isinstance(doc, capability):
        raise UnsupportedDocumentError(
            f"{type(strategy).__name__} needs {role} documents to be {capability.__name__}, "
            f"got {type(doc).__name__}"
        )
    return doc


@dataclass(frozen=True)
class TfIdf:
    """Pairs a TF strategy with an IDF strategy.

    The score is the plain product of both; non-finite values produced by the
    chosen IDF pass through untouched. Each document is checked against the
    capability its strategy declares in ``requires``.
    """

    tf: TfStrategy
    idf: IdfStrategy

    def _corpus(self, corpus: Iterable[Any]) -> Iterator[NaiveDocument]:
        for d in corpus:
            yield _require(d, self.idf.requires, self.idf, "corpus")

    def tfidf(self, term: Term, document: Any, corpus: Iterable[Any]) -> float:
        doc = _require(document, self.tf.requires, self.tf, "scored")
        return self.tf.compute(term, doc) * self.idf.compute(term, self._corpus(corpus))

    __call__ = tfidf

    @property
    def name(self) -> str:
        return f"{type(self.tf).__name__}*{type(self.idf).__name__}"


# Double-half normalized TF weighted by plain inverse frequency
DEFAULT = TfIdf(tf=DoubleHalfNormalizationTf(), idf=InverseFrequencyIdf())


def tfidf(term: Term, document: Any, corpus: Iterable[Any]) -> float:
    """Score ``term`` in ``document`` against ``corpus`` with :data:`DEFAULT`."""
    return DEFAULT.tfidf(term, document, corpus)
