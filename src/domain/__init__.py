"""Domain layer: pure scoring logic (no I/O, no logging in the hot path).

Documents are read only through the capability ports in
``src.application.ports``; nothing here depends on a concrete container.
"""

from .documents import (
    CountMapDocument,
    PairListDocument,
    TermListDocument,
    TermSetDocument,
    as_document,
    max_count,
)
from .idf import (
    InverseFrequencyIdf,
    InverseFrequencyMaxIdf,
    InverseFrequencySmoothIdf,
    ProbabilisticIdf,
    SmoothedInverseFrequencyIdf,
    UnaryIdf,
    document_frequency,
)
from .schemes import IDF_SCHEMES, TF_SCHEMES, build_tfidf, from_settings, get_idf, get_tf
from .scoring import DEFAULT, TfIdf, tfidf
from .tf import (
    BinaryTf,
    DoubleHalfNormalizationTf,
    DoubleNormalizationTf,
    LogNormalizationTf,
    RawCountTf,
    RawFrequencyTf,
)

__all__ = [
    "CountMapDocument",
    "PairListDocument",
    "TermListDocument",
    "TermSetDocument",
    "as_document",
    "max_count",
    "BinaryTf",
    "RawCountTf",
    "RawFrequencyTf",
    "LogNormalizationTf",
    "DoubleNormalizationTf",
    "DoubleHalfNormalizationTf",
    "UnaryIdf",
    "InverseFrequencyIdf",
    "InverseFrequencySmoothIdf",
    "SmoothedInverseFrequencyIdf",
    "InverseFrequencyMaxIdf",
    "ProbabilisticIdf",
    "document_frequency",
    "TfIdf",
    "DEFAULT",
    "tfidf",
    "TF_SCHEMES",
    "IDF_SCHEMES",
    "get_tf",
    "get_idf",
    "build_tfidf",
    "from_settings",
]
