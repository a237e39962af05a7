from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, Protocol

from src.application.ports.weighting_port import IdfStrategy, TfStrategy
from src.tfidf_kit.exceptions import UnknownSchemeError

from .idf import (
    InverseFrequencyIdf,
    InverseFrequencyMaxIdf,
    InverseFrequencySmoothIdf,
    ProbabilisticIdf,
    UnaryIdf,
)
from .scoring import TfIdf
from .tf import (
    BinaryTf,
    DoubleHalfNormalizationTf,
    DoubleNormalizationTf,
    LogNormalizationTf,
    RawCountTf,
    RawFrequencyTf,
)

logger = logging.getLogger(__name__)

TF_SCHEMES: dict[str, Callable[..., TfStrategy]] = {
    "binary": BinaryTf,
    "raw_count": RawCountTf,
    "raw_frequency": RawFrequencyTf,
    "log_normalization": LogNormalizationTf,
    "double_normalization": DoubleNormalizationTf,
    "double_half_normalization": DoubleHalfNormalizationTf,
}

IDF_SCHEMES: dict[str, Callable[..., IdfStrategy]] = {
    "unary": UnaryIdf,
    "inverse_frequency": InverseFrequencyIdf,
    "inverse_frequency_smooth": InverseFrequencySmoothIdf,
    "inverse_frequency_max": InverseFrequencyMaxIdf,
    "probabilistic": ProbabilisticIdf,
}

# TF schemes that take the normalization factor ``k``
_K_SCHEMES = {"double_normalization"}


class ScoringConfig(Protocol):
    tf_scheme: str
    idf_scheme: str
    double_k: float


def normalize_scheme_name(name: str) -> str:
    """Map user spellings such as ``" Log-Normalization "`` onto registry keys."""
    return name.strip().lower().replace("-", "_")


def get_tf(name: str, **params: Any) -> TfStrategy:
    try:
        factory = TF_SCHEMES[normalize_scheme_name(name)]
    except KeyError:
        raise UnknownSchemeError("tf", name, sorted(TF_SCHEMES)) from None
    return factory(**params)


def get_idf(name: str, **params: Any) -> IdfStrategy:
    try:
        factory = IDF_SCHEMES[normalize_scheme_name(name)]
    except KeyError:
        raise UnknownSchemeError("idf", name, sorted(IDF_SCHEMES)) from None
    return factory(**params)


def build_tfidf(tf_name: str, idf_name: str, *, k: float | None = None) -> TfIdf:
    """Build a :class:`TfIdf` from scheme names.

    ``k`` only applies to ``double_normalization`` and is ignored otherwise.
    """
    tf_params: dict[str, Any] = {}
    if k is not None and normalize_scheme_name(tf_name) in _K_SCHEMES:
        tf_params["k"] = k
    scorer = TfIdf(tf=get_tf(tf_name, **tf_params), idf=get_idf(idf_name))
    logger.debug("Selected scoring %s (tf=%s, idf=%s)", scorer.name, tf_name, idf_name)
    return scorer


def from_settings(settings: ScoringConfig) -> TfIdf:
    """Build the scorer named by ``tf_scheme``, ``idf_scheme`` and ``double_k``."""
    return build_tfidf(settings.tf_scheme, settings.idf_scheme, k=settings.double_k)
