from __future__ import annotations


class TfIdfError(Exception):
    """Base class for errors raised around the scoring core."""


class UnknownSchemeError(TfIdfError, KeyError):
    """Raised when a TF or IDF scheme name is not registered."""

    def __init__(self, kind: str, name: str, known: list[str]) -> None:
        self.kind = kind
        self.name = name
        self.known = known
        super().__init__(f"unknown {kind} scheme {name!r}; expected one of: {', '.join(known)}")

    def __str__(self) -> str:
        # KeyError would repr() the message otherwise
        return str(self.args[0])


class ConfigurationError(TfIdfError):
    """Raised when TFIDF_* settings from the environment or .env do not validate."""


class UnsupportedDocumentError(TfIdfError, TypeError):
    """Raised when an object cannot be used as a document."""


class DocumentParseError(TfIdfError, ValueError):
    """Raised when an inline ``term:count`` document spec is malformed."""
