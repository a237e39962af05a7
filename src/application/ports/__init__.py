from .document_port import ExpandableDocument, NaiveDocument, ProcessedDocument, Term
from .weighting_port import IdfStrategy, TfStrategy

__all__ = [
    "Term",
    "NaiveDocument",
    "ProcessedDocument",
    "ExpandableDocument",
    "TfStrategy",
    "IdfStrategy",
]
