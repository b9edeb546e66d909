"""Sorting of task documents into the fixed categories the support widget renders."""
from typing import Iterable
from caseview.modules.documents.schemas import DocumentBuckets, DocumentOut

OTHER = "other"

# Ordered: when a label could match two buckets the first one declared wins.
DOCUMENT_CATEGORY_TYPES: dict[str, tuple[str, ...]] = {
    "permit": ("Placard", "Parking Permit"),
    "prescription": ("Prescription",),
    "cover_letter": ("Cover Letter",),
    "envelope": ("Envelope",),
    "physician_certificate": ("Physician Credentials",),
}

def _norm(label: str | None) -> str:
    return (label or "").strip().lower()

_LOOKUP: dict[str, str] = {}
for _bucket, _labels in DOCUMENT_CATEGORY_TYPES.items():
    for _label in _labels:
        _LOOKUP.setdefault(_norm(_label), _bucket)

def classify_document_type(raw_type: str | None) -> str:
    """Bucket field name for a raw document type; unknown or empty types go to ``other``."""
    normalized = _norm(raw_type)
    if not normalized:
        return OTHER
    return _LOOKUP.get(normalized, OTHER)

def build_document_buckets(documents: Iterable[DocumentOut]) -> DocumentBuckets:
    buckets = DocumentBuckets()
    for doc in documents:
        getattr(buckets, classify_document_type(doc.type)).append(doc)
    return buckets
