"""Name enrichment via external lookup services."""

from .enricher import Enricher
from .extraction import Found, Missing, decode, extract
from .lookup import LookupClient, LookupServiceError

__all__ = [
    "Enricher",
    "Found",
    "LookupClient",
    "LookupServiceError",
    "Missing",
    "decode",
    "extract",
]
