"""Recipient store and CSV ingestion."""

from .models import Recipient  # re-export
from .config import StoreConfig  # re-export
from .store import RecipientStore  # re-export
from .ingest import IngestReport, ingest  # re-export

__all__ = ["IngestReport", "Recipient", "RecipientStore", "StoreConfig", "ingest"]
