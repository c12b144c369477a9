"""Course-notes PDF to materials outline extraction pipeline package."""

from .models import ContentRecord, DocumentOutcome, ExtractedDocument, RouteTarget

__all__ = ["ContentRecord", "DocumentOutcome", "ExtractedDocument", "RouteTarget"]
