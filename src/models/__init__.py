"""Pydantic models for extracted content and API payloads.

Provides type safety, validation, and automatic OpenAPI documentation.

Models:
    - Page: One page of text with its 1-based number
    - PDFContent: Raw text, pages and metadata extracted from a PDF
    - CleanedBook: Narration-ready result of an upload
    - UploadResponse: Outgoing upload response
    - CleanRequest / CleanResponse: Text cleaning endpoint payloads
    - CleanMode: Document or page cleaning
"""

from src.models.schemas import (
    CleanedBook,
    CleanMode,
    CleanRequest,
    CleanResponse,
    Page,
    PDFContent,
    UploadResponse,
)

__all__ = [
    "CleanMode",
    "CleanRequest",
    "CleanResponse",
    "CleanedBook",
    "PDFContent",
    "Page",
    "UploadResponse",
]
