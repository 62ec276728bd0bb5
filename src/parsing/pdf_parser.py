"""PDF parsing module using pypdf.

Extracts per-page text and metadata from PDF files with validation.
"""

import io
import logging

from pypdf import PdfReader
from pypdf.errors import PdfReadError

from src.models.schemas import Page, PDFContent

logger = logging.getLogger(__name__)

# Constants
MAX_FILE_SIZE = 50 * 1024 * 1024  # 50MB
PDF_MAGIC_BYTES = b"%PDF"
PAGE_SEPARATOR = "\n\n"


class PDFParseError(Exception):
    """Raised when PDF parsing fails."""

    pass


def _validate_pdf_bytes(file_content: bytes, max_size: int) -> None:
    """Validate PDF file content before parsing.

    Args:
        file_content: Raw bytes of the PDF file.
        max_size: Largest accepted size in bytes.

    Raises:
        PDFParseError: If validation fails.
    """
    if not file_content:
        raise PDFParseError("Empty file provided")

    if len(file_content) > max_size:
        size_mb = len(file_content) / (1024 * 1024)
        limit_mb = max_size / (1024 * 1024)
        raise PDFParseError(
            f"File size ({size_mb:.1f}MB) exceeds maximum allowed ({limit_mb:.0f}MB)"
        )

    if not file_content.lstrip()[:10].startswith(PDF_MAGIC_BYTES):
        raise PDFParseError("Invalid PDF: file does not start with PDF header")


def _extract_metadata(reader: PdfReader) -> dict[str, str | None]:
    """Extract metadata from PDF reader.

    Args:
        reader: Initialized PdfReader instance.

    Returns:
        Dictionary of metadata fields.
    """
    metadata: dict[str, str | None] = {}

    try:
        if reader.metadata:
            # Standard PDF metadata fields
            metadata["title"] = reader.metadata.get("/Title")
            metadata["author"] = reader.metadata.get("/Author")
            metadata["subject"] = reader.metadata.get("/Subject")
            metadata["creator"] = reader.metadata.get("/Creator")
            metadata["producer"] = reader.metadata.get("/Producer")

            # Handle dates (can be complex PDF date format)
            creation_date = reader.metadata.get("/CreationDate")
            if creation_date:
                metadata["creation_date"] = str(creation_date)

            mod_date = reader.metadata.get("/ModDate")
            if mod_date:
                metadata["modification_date"] = str(mod_date)
    except Exception as e:
        logger.warning(f"Failed to extract some metadata: {e}")

    return {k: str(v) for k, v in metadata.items() if v is not None}


def _extract_pages(reader: PdfReader) -> list[Page]:
    """Extract the text of every page in order.

    A page whose text cannot be extracted is kept with empty text so page
    numbers stay sequential.
    """
    pages: list[Page] = []
    for i, page in enumerate(reader.pages):
        try:
            page_text = page.extract_text() or ""
        except Exception as e:
            logger.warning(f"Failed to extract text from page {i + 1}: {e}")
            page_text = ""
        pages.append(Page(page_number=i + 1, text=page_text))
    return pages


def parse_pdf(file_content: bytes, max_size: int = MAX_FILE_SIZE) -> PDFContent:
    """Parse a PDF file and extract its text content.

    Args:
        file_content: Raw bytes of the PDF file.
        max_size: Largest accepted size in bytes.

    Returns:
        PDFContent with whole-document text, per-page text, page count
        and metadata.

    Raises:
        PDFParseError: If the file is invalid, too large, empty, or corrupt.
    """
    _validate_pdf_bytes(file_content, max_size)

    try:
        reader = PdfReader(io.BytesIO(file_content))
        page_count = len(reader.pages)
    except PdfReadError as e:
        raise PDFParseError(f"Corrupt or invalid PDF: {e}") from e
    except Exception as e:
        raise PDFParseError(f"Failed to read PDF: {e}") from e

    if page_count == 0:
        raise PDFParseError("PDF contains no pages")

    pages = _extract_pages(reader)
    text = PAGE_SEPARATOR.join(page.text for page in pages)

    if not text.strip():
        logger.warning("PDF contains no extractable text (may be scanned/image-based)")

    metadata = _extract_metadata(reader)

    return PDFContent(
        text=text,
        pages=pages,
        page_count=page_count,
        metadata=metadata,
    )
