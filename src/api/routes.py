"""PDF upload endpoint for document ingestion.

Handles file upload, validation, parsing and cleaning. Nothing is stored;
the cleaned book is returned to the caller.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, UploadFile, status

from src.config import Settings, get_settings
from src.models.schemas import UploadResponse
from src.parsing.book import build_cleaned_book
from src.parsing.pdf_parser import PDFParseError, parse_pdf

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/upload", tags=["upload"])


def _validate_file_extension(filename: str | None) -> str:
    """Validate that file has .pdf extension.

    Args:
        filename: The uploaded filename.

    Returns:
        The validated filename.

    Raises:
        HTTPException: 400 if extension is invalid.
    """
    if not filename:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Filename is required",
        )

    if not filename.lower().endswith(".pdf"):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Only PDF files are accepted",
        )

    return filename


async def _read_and_validate_size(file: UploadFile, max_bytes: int) -> bytes:
    """Read file content and validate size.

    Args:
        file: The uploaded file.
        max_bytes: Upload limit in bytes.

    Returns:
        File content as bytes.

    Raises:
        HTTPException: 413 if file exceeds size limit.
    """
    content = await file.read()

    if len(content) > max_bytes:
        size_mb = len(content) / (1024 * 1024)
        limit_mb = max_bytes / (1024 * 1024)
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"File size ({size_mb:.1f}MB) exceeds maximum allowed ({limit_mb:.0f}MB)",
        )

    return content


@router.post("/pdf", response_model=UploadResponse, status_code=status.HTTP_201_CREATED)
async def upload_pdf(
    file: UploadFile,
    settings: Settings = Depends(get_settings),
) -> UploadResponse:
    """Upload a PDF and return its cleaned text.

    Extracts the text of every page, cleans each page on its own and the
    whole document with running header/footer removal.

    Args:
        file: The uploaded PDF file (multipart/form-data).
        settings: Service settings.

    Returns:
        UploadResponse with the cleaned book, status 201.

    Raises:
        400: Invalid file (not PDF, empty, corrupt).
        413: File exceeds the configured size limit.
    """
    filename = _validate_file_extension(file.filename)
    content = await _read_and_validate_size(file, settings.max_upload_bytes)

    try:
        pdf_content = parse_pdf(content, max_size=settings.max_upload_bytes)
    except PDFParseError as e:
        logger.warning(f"PDF parse error for {filename}: {e}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e

    book = build_cleaned_book(
        pdf_content,
        filename=filename,
        file_size=len(content),
        words_per_minute=settings.words_per_minute,
    )
    logger.info(f"Successfully ingested PDF: {filename} ({book.total_pages} pages)")

    return UploadResponse(success=True, book=book)
