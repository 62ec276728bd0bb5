from enum import Enum

from pydantic import BaseModel, Field


class CleanMode(str, Enum):
    """Which cleaning pipeline to run."""

    DOCUMENT = "document"
    PAGE = "page"


class Page(BaseModel):
    """Text of a single PDF page.

    Attributes:
        page_number: 1-based position in extraction order.
        text: Page text (raw or cleaned, depending on where it is used).
    """

    page_number: int = Field(..., ge=1)
    text: str = ""


class PDFContent(BaseModel):
    """Extracted content from a PDF file.

    Attributes:
        text: Page texts joined in page order.
        pages: Per-page text, numbered from 1.
        page_count: Total number of pages in the document.
        metadata: Document metadata (title, author, etc.).
    """

    text: str
    pages: list[Page]
    page_count: int = Field(ge=0)
    metadata: dict[str, str | None]


class CleanedBook(BaseModel):
    """A PDF turned into narration-ready text.

    Attributes:
        title: Title from PDF metadata, or derived from the filename.
        author: Author from PDF metadata, or "Unknown".
        file_name: Original upload filename.
        total_pages: Number of pages in the PDF.
        pages: Each page cleaned on its own.
        cleaned_text: Whole document cleaned with header/footer removal.
        word_count: Words in ``cleaned_text``.
        estimated_minutes: Narration time for ``cleaned_text``.
        file_size: Upload size in bytes.
    """

    title: str
    author: str = "Unknown"
    file_name: str
    total_pages: int = Field(ge=0)
    pages: list[Page] = Field(default_factory=list)
    cleaned_text: str = ""
    word_count: int = Field(default=0, ge=0)
    estimated_minutes: int = Field(default=0, ge=0)
    file_size: int = Field(default=0, ge=0)


class UploadResponse(BaseModel):
    """Response after PDF upload processing.

    Attributes:
        success: Whether the upload was processed.
        book: The cleaned book.
    """

    success: bool
    book: CleanedBook | None = None


class CleanRequest(BaseModel):
    """Request payload for the text cleaning endpoint."""

    text: str = Field(..., description="Raw extracted text")
    mode: CleanMode = Field(CleanMode.DOCUMENT, description="Cleaning mode: 'document' or 'page'")


class CleanResponse(BaseModel):
    """Cleaned text with reading statistics."""

    text: str
    mode: CleanMode
    word_count: int = Field(ge=0)
    estimated_minutes: int = Field(ge=0)
