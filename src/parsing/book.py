"""Assemble a narration-ready book from extracted PDF content."""

import logging
import re

from src.cleaning import clean_document, clean_page, estimate_narration_minutes, word_count
from src.cleaning.stats import DEFAULT_WORDS_PER_MINUTE
from src.models.schemas import CleanedBook, Page, PDFContent

logger = logging.getLogger(__name__)

UNKNOWN_AUTHOR = "Unknown"
_PDF_SUFFIX_RE = re.compile(r"\.pdf$", re.IGNORECASE)
_FILENAME_SEPARATOR_RE = re.compile(r"[_-]")


def title_from_filename(filename: str) -> str:
    """Derive a readable title from an upload filename.

    ``"my_great-book.pdf"`` becomes ``"my great book"``.
    """
    stem = _PDF_SUFFIX_RE.sub("", filename)
    return _FILENAME_SEPARATOR_RE.sub(" ", stem).strip() or filename


def _metadata_value(metadata: dict[str, str | None], key: str) -> str | None:
    value = metadata.get(key)
    if value and value.strip():
        return value.strip()
    return None


def build_cleaned_book(
    content: PDFContent,
    filename: str,
    file_size: int = 0,
    words_per_minute: int = DEFAULT_WORDS_PER_MINUTE,
) -> CleanedBook:
    """Clean extracted PDF content into a book.

    Every page is cleaned on its own for page-by-page reading, and the full
    text is cleaned in document mode so running headers and footers are
    dropped from the continuous narration text.

    Args:
        content: Output of the PDF parser.
        filename: Original upload filename.
        file_size: Upload size in bytes.
        words_per_minute: Speaking rate for the duration estimate.

    Returns:
        The cleaned book.
    """
    pages = [
        Page(page_number=page.page_number, text=clean_page(page.text)) for page in content.pages
    ]
    cleaned_text = clean_document(content.text)
    words = word_count(cleaned_text)

    title = _metadata_value(content.metadata, "title") or title_from_filename(filename)
    author = _metadata_value(content.metadata, "author") or UNKNOWN_AUTHOR

    logger.info(
        f"Cleaned {filename}: {content.page_count} pages, "
        f"{len(content.text)} -> {len(cleaned_text)} chars, {words} words"
    )

    return CleanedBook(
        title=title,
        author=author,
        file_name=filename,
        total_pages=content.page_count,
        pages=pages,
        cleaned_text=cleaned_text,
        word_count=words,
        estimated_minutes=estimate_narration_minutes(words, words_per_minute),
        file_size=file_size,
    )
