"""PDF parsing utilities for document processing.

Transforms uploaded PDFs into narration-ready books through text
extraction and cleaning.

Responsibilities:
    - PDF text extraction with pypdf, per page and for the whole document
    - Metadata extraction (title, author, dates)
    - Book assembly: page-mode and document-mode cleaning, reading stats

The extractor output is raw; all text normalization lives in src.cleaning.
"""

from src.parsing.book import build_cleaned_book, title_from_filename
from src.parsing.pdf_parser import PDFParseError, parse_pdf

__all__ = ["PDFParseError", "build_cleaned_book", "parse_pdf", "title_from_filename"]
