"""PDF Narrator - clean, narration-ready text from PDF documents.

Combines FastAPI for HTTP, pypdf for text extraction, and Pydantic for
data validation around a text cleaning pipeline.

Components:
    - cleaning: artifact, page-number, hyphenation, header/footer and
      whitespace stages, run in document or page mode
    - parsing: PDF extraction and book assembly
    - api: HTTP endpoints for uploads and text cleaning
    - models: Request/response schemas
    - config: Environment-driven settings
"""

__version__ = "0.1.0"
