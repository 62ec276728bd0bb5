"""Text cleaning for PDF-extracted text.

Turns the raw character stream produced by a PDF text extractor into prose
fit for narration and on-screen reading.

Stages (in order):
    - strip_artifacts: form feeds, null characters, symbol-only lines
    - remove_page_numbers: "Page N of M", "- N -" and bare number lines
    - reconnect_hyphenated_words: "com-\\nputer" -> "computer"
    - remove_repeated_lines: running headers/footers (document mode only)
    - normalize_whitespace: single spaces, trimmed lines, one blank line max

All stages are pure functions with no shared state, so cleaning calls can
run concurrently.
"""

from src.cleaning.pipeline import (
    DOCUMENT_PIPELINE,
    PAGE_PIPELINE,
    CleaningPipeline,
    clean_document,
    clean_page,
    get_pipeline,
)
from src.cleaning.stats import estimate_narration_minutes, word_count

__all__ = [
    "DOCUMENT_PIPELINE",
    "PAGE_PIPELINE",
    "CleaningPipeline",
    "clean_document",
    "clean_page",
    "estimate_narration_minutes",
    "get_pipeline",
    "word_count",
]
