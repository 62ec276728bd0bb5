"""Cleaning pipelines for document and page text.

A pipeline is an ordered tuple of named stages. Document mode and page mode
share every stage except repeated header/footer removal, which needs
statistics from the whole document.
"""

import logging
from collections.abc import Callable

from src.cleaning.stages import (
    normalize_whitespace,
    reconnect_hyphenated_words,
    remove_page_numbers,
    remove_repeated_lines,
    strip_artifacts,
)
from src.models.schemas import CleanMode

logger = logging.getLogger(__name__)

Stage = Callable[[str], str]


class CleaningPipeline:
    """Ordered sequence of text transformations.

    Each stage receives the full output of the previous one. Input that is
    missing or not a string cleans to an empty string.

    A later stage can form a pattern an earlier one removes, e.g. joining
    ``"pa-\\nge 3 of 10"`` yields a page phrase. With ``until_stable`` the
    stages are repeated until a pass leaves the text unchanged, so cleaned
    output is a fixed point of the pipeline. Stages used this way must never
    lengthen the text.

    Attributes:
        name: Label used in log messages.
        stages: Stages in execution order as ``(name, function)`` pairs.
        until_stable: Repeat the stages until the text stops changing.
    """

    def __init__(
        self,
        name: str,
        stages: tuple[tuple[str, Stage], ...],
        until_stable: bool = False,
    ) -> None:
        self.name = name
        self.stages = stages
        self.until_stable = until_stable

    @property
    def stage_names(self) -> tuple[str, ...]:
        return tuple(stage_name for stage_name, _ in self.stages)

    def run(self, text: object) -> str:
        """Run every stage over ``text``.

        Args:
            text: Raw extracted text. Anything other than a non-empty string
                is treated as an empty page.

        Returns:
            The cleaned text.
        """
        if not text or not isinstance(text, str):
            return ""

        cleaned = self._run_once(text)
        passes = 1
        if self.until_stable:
            previous = text
            while cleaned != previous:
                previous, cleaned = cleaned, self._run_once(cleaned)
                passes += 1

        logger.debug(
            f"{self.name} cleaning: {len(text)} -> {len(cleaned)} chars in {passes} pass(es)"
        )
        return cleaned

    def _run_once(self, text: str) -> str:
        for _, stage in self.stages:
            text = stage(text)
        return text

    def __call__(self, text: object) -> str:
        return self.run(text)

    def __repr__(self) -> str:
        return f"CleaningPipeline({self.name!r}, stages={list(self.stage_names)!r})"


PAGE_PIPELINE = CleaningPipeline(
    "page",
    (
        ("strip_artifacts", strip_artifacts),
        ("remove_page_numbers", remove_page_numbers),
        ("reconnect_hyphenated_words", reconnect_hyphenated_words),
        ("normalize_whitespace", normalize_whitespace),
    ),
    until_stable=True,
)

DOCUMENT_PIPELINE = CleaningPipeline(
    "document",
    (
        ("strip_artifacts", strip_artifacts),
        ("remove_page_numbers", remove_page_numbers),
        ("reconnect_hyphenated_words", reconnect_hyphenated_words),
        ("remove_repeated_lines", remove_repeated_lines),
        ("normalize_whitespace", normalize_whitespace),
    ),
    until_stable=True,
)

_PIPELINES: dict[CleanMode, CleaningPipeline] = {
    CleanMode.DOCUMENT: DOCUMENT_PIPELINE,
    CleanMode.PAGE: PAGE_PIPELINE,
}


def get_pipeline(mode: CleanMode) -> CleaningPipeline:
    """Return the pipeline for a cleaning mode."""
    return _PIPELINES[CleanMode(mode)]


def clean_document(raw_text: object) -> str:
    """Clean the concatenated text of a whole document.

    Args:
        raw_text: Text of every page, in page order.

    Returns:
        Cleaned text with running headers and footers removed.
    """
    return DOCUMENT_PIPELINE.run(raw_text)


def clean_page(page_text: object) -> str:
    """Clean the text of a single page in isolation."""
    return PAGE_PIPELINE.run(page_text)
