"""Text cleaning stages for PDF-extracted text.

Each stage is a pure ``str -> str`` function. The pipeline module decides
which stages run and in what order; nothing here depends on call order
beyond what each docstring states about its expected input.
"""

import re
from collections import Counter
from collections.abc import Iterable, Mapping
from types import MappingProxyType

# Artifact stripping
NON_NEWLINE_WHITESPACE_RE = re.compile(r"[^\S\n]+")
# Line with no alphanumerics and at least one visible character, plus its break
SYMBOL_LINE_RE = re.compile(r"^(?=.*\S)(?:[^\w\n]|_)*(?:\n|$)", re.MULTILINE)

# Page numbers
PAGE_OF_RE = re.compile(r"page\s+\d+\s+of\s+\d+", re.IGNORECASE)
DASHED_PAGE_NUMBER_RE = re.compile(r"^[ \t]*-[ \t]*\d+[ \t]*-[ \t]*(?:\n|$)", re.MULTILINE)
BARE_PAGE_NUMBER_RE = re.compile(r"^[ \t]*\d{1,4}[ \t]*(?:\n|$)", re.MULTILINE)

# Hyphenation: the second fragment is only looked at, so "a-\nb-\nc" chains
HYPHEN_BREAK_RE = re.compile(r"(?<![^\W_])([^\W_]+)-[ \t]*\n\s*(?=([^\W_]+))")

# Whitespace
SPACE_RUN_RE = re.compile(r"[ \t]+")
BLANK_GAP_RE = re.compile(r"\n{3,}")

# Header/footer eligibility, exclusive bounds on the trimmed line length
MIN_REPEATED_LINE_LENGTH = 3
MAX_REPEATED_LINE_LENGTH = 100
MAX_LINE_OCCURRENCES = 3


def strip_artifacts(text: str) -> str:
    """Remove extraction-level noise.

    Form feeds become newlines, null characters are dropped, runs of
    non-newline whitespace collapse to one space, and lines made only of
    symbols (rules, bullets, dashes) are removed.

    Args:
        text: Raw extracted text.

    Returns:
        Newline-delimited text with single spaces inside lines.
    """
    text = text.replace("\f", "\n").replace("\x00", "")
    text = NON_NEWLINE_WHITESPACE_RE.sub(" ", text)
    return SYMBOL_LINE_RE.sub("", text)


def remove_page_numbers(text: str) -> str:
    """Remove page-number patterns.

    Inline ``Page N of M`` phrases are deleted without a separator, so the
    surrounding words may end up joined by spaces only. A line the deletion
    leaves with nothing but symbols (``"- Page 3 of 10 -"``) goes with it.
    Lines that hold nothing but ``- N -`` or a 1-4 digit number are removed
    entirely.
    """
    text = PAGE_OF_RE.sub("", text)
    text = SYMBOL_LINE_RE.sub("", text)
    text = DASHED_PAGE_NUMBER_RE.sub("", text)
    return BARE_PAGE_NUMBER_RE.sub("", text)


def _join_fragments(match: re.Match[str]) -> str:
    head, tail = match.group(1), match.group(2)
    if head.isdecimal() and tail.isdecimal():
        # Numeric range broken at the line end, e.g. "pages 12-\n34"
        return f"{head}-"
    return head


def reconnect_hyphenated_words(text: str) -> str:
    """Rejoin words split by a hyphen at a line break.

    ``"com-\\nputer"`` becomes ``"computer"``. Must run after page-number
    removal so a page number between the two fragments is already gone.
    """
    return HYPHEN_BREAK_RE.sub(_join_fragments, text)


def _is_countable(trimmed: str) -> bool:
    return MIN_REPEATED_LINE_LENGTH < len(trimmed) < MAX_REPEATED_LINE_LENGTH


def build_line_frequencies(lines: Iterable[str]) -> Mapping[str, int]:
    """Count trimmed lines eligible for header/footer detection.

    Args:
        lines: Lines of a whole document.

    Returns:
        Read-only mapping of trimmed line to number of occurrences.
    """
    trimmed_lines = (line.strip() for line in lines)
    counts = Counter(trimmed for trimmed in trimmed_lines if _is_countable(trimmed))
    return MappingProxyType(counts)


def remove_repeated_lines(text: str) -> str:
    """Drop running headers and footers.

    A line whose trimmed form occurs more than three times in the text is
    treated as a header or footer. Only lines longer than 3 and shorter than
    100 characters qualify; everything else is kept in its original order.

    Needs the whole document to be meaningful, so page-level cleaning skips it.
    """
    lines = text.split("\n")
    frequencies = build_line_frequencies(lines)
    kept = [line for line in lines if frequencies.get(line.strip(), 0) <= MAX_LINE_OCCURRENCES]
    return "\n".join(kept)


def normalize_whitespace(text: str) -> str:
    """Collapse spaces, trim every line and limit blank runs to one line."""
    text = SPACE_RUN_RE.sub(" ", text)
    text = "\n".join(line.strip() for line in text.split("\n"))
    text = BLANK_GAP_RE.sub("\n\n", text)
    return text.strip()
