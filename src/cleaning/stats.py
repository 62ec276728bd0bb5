"""Reading statistics for cleaned text."""

import math

# Average narration speed
DEFAULT_WORDS_PER_MINUTE = 150


def word_count(text: str) -> int:
    """Count whitespace-separated words in ``text``."""
    if not text:
        return 0
    return len(text.split())


def estimate_narration_minutes(
    text: str | int,
    words_per_minute: int = DEFAULT_WORDS_PER_MINUTE,
) -> int:
    """Estimate how long narrating a text takes.

    Args:
        text: Cleaned text, or an already computed word count.
        words_per_minute: Speaking rate.

    Returns:
        Whole minutes, rounded up. Zero for empty text.

    Raises:
        ValueError: If ``words_per_minute`` is not positive.
    """
    if words_per_minute <= 0:
        raise ValueError(f"words_per_minute must be positive, got {words_per_minute}")

    words = text if isinstance(text, int) else word_count(text)
    return math.ceil(words / words_per_minute)
