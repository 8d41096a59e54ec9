"""
Keyword sentiment classification.

Free text is classified by counting how many keywords of each polarity
it contains (case-insensitive substring match, each keyword counted at
most once). The polarity with more matches wins; a tie, including no
matches at all, is neutral. Empty or missing text is neutral.
"""

from enum import Enum
from typing import Optional, Sequence


class Sentiment(Enum):
    """Polarity of a piece of feedback."""
    POSITIVE = "positive"
    NEUTRAL = "neutral"
    NEGATIVE = "negative"


def count_keyword_matches(text: str, keywords: Sequence[str]) -> int:
    lowered = text.lower()
    return sum(1 for keyword in keywords if keyword.lower() in lowered)


def classify_text(
    text: Optional[str],
    positive_keywords: Sequence[str],
    negative_keywords: Sequence[str]
) -> Sentiment:
    """
    Classify free text by keyword majority.

    Args:
        text: Text to classify (None or empty is neutral)
        positive_keywords: Keywords signalling positive sentiment
        negative_keywords: Keywords signalling negative sentiment

    Returns:
        Sentiment of the text
    """
    if not text:
        return Sentiment.NEUTRAL

    positive = count_keyword_matches(text, positive_keywords)
    negative = count_keyword_matches(text, negative_keywords)

    if positive > negative:
        return Sentiment.POSITIVE
    if negative > positive:
        return Sentiment.NEGATIVE
    return Sentiment.NEUTRAL
