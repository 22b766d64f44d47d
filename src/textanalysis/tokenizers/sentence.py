"""
Tokenize on periods only.
"""

from typing import Iterator

from .general import tokenize

SENTENCE_DELIMITER = "."


def tokenize_sentences(text: str) -> Iterator[str]:
    """Lazily yield the pieces of text between periods."""
    return tokenize(text, SENTENCE_DELIMITER)
