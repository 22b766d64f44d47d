"""
General purpose tokenizer splitting text on a set of delimiter characters.
"""

from typing import Iterator

DEFAULT_DELIMITERS = " \n\t\r"


def tokenize(text: str, delimiters: str = DEFAULT_DELIMITERS) -> Iterator[str]:
    """
    Lazily yield the tokens of text.

    Any character in delimiters ends a token. Runs of delimiters never
    produce empty tokens.
    """
    start = None
    for index, char in enumerate(text):
        if char in delimiters:
            if start is not None:
                yield text[start:index]
                start = None
        elif start is None:
            start = index

    if start is not None:
        yield text[start:]
