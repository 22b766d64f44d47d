"""
Delimiter based text tokenizers.
"""

from .general import DEFAULT_DELIMITERS, tokenize
from .sentence import SENTENCE_DELIMITER, tokenize_sentences

__all__ = ["DEFAULT_DELIMITERS", "tokenize", "SENTENCE_DELIMITER", "tokenize_sentences"]
