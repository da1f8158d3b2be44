"""
Text cleanup and tokenization.

Documents and queries go through the same two steps so that query tokens
land in the same space as the indexed vocabulary:

    tokens = tokenize(clean_text(raw))
"""

from __future__ import annotations

import re

from vsm_search.errors import EmptyInputError

ENGLISH_STOPWORDS: frozenset[str] = frozenset([
    "a", "about", "after", "all", "also", "an", "and", "any", "are", "as",
    "at", "be", "been", "but", "by", "can", "could", "do", "does", "for",
    "from", "had", "has", "have", "he", "her", "him", "his", "how", "i",
    "if", "in", "into", "is", "it", "its", "just", "me", "more", "most",
    "my", "no", "not", "of", "on", "only", "or", "other", "our", "out", "s",
    "she", "so", "some", "such", "t", "than", "that", "the", "their", "them",
    "then", "there", "these", "they", "this", "to", "too", "us", "very",
    "was", "we", "were", "what", "when", "where", "which", "who", "will",
    "with", "would", "you", "your",
])

# Structured elements, stripped before the letter filter destroys their delimiters.
_CODE_BLOCK_PATTERN = re.compile(r"```[a-z]*\n[\s\S]*?\n```")
# Front matter only; later "---" lines are horizontal rules.
_YAML_BLOCK_PATTERN = re.compile(r"\A---[a-z]*\n[\s\S]*?\n---")
# No whitespace just inside the delimiters and no digit after the closing "$",
# so "$5 or $10" is left alone.
_MATH_PATTERN = re.compile(r"\$(?=\S)[^$\n]*?(?<=\S)\$(?!\d)")
_URL_PATTERN = re.compile(
    r"https?://(www\.)?[-a-z0-9@:%._+~#=]{1,256}\.[a-z0-9()]{1,6}\b([-a-z0-9()@:%_+.~#?&/=]*)"
)
# Bare links need a "www." prefix or a path, so "numpy.array" stays two words.
_DOMAIN_PATTERN = re.compile(
    r"(\bwww\.[-a-z0-9]+(\.[-a-z0-9]+)+|\b[-a-z0-9]+(\.[-a-z0-9]+)*\.[a-z]{2,6}/)"
    r"[-a-z0-9()@:%_+.~#?&/=]*"
)
_NON_LETTER_PATTERN = re.compile(r"[^a-z ]")
_SPACES_PATTERN = re.compile(r" +")

_STRIP_PATTERNS = (
    _CODE_BLOCK_PATTERN,
    _YAML_BLOCK_PATTERN,
    _MATH_PATTERN,
    _URL_PATTERN,
    _DOMAIN_PATTERN,
    _NON_LETTER_PATTERN,
    _SPACES_PATTERN,
)


def clean_text(text: str) -> str:
    """
    Lowercase text and strip everything that is not a plain word.

    Removes code fences, YAML blocks, ``$...$`` math spans, URLs and
    domain-like strings, then every character other than an ASCII letter or
    a space, and finally collapses runs of spaces.
    """
    output = text.lower()
    for pattern in _STRIP_PATTERNS:
        output = pattern.sub(" ", output)
    return output


def tokenize(text: str) -> list[str]:
    """
    Split cleaned text on whitespace and drop stop words.

    Raises:
        EmptyInputError: if no token survives.
    """
    tokens = [t for t in text.split() if t not in ENGLISH_STOPWORDS]
    if not tokens:
        raise EmptyInputError("No words found.")
    return tokens
