"""
Index a token stream for progressive reading.

Sentences and pages are ``(start, end)`` half-open ranges of token indexes.
Both partition the stream: ranges are contiguous, non-empty and cover every
token exactly once. Empty input indexes to no sentences and no pages.
"""

from dataclasses import dataclass, field
from typing import Sequence

import regex

TokenRange = tuple[int, int]

SENTENCE_TERMINALS = frozenset(".!?。！？…‼⁇⁈⁉．｡")
_WORD_LIKE = regex.compile(r"[\p{L}\p{N}]")
# closing quotes/brackets that still belong to the sentence they follow
_CLOSERS = regex.compile(r"^[\p{Pe}\p{Pf}\"'」』]+$")


@dataclass(frozen=True)
class LexicalIndex:
    sentences: list[TokenRange] = field(default_factory=list)
    unique_words: dict[str, bool] = field(default_factory=dict)
    pages: list[TokenRange] = field(default_factory=list)


def normalize_word(word: str) -> str:
    """Case-fold a word the same way for article indexes and user word data."""
    return word.strip().lower()


def is_word_like(token: str) -> bool:
    return _WORD_LIKE.search(token) is not None


def _is_terminal(token: str) -> bool:
    return bool(token) and all(ch in SENTENCE_TERMINALS for ch in token)


def _is_trailer(token: str) -> bool:
    return token.isspace() or _CLOSERS.match(token) is not None


def split_sentences(tokens: Sequence[str]) -> list[TokenRange]:
    sentences: list[TokenRange] = []
    start = 0
    terminated = False
    for i, token in enumerate(tokens):
        if _is_terminal(token):
            terminated = True
            continue
        if terminated and not _is_trailer(token):
            sentences.append((start, i))
            start = i
            terminated = False
    if start < len(tokens):
        sentences.append((start, len(tokens)))
    return sentences


def extract_unique_words(tokens: Sequence[str]) -> dict[str, bool]:
    return {normalize_word(token): True for token in tokens if is_word_like(token)}


def paginate(token_count: int, page_size: int) -> list[TokenRange]:
    if page_size < 1:
        raise ValueError("page_size must be a positive number of tokens")
    return [(start, min(start + page_size, token_count)) for start in range(0, token_count, page_size)]


def index(tokens: Sequence[str], page_size: int) -> LexicalIndex:
    return LexicalIndex(
        sentences=split_sentences(tokens),
        unique_words=extract_unique_words(tokens),
        pages=paginate(len(tokens), page_size),
    )
