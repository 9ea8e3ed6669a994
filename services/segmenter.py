"""
Language-aware segmentation of article text into tokens.

Segmentation is lossless: every character of the input lands in exactly one
token, so ``"".join(segment(text, lang)) == text`` always holds. Whitespace and
punctuation come back as their own tokens; deciding what counts as a word is
left to the lexical indexer.
"""

import logging
import threading
from typing import Callable

import jieba
import regex

from core.errors import UnsupportedLanguage
from schemas.lang import LanguageCode

logger = logging.getLogger(__name__)

# Approximates the Unicode default word boundaries (UAX #29): letters, marks,
# digits and connectors cluster; ' ’ . join letters/digits on both sides;
# , ; join digits only (1,000.5). Horizontal whitespace runs are one token and
# anything else is split per grapheme cluster, which also keeps CRLF together.
_WORD_CHARS = r"[\p{L}\p{M}\p{N}\p{Pc}]"
TOKEN_PATTERN = regex.compile(
    rf"""
    {_WORD_CHARS}+
    (?:
        (?: ['’.] | (?<=\p{{N}}) [,;] (?=\p{{N}}) )
        {_WORD_CHARS}+
    )*
    | [\p{{Zs}}\t]+
    | \X
    """,
    regex.VERBOSE,
)

_chinese_model: jieba.Tokenizer | None = None
_chinese_model_lock = threading.Lock()


def get_chinese_model() -> jieba.Tokenizer:
    """Process-wide jieba tokenizer, built on first use and read-only afterwards."""
    global _chinese_model
    if _chinese_model is None:
        with _chinese_model_lock:
            if _chinese_model is None:
                logger.info("Loading jieba dictionary")
                model = jieba.Tokenizer()
                model.initialize()
                _chinese_model = model
                logger.info("jieba dictionary loaded")
    return _chinese_model


def _segment_whitespace_delimited(text: str) -> list[str]:
    return TOKEN_PATTERN.findall(text)


def _segment_chinese(text: str) -> list[str]:
    return list(get_chinese_model().cut(text, cut_all=False, HMM=True))


_SEGMENTERS: dict[LanguageCode, Callable[[str], list[str]]] = {
    LanguageCode.EN: _segment_whitespace_delimited,
    LanguageCode.DE: _segment_whitespace_delimited,
    LanguageCode.ZH: _segment_chinese,
}


def resolve_language(language: str | LanguageCode) -> LanguageCode:
    try:
        return LanguageCode(language)
    except ValueError as exc:
        raise UnsupportedLanguage(f"Unsupported language: {language!r}") from exc


def segment(text: str, language: str | LanguageCode) -> list[str]:
    return _SEGMENTERS[resolve_language(language)](text)


def warm_up() -> None:
    get_chinese_model()
