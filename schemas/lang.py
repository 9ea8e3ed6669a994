from enum import Enum
from typing import Annotated

from pydantic import BeforeValidator


class LanguageCode(str, Enum):
    EN = "en"
    DE = "de"
    ZH = "zh"


LANG_NORMALIZER = {
    "en": "en",
    "english": "en",
    "eng": "en",
    "de": "de",
    "german": "de",
    "deutsch": "de",
    "ger": "de",
    "zh": "zh",
    "chinese": "zh",
    "zho": "zh",
    "中文": "zh",
}


def normalize_lang(value):
    if isinstance(value, str):
        return LANG_NORMALIZER.get(value.strip().lower(), value)
    return value


Lang = Annotated[LanguageCode, BeforeValidator(normalize_lang)]
