"""
Telugu explanations through an ordered chain of translators, cached in memory.

Translators are plain async callables ``(text) -> str`` supplied by the caller;
the first one to return non-empty text wins. The cache is keyed by the
stripped source text and is never evicted.
"""

import re
from typing import Awaitable, Callable, Dict, List, Optional

from loguru import logger

Translator = Callable[[str], Awaitable[str]]

_TELUGU_CHAR = re.compile(r'[\u0C00-\u0C7F]')
_WHITESPACE = re.compile(r'\s+')

TELUGU_SHARE = 0.4


class TranslationError(RuntimeError):
    pass


def is_mostly_telugu(text: str) -> bool:
    if not text:
        return False
    telugu = sum(1 for ch in text if _TELUGU_CHAR.match(ch))
    return telugu / len(text) > TELUGU_SHARE


def clean_output(text: str) -> str:
    return _WHITESPACE.sub(" ", text).strip()


class TeluguExplainer:
    def __init__(self, translators: List[Translator]):
        self.translators = list(translators)
        self._cache: Dict[str, str] = {}

    @property
    def cache_size(self) -> int:
        return len(self._cache)

    async def explain(self, source_text: str) -> str:
        normalized = source_text.strip()
        if not normalized:
            return ""

        if is_mostly_telugu(normalized):
            return normalized

        if normalized in self._cache:
            return self._cache[normalized]

        last_error: Optional[Exception] = None
        translated = ""
        for translator in self.translators:
            try:
                translated = clean_output(await translator(normalized) or "")
            except Exception as e:
                logger.warning(f"Translator {getattr(translator, '__name__', translator)} failed: {e}")
                last_error = e
                continue
            if translated:
                break

        if not translated:
            if last_error:
                reason = str(last_error)
            elif not self.translators:
                reason = "no translators configured"
            else:
                reason = "empty output"
            raise TranslationError(f"Telugu explanation failed from all providers: {reason}")

        self._cache[normalized] = translated
        return translated
