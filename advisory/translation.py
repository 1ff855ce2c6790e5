"""Translation collaborator backed by the public Google Translate endpoint."""
from __future__ import annotations

import logging
from typing import Optional, Protocol

import requests
from requests import RequestException

from .cache import TTLCache

logger = logging.getLogger(__name__)

TRANSLATE_URL = "https://translate.googleapis.com/translate_a/single"
TRANSLATION_TTL_SECONDS = 24 * 60 * 60


class TranslationError(RuntimeError):
    """Raised when the translation service fails or answers with garbage."""


class Translator(Protocol):
    def translate(self, text: str, target_language: str) -> str:
        """Return ``text`` rendered in ``target_language``."""
        ...


class GoogleTranslateClient:
    """Translate English advisory text, memoizing results per language."""

    def __init__(
        self,
        *,
        url: str = TRANSLATE_URL,
        source_language: str = "en",
        timeout: float = 5.0,
        session: Optional[requests.Session] = None,
        cache: Optional[TTLCache] = None,
    ) -> None:
        self.url = url
        self.source_language = source_language
        self.timeout = timeout
        self.session = session or requests.Session()
        self.cache = cache if cache is not None else TTLCache()

    def translate(self, text: str, target_language: str) -> str:
        if not text.strip():
            return ""
        cache_key = f"{target_language}:{text}"
        cached = self.cache.get(cache_key)
        if cached is not None:
            return cached

        params = {
            "client": "gtx",
            "sl": self.source_language,
            "tl": target_language,
            "dt": "t",
            "q": text,
        }
        try:
            response = self.session.get(self.url, params=params, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except (RequestException, ValueError) as exc:
            logger.warning("Translation to %s failed: %s", target_language, exc)
            raise TranslationError(f"translation request failed: {exc}") from exc

        translated = _join_segments(data)
        if not translated:
            logger.warning("Empty translation to %s for %r", target_language, text)
            raise TranslationError("empty translation")
        self.cache.set(cache_key, translated, TRANSLATION_TTL_SECONDS)
        return translated


def _join_segments(data: object) -> str:
    # [[["<translated>", "<source>", ...], ...], ...]
    try:
        segments = data[0]  # type: ignore[index]
        return "".join(segment[0] for segment in segments if segment and segment[0])
    except (IndexError, KeyError, TypeError) as exc:
        raise TranslationError("unexpected translation response structure") from exc


__all__ = ["GoogleTranslateClient", "TranslationError", "Translator"]
