"""Bilingual rendering of advisory items with per-item fallback."""
from __future__ import annotations

import enum
import logging
from concurrent.futures import Future, ThreadPoolExecutor, wait
from dataclasses import replace
from typing import List, Optional, Sequence

from .entities import AdvisoryItem
from .errors import InvalidInput
from .health import HealthRegistry, default_registry
from .translation import Translator

logger = logging.getLogger(__name__)


class Language(str, enum.Enum):
    SOURCE = "en"
    KANNADA = "kn"

    @classmethod
    def parse(cls, value: Optional[str]) -> "Language":
        if value is None:
            return cls.SOURCE
        if isinstance(value, Language):
            return value
        key = str(value).strip().lower()
        if key in ("", "en", "source"):
            return cls.SOURCE
        if key == "kn":
            return cls.KANNADA
        raise InvalidInput(f"unsupported language: {value!r}")


class Localizer:
    """Attach translations to advisory items without ever failing the batch.

    Each item gets one translation attempt. Calls run concurrently and the
    whole batch waits at most ``timeout`` seconds; anything unfinished,
    raising or returning blank text leaves the item degraded with its
    English message intact.
    """

    def __init__(
        self,
        translator: Translator,
        *,
        timeout: float = 5.0,
        max_workers: int = 4,
        health: Optional[HealthRegistry] = None,
    ) -> None:
        self.translator = translator
        self.timeout = timeout
        self.max_workers = max_workers
        self.health = health or default_registry

    def localize(self, items: Sequence[AdvisoryItem], target_language: Language) -> List[AdvisoryItem]:
        target_language = Language.parse(target_language)
        if target_language is Language.SOURCE or not items:
            return list(items)

        executor = ThreadPoolExecutor(max_workers=min(self.max_workers, len(items)))
        try:
            futures = [
                executor.submit(self.translator.translate, item.message, target_language.value)
                for item in items
            ]
            wait(futures, timeout=self.timeout)
        finally:
            executor.shutdown(wait=False, cancel_futures=True)

        return [
            self._apply(item, future, target_language)
            for item, future in zip(items, futures)
        ]

    def _apply(self, item: AdvisoryItem, future: Future, language: Language) -> AdvisoryItem:
        translated = None
        if not future.done():
            logger.warning("Translation of %s timed out", item.rule_id)
        elif future.cancelled():
            logger.warning("Translation of %s was cancelled", item.rule_id)
        elif future.exception() is not None:
            logger.warning("Translation of %s failed: %s", item.rule_id, future.exception())
        else:
            translated = future.result()
            if not translated or not translated.strip():
                logger.warning("Translation of %s came back empty", item.rule_id)
                translated = None

        if translated is None:
            self.health.record_translation_failure(language.value)
            return replace(item, translated_message=None, translation_degraded=True)
        return replace(item, translated_message=translated, translation_degraded=False)


__all__ = ["Language", "Localizer"]
