from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable, Iterable, List, Optional, Set

from .entities import AdvisoryItem, WeatherObservation
from .rules import DEFAULT_RULES, RULESET_VERSION, AdvisoryRule


def _utcnow() -> datetime:
    return datetime.now(tz=timezone.utc)


class AdvisoryEngine:
    """Evaluate an observation against a fixed rule table."""

    def __init__(
        self,
        rules: Optional[Iterable[AdvisoryRule]] = None,
        *,
        version: str = RULESET_VERSION,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self.rules = tuple(DEFAULT_RULES if rules is None else rules)
        self.version = version
        self._clock = clock
        self._log = logging.getLogger(self.__class__.__name__)
        seen: Set[str] = set()
        for rule in self.rules:
            if rule.id in seen:
                raise ValueError(f"duplicate advisory rule id: {rule.id}")
            seen.add(rule.id)

    def evaluate(self, observation: WeatherObservation) -> List[AdvisoryItem]:
        generated_at = self._clock()
        items: List[AdvisoryItem] = []
        fired: Set[str] = set()
        for rule in self.rules:
            if rule.id in fired or not rule.matches(observation):
                continue
            fired.add(rule.id)
            items.append(
                AdvisoryItem(
                    rule_id=rule.id,
                    category=rule.category,
                    severity=rule.severity,
                    message=rule.render(observation),
                    district=observation.district,
                    generated_at=generated_at,
                )
            )
        items.sort(key=AdvisoryItem.sort_key)
        self._log.debug(
            "Rule set %s produced %d advisories for %s", self.version, len(items), observation.district
        )
        return items


__all__ = ["AdvisoryEngine"]
