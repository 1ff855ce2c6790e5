from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional, Protocol

import requests
from requests import Response

from ..entities import WeatherObservation


class ProviderError(RuntimeError):
    """Base provider error."""


class QuotaExceeded(ProviderError):
    """Raised when a provider reports a quota/usage limit issue."""


class WeatherSource(Protocol):
    """A data source returning the latest reading for a normalized district."""

    name: str

    def get(self, district: str) -> Optional[WeatherObservation]:
        """Return an observation, or ``None`` when the district has no data."""
        ...


@dataclass
class RequestConfig:
    timeout: float = 5.0


class WeatherProvider:
    """Base class that adds timeouts and status handling for HTTP providers."""

    name = "http"

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        request_config: Optional[RequestConfig] = None,
    ) -> None:
        self.request_config = request_config or RequestConfig()
        self.session = session or requests.Session()
        self._log = logging.getLogger(self.__class__.__name__)

    def get(self, district: str) -> Optional[WeatherObservation]:
        raise NotImplementedError

    def _handle_response(self, response: Response) -> Response:
        if response.status_code == 429:
            self._log.warning("Quota exceeded: %s", response.text)
            raise QuotaExceeded("quota exceeded")
        if response.status_code >= 400:
            self._log.error("Provider returned %s: %s", response.status_code, response.text)
            raise ProviderError(f"HTTP {response.status_code}")
        return response

    def _request(self, method: str, url: str, **kwargs) -> Response:
        try:
            response = self.session.request(
                method,
                url,
                timeout=self.request_config.timeout,
                **kwargs,
            )
        except requests.Timeout as exc:
            self._log.error("Request timed out", exc_info=exc)
            raise ProviderError("timeout") from exc
        except requests.RequestException as exc:
            self._log.error("Request failed", exc_info=exc)
            raise ProviderError("request failed") from exc
        return self._handle_response(response)

    def _json(self, response: Response) -> dict:
        try:
            data = response.json()
        except ValueError as exc:
            self._log.error("Failed to decode JSON", exc_info=exc)
            raise ProviderError("invalid json") from exc
        if not isinstance(data, dict):
            raise ProviderError("unexpected payload")
        return data

    def _section(self, data: dict, key: str) -> dict:
        value = data.get(key)
        if value is None:
            return {}
        if not isinstance(value, dict):
            self._log.error("Expected an object for %r, got %s", key, type(value).__name__)
            raise ProviderError("unexpected payload")
        return value


def safe_float(value: Optional[object]) -> Optional[float]:
    if value is None:
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


__all__ = [
    "ProviderError",
    "QuotaExceeded",
    "RequestConfig",
    "WeatherProvider",
    "WeatherSource",
    "safe_float",
]
