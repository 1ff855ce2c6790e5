"""REST API views for district advisories."""
from __future__ import annotations

import logging
from functools import lru_cache

from django.conf import settings
from django.core.cache import caches
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from advisory.config import AdvisoryConfig
from advisory.errors import DataNotFound, InvalidInput, SourceUnavailable
from advisory.health import default_registry
from advisory.serializers import result_to_payload
from advisory.providers.static import is_stub_district
from advisory.services.pipeline import AdvisoryPipeline, build_pipeline, build_stub_pipeline


logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_advisory_pipeline() -> AdvisoryPipeline:
    config = AdvisoryConfig.from_env()
    config.cache_ttl = settings.WEATHER_CACHE_TIMEOUT
    return build_pipeline(config, cache=caches[settings.WEATHER_CACHE_ALIAS])


def get_stub_pipeline() -> AdvisoryPipeline:
    return build_stub_pipeline()


def pipeline_for(district: str) -> AdvisoryPipeline:
    """Route the offline ``test`` district to the stub reading."""
    if is_stub_district(district):
        return get_stub_pipeline()
    return get_advisory_pipeline()


class AdvisoryView(APIView):
    """Weather snapshot plus prioritized advisories for one district."""

    permission_classes = [AllowAny]

    def get(self, request, district: str, *args, **kwargs):  # noqa: D401
        """Return the advisory payload for ``district``."""
        language = request.query_params.get("language")
        try:
            result = pipeline_for(district).get_advisory(district, language)
        except InvalidInput as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)
        except DataNotFound as exc:
            return Response(
                {"detail": "Weather advisory is unavailable for this area", "district": exc.district},
                status=status.HTTP_404_NOT_FOUND,
            )
        except SourceUnavailable as exc:
            logger.error("Advisory for %r failed: %s", district, exc)
            retry_after = settings.ADVISORY_RETRY_AFTER_SECONDS
            response = Response(
                {
                    "detail": "Weather service is temporarily unavailable, try again shortly",
                    "district": exc.district,
                    "retryable": True,
                },
                status=status.HTTP_503_SERVICE_UNAVAILABLE,
            )
            response["Retry-After"] = str(retry_after)
            return response
        return Response(result_to_payload(result), status=status.HTTP_200_OK)


class HealthView(APIView):
    """Provider error, translation failure and cache counters."""

    permission_classes = [AllowAny]

    def get(self, request, *args, **kwargs):
        return Response(default_registry.snapshot(), status=status.HTTP_200_OK)
