"""Management command to build an advisory using the same stack as the API."""
from __future__ import annotations

import json
from typing import Any

from django.core.management.base import BaseCommand, CommandError

from advisory.errors import DataNotFound, InvalidInput, SourceUnavailable
from advisory.serializers import result_to_payload
from backend.api import views


class Command(BaseCommand):
    help = "Fetch weather and print the farming advisory for a district"

    def add_arguments(self, parser) -> None:  # noqa: D401
        parser.add_argument("--district", type=str, required=True, help="District name, e.g. Mysuru, or test for the offline stub")
        parser.add_argument("--language", type=str, default="en", help="en (default) or kn")

    def handle(self, *args: Any, **options: Any) -> None:  # noqa: D401
        district = options["district"]
        try:
            result = views.pipeline_for(district).get_advisory(district, options.get("language"))
        except InvalidInput as exc:
            raise CommandError(str(exc)) from exc
        except DataNotFound as exc:
            raise CommandError(f"No weather data for district {exc.district!r}") from exc
        except SourceUnavailable as exc:
            raise CommandError("Weather providers are unavailable, try again shortly") from exc

        self.stdout.write(json.dumps(result_to_payload(result), ensure_ascii=False))
