from __future__ import annotations

from pathlib import Path

from django.apps import AppConfig


class ApiConfig(AppConfig):
    name = "backend.api"
    label = "advisory_api"
    path = str(Path(__file__).resolve().parent)
