"""ASGI entrypoint for the smoke tracker API."""

from smoke_tracker.api.app import create_app
from smoke_tracker.containers import build_container

app = create_app(build_container())
