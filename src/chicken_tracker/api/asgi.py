"""ASGI entrypoint for the chicken tracker API."""

from chicken_tracker.api.app import create_app
from chicken_tracker.containers import build_container

app = create_app(build_container())
