"""ASGI entrypoint for the calorie journal API."""

from calorie_journal.api.app import create_app
from calorie_journal.containers import build_container

app = create_app(build_container())
