"""ASGI entrypoint for the menu ranker API."""

from menu_ranker.api.app import create_app
from menu_ranker.containers import build_container

app = create_app(build_container())
