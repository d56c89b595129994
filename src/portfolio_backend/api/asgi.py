"""ASGI entrypoint for the portfolio backend API."""

from portfolio_backend.api.app import create_app
from portfolio_backend.containers import build_container

app = create_app(build_container())
