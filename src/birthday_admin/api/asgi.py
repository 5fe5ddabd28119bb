"""ASGI entrypoint for the birthday admin dashboard."""

from birthday_admin.api.app import create_app
from birthday_admin.containers import build_container

app = create_app(build_container())
