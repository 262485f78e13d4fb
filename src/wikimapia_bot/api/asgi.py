"""ASGI entrypoint for the Wikimapia bot webhook."""

from wikimapia_bot.api.app import create_app
from wikimapia_bot.containers import build_container

app = create_app(build_container())
