"""Top-level FastAPI entrypoint."""

from scripture_reader.api_factory import create_app

app = create_app()
