"""CLI commands for scripture-reader."""

from scripture_reader.cli.content import app as main_app


def main() -> None:
    """Entry point for the CLI."""
    main_app()


__all__ = ["main", "main_app"]
