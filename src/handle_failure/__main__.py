"""Entry point for ``python -m handle_failure``."""

from handle_failure.cli.app import app

if __name__ == "__main__":
    app()
