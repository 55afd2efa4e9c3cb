"""Entry point for ``python -m confmigrate``."""

from confmigrate.cli.commands import app

if __name__ == "__main__":
    app()
