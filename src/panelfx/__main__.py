"""Main entry point for ``python -m panelfx``."""

from panelfx.cli.main import cli

if __name__ == "__main__":
    cli()
