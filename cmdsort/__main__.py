"""Allow ``python -m cmdsort``."""

from cmdsort.cli import cli

if __name__ == "__main__":
    cli()
