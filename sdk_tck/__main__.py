"""Allow `python -m sdk_tck`."""

from sdk_tck.cli.commands import app

if __name__ == "__main__":
    app()
