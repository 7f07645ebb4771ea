"""Allow running fstally as ``python -m fstally``."""

from fstally.cli.main import app

if __name__ == "__main__":
    app()
